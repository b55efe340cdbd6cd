# src/cassandra_tuner/core/settings/merge.py
"""
Deep-merge de settings (defaults + overrides locais).

Política de merge:
    - mapeamento + mapeamento → merge recursivo por chave
    - override `None`          → ausência explícita: a chave é removida
    - lista                    → sobrescrita total
    - escalar                  → sobrescrita direta
    - mapeamento vs. não-mapeamento → `SettingsTypeConflictError`

A regra de `None` existe porque vários tunables são opcionais
(ex.: `key_cache_size_in_mb`) e a ausência precisa ser distinguível de
string vazia: um `local.yaml` com `key_cache_size_in_mb: null` desliga
um valor vindo dos defaults.

Invariantes:
    - Nenhum input é mutado
    - Chaves não presentes no override são preservadas da base
    - Escalares de tipos diferentes (ex.: int vs. str) são aceitos: a
      coerção é responsabilidade de `TunerSettings.from_dict`
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import SettingsTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any], *, _path: str = "") -> Dict[str, Any]:
    """
    Mescla `override` sobre `base` produzindo um novo dicionário.

    Args:
        base: settings de defaults.
        override: settings locais do operador.

    Returns:
        Dict[str, Any]: settings efetivos.

    Raises:
        SettingsTypeConflictError: se um mapeamento colidir com um
        não-mapeamento na mesma chave.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise SettingsTypeConflictError(
            f"Deep-merge requer mapeamentos em '{_path or '<root>'}', recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    merged: Dict[str, Any] = deepcopy(base)

    for key, value in override.items():
        where = f"{_path}.{key}" if _path else str(key)

        if value is None:
            merged.pop(key, None)
            continue

        if key not in merged:
            merged[key] = deepcopy(value)
            continue

        current = merged[key]
        if isinstance(current, dict) or isinstance(value, dict):
            if not (isinstance(current, dict) and isinstance(value, dict)):
                raise SettingsTypeConflictError(
                    f"Conflito de tipo na chave '{where}': "
                    f"{type(current).__name__} vs {type(value).__name__}"
                )
            merged[key] = deep_merge(current, value, _path=where)
            continue

        merged[key] = deepcopy(value)

    return merged
