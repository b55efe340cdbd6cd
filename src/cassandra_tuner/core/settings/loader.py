# src/cassandra_tuner/core/settings/loader.py
"""
Loader de settings do tuner.

Este módulo carrega os settings declarativos que alimentam a fonte de
configuração do tuner, a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

Responsabilidades do módulo:
    - Carregar arquivos de settings em YAML ou JSON
    - Validar o tipo raiz (mapeamento)
    - Resolver os settings efetivos via `deep_merge`

Invariantes:
    - O arquivo de defaults é obrigatório
    - O resultado é sempre um `dict`
    - Overrides nunca mutam os defaults

Limites explícitos:
    - Não valida nomes nem tipos de tunables (ver `TunerSettings.from_dict`)
    - Não lê o documento cassandra.yaml (ver `core.document.io`)
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json

import yaml  # PyYAML

from .merge import deep_merge
from .source import TunerSettings
from .errors import (
    DefaultsNotFoundError,
    InvalidSettingsRootTypeError,
    UnsupportedSettingsFormatError,
)


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de settings e valida sua estrutura básica.

    Arquivos vazios são interpretados como mapeamento vazio: um
    `local.yaml` sem overrides é válido.

    Raises:
        DefaultsNotFoundError: se o arquivo não existir.
        UnsupportedSettingsFormatError: se a extensão não for suportada.
        InvalidSettingsRootTypeError: se a raiz não for um mapeamento.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de settings não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedSettingsFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidSettingsRootTypeError(
            f"Settings root deve ser mapeamento, recebido: {type(data).__name__}"
        )

    return data


def load_settings_dict(
    *,
    defaults_path: Union[str, Path],
    local_path: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve os settings efetivos.

    Política de resolução:
        - defaults obrigatório
        - local opcional; um caminho informado mas inexistente é ignorado
        - quando presente, o local tem prioridade (deep-merge)

    Args:
        defaults_path: caminho do arquivo de defaults.
        local_path: caminho opcional do arquivo de overrides.

    Returns:
        Dict[str, Any]: settings efetivos.
    """
    effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return effective


def load_settings(
    defaults_path: Union[str, Path],
    local_path: Optional[Union[str, Path]] = None,
) -> TunerSettings:
    """Carrega os settings efetivos e os materializa em `TunerSettings`."""
    data = load_settings_dict(defaults_path=defaults_path, local_path=local_path)
    return TunerSettings.from_dict(data)
