# src/cassandra_tuner/core/engine/types.py
"""
Tipos canônicos do engine de tuning.

Componentes principais:
    - RuleResult → resultado imutável da aplicação de uma regra

Invariantes:
    - RuleResult é imutável
    - `changed` lista, na ordem de escrita, os caminhos de chave gravados
      (ex.: "client_encryption_options.enabled")

Limites explícitos:
    - Não aplica regras
    - Não registra eventos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class RuleResult:
    """
    Resultado imutável da aplicação de uma regra ao documento.

    Campos:
        - rule_id: identificador da regra
        - changed: caminhos de chave efetivamente escritos
        - summary: resumo textual curto
        - values: valores escritos, indexados pelo caminho (para auditoria)
    """
    rule_id: str
    changed: Tuple[str, ...] = ()
    summary: str = ""
    values: Dict[str, Any] = field(default_factory=dict)


class ChangeSet:
    """Acumula escritas de uma regra para produzir o `RuleResult`."""

    def __init__(self, rule_id: str):
        self.rule_id = rule_id
        self._paths: List[str] = []
        self._values: Dict[str, Any] = {}

    def put(self, target: Dict[str, Any], key: str, value: Any, *, path: str = "") -> None:
        target[key] = value
        full = f"{path}.{key}" if path else key
        if full not in self._values:
            self._paths.append(full)
        self._values[full] = value

    def result(self, summary: str = "") -> RuleResult:
        return RuleResult(
            rule_id=self.rule_id,
            changed=tuple(self._paths),
            summary=summary,
            values=dict(self._values),
        )
