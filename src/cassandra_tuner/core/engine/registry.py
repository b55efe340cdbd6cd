# src/cassandra_tuner/core/engine/registry.py
"""
Registro ordenado de regras de tuning.

O `RuleRegistry` valida a integridade da sequência de regras antes da
execução:
    - cada regra possui um identificador válido
    - não existem identificadores duplicados
    - a ordem de registro é preservada (é a ordem de aplicação)

Limites explícitos:
    - Não reordena regras; a ordem é parte da política de merge
    - Não executa regras
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .rule import TuningRule


class DuplicateRuleIdError(ValueError):
    """
    Duas regras registradas com o mesmo `id`.

    Tratado como erro de montagem do tuner, detectado antes de qualquer
    leitura do documento.
    """


@dataclass
class RuleRegistry:
    """Registro de regras que preserva a ordem de inserção."""

    _rules: Dict[str, TuningRule] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def of(cls, rules: Iterable[TuningRule]) -> "RuleRegistry":
        reg = cls()
        for rule in rules:
            reg.add(rule)
        return reg

    def add(self, rule: TuningRule) -> None:
        rule_id = getattr(rule, "id", None)
        if not isinstance(rule_id, str) or not rule_id.strip():
            raise ValueError("rule.id must be a non-empty string")

        if rule_id in self._rules:
            raise DuplicateRuleIdError(f"Duplicate rule id: {rule_id}")

        self._rules[rule_id] = rule
        self._order.append(rule_id)

    def get(self, rule_id: str) -> TuningRule:
        return self._rules[rule_id]

    def ids(self) -> List[str]:
        return list(self._order)

    def list(self) -> List[TuningRule]:
        return [self._rules[rid] for rid in self._order]
