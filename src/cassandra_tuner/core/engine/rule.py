# src/cassandra_tuner/core/engine/rule.py
"""
Contrato mínimo de uma regra de tuning.

Uma regra representa um passo atômico da política de merge do
cassandra.yaml: lê a fonte de configuração e a identidade do nó pelo
`TuningContext` e muta o documento in-place.

Decisões arquiteturais:
    - Regras não conhecem o engine nem a ordem de execução
    - O protocolo não impõe herança, apenas conformidade estrutural
    - Regras propagam `DocumentStructureError`; nunca a engolem

Invariantes:
    - `id` é único no registry
    - `apply` é executado no máximo uma vez por invocação
    - O retorno de `apply` é sempre um `RuleResult`
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable

from ..context import TuningContext
from .types import RuleResult


@runtime_checkable
class TuningRule(Protocol):
    """Contrato canônico de uma regra de tuning."""

    id: str

    def apply(self, doc: Dict[str, Any], ctx: TuningContext) -> RuleResult:
        """Aplica a regra ao documento usando exclusivamente o contexto."""
        ...
