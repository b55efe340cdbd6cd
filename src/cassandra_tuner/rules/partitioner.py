# src/cassandra_tuner/rules/partitioner.py
"""
Regra: partitioner.merge

Trocar o partitioner de um nó já bootstrapado é destrutivo: os dados
existentes deixam de ser localizáveis. A política abaixo só permite
reafirmar as duas estratégias padrão conhecidas.

Política (`resolve_partitioner(existing, desired)`):
    - existente ausente ou vazio → desejado
    - existente contém "randomparti" ou "murmur" (case-insensitive)
      → desejado (a intenção declarada do operador prevalece para as
      estratégias padrão)
    - qualquer outro valor → existente, sem alteração

Quando o valor existente é preservado, um warning é registrado no
contexto, pois o valor desejado foi deliberadamente ignorado.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from cassandra_tuner.core.context import TuningContext
from cassandra_tuner.core.document.access import get_scalar_text
from cassandra_tuner.core.engine.types import ChangeSet, RuleResult

KNOWN_PARTITIONER_MARKERS = ("randomparti", "murmur")


def resolve_partitioner(existing: Optional[str], desired: str) -> str:
    if not existing:
        return desired

    lowered = existing.lower()
    if any(marker in lowered for marker in KNOWN_PARTITIONER_MARKERS):
        return desired

    return existing


class PartitionerRule:
    id = "partitioner.merge"

    def apply(self, doc: Dict[str, Any], ctx: TuningContext) -> RuleResult:
        existing = get_scalar_text(doc, "partitioner")
        desired = ctx.source.partitioner
        chosen = resolve_partitioner(existing, desired)

        cs = ChangeSet(self.id)
        if chosen == existing and existing != desired:
            ctx.add_warning(
                rule_id=self.id,
                message=f"keeping existing partitioner {existing}, ignoring configured {desired}",
            )
            # o tipo original do escalar é preservado
            return cs.result(f"existing partitioner {existing} preserved")

        cs.put(doc, "partitioner", chosen)
        return cs.result(f"partitioner {chosen}")
