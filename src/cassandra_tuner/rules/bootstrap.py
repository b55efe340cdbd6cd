# src/cassandra_tuner/rules/bootstrap.py
"""
Regra: bootstrap.restore_guard

Um nó em modo restore nunca deve tentar um bootstrap de join no
cluster: `auto_bootstrap` é forçado para a negação do predicado de
restore, independentemente de qualquer valor presente no documento.

Predicado de restore:
    - se a fonte expõe `is_restore_enabled()`, ele é usado
    - caso contrário: snapshot de restore configurado (não vazio) E
      rac elegível para backup (sem lista de racs, ou rac na lista)
"""

from __future__ import annotations

from typing import Any, Dict

from cassandra_tuner.core.context import TuningContext
from cassandra_tuner.core.engine.types import ChangeSet, RuleResult


def is_backup_rac(source: Any) -> bool:
    racs = tuple(getattr(source, "backup_racs", ()) or ())
    return not racs or getattr(source, "rac", "") in racs


def is_restore_enabled(source: Any) -> bool:
    predicate = getattr(source, "is_restore_enabled", None)
    if callable(predicate):
        return bool(predicate())

    snapshot = getattr(source, "restore_snapshot", "") or ""
    return bool(snapshot.strip()) and is_backup_rac(source)


class RestoreGuardRule:
    id = "bootstrap.restore_guard"

    def apply(self, doc: Dict[str, Any], ctx: TuningContext) -> RuleResult:
        restoring = is_restore_enabled(ctx.source)

        cs = ChangeSet(self.id)
        cs.put(doc, "auto_bootstrap", not restoring)
        summary = "restore mode active, bootstrap suppressed" if restoring else "auto_bootstrap enabled"
        return cs.result(summary)
