# src/cassandra_tuner/rules/storage.py
"""
Regras de storage.

storage.paths
    saved_caches_directory, commitlog_directory e data_file_directories.
    `data_file_directories` é sempre uma sequência, mesmo quando a fonte
    fornece um único caminho. Sem nenhum caminho não vazio, a chave não
    é tocada e um warning é registrado.

storage.incremental_backups
    `incremental_backups` é verdadeiro se e somente se:
        backup_hour >= 0
        E incremental_backup solicitado
        E (sem lista de racs de backup OU rac do nó na lista)
    Ausência de restrição de racs vale para todos os racs.
"""

from __future__ import annotations

from typing import Any, Dict, List

from cassandra_tuner.core.context import TuningContext
from cassandra_tuner.core.engine.types import ChangeSet, RuleResult

from .bootstrap import is_backup_rac


def _as_directory_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    return [str(v) for v in value if str(v).strip()]


class StoragePathsRule:
    id = "storage.paths"

    def apply(self, doc: Dict[str, Any], ctx: TuningContext) -> RuleResult:
        source = ctx.source
        data_dirs = _as_directory_list(source.data_file_locations)

        cs = ChangeSet(self.id)
        cs.put(doc, "saved_caches_directory", source.cache_location)
        cs.put(doc, "commitlog_directory", source.commit_log_location)
        if not data_dirs:
            ctx.add_warning(
                rule_id=self.id,
                message="no data file locations configured, keeping data_file_directories",
            )
            return cs.result("data directories kept")

        cs.put(doc, "data_file_directories", data_dirs)
        return cs.result(f"{len(data_dirs)} data directories")


def incremental_backups_enabled(source: Any) -> bool:
    return source.backup_hour >= 0 and bool(source.incremental_backup) and is_backup_rac(source)


class IncrementalBackupsRule:
    id = "storage.incremental_backups"

    def apply(self, doc: Dict[str, Any], ctx: TuningContext) -> RuleResult:
        enabled = incremental_backups_enabled(ctx.source)

        cs = ChangeSet(self.id)
        cs.put(doc, "incremental_backups", enabled)
        return cs.result("incremental backups " + ("enabled" if enabled else "disabled"))
