# src/cassandra_tuner/rules/resources.py
"""Regra: resources.throughput (escalares de compaction, memtable, hints e concorrência)."""

from __future__ import annotations

from typing import Any, Dict, Tuple

from cassandra_tuner.core.context import TuningContext
from cassandra_tuner.core.engine.types import ChangeSet, RuleResult

# chave do documento -> atributo da fonte, na ordem de escrita
RESOURCE_KEYS: Tuple[Tuple[str, str], ...] = (
    ("in_memory_compaction_limit_in_mb", "in_memory_compaction_limit_mb"),
    ("compaction_throughput_mb_per_sec", "compaction_throughput_mb"),
    ("memtable_total_space_in_mb", "memtable_total_space_mb"),
    ("stream_throughput_outbound_megabits_per_sec", "streaming_throughput_mb"),
    ("multithreaded_compaction", "multithreaded_compaction"),
    ("max_hint_window_in_ms", "max_hint_window_in_ms"),
    ("hinted_handoff_throttle_in_kb", "hinted_handoff_throttle_kb"),
    ("concurrent_reads", "concurrent_reads"),
    ("concurrent_writes", "concurrent_writes"),
    ("concurrent_compactors", "concurrent_compactors"),
)


class ResourceTuningRule:
    id = "resources.throughput"

    def apply(self, doc: Dict[str, Any], ctx: TuningContext) -> RuleResult:
        cs = ChangeSet(self.id)
        for key, attr in RESOURCE_KEYS:
            cs.put(doc, key, getattr(ctx.source, attr))
        return cs.result()
