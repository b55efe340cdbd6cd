# src/cassandra_tuner/rules/caches.py
"""
Regra: caches.global

Dimensiona os caches globais (key cache e row cache) apenas quando a
fonte fornece os valores.

Política, para cada cache:
    - tamanho ausente → nenhuma das duas chaves é tocada; valores já
      presentes no documento permanecem
    - tamanho presente e inteiro → `<cache>_cache_size_in_mb` é escrito
    - somente se o tamanho foi escrito: contagem de chaves presente e
      inteira → `<cache>_cache_keys_to_save` é escrito
    - valor presente mas não inteiro → tratado como não fornecido, com
      warning no contexto
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from cassandra_tuner.core.context import TuningContext
from cassandra_tuner.core.engine.types import ChangeSet, RuleResult

CACHE_KINDS = ("key", "row")


def parse_cache_value(raw: Any) -> Optional[int]:
    """Converte um valor da fonte para inteiro; `None` se ausente ou não inteiro."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


class GlobalCachesRule:
    id = "caches.global"

    def _read(self, ctx: TuningContext, attr: str) -> Optional[int]:
        raw = getattr(ctx.source, attr, None)
        value = parse_cache_value(raw)
        if raw is not None and value is None:
            ctx.add_warning(rule_id=self.id, message=f"ignoring non-integer {attr}={raw!r}")
        return value

    def apply(self, doc: Dict[str, Any], ctx: TuningContext) -> RuleResult:
        cs = ChangeSet(self.id)

        for kind in CACHE_KINDS:
            size = self._read(ctx, f"{kind}_cache_size_in_mb")
            if size is None:
                continue
            cs.put(doc, f"{kind}_cache_size_in_mb", size)

            keys_to_save = self._read(ctx, f"{kind}_cache_keys_to_save")
            if keys_to_save is not None:
                cs.put(doc, f"{kind}_cache_keys_to_save", keys_to_save)

        result = cs.result()
        if not result.changed:
            return cs.result("cache sizes not configured, document values kept")
        return result
