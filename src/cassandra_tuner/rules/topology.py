# src/cassandra_tuner/rules/topology.py
"""
Regras de topologia.

topology.snitch
    `endpoint_snitch` recebe o snitch da fonte, passado por uma função de
    especialização `resolve_snitch(base) -> value`. Uma implantação pode,
    por exemplo, envolver o snitch base num snitch composto ou dinâmico.
    Sem especialização, o valor base é usado tal como está.

topology.seed_provider
    `seed_provider[0].class_name` recebe `identity.seed_provider_class_name`.
    A sequência e sua primeira entrada precisam existir; parâmetros e
    demais chaves da entrada são preservados.

topology.num_tokens
    `num_tokens` forçado para 1: vnodes não são suportados nesta camada.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from cassandra_tuner.core.context import TuningContext
from cassandra_tuner.core.document.access import require_first_mapping
from cassandra_tuner.core.engine.types import ChangeSet, RuleResult

SnitchResolver = Callable[[str], str]


def base_snitch(value: str) -> str:
    return value


class SnitchRule:
    id = "topology.snitch"

    def __init__(self, resolve_snitch: Optional[SnitchResolver] = None):
        self.resolve_snitch: SnitchResolver = resolve_snitch or base_snitch

    def apply(self, doc: Dict[str, Any], ctx: TuningContext) -> RuleResult:
        base = ctx.source.snitch
        snitch = self.resolve_snitch(base)

        cs = ChangeSet(self.id)
        cs.put(doc, "endpoint_snitch", snitch)
        if snitch != base:
            return cs.result(f"snitch {base} wrapped as {snitch}")
        return cs.result(f"snitch {snitch}")


class SeedProviderRule:
    id = "topology.seed_provider"

    def apply(self, doc: Dict[str, Any], ctx: TuningContext) -> RuleResult:
        entry = require_first_mapping(doc, "seed_provider")

        cs = ChangeSet(self.id)
        cs.put(entry, "class_name", ctx.identity.seed_provider_class_name, path="seed_provider[0]")
        return cs.result()


class NumTokensRule:
    id = "topology.num_tokens"

    def apply(self, doc: Dict[str, Any], ctx: TuningContext) -> RuleResult:
        cs = ChangeSet(self.id)
        cs.put(doc, "num_tokens", 1)
        return cs.result("vnodes disabled")
