# src/cassandra_tuner/core/engine/engine.py
"""
Engine de tuning do cassandra.yaml.

O engine aplica, em ordem fixa, a sequência de regras registradas a um
documento já carregado, mutando-o in-place.

Política de execução:
    - ordem = ordem de registro (não há planner: a ordem é política)
    - fail-fast: a primeira exceção interrompe a sequência
    - a exceção original é propagada ao chamador após o evento
      `rule_failed` ser registrado no contexto
    - nenhuma escrita em disco acontece aqui; o chamador só persiste
      após o engine terminar sem erro

Rastreabilidade:
    - `tuning_started` com o hash do documento de entrada
    - `rule_started` / `rule_finished` (com chaves e valores escritos)
    - `tuning_finished` com o hash final e o documento serializado
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..context import TuningContext
from ..document.hashing import compute_document_hash
from ..document.io import dump_document
from ..identity import NodeIdentity
from .registry import RuleRegistry
from .rule import TuningRule
from .types import RuleResult

ENGINE_ID = "engine"


@dataclass(frozen=True)
class TuningRun:
    """Resultado agregado de uma aplicação do engine."""

    results: List[RuleResult] = field(default_factory=list)
    hash_before: str = ""
    hash_after: str = ""

    @property
    def rule_ids(self) -> List[str]:
        return [r.rule_id for r in self.results]


class TuningEngine:
    """Executor ordenado de regras de tuning."""

    def __init__(self, *, rules: Sequence[TuningRule], ctx: TuningContext):
        self.registry = RuleRegistry.of(rules)
        self.ctx = ctx

    def run(self, doc: Dict[str, Any]) -> TuningRun:
        hash_before = compute_document_hash(doc)
        self.ctx.log(
            rule_id=ENGINE_ID,
            level="INFO",
            message="tuning started",
            event="tuning_started",
            document_hash=hash_before,
            rules=self.registry.ids(),
        )

        results: List[RuleResult] = []
        for rule in self.registry.list():
            self.ctx.log(rule_id=rule.id, level="DEBUG", message="rule started", event="rule_started")
            try:
                result = rule.apply(doc, self.ctx)
                if not isinstance(result, RuleResult):
                    raise TypeError(f"Rule.apply must return RuleResult (rule: {rule.id})")
            except Exception as e:
                self.ctx.log(
                    rule_id=rule.id,
                    level="ERROR",
                    message=str(e) or e.__class__.__name__,
                    event="rule_failed",
                    exception_class=e.__class__.__name__,
                )
                raise

            results.append(result)
            self.ctx.log(
                rule_id=rule.id,
                level="INFO",
                message=result.summary or "rule applied",
                event="rule_finished",
                changed=list(result.changed),
                values=dict(result.values),
            )

        hash_after = compute_document_hash(doc)
        self.ctx.log(
            rule_id=ENGINE_ID,
            level="INFO",
            message="tuning finished",
            event="tuning_finished",
            document_hash=hash_after,
            document=dump_document(doc),
        )
        return TuningRun(results=results, hash_before=hash_before, hash_after=hash_after)


def tune(
    doc: Dict[str, Any],
    *,
    source: Any,
    identity: NodeIdentity,
    ctx: Optional[TuningContext] = None,
    resolve_snitch: Optional[Callable[[str], str]] = None,
    rules: Optional[Sequence[TuningRule]] = None,
) -> Dict[str, Any]:
    """
    Aplica a política de merge completa ao documento e o retorna.

    O documento é mutado in-place; o retorno é o mesmo objeto.

    Args:
        doc: documento carregado.
        source: fonte de configuração (ConfigurationSource).
        identity: identidade do nó.
        ctx: contexto de log; criado quando omitido.
        resolve_snitch: especialização do snitch (default: identidade).
        rules: sequência alternativa de regras (default: `default_rules`).

    Raises:
        DocumentStructureError: sub-estrutura obrigatória ausente.
    """
    return run_tuning(
        doc,
        source=source,
        identity=identity,
        ctx=ctx,
        resolve_snitch=resolve_snitch,
        rules=rules,
    )[0]


def run_tuning(
    doc: Dict[str, Any],
    *,
    source: Any,
    identity: NodeIdentity,
    ctx: Optional[TuningContext] = None,
    resolve_snitch: Optional[Callable[[str], str]] = None,
    rules: Optional[Sequence[TuningRule]] = None,
) -> Tuple[Dict[str, Any], TuningRun]:
    """Variante de `tune` que também devolve o `TuningRun` para auditoria."""
    if ctx is None:
        ctx = TuningContext.create(source=source, identity=identity)
    else:
        ctx.source = source
        ctx.identity = identity

    if rules is None:
        from cassandra_tuner.rules import default_rules

        rules = default_rules(resolve_snitch=resolve_snitch)

    run = TuningEngine(rules=rules, ctx=ctx).run(doc)
    return doc, run
