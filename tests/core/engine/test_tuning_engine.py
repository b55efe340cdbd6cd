# tests/core/engine/test_tuning_engine.py
"""
Testes do engine de tuning (execução ordenada e fail-fast).

Este módulo valida que o `TuningEngine`:
- aplica as regras exatamente na ordem de registro
- registra eventos estruturados de início, fim e falha
- interrompe a sequência na primeira falha, propagando a exceção original
- registra hashes do documento antes e depois

Decisões arquiteturais:
    - Regras dummy mínimas isolam o engine das regras de domínio
    - A sequência padrão é exercitada apenas pela ordem dos ids

Limites explícitos:
    - Não valida a política de merge de cada regra (ver tests/rules)
    - Não escreve arquivos
"""

import pytest

try:
    from cassandra_tuner.core.engine.engine import TuningEngine, run_tuning, tune
    from cassandra_tuner.core.engine.rule import TuningRule
    from cassandra_tuner.core.engine.types import ChangeSet, RuleResult
    from cassandra_tuner.core.document.hashing import compute_document_hash
    from cassandra_tuner.core.errors import DocumentStructureError
except Exception as e:  # noqa: BLE001
    TuningEngine = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """Falha explicitamente se o engine de tuning não puder ser importado."""
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing tuning engine modules. Implement:\n"
            "- src/cassandra_tuner/core/engine/engine.py (TuningEngine, run_tuning, tune)\n"
            "- src/cassandra_tuner/core/engine/types.py (RuleResult, ChangeSet)\n"
            f"Import error: {_IMPORT_ERR}"
        )


class _SetRule:
    def __init__(self, rule_id, key, value, calls):
        self.id = rule_id
        self.key = key
        self.value = value
        self.calls = calls

    def apply(self, doc, ctx):
        self.calls.append(self.id)
        cs = ChangeSet(self.id)
        cs.put(doc, self.key, self.value)
        return cs.result(f"{self.key} set")


class _FailingRule:
    id = "dummy.failing"

    def __init__(self, calls):
        self.calls = calls

    def apply(self, doc, ctx):
        self.calls.append(self.id)
        raise DocumentStructureError("seed_provider missing", key_path="seed_provider")


class _BadReturnRule:
    id = "dummy.bad_return"

    def apply(self, doc, ctx):
        return {"not": "a result"}


EXPECTED_DEFAULT_ORDER = [
    "network.identity",
    "bootstrap.restore_guard",
    "storage.paths",
    "storage.incremental_backups",
    "topology.snitch",
    "resources.throughput",
    "partitioner.merge",
    "security.auth",
    "caches.global",
    "security.encryption",
    "topology.seed_provider",
    "topology.num_tokens",
]


def test_dummy_rules_conform_to_protocol():
    _require_imports()
    assert isinstance(_SetRule("a", "k", 1, []), TuningRule)


def test_rules_run_in_registration_order(ctx):
    """
    Verifica a ordem de aplicação e o log estruturado do caminho feliz.

    Invariantes:
        - a segunda regra sobrescreve a primeira na mesma chave
        - `tuning_started` e `tuning_finished` carregam os hashes
        - cada regra produz `rule_started` e `rule_finished`
    """
    _require_imports()
    calls = []
    doc = {"num_tokens": 256}
    hash_before = compute_document_hash(doc)

    engine = TuningEngine(
        rules=[
            _SetRule("first", "num_tokens", 8, calls),
            _SetRule("second", "num_tokens", 1, calls),
            _SetRule("third", "cluster_name", "x", calls),
        ],
        ctx=ctx,
    )
    run = engine.run(doc)

    assert calls == ["first", "second", "third"]
    assert run.rule_ids == ["first", "second", "third"]
    assert doc == {"num_tokens": 1, "cluster_name": "x"}
    assert run.hash_before == hash_before
    assert run.hash_after == compute_document_hash(doc)

    events = [e["event"] for e in ctx.events if "event" in e]
    assert events[0] == "tuning_started"
    assert events[-1] == "tuning_finished"
    assert events.count("rule_started") == 3
    assert events.count("rule_finished") == 3

    started = ctx.events_for("engine")[0]
    assert started["rules"] == ["first", "second", "third"]
    assert started["document_hash"] == hash_before

    finished = ctx.events_for("engine")[-1]
    assert finished["document_hash"] == run.hash_after
    assert "cluster_name: x" in finished["document"]

    second_finished = [e for e in ctx.events_for("second") if e.get("event") == "rule_finished"][0]
    assert second_finished["changed"] == ["num_tokens"]
    assert second_finished["values"] == {"num_tokens": 1}


def test_fail_fast_stops_sequence_and_propagates(ctx):
    """
    Verifica o comportamento fail-fast.

    Invariantes:
        - a exceção original é propagada sem embrulho
        - regras posteriores não são executadas
        - `rule_failed` é registrado com a classe da exceção
        - `tuning_finished` não é registrado
    """
    _require_imports()
    calls = []
    engine = TuningEngine(
        rules=[
            _SetRule("first", "a", 1, calls),
            _FailingRule(calls),
            _SetRule("never", "b", 2, calls),
        ],
        ctx=ctx,
    )

    with pytest.raises(DocumentStructureError) as excinfo:
        engine.run({})

    assert excinfo.value.key_path == "seed_provider"
    assert calls == ["first", "dummy.failing"]

    failed = [e for e in ctx.events if e.get("event") == "rule_failed"]
    assert len(failed) == 1
    assert failed[0]["rule_id"] == "dummy.failing"
    assert failed[0]["level"] == "ERROR"
    assert failed[0]["exception_class"] == "DocumentStructureError"
    assert not [e for e in ctx.events if e.get("event") == "tuning_finished"]


def test_non_result_return_is_type_error(ctx):
    _require_imports()
    engine = TuningEngine(rules=[_BadReturnRule()], ctx=ctx)
    with pytest.raises(TypeError):
        engine.run({})
    failed = [e for e in ctx.events if e.get("event") == "rule_failed"]
    assert failed[0]["exception_class"] == "TypeError"


def test_run_tuning_uses_default_rule_order(stock_document_yaml, settings, identity, make_ctx):
    _require_imports()
    import yaml

    doc = yaml.safe_load(stock_document_yaml)
    ctx = make_ctx()
    out, run = run_tuning(doc, source=settings, identity=identity, ctx=ctx)

    assert out is doc
    assert run.rule_ids == EXPECTED_DEFAULT_ORDER
    assert ctx.source is settings
    assert ctx.identity is identity


def test_tune_returns_mutated_document(stock_document_yaml, settings, identity):
    _require_imports()
    import yaml

    doc = yaml.safe_load(stock_document_yaml)
    out = tune(doc, source=settings, identity=identity)

    assert out is doc
    assert doc["num_tokens"] == 1
    assert doc["listen_address"] == identity.host_address


def test_tune_accepts_custom_rule_sequence(settings, identity):
    _require_imports()
    calls = []
    doc = {}
    tune(doc, source=settings, identity=identity, rules=[_SetRule("only", "k", "v", calls)])
    assert doc == {"k": "v"}
    assert calls == ["only"]
