# tests/core/document/test_document_io.py
"""
Testes do loader/writer do documento de configuração.

Os testes asseguram que:
- o documento é lido como árvore Python com raiz mapeamento
- a escrita é determinística (block style, ordem de inserção)
- load → write → load preserva a árvore
- falhas de leitura viram `DocumentParseError`
- falhas de escrita viram `TunerIOError` sem corromper o alvo

Decisões arquiteturais:
    - Escrita atômica via temporário + `os.replace`
    - Documento vazio é erro de parse

Limites explícitos:
    - Não aplica regras de tuning
"""

import os
import stat
import sys
from pathlib import Path

import pytest

try:
    from cassandra_tuner.core.document.io import (
        atomic_write_text,
        dump_document,
        load_document,
        write_document,
    )
    from cassandra_tuner.core.errors import (
        DocumentParseError,
        DocumentStructureError,
        TunerIOError,
    )
except Exception as e:  # noqa: BLE001
    load_document = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """Falha explicitamente se o módulo de I/O do documento não puder ser importado."""
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing document io module. Implement:\n"
            "- src/cassandra_tuner/core/document/io.py\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_load_returns_mapping_in_file_order(document_path: Path):
    _require_imports()
    doc = load_document(document_path)

    assert isinstance(doc, dict)
    keys = list(doc)
    assert keys[0] == "cluster_name"
    assert keys.index("partitioner") < keys.index("seed_provider")
    assert doc["seed_provider"][0]["parameters"][0]["seeds"] == "127.0.0.1"
    assert doc["key_cache_size_in_mb"] is None


def test_round_trip_preserves_tree(document_path: Path, tmp_path: Path):
    """
    Verifica que reescrever o documento sem mudanças preserva a árvore.

    Invariantes:
        - Chaves não tocadas mantêm valor e posição
        - Uma segunda reescrita é byte-idêntica à primeira
    """
    _require_imports()
    original = load_document(document_path)

    out = tmp_path / "out.yaml"
    first = write_document(out, original)
    reloaded = load_document(out)
    assert reloaded == original
    assert list(reloaded) == list(original)

    second = write_document(out, reloaded)
    assert first == second
    assert out.read_text(encoding="utf-8") == second


def test_dump_uses_block_style_without_sorting():
    _require_imports()
    text = dump_document({"z": 1, "a": {"list": [1, 2]}, "m": "é"})

    assert text.splitlines()[0] == "z: 1"
    assert "a:\n  list:\n  - 1\n  - 2\n" in text
    assert "{" not in text
    assert "é" in text


def test_dump_rejects_unserializable_values():
    _require_imports()
    with pytest.raises(DocumentStructureError):
        dump_document({"bad": object()})


def test_missing_document_raises_parse_error(tmp_path: Path):
    _require_imports()
    missing = tmp_path / "cassandra.yaml"
    with pytest.raises(DocumentParseError) as excinfo:
        load_document(missing)
    assert excinfo.value.path == str(missing)


@pytest.mark.parametrize(
    "content",
    [
        "",
        "# only a comment\n",
        "- a\n- b\n",
        "just a scalar\n",
        "key: [unclosed\n",
        "a: 1\n  b: 2\n",
    ],
)
def test_malformed_documents_raise_parse_error(tmp_path: Path, content: str):
    _require_imports()
    path = tmp_path / "cassandra.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(DocumentParseError):
        load_document(path)


def test_write_failure_leaves_target_untouched(document_path: Path, monkeypatch):
    """
    Verifica a atomicidade da escrita.

    Uma falha no rename final é convertida em `TunerIOError`; o alvo
    mantém o conteúdo anterior e nenhum temporário sobra no diretório.
    """
    _require_imports()
    before = document_path.read_text(encoding="utf-8")

    def _fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", _fail_replace)

    with pytest.raises(TunerIOError) as excinfo:
        write_document(document_path, {"cluster_name": "new"})

    assert excinfo.value.path == str(document_path)
    assert isinstance(excinfo.value.__cause__, OSError)
    assert document_path.read_text(encoding="utf-8") == before
    assert sorted(p.name for p in document_path.parent.iterdir()) == ["cassandra.yaml"]


def test_write_into_missing_directory_raises_io_error(tmp_path: Path):
    _require_imports()
    with pytest.raises(TunerIOError):
        atomic_write_text(tmp_path / "nope" / "cassandra.yaml", "a: 1\n")


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX file modes")
def test_write_preserves_file_mode(document_path: Path):
    _require_imports()
    os.chmod(document_path, 0o640)

    write_document(document_path, load_document(document_path))

    assert stat.S_IMODE(document_path.stat().st_mode) == 0o640


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX symlinks")
def test_write_through_symlink_updates_real_file(tmp_path: Path, stock_document_yaml: str):
    """
    Verifica a escrita sobre um cassandra.yaml que é symlink.

    Invariantes:
        - o link continua sendo link, apontando para o mesmo alvo
        - o arquivo real recebe o novo conteúdo
        - nenhum temporário sobra em nenhum dos dois diretórios
    """
    _require_imports()
    real_dir = tmp_path / "real"
    real_dir.mkdir()
    real = real_dir / "cassandra.yaml"
    real.write_text(stock_document_yaml, encoding="utf-8")
    link = tmp_path / "cassandra.yaml"
    link.symlink_to(real)

    doc = load_document(link)
    doc["num_tokens"] = 1
    write_document(link, doc)

    assert link.is_symlink()
    assert os.path.realpath(link) == os.path.realpath(real)
    assert load_document(real)["num_tokens"] == 1
    assert sorted(p.name for p in real_dir.iterdir()) == ["cassandra.yaml"]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["cassandra.yaml", "real"]


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX symlinks")
def test_tune_configuration_through_symlink(tmp_path: Path, stock_document_yaml: str, settings, identity):
    _require_imports()
    from cassandra_tuner.api import tune_configuration

    real_dir = tmp_path / "real"
    real_dir.mkdir()
    real = real_dir / "cassandra.yaml"
    real.write_text(stock_document_yaml, encoding="utf-8")
    link = tmp_path / "cassandra.yaml"
    link.symlink_to(real)

    tune_configuration(
        link,
        identity.host_address,
        identity.seed_provider_class_name,
        source=settings,
    )

    assert link.is_symlink()
    tuned = load_document(real)
    assert tuned["listen_address"] == identity.host_address
    assert tuned["num_tokens"] == 1
