# src/cassandra_tuner/core/document/io.py
"""
Loader/Writer canônico do documento de configuração do nó.

Este módulo lê o cassandra.yaml existente para uma árvore Python
ordenada (dict/list/escalares) e a serializa de volta de forma
determinística.

Política de serialização:
    - YAML em block style (sem colapso em flow style)
    - Ordem de inserção das chaves preservada (`sort_keys=False`)
    - Unicode preservado

Decisões arquiteturais:
    - A escrita é atômica: arquivo temporário no mesmo diretório,
      `fsync` e `os.replace` sobre o alvo
    - A serialização acontece antes de tocar no disco; um documento não
      serializável nunca produz escrita parcial
    - As permissões do arquivo original são preservadas
    - Symlinks são seguidos: o arquivo real é substituído, o link não

Invariantes:
    - `load_document(p)` após `write_document(p, load_document(p))`
      retorna uma árvore igual à original
    - Chaves não tocadas mantêm valor e posição

Limites explícitos:
    - Não aplica regras de tuning
    - Não cria documentos do zero: documento vazio é erro de parse
    - Não implementa lock entre processos
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict, Union

import yaml  # PyYAML

from ..errors import DocumentParseError, DocumentStructureError, TunerIOError


def load_document(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Carrega o documento de configuração do nó.

    Args:
        path: caminho do cassandra.yaml.

    Returns:
        Dict[str, Any]: árvore do documento (raiz sempre mapeamento).

    Raises:
        DocumentParseError: arquivo ausente, ilegível, YAML malformado,
        vazio ou com raiz que não é mapeamento.
    """
    doc_path = Path(path)
    if not doc_path.is_file():
        raise DocumentParseError(f"Documento não encontrado: {doc_path}", path=str(doc_path))

    try:
        with doc_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DocumentParseError(f"YAML malformado em {doc_path}: {e}", path=str(doc_path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentParseError(f"Documento ilegível: {doc_path}: {e}", path=str(doc_path)) from e

    if data is None:
        raise DocumentParseError(f"Documento vazio: {doc_path}", path=str(doc_path))

    if not isinstance(data, dict):
        raise DocumentParseError(
            f"Raiz do documento deve ser mapeamento, recebido: {type(data).__name__}",
            path=str(doc_path),
        )

    return data


def dump_document(doc: Dict[str, Any]) -> str:
    """Serializa o documento em YAML block style, preservando a ordem das chaves."""
    try:
        return yaml.safe_dump(
            doc,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        raise DocumentStructureError(
            f"Documento contém valor não serializável: {e}",
            key_path="<root>",
        ) from e


def atomic_write_text(path: Union[str, Path], text: str) -> None:
    """
    Escreve `text` em `path` via arquivo temporário + rename.

    Um `path` que é symlink é resolvido antes: o temporário e o rename
    acontecem ao lado do arquivo real, e o link permanece intacto.

    Raises:
        TunerIOError: falha ao criar, escrever ou renomear o temporário.
    """
    target = Path(os.path.realpath(path))
    tmp_name = None
    try:
        mode = stat.S_IMODE(target.stat().st_mode) if target.exists() else None

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.",
            suffix=".tmp",
            dir=str(target.parent),
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())

        if mode is not None:
            os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as e:
        raise TunerIOError(f"Falha ao escrever {path}: {e}", path=str(Path(path))) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)


def write_document(path: Union[str, Path], doc: Dict[str, Any]) -> str:
    """
    Persiste o documento de forma atômica.

    Returns:
        str: o YAML efetivamente escrito (útil para auditoria).

    Raises:
        DocumentStructureError: documento não serializável (nada é escrito).
        TunerIOError: falha de escrita (o alvo permanece intacto).
    """
    text = dump_document(doc)
    atomic_write_text(path, text)
    return text
