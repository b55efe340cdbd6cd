# src/cassandra_tuner/core/document/__init__.py
"""
Documento de configuração do nó (cassandra.yaml).

Componentes:
    - io       → load/dump/write determinísticos e atômicos
    - access   → acessores tipados com falha explícita de shape
    - hashing  → identidade estrutural para auditoria

O documento é sempre uma árvore Python pura: `dict` com ordem de
inserção, `list` e escalares. Nenhuma classe wrapper é introduzida.
"""

from .access import get_scalar_text, require_first_mapping, require_mapping, require_sequence
from .hashing import compute_document_hash
from .io import atomic_write_text, dump_document, load_document, write_document

__all__ = [
    "atomic_write_text",
    "compute_document_hash",
    "dump_document",
    "get_scalar_text",
    "load_document",
    "require_first_mapping",
    "require_mapping",
    "require_sequence",
    "write_document",
]
