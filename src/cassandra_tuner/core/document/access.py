# src/cassandra_tuner/core/document/access.py
"""
Acessores tipados sobre a árvore do documento.

O documento carregado é uma árvore dinâmica (dict/list/escalares). As
regras de tuning nunca fazem cast implícito: todo acesso a uma
sub-estrutura passa por estes helpers, que falham com
`DocumentStructureError` nomeando o caminho e o shape esperado.

Limites explícitos:
    - Não criam sub-estruturas ausentes
    - Não convertem tipos
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..errors import DocumentStructureError

_MISSING = object()


def _shape(value: Any) -> str:
    if value is _MISSING:
        return "ausente"
    if isinstance(value, dict):
        return "mapping"
    if isinstance(value, list):
        return "sequence"
    if value is None:
        return "null"
    return f"scalar<{type(value).__name__}>"


def require_mapping(doc: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Retorna `doc[key]` exigindo que exista e seja mapeamento."""
    value = doc.get(key, _MISSING)
    if not isinstance(value, dict):
        raise DocumentStructureError(
            f"'{key}' deve existir e ser um mapeamento (encontrado: {_shape(value)})",
            key_path=key,
            expected="mapping",
            actual=_shape(value),
        )
    return value


def require_sequence(doc: Dict[str, Any], key: str) -> List[Any]:
    """Retorna `doc[key]` exigindo que exista e seja sequência."""
    value = doc.get(key, _MISSING)
    if not isinstance(value, list):
        raise DocumentStructureError(
            f"'{key}' deve existir e ser uma sequência (encontrado: {_shape(value)})",
            key_path=key,
            expected="sequence",
            actual=_shape(value),
        )
    return value


def require_first_mapping(doc: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Retorna a primeira entrada de `doc[key]`, exigindo sequência não vazia de mapeamentos."""
    seq = require_sequence(doc, key)
    if not seq:
        raise DocumentStructureError(
            f"'{key}' não pode ser uma sequência vazia",
            key_path=f"{key}[0]",
            expected="mapping",
            actual="ausente",
        )
    first = seq[0]
    if not isinstance(first, dict):
        raise DocumentStructureError(
            f"'{key}[0]' deve ser um mapeamento (encontrado: {_shape(first)})",
            key_path=f"{key}[0]",
            expected="mapping",
            actual=_shape(first),
        )
    return first


def get_scalar_text(doc: Dict[str, Any], key: str) -> str:
    """
    Lê um escalar como texto; chave ausente ou `null` viram "".

    Usado onde o valor existente só importa como string (ex.: partitioner).
    """
    value = doc.get(key)
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise DocumentStructureError(
            f"'{key}' deve ser escalar (encontrado: {_shape(value)})",
            key_path=key,
            expected="scalar",
            actual=_shape(value),
        )
    return str(value)
