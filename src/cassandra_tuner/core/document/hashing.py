# src/cassandra_tuner/core/document/hashing.py
"""
Hashing canônico do documento de configuração.

O hash representa a **identidade estrutural** do documento e é
registrado no log do tuner antes e depois da aplicação das regras,
permitindo auditar se uma invocação alterou ou não o cassandra.yaml.

Política de hashing:
    - Chaves de mapeamento normalizadas para texto (o YAML admite chaves
      int, bool ou null misturadas com strings)
    - Serialização JSON canônica (`sort_keys=True`, separadores compactos)
    - Codificação UTF-8
    - SHA-256

Invariantes:
    - Documentos estruturalmente iguais produzem o mesmo hash
    - O valor é uma string hexadecimal de 64 caracteres
    - O input não é mutado

Limites explícitos:
    - A ordem das chaves não participa do hash; a estabilidade da ordem
      é garantida pelo writer, não por este módulo
    - Chaves distintas com o mesmo texto (ex.: `1` e `"1"`) colidem no
      hash; o writer continua distinguindo-as
"""


import json
import hashlib
from typing import Any, Dict


def _canonical(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k): _canonical(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_canonical(v) for v in value]
    return value


def compute_document_hash(doc: Dict[str, Any]) -> str:
    """
    Gera o hash SHA-256 do documento em JSON canônico.

    Valores não representáveis em JSON (ex.: datas lidas do YAML) são
    convertidos com `str()`.

    Raises:
        TypeError: se `doc` não for um dicionário.
    """
    if not isinstance(doc, dict):
        raise TypeError(
            f"Documento para hashing deve ser dict, recebido: {type(doc).__name__}"
        )

    canonical_json = json.dumps(
        _canonical(doc),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
