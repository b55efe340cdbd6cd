# src/cassandra_tuner/__init__.py
"""
cassandra-tuner: renderização do cassandra.yaml de um nó antes do start.

Este pacote produz o documento de configuração de inicialização de um
nó Cassandra combinando:
    - settings declarativos do operador (fonte de configuração)
    - identidade descoberta em runtime (endereço do host, seed provider)
    - o documento pré-existente em disco

e persiste o resultado junto com o arquivo de propriedades de
arquivamento de commit log. Executa uma vez por ciclo de bootstrap do
nó, antes do processo do banco subir.

Arquitetura em alto nível:
    - core.settings → fonte de configuração tipada
    - core.document → loader/writer do documento
    - core.engine   → aplicação ordenada das regras
    - rules         → política de merge (partitioner, caches, segurança, ...)
    - api           → pontos de entrada do orquestrador

Limites explícitos:
    - Não implementa membership, backup/restore nem atribuição de tokens
    - Não descobre hostname nem rack
    - Não envia comandos a um nó em execução
"""

from .api import TuningReport, set_auto_bootstrap, tune_configuration
from .core.errors import (
    DocumentParseError,
    DocumentStructureError,
    InvalidIdentityError,
    TunerError,
    TunerIOError,
)
from .core.identity import NodeIdentity
from .core.settings import ConfigurationSource, TunerSettings, load_settings

__all__ = [
    "ConfigurationSource",
    "DocumentParseError",
    "DocumentStructureError",
    "InvalidIdentityError",
    "NodeIdentity",
    "TunerError",
    "TunerIOError",
    "TunerSettings",
    "TuningReport",
    "load_settings",
    "set_auto_bootstrap",
    "tune_configuration",
]
