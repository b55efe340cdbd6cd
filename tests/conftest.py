# tests/conftest.py
"""
Fixtures compartilhados para testes do cassandra-tuner.

Este módulo define fixtures reutilizáveis que fornecem:
- um cassandra.yaml stock reduzido, como string e como arquivo
- settings determinísticos (`TunerSettings`)
- identidade de nó fixa
- contexto de execução controlado (`TuningContext`)

Decisões arquiteturais:
    - Todo I/O ocorre sob `tmp_path`
    - `run_id` e `created_at` são fixos para tornar o log comparável
    - Imports do core são realizados de forma lazy para melhorar a
      clareza de erros durante falhas de import

Invariantes:
    - Nenhuma fixture executa o tuner
    - O documento stock contém todas as sub-estruturas obrigatórias

Limites explícitos:
    - Não representa um cassandra.yaml completo de produção
"""

import pytest
from datetime import datetime, timezone


STOCK_DOCUMENT_YAML = """\
cluster_name: Test Cluster
num_tokens: 256
hinted_handoff_enabled: true
max_hint_window_in_ms: 10800000
hinted_handoff_throttle_in_kb: 1024
authenticator: AllowAllAuthenticator
authorizer: AllowAllAuthorizer
partitioner: org.apache.cassandra.dht.Murmur3Partitioner
data_file_directories:
- /var/lib/cassandra/data
commitlog_directory: /var/lib/cassandra/commitlog
key_cache_size_in_mb: null
key_cache_save_period: 14400
row_cache_size_in_mb: 0
row_cache_save_period: 0
saved_caches_directory: /var/lib/cassandra/saved_caches
commitlog_sync: periodic
commitlog_sync_period_in_ms: 10000
seed_provider:
- class_name: org.apache.cassandra.locator.SimpleSeedProvider
  parameters:
  - seeds: 127.0.0.1
concurrent_reads: 32
concurrent_writes: 32
memtable_flush_queue_size: 4
storage_port: 7000
ssl_storage_port: 7001
listen_address: localhost
start_native_transport: false
native_transport_port: 9042
start_rpc: true
rpc_address: localhost
rpc_port: 9160
incremental_backups: false
snapshot_before_compaction: false
auto_snapshot: true
in_memory_compaction_limit_in_mb: 64
multithreaded_compaction: false
compaction_throughput_mb_per_sec: 16
endpoint_snitch: SimpleSnitch
dynamic_snitch_update_interval_in_ms: 100
server_encryption_options:
  internode_encryption: none
  keystore: conf/.keystore
  keystore_password: cassandra
  truststore: conf/.truststore
  truststore_password: cassandra
client_encryption_options:
  enabled: false
  keystore: conf/.keystore
  keystore_password: cassandra
internode_compression: all
"""


@pytest.fixture
def stock_document_yaml() -> str:
    """
    cassandra.yaml stock reduzido, com as sub-estruturas que o tuner exige
    (`seed_provider`, `client_encryption_options`, `server_encryption_options`)
    e chaves que nenhuma regra toca (ex.: `commitlog_sync`).
    """
    return STOCK_DOCUMENT_YAML


@pytest.fixture
def document_path(tmp_path, stock_document_yaml):
    path = tmp_path / "cassandra.yaml"
    path.write_text(stock_document_yaml, encoding="utf-8")
    return path


@pytest.fixture
def settings_dict() -> dict:
    """Settings efetivos típicos de um nó de produção."""
    return {
        "cluster_name": "orders",
        "storage_port": 7100,
        "ssl_storage_port": 7101,
        "thrift_enabled": False,
        "thrift_port": 9160,
        "native_transport_enabled": True,
        "native_transport_port": 9042,
        "cache_location": "/mnt/data/saved_caches",
        "commit_log_location": "/mnt/data/commitlog",
        "data_file_locations": ["/mnt/data/data"],
        "backup_hour": 3,
        "incremental_backup": True,
        "rac": "us-east-1a",
        "snitch": "org.apache.cassandra.locator.Ec2Snitch",
        "partitioner": "org.apache.cassandra.dht.Murmur3Partitioner",
        "key_cache_size_in_mb": "64",
        "key_cache_keys_to_save": "1000",
    }


@pytest.fixture
def settings(settings_dict):
    from cassandra_tuner.core.settings.source import TunerSettings

    return TunerSettings.from_dict(settings_dict)


@pytest.fixture
def identity():
    from cassandra_tuner.core.identity import NodeIdentity

    return NodeIdentity(
        host_address="10.0.0.12",
        seed_provider_class_name="com.example.cassandra.ClusterSeedProvider",
    )


@pytest.fixture
def make_ctx(identity):
    """
    Fábrica de `TuningContext` determinístico.

    Retorna uma função para que o teste escolha a fonte de configuração.
    """
    from cassandra_tuner.core.context import TuningContext

    def _make(source=None, node=identity):
        return TuningContext(
            run_id="run-test-001",
            created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
            source=source,
            identity=node,
            meta={"source": "pytest"},
        )

    return _make


@pytest.fixture
def ctx(make_ctx, settings):
    return make_ctx(settings)
