# src/cassandra_tuner/core/settings/source.py
"""
Fonte de configuração do tuner.

Este módulo define:
    - `ConfigurationSource`: protocolo com os acessores lidos pelas regras
    - `TunerSettings`: implementação concreta, imutável, materializada a
      partir dos settings efetivos (defaults + local)

A fonte é tratada como pura, síncrona e sem efeitos colaterais. Ausência
de um tunable opcional é representada por `None`, distinta de `""`, e
suprime a escrita correspondente no documento.

Coerção de tipos (por tipo do default do campo):
    - int   → aceita int ou string numérica (bool é rejeitado)
    - bool  → aceita bool ou "true"/"false" (case-insensitive)
    - str   → aceita str ou número (convertido com `str()`)
    - tuple → aceita lista, tupla ou string separada por vírgulas
    - None  → tunable opcional; aceita str ou int, mantido como string

Limites explícitos:
    - Não lê arquivos (ver `loader`)
    - Não valida semântica dos valores (ex.: porta válida)
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple, runtime_checkable

from .errors import InvalidSettingValueError, UnknownSettingError

# tuplas em que a ausência de valores não tem significado
_NON_EMPTY_FIELDS = ("data_file_locations",)


@runtime_checkable
class ConfigurationSource(Protocol):
    """Acessores de tunables consumidos pelas regras de tuning."""

    cluster_name: str
    storage_port: int
    ssl_storage_port: int
    thrift_enabled: bool
    thrift_port: int
    native_transport_enabled: bool
    native_transport_port: int

    cache_location: str
    commit_log_location: str
    data_file_locations: Tuple[str, ...]

    backup_hour: int
    incremental_backup: bool
    backup_racs: Tuple[str, ...]
    rac: str
    restore_snapshot: str

    snitch: str
    partitioner: str

    in_memory_compaction_limit_mb: int
    compaction_throughput_mb: int
    memtable_total_space_mb: int
    streaming_throughput_mb: int
    multithreaded_compaction: bool
    max_hint_window_in_ms: int
    hinted_handoff_throttle_kb: int
    concurrent_reads: int
    concurrent_writes: int
    concurrent_compactors: int

    authenticator: str
    authorizer: str
    internode_compression: str
    dynamic_snitch_enabled: bool

    key_cache_size_in_mb: Optional[str]
    key_cache_keys_to_save: Optional[str]
    row_cache_size_in_mb: Optional[str]
    row_cache_keys_to_save: Optional[str]

    client_ssl_enabled: bool
    internode_encryption: str

    commitlog_backup_enabled: bool
    commitlog_archive_command: str
    commitlog_restore_command: str
    commitlog_restore_directories: str
    commitlog_restore_point_in_time: str
    cassandra_home: str


@dataclass(frozen=True)
class TunerSettings:
    """
    Settings efetivos de um nó, um campo por tunable.

    Os defaults refletem um nó stock; qualquer campo pode ser sobrescrito
    pelo arquivo de defaults do operador ou pelo `local.yaml`.
    """

    # identidade de cluster / rede
    cluster_name: str = "cass_cluster"
    storage_port: int = 7000
    ssl_storage_port: int = 7001
    thrift_enabled: bool = True
    thrift_port: int = 9160
    native_transport_enabled: bool = True
    native_transport_port: int = 9042

    # storage
    cache_location: str = "/var/lib/cassandra/saved_caches"
    commit_log_location: str = "/var/lib/cassandra/commitlog"
    data_file_locations: Tuple[str, ...] = ("/var/lib/cassandra/data",)

    # backup / restore
    backup_hour: int = 12
    incremental_backup: bool = True
    backup_racs: Tuple[str, ...] = ()
    rac: str = ""
    restore_snapshot: str = ""

    # topologia
    snitch: str = "org.apache.cassandra.locator.Ec2Snitch"
    partitioner: str = "org.apache.cassandra.dht.RandomPartitioner"

    # recursos
    in_memory_compaction_limit_mb: int = 128
    compaction_throughput_mb: int = 8
    memtable_total_space_mb: int = 1024
    streaming_throughput_mb: int = 400
    multithreaded_compaction: bool = False
    max_hint_window_in_ms: int = 10800000
    hinted_handoff_throttle_kb: int = 1024
    concurrent_reads: int = 32
    concurrent_writes: int = 32
    concurrent_compactors: int = 4

    # autenticação / autorização
    authenticator: str = "org.apache.cassandra.auth.AllowAllAuthenticator"
    authorizer: str = "org.apache.cassandra.auth.AllowAllAuthorizer"
    internode_compression: str = "all"
    dynamic_snitch_enabled: bool = True

    # caches globais (opcionais)
    key_cache_size_in_mb: Optional[str] = None
    key_cache_keys_to_save: Optional[str] = None
    row_cache_size_in_mb: Optional[str] = None
    row_cache_keys_to_save: Optional[str] = None

    # criptografia
    client_ssl_enabled: bool = False
    internode_encryption: str = "none"

    # arquivamento de commit log
    commitlog_backup_enabled: bool = False
    commitlog_archive_command: str = ""
    commitlog_restore_command: str = ""
    commitlog_restore_directories: str = ""
    commitlog_restore_point_in_time: str = ""
    cassandra_home: str = "/etc/cassandra"

    # -----------------------------
    # Predicados derivados
    # -----------------------------
    def is_restore_enabled(self) -> bool:
        """Restore ativo: snapshot configurado e rac elegível para backup."""
        backup_rac = not self.backup_racs or self.rac in self.backup_racs
        return bool(self.restore_snapshot.strip()) and backup_rac

    # -----------------------------
    # Materialização
    # -----------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TunerSettings":
        """
        Materializa settings a partir de um mapeamento já resolvido.

        Raises:
            UnknownSettingError: chave sem tunable correspondente.
            InvalidSettingValueError: valor não conversível, ou
            `data_file_locations` vazio.
        """
        defaults = {f.name: f.default for f in fields(cls)}

        unknown = sorted(k for k in data if k not in defaults)
        if unknown:
            raise UnknownSettingError(f"Settings desconhecidos: {', '.join(map(str, unknown))}")

        values: Dict[str, Any] = {}
        for name, raw in data.items():
            values[name] = _coerce(name, raw, defaults[name])

        for name in _NON_EMPTY_FIELDS:
            if name in values and not values[name]:
                raise InvalidSettingValueError(f"'{name}' exige ao menos um valor")
        return cls(**values)


def _coerce(name: str, raw: Any, default: Any) -> Any:
    if raw is None:
        return default

    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, str) and raw.strip().lower() in {"true", "false"}:
            return raw.strip().lower() == "true"

    elif isinstance(default, int):
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        if isinstance(raw, str):
            try:
                return int(raw.strip())
            except ValueError:
                pass

    elif isinstance(default, tuple):
        if isinstance(raw, str):
            return tuple(p.strip() for p in raw.split(",") if p.strip())
        if isinstance(raw, (list, tuple)):
            return tuple(str(p) for p in raw)

    elif isinstance(raw, (str, int, float)) and not isinstance(raw, bool):
        # str e opcionais (caches) são mantidos como string
        return str(raw)

    raise InvalidSettingValueError(
        f"Valor inválido para '{name}': {raw!r} ({type(raw).__name__})"
    )
