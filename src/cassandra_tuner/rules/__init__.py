# src/cassandra_tuner/rules/__init__.py
"""
Regras canônicas de tuning do cassandra.yaml.

A ordem abaixo é a política de merge. Ela só importa onde duas regras
tocam estruturas aninhadas sobrepostas, mas é fixa para que o log de
auditoria seja reproduzível entre invocações.

    1.  network.identity
    2.  bootstrap.restore_guard
    3.  storage.paths
    4.  storage.incremental_backups
    5.  topology.snitch
    6.  resources.throughput
    7.  partitioner.merge
    8.  security.auth
    9.  caches.global
    10. security.encryption
    11. topology.seed_provider
    12. topology.num_tokens
"""

from __future__ import annotations

from typing import List, Optional

from cassandra_tuner.core.engine.rule import TuningRule

from .bootstrap import RestoreGuardRule, is_restore_enabled
from .caches import GlobalCachesRule
from .network import NetworkIdentityRule
from .partitioner import PartitionerRule, resolve_partitioner
from .resources import ResourceTuningRule
from .security import AuthStrategyRule, EncryptionRule
from .storage import IncrementalBackupsRule, StoragePathsRule, incremental_backups_enabled
from .topology import NumTokensRule, SeedProviderRule, SnitchResolver, SnitchRule


def default_rules(resolve_snitch: Optional[SnitchResolver] = None) -> List[TuningRule]:
    """Sequência padrão de regras, com a especialização de snitch injetada."""
    return [
        NetworkIdentityRule(),
        RestoreGuardRule(),
        StoragePathsRule(),
        IncrementalBackupsRule(),
        SnitchRule(resolve_snitch),
        ResourceTuningRule(),
        PartitionerRule(),
        AuthStrategyRule(),
        GlobalCachesRule(),
        EncryptionRule(),
        SeedProviderRule(),
        NumTokensRule(),
    ]


__all__ = [
    "default_rules",
    "incremental_backups_enabled",
    "is_restore_enabled",
    "resolve_partitioner",
    "SnitchResolver",
]
