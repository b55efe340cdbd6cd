# src/cassandra_tuner/rules/network.py
"""
Regra: network.identity

Sobrescreve incondicionalmente os campos de identidade de cluster e de
rede do nó:

    cluster_name, storage_port, ssl_storage_port,
    start_rpc, rpc_port, start_native_transport, native_transport_port,
    listen_address, rpc_address

`listen_address` e `rpc_address` recebem ambos `identity.host_address`.
"""

from __future__ import annotations

from typing import Any, Dict

from cassandra_tuner.core.context import TuningContext
from cassandra_tuner.core.engine.types import ChangeSet, RuleResult


class NetworkIdentityRule:
    id = "network.identity"

    def apply(self, doc: Dict[str, Any], ctx: TuningContext) -> RuleResult:
        source = ctx.source
        host = ctx.identity.host_address

        cs = ChangeSet(self.id)
        cs.put(doc, "cluster_name", source.cluster_name)
        cs.put(doc, "storage_port", source.storage_port)
        cs.put(doc, "ssl_storage_port", source.ssl_storage_port)
        cs.put(doc, "start_rpc", source.thrift_enabled)
        cs.put(doc, "rpc_port", source.thrift_port)
        cs.put(doc, "start_native_transport", source.native_transport_enabled)
        cs.put(doc, "native_transport_port", source.native_transport_port)
        cs.put(doc, "listen_address", host)
        cs.put(doc, "rpc_address", host)
        return cs.result(f"cluster '{source.cluster_name}' listening on {host}")
