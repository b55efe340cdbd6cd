# src/cassandra_tuner/rules/security.py
"""
Regras de segurança.

security.auth
    authenticator, authorizer, internode_compression e dynamic_snitch,
    sobrescritos incondicionalmente.

security.encryption
    Muta in-place dois sub-mapeamentos obrigatórios:
        - client_encryption_options.enabled
        - server_encryption_options.internode_encryption
    Os dois precisam existir antes de qualquer escrita: a regra não os
    cria, e um documento sem eles é incompatível. Chaves irmãs
    (keystore, truststore, ...) são preservadas.
"""

from __future__ import annotations

from typing import Any, Dict

from cassandra_tuner.core.context import TuningContext
from cassandra_tuner.core.document.access import require_mapping
from cassandra_tuner.core.engine.types import ChangeSet, RuleResult


class AuthStrategyRule:
    id = "security.auth"

    def apply(self, doc: Dict[str, Any], ctx: TuningContext) -> RuleResult:
        source = ctx.source

        cs = ChangeSet(self.id)
        cs.put(doc, "authenticator", source.authenticator)
        cs.put(doc, "authorizer", source.authorizer)
        cs.put(doc, "internode_compression", source.internode_compression)
        cs.put(doc, "dynamic_snitch", source.dynamic_snitch_enabled)
        return cs.result()


class EncryptionRule:
    id = "security.encryption"

    def apply(self, doc: Dict[str, Any], ctx: TuningContext) -> RuleResult:
        client = require_mapping(doc, "client_encryption_options")
        server = require_mapping(doc, "server_encryption_options")

        cs = ChangeSet(self.id)
        cs.put(client, "enabled", ctx.source.client_ssl_enabled, path="client_encryption_options")
        cs.put(server, "internode_encryption", ctx.source.internode_encryption, path="server_encryption_options")
        return cs.result()
