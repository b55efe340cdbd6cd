# src/cassandra_tuner/core/identity.py
"""Identidade de runtime do nó, fornecida pelo chamador a cada invocação."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidIdentityError


@dataclass(frozen=True)
class NodeIdentity:
    """
    Identidade descoberta em runtime para o nó sendo configurado.

    Campos:
        - host_address: endereço usado como listen_address e rpc_address
        - seed_provider_class_name: classe de descoberta de seeds

    O tuner não deriva nenhum destes valores; quem resolve hostname e
    estratégia de seeds é o orquestrador de bootstrap.
    """

    host_address: str
    seed_provider_class_name: str

    def __post_init__(self) -> None:
        if not isinstance(self.host_address, str) or not self.host_address.strip():
            raise InvalidIdentityError("host_address must be a non-empty string")
        if not isinstance(self.seed_provider_class_name, str) or not self.seed_provider_class_name.strip():
            raise InvalidIdentityError("seed_provider_class_name must be a non-empty string")
