"""GAPIC metadata: which client method implements which RPC, per transport."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class MethodList:
    """Client methods that implement one RPC."""

    methods: list[str] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        return {"methods": list(self.methods)} if self.methods else {}


@dataclass
class ServiceAsClient:
    """A generated client type and the RPCs it exposes."""

    library_client: str = ""
    rpcs: dict[str, MethodList] = field(default_factory=dict)

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.library_client:
            out["libraryClient"] = self.library_client
        if self.rpcs:
            out["rpcs"] = {k: self.rpcs[k]._to_dict() for k in sorted(self.rpcs)}
        return out


@dataclass
class ServiceForTransport:
    """Clients of one service, keyed by transport name."""

    clients: dict[str, ServiceAsClient] = field(default_factory=dict)

    def _to_dict(self) -> dict[str, Any]:
        if not self.clients:
            return {}
        return {"clients": {k: self.clients[k]._to_dict() for k in sorted(self.clients)}}


@dataclass
class GapicMetadata:
    """Metadata of a generated library."""

    schema: str = ""
    comment: str = ""
    language: str = ""
    proto_package: str = ""
    library_package: str = ""
    services: dict[str, ServiceForTransport] = field(default_factory=dict)

    def add_service_for_transport(self, service: str, transport: object, lib: str) -> None:
        """Ensure an entry exists for (service, transport); idempotent."""
        entry = self.services.setdefault(service, ServiceForTransport())
        entry.clients.setdefault(str(transport), ServiceAsClient(library_client=lib + "Client"))

    def add_method(self, service: str, transport: object, rpc: str) -> None:
        """Record that the client method named ``rpc`` implements ``rpc``.

        Raises KeyError if the (service, transport) entry was never added.
        """
        self.services[service].clients[str(transport)].rpcs[rpc] = MethodList([rpc])

    def to_json(self) -> str:
        """Multi-line JSON with camelCase keys, empty values omitted, maps sorted."""
        out: dict[str, Any] = {}
        for key, value in (
            ("schema", self.schema),
            ("comment", self.comment),
            ("language", self.language),
            ("protoPackage", self.proto_package),
            ("libraryPackage", self.library_package),
        ):
            if value:
                out[key] = value
        if self.services:
            out["services"] = {k: self.services[k]._to_dict() for k in sorted(self.services)}
        return json.dumps(out, indent=2)