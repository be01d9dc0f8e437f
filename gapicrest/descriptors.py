"""A small protobuf descriptor model: fields, messages, services and files."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Optional


class FieldType(enum.IntEnum):
    """Protobuf scalar and composite field types."""

    DOUBLE = 1
    FLOAT = 2
    INT64 = 3
    UINT64 = 4
    INT32 = 5
    FIXED64 = 6
    FIXED32 = 7
    BOOL = 8
    STRING = 9
    GROUP = 10
    MESSAGE = 11
    BYTES = 12
    UINT32 = 13
    ENUM = 14
    SFIXED32 = 15
    SFIXED64 = 16
    SINT32 = 17
    SINT64 = 18


class FieldLabel(enum.IntEnum):
    """Field cardinality."""

    OPTIONAL = 1
    REQUIRED = 2
    REPEATED = 3


class FieldBehavior(enum.IntEnum):
    """Values of the google.api.field_behavior annotation."""

    FIELD_BEHAVIOR_UNSPECIFIED = 0
    OPTIONAL = 1
    REQUIRED = 2
    OUTPUT_ONLY = 3
    INPUT_ONLY = 4
    IMMUTABLE = 5
    UNORDERED_LIST = 6
    NON_EMPTY_DEFAULT = 7
    IDENTIFIER = 8


@dataclass
class FieldDescriptor:
    """A single message field."""

    name: str
    number: int = 0
    type: Optional[FieldType] = None
    label: FieldLabel = FieldLabel.OPTIONAL
    type_name: str = ""
    json_name: str = ""
    proto3_optional: bool = False
    behaviors: tuple[FieldBehavior, ...] = ()


@dataclass
class MessageDescriptor:
    """A message type with its fields and nested message types."""

    name: str
    fields: list[FieldDescriptor] = field(default_factory=list)
    nested: list["MessageDescriptor"] = field(default_factory=list)

    def field(self, name: str) -> Optional[FieldDescriptor]:
        """Return the field called ``name``, or None."""
        return next((f for f in self.fields if f.name == name), None)


_HTTP_VERBS = frozenset({"", "get", "post", "put", "patch", "delete"})


@dataclass
class HttpRule:
    """A google.api.http binding: verb, URL template and body selector."""

    verb: str = ""
    path: str = ""
    body: str = ""
    selector: str = ""

    def __post_init__(self) -> None:
        self.verb = self.verb.lower()
        if self.verb not in _HTTP_VERBS:
            raise ValueError(f"unsupported HTTP verb: {self.verb!r}")

    @property
    def has_pattern(self) -> bool:
        """Whether the rule binds a verb and URL."""
        return bool(self.verb)


@dataclass
class MethodDescriptor:
    """An RPC declared by a service."""

    name: str
    input_type: str = ""
    output_type: str = ""
    client_streaming: bool = False
    server_streaming: bool = False
    http: Optional[HttpRule] = None


@dataclass
class ServiceDescriptor:
    """A service and its RPCs."""

    name: str
    methods: list[MethodDescriptor] = field(default_factory=list)
    default_host: str = ""
    api_version: str = ""


@dataclass
class FileDescriptor:
    """A proto file: its package, messages and services."""

    name: str = ""
    package: str = ""
    go_package: str = ""
    messages: list[MessageDescriptor] = field(default_factory=list)
    services: list[ServiceDescriptor] = field(default_factory=list)


class TypeIndex:
    """Maps fully qualified message names (".pkg.Msg") to their descriptors."""

    def __init__(self, files: Iterable[FileDescriptor] = ()) -> None:
        self._messages: dict[str, MessageDescriptor] = {}
        for file in files:
            self.add_file(file)

    def add_file(self, file: FileDescriptor) -> None:
        """Register every message of ``file``, nested ones included."""
        prefix = f".{file.package}" if file.package else ""
        for message in file.messages:
            self._register(prefix, message)

    def _register(self, prefix: str, message: MessageDescriptor) -> None:
        fqn = f"{prefix}.{message.name}"
        self._messages[fqn] = message
        for inner in message.nested:
            self._register(fqn, inner)

    def __contains__(self, fqn: object) -> bool:
        return fqn in self._messages

    def message(self, fqn: str) -> MessageDescriptor:
        """Return the message registered under ``fqn``; KeyError if unknown."""
        try:
            return self._messages[fqn]
        except KeyError:
            raise KeyError(f"unknown message type {fqn!r}") from None

    def lookup_field(self, type_name: str, path: str) -> Optional[FieldDescriptor]:
        """Resolve a dotted field path starting at message ``type_name``.

        Returns None when the type or any segment of the path is unknown.
        """
        message = self._messages.get(type_name)
        if message is None:
            return None
        *parents, leaf = path.split(".")
        for name in parents:
            parent = message.field(name)
            if parent is None or parent.type is not FieldType.MESSAGE:
                return None
            message = self._messages.get(parent.type_name)
            if message is None:
                return None
        return message.field(leaf)