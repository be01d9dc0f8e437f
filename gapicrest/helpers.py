"""Descriptor queries and routing path-template helpers."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from gapicrest.descriptors import (
    FieldBehavior,
    FieldDescriptor,
    MessageDescriptor,
    MethodDescriptor,
    ServiceDescriptor,
)

_CURLY_BRACE = re.compile(r"{([^}]+)\}")
_BEFORE_EQUALS = re.compile(r"(?P<before>[^=]*)=.*")


def get_field(message: MessageDescriptor, name: str) -> Optional[FieldDescriptor]:
    """Return the named field of ``message``, or None."""
    return next((f for f in message.fields if f.name == name), None)


def has_field(message: MessageDescriptor, name: str) -> bool:
    """Whether ``message`` has a field called ``name``."""
    return get_field(message, name) is not None


def is_optional(message: MessageDescriptor, name: str) -> bool:
    """Whether the named field of ``message`` is proto3 optional."""
    found = get_field(message, name)
    return found is not None and found.proto3_optional


def get_method(service: ServiceDescriptor, method: str) -> Optional[MethodDescriptor]:
    """Return the RPC with the given simple name, or None."""
    return next((m for m in service.methods if m.name == method), None)


def has_method(service: ServiceDescriptor, method: str) -> bool:
    """Whether ``service`` declares an RPC with the given simple name."""
    return get_method(service, method) is not None


def has_rest_method(service: ServiceDescriptor) -> bool:
    """Whether at least one RPC of ``service`` has an HTTP binding."""
    return any(m.http is not None and m.http.has_pattern for m in service.methods)


def contains_service(
    services: Iterable[ServiceDescriptor], service: ServiceDescriptor
) -> bool:
    """Whether a service with the same simple name is in ``services``."""
    return any(s.name == service.name for s in services)


def is_required(field: FieldDescriptor) -> bool:
    """Whether the field is annotated REQUIRED."""
    return FieldBehavior.REQUIRED in field.behaviors


def convert_path_template_to_regex(pattern: str) -> str:
    """Turn a routing path template into a regex with a named capture."""
    if not pattern:
        return "(.*)"
    regex = pattern.replace("{", "(?P<").replace("}", ")")
    if "=" not in pattern or "/" not in pattern:
        regex = regex.replace("*", "").replace("=", "")
        return regex.replace(")", ">.*)")
    for old, new in (
        ("/**", "(?:/.*)?"),
        ("/*", "/[^/]+"),
        ("=**", ">.*"),
        ("=*", ">[^/]+"),
        ("=", ">"),
        ("**", ".*"),
    ):
        regex = regex.replace(old, new)
    return regex


def get_header_name(pattern: str) -> str:
    """Return the header name a routing path template captures, or ""."""
    match = _CURLY_BRACE.search(pattern)
    if pattern.count("=") > 1 or match is None:
        return ""
    segment = match.group(1)
    if "=" not in pattern:
        return segment
    named = _BEFORE_EQUALS.search(segment)
    if named is None:
        raise ValueError(f"path template {pattern!r} has '=' outside its variable")
    return named.group("before")