"""Classification of request fields into URL path, query and body parameters."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from gapicrest.descriptors import (
    FieldDescriptor,
    FieldLabel,
    FieldType,
    MessageDescriptor,
    MethodDescriptor,
    TypeIndex,
)
from gapicrest.http import get_http_info

# Protobuf well-known types that have special JSON encodings and are
# therefore treated as leaves rather than traversed as messages.
WELL_KNOWN_TYPE_NAMES = frozenset(
    {
        ".google.protobuf.FieldMask",
        ".google.protobuf.Timestamp",
        ".google.protobuf.Duration",
        ".google.protobuf.DoubleValue",
        ".google.protobuf.FloatValue",
        ".google.protobuf.Int64Value",
        ".google.protobuf.UInt64Value",
        ".google.protobuf.Int32Value",
        ".google.protobuf.UInt32Value",
        ".google.protobuf.BoolValue",
        ".google.protobuf.StringValue",
        ".google.protobuf.BytesValue",
        ".google.protobuf.Struct",
        ".google.protobuf.Value",
        ".google.protobuf.ListValue",
    }
)

_PATH_VARIABLE = re.compile(r"{([^}]+)}")


def _contains(fields: Iterable[Optional[FieldDescriptor]], target: FieldDescriptor) -> bool:
    return any(f is target for f in fields)


def path_params(index: TypeIndex, method: MethodDescriptor) -> dict[str, FieldDescriptor]:
    """Map each URL variable of ``method`` that names a request field to that field."""
    info = get_http_info(method)
    if info is None:
        return {}
    params: dict[str, FieldDescriptor] = {}
    for match in _PATH_VARIABLE.finditer(info.url):
        name = match.group(1).split("=")[0]
        found = index.lookup_field(method.input_type, name)
        if found is not None:
            params[name] = found
    return params


def get_leafs(
    index: TypeIndex,
    message: MessageDescriptor,
    excluded: Iterable[Optional[FieldDescriptor]] = (),
) -> dict[str, FieldDescriptor]:
    """Map dotted paths to every non-message (leaf) field reachable from ``message``.

    Repeated message fields and fields in ``excluded`` are not traversed, and a
    field already on the current path is not entered again, which stops
    recursion through self-referencing messages.
    """
    excluded = list(excluded)
    leafs: dict[str, FieldDescriptor] = {}

    def walk(stack: list[FieldDescriptor], current: MessageDescriptor) -> None:
        for fld in current.fields:
            if fld.type is FieldType.MESSAGE and fld.type_name not in WELL_KNOWN_TYPE_NAMES:
                if fld.label is FieldLabel.REPEATED:
                    continue
                if _contains(excluded, fld) or _contains(stack, fld):
                    continue
                walk(stack + [fld], index.message(fld.type_name))
            else:
                key = ".".join([f.name for f in stack] + [fld.name])
                leafs[key] = fld

    walk([], message)
    return leafs


def query_params(index: TypeIndex, method: MethodDescriptor) -> dict[str, FieldDescriptor]:
    """Map the dotted path of each query parameter of ``method`` to its field.

    Query parameters are the request's leaf fields that are neither URL
    variables nor part of the request body.
    """
    info = get_http_info(method)
    if info is None or info.body == "*":
        return {}

    taken = set(path_params(index, method))
    # The body selector is never a query parameter.
    taken.add(info.body)

    request = index.message(method.input_type)
    body_field = index.lookup_field(method.input_type, info.body)

    return {
        path: leaf
        for path, leaf in get_leafs(index, request, [body_field]).items()
        if path not in taken and index.lookup_field(request.name, leaf.name) is None
    }