"""Identifier case conversions."""

from __future__ import annotations


def lower_first(s: str) -> str:
    """Lower-case the first character."""
    return s[:1].lower() + s[1:]


def upper_first(s: str) -> str:
    """Upper-case the first character."""
    return s[:1].upper() + s[1:]


def camel_to_snake(s: str) -> str:
    """Convert CamelCase to snake_case, keeping upper-case acronyms together."""
    out = []
    for i, ch in enumerate(s):
        if ch.isupper() and i != 0:
            nxt = s[i + 1] if i + 1 < len(s) else None
            if nxt is not None and not nxt.isupper():
                out.append("_")
        out.append(ch.lower())
    return "".join(out)


def snake_to_camel(s: str) -> str:
    """Convert snake_case or SNAKE_CASE to CamelCase.

    A word that starts with a digit keeps an underscore in front of it.
    """
    out = []
    up = True
    for ch in s:
        if ch == "_":
            up = True
        elif up and ch.isdigit():
            out.append("_" + ch)
            up = False
        elif up:
            out.append(ch.upper())
            up = False
        else:
            out.append(ch.lower())
    return "".join(out)


def grpc_client_field(reduced_serv_name: str) -> str:
    """Name of the struct field that stores the gRPC client."""
    return lower_first(reduced_serv_name + "Client")