"""HTTP bindings of RPCs: verbs, URL templates and status-code mapping."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from gapicrest.descriptors import MethodDescriptor
from gapicrest.naming import lower_first

HTTP_PATTERN_VAR = re.compile(r"{([a-zA-Z0-9_.]+?)(=[^{}]+)?}")

_GRPC_CODE_NAMES = (
    "OK",
    "CANCELLED",
    "UNKNOWN",
    "INVALID_ARGUMENT",
    "DEADLINE_EXCEEDED",
    "NOT_FOUND",
    "ALREADY_EXISTS",
    "PERMISSION_DENIED",
    "RESOURCE_EXHAUSTED",
    "FAILED_PRECONDITION",
    "ABORTED",
    "OUT_OF_RANGE",
    "UNIMPLEMENTED",
    "INTERNAL",
    "UNAVAILABLE",
    "DATA_LOSS",
    "UNAUTHENTICATED",
)

# Canonical mapping of gRPC status codes to HTTP status expressions.
_GRPC_TO_HTTP = {
    "OK": "http.StatusOK",
    "CANCELLED": "499",  # no named constant for "client closed request"
    "UNKNOWN": "http.StatusInternalServerError",
    "INVALID_ARGUMENT": "http.StatusBadRequest",
    "DEADLINE_EXCEEDED": "http.StatusGatewayTimeout",
    "NOT_FOUND": "http.StatusNotFound",
    "ALREADY_EXISTS": "http.StatusConflict",
    "PERMISSION_DENIED": "http.StatusForbidden",
    "UNAUTHENTICATED": "http.StatusUnauthorized",
    "RESOURCE_EXHAUSTED": "http.StatusTooManyRequests",
    "FAILED_PRECONDITION": "http.StatusBadRequest",
    "ABORTED": "http.StatusConflict",
    "OUT_OF_RANGE": "http.StatusBadRequest",
    "UNIMPLEMENTED": "http.StatusNotImplemented",
    "INTERNAL": "http.StatusInternalServerError",
    "UNAVAILABLE": "http.StatusServiceUnavailable",
    "DATA_LOSS": "http.StatusInternalServerError",
}


@dataclass(frozen=True)
class HttpInfo:
    """The verb, URL template and body selector of an RPC's HTTP binding."""

    verb: str = ""
    url: str = ""
    body: str = ""

    @property
    def http_method(self) -> str:
        """The verb in upper case, as used on the wire."""
        return self.verb.upper()


def lowcase_rest_client_name(serv_name: str) -> str:
    """Name of the unexported REST client type for a service."""
    if not serv_name:
        return "restClient"
    return lower_first(serv_name + "RESTClient")


def get_http_info(method: Optional[MethodDescriptor]) -> Optional[HttpInfo]:
    """Return the HTTP binding of ``method``, or None if it has none."""
    if method is None or method.http is None:
        return None
    rule = method.http
    return HttpInfo(verb=rule.verb, url=rule.path, body=rule.body)


def url_format_string(url: str) -> str:
    """Replace every ``{var}`` or ``{var=pattern}`` in ``url`` with ``%v``."""
    return HTTP_PATTERN_VAR.sub("%v", url)


def path_variables(url: str) -> list[str]:
    """Field paths of the URL template's variables, in order of appearance."""
    return [m.group(1) for m in HTTP_PATTERN_VAR.finditer(url)]


def grpc_code_to_http(code: Union[int, str]) -> str:
    """HTTP status expression for a gRPC status code given by number or name."""
    if isinstance(code, str):
        name = code.upper()
        if name not in _GRPC_TO_HTTP:
            raise ValueError(f"unknown gRPC status code {code!r}")
    else:
        if not 0 <= code < len(_GRPC_CODE_NAMES):
            raise ValueError(f"unknown gRPC status code {code!r}")
        name = _GRPC_CODE_NAMES[code]
    return _GRPC_TO_HTTP[name]