import pytest

from gapicrest.descriptors import (
    FieldBehavior,
    FieldDescriptor,
    HttpRule,
    MessageDescriptor,
    MethodDescriptor,
    ServiceDescriptor,
)
from gapicrest.helpers import (
    contains_service,
    convert_path_template_to_regex,
    get_field,
    get_header_name,
    get_method,
    has_field,
    has_method,
    has_rest_method,
    is_optional,
    is_required,
)


@pytest.mark.parametrize(
    "name, want", [("opt", True), ("not_opt", False), ("no_such_field", False)]
)
def test_is_optional(name, want):
    msg = MessageDescriptor(
        "M", [FieldDescriptor("opt", proto3_optional=True), FieldDescriptor("not_opt")]
    )
    assert is_optional(msg, name) is want


@pytest.mark.parametrize("name, want", [("foo", True), ("baz", False)])
def test_has_field(name, want):
    msg = MessageDescriptor("M", [FieldDescriptor("foo"), FieldDescriptor("bar")])
    assert has_field(msg, name) is want


def test_get_field_returns_the_field():
    msg = MessageDescriptor("M", [FieldDescriptor("foo"), FieldDescriptor("bar")])
    assert get_field(msg, "bar") is msg.fields[1]
    assert get_field(msg, "baz") is None


def _service():
    return ServiceDescriptor(
        "S",
        [
            MethodDescriptor("ListFoos"),
            MethodDescriptor("GetFoo"),
            MethodDescriptor("CreateFoo"),
        ],
    )


@pytest.mark.parametrize("name, want", [("GetFoo", True), ("DeleteBar", False)])
def test_has_method(name, want):
    assert has_method(_service(), name) is want


def test_get_method():
    serv = _service()
    assert get_method(serv, "CreateFoo") is serv.methods[2]
    assert get_method(serv, "DeleteBar") is None


@pytest.mark.parametrize(
    "behaviors, want",
    [((FieldBehavior.REQUIRED,), True), ((FieldBehavior.INPUT_ONLY,), False), ((), False)],
)
def test_is_required(behaviors, want):
    assert is_required(FieldDescriptor("f", behaviors=behaviors)) is want


def test_contains_service_by_name():
    services = [ServiceDescriptor("A"), ServiceDescriptor("B")]
    assert contains_service(services, ServiceDescriptor("B")) is True
    assert contains_service(services, ServiceDescriptor("C")) is False


@pytest.mark.parametrize(
    "pattern, want",
    [
        ("", "(.*)"),
        ("{foo}", "(?P<foo>.*)"),
        ("{foo=*}", "(?P<foo>.*)"),
        ("{foo=**}", "(?P<foo>.*)"),
        ("{foo=projects/*}/bars", "(?P<foo>projects/[^/]+)/bars"),
        (
            "{database=projects/*/databases/*}/documents/*/**",
            "(?P<database>projects/[^/]+/databases/[^/]+)/documents/[^/]+(?:/.*)?",
        ),
        (
            "projects/*/foos/*/{bar_name=bars/*}/**",
            "projects/[^/]+/foos/[^/]+/(?P<bar_name>bars/[^/]+)(?:/.*)?",
        ),
    ],
)
def test_convert_path_template_to_regex(pattern, want):
    assert convert_path_template_to_regex(pattern) == want


@pytest.mark.parametrize(
    "pattern, want",
    [
        ("{foo}", "foo"),
        ("foo", ""),
        ("{foo=bar}", "foo"),
        ("{foo=*}", "foo"),
        ("test/{database=projects/*/databases/*}/documents/*/**", "database"),
        ("{new_name_match=projects/*/instances/*/tables/*}", "new_name_match"),
        ("profiles/{routing_id=*}", "routing_id"),
    ],
)
def test_get_header_name(pattern, want):
    assert get_header_name(pattern) == want


def test_get_header_name_rejects_many_equals():
    assert get_header_name("{a=b}/{c=d}") == ""


@pytest.mark.parametrize("want", [True, False])
def test_has_rest_method(want):
    http = HttpRule("get", "/foo") if want else None
    service = ServiceDescriptor("S", [MethodDescriptor("M", http=http)])
    assert has_rest_method(service) is want