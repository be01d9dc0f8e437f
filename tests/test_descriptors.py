import pytest

from gapicrest.descriptors import (
    FieldDescriptor,
    FieldLabel,
    FieldType,
    FileDescriptor,
    HttpRule,
    MessageDescriptor,
    TypeIndex,
)


def _index():
    chromatophore = MessageDescriptor(
        "Chromatophore",
        [FieldDescriptor("color_code", 0, FieldType.INT32)],
    )
    mantle = MessageDescriptor(
        "Mantle",
        [
            FieldDescriptor("mass_kg", 0, FieldType.INT32),
            FieldDescriptor(
                "chromatophore", 1, FieldType.MESSAGE,
                type_name=".animalia.mollusca.Chromatophore",
            ),
        ],
    )
    squid = MessageDescriptor(
        "Squid",
        [
            FieldDescriptor("length_m", 0, FieldType.INT32),
            FieldDescriptor(
                "mantle", 1, FieldType.MESSAGE, type_name=".animalia.mollusca.Mantle"
            ),
        ],
    )
    file = FileDescriptor(
        package="animalia.mollusca", messages=[chromatophore, mantle, squid]
    )
    return TypeIndex([file]), squid, mantle, chromatophore


def test_message_registered_by_fully_qualified_name():
    index, squid, _, _ = _index()
    assert index.message(".animalia.mollusca.Squid") is squid
    assert ".animalia.mollusca.Mantle" in index


def test_unknown_message_raises_key_error():
    index, *_ = _index()
    with pytest.raises(KeyError):
        index.message(".animalia.mollusca.Octopus")


def test_nested_messages_are_registered():
    inner = MessageDescriptor("Inner")
    outer = MessageDescriptor("Outer", nested=[inner])
    index = TypeIndex()
    index.add_file(FileDescriptor(package="p", messages=[outer]))
    assert index.message(".p.Outer.Inner") is inner


def test_lookup_field_walks_dotted_path():
    index, squid, mantle, chromatophore = _index()
    assert index.lookup_field(".animalia.mollusca.Squid", "length_m") is squid.fields[0]
    assert index.lookup_field(".animalia.mollusca.Squid", "mantle.mass_kg") is mantle.fields[0]
    found = index.lookup_field(
        ".animalia.mollusca.Squid", "mantle.chromatophore.color_code"
    )
    assert found is chromatophore.fields[0]


def test_lookup_field_missing_returns_none():
    index, *_ = _index()
    assert index.lookup_field(".animalia.mollusca.Squid", "nope") is None
    assert index.lookup_field(".animalia.mollusca.Squid", "length_m.x") is None
    assert index.lookup_field("Squid", "length_m") is None


def test_message_field_lookup():
    _, squid, _, _ = _index()
    assert squid.field("mantle") is squid.fields[1]
    assert squid.field("missing") is None


def test_field_defaults():
    f = FieldDescriptor("x")
    assert f.label is FieldLabel.OPTIONAL
    assert f.proto3_optional is False
    assert f.behaviors == ()


def test_http_rule_verb_validation():
    rule = HttpRule("GET", "/v1/foo")
    assert rule.verb == "get"
    assert rule.has_pattern is True
    assert HttpRule().has_pattern is False
    with pytest.raises(ValueError):
        HttpRule("connect", "/v1/foo")