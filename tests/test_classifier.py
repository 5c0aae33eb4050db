"""Unit tests for member classification and descriptor assembly."""

from __future__ import annotations

import pytest

from es_scraper.errors import SpecIntegrityError
from es_scraper.extractor.assembler import BindingAssembler
from es_scraper.extractor.classifier import MemberClassifier, bare, is_bare
from es_scraper.extractor.models import (
    AccessorProperty,
    ClassBinding,
    Constructor,
    DataProperty,
    Method,
    Namespace,
    Parameters,
    Section,
)


def _section(title: str, *children: Section) -> Section:
    slug = title.lower().replace(" ", "-")
    return Section(title=title, id=f"sec-{slug}", children=children)


def _classifier(codes: dict[str, str] | None = None) -> MemberClassifier:
    declared = codes or {}
    return MemberClassifier(lambda section: declared.get(section.title))


@pytest.mark.parametrize(
    "section",
    [
        _section("Math.PI"),
        _section("eval ( _x_ )", _section("PerformEval ( _x_, _strictCaller_ )")),
        _section("RegExp.prototype [ @@match ] ( _string_ )", _section("`RegExpBuiltinExec`")),
        _section("Array.prototype.sort ( _comparator_ )", _section("SortState Record")),
        _section(
            "Object.prototype.__proto__",
            _section("get Object.prototype.__proto__"),
            _section("set Object.prototype.__proto__"),
        ),
    ],
    ids=["leaf", "abstract-op", "syntax", "record", "accessor-pair"],
)
def test_is_bare_accepts_helper_children(section: Section) -> None:
    assert is_bare(section), f"expected {section.title!r} to be bare"


def test_bare_rejects_nested_members() -> None:
    section = _section(
        "Properties of the Foo Constructor", _section("Foo.prototype"), _section("Foo.bar ( )")
    )
    assert not is_bare(section)
    with pytest.raises(SpecIntegrityError, match="Properties of the Foo Constructor"):
        bare(section)


def test_bare_rejects_helper_with_children() -> None:
    section = _section(
        "eval ( _x_ )",
        _section("PerformEval ( _x_ )", _section("Nested ( )")),
    )
    with pytest.raises(SpecIntegrityError, match="abstract operations"):
        bare(section)


def test_make_method_records_declared_attributes() -> None:
    classifier = _classifier({"bar(x, y)": "wc"})
    method = classifier.make_method(_section("bar(x, y)"))
    expected = Method(name="bar()", parameters=Parameters(required=2), attributes="wc")
    assert method == expected, f"expected {expected!r}, got {method!r}"


def test_make_method_omits_undeclared_attributes() -> None:
    method = _classifier().make_method(_section("Math.abs ( _x_ )"))
    assert method.attributes is None, f"got {method.attributes!r}"


def test_make_property_accessor_pair() -> None:
    section = _section(
        "Object.prototype.__proto__",
        _section("get Object.prototype.__proto__"),
        _section("set Object.prototype.__proto__"),
    )
    prop = _classifier().make_property(section)
    expected = AccessorProperty(name="Object.prototype.__proto__", attributes="gsc")
    assert prop == expected, f"expected {expected!r}, got {prop!r}"


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        (
            "get RegExp [ @@species ]",
            AccessorProperty(name="RegExp[@@species]", attributes="gc"),
        ),
        (
            "set Foo.prototype.bar",
            AccessorProperty(name="Foo.prototype.bar", attributes="sc"),
        ),
    ],
)
def test_make_property_single_accessor(title: str, expected: AccessorProperty) -> None:
    prop = _classifier().make_property(_section(title))
    assert prop == expected, f"expected {expected!r}, got {prop!r}"


def test_make_property_data_defaults_to_writable_configurable() -> None:
    prop = _classifier().make_property(_section("Error.prototype.message"))
    expected = DataProperty(name="Error.prototype.message", attributes="wc")
    assert prop == expected, f"expected {expected!r}, got {prop!r}"


def test_make_property_keeps_empty_attribute_code() -> None:
    """A declared all-false code is not replaced by the default."""
    prop = _classifier({"Math [ @@toStringTag ]": ""}).make_property(
        _section("Math [ @@toStringTag ]")
    )
    expected = DataProperty(name="Math[@@toStringTag]", attributes="")
    assert prop == expected, f"expected {expected!r}, got {prop!r}"


def test_make_member_dispatches_on_call_signature() -> None:
    classifier = _classifier()
    assert isinstance(classifier.make_member(_section("Math.abs ( _x_ )")), Method)
    assert isinstance(classifier.make_member(_section("Math.E")), DataProperty)


def test_make_constructor_requires_call_signature() -> None:
    classifier = _classifier()
    assert classifier.make_constructor(None) is None
    constructor = classifier.make_constructor(_section("Object ( [ _value_ ] )"))
    expected = Constructor(name="Object()", parameters=Parameters(optional=1))
    assert constructor == expected, f"expected {expected!r}, got {constructor!r}"
    with pytest.raises(SpecIntegrityError, match="does not specify a constructor"):
        classifier.make_constructor(_section("Object.prototype"))


def test_assemble_namespace_from_value_and_function_clauses() -> None:
    group = _section(
        "The Math Object",
        _section("Value Properties of the Math Object", _section("Math.PI")),
        _section(
            "Function Properties of the Math Object",
            _section("Math.abs ( _x_ )"),
            _section("Math.max ( ..._args_ )"),
        ),
    )
    binding = BindingAssembler(_classifier({"Math.PI": ""})).assemble(group)
    expected = Namespace(
        name="Math",
        static_properties=[DataProperty(name="Math.PI", attributes="")],
        static_methods=[
            Method(name="Math.abs()", parameters=Parameters(required=1)),
            Method(name="Math.max()", parameters=Parameters(rest=True)),
        ],
    )
    assert binding == expected, f"expected {expected!r}, got {binding!r}"


def test_assemble_namespace_falls_back_to_direct_children() -> None:
    group = _section(
        "The Reflect Object",
        _section("Reflect.apply ( _target_, _thisArgument_, _argumentsList_ )"),
        _section("Reflect [ @@toStringTag ]"),
    )
    binding = BindingAssembler(_classifier({"Reflect [ @@toStringTag ]": "c"})).assemble(
        group
    )
    assert isinstance(binding, Namespace)
    assert binding.name == "Reflect"
    assert [p.name for p in binding.static_properties] == ["Reflect[@@toStringTag]"]
    assert [m.name for m in binding.static_methods] == ["Reflect.apply()"]


def test_assemble_namespace_rejects_functions_among_values() -> None:
    group = _section(
        "The JSON Object",
        _section("Value Properties of the JSON Object", _section("JSON.parse ( _text_ )")),
    )
    with pytest.raises(SpecIntegrityError, match="include a function"):
        BindingAssembler(_classifier()).assemble(group)


def test_assemble_class_separates_member_kinds() -> None:
    group = _section(
        "RegExp (Regular Expression) Objects",
        _section("The RegExp Constructor", _section("RegExp ( _pattern_, _flags_ )")),
        _section(
            "Properties of the RegExp Constructor",
            _section("RegExp.prototype"),
            _section("get RegExp [ @@species ]"),
            _section("RegExp.escape ( _S_ )"),
        ),
        _section(
            "Properties of the RegExp Prototype Object",
            _section("RegExp.prototype.exec ( _string_ )"),
            _section("get RegExp.prototype.flags"),
        ),
        _section("Properties of RegExp Instances", _section("lastIndex")),
    )
    binding = BindingAssembler(
        _classifier({"RegExp.prototype": "", "lastIndex": "w"})
    ).assemble(group)
    expected = ClassBinding(
        name="RegExp",
        constructor=Constructor(name="RegExp()", parameters=Parameters(required=2)),
        static_properties=[
            DataProperty(name="RegExp.prototype", attributes=""),
            AccessorProperty(name="RegExp[@@species]", attributes="gc"),
        ],
        static_methods=[
            Method(name="RegExp.escape()", parameters=Parameters(required=1))
        ],
        prototype_properties=[
            AccessorProperty(name="RegExp.prototype.flags", attributes="gc")
        ],
        instance_methods=[
            Method(name="RegExp.prototype.exec()", parameters=Parameters(required=1))
        ],
        instance_properties=[DataProperty(name="lastIndex", attributes="w")],
    )
    assert binding == expected, f"expected {expected!r}, got {binding!r}"


def test_assemble_class_without_constructor_clause() -> None:
    group = _section(
        "Foo Objects",
        _section(
            "Properties of the Foo Constructor",
            _section("bar(x, y)"),
        ),
    )
    binding = BindingAssembler(_classifier({"bar(x, y)": "wc"})).assemble(group)
    assert isinstance(binding, ClassBinding)
    assert binding.name == "Foo", f"got {binding.name!r}"
    assert binding.constructor is None
    expected = [
        Method(name="bar()", parameters=Parameters(required=2), attributes="wc")
    ]
    assert binding.static_methods == expected, f"got {binding.static_methods!r}"


def test_assemble_class_rejects_instance_methods_on_instances() -> None:
    group = _section(
        "Bar Objects",
        _section("Properties of Bar Instances", _section("Bar.prototype.go ( )")),
    )
    with pytest.raises(SpecIntegrityError, match="Instance properties of Bar Objects"):
        BindingAssembler(_classifier()).assemble(group)


def test_assemble_class_keeps_member_groups_disjoint() -> None:
    """No name appears both as an instance property and a prototype or static member."""
    group = _section(
        "Map Objects",
        _section("The Map Constructor", _section("Map ( [ _iterable_ ] )")),
        _section("Properties of the Map Constructor", _section("Map.prototype")),
        _section(
            "Properties of the Map Prototype Object",
            _section("Map.prototype.get ( _key_ )"),
            _section("get Map.prototype.size"),
        ),
        _section("Properties of Map Instances", _section("[[MapData]] slot")),
    )
    binding = BindingAssembler(_classifier()).assemble(group)
    assert isinstance(binding, ClassBinding)
    instance = {p.name for p in binding.instance_properties}
    others = {
        member.name
        for member in (
            *binding.static_properties,
            *binding.static_methods,
            *binding.prototype_properties,
            *binding.instance_methods,
        )
    }
    assert instance.isdisjoint(others), f"overlap: {instance & others!r}"
