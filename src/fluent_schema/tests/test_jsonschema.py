"""the documents are handed to a draft-07 validator, here jsonschema"""
import jsonschema
import pytest

from fluent_schema import *

person = (
    FluentSchema()
    .id("http://example.com/person.json")
    .title("Person")
    .definition(
        "address",
        FluentSchema()
        .prop("city")
        .asString()
        .minLength(1)
        .required()
        .prop("zip")
        .asString()
        .pattern("^[0-9]{5}$"),
    )
    .prop("email")
    .asString()
    .format(FORMATS.EMAIL)
    .required()
    .prop("age")
    .asInteger()
    .minimum(0)
    .exclusiveMaximum(200)
    .prop("role")
    .enum(["admin", "user"])
    .default("user")
    .prop("tags")
    .asArray()
    .items(FluentSchema().asString())
    .uniqueItems()
    .maxItems(3)
    .prop("address")
    .ref("#definitions/address")
    .prop("contact", FluentSchema().prop("phone").asString().required())
    .prop("nickname")
    .anyOf([FluentSchema().asString().maxLength(10), FluentSchema().asNull()])
    .prop("extra")
    .asObject()
    .additionalProperties(False)
    .patternProperties({"^x-": FluentSchema().asString()})
)


def test_documents_match_the_meta_schema():
    jsonschema.Draft7Validator.check_schema(person.valueOf())
    jsonschema.Draft7Validator.check_schema(FluentSchema().valueOf())
    jsonschema.Draft7Validator.check_schema(
        (FluentSchema().asString() | FluentSchema().asNull()).valueOf()
    )


@pytest.mark.parametrize(
    "instance",
    [
        {"email": "ada@example.com"},
        {"email": "ada@example.com", "age": 36, "role": "admin", "tags": ["a", "b"]},
        {"email": "a@b.c", "address": {"city": "london", "zip": "12345"}},
        {"email": "a@b.c", "contact": {"phone": "123"}, "nickname": None},
        {"email": "a@b.c", "extra": {"x-a": "b"}},
    ],
)
def test_valid_instances(instance):
    jsonschema.Draft7Validator(person.valueOf()).validate(instance)


@pytest.mark.parametrize(
    "instance",
    [
        {},
        {"email": 1},
        {"email": "a@b.c", "age": -1},
        {"email": "a@b.c", "age": 200},
        {"email": "a@b.c", "role": "root"},
        {"email": "a@b.c", "tags": ["a", "a"]},
        {"email": "a@b.c", "tags": ["a", "b", "c", "d"]},
        {"email": "a@b.c", "address": {"zip": "12345"}},
        {"email": "a@b.c", "address": {"city": "x", "zip": "1"}},
        {"email": "a@b.c", "contact": {}},
        {"email": "a@b.c", "nickname": "a very long nickname"},
        {"email": "a@b.c", "extra": {"other": 1}},
    ],
)
def test_invalid_instances(instance):
    assert not jsonschema.Draft7Validator(person.valueOf()).is_valid(instance)


zip_code = (
    FluentSchema()
    .definition("code", FluentSchema().asString().pattern("^[0-9]{5}$"))
    .prop("zip")
    .ref("#definitions/code")
    .required()
)


@pytest.mark.parametrize(
    "schema",
    [
        FluentSchema().prop("address", zip_code),
        FluentSchema().definition("zip", zip_code).prop("address").ref("#definitions/zip"),
        FluentSchema().prop("address").allOf([zip_code]),
    ],
)
def test_embedded_definitions_resolve(schema):
    validator = jsonschema.Draft7Validator(schema.valueOf())
    validator.validate({"address": {"zip": "12345"}})
    assert not validator.is_valid({"address": {"zip": "1"}})
    assert not validator.is_valid({"address": {}})
