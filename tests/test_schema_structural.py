"""
Tests for structural schemas.
"""

from dataclasses import dataclass

import pytest

from structural_types import (
    UNDEFINED,
    ArraySchema,
    Err,
    IntersectionSchema,
    LiteralSchema,
    MapSchema,
    NullableSchema,
    NumberSchema,
    ObjectSchema,
    Ok,
    OptionalSchema,
    RecordSchema,
    RefinementSchema,
    Schema,
    SchemaError,
    SetSchema,
    StringSchema,
    TupleSchema,
    UnionSchema,
    to_schema,
)
from structural_types.schema import Custom, TooLong, TooShort, TypeMismatch
from tests.structstest import PERSON, TREE


class CountingSchema(Schema):
    """Schema that counts how often it is evaluated."""

    def __init__(self):
        self.calls = 0

    def parse_result(self, data, path=()):
        self.calls += 1
        return Ok(data)


class TestObjectSchema:
    def test_returns_input_unchanged(self):
        schema = ObjectSchema({"foo": StringSchema()})
        data = {"foo": "foo", "extra": 1}
        assert schema.parse(data) is data

    def test_field_error(self):
        schema = ObjectSchema({"foo": StringSchema()})
        with pytest.raises(SchemaError, match="^foo must be string but got 1$"):
            schema.parse({"foo": 1})

    def test_not_an_object(self):
        schema = ObjectSchema({"foo": StringSchema()})
        assert schema.parse_result("bar").error.context == TypeMismatch(["object"], "bar", ())
        assert isinstance(schema.parse_result(None), Err)

    def test_missing_field_reads_as_undefined(self):
        schema = ObjectSchema({"foo": StringSchema()})
        with pytest.raises(SchemaError, match="^foo must be string but got undefined$"):
            schema.parse({})

    def test_declaration_order(self):
        schema = ObjectSchema({"a": StringSchema(), "b": StringSchema()})
        assert schema.parse_result({"a": 1, "b": 2}).error.path == ("a",)
        assert schema.parse_result({"b": 2, "a": 1}).error.path == ("a",)

    def test_attribute_access(self):
        @dataclass
        class Point:
            x: float
            y: float

        schema = ObjectSchema({"x": NumberSchema(), "y": NumberSchema()})
        point = Point(1, 2)
        assert schema.parse(point) is point

    def test_nested_path(self):
        schema = ObjectSchema({"person": ObjectSchema({"age": NumberSchema()})})
        result = schema.parse_result({"person": {"age": "x"}})
        assert result.error.context.path == ("person", "age")

    def test_round_trip(self):
        schema = ObjectSchema({"name": StringSchema(min_length=3)})
        data = {"name": "Ann"}
        assert schema.parse(data) is data
        with pytest.raises(SchemaError) as exc_info:
            schema.parse({"name": "Al"})
        assert str(exc_info.value) == "name must be at least 3 characters long, but got 2"

    def test_shared_person_schema(self):
        person = {"name": "Ann", "address": {"street": "Main", "zip": "1234"}}
        result = PERSON.parse_result(person)
        assert result.error.context == TooShort(5, 4, ("address", "zip"))

        person["address"]["zip"] = "12345"
        assert PERSON.parse(person) is person

        person["age"] = -1
        assert PERSON.parse_result(person).error.context == TypeMismatch([0, "undefined"], -1, ("age",))


class TestArraySchema:
    def test_parse(self):
        schema = ArraySchema(StringSchema())
        data = ["foo"]
        assert schema.parse(data) is data
        with pytest.raises(SchemaError, match="^0 must be string but got 1$"):
            schema.parse([1])

    def test_tuple_input(self):
        assert ArraySchema(NumberSchema()).parse((1, 2)) == (1, 2)

    def test_not_an_array(self):
        result = ArraySchema(StringSchema()).parse_result("foo")
        assert result.error.context == TypeMismatch(["array"], "foo", ())

    def test_length_checked_before_elements(self):
        schema = ArraySchema(StringSchema(), min_length=2, max_length=3)
        assert schema.parse_result([1]).error.context == TooShort(2, 1, ())
        assert schema.parse_result([1, 2, 3, 4]).error.context == TooLong(3, 4, ())

    def test_first_failure_wins(self):
        result = ArraySchema(StringSchema()).parse_result(["a", 1, 2])
        assert result.error.path == (1,)

    def test_recursive_tree(self):
        tree = {"value": 1, "children": [{"value": 2, "children": []}]}
        assert TREE.parse(tree) is tree

        tree["children"][0]["children"].append({"value": "x", "children": []})
        result = TREE.parse_result(tree)
        assert result.error.path == ("children", 0, "children", 0, "value")


class TestTupleSchema:
    schema = TupleSchema((StringSchema(), NumberSchema()))

    def test_parse(self):
        data = ["foo", 1]
        assert self.schema.parse(data) is data
        with pytest.raises(SchemaError, match="^1 must be number but got bar$"):
            self.schema.parse(["foo", "bar"])

    def test_too_short(self):
        result = self.schema.parse_result([1])
        assert result.error.context == TooShort(2, 1, ())
        assert str(result.error) == "must be at least 2 characters long, but got 1"

    def test_too_long(self):
        result = self.schema.parse_result(["foo", 1, 2])
        assert result.error.context == TooLong(2, 3, ())

    def test_arity_before_elements(self):
        counter = CountingSchema()
        TupleSchema((counter, counter)).parse_result([1])
        assert counter.calls == 0


class TestRecordSchema:
    def test_parse(self):
        schema = RecordSchema(StringSchema(), StringSchema())
        data = {"foo": "foo"}
        assert schema.parse(data) is data
        with pytest.raises(SchemaError, match="^foo must be string but got 1$"):
            schema.parse({"foo": 1})

    def test_key_checked_before_value(self):
        schema = RecordSchema(StringSchema(min_length=2), NumberSchema())
        result = schema.parse_result({"a": "not a number"})
        assert result.error.context == TooShort(2, 1, ("a",))

    def test_enum_like_keys(self):
        schema = RecordSchema(LiteralSchema("a") | LiteralSchema("b"), NumberSchema())
        assert isinstance(schema.parse_result({"a": 1, "b": 2}), Ok)
        assert schema.parse_result({"c": 1}).error.path == ("c",)

    def test_not_a_mapping(self):
        schema = RecordSchema(StringSchema(), StringSchema())
        assert schema.parse_result([]).error.context == TypeMismatch(["object"], [], ())


class TestMapSchema:
    def test_parse(self):
        schema = MapSchema(StringSchema(), StringSchema())
        data = {"foo": "foo"}
        assert schema.parse(data) is data
        with pytest.raises(SchemaError, match="^foo must be string but got 1$"):
            schema.parse({"foo": 1})

    def test_not_a_mapping(self):
        schema = MapSchema(StringSchema(), StringSchema())
        assert schema.parse_result("foo").error.context == TypeMismatch(["Mapping"], "foo", ())

    def test_size_bounds(self):
        schema = MapSchema(StringSchema(), NumberSchema(), min_length=1, max_length=2)
        assert schema.parse_result({}).error.context == TooShort(1, 0, ())
        assert schema.parse_result({"a": 1, "b": 2, "c": 3}).error.context == TooLong(2, 3, ())


class TestSetSchema:
    def test_parse(self):
        schema = SetSchema(StringSchema())
        data = {"foo"}
        assert schema.parse(data) is data
        assert schema.parse(frozenset({"foo"})) == frozenset({"foo"})
        with pytest.raises(SchemaError, match="^1 must be string but got 1$"):
            schema.parse({1})

    def test_not_a_set(self):
        result = SetSchema(StringSchema()).parse_result(["foo"])
        assert result.error.context == TypeMismatch(["Set"], ["foo"], ())

    def test_size_bounds(self):
        schema = SetSchema(NumberSchema(), max_length=1)
        assert schema.parse_result({1, 2}).error.context == TooLong(1, 2, ())


class TestUnionSchema:
    schema = UnionSchema((StringSchema(), NumberSchema()))

    def test_parse(self):
        assert self.schema.parse("foo") == "foo"
        assert self.schema.parse(1) == 1
        with pytest.raises(SchemaError) as exc_info:
            self.schema.parse(True)
        assert str(exc_info.value) == "must be one of string, number but got True"

    def test_first_match(self):
        first = ObjectSchema({}).transform(lambda value, path: Ok("first"))
        second = ObjectSchema({}).transform(lambda value, path: Ok("second"))
        assert UnionSchema((first, second)).parse({}) == "first"

    def test_aggregates_expected_without_duplicates(self):
        schema = UnionSchema((StringSchema(), NumberSchema(), StringSchema(), LiteralSchema("x")))
        context = schema.parse_result(None, ("field",)).error.context
        assert context == TypeMismatch(["string", "number", "x"], None, ("field",))

    def test_custom_failures_are_skipped(self):
        schema = UnionSchema((StringSchema().with_message("nope"), NumberSchema()))
        context = schema.parse_result(None).error.context
        assert context.expected == ["number"]
        assert not isinstance(context, Custom)

    def test_tokens_of_different_types_are_kept(self):
        schema = LiteralSchema(1) | LiteralSchema(True) | LiteralSchema(1.0) | LiteralSchema(1)
        assert schema.parse_result("x").error.context.expected == [1, True, 1.0]
        zeros = UnionSchema((LiteralSchema(0), LiteralSchema(False), LiteralSchema(0.0)))
        context = zeros.parse_result("x").error.context
        assert [type(token) for token in context.expected] == [int, bool, float]

    def test_non_type_mismatch_tokens(self):
        schema = UnionSchema((StringSchema(min_length=5), NumberSchema()))
        assert schema.parse_result("abc").error.context.expected == [5, "number"]

    def test_operator(self):
        schema = StringSchema() | NumberSchema() | None
        assert isinstance(schema, UnionSchema)
        assert len(schema.schemas) == 3
        assert schema.parse(None) is None

    def test_reflected_operator(self):
        schema = str | NumberSchema()
        assert schema.parse("a") == "a"
        assert schema.parse(1.5) == 1.5


class TestOptionalAndNullable:
    def test_optional(self):
        schema = OptionalSchema(StringSchema())
        assert schema.parse("foo") == "foo"
        assert schema.parse(UNDEFINED) is UNDEFINED
        with pytest.raises(SchemaError) as exc_info:
            schema.parse(None)
        assert str(exc_info.value) == "must be one of string, undefined but got None"

    def test_optional_field(self):
        schema = ObjectSchema({"email": StringSchema().optional()})
        assert schema.parse({}) == {}
        assert isinstance(schema.parse_result({"email": 1}), Err)

    def test_nullable(self):
        schema = NullableSchema(StringSchema())
        assert schema.parse(None) is None
        with pytest.raises(SchemaError) as exc_info:
            schema.parse(UNDEFINED)
        assert str(exc_info.value) == "must be one of string, None but got undefined"
        assert StringSchema().nullable().parse("foo") == "foo"


class TestIntersectionSchema:
    schema = IntersectionSchema(
        (
            ObjectSchema({"foo": StringSchema()}),
            ObjectSchema({"bar": NumberSchema()}),
        )
    )

    def test_parse(self):
        data = {"foo": "foo", "bar": 1}
        assert self.schema.parse(data) is data
        with pytest.raises(SchemaError, match="^bar must be number but got undefined$"):
            self.schema.parse({"foo": "foo"})
        with pytest.raises(SchemaError, match="^must be object but got bar$"):
            self.schema.parse("bar")

    def test_short_circuit(self):
        counter = CountingSchema()
        first = RefinementSchema(NumberSchema(), lambda n: n > 0, "MinNumber")
        result = IntersectionSchema((first, counter)).parse_result(-1, ("n",))
        assert result.error.context == TypeMismatch(["MinNumber"], -1, ("n",))
        assert counter.calls == 0

    def test_refinements(self):
        schema = IntersectionSchema(
            (
                RefinementSchema(NumberSchema(), lambda n: n > 0, "MinNumber"),
                RefinementSchema(NumberSchema(), lambda n: n < 100, "MaxNumber"),
            )
        )
        assert schema.parse(1) == 1
        with pytest.raises(SchemaError, match="^must be MinNumber but got -1$"):
            schema.parse(-1)
        with pytest.raises(SchemaError, match="^must be MaxNumber but got 101$"):
            schema.parse(101)

    def test_operator(self):
        schema = to_schema({"a": str}) & {"b": int} & ObjectSchema({})
        assert isinstance(schema, IntersectionSchema)
        assert len(schema.schemas) == 3
        assert schema.parse_result({"a": "x", "b": 1.5}).error.path == ("b",)
