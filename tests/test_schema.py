"""Tests for the schema model and JSON description conversion."""

import pytest

from proxygen.codegen.core.schema import (
    ClassSchema,
    FieldDescriptor,
    GeneratedInterface,
    MethodSignature,
    SchemaError,
    load_schemas,
    schema_from_dict,
    schema_to_dict,
)


class TestFieldDescriptor:
    def test_defaults_are_eligible(self):
        descriptor = FieldDescriptor("id", "int")
        assert not descriptor.is_static
        assert not descriptor.is_ignored
        assert descriptor.eligible

    @pytest.mark.parametrize(
        "static, ignored",
        [(True, False), (False, True), (True, True)],
    )
    def test_static_or_ignored_is_not_eligible(self, static, ignored):
        descriptor = FieldDescriptor("x", "int", is_static=static, is_ignored=ignored)
        assert not descriptor.eligible

    def test_empty_name_rejected(self):
        with pytest.raises(SchemaError):
            FieldDescriptor("", "int")

    def test_empty_type_rejected(self):
        with pytest.raises(SchemaError, match="no type name"):
            FieldDescriptor("id", "  ")

    def test_is_immutable(self):
        descriptor = FieldDescriptor("id", "int")
        with pytest.raises(AttributeError):
            descriptor.name = "other"


class TestClassSchema:
    def test_fields_keep_declaration_order(self, dog_schema):
        assert [f.name for f in dog_schema.fields] == [
            "name",
            "age",
            "owner",
            "cache",
            "weight",
        ]

    def test_list_of_fields_is_stored_as_tuple(self):
        schema = ClassSchema("A", [FieldDescriptor("x", "int")])
        assert isinstance(schema.fields, tuple)

    def test_duplicate_field_names_rejected(self):
        with pytest.raises(SchemaError, match="Duplicate field 'x'"):
            ClassSchema("A", (FieldDescriptor("x", "int"), FieldDescriptor("x", "long")))

    def test_non_descriptor_field_rejected(self):
        with pytest.raises(SchemaError):
            ClassSchema("A", ({"name": "x"},))

    def test_empty_class_name_rejected(self):
        with pytest.raises(SchemaError):
            ClassSchema("")

    def test_eligible_fields(self, person_schema):
        assert [f.name for f in person_schema.eligible_fields()] == ["id"]

    def test_get_field(self, person_schema):
        assert person_schema.get_field("tmp").is_ignored
        assert person_schema.get_field("missing") is None


class TestGeneratedInterface:
    def test_qualified_name(self):
        interface = GeneratedInterface("io.realm", "PersonRealmProxyInterface", "Person")
        assert interface.qualified_name == "io.realm.PersonRealmProxyInterface"

    def test_qualified_name_without_package(self):
        interface = GeneratedInterface("", "PersonRealmProxyInterface", "Person")
        assert interface.qualified_name == "PersonRealmProxyInterface"

    def test_accessor_pairs(self):
        getter = MethodSignature("getX", "int", (), "x")
        setter = MethodSignature("setX", "void", (("value", "int"),), "x")
        interface = GeneratedInterface("p", "I", "C", (getter, setter))
        assert interface.accessor_pairs == [(getter, setter)]
        assert setter.is_setter
        assert not getter.is_setter


class TestDescriptionConversion:
    def test_schema_from_dict(self):
        schema = schema_from_dict(
            {
                "name": "Person",
                "fields": [
                    {"name": "id", "type": "int"},
                    {"name": "tmp", "type": "string", "ignored": True},
                    {"name": "count", "type": "int", "static": True},
                ],
            }
        )
        assert schema.simple_class_name == "Person"
        assert schema.fields[1].is_ignored
        assert schema.fields[2].is_static
        assert not schema.fields[0].is_static

    def test_missing_fields_key_means_no_fields(self):
        assert schema_from_dict({"name": "Empty"}).fields == ()

    def test_load_schemas_accepts_classes_wrapper(self, schema_description):
        schemas = load_schemas(schema_description)
        assert [s.simple_class_name for s in schemas] == ["Person", "Dog"]

    def test_load_schemas_accepts_single_class(self):
        schemas = load_schemas({"name": "A", "fields": []})
        assert len(schemas) == 1

    def test_load_schemas_accepts_list(self):
        schemas = load_schemas([{"name": "A"}, {"name": "B"}])
        assert [s.simple_class_name for s in schemas] == ["A", "B"]

    def test_duplicate_classes_rejected(self):
        with pytest.raises(SchemaError, match="Duplicate class"):
            load_schemas([{"name": "A"}, {"name": "A"}])

    def test_missing_type_names_field(self):
        with pytest.raises(SchemaError, match="Person.id"):
            schema_from_dict({"name": "Person", "fields": [{"name": "id"}]})

    def test_non_boolean_flag_rejected(self):
        with pytest.raises(SchemaError, match="static"):
            schema_from_dict(
                {"name": "A", "fields": [{"name": "x", "type": "int", "static": "yes"}]}
            )

    def test_invalid_top_level_rejected(self):
        with pytest.raises(SchemaError):
            load_schemas("Person")

    def test_schema_to_dict_matches_description(self, schema_description):
        person = load_schemas(schema_description)[0]
        data = schema_to_dict(person)
        assert data["name"] == "Person"
        assert data["fields"][1] == {
            "name": "tmp",
            "type": "string",
            "static": False,
            "ignored": True,
        }
