"""Shared fixtures for tests."""

import json
from pathlib import Path

import pytest

from proxygen.codegen import ClassSchema, FieldDescriptor
from proxygen.codegen.languages.java import JavaGenerator
from proxygen.codegen.languages.python import PythonGenerator


@pytest.fixture
def person_schema() -> ClassSchema:
    """Person with one persisted, one ignored and one static field."""
    return ClassSchema(
        "Person",
        (
            FieldDescriptor("id", "int"),
            FieldDescriptor("tmp", "string", is_ignored=True),
            FieldDescriptor("count", "int", is_static=True),
        ),
    )


@pytest.fixture
def dog_schema() -> ClassSchema:
    return ClassSchema(
        "Dog",
        (
            FieldDescriptor("name", "String"),
            FieldDescriptor("age", "long"),
            FieldDescriptor("owner", "ModelRef<Person>"),
            FieldDescriptor("cache", "String", is_ignored=True),
            FieldDescriptor("weight", "double"),
        ),
    )


@pytest.fixture
def java_generator() -> JavaGenerator:
    return JavaGenerator()


@pytest.fixture
def python_generator() -> PythonGenerator:
    return PythonGenerator()


@pytest.fixture
def schema_description() -> dict:
    return {
        "classes": [
            {
                "name": "Person",
                "fields": [
                    {"name": "id", "type": "int"},
                    {"name": "tmp", "type": "string", "ignored": True},
                    {"name": "count", "type": "int", "static": True},
                ],
            },
            {
                "name": "Dog",
                "fields": [
                    {"name": "name", "type": "String"},
                    {"name": "age", "type": "long"},
                ],
            },
        ]
    }


@pytest.fixture
def schema_file(tmp_path: Path, schema_description: dict) -> Path:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(schema_description), encoding="utf-8")
    return path
