"""Tests for the generator registry."""

import json

import pytest

from proxygen.codegen import GeneratorConfig, GeneratorRegistry, RegistryError
from proxygen.codegen.registry import (
    get_generator,
    get_language_info,
    get_registry,
    list_supported_languages,
)
from proxygen.codegen.languages.java import JavaGenerator
from proxygen.codegen.languages.python import PythonGenerator


@pytest.fixture
def registry():
    registry = GeneratorRegistry()
    registry.register("java", JavaGenerator, aliases=["jvm"])
    return registry


class TestGeneratorRegistry:
    def test_resolve_alias(self, registry):
        assert registry.resolve("JVM") == "java"
        assert registry.get_generator_class("jvm") is JavaGenerator

    def test_unknown_language(self, registry):
        with pytest.raises(RegistryError, match="Available: java"):
            registry.resolve("cobol")

    def test_register_rejects_non_generator(self, registry):
        with pytest.raises(RegistryError):
            registry.register("text", str)

    def test_existing_registration_is_kept(self, registry):
        registry.register("java", PythonGenerator)
        assert registry.get_generator_class("java") is JavaGenerator

    def test_replace(self, registry):
        registry.register("java", PythonGenerator, replace=True)
        assert registry.get_generator_class("java") is PythonGenerator

    def test_alias_conflict(self, registry):
        registry.register("python", PythonGenerator)
        with pytest.raises(RegistryError, match="already points to 'java'"):
            registry.register("kotlin", JavaGenerator, aliases=["jvm"])

    def test_unregister_removes_aliases(self, registry):
        registry.unregister("java")
        assert not registry.is_supported("java")
        assert not registry.is_supported("jvm")
        assert registry.list_languages() == []

    def test_create_generator_with_dict(self, registry):
        generator = registry.create_generator("java", {"package_name": "com.example"})
        assert isinstance(generator, JavaGenerator)
        assert generator.config.package_name == "com.example"
        assert generator.config.naming == "proxy"

    def test_create_generator_with_config(self, registry):
        config = GeneratorConfig(package_name="x")
        assert registry.create_generator("java", config).config is config

    def test_create_generator_with_file(self, registry, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"indent_size": 2}), encoding="utf-8")
        assert registry.create_generator("java", path).config.indent == "  "

    def test_create_generator_rejects_bad_config(self, registry):
        with pytest.raises(RegistryError, match="Invalid config type"):
            registry.create_generator("java", 42)


def test_global_registry_has_bundled_languages():
    assert list_supported_languages() == ["java", "python"]
    assert get_registry().is_supported("py")
    assert get_registry() is get_registry()
    assert isinstance(get_generator("py"), PythonGenerator)


def test_language_info():
    info = get_language_info("java")
    assert info["name"] == "java"
    assert info["class"] == "JavaGenerator"
    assert info["file_extension"] == ".java"
    assert info["default_naming"] == "proxy"
    assert info["package_name"] == "io.realm"
    assert info["aliases"] == []

    assert get_language_info("python")["aliases"] == ["py"]
