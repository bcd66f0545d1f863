"""Tests for the Jinja2 template engine wrapper."""

import pytest

from proxygen.codegen.core.templates import TemplateError, create_template_engine


@pytest.fixture
def template_dir(tmp_path):
    (tmp_path / "line.j2").write_text("[{{ indent_unit }}{{ text }}]", encoding="utf-8")
    (tmp_path / "block.j2").write_text(
        "{% for item in items %}\n{{ item }}\n{% endfor %}\n", encoding="utf-8"
    )
    return tmp_path


def test_indent_unit_global(template_dir):
    engine = create_template_engine(template_dir, indent="  ")
    assert engine.render_template("line.j2", {"text": "x"}) == "[  x]"


def test_block_tags_leave_no_whitespace(template_dir):
    engine = create_template_engine(template_dir)
    assert engine.render_template("block.j2", {"items": ["a", "b"]}) == "a\nb\n"


def test_generated_code_is_not_escaped(template_dir):
    engine = create_template_engine(template_dir)
    rendered = engine.render_template("line.j2", {"text": "ModelRef<Person>"})
    assert rendered == "[    ModelRef<Person>]"


def test_missing_template(template_dir):
    engine = create_template_engine(template_dir)
    with pytest.raises(TemplateError, match="Template not found"):
        engine.render_template("absent.j2", {})


def test_undefined_variable_is_an_error(template_dir):
    engine = create_template_engine(template_dir)
    with pytest.raises(TemplateError, match="line.j2"):
        engine.render_template("line.j2", {})


def test_without_directory_nothing_is_found():
    with pytest.raises(TemplateError):
        create_template_engine().render_template("interface.java.j2", {})
