"""Tests for the TemplateRenderer."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from bunny.scaffolder.templates import TemplateRenderer


pytestmark = pytest.mark.unit


class TestRenderString:
    def test_case_filters(self, renderer):
        out = renderer.render_string(
            "{{ n | pascal_case }} {{ n | camel_case }} {{ f | feature_slug }}",
            {"n": "user_profile", "f": "User Profile"},
        )
        assert out == "UserProfile userProfile user_profile"

    def test_dart_string_filter(self, renderer):
        assert renderer.render_string("{{ 'Don\\'t' | dart_string }}", {}) == "'Don\\'t'"

    def test_strings_are_not_html_escaped(self, renderer):
        out = renderer.render_string("{{ s }}", {"s": "List<Map<String, dynamic>> & 'x'"})
        assert out == "List<Map<String, dynamic>> & 'x'"

    def test_undefined_raises(self, renderer):
        with pytest.raises(UndefinedError):
            renderer.render_string("{{ missing }}", {})


class TestTemplateFiles:
    def test_list_templates_with_prefix(self, renderer):
        theme = renderer.list_templates("theme")
        assert "theme/theme_manager_bloc.dart.j2" in theme
        assert all(t.startswith("theme/") for t in theme)

    def test_list_templates_missing_prefix(self, renderer):
        assert renderer.list_templates("nope") == []

    def test_custom_template_dir(self, tmp_path: Path):
        (tmp_path / "hello.j2").write_text("Hello {{ name }}\n")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("hello.j2", {"name": "bunny"}) == "Hello bunny\n"
        assert renderer.list_templates() == ["hello.j2"]
