"""Tests for the Jinja2 TemplateRenderer (scaffolder.templates)."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from exemplar.scaffolder import TemplateRenderer


pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


class TestTemplateRenderer:
    def test_lists_shipped_templates(self, renderer):
        assert renderer.list_templates() == [
            "category_readme.md.j2",
            "deploy_script.ts.j2",
            "example_readme.md.j2",
        ]

    def test_list_templates_missing_dir(self, tmp_path: Path):
        assert TemplateRenderer(tmp_path / "nowhere").list_templates() == []

    def test_render_string(self, renderer):
        assert renderer.render_string("Hello {{ name }}", {"name": "x"}) == "Hello x"

    def test_undefined_variable_is_error(self, renderer):
        with pytest.raises(UndefinedError):
            renderer.render_string("{{ missing }}", {})

    def test_identifier_filter(self, renderer):
        out = renderer.render_string("{{ n | identifier }}", {"n": "2my-contract"})
        assert out == "_2my_contract"

    def test_title_first_filter(self, renderer):
        assert renderer.render_string("{{ c | title_first }}", {"c": "basic ops"}) == "Basic ops"

    def test_js_string_filter(self, renderer):
        out = renderer.render_string("{{ s | js_string }}", {"s": 'a"b\\c'})
        assert out == 'a\\"b\\\\c'

    def test_custom_template_dir(self, tmp_path: Path):
        (tmp_path / "hello.txt.j2").write_text("Hi {{ who }}\n", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("hello.txt.j2", {"who": "there"}) == "Hi there\n"

    async def test_render_to_file_creates_parents(self, tmp_path: Path):
        (tmp_path / "t.j2").write_text("{{ v }}", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path)
        out = await renderer.render_to_file("t.j2", tmp_path / "a" / "b" / "out.txt", {"v": 7})
        assert out.read_text(encoding="utf-8") == "7"

    def test_deploy_script_lists_every_component(self, renderer):
        script = renderer.render(
            "deploy_script.ts.j2",
            {"components": [
                {"name": "Alpha", "ident": "Alpha"},
                {"name": "my-token", "ident": "my_token"},
            ]},
        )
        assert 'getContractFactory("Alpha")' in script
        assert 'getContractFactory("my-token")' in script
        assert "const my_tokenFactory" in script
        assert 'deployedContracts["my-token"] = my_tokenInstance.address;' in script
        assert "JSON.stringify(deployedContracts, null, 2)" in script

    def test_deploy_script_without_components(self, renderer):
        script = renderer.render("deploy_script.ts.j2", {"components": []})
        assert "getContractFactory" not in script
        assert "no components" in script
