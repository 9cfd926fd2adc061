"""Tests for the grouped documentation index (reporter.summary)."""

from __future__ import annotations

from pathlib import Path

import pytest

from exemplar.registry import Registry
from exemplar.reporter import SummaryGenerator


pytestmark = pytest.mark.unit


@pytest.fixture
def summary(config, registry) -> SummaryGenerator:
    return SummaryGenerator(config, registry)


class TestSummaryGenerator:
    def test_groups_by_first_appearance(self, summary):
        groups = summary.group_examples()
        assert list(groups) == ["basic", "advanced", "orphan"]
        assert [e.id for e in groups["advanced"]] == ["beta_plus", "delta"]

    def test_heading_for_registered_category(self, summary):
        assert summary.heading_for("advanced") == "Advanced Examples"

    def test_heading_for_unregistered_category(self, summary):
        assert summary.heading_for("orphan") == "Orphan"
        assert summary.heading_for("access-control_v2") == "Access Control V2"

    def test_render(self, summary):
        text = summary.render()
        assert text.startswith("# Summary\n\n## Getting Started\n* [Introduction](README.md)\n")
        assert (
            "## Advanced Examples\n"
            "* [Beta Plus](advanced/beta_plus.md)\n"
            "* [Delta](advanced/delta.md)\n"
        ) in text
        assert "## Orphan\n* [Gamma](orphan/gamma.md)\n" in text
        assert text.index("## Basic Examples") < text.index("## Advanced Examples")
        assert text.index("## Advanced Examples") < text.index("## Orphan")
        assert "## Resources" in text

    def test_categories_without_examples_omitted(self, summary):
        text = summary.render()
        assert "Mixed Examples" not in text
        assert "## Empty" not in text

    def test_empty_registry(self, config):
        text = SummaryGenerator(config, Registry()).render()
        assert "## Getting Started" in text
        assert "## Resources" in text

    @pytest.mark.asyncio
    async def test_generate_writes_file(self, summary, tmp_path: Path):
        out = await summary.generate(tmp_path / "docs")
        assert out == tmp_path / "docs" / "SUMMARY.md"
        assert out.read_text(encoding="utf-8") == summary.render()
