"""Grouped documentation index (``SUMMARY.md``).

Groups every registered example under its own ``category`` string, so an
example whose category has no registered entry still gets a heading.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from exemplar.config import Config
from exemplar.registry import ExampleEntry, Registry
from exemplar.utils import console, write_text


class SummaryGenerator:
    """Writes the table of contents linking every example page."""

    def __init__(self, config: Config, registry: Registry) -> None:
        self.config = config
        self.registry = registry

    async def generate(self, output_root: str | Path) -> Path:
        """Write ``<output_root>/SUMMARY.md``, overwriting any existing file."""
        output = Path(output_root) / self.config.summary_name
        await write_text(output, self.render())
        console.print(f"[green]Summary written to {escape(str(output))}[/green]")
        return output

    def group_examples(self) -> dict[str, list[ExampleEntry]]:
        """Examples keyed by category, both in registry order of first appearance."""
        groups: dict[str, list[ExampleEntry]] = {}
        for entry in self.registry.list_examples():
            groups.setdefault(entry.category, []).append(entry)
        return groups

    def heading_for(self, category_id: str) -> str:
        """The registered category's display name, else a title-cased id."""
        if self.registry.has_category(category_id):
            return self.registry.resolve_category(category_id).display_name
        return category_id.replace("-", " ").replace("_", " ").title()

    def render(self) -> str:
        sections: list[str] = ["# Summary", ""]

        sections.append("## Getting Started")
        sections.append("* [Introduction](README.md)")
        sections.append("")

        for category_id, entries in self.group_examples().items():
            sections.append(f"## {self.heading_for(category_id)}")
            for entry in entries:
                sections.append(
                    f"* [{entry.display_name}]({category_id}/{entry.id}.md)"
                )
            sections.append("")

        sections.append("## Resources")
        sections.append("* [FHEVM Documentation](https://docs.zama.ai/fhevm)")
        sections.append("* [Hardhat Guide](https://hardhat.org/)")
        sections.append("* [Zama Community](https://www.zama.ai/community)")
        sections.append("")

        return "\n".join(sections)
