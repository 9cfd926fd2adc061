"""Per-example documentation page generator.

Produces ``<output_root>/<category>/<example-id>.md`` for a registered
example by combining its registry metadata with what the extractors find in
its source and test payloads.  Pages carry no timestamps, so regenerating a
page from unchanged inputs rewrites identical bytes.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from rich.markup import escape

from exemplar.config import Config
from exemplar.errors import ExemplarError
from exemplar.parser import ExtractedDoc, extract_doc
from exemplar.registry import ExampleEntry, Registry
from exemplar.utils import console, print_warning, read_text_if_exists, write_text

from .patterns import PATTERNS, PITFALLS, RESOURCES, WORKFLOW_STEPS, UsageSnippet
from .summary import SummaryGenerator


_FENCE_LANGUAGES: dict[str, str] = {
    ".sol": "solidity",
    ".ts": "typescript",
    ".js": "javascript",
    ".py": "python",
    ".rs": "rust",
}


# ---------------------------------------------------------------------------
# DocGenerator
# ---------------------------------------------------------------------------

class DocGenerator:
    """Generates Markdown documentation pages and the grouped summary.

    The generated page for an example includes:

    - Registry metadata (category, complexity, estimated time)
    - Overview, key features and learning outcomes
    - Comment blocks extracted from the source payload
    - Count and titles of the test cases declared in the test payload
    - The static catalog of usage patterns and common pitfalls
    """

    def __init__(self, config: Config, registry: Registry) -> None:
        self.config = config
        self.registry = registry
        self.summary = SummaryGenerator(config, registry)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def generate_docs(self, example_id: str, output_root: str | Path) -> Path:
        """Generate the documentation page for *example_id*.

        Missing payload files are not an error: the page is rendered with
        empty extraction results.

        Returns:
            Path of the written page.

        Raises:
            ExampleNotFoundError: If *example_id* is not registered.
        """
        entry = self.registry.resolve_example(example_id)
        extracted = self.extract(entry)
        output = self.doc_path(entry, output_root)

        await write_text(output, self.render_page(entry, extracted))
        console.print(f"[green]Documentation written to {escape(str(output))}[/green]")
        return output

    async def generate_all_docs(self, output_root: str | Path) -> list[Path]:
        """Generate every example's page, then the summary.

        A failure for one example is reported and skipped.

        Returns:
            Paths of the pages that were written, in registry order.
        """
        written: list[Path] = []
        for entry in self.registry.list_examples():
            try:
                written.append(await self.generate_docs(entry.id, output_root))
            except (ExemplarError, OSError, ValueError) as exc:
                print_warning(f"Failed to generate docs for {entry.id}: {exc}")
        await self.generate_summary(output_root)
        return written

    async def generate_summary(self, output_root: str | Path) -> Path:
        """Write the grouped table of contents for every example."""
        return await self.summary.generate(output_root)

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def doc_path(self, entry: ExampleEntry, output_root: str | Path) -> Path:
        """``<output_root>/<category>/<id>.md``"""
        return Path(output_root) / entry.category / f"{entry.id}.md"

    def extract(self, entry: ExampleEntry) -> ExtractedDoc:
        """Read the entry's payloads (when present) and run the extractors."""
        source_text = read_text_if_exists(self.config.sources_path / entry.source_file)
        test_text = read_text_if_exists(self.config.tests_path / entry.test_file)
        return extract_doc(source_text, test_text)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_page(self, entry: ExampleEntry, extracted: ExtractedDoc) -> str:
        """Render the complete documentation page markdown."""
        docs = entry.documentation
        source_path = f"{self.config.components_dir}/{entry.source_name}"
        language = _FENCE_LANGUAGES.get(PurePosixPath(entry.source_file).suffix, "")
        sections: list[str] = []

        # Title & metadata
        sections.append(f"# {entry.display_name}")
        sections.append("")
        sections.append(f"**Category**: {entry.category}")
        sections.append(f"**Complexity**: {entry.complexity.value}")
        sections.append(f"**Estimated Time**: {entry.effective_estimated_time}")
        sections.append("")

        sections.append("## Overview")
        sections.append("")
        sections.append(docs.overview or entry.description)
        sections.append("")

        sections.append("## Key Features")
        sections.append("")
        sections.extend(f"- {feature}" for feature in docs.key_features)
        sections.append("")

        sections.append("## Learning Outcomes")
        sections.append("")
        sections.extend(f"- {outcome}" for outcome in docs.learning_outcomes)
        sections.append("")

        # Architecture outline
        sections.append("## Architecture")
        sections.append("")
        sections.append("### Contract Structure")
        sections.append("")
        sections.append("The contract is organized into the following main sections:")
        sections.append("")
        sections.append("1. **State Variables** - Storage for encrypted and public data")
        sections.append("2. **Constructor/Initialization** - Setup logic")
        sections.append("3. **Core Functions** - Main contract functionality")
        sections.append("4. **Utility Functions** - Helper methods")
        sections.append("5. **Events** - Important events for monitoring")
        sections.append("")
        sections.append("### Key FHE Operations")
        sections.append("")
        sections.append("This example demonstrates:")
        sections.append("- Encrypted data types (`euint8`, `euint32`, etc.)")
        sections.append("- Permission management (`FHE.allowThis()`, `FHE.allow()`)")
        sections.append("- Privacy-preserving operations")
        sections.append("- Async decryption callbacks")
        sections.append("")

        # Code examples
        sections.append("## Code Examples")
        sections.append("")
        sections.append("### Contract File")
        sections.append(f"```{language}")
        sections.append(f"// Source: {source_path}")
        sections.append("// See the contract file for complete implementation")
        sections.append("```")
        sections.append("")

        if extracted.comment_blocks:
            sections.append("### Source Documentation")
            sections.append("")
            for block in extracted.comment_blocks:
                sections.append(f"```{language}")
                sections.append(block)
                sections.append("```")
                sections.append("")

        sections.append("### Test Cases")
        sections.append("")
        sections.append(f"**Total Tests**: {extracted.test_count}")
        sections.append("")
        if extracted.test_case_titles:
            sections.append("Test coverage includes:")
            sections.extend(f"- {title}" for title in extracted.test_case_titles)
        else:
            sections.append("See test file for detailed test cases")
        sections.append("")

        # How it works
        sections.append("## How It Works")
        sections.append("")
        for idx, (title, text, code) in enumerate(WORKFLOW_STEPS, start=1):
            sections.append(f"### Step {idx}: {title}")
            sections.append(text)
            if code:
                sections.append("```solidity")
                sections.append(code)
                sections.append("```")
            sections.append("")

        sections.extend(self._render_running())

        # Patterns and pitfalls
        sections.append("## FHE Patterns Used")
        sections.append("")
        for snippet in PATTERNS:
            sections.extend(_render_snippet(snippet, entry.component_name))
        sections.append("## Common Pitfalls")
        sections.append("")
        for snippet in PITFALLS:
            sections.extend(_render_snippet(snippet, entry.component_name))

        sections.append("## Advanced Topics")
        sections.append("")
        sections.append("### State Management")
        sections.append("How encrypted values are stored and updated in contract state.")
        sections.append("")
        sections.append("### Multi-Step Operations")
        sections.append("Performing complex logic with encrypted values.")
        sections.append("")
        sections.append("### Decryption Callbacks")
        sections.append("Understanding async decryption and callback pattern.")
        sections.append("")

        sections.append("## Resources")
        sections.append("")
        sections.extend(f"- [{label}]({url})" for label, url in RESOURCES)
        sections.append("")

        sections.append("## Next Steps")
        sections.append("")
        sections.append("1. ✅ Complete this example")
        sections.append("2. Review related examples in the same category")
        sections.append("3. Modify the contract to test different scenarios")
        sections.append("4. Deploy to testnet")
        sections.append("5. Explore more advanced patterns")
        sections.append("")

        sections.append("---")
        sections.append("")
        sections.append(f"**Example**: {entry.id}")
        sections.append(f"**Tests File**: {self.config.tests_dir}/{entry.test_name}")
        sections.append("")

        return "\n".join(sections)

    def _render_running(self) -> list[str]:
        """The fixed 'Running the Example' section."""
        lines = [
            "## Running the Example",
            "",
            "### Prerequisites",
            "- Node.js >= 14.0.0",
            "- npm or yarn",
            "",
        ]
        for title, command in (
            ("Installation", "npm install"),
            ("Compilation", "npm run compile"),
            ("Testing", "npm run test"),
        ):
            lines.extend([f"### {title}", "```bash", command, "```", ""])
        lines.extend([
            "### Deployment",
            "```bash",
            "# Deploy to Sepolia testnet",
            "npm run deploy:sepolia",
            "",
            "# Deploy to Zama testnet",
            "npm run deploy:zama",
            "```",
            "",
        ])
        return lines


def _render_snippet(snippet: UsageSnippet, component: str) -> list[str]:
    return [
        f"### {snippet.heading}",
        f"```{snippet.language}",
        snippet.render_code(component),
        "```",
        "",
    ]
