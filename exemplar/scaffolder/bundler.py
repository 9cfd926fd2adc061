"""Category bundler.

Materializes every example of a category into one shared project tree and
synthesizes a deployment script covering all bundled components.  A bundle
is a best-effort union: unknown example ids and missing payload files are
skipped with a warning, and payloads with the same file name overwrite each
other in category order (last write wins).
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from rich.markup import escape

from exemplar.config import Config
from exemplar.errors import ExampleNotFoundError
from exemplar.registry import CategoryEntry, ExampleEntry, Registry
from exemplar.utils import (
    console,
    print_step,
    print_success,
    print_warning,
    save_json,
    to_identifier,
)

from .generator import Clock, copy_payload, copy_template, utc_now
from .manifest import patch_manifest
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class BundleResult(BaseModel):
    """What a category bundle produced."""

    category_id: str = Field(..., description="Registry id of the bundled category")
    destination: Path = Field(..., description="Root of the generated bundle")
    bundled_examples: list[str] = Field(
        default_factory=list, description="Example ids that resolved, in category order"
    )
    skipped_examples: list[str] = Field(
        default_factory=list, description="Dangling example ids that were skipped"
    )
    source_files: list[str] = Field(
        default_factory=list, description="Source payload file names copied"
    )
    test_files: list[str] = Field(
        default_factory=list, description="Test payload file names copied"
    )
    components: list[str] = Field(
        default_factory=list,
        description="Component names listed in the deployment script",
    )
    warnings: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# CategoryBundler
# ---------------------------------------------------------------------------


class CategoryBundler:
    """Bundles every resolvable example of a category into one project tree."""

    def __init__(
        self,
        config: Config,
        registry: Registry,
        renderer: TemplateRenderer | None = None,
        now: Clock | None = None,
    ) -> None:
        self.config = config
        self.registry = registry
        self.renderer = renderer or TemplateRenderer()
        self.now = now or utc_now

    # -- Public API --------------------------------------------------------

    async def materialize_category(
        self, category_id: str, destination: str | Path
    ) -> BundleResult:
        """Generate the bundle for *category_id* under *destination*.

        Raises:
            CategoryNotFoundError: If *category_id* is not registered.
            ManifestError: If the copied manifest cannot be parsed.
        """
        category = self.registry.resolve_category(category_id)
        root = Path(destination)
        result = BundleResult(category_id=category.id, destination=root)

        console.print(f"\n[bold]Creating category:[/bold] {escape(category.display_name)}")
        console.print(f"[dim]Output: {escape(str(root))}[/dim]")
        console.print(f"[dim]Examples: {len(category.example_ids)}[/dim]")

        # 1. Destination and base template (once for the whole bundle).  The
        #    template's own payload directories are left out so the bundle
        #    holds exactly the bundled payloads.
        await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)
        await copy_template(
            self.config.template_path,
            root,
            [*self.config.excluded_dirs, self.config.components_dir, self.config.tests_dir],
        )
        print_step("Copied base template")
        for subdir in (self.config.components_dir, self.config.tests_dir):
            await asyncio.to_thread((root / subdir).mkdir, parents=True, exist_ok=True)

        # 2. Payloads of every resolvable example
        entries = self._resolve_entries(category, result)
        await self._copy_payloads(entries, root, result)
        print_step(f"Copied {len(result.source_files)} source files")
        print_step(f"Copied {len(result.test_files)} test files")

        # 3. Manifest
        timestamp = self.now().isoformat()
        await asyncio.to_thread(
            patch_manifest,
            root / self.config.manifest_name,
            {
                "name": self._package_name(category),
                "description": category.description,
                "keywords": self._keywords(category),
            },
            self.config.category_metadata_key,
            {
                "name": category.display_name,
                "category": category.id,
                "examples": len(result.bundled_examples),
                "generatedAt": timestamp,
            },
        )
        print_step(f"Updated {self.config.manifest_name}")

        # 4. README and deployment script
        context = self._build_context(category, entries, result)
        await self.renderer.render_to_file(
            "category_readme.md.j2", root / "README.md", context
        )
        print_step("Generated README.md")
        await self.renderer.render_to_file(
            "deploy_script.ts.j2",
            root / self.config.scripts_dir / "deploy.ts",
            context,
        )
        print_step(f"Generated {self.config.scripts_dir}/deploy.ts")

        # 5. Category metadata
        await save_json(
            {
                "category": category.id,
                "name": category.display_name,
                "description": category.description,
                "examples": list(category.example_ids),
                "bundledExamples": list(result.bundled_examples),
                "keyTopics": list(category.key_topics),
                "generatedAt": timestamp,
            },
            root / self.config.category_metadata_file,
        )
        print_step(f"Wrote {self.config.category_metadata_file}")

        print_success(
            f"Category '{category.id}' created in {root} "
            f"({len(result.components)} components)"
        )
        return result

    # -- Steps -------------------------------------------------------------

    def _resolve_entries(
        self, category: CategoryEntry, result: BundleResult
    ) -> list[ExampleEntry]:
        """Resolve the category's example ids, skipping dangling references."""
        entries: list[ExampleEntry] = []
        for example_id in category.example_ids:
            try:
                entry = self.registry.resolve_example(example_id)
            except ExampleNotFoundError:
                message = f"{category.id}: example not found: {example_id}"
                result.skipped_examples.append(example_id)
                result.warnings.append(message)
                print_warning(f"  ! {message}")
                continue
            entries.append(entry)
            result.bundled_examples.append(entry.id)
        return entries

    async def _copy_payloads(
        self, entries: list[ExampleEntry], root: Path, result: BundleResult
    ) -> None:
        """Copy every entry's payloads into the shared directories."""
        sources_by_name: dict[str, str] = {}
        tests_by_name: dict[str, str] = {}

        for entry in entries:
            plan = [
                (self.config.sources_path / entry.source_file,
                 self.config.components_dir, entry.source_name, "source",
                 sources_by_name, result.source_files),
                (self.config.tests_path / entry.test_file,
                 self.config.tests_dir, entry.test_name, "test",
                 tests_by_name, result.test_files),
            ]
            for src, subdir, name, kind, owners, copied in plan:
                if not await copy_payload(src, root / subdir / name):
                    message = f"{entry.id}: {kind} file not found: {src}"
                    result.warnings.append(message)
                    print_warning(f"  ! {message}")
                    continue
                if name in owners:
                    message = (
                        f"{entry.id}: {kind} file {name} overwrites the one "
                        f"from {owners[name]}"
                    )
                    result.warnings.append(message)
                    print_warning(f"  ! {message}")
                else:
                    copied.append(name)
                owners[name] = entry.id

        result.components = list(
            dict.fromkeys(Path(name).stem for name in result.source_files)
        )

    # -- Naming ------------------------------------------------------------

    def _package_name(self, category: CategoryEntry) -> str:
        parts = [self.config.bundle_name_prefix, category.id, "examples"]
        return "-".join(p for p in parts if p).replace("_", "-")

    def _keywords(self, category: CategoryEntry) -> list[str]:
        keywords = [category.id]
        if self.config.bundle_name_prefix:
            keywords.append(self.config.bundle_name_prefix)
        keywords.append("examples")
        return keywords

    # -- Context building --------------------------------------------------

    def _build_context(
        self,
        category: CategoryEntry,
        entries: list[ExampleEntry],
        result: BundleResult,
    ) -> dict[str, Any]:
        """Build the Jinja2 template context for the README and deploy script."""
        return {
            "category": category,
            "examples": entries,
            "source_files": result.source_files,
            "test_files": result.test_files,
            "components": deploy_components(result.components),
            "components_dir": self.config.components_dir,
            "tests_dir": self.config.tests_dir,
            "scripts_dir": self.config.scripts_dir,
            "manifest_name": self.config.manifest_name,
        }


# ---------------------------------------------------------------------------
# Deployment script helpers
# ---------------------------------------------------------------------------


def deploy_components(names: list[str]) -> list[dict[str, str]]:
    """Pair each component name with a unique script identifier.

    Distinct names can sanitise to the same identifier (``my-token`` and
    ``my_token``); later ones get a numeric suffix (``my_token_2``).
    """
    used: set[str] = set()
    components: list[dict[str, str]] = []
    for name in names:
        base = to_identifier(name)
        ident, n = base, 1
        while ident in used:
            n += 1
            ident = f"{base}_{n}"
        used.add(ident)
        components.append({"name": name, "ident": ident})
    return components
