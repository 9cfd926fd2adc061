"""Single-example project materializer.

Takes one registry entry and produces a standalone project tree: the base
template (minus build and VCS directories), the example's source and test
payloads, a patched manifest, a generated README and a generation-metadata
file.
"""

from __future__ import annotations

import asyncio
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Iterable

from pydantic import BaseModel, Field
from rich.markup import escape

from exemplar.config import Config
from exemplar.registry import ExampleEntry, Registry
from exemplar.utils import console, print_step, print_success, print_warning, save_json

from .manifest import patch_manifest
from .templates import TemplateRenderer


Clock = Callable[[], datetime]


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class MaterializeResult(BaseModel):
    """What a single-example materialization produced."""

    example_id: str = Field(..., description="Registry id that was materialized")
    destination: Path = Field(..., description="Root of the generated project")
    copied_files: list[str] = Field(
        default_factory=list,
        description="Payload files copied, relative to the destination",
    )
    warnings: list[str] = Field(
        default_factory=list, description="Non-fatal problems met along the way"
    )

    @property
    def complete(self) -> bool:
        """``True`` when both payload files were copied."""
        return not self.warnings


# ---------------------------------------------------------------------------
# Main materializer
# ---------------------------------------------------------------------------


class ProjectMaterializer:
    """Materializes one registered example into a standalone project tree.

    Only an unknown example id is fatal before any file is touched.  Missing
    payload files are reported as warnings and skipped; any I/O failure after
    that propagates to the caller and may leave a partially written tree.
    """

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

    async def materialize(
        self, example_id: str, destination: str | Path
    ) -> MaterializeResult:
        """Generate the project for *example_id* under *destination*.

        Args:
            example_id: Registry id of the example.
            destination: Project root; created if absent.  Existing files at
                the same relative paths are overwritten.

        Returns:
            A :class:`MaterializeResult` describing the generated tree.

        Raises:
            ExampleNotFoundError: If *example_id* is not registered.
            ManifestError: If the copied manifest cannot be parsed.
        """
        entry = self.registry.resolve_example(example_id)
        root = Path(destination)
        result = MaterializeResult(example_id=entry.id, destination=root)

        console.print(f"\n[bold]Creating example:[/bold] {escape(entry.display_name)}")
        console.print(f"[dim]Output: {escape(str(root))}[/dim]")

        # 1. Destination and base template
        await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)
        await copy_template(self.config.template_path, root, self.config.excluded_dirs)
        print_step("Copied base template")

        # 2. Payload files
        await self._copy_payloads(entry, root, result)

        # 3. Manifest
        timestamp = self.now().isoformat()
        await asyncio.to_thread(
            patch_manifest,
            root / self.config.manifest_name,
            {
                "name": entry.package_name,
                "description": entry.description,
                "keywords": list(entry.keywords),
            },
            self.config.example_metadata_key,
            {
                "name": entry.display_name,
                "category": entry.category,
                "complexity": entry.complexity.value,
                "generatedAt": timestamp,
            },
        )
        print_step(f"Updated {self.config.manifest_name}")

        # 4. README
        await self.renderer.render_to_file(
            "example_readme.md.j2", root / "README.md", self._build_context(entry)
        )
        print_step("Generated README.md")

        # 5. Generation metadata
        await save_json(
            {
                "exampleId": entry.id,
                "example": entry.model_dump(mode="json", by_alias=True),
                "generatedAt": timestamp,
            },
            root / self.config.example_metadata_file,
        )
        print_step(f"Wrote {self.config.example_metadata_file}")

        print_success(f"Example '{entry.id}' created in {root}")
        return result

    # -- Steps -------------------------------------------------------------

    async def _copy_payloads(
        self, entry: ExampleEntry, root: Path, result: MaterializeResult
    ) -> None:
        """Copy the source and test payloads, warning about missing ones."""
        payloads = [
            (self.config.sources_path / entry.source_file,
             self.config.components_dir, entry.source_name, "source"),
            (self.config.tests_path / entry.test_file,
             self.config.tests_dir, entry.test_name, "test"),
        ]
        for src, subdir, name, kind in payloads:
            relative = f"{subdir}/{name}"
            if await copy_payload(src, root / subdir / name):
                result.copied_files.append(relative)
                print_step(f"Copied {kind}: {relative}")
            else:
                message = f"{entry.id}: {kind} file not found: {src}"
                result.warnings.append(message)
                print_warning(f"  ! {message}")

    def _build_context(self, entry: ExampleEntry) -> dict[str, Any]:
        """Build the Jinja2 template context for the example README."""
        return {
            "entry": entry,
            "components_dir": self.config.components_dir,
            "tests_dir": self.config.tests_dir,
            "scripts_dir": self.config.scripts_dir,
        }


# ---------------------------------------------------------------------------
# Shared copy helpers
# ---------------------------------------------------------------------------


async def copy_template(
    template_root: Path, destination: Path, excluded_dirs: Iterable[str]
) -> None:
    """Recursively copy *template_root* into *destination*.

    Directories whose name is in *excluded_dirs* are skipped at any depth.
    Files are copied byte-for-byte and overwrite existing files.

    Raises:
        FileNotFoundError: If *template_root* is not a directory.
    """
    if not template_root.is_dir():
        raise FileNotFoundError(f"Base template not found: {template_root}")
    excluded = frozenset(excluded_dirs)

    def _ignore(directory: str, names: list[str]) -> set[str]:
        return {
            name for name in names
            if name in excluded and (Path(directory) / name).is_dir()
        }

    await asyncio.to_thread(
        shutil.copytree,
        template_root,
        destination,
        ignore=_ignore,
        dirs_exist_ok=True,
    )


async def copy_payload(src: Path, dest: Path) -> bool:
    """Copy one payload file, returning ``False`` when *src* does not exist."""
    if not src.is_file():
        return False

    def _copy() -> None:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dest)

    await asyncio.to_thread(_copy)
    return True


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
