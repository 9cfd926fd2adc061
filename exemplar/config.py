"""Exemplar configuration.

Centralised, typed configuration for the scaffolding and documentation
engine. All settings use Pydantic v2 models so they can be validated at
construction time and serialised to/from JSON or environment variables
without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


DEFAULT_EXCLUDED_DIRS: list[str] = [
    "node_modules",
    "artifacts",
    "cache",
    ".git",
    "__pycache__",
    "dist",
    "build",
    "coverage",
]


class Config(BaseModel):
    """Global Exemplar configuration.

    Holds the repository layout the engine reads from and the naming
    conventions it writes with.  Instances are typically created once by the
    CLI entry point and then passed to the materializer, bundler and
    documentation generator.
    """

    root_dir: Path = Field(default=Path("."), description="Repository root")
    template_dir: str = Field(default="base-template")
    sources_dir: str = Field(
        default="components", description="Where example source payloads live"
    )
    tests_source_dir: str = Field(
        default="tests", description="Where example test payloads live"
    )

    # Layout of a generated project.
    components_dir: str = Field(default="components")
    tests_dir: str = Field(default="tests")
    scripts_dir: str = Field(default="scripts")
    manifest_name: str = Field(default="package.json")
    excluded_dirs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_DIRS)
    )

    # Generated metadata.
    example_metadata_key: str = Field(default="exampleMetadata")
    category_metadata_key: str = Field(default="categoryMetadata")
    example_metadata_file: str = Field(default=".example-metadata.json")
    category_metadata_file: str = Field(default=".category-metadata.json")
    bundle_name_prefix: str = Field(default="fhevm")

    # Documentation.
    docs_dir: str = Field(default="docs")
    summary_name: str = Field(default="SUMMARY.md")

    registry_file: Optional[Path] = Field(
        default=None, description="YAML/JSON catalog; built-in catalog when unset"
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def template_path(self) -> Path:
        """Root of the base template tree."""
        return self.root_dir / self.template_dir

    @property
    def sources_path(self) -> Path:
        """Directory that example ``source_file`` paths are relative to."""
        return self.root_dir / self.sources_dir

    @property
    def tests_path(self) -> Path:
        """Directory that example ``test_file`` paths are relative to."""
        return self.root_dir / self.tests_source_dir

    @property
    def docs_path(self) -> Path:
        """Default documentation output root."""
        return self.root_dir / self.docs_dir

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            EXEMPLAR_ROOT, EXEMPLAR_TEMPLATE_DIR, EXEMPLAR_SOURCES_DIR,
            EXEMPLAR_TESTS_DIR, EXEMPLAR_REGISTRY, EXEMPLAR_BUNDLE_PREFIX.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("EXEMPLAR_ROOT"):
            kwargs["root_dir"] = Path(os.environ["EXEMPLAR_ROOT"])
        if os.environ.get("EXEMPLAR_TEMPLATE_DIR"):
            kwargs["template_dir"] = os.environ["EXEMPLAR_TEMPLATE_DIR"]
        if os.environ.get("EXEMPLAR_SOURCES_DIR"):
            kwargs["sources_dir"] = os.environ["EXEMPLAR_SOURCES_DIR"]
        if os.environ.get("EXEMPLAR_TESTS_DIR"):
            kwargs["tests_source_dir"] = os.environ["EXEMPLAR_TESTS_DIR"]
        if os.environ.get("EXEMPLAR_REGISTRY"):
            kwargs["registry_file"] = Path(os.environ["EXEMPLAR_REGISTRY"])
        # An empty prefix is meaningful (no prefix), so test for presence.
        if "EXEMPLAR_BUNDLE_PREFIX" in os.environ:
            kwargs["bundle_name_prefix"] = os.environ["EXEMPLAR_BUNDLE_PREFIX"]

        return cls(**kwargs)
