"""Exemplar scaffolder -- materializes example projects from the base template.

Copies the base template tree, overlays example payloads, patches the
manifest and renders README / deployment files.

Quick usage::

    from exemplar.config import Config
    from exemplar.registry import default_registry
    from exemplar.scaffolder import CategoryBundler, ProjectMaterializer

    config = Config(root_dir=Path("."))
    registry = default_registry()
    result = await ProjectMaterializer(config, registry).materialize(
        "fhe-counter", "./fhe-counter-example"
    )
    bundle = await CategoryBundler(config, registry).materialize_category(
        "basic", "./basic-examples"
    )
"""

from exemplar.scaffolder.bundler import BundleResult, CategoryBundler
from exemplar.scaffolder.generator import MaterializeResult, ProjectMaterializer
from exemplar.scaffolder.manifest import patch_manifest, read_manifest
from exemplar.scaffolder.templates import TemplateRenderer

__all__ = [
    "BundleResult",
    "CategoryBundler",
    "MaterializeResult",
    "ProjectMaterializer",
    "TemplateRenderer",
    "patch_manifest",
    "read_manifest",
]
