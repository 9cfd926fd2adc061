"""Exemplar example registry.

A read-only catalog of examples and the categories that group them.

Usage::

    from exemplar.registry import Registry, default_registry

    registry = default_registry()
    entry = registry.resolve_example("fhe-counter")
    print(entry.display_name, entry.source_file)

    registry = Registry.from_file("catalog.yaml")
"""

from exemplar.registry.builtin import default_registry, load_registry
from exemplar.registry.catalog import Registry
from exemplar.registry.models import (
    CategoryEntry,
    Complexity,
    ExampleDocumentation,
    ExampleEntry,
)

__all__ = [
    "CategoryEntry",
    "Complexity",
    "ExampleDocumentation",
    "ExampleEntry",
    "Registry",
    "default_registry",
    "load_registry",
]
