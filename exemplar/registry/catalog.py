"""The example registry: a read-only catalog of examples and categories.

A ``Registry`` is built once (from the compiled-in catalog or from a YAML /
JSON document) and then passed by reference to every component.  It exposes
lookups and listings only; there is no way to mutate it after construction.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

import yaml
from pydantic import ValidationError

from exemplar.errors import CategoryNotFoundError, ExampleNotFoundError, RegistryError

from .models import CategoryEntry, ExampleEntry


class Registry:
    """Immutable catalog of :class:`ExampleEntry` and :class:`CategoryEntry`.

    Registration order is preserved and is the order every listing, summary
    and discovery table uses.
    """

    __slots__ = ("_examples", "_categories")

    def __init__(
        self,
        examples: Iterable[ExampleEntry | Mapping[str, Any]] = (),
        categories: Iterable[CategoryEntry | Mapping[str, Any]] = (),
    ) -> None:
        self._examples: Mapping[str, ExampleEntry] = MappingProxyType(
            _index(ExampleEntry, examples, "example")
        )
        self._categories: Mapping[str, CategoryEntry] = MappingProxyType(
            _index(CategoryEntry, categories, "category")
        )

    # -- Construction ------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Registry":
        """Build a registry from ``{"examples": [...], "categories": [...]}``."""
        if not isinstance(data, Mapping):
            raise RegistryError("Registry document must be a mapping")
        examples = data.get("examples") or []
        categories = data.get("categories") or []
        if not isinstance(examples, list) or not isinstance(categories, list):
            raise RegistryError("'examples' and 'categories' must be lists")
        return cls(examples, categories)

    @classmethod
    def from_file(cls, path: str | Path) -> "Registry":
        """Load a registry from a YAML or JSON file.

        JSON is a subset of YAML, so both formats go through the same loader.
        """
        file_path = Path(path)
        try:
            raw = file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise RegistryError(f"Cannot read registry file {file_path}: {exc}") from exc
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise RegistryError(f"Cannot parse registry file {file_path}: {exc}") from exc
        return cls.from_dict(data or {})

    # -- Lookups -----------------------------------------------------------

    def resolve_example(self, example_id: str) -> ExampleEntry:
        """Return the example registered under *example_id*.

        Raises:
            ExampleNotFoundError: If no such example is registered.
        """
        try:
            return self._examples[example_id]
        except KeyError:
            raise ExampleNotFoundError(example_id, list(self._examples)) from None

    def resolve_category(self, category_id: str) -> CategoryEntry:
        """Return the category registered under *category_id*.

        Raises:
            CategoryNotFoundError: If no such category is registered.
        """
        try:
            return self._categories[category_id]
        except KeyError:
            raise CategoryNotFoundError(category_id, list(self._categories)) from None

    def has_example(self, example_id: str) -> bool:
        return example_id in self._examples

    def has_category(self, category_id: str) -> bool:
        return category_id in self._categories

    # -- Listings ----------------------------------------------------------

    def list_examples(self) -> list[ExampleEntry]:
        """Every example, in registration order."""
        return list(self._examples.values())

    def list_categories(self) -> list[CategoryEntry]:
        """Every category, in registration order."""
        return list(self._categories.values())

    def examples_in_category(self, category_id: str) -> list[ExampleEntry]:
        """Examples whose own ``category`` field is *category_id*."""
        return [e for e in self._examples.values() if e.category == category_id]

    def __len__(self) -> int:
        return len(self._examples)

    def __repr__(self) -> str:
        return (
            f"Registry(examples={list(self._examples)!r}, "
            f"categories={list(self._categories)!r})"
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _index(model: type, records: Iterable[Any], kind: str) -> dict[str, Any]:
    """Validate *records* into *model* instances keyed by id.

    Duplicate ids are rejected rather than silently shadowed.
    """
    indexed: dict[str, Any] = {}
    for record in records:
        if not isinstance(record, model):
            try:
                record = model.model_validate(record)
            except ValidationError as exc:
                raise RegistryError(f"Invalid {kind} record: {exc}") from exc
        if record.id in indexed:
            raise RegistryError(f"Duplicate {kind} id: {record.id}")
        indexed[record.id] = record
    return indexed
