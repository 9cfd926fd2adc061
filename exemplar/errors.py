"""Exception hierarchy shared by every Exemplar component."""

from __future__ import annotations


class ExemplarError(Exception):
    """Base class for all errors raised by Exemplar."""


class RegistryError(ExemplarError):
    """Raised when a catalog cannot be built (duplicate ids, bad records)."""


class NotFoundError(ExemplarError, LookupError):
    """Raised when an example or category id is not registered.

    Attributes:
        kind: ``"example"`` or ``"category"``.
        key: The id that failed to resolve.
        available: Every registered id of that kind, in registration order.
    """

    kind = "entry"

    def __init__(self, key: str, available: list[str] | None = None) -> None:
        self.key = key
        self.available = list(available or [])
        message = f"{self.kind.capitalize()} not found: {key}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ExampleNotFoundError(NotFoundError):
    """Raised when an example id is not registered."""

    kind = "example"


class CategoryNotFoundError(NotFoundError):
    """Raised when a category id is not registered."""

    kind = "category"


class ManifestError(ExemplarError):
    """Raised when a project manifest is missing or cannot be parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot patch manifest {path}: {reason}")
