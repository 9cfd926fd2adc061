"""Pydantic v2 models for the example registry.

Defines the records the catalog is built from: examples, their structured
documentation block, and the categories that group them.  Records are frozen
after validation and use camelCase aliases so the same models load from and
dump to the catalog document format (``displayName``, ``sourceFile``, ...).
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


_RECORD_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    alias_generator=to_camel,
    extra="forbid",
)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Complexity(str, Enum):
    """Descriptive difficulty level of an example. Has no behavioural effect."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


DEFAULT_ESTIMATED_TIME: dict[Complexity, str] = {
    Complexity.BEGINNER: "15-20 minutes",
    Complexity.INTERMEDIATE: "20-30 minutes",
    Complexity.ADVANCED: "30-45 minutes",
}


# ---------------------------------------------------------------------------
# Example records
# ---------------------------------------------------------------------------

class ExampleDocumentation(BaseModel):
    """Hand-written documentation block attached to an example."""
    model_config = _RECORD_CONFIG

    overview: str = Field(default="", description="One-paragraph overview")
    key_features: list[str] = Field(default_factory=list)
    learning_outcomes: list[str] = Field(default_factory=list)


class ExampleEntry(BaseModel):
    """One reusable example: a source payload, a test payload and metadata."""
    model_config = _RECORD_CONFIG

    id: str = Field(..., min_length=1, description="Unique, stable registry key")
    display_name: str = Field(..., description="Human-readable name")
    description: str = Field(default="")
    category: str = Field(..., min_length=1, description="Category id this example belongs to")
    complexity: Complexity = Field(default=Complexity.INTERMEDIATE)
    source_file: str = Field(..., min_length=1, description="Source payload path")
    test_file: str = Field(..., min_length=1, description="Test payload path")
    keywords: list[str] = Field(default_factory=list)
    documentation: ExampleDocumentation = Field(default_factory=ExampleDocumentation)
    estimated_time: Optional[str] = Field(
        default=None, description="Reading/working time shown on doc pages"
    )

    @property
    def source_name(self) -> str:
        """File name of the source payload (no directories)."""
        return PurePosixPath(self.source_file).name

    @property
    def test_name(self) -> str:
        """File name of the test payload (no directories)."""
        return PurePosixPath(self.test_file).name

    @property
    def component_name(self) -> str:
        """Source file name without its extension, e.g. ``FHECounter``."""
        return PurePosixPath(self.source_file).stem

    @property
    def package_name(self) -> str:
        """Manifest ``name`` for a project generated from this example."""
        return self.id.replace("_", "-")

    @property
    def effective_estimated_time(self) -> str:
        return self.estimated_time or DEFAULT_ESTIMATED_TIME[self.complexity]


# ---------------------------------------------------------------------------
# Category records
# ---------------------------------------------------------------------------

class CategoryEntry(BaseModel):
    """A named, ordered grouping of example ids.

    ``example_ids`` may reference ids that are not registered; those dangling
    references are skipped with a warning when a category is bundled.
    """
    model_config = _RECORD_CONFIG

    id: str = Field(..., min_length=1)
    display_name: str = Field(...)
    description: str = Field(default="")
    example_ids: list[str] = Field(default_factory=list)
    key_topics: list[str] = Field(default_factory=list)
