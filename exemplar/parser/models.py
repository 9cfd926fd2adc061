"""Pydantic v2 models for the payload text extractors."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ExtractedDoc(BaseModel):
    """What the extractors found in one example's source and test payloads.

    Produced per documentation run and never persisted on its own; only the
    rendered Markdown page is written to disk.
    """
    comment_blocks: list[str] = Field(
        default_factory=list,
        description="Raw comment blocks from the source, marker lines included",
    )
    test_case_titles: list[str] = Field(
        default_factory=list,
        description="Titles of test-case declarations, duplicates preserved",
    )

    @property
    def test_count(self) -> int:
        return len(self.test_case_titles)
