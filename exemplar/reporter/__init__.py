"""Exemplar documentation generator.

Renders one Markdown page per registered example from its registry metadata
and extracted payload text, plus a ``SUMMARY.md`` index grouped by category.

Usage::

    from exemplar.reporter import DocGenerator

    generator = DocGenerator(config, registry)
    await generator.generate_docs("fhe-counter", "./docs")
    await generator.generate_all_docs("./docs")
"""

from exemplar.reporter.example_docs import DocGenerator
from exemplar.reporter.patterns import PATTERNS, PITFALLS, SnippetKind, UsageSnippet
from exemplar.reporter.summary import SummaryGenerator

__all__ = [
    "DocGenerator",
    "PATTERNS",
    "PITFALLS",
    "SnippetKind",
    "SummaryGenerator",
    "UsageSnippet",
]
