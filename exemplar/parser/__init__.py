"""Exemplar payload extractors.

Pure text scanners that pull documentation comment blocks out of example
sources and test-case titles out of example test files.

Usage::

    from exemplar.parser import extract_comment_blocks, extract_test_case_titles

    blocks = extract_comment_blocks(Path("FHECounter.sol").read_text())
    titles = extract_test_case_titles(Path("FHECounter.ts").read_text())
"""

from exemplar.parser.extractor import (
    extract_comment_blocks,
    extract_doc,
    extract_test_case_titles,
    split_source,
)
from exemplar.parser.models import ExtractedDoc

__all__ = [
    "ExtractedDoc",
    "extract_comment_blocks",
    "extract_doc",
    "extract_test_case_titles",
    "split_source",
]
