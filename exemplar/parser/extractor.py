"""Text extractors for example payload files.

Scans a source payload for documentation comment blocks and a test payload
for test-case declarations.  Uses pure line and regex scanning -- the payload
language is never parsed, so malformed input degrades to partial results
instead of errors.
"""

from __future__ import annotations

import re

from .models import ExtractedDoc


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

BLOCK_OPEN_MARKER = "/**"
BLOCK_CLOSE_MARKER = "*/"
TEST_CALL = "it"

_QUOTED_TITLE = r"""\(\s*(['"`])([^'"`]+)['"`]"""
_TEST_PATTERN = re.compile(rf"\b{TEST_CALL}{_QUOTED_TITLE}")


# ---------------------------------------------------------------------------
# Comment blocks
# ---------------------------------------------------------------------------

def _scan_blocks(
    text: str, open_marker: str, close_marker: str
) -> tuple[list[str], list[str]]:
    """Split *text* into comment blocks and the lines outside them.

    A block starts at a line containing *open_marker* and ends at the first
    line (the opening line included) containing *close_marker*.  An
    unterminated block runs to the end of the text.
    """
    blocks: list[str] = []
    outside: list[str] = []
    current: list[str] = []
    in_block = False

    for line in text.splitlines():
        if not in_block and open_marker in line:
            in_block = True
        if in_block:
            current.append(line)
            if close_marker in line:
                blocks.append("\n".join(current))
                current = []
                in_block = False
        else:
            outside.append(line)

    if current:
        blocks.append("\n".join(current))
    return blocks, outside


def extract_comment_blocks(
    text: str,
    open_marker: str = BLOCK_OPEN_MARKER,
    close_marker: str = BLOCK_CLOSE_MARKER,
) -> list[str]:
    """Return every documentation comment block in *text*, in order.

    Blocks are returned as raw text, marker lines included.  Nesting is not
    detected.

    Examples::

        extract_comment_blocks("/** a */\\ncode\\n/**\\n * b\\n */")
        -> ["/** a */", "/**\\n * b\\n */"]
    """
    blocks, _ = _scan_blocks(text, open_marker, close_marker)
    return blocks


def split_source(
    text: str,
    open_marker: str = BLOCK_OPEN_MARKER,
    close_marker: str = BLOCK_CLOSE_MARKER,
) -> tuple[str, str]:
    """Split *text* into ``(comments, code)``.

    Every line inside a comment block goes to ``comments``; every other line
    goes to ``code``.  Both strings end with a newline when non-empty.
    """
    blocks, outside = _scan_blocks(text, open_marker, close_marker)
    comments = "".join(f"{block}\n" for block in blocks)
    code = "".join(f"{line}\n" for line in outside)
    return comments, code


# ---------------------------------------------------------------------------
# Test-case titles
# ---------------------------------------------------------------------------

def extract_test_case_titles(text: str, call: str = TEST_CALL) -> list[str]:
    """Return the title of every ``it("...")`` declaration in *text*.

    The title is the first argument when it is a quoted literal (single,
    double or backtick quotes).  The first quote character of any kind ends
    the literal.  Order and duplicates are preserved.

    Examples::

        extract_test_case_titles('it("adds", fn); it(`subs`, fn)')
        -> ["adds", "subs"]
    """
    if call == TEST_CALL:
        pattern = _TEST_PATTERN
    else:
        pattern = re.compile(rf"\b{re.escape(call)}{_QUOTED_TITLE}")
    return [match.group(2) for match in pattern.finditer(text)]


# ---------------------------------------------------------------------------
# Combined
# ---------------------------------------------------------------------------

def extract_doc(source_text: str, test_text: str) -> ExtractedDoc:
    """Run both extractors over an example's payload texts."""
    return ExtractedDoc(
        comment_blocks=extract_comment_blocks(source_text),
        test_case_titles=extract_test_case_titles(test_text),
    )
