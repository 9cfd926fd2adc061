"""Unit tests for exemplar.utils.

Covers:
- to_identifier
- JSON dump/save
- write_text, read_text_if_exists
- Rich output helpers
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from exemplar.utils import (
    dump_json,
    print_error,
    print_step,
    print_success,
    print_warning,
    read_text_if_exists,
    save_json,
    to_identifier,
    write_text,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------


class TestToIdentifier:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("FHECounter", "FHECounter"),
            ("my-contract", "my_contract"),
            ("2Fast", "_2Fast"),
            ("$dollar", "$dollar"),
            ("", "_"),
        ],
    )
    def test_identifier(self, raw, expected):
        assert to_identifier(raw) == expected


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


class TestJson:
    def test_dump_json_format(self):
        assert dump_json({"a": [1], "b": "é"}) == '{\n  "a": [\n    1\n  ],\n  "b": "é"\n}\n'

    @pytest.mark.asyncio
    async def test_save_json(self, tmp_path: Path):
        path = tmp_path / "deep" / "out.json"
        await save_json({"x": True}, path)
        assert json.loads(path.read_text(encoding="utf-8")) == {"x": True}
        assert path.read_text(encoding="utf-8").endswith("\n")


# ---------------------------------------------------------------------------
# File system
# ---------------------------------------------------------------------------


class TestFileHelpers:
    @pytest.mark.asyncio
    async def test_write_text(self, tmp_path: Path):
        path = await write_text(tmp_path / "x" / "y.txt", "hello")
        assert path.read_text(encoding="utf-8") == "hello"

    def test_read_text_if_exists(self, tmp_path: Path):
        path = tmp_path / "f.txt"
        assert read_text_if_exists(path) == ""
        path.write_text("content", encoding="utf-8")
        assert read_text_if_exists(path) == "content"

    def test_read_text_if_exists_directory(self, tmp_path: Path):
        assert read_text_if_exists(tmp_path) == ""

    def test_read_text_if_exists_invalid_utf8(self, tmp_path: Path):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"it(\"caf\xe9 ok\", fn)\n")
        assert read_text_if_exists(path) == "it(\"caf\ufffd ok\", fn)\n"


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    def test_messages(self, capsys):
        print_step("copied")
        print_success("done")
        print_warning("careful")
        print_error("broken")
        out = capsys.readouterr().out
        assert "+ copied" in out
        assert "done" in out
        assert "careful" in out
        assert "broken" in out

    def test_messages_are_not_markup(self, capsys):
        print_step("out[bold]/README.md")
        print_warning("alpha: source file not found: [red]x.sol")
        out = capsys.readouterr().out
        assert "out[bold]/README.md" in out
        assert "[red]x.sol" in out
