"""Structured patching of a generated project's manifest file.

The manifest (``package.json`` by default) is copied from the base template
and then patched in place: a fixed set of top-level fields is replaced, one
nested metadata object is set, and every other field is preserved in its
original position.  Manifests that cannot be parsed as a JSON object are
rejected rather than patched on a best-effort basis.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from exemplar.errors import ManifestError
from exemplar.utils import dump_json


def read_manifest(path: Path) -> dict[str, Any]:
    """Load the manifest at *path* as a JSON object.

    Raises:
        ManifestError: If the file is missing, is not valid JSON, or its top
            level is not an object.
    """
    if not path.is_file():
        raise ManifestError(str(path), "file not found")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(str(path), f"invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ManifestError(str(path), "top-level value is not an object")
    return data


def patch_manifest(
    path: Path,
    fields: dict[str, Any],
    metadata_key: str,
    metadata: dict[str, Any],
) -> dict[str, Any]:
    """Patch *fields* and ``metadata_key: metadata`` into the manifest at *path*.

    Existing keys keep their position; new keys are appended.  The whole file
    is rewritten (indent 2, trailing newline), so patching the same input
    twice produces the same document.

    Returns:
        The patched manifest as written.
    """
    manifest = read_manifest(path)
    manifest.update(fields)
    manifest[metadata_key] = metadata
    path.write_text(dump_json(manifest), encoding="utf-8")
    return manifest
