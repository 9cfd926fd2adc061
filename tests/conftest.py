"""Shared pytest fixtures for the Exemplar test suite.

Provides reusable fixtures for:
- A miniature repository (base template, source payloads, test payloads)
- A small registry covering resolvable, dangling and colliding examples
- A Config pointing at the miniature repository
- A fixed clock so generated trees are byte-for-byte reproducible
"""

from __future__ import annotations

import json
import textwrap
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest

from exemplar.config import Config
from exemplar.registry import Registry


# ---------------------------------------------------------------------------
# Payload contents
# ---------------------------------------------------------------------------

ALPHA_SOURCE = textwrap.dedent("""\
    // SPDX-License-Identifier: MIT
    pragma solidity ^0.8.24;

    /**
     * @title Alpha
     * @notice Minimal encrypted counter.
     */
    contract Alpha {
        /** @dev current value */
        uint256 private value;

        /**
         * Increment the value.
         */
        function increment() external {
            value += 1;
        }
    }
""")

ALPHA_TESTS = textwrap.dedent("""\
    import { expect } from "chai";

    describe("Alpha", function () {
      beforeEach(async function () {
        const submit = (x) => x;
        submit("not a test");
      });

      it("t1", async function () {
        expect(1).to.equal(1);
      });

      it('t2', async function () {});
      it(`t3`, async () => {});
    });
""")

BASE_MANIFEST: dict[str, Any] = {
    "name": "base-template",
    "version": "1.0.0",
    "description": "Base template",
    "scripts": {"compile": "hardhat compile", "test": "hardhat test"},
    "devDependencies": {"hardhat": "^2.19.0"},
    "license": "MIT",
}

FIXED_NOW = datetime(2026, 1, 15, 10, 30, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """A miniature repository with a base template and example payloads.

    Layout::

        repo/base-template/package.json
        repo/base-template/hardhat.config.ts
        repo/base-template/scripts/deploy.ts
        repo/base-template/components/Template.sol
        repo/base-template/tests/Template.ts
        repo/base-template/node_modules/dep/index.js   (excluded)
        repo/base-template/lib/cache/stale.json        (excluded, nested)
        repo/base-template/lib/keep.txt
        repo/base-template/.git/HEAD                   (excluded)
        repo/components/Alpha.src
        repo/components/Beta.src
        repo/components/nested/Alpha.src
        repo/tests/Alpha.spec
        repo/tests/Beta.spec
    """
    root = tmp_path / "repo"
    template = root / "base-template"

    _write(template / "package.json", json.dumps(BASE_MANIFEST, indent=2))
    _write(template / "hardhat.config.ts", "export default {};\n")
    _write(template / "scripts" / "deploy.ts", "// template deploy script\n")
    _write(template / "components" / "Template.sol", "contract Template {}\n")
    _write(template / "tests" / "Template.ts", "it('template', () => {});\n")
    _write(template / "node_modules" / "dep" / "index.js", "module.exports = 1;\n")
    _write(template / "lib" / "cache" / "stale.json", "{}\n")
    _write(template / "lib" / "keep.txt", "keep me\n")
    _write(template / ".git" / "HEAD", "ref: refs/heads/main\n")

    _write(root / "components" / "Alpha.src", ALPHA_SOURCE)
    _write(root / "components" / "Beta.src", "contract Beta {}\n")
    _write(root / "components" / "nested" / "Alpha.src", "contract AlphaPrime {}\n")
    _write(root / "tests" / "Alpha.spec", ALPHA_TESTS)
    _write(root / "tests" / "Beta.spec", "it(\"beta works\", () => {});\n")
    yield root


@pytest.fixture
def config(repo_root: Path) -> Config:
    """Config rooted at the miniature repository."""
    return Config(root_dir=repo_root)


@pytest.fixture
def alpha_source() -> str:
    return ALPHA_SOURCE


@pytest.fixture
def alpha_tests() -> str:
    return ALPHA_TESTS


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same UTC instant."""
    return lambda: FIXED_NOW


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

def _example(
    example_id: str,
    category: str,
    source: str,
    test: str,
    keywords: list[str],
    **extra: Any,
) -> dict[str, Any]:
    return {
        "id": example_id,
        "displayName": example_id.replace("_", " ").title(),
        "description": f"The {example_id} example",
        "category": category,
        "sourceFile": source,
        "testFile": test,
        "complexity": "beginner",
        "keywords": keywords,
        "documentation": {
            "overview": f"Overview of {example_id}.",
            "keyFeatures": [f"{example_id} feature one", f"{example_id} feature two"],
            "learningOutcomes": [f"{example_id} outcome"],
        },
        **extra,
    }


@pytest.fixture
def registry_data() -> dict[str, Any]:
    """Raw catalog document used by the ``registry`` fixture."""
    return {
        "examples": [
            _example("alpha", "basic", "Alpha.src", "Alpha.spec", ["x"]),
            _example(
                "beta_plus", "advanced", "Beta.src", "Beta.spec", ["y", "z"],
                complexity="advanced", estimatedTime="1 hour",
            ),
            _example("gamma", "orphan", "Gamma.src", "Gamma.spec", []),
            _example("delta", "advanced", "nested/Alpha.src", "Delta.spec", ["d"]),
        ],
        "categories": [
            {
                "id": "basic",
                "displayName": "Basic Examples",
                "description": "Foundational examples",
                "exampleIds": ["alpha", "ghost"],
                "keyTopics": ["Encryption basics", "Testing"],
            },
            {
                "id": "advanced",
                "displayName": "Advanced Examples",
                "description": "Harder examples",
                "exampleIds": ["beta_plus", "gamma"],
                "keyTopics": ["Access control"],
            },
            {
                "id": "mixed",
                "displayName": "Mixed Examples",
                "description": "Examples whose payload names collide",
                "exampleIds": ["alpha", "delta"],
                "keyTopics": [],
            },
            {
                "id": "empty",
                "displayName": "Empty",
                "description": "Nothing resolves here",
                "exampleIds": ["ghost"],
                "keyTopics": [],
            },
        ],
    }


@pytest.fixture
def registry(registry_data: dict[str, Any]) -> Registry:
    """Registry built from ``registry_data``."""
    return Registry.from_dict(registry_data)
