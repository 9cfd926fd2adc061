"""Static catalog of usage-pattern snippets shown on every example page.

The snippets describe generic good and bad patterns for the example domain.
They are not derived from an example's source; the only per-example part is
the ``{component}`` placeholder, replaced with the example's component name.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class SnippetKind(str, Enum):
    """How a snippet is presented on the page."""
    PATTERN = "pattern"
    WRONG = "wrong"
    RIGHT = "right"


class UsageSnippet(BaseModel):
    """One illustrative code snippet."""
    title: str = Field(..., description="Section heading for the snippet")
    code: str = Field(..., description="Snippet body; may contain '{component}'")
    kind: SnippetKind = Field(default=SnippetKind.PATTERN)
    language: str = Field(default="solidity")

    def render_code(self, component: str) -> str:
        return self.code.replace("{component}", component)

    @property
    def heading(self) -> str:
        if self.kind is SnippetKind.WRONG:
            return f"❌ {self.title}"
        if self.kind is SnippetKind.RIGHT:
            return f"✅ {self.title}"
        return self.title


WORKFLOW_STEPS: list[tuple[str, str, str]] = [
    (
        "Setup",
        "Initialize the contract and prepare any encrypted data structures.",
        "",
    ),
    (
        "Encrypt Data",
        "Use FHE to encrypt sensitive information:",
        "euint8 encryptedValue = FHE.asEuint8(plainValue);\n"
        "FHE.allowThis(encryptedValue);\n"
        "FHE.allow(encryptedValue, msg.sender);",
    ),
    (
        "Perform Operations",
        "Execute functions that operate on encrypted data:",
        "// Examples: add, subtract, compare, etc.",
    ),
    (
        "Decrypt (if needed)",
        "Request decryption through async callback:",
        "FHE.requestDecryption(cts, this.callback.selector);",
    ),
]

PATTERNS: list[UsageSnippet] = [
    UsageSnippet(
        title="Pattern 1: Permission Management",
        code=(
            "euint8 encryptedValue = FHE.asEuint8(plainValue);\n"
            "FHE.allowThis(encryptedValue);              // ✅ Contract permission\n"
            "FHE.allow(encryptedValue, msg.sender);      // ✅ User permission"
        ),
    ),
    UsageSnippet(
        title="Pattern 2: Access Control",
        code='require(msg.sender == owner, "Only owner can decrypt");',
    ),
    UsageSnippet(
        title="Pattern 3: Encrypted Operations",
        code="euint8 result = FHE.add(encryptedA, encryptedB);",
    ),
    UsageSnippet(
        title="Pattern 4: Async Decryption",
        code="FHE.requestDecryption(cts, this.processDecryption.selector);",
    ),
]

PITFALLS: list[UsageSnippet] = [
    UsageSnippet(
        title="Forgetting FHE.allowThis()",
        kind=SnippetKind.WRONG,
        code=(
            "// WRONG - missing allowThis\n"
            "FHE.allow(encryptedValue, msg.sender);"
        ),
    ),
    UsageSnippet(
        title="Correct Permission Handling",
        kind=SnippetKind.RIGHT,
        code=(
            "// RIGHT - both permissions\n"
            "FHE.allowThis(encryptedValue);\n"
            "FHE.allow(encryptedValue, msg.sender);"
        ),
    ),
    UsageSnippet(
        title="View Functions with Encrypted Returns",
        kind=SnippetKind.WRONG,
        code=(
            "// WRONG - can't return encrypted from view\n"
            "contract {component} {\n"
            "    function getValue() external view returns (euint8) {\n"
            "        return encryptedValue;\n"
            "    }\n"
            "}"
        ),
    ),
]

RESOURCES: list[tuple[str, str]] = [
    ("FHEVM Documentation", "https://docs.zama.ai/fhevm"),
    ("Hardhat Guide", "https://hardhat.org/"),
    ("Solidity Handbook", "https://docs.soliditylang.org/"),
    ("Zama Community", "https://www.zama.ai/community"),
]
