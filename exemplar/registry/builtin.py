"""The compiled-in example catalog.

Used whenever no registry file is configured.  Records are plain dicts in the
catalog document format and are validated when the registry is built.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .catalog import Registry


BUILTIN_EXAMPLES: list[dict[str, Any]] = [
    {
        "id": "confidential-supplier-management",
        "displayName": "Confidential Supplier Management System",
        "description": (
            "Privacy-preserving supplier management with encrypted ratings "
            "and comparisons"
        ),
        "category": "enterprise",
        "sourceFile": "SupplierManagement.sol",
        "testFile": "SupplierManagement.ts",
        "complexity": "advanced",
        "keywords": ["access-control", "privacy", "enterprise", "supplier-management"],
        "estimatedTime": "30-45 minutes",
        "documentation": {
            "overview": (
                "Demonstrates FHE-based supplier management with encrypted "
                "ratings, access control, and privacy-preserving operations."
            ),
            "keyFeatures": [
                "Encrypted supplier ratings (euint8)",
                "Privacy-preserving comparisons",
                "Owner-only decryption access",
                "Async callback-based decryption",
                "Proper FHE permission handling",
            ],
            "learningOutcomes": [
                "How to encrypt sensitive business data",
                "Managing permissions for encrypted values",
                "Implementing access control patterns",
                "Async decryption workflows",
                "Real-world enterprise applications of FHE",
            ],
        },
    },
    {
        "id": "fhe-counter",
        "displayName": "FHE Counter",
        "description": "Simple encrypted counter demonstrating basic FHE operations",
        "category": "basic",
        "sourceFile": "FHECounter.sol",
        "testFile": "FHECounter.ts",
        "complexity": "beginner",
        "keywords": ["counter", "arithmetic", "encryption"],
        "estimatedTime": "15-20 minutes",
        "documentation": {
            "overview": (
                "Demonstrates simple FHE counter with increment and decrement "
                "operations."
            ),
            "keyFeatures": [
                "Encrypted counter state",
                "Arithmetic operations on encrypted values",
                "Basic permission handling",
                "Event logging",
            ],
            "learningOutcomes": [
                "How to work with encrypted integers",
                "Basic FHE operations (add, subtract)",
                "Permission management",
                "Testing FHE contracts",
            ],
        },
    },
]

BUILTIN_CATEGORIES: list[dict[str, Any]] = [
    {
        "id": "enterprise",
        "displayName": "Enterprise Applications",
        "description": "Production-grade FHE examples for business applications",
        "exampleIds": ["confidential-supplier-management"],
        "keyTopics": [
            "Privacy-preserving business logic",
            "Access control patterns",
            "Enterprise data protection",
            "Real-world FHE applications",
        ],
    },
    {
        "id": "basic",
        "displayName": "Basic Examples",
        "description": "Foundational FHEVM concepts and operations",
        "exampleIds": ["fhe-counter"],
        "keyTopics": [
            "Encryption basics",
            "Arithmetic operations",
            "Permission management",
            "Testing FHE contracts",
        ],
    },
]


def default_registry() -> Registry:
    """Build a fresh registry from the compiled-in catalog."""
    return Registry(BUILTIN_EXAMPLES, BUILTIN_CATEGORIES)


def load_registry(registry_file: str | Path | None = None) -> Registry:
    """Return the registry at *registry_file*, or the built-in one when unset."""
    if registry_file is None:
        return default_registry()
    return Registry.from_file(registry_file)
