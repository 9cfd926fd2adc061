"""Tests for the registry record models (registry.models).

Covers:
- camelCase alias loading and by-alias dumping
- Validation of required fields and unknown keys
- Frozen records
- Derived names (source/test file names, component and package names)
- Estimated-time fallback by complexity
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from exemplar.registry import CategoryEntry, Complexity, ExampleDocumentation, ExampleEntry


pytestmark = pytest.mark.unit


def _entry(**overrides) -> ExampleEntry:
    data = {
        "id": "fhe-counter",
        "displayName": "FHE Counter",
        "category": "basic",
        "sourceFile": "FHECounter.sol",
        "testFile": "FHECounter.ts",
    }
    data.update(overrides)
    return ExampleEntry.model_validate(data)


# ---------------------------------------------------------------------------
# ExampleEntry
# ---------------------------------------------------------------------------


class TestExampleEntry:
    def test_loads_camel_case(self):
        entry = _entry(
            documentation={"overview": "o", "keyFeatures": ["f"], "learningOutcomes": ["l"]},
        )
        assert entry.display_name == "FHE Counter"
        assert entry.source_file == "FHECounter.sol"
        assert entry.documentation.key_features == ["f"]
        assert entry.documentation.learning_outcomes == ["l"]

    def test_accepts_field_names(self):
        entry = ExampleEntry(
            id="x",
            display_name="X",
            category="basic",
            source_file="X.sol",
            test_file="X.ts",
        )
        assert entry.display_name == "X"

    def test_defaults(self):
        entry = _entry()
        assert entry.description == ""
        assert entry.complexity is Complexity.INTERMEDIATE
        assert entry.keywords == []
        assert entry.documentation == ExampleDocumentation()
        assert entry.estimated_time is None

    def test_dump_by_alias(self):
        dumped = _entry(complexity="advanced").model_dump(mode="json", by_alias=True)
        assert dumped["displayName"] == "FHE Counter"
        assert dumped["sourceFile"] == "FHECounter.sol"
        assert dumped["complexity"] == "advanced"
        assert "keyFeatures" in dumped["documentation"]

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            _entry(id="")

    def test_missing_source_rejected(self):
        data = {"id": "x", "displayName": "X", "category": "c", "testFile": "X.ts"}
        with pytest.raises(ValidationError):
            ExampleEntry.model_validate(data)

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            _entry(colour="blue")

    def test_unknown_complexity_rejected(self):
        with pytest.raises(ValidationError):
            _entry(complexity="expert")

    def test_frozen(self):
        entry = _entry()
        with pytest.raises(ValidationError):
            entry.id = "other"

    def test_derived_names(self):
        entry = _entry(id="fhe_counter", sourceFile="basic/FHECounter.sol",
                       testFile="basic/FHECounter.ts")
        assert entry.source_name == "FHECounter.sol"
        assert entry.test_name == "FHECounter.ts"
        assert entry.component_name == "FHECounter"
        assert entry.package_name == "fhe-counter"

    @pytest.mark.parametrize(
        "complexity, expected",
        [
            ("beginner", "15-20 minutes"),
            ("intermediate", "20-30 minutes"),
            ("advanced", "30-45 minutes"),
        ],
    )
    def test_estimated_time_fallback(self, complexity, expected):
        assert _entry(complexity=complexity).effective_estimated_time == expected

    def test_estimated_time_explicit(self):
        assert _entry(estimatedTime="2 hours").effective_estimated_time == "2 hours"


# ---------------------------------------------------------------------------
# CategoryEntry
# ---------------------------------------------------------------------------


class TestCategoryEntry:
    def test_loads_camel_case(self):
        category = CategoryEntry.model_validate({
            "id": "basic",
            "displayName": "Basic Examples",
            "exampleIds": ["a", "b"],
            "keyTopics": ["t"],
        })
        assert category.display_name == "Basic Examples"
        assert category.example_ids == ["a", "b"]
        assert category.key_topics == ["t"]
        assert category.description == ""

    def test_dangling_ids_allowed(self):
        category = CategoryEntry(id="c", display_name="C", example_ids=["nowhere"])
        assert category.example_ids == ["nowhere"]
