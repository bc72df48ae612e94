"""Tests for criteria loading and preparation."""

import json

import pytest

from config.criteria_seed import DEFAULT_CRITERIA
from models.criterion import Criterion
from models.enums import RuleType
from scoring.criteria import (
    CriteriaFileError,
    compile_criterion,
    default_criteria,
    load_criteria,
    prepare_criteria,
)


def _criterion(key, pattern, synonyms=None, weight=10, must=False, id=None):
    return Criterion(
        id=id, key=key, weight=weight, must=must, pattern=pattern, synonyms=synonyms or []
    )


class TestPrepareCriteria:
    def test_compiles_patterns_and_skips_invalid(self):
        criteria = [
            _criterion("Natural Light", "natural light", ["sun-drenched"], weight=100, must=True, id="1"),
            _criterion("Open Kitchen", "/open kitchen/i", weight=80, id="2"),
            _criterion("Noise", "quiet|peaceful", weight=50, id="3"),
            _criterion("Invalid Regex", "/[a-z/i", weight=10, id="4"),
        ]
        prepared = prepare_criteria(criteria)
        by_key = {c.key: c for c in prepared}

        assert len(prepared) == 3
        assert "Invalid Regex" not in by_key

        natural_light = by_key["Natural Light"]
        assert natural_light.must is True
        assert [r.rule_type for r in natural_light.rules] == [RuleType.PRIMARY, RuleType.SYNONYM]
        assert [r.original_pattern for r in natural_light.rules] == ["natural light", "sun-drenched"]
        assert natural_light.primary_pattern == "natural light"

        open_kitchen = by_key["Open Kitchen"]
        assert len(open_kitchen.rules) == 1
        assert open_kitchen.rules[0].regex.pattern == "open kitchen"
        assert open_kitchen.primary_pattern == "/open kitchen/i"

        assert by_key["Noise"].rules[0].regex.pattern == "(quiet|peaceful)"

    def test_synonym_only_criterion(self):
        prepared = prepare_criteria([_criterion("Synonym Only", "", ["test synonym"])])
        assert len(prepared) == 1
        assert len(prepared[0].rules) == 1
        assert prepared[0].rules[0].rule_type == RuleType.SYNONYM
        assert prepared[0].primary_pattern == ""

    def test_drops_criterion_when_nothing_compiles(self):
        prepared = prepare_criteria([_criterion("Bad Pattern", "/[invalid/", ["/[alsoinvalid/"])])
        assert prepared == []

    def test_drops_criterion_with_only_blank_patterns(self):
        assert prepare_criteria([_criterion("Blank", "   ", ["", "  "])]) == []

    def test_keeps_failed_primary_for_fuzzy_fallback(self):
        prepared = prepare_criteria([_criterion("Half Broken", "/[bad/", ["good synonym"])])
        assert len(prepared) == 1
        assert prepared[0].primary_pattern == "/[bad/"
        assert [r.rule_type for r in prepared[0].rules] == [RuleType.SYNONYM]

    def test_synonym_order_is_preserved(self):
        rules, errors = compile_criterion(_criterion("Outdoor", "balcony", ["deck", "", "yard", "/[x/"]))
        assert [r.original_pattern for r in rules] == ["balcony", "deck", "yard"]
        assert len(errors) == 1
        assert errors[0].criterion_key == "Outdoor"

    def test_default_criteria_all_prepare(self):
        prepared = prepare_criteria(default_criteria())
        assert len(prepared) == len(DEFAULT_CRITERIA)


class TestLoadCriteria:
    def test_loads_json_array(self, tmp_path):
        path = tmp_path / "criteria.json"
        path.write_text(json.dumps([
            {"key": "Dishwasher", "weight": 80, "must": True, "pattern": "dishwasher"},
            {"key": "Garden", "weight": 20, "pattern": "garden", "synonyms": ["yard"]},
        ]))
        criteria = load_criteria(path)
        assert [c.key for c in criteria] == ["Dishwasher", "Garden"]
        assert criteria[0].must is True
        assert criteria[1].synonyms == ["yard"]

    def test_skips_invalid_records(self, tmp_path):
        path = tmp_path / "criteria.json"
        path.write_text(json.dumps([
            {"key": "Zero Weight", "weight": 0, "pattern": "x"},
            {"weight": 10, "pattern": "no key"},
            {"key": "Valid", "weight": 5, "pattern": "valid"},
        ]))
        assert [c.key for c in load_criteria(path)] == ["Valid"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(CriteriaFileError):
            load_criteria(tmp_path / "nope.json")

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "criteria.json"
        path.write_text(json.dumps({"key": "Dishwasher"}))
        with pytest.raises(CriteriaFileError):
            load_criteria(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "criteria.json"
        path.write_text("[{not json")
        with pytest.raises(CriteriaFileError):
            load_criteria(path)
