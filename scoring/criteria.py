"""Criteria loading and preparation."""

import json
import logging
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from config.criteria_seed import DEFAULT_CRITERIA
from models.criterion import Criterion, MatchRule, PatternError, PreparedCriterion
from models.enums import RuleType
from scoring.patterns import compile_pattern

logger = logging.getLogger(__name__)


class CriteriaFileError(ValueError):
    """The criteria file is missing or is not a JSON array of criteria."""


def default_criteria() -> list[Criterion]:
    return [Criterion.model_validate(record) for record in DEFAULT_CRITERIA]


def parse_criteria(records: Iterable[dict]) -> list[Criterion]:
    """Validate raw criterion records, skipping (and logging) invalid ones."""
    criteria: list[Criterion] = []
    for index, record in enumerate(records):
        try:
            criteria.append(Criterion.model_validate(record))
        except ValidationError as e:
            logger.error(f"Skipping invalid criterion #{index}: {e.error_count()} error(s)\n{e}")
    return criteria


def load_criteria(path: str | Path) -> list[Criterion]:
    """Load criteria from a JSON file containing an array of records."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CriteriaFileError(f"Criteria file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CriteriaFileError(f"Criteria file {path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise CriteriaFileError(f"Criteria file {path} must contain a JSON array")

    criteria = parse_criteria(data)
    logger.info(f"Loaded {len(criteria)} criteria from {path}")
    return criteria


def compile_criterion(criterion: Criterion) -> tuple[list[MatchRule], list[PatternError]]:
    """Compile the primary pattern then each synonym, in order.

    Blank patterns are skipped. Returns the compiled rules and the failures.
    """
    sources = []
    if criterion.pattern.strip():
        sources.append((criterion.pattern, RuleType.PRIMARY))
    sources.extend(
        (synonym, RuleType.SYNONYM) for synonym in criterion.synonyms if synonym and synonym.strip()
    )

    rules: list[MatchRule] = []
    errors: list[PatternError] = []
    for raw, rule_type in sources:
        compiled = compile_pattern(raw, criterion.key, criterion.id)
        if isinstance(compiled, PatternError):
            errors.append(compiled)
            continue
        rules.append(MatchRule(regex=compiled, rule_type=rule_type, original_pattern=raw))
    return rules, errors


def prepare_criteria(criteria: Iterable[Criterion]) -> list[PreparedCriterion]:
    """Compile criteria into their ready-to-score form.

    A criterion whose patterns all fail to compile (or are all blank) is
    dropped: it never counts toward the possible weight and can never be
    reported as a missing must-have.
    """
    prepared: list[PreparedCriterion] = []
    failures = 0

    for criterion in criteria:
        rules, errors = compile_criterion(criterion)
        failures += len(errors)

        if not rules:
            logger.warning(
                f"No valid patterns for criterion '{criterion.key}' "
                f"(ID: {criterion.id}), skipping it"
            )
            continue

        prepared.append(
            PreparedCriterion(
                key=criterion.key,
                must=criterion.must,
                weight=criterion.weight,
                rules=rules,
                primary_pattern=criterion.pattern,
            )
        )

    rule_count = sum(len(c.rules) for c in prepared)
    logger.info(
        f"Prepared {len(prepared)} criteria with {rule_count} patterns "
        f"({failures} failed to compile)"
    )
    return prepared
