"""Per-criterion text matching: compiled rules first, fuzzy fallback second."""

import logging
from typing import Optional

from pydantic import BaseModel
from thefuzz import fuzz

from models.config import ScoringConfig
from models.criterion import PreparedCriterion
from models.enums import MatchType, RuleType
from models.listing import ListingAttributes

logger = logging.getLogger(__name__)


class CriterionMatch(BaseModel):
    hit: bool = False
    match_type: Optional[MatchType] = None
    matched_pattern: str = ""
    confidence: float = 0.0


NO_HIT = CriterionMatch()


def build_searchable_text(listing: ListingAttributes) -> str:
    """Lowercased description and features, separated by a space."""
    description = (listing.description or "").lower()
    features = " ".join(f for f in listing.features if f).lower()
    return f"{description} {features}".strip()


def fuzzy_similarity(target: str, text: str) -> float:
    """Best similarity (0-1) of `target` against any substring of `text`."""
    return fuzz.partial_ratio(target.lower(), text) / 100


def match_criterion(
    text: str,
    criterion: PreparedCriterion,
    config: Optional[ScoringConfig] = None,
) -> CriterionMatch:
    """Decide whether `criterion` is present in already-lowercased `text`."""
    if not text:
        return NO_HIT
    config = config or ScoringConfig()

    for rule in criterion.rules:
        if rule.found_in(text):
            if rule.rule_type == RuleType.PRIMARY:
                return CriterionMatch(
                    hit=True,
                    match_type=MatchType.PRIMARY,
                    matched_pattern=rule.original_pattern,
                    confidence=config.primary_confidence,
                )
            return CriterionMatch(
                hit=True,
                match_type=MatchType.SYNONYM,
                matched_pattern=rule.original_pattern,
                confidence=config.synonym_confidence,
            )

    target = criterion.primary_pattern
    if not target or not target.strip():
        return NO_HIT

    similarity = fuzzy_similarity(target, text)
    if similarity >= config.fuzzy_match_min_score:
        logger.debug(f"Fuzzy hit for '{criterion.key}': '{target}' scored {similarity:.2f}")
        return CriterionMatch(
            hit=True,
            match_type=MatchType.FUZZY,
            matched_pattern=target,
            confidence=config.fuzzy_confidence,
        )
    return NO_HIT
