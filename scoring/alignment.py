"""Alignment score: how well a listing matches the weighted criteria, 0 to 100."""

import logging
from typing import Optional

from models.config import ScoringConfig
from models.criterion import PreparedCriterion
from models.listing import AlignmentScore, DetailedHit, ListingAttributes
from scoring.geo import location_bonus
from scoring.matcher import build_searchable_text, match_criterion

logger = logging.getLogger(__name__)


def score_listing(
    listing: ListingAttributes,
    prepared_criteria: list[PreparedCriterion],
    config: Optional[ScoringConfig] = None,
) -> AlignmentScore:
    """Score one listing against the prepared criteria.

    Each hit adds weight * confidence; every criterion adds its weight to the
    possible total whether it hits or not. The location bonus is reported
    separately and is not part of the alignment score.
    """
    config = config or ScoringConfig()
    text = build_searchable_text(listing)
    if not text:
        logger.warning(f"No searchable text for listing {listing.listing_id or '<unknown>'}")

    weighted_hits = 0.0
    total_possible = 0.0
    missing_musts: list[str] = []
    matched_keys: list[str] = []
    hits: list[DetailedHit] = []

    for criterion in prepared_criteria:
        total_possible += criterion.weight
        match = match_criterion(text, criterion, config)

        if not match.hit:
            if criterion.must:
                missing_musts.append(criterion.key)
            continue

        contribution = criterion.weight * match.confidence
        weighted_hits += contribution
        logger.debug(
            f"Criterion hit: {criterion.key} via {match.match_type.value} "
            f"'{match.matched_pattern}' (+{contribution:g})"
        )
        if criterion.key not in matched_keys:
            matched_keys.append(criterion.key)
        hits.append(
            DetailedHit(
                criterion_key=criterion.key,
                matched_pattern=match.matched_pattern,
                match_type=match.match_type,
                confidence=match.confidence,
            )
        )

    score = (weighted_hits / total_possible) * 100 if total_possible > 0 else 0.0
    bonus = location_bonus(listing.latitude, listing.longitude, listing.zip_code, config)

    return AlignmentScore(
        alignment_score=round(score, 2),
        missing_musts=missing_musts,
        matched_criteria_keys=matched_keys,
        detailed_hits=hits,
        location_bonus=round(bonus, 2),
    )
