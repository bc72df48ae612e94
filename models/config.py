"""Explicit configuration values passed into the scoring and valuation code.

Defaults come from config/scoring_weights.py and config/valuation_weights.py;
tests and callers can build alternate configurations instead of patching
module constants.
"""

from pydantic import BaseModel, ConfigDict, Field

from config.scoring_weights import (
    CONFIDENCE_LEVELS,
    FUZZY_MATCH_MIN_SCORE,
    GEO_PROXIMITY_FULL_BONUS_KM,
    GEO_PROXIMITY_HALF_BONUS_KM,
    PREFERRED_AREAS,
    ZIP_MATCH_BONUS,
)
from config.valuation_weights import (
    MEDIAN_DAYS_ON_MARKET,
    PRICE_CUT_EVENT_PATTERN,
    RECENT_CUT_WINDOW_DAYS,
    SIGNAL_DEFAULTS,
    SIGNAL_STATS,
    VALUATION_WEIGHTS,
)


class PreferredArea(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    centroid: tuple[float, float]  # (longitude, latitude)
    weight: float
    zip: str = ""


def _default_areas() -> list[PreferredArea]:
    return [PreferredArea(**area) for area in PREFERRED_AREAS]


class ScoringConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary_confidence: float = CONFIDENCE_LEVELS["primary"]
    synonym_confidence: float = CONFIDENCE_LEVELS["synonym"]
    fuzzy_confidence: float = CONFIDENCE_LEVELS["fuzzy"]
    fuzzy_match_min_score: float = FUZZY_MATCH_MIN_SCORE

    preferred_areas: list[PreferredArea] = Field(default_factory=_default_areas)
    full_bonus_km: float = GEO_PROXIMITY_FULL_BONUS_KM
    half_bonus_km: float = GEO_PROXIMITY_HALF_BONUS_KM
    zip_match_bonus: float = ZIP_MATCH_BONUS


class SignalStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean: float
    std_dev: float


def _default_stats() -> dict[str, SignalStats]:
    return {
        name: SignalStats(mean=mean, std_dev=std_dev)
        for name, (mean, std_dev) in SIGNAL_STATS.items()
    }


class ValuationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    weights: dict[str, float] = Field(default_factory=lambda: dict(VALUATION_WEIGHTS))
    stats: dict[str, SignalStats] = Field(default_factory=_default_stats)
    defaults: dict[str, float] = Field(default_factory=lambda: dict(SIGNAL_DEFAULTS))

    median_days_on_market: float = MEDIAN_DAYS_ON_MARKET
    recent_cut_window_days: int = RECENT_CUT_WINDOW_DAYS
    price_cut_event_pattern: str = PRICE_CUT_EVENT_PATTERN
