from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from models.enums import MatchType
from models.valuation import Signals, ValuationResult


class ListingAttributes(BaseModel):
    """The searchable parts of a listing, as consumed by the alignment scorer."""

    listing_id: str = ""
    description: str = ""
    features: list[str] = Field(default_factory=list)

    # Location
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    zip_code: str = ""


class DetailedHit(BaseModel):
    criterion_key: str
    matched_pattern: str
    match_type: MatchType
    confidence: float


class AlignmentScore(BaseModel):
    alignment_score: float = 0.0
    missing_musts: list[str] = Field(default_factory=list)
    matched_criteria_keys: list[str] = Field(default_factory=list)
    detailed_hits: list[DetailedHit] = Field(default_factory=list)
    location_bonus: float = 0.0


class ListingReport(BaseModel):
    """Scoring and valuation output for one listing."""

    listing_id: str = ""
    alignment: AlignmentScore
    signals: Signals
    valuation: ValuationResult

    def summary_line(self) -> str:
        a = self.alignment
        missing = ", ".join(a.missing_musts) if a.missing_musts else "-"
        return (
            f"[{a.alignment_score:6.2f}] +{a.location_bonus:g} geo | "
            f"value {self.valuation.value_index:+.2f} | "
            f"{self.listing_id or '?'} | missing: {missing}"
        )
