from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PriceHistoryEvent(BaseModel):
    event: str = ""
    date: datetime
    price: float


class MarketExtract(BaseModel):
    """Market data for one listing, as mapped from the provider payload."""

    listing_id: str = ""
    list_price: Optional[float] = None
    zestimate: Optional[float] = None
    days_on_site: Optional[float] = None
    price_history: Optional[list[PriceHistoryEvent]] = None


class Signals(BaseModel):
    """Bag of named numeric valuation signals.

    The four known signals are declared; any other numeric signal can be
    passed as an extra field (e.g. ``Signals(delta_z=0.1, hc_delta=-0.05)``).
    """

    model_config = ConfigDict(extra="allow")

    delta_z: Optional[float] = None
    dom_pct: Optional[float] = None
    recent_cut: Optional[float] = None
    hot_flag: Optional[float] = None

    def present(self) -> dict[str, float]:
        """All signals that have a value, extras included."""
        values = {}
        for name, value in self.model_dump().items():
            if value is None or isinstance(value, bool):
                continue
            if isinstance(value, (int, float)):
                values[name] = float(value)
        return values


class ValuationResult(BaseModel):
    value_index: float
    raw_score: float
    breakdown: dict[str, float] = Field(default_factory=dict)
