"""Valuation signals derived from a listing's market extract."""

import re
from datetime import UTC, datetime, timedelta
from typing import Optional

from models.config import ValuationConfig
from models.valuation import MarketExtract, PriceHistoryEvent, Signals


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


def price_delta(list_price: Optional[float], zestimate: Optional[float]) -> Optional[float]:
    """Relative gap between list price and estimate; None if not computable."""
    if not list_price or zestimate is None or zestimate <= 0:
        return None
    return (list_price - zestimate) / zestimate


def recent_cut_flag(
    history: Optional[list[PriceHistoryEvent]],
    now: datetime,
    window_days: int,
    event_pattern: str,
) -> Optional[int]:
    """1 if the latest price-history event is a price cut within the window.

    Returns None when there is no history at all, 0 for every other case
    (not a cut event, too old, single event, price not actually lower).
    """
    if not history:
        return None

    ordered = sorted(history, key=lambda e: _as_utc(e.date), reverse=True)
    latest = ordered[0]

    if not re.search(event_pattern, latest.event or "", re.IGNORECASE):
        return 0
    if _as_utc(latest.date) < _as_utc(now) - timedelta(days=window_days):
        return 0
    if len(ordered) < 2:
        return 0

    previous = ordered[1]
    if _as_utc(previous.date) >= _as_utc(latest.date):
        return 0
    return 1 if latest.price < previous.price else 0


def derive_signals(
    extract: MarketExtract,
    config: Optional[ValuationConfig] = None,
    now: Optional[datetime] = None,
) -> Signals:
    """Compute delta_z, dom_pct and recent_cut from a market extract.

    Signals that can't be computed stay None; they are never zero-filled.
    """
    config = config or ValuationConfig()
    now = now or datetime.now(UTC)

    dom_pct = None
    if extract.days_on_site is not None and config.median_days_on_market > 0:
        dom_pct = extract.days_on_site / config.median_days_on_market

    return Signals(
        delta_z=price_delta(extract.list_price, extract.zestimate),
        dom_pct=dom_pct,
        recent_cut=recent_cut_flag(
            extract.price_history,
            now,
            config.recent_cut_window_days,
            config.price_cut_event_pattern,
        ),
    )
