"""Mapping of raw Zillow property JSON into scoring and valuation inputs.

Handles both shapes seen from the property data API:
    {"price": 1250000}  and  {"price": {"value": 1250000}}
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from models.listing import ListingAttributes
from models.valuation import MarketExtract, PriceHistoryEvent

logger = logging.getLogger(__name__)


def _number(value: Any) -> Optional[float]:
    """Return value as a float if it's a real number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _amount(value: Any) -> Optional[float]:
    if isinstance(value, dict):
        value = value.get("value")
    return _number(value)


def listing_id_of(raw: dict) -> str:
    for field in ("zpid", "id", "property_url"):
        value = raw.get(field)
        if value not in (None, ""):
            return str(value)
    return ""


def zip_code_of(raw: dict) -> str:
    address = raw.get("address")
    zip_code = address.get("zipcode") if isinstance(address, dict) else None
    zip_code = zip_code or raw.get("zipcode")
    return str(zip_code).strip() if zip_code else ""


def parse_listing_attributes(raw: dict) -> ListingAttributes:
    """Extract the searchable attributes of a listing."""
    description = raw.get("property_description") or raw.get("description") or ""
    features = raw.get("features")
    if not isinstance(features, list):
        features = []

    return ListingAttributes(
        listing_id=listing_id_of(raw),
        description=description if isinstance(description, str) else "",
        features=[f for f in features if isinstance(f, str) and f.strip()],
        latitude=_number(raw.get("latitude")),
        longitude=_number(raw.get("longitude")),
        zip_code=zip_code_of(raw),
    )


def parse_price_history(entries: Any, listing_id: str = "") -> Optional[list[PriceHistoryEvent]]:
    """Parse price-history events, skipping malformed ones.

    Returns None when the payload has no history at all.
    """
    if not isinstance(entries, list) or not entries:
        return None

    events: list[PriceHistoryEvent] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        try:
            events.append(
                PriceHistoryEvent(
                    event=entry.get("eventName") or entry.get("event") or "",
                    date=entry.get("date") or entry.get("time"),
                    price=entry.get("price"),
                )
            )
        except ValidationError as e:
            logger.warning(f"Skipping malformed price history event for {listing_id}: {e.errors()[0]['msg']}")
    return events or None


def parse_market_extract(raw: dict) -> MarketExtract:
    """Extract the market data used for valuation signals."""
    listing_id = listing_id_of(raw)
    return MarketExtract(
        listing_id=listing_id,
        list_price=_amount(raw.get("price")),
        zestimate=_amount(raw.get("zestimate")),
        days_on_site=_number(raw.get("daysOnZillow")),
        price_history=parse_price_history(raw.get("priceHistory"), listing_id),
    )
