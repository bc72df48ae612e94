"""Location bonus for listings near preferred areas."""

import math
from typing import Optional

from models.config import ScoringConfig

EARTH_RADIUS_KM = 6371.0088


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points in kilometers."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))


def location_bonus(
    latitude: Optional[float],
    longitude: Optional[float],
    zip_code: Optional[str],
    config: Optional[ScoringConfig] = None,
) -> float:
    """Bonus points for proximity to the best preferred area.

    Within the full-bonus radius → area weight (stops scanning)
    Within the half-bonus radius → area weight / 2
    Highest candidate wins; bonuses from several areas never add up.
    No coordinates → flat ZIP bonus on the first area with the same ZIP.
    """
    config = config or ScoringConfig()
    bonus = 0.0

    if latitude is not None and longitude is not None:
        for area in config.preferred_areas:
            area_lon, area_lat = area.centroid
            distance = haversine_km(latitude, longitude, area_lat, area_lon)
            if distance <= config.full_bonus_km:
                bonus = max(bonus, area.weight)
                break
            if distance <= config.half_bonus_km:
                bonus = max(bonus, area.weight / 2)
        return bonus

    if zip_code:
        for area in config.preferred_areas:
            if area.zip and area.zip == zip_code:
                return config.zip_match_bonus

    return bonus
