"""Alignment scoring weights, thresholds and preferred areas.

These are separated from the scoring logic so they're easy to tune.
"""

# Confidence multiplier per match type (primary > synonym > fuzzy)
CONFIDENCE_LEVELS = {
    "primary": 1.0,
    "synonym": 0.7,
    "fuzzy": 0.6,
}

# Minimum fuzzy similarity (0-1) for a fuzzy fallback to count as a hit
FUZZY_MATCH_MIN_SCORE = 0.7

# Regex flag letters accepted in "/pattern/flags" criteria
REGEX_FLAG_LETTERS = "gimyusdv"

# Preferred areas: centroid is (longitude, latitude)
PREFERRED_AREAS: list[dict] = [
    {"name": "Dolores Heights", "centroid": (-122.4261, 37.7598), "weight": 30, "zip": "94110"},
    {"name": "Noe Valley", "centroid": (-122.4330, 37.7518), "weight": 25, "zip": "94114"},
    {"name": "Potrero Hill", "centroid": (-122.3968, 37.7586), "weight": 22, "zip": "94107"},
    {"name": "Pacific Heights", "centroid": (-122.43, 37.7925), "weight": 22, "zip": "94115"},
    {"name": "Marina District", "centroid": (-122.4399, 37.8025), "weight": 18, "zip": "94123"},
    {"name": "North Beach", "centroid": (-122.4084, 37.8050), "weight": 7, "zip": "94133"},
]

# Distance bands (km) around a preferred area's centroid
GEO_PROXIMITY_FULL_BONUS_KM = 0.8
GEO_PROXIMITY_HALF_BONUS_KM = 1.5

# Flat bonus for a ZIP match when the listing has no coordinates
ZIP_MATCH_BONUS = 5.0
