"""Valuation index weights and reference statistics.

Negative weights mean the signal makes a listing look like better value
when it goes down (e.g. listing below its Zestimate).
"""

VALUATION_WEIGHTS = {
    "delta_z": -1.0,     # cheaper relative to Zestimate
    "dom_pct": -0.6,     # longer on market than the median
    "recent_cut": -0.4,  # recent price reduction
    "hot_flag": 0.5,     # hot market, more competition
}

# Signals normalized via z-score before weighting: name -> (mean, std dev)
SIGNAL_STATS: dict[str, tuple[float, float]] = {
    "delta_z": (0.05, 0.15),
    "dom_pct": (1.0, 0.5),
}

# Signals that count as this value when absent instead of being omitted
SIGNAL_DEFAULTS = {
    "hot_flag": 0.0,
}

# San Francisco median days on market
MEDIAN_DAYS_ON_MARKET = 55

RECENT_CUT_WINDOW_DAYS = 30

PRICE_CUT_EVENT_PATTERN = r"price change|price reduced"
