"""Valuation index: weighted sum of (mostly z-scored) market signals.

    value_index = -1.0 * z(delta_z)
                  -0.6 * z(dom_pct)
                  -0.4 * recent_cut
                  +0.5 * hot_flag
"""

import logging
from typing import Optional

from models.config import ValuationConfig
from models.valuation import Signals, ValuationResult

logger = logging.getLogger(__name__)


def z_score(x: float, mean: float, std_dev: float) -> float:
    """Standard deviations between x and the mean; 0 when std_dev is 0."""
    if std_dev == 0:
        return 0.0
    return (x - mean) / std_dev


def compute_valuation(
    signals: Signals,
    config: Optional[ValuationConfig] = None,
) -> ValuationResult:
    """Compose a valuation index and per-signal breakdown.

    Only signals with a configured weight contribute. Missing signals are
    left out of the breakdown unless the config gives them a default
    (hot_flag defaults to 0, so it always shows up).
    """
    config = config or ValuationConfig()
    values = signals.present()

    unweighted = sorted(set(values) - set(config.weights))
    if unweighted:
        logger.debug(f"Ignoring signals without a weight: {unweighted}")

    breakdown: dict[str, float] = {}
    total = 0.0
    for name, weight in config.weights.items():
        value = values.get(name, config.defaults.get(name))
        if value is None:
            continue

        stats = config.stats.get(name)
        if stats is not None:
            value = z_score(value, stats.mean, stats.std_dev)

        contribution = weight * value
        breakdown[name] = contribution
        total += contribution

    return ValuationResult(
        value_index=round(total, 2),
        raw_score=round(total, 4),
        breakdown=breakdown,
    )
