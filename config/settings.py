from pydantic_settings import BaseSettings

from config.scoring_weights import FUZZY_MATCH_MIN_SCORE
from config.valuation_weights import MEDIAN_DAYS_ON_MARKET, RECENT_CUT_WINDOW_DAYS
from models.config import ScoringConfig, ValuationConfig


class Settings(BaseSettings):
    # Input / output files
    criteria_file: str = ""  # empty → built-in default criteria
    listings_file: str = "data/listings.json"
    output_file: str = "data/scored_listings.json"

    # Tunables
    fuzzy_match_min_score: float = FUZZY_MATCH_MIN_SCORE
    median_days_on_market: float = MEDIAN_DAYS_ON_MARKET
    recent_cut_window_days: int = RECENT_CUT_WINDOW_DAYS

    # Reporting
    report_top_n: int = 20

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def scoring_config(self) -> ScoringConfig:
        return ScoringConfig(fuzzy_match_min_score=self.fuzzy_match_min_score)

    def valuation_config(self) -> ValuationConfig:
        return ValuationConfig(
            median_days_on_market=self.median_days_on_market,
            recent_cut_window_days=self.recent_cut_window_days,
        )
