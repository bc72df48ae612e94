"""Listing Scorer: Pipeline Orchestrator.

Usage:
    python main.py                                # Score data/listings.json
    python main.py --listings raw.json            # Score a different listings file
    python main.py --criteria my_criteria.json    # Use custom criteria
    python main.py --dry-run                      # Score but don't write the report
"""

import argparse
import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Optional

from config.settings import Settings
from models.config import ScoringConfig, ValuationConfig
from models.criterion import Criterion, PreparedCriterion
from models.listing import ListingReport
from parsers.zillow_parser import listing_id_of, parse_listing_attributes, parse_market_extract
from scoring.alignment import score_listing
from scoring.criteria import CriteriaFileError, default_criteria, load_criteria, prepare_criteria
from valuation.compute import compute_valuation
from valuation.signals import derive_signals

logger = logging.getLogger("listing_scorer")


class ListingsFileError(ValueError):
    """The listings file is missing or is not a JSON array of listings."""


def load_raw_listings(path: str | Path) -> list[dict]:
    """Load raw Zillow listings: a JSON array, or an object with a "listings" array."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ListingsFileError(f"Listings file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ListingsFileError(f"Listings file {path} is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("listings")
    if not isinstance(data, list):
        raise ListingsFileError(f"Listings file {path} must contain a JSON array of listings")
    return data


def load_criteria_for_run(settings: Settings) -> list[Criterion]:
    if settings.criteria_file:
        return load_criteria(settings.criteria_file)
    logger.info("No criteria file configured, using default criteria")
    return default_criteria()


def process_listing(
    raw: dict,
    prepared_criteria: list[PreparedCriterion],
    scoring_config: ScoringConfig,
    valuation_config: ValuationConfig,
    now: datetime,
) -> ListingReport:
    """Score and valuate a single raw listing."""
    attributes = parse_listing_attributes(raw)
    alignment = score_listing(attributes, prepared_criteria, scoring_config)

    extract = parse_market_extract(raw)
    signals = derive_signals(extract, valuation_config, now=now)
    valuation = compute_valuation(signals, valuation_config)

    return ListingReport(
        listing_id=attributes.listing_id,
        alignment=alignment,
        signals=signals,
        valuation=valuation,
    )


def run_pipeline(
    raw_listings: list,
    prepared_criteria: list[PreparedCriterion],
    settings: Settings,
    now: Optional[datetime] = None,
) -> list[ListingReport]:
    """Score every listing with error isolation, best alignment first."""
    now = now or datetime.now(UTC)
    scoring_config = settings.scoring_config()
    valuation_config = settings.valuation_config()
    reports: list[ListingReport] = []
    failed = 0

    for index, raw in enumerate(raw_listings):
        if not isinstance(raw, dict):
            logger.warning(f"Skipping listing #{index}: expected an object, got {type(raw).__name__}")
            failed += 1
            continue
        try:
            reports.append(process_listing(raw, prepared_criteria, scoring_config, valuation_config, now))
        except Exception as e:
            failed += 1
            logger.error(
                f"Listing {listing_id_of(raw) or f'#{index}'} FAILED: {type(e).__name__}: {e}",
                exc_info=True,
            )

    logger.info(f"Scored {len(reports)} listings ({failed} failed)")
    reports.sort(key=lambda r: r.alignment.alignment_score, reverse=True)
    return reports


def write_report(reports: list[ListingReport], path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [report.model_dump(mode="json") for report in reports]
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def main(
    criteria_file: str | None = None,
    listings_file: str | None = None,
    output_file: str | None = None,
    dry_run: bool = False,
) -> None:
    settings = Settings()
    overrides = {
        "criteria_file": criteria_file,
        "listings_file": listings_file,
        "output_file": output_file,
    }
    settings = settings.model_copy(update={k: v for k, v in overrides.items() if v})

    # Set up logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Phase 1: Load and prepare criteria
    try:
        criteria = load_criteria_for_run(settings)
    except CriteriaFileError as e:
        logger.error(str(e))
        sys.exit(1)

    prepared = prepare_criteria(criteria)
    if not prepared:
        logger.error("No usable scoring criteria after preparation. Aborting.")
        sys.exit(1)

    # Phase 2: Load listings
    try:
        raw_listings = load_raw_listings(settings.listings_file)
    except ListingsFileError as e:
        logger.error(str(e))
        sys.exit(1)
    logger.info(f"Loaded {len(raw_listings)} raw listings from {settings.listings_file}")

    # Phase 3: Score and valuate
    reports = run_pipeline(raw_listings, prepared, settings)

    # Phase 4: Report
    if dry_run:
        logger.info("DRY RUN - not writing report")
        for report in reports[: settings.report_top_n]:
            logger.info(f"  {report.summary_line()}")
    else:
        write_report(reports, settings.output_file)
        logger.info(f"Wrote {len(reports)} scored listings to {settings.output_file}")

    logger.info(f"Run finished at {datetime.now().isoformat()}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Zillow listing alignment and valuation scorer")
    parser.add_argument(
        "--criteria",
        type=str,
        default=None,
        help="JSON file with an array of criteria (defaults to the built-in set)",
    )
    parser.add_argument(
        "--listings",
        type=str,
        default=None,
        help="JSON file with raw Zillow property records",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Where to write the scored listings report",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Score and log the top listings but don't write the report",
    )
    args = parser.parse_args()
    main(
        criteria_file=args.criteria,
        listings_file=args.listings,
        output_file=args.output,
        dry_run=args.dry_run,
    )
