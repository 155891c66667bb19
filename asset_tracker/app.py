# asset_tracker/app.py
import sys, os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import argparse
import logging
from typing import List, Optional

from rich.console import Console

from asset_tracker.models.rates import FALLBACK_RATES
from asset_tracker.services.settings import load_settings
from asset_tracker.services.rate_source import RateSource
from asset_tracker.services.currency_converter import CurrencyConverter
from asset_tracker.services.file_handler import load_assets_from_xml
from asset_tracker.ui.table import render_table
from asset_tracker.ui.summary import render_summary

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="asset-tracker", description="Asset Tracking System")
    parser.add_argument("assets_path", nargs="?", default=None,
                        help="Asset XML file (default: settings 'assets_path')")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def init_converter(console: Console, timeout: float) -> CurrencyConverter:
    """Fetch rates once up front and tell the user which table is in use."""
    console.print("Initializing currency converter...", markup=False)
    converter = CurrencyConverter(RateSource(timeout=timeout))
    table = converter.refresh(suppress_logging=True)
    if converter.has_valid_rates() and not table.is_fallback:
        console.print("Currency rates updated successfully.", markup=False)
    else:
        console.print("Warning: Using fallback currency rates.", style="yellow", markup=False)
        console.print("Using approximate conversion rates:", markup=False)
        for code, rate in FALLBACK_RATES.items():
            console.print(f"1 EUR = {rate:.2f} {code}", markup=False, highlight=False)
    return converter


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    console = console or Console()
    settings = load_settings()

    # -----------------------
    # Bootstrap
    # -----------------------
    console.print("Asset Tracking System", markup=False)
    console.print("=====================\n", markup=False)
    converter = init_converter(console, settings["fx_timeout"])

    # -----------------------
    # Load + report
    # -----------------------
    path = args.assets_path or settings["assets_path"]
    assets, errors = load_assets_from_xml(path)
    for e in errors:
        console.print(e, style="red", markup=False, highlight=False)
    logger.debug("Loaded %d assets from %s", len(assets), path)

    df = render_table(assets, converter, console)
    render_summary(df, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
