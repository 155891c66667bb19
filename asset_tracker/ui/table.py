# asset_tracker/ui/table.py
import pandas as pd
from datetime import date
from typing import Iterable, Optional

from rich.console import Console

from asset_tracker.core.fx import to_reporting_currency
from asset_tracker.core.lifecycle import EolStatus, classify
from asset_tracker.models.asset import Asset
from asset_tracker.services.currency_converter import CurrencyConverter

RULE = "-" * 130

STATUS_STYLES = {
    EolStatus.CRITICAL.value: "red",
    EolStatus.WARNING.value: "yellow",
}

HEADER = (
    f"{'Type':<12} | {'Serial Number':<18} | {'Brand':<12} | {'Model':<18} | "
    f"{'Office':<10} | {'Purchase Date':<15} | {'Local Price':<15} | {'USD Value':<15}"
)

REPORT_COLUMNS = ["kind", "serial_number", "brand", "model", "office",
                  "purchase_date", "local_price", "usd_value", "status"]


def build_report_frame(assets: Iterable[Asset], converter: CurrencyConverter,
                       today: Optional[date] = None) -> pd.DataFrame:
    """One row per asset, valued in USD, sorted by office then purchase date."""
    today = today or date.today()
    df = pd.DataFrame([{
        "kind": a.kind.value,
        "serial_number": a.serial_number,
        "brand": a.brand,
        "model": a.model,
        "office": a.office,
        "purchase_date": a.purchase_date,
        "local_price": str(a.price),
        "usd_value": to_reporting_currency(a.price, converter),
        "status": classify(a, today).value,
    } for a in assets], columns=REPORT_COLUMNS)
    if df.empty:
        return df
    return df.sort_values(["office", "purchase_date"], kind="stable").reset_index(drop=True)


def format_row(row) -> str:
    return (
        f"{row['kind']:<12} | {row['serial_number']:<18} | {row['brand']:<12} | "
        f"{row['model']:<18} | {row['office']:<10} | {row['purchase_date'].isoformat():<15} | "
        f"{row['local_price']:<15} | ${row['usd_value']:<13,.2f}"
    )


def render_table(assets: Iterable[Asset], converter: CurrencyConverter,
                 console: Console, today: Optional[date] = None) -> pd.DataFrame:
    df = build_report_frame(assets, converter, today)
    if df.empty:
        console.print("\nNo assets found in inventory.", markup=False, highlight=False)
        return df

    def out(line, style=None):
        console.print(line, style=style, markup=False, highlight=False, soft_wrap=True)

    out("\nAsset Inventory:")
    out(RULE)
    out(HEADER)
    out(RULE)

    previous_office = None
    for _, row in df.iterrows():
        # blank line between offices
        if previous_office is not None and previous_office != row["office"]:
            out("")
        previous_office = row["office"]
        out(format_row(row), STATUS_STYLES.get(row["status"]))
        out(RULE)
    return df
