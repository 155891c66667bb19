# asset_tracker/services/file_handler.py
import pandas as pd
from datetime import datetime, date
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple

from asset_tracker.models.asset import Asset, AssetKind
from asset_tracker.models.money import Currency, Money

XML_COLUMNS = {"Type", "SerialNumber", "Brand", "Model", "PurchaseDate", "Price", "Currency", "OfficeLocation"}

def _parse_date(value) -> Optional[date]:
    """Try a few common date formats, fallback to pandas parser."""
    if pd.isna(value):
        return None
    text = str(value).strip()
    for fmt in ("%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%d-%m-%Y", "%d/%m/%Y", "%Y/%m/%d"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            pass
    # fallback
    try:
        return pd.to_datetime(text).date()
    except (ValueError, TypeError):
        return None

def _text(row, key: str) -> str:
    value = row.get(key)
    return "" if pd.isna(value) else str(value).strip()

def row_to_asset(row) -> Asset:
    """Build an Asset from one <Asset> row. Raises ValueError on bad data."""
    kind = AssetKind.parse(_text(row, "Type"))
    purchase_date = _parse_date(row.get("PurchaseDate"))
    if purchase_date is None:
        raise ValueError(f"invalid purchase date -> {row.get('PurchaseDate')}")
    try:
        amount = Decimal(_text(row, "Price"))
    except InvalidOperation:
        raise ValueError(f"invalid price -> {row.get('Price')}") from None
    return Asset(
        kind=kind,
        serial_number=_text(row, "SerialNumber"),
        brand=_text(row, "Brand"),
        model=_text(row, "Model"),
        office=_text(row, "OfficeLocation"),
        purchase_date=purchase_date,
        price=Money.of(amount, Currency.parse(_text(row, "Currency"))),
    )

def load_assets_from_xml(filelike) -> Tuple[List[Asset], List[str]]:
    """
    Read an <Assets> XML file (path or file-like) into Asset objects.
    Returns (assets, errors_list); rows that can't be converted are skipped.
    """
    errors = []
    try:
        df = pd.read_xml(filelike, parser="etree", dtype=str)
    except Exception as exc:
        errors.append(f"Error loading assets: {exc}")
        return [], errors

    missing = XML_COLUMNS - set(df.columns)
    if missing:
        errors.append(f"Missing required fields: {', '.join(sorted(missing))}")
        return [], errors

    assets = []
    for idx, row in df.iterrows():
        try:
            assets.append(row_to_asset(row))
        except ValueError as exc:
            errors.append(f"Asset {idx+1}: {exc}")
    return assets, errors
