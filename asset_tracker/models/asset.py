# asset_tracker/models/asset.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

import pandas as pd

from asset_tracker.models.money import Money

END_OF_LIFE_YEARS = 3


class AssetKind(str, Enum):
    COMPUTER = "Computer"
    PHONE = "Phone"

    @classmethod
    def parse(cls, value) -> "AssetKind":
        text = str(value or "").strip()
        for kind in cls:
            if kind.value.lower() == text.lower():
                return kind
        raise ValueError(f"Unknown asset type: {value}")


@dataclass(frozen=True)
class Asset:
    """One company-owned device. `kind` tags the variant."""

    kind: AssetKind
    serial_number: str
    brand: str
    model: str
    office: str
    purchase_date: date
    price: Money

    @property
    def end_of_life_date(self) -> date:
        # DateOffset clamps Feb 29 -> Feb 28 on non-leap years
        return (pd.Timestamp(self.purchase_date) + pd.DateOffset(years=END_OF_LIFE_YEARS)).date()

    def days_until_end_of_life(self, today: date) -> int:
        return (self.end_of_life_date - today).days
