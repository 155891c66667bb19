# asset_tracker/models/rates.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Mapping, Optional

PIVOT_CURRENCY = "EUR"

# currencies the report can't do without
REQUIRED_CURRENCIES = ("USD", "SEK")

LIVE = "live"
FALLBACK = "fallback"

# units per 1 EUR, used when the live feed can't be read
FALLBACK_RATES = {
    "USD": Decimal("1.1"),
    "SEK": Decimal("10.5"),
}


def _positive_rate(code, rate) -> Decimal:
    try:
        value = Decimal(str(rate).strip())
    except InvalidOperation:
        raise ValueError(f"Bad rate {rate!r} for {code}") from None
    if not value.is_finite() or value <= 0:
        raise ValueError(f"Bad rate {rate!r} for {code}")
    return value


@dataclass(frozen=True)
class RateTable:
    """
    Snapshot of EUR-relative exchange rates for one day.

    Each rate is expressed as units of that currency per 1 EUR. EUR itself is
    the implicit pivot and is never stored. Rates must be finite and positive,
    anything else raises ValueError.
    """

    as_of: date
    rates: Mapping[str, Decimal] = field(default_factory=dict)
    source: str = LIVE

    def __post_init__(self):
        cleaned = {
            str(code).upper().strip(): _positive_rate(code, rate)
            for code, rate in dict(self.rates).items()
        }
        cleaned.pop(PIVOT_CURRENCY, None)
        # frozen dataclass -> bypass __setattr__ once, at construction
        object.__setattr__(self, "rates", MappingProxyType(cleaned))

    @classmethod
    def fallback(cls, today: Optional[date] = None) -> "RateTable":
        return cls(as_of=today or date.today(), rates=FALLBACK_RATES, source=FALLBACK)

    @property
    def is_fallback(self) -> bool:
        return self.source == FALLBACK

    def lookup(self, code: str) -> Optional[Decimal]:
        """Units of `code` per EUR, or None when the code is unknown."""
        code = (code or "").upper().strip()
        if code == PIVOT_CURRENCY:
            return Decimal("1")
        return self.rates.get(code)

    def is_valid(self) -> bool:
        return all(c in self.rates for c in REQUIRED_CURRENCIES)

    def __len__(self) -> int:
        return len(self.rates)
