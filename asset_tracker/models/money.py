# asset_tracker/models/money.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "SEK": "kr",
}


class Currency(str, Enum):
    """Currencies an asset file may carry."""

    USD = "USD"
    EUR = "EUR"
    SEK = "SEK"

    @classmethod
    def parse(cls, value) -> "Currency":
        """Unknown or empty codes are read as USD, the reporting currency."""
        try:
            return cls(str(value or "").upper().strip())
        except ValueError:
            return cls.USD


@dataclass(frozen=True)
class Money:
    amount: Decimal
    currency: str

    def __post_init__(self):
        object.__setattr__(self, "amount", Decimal(str(self.amount)))
        code = getattr(self.currency, "value", self.currency)
        object.__setattr__(self, "currency", str(code).upper().strip())

    @classmethod
    def of(cls, amount: Union[Decimal, str, int, float], currency: Union[str, Currency]) -> "Money":
        return cls(Decimal(str(amount)), currency)

    @property
    def symbol(self) -> str:
        return SYMBOLS.get(self.currency, f"{self.currency} ")

    def __str__(self) -> str:
        return f"{self.symbol}{self.amount:,.2f}"
