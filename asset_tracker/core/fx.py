# asset_tracker/core/fx.py
import logging
from decimal import Decimal

from asset_tracker.models.money import Money
from asset_tracker.services.currency_converter import CurrencyConverter

logger = logging.getLogger(__name__)

REPORTING_CURRENCY = "USD"

# value-level approximations, independent from the fallback rate table
APPROX_TO_USD = {
    "EUR": Decimal("1.1"),
    "SEK": Decimal("0.095"),
}

def approx_factor(currency: str) -> Decimal:
    """Approximate currency -> USD factor; unknown codes are taken at par."""
    return APPROX_TO_USD.get((currency or "").upper(), Decimal("1.0"))

def to_reporting_currency(money: Money, converter: CurrencyConverter) -> Decimal:
    """Value of `money` in USD. Falls back to approximate constants instead of failing."""
    if money.currency == REPORTING_CURRENCY:
        return money.amount
    converted, ok = converter.convert(money.amount, money.currency, REPORTING_CURRENCY)
    if ok:
        return converted
    logger.warning("No rate for %s -> %s, using approximate rate", money.currency, REPORTING_CURRENCY)
    return money.amount * approx_factor(money.currency)
