# asset_tracker/services/currency_converter.py
import logging
import threading
from decimal import Decimal
from typing import Optional, Tuple

from asset_tracker.models.rates import PIVOT_CURRENCY, RateTable
from asset_tracker.services.rate_source import RateSource

logger = logging.getLogger(__name__)


class CurrencyConverter:
    """
    Holds the current rate table and converts through EUR:
      1) from -> EUR:  amount / rate[from]
      2) EUR -> to:    amount * rate[to]

    The table is fetched lazily on first conversion, or explicitly through
    refresh(). One instance is meant to live for the whole report run.
    """

    def __init__(self, source=None):
        # anything with fetch(suppress_errors=...) -> RateTable
        self.source = source or RateSource()
        self._table: Optional[RateTable] = None
        self._lock = threading.Lock()

    @property
    def current_table(self) -> Optional[RateTable]:
        return self._table

    def _ensure_table(self) -> RateTable:
        # check + fetch + store under one lock -> at most one fetch per instance
        with self._lock:
            if self._table is None:
                self._table = self.source.fetch(suppress_errors=False)
            return self._table

    def refresh(self, suppress_logging: bool = False) -> RateTable:
        """Fetch again and replace the cached table, even with the fallback."""
        with self._lock:
            self._table = self.source.fetch(suppress_errors=suppress_logging)
            table = self._table
        if table.is_fallback and not suppress_logging:
            logger.info("Rate table replaced by fallback rates")
        return table

    def has_valid_rates(self) -> bool:
        table = self._table
        return table is not None and table.is_valid()

    def clear(self) -> None:
        with self._lock:
            self._table = None

    def convert(self, amount: Decimal, from_currency: str,
                to_currency: str) -> Tuple[Optional[Decimal], bool]:
        """
        Convert `amount` between two currencies.

        Returns (converted, True) on success and (None, False) when either
        code is missing from the current table. Never raises for a miss.
        """
        from_currency = (from_currency or "").upper().strip()
        to_currency = (to_currency or "").upper().strip()
        amount = Decimal(str(amount))
        if from_currency == to_currency:
            return amount, True

        table = self._ensure_table()

        amount_in_eur = amount
        if from_currency != PIVOT_CURRENCY:
            r_from = table.lookup(from_currency)
            if r_from is None:
                logger.debug("No rate for %s (table %s)", from_currency, table.as_of)
                return None, False
            amount_in_eur = amount / r_from

        if to_currency == PIVOT_CURRENCY:
            return amount_in_eur, True

        r_to = table.lookup(to_currency)
        if r_to is None:
            logger.debug("No rate for %s (table %s)", to_currency, table.as_of)
            return None, False
        return amount_in_eur * r_to, True
