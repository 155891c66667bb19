from datetime import date
from decimal import Decimal

import pytest

from asset_tracker.models.money import Currency, Money
from asset_tracker.models.rates import RateTable


def test_lookup_known_and_unknown(ecb_table):
    assert ecb_table.lookup("USD") == Decimal("1.0812")
    assert ecb_table.lookup("sek") == Decimal("11.235")
    assert ecb_table.lookup("XYZ") is None


def test_eur_is_implicit_pivot():
    table = RateTable(as_of=date(2025, 1, 2), rates={"EUR": 3, "USD": "1.05"})
    assert "EUR" not in table.rates
    assert table.lookup("EUR") == Decimal("1")
    assert len(table) == 1


def test_table_is_read_only(ecb_table):
    with pytest.raises(TypeError):
        ecb_table.rates["USD"] = Decimal("2")


def test_validity_is_coverage_not_provenance(ecb_table):
    assert ecb_table.is_valid()
    thin = RateTable(as_of=date(2025, 1, 2), rates={"USD": Decimal("1.05")})
    assert not thin.is_valid()
    assert not thin.is_fallback


def test_fallback_table():
    table = RateTable.fallback(date(2026, 10, 19))
    assert table.lookup("USD") == Decimal("1.1")
    assert table.lookup("SEK") == Decimal("10.5")
    assert table.as_of == date(2026, 10, 19)
    assert table.is_fallback
    assert table.is_valid()


def test_money_display():
    assert str(Money.of("1234.5", "USD")) == "$1,234.50"
    assert str(Money.of(899, Currency.EUR)) == "€899.00"
    assert str(Money.of("2490", "sek")) == "kr2,490.00"
    assert str(Money.of("10", "GBP")) == "GBP 10.00"


def test_currency_parse_defaults_to_usd():
    assert Currency.parse("sek") is Currency.SEK
    assert Currency.parse("NOK") is Currency.USD
    assert Currency.parse(None) is Currency.USD


@pytest.mark.parametrize("rate", ["0", "-1.2", "NaN", "Infinity", "abc", ""])
def test_rejects_unusable_rates(rate):
    with pytest.raises(ValueError):
        RateTable(as_of=date(2025, 1, 2), rates={"USD": "1.1", "SEK": rate})
