from datetime import date
from decimal import Decimal

import pytest

from asset_tracker.models.rates import RateTable


class StaticSource:
    """Rate source double: hands out the given tables in order, counts calls."""

    def __init__(self, *tables):
        self.tables = list(tables)
        self.calls = 0

    def fetch(self, suppress_errors=False):
        self.calls += 1
        if len(self.tables) > 1:
            return self.tables.pop(0)
        return self.tables[0]


class ExplodingSource:
    def fetch(self, suppress_errors=False):
        raise AssertionError("fetch should not be called")


@pytest.fixture
def ecb_table():
    return RateTable(
        as_of=date(2025, 3, 28),
        rates={"USD": Decimal("1.0812"), "SEK": Decimal("11.235"), "GBP": Decimal("0.8364")},
    )


ECB_DOCUMENT = b"""<?xml version="1.0" encoding="UTF-8"?>
<gesmes:Envelope xmlns:gesmes="http://www.gesmes.org/xml/2002-08-01" xmlns="http://www.ecb.int/vocabulary/2002-08-01/eurofxref">
  <gesmes:subject>Reference rates</gesmes:subject>
  <gesmes:Sender>
    <gesmes:name>European Central Bank</gesmes:name>
  </gesmes:Sender>
  <Cube>
    <Cube time="2025-03-28">
      <Cube currency="USD" rate="1.0812"/>
      <Cube currency="JPY" rate="162.51"/>
      <Cube currency="SEK" rate="11.235"/>
      <Cube currency="GBP" rate="0.8364"/>
    </Cube>
  </Cube>
</gesmes:Envelope>
"""


@pytest.fixture
def ecb_document():
    return ECB_DOCUMENT


@pytest.fixture
def static_source():
    return StaticSource


@pytest.fixture
def exploding_source():
    return ExplodingSource()
