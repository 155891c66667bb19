# asset_tracker/services/rate_source.py
"""
ECB daily reference rates.

The feed looks like this (namespaces omitted, other children of the
envelope such as the sender block are ignored):

    <Envelope>
      <Cube>
        <Cube time="2025-03-28">
          <Cube currency="USD" rate="1.0812"/>
          <Cube currency="SEK" rate="11.235"/>
        </Cube>
      </Cube>
    </Envelope>
"""
from __future__ import annotations

import logging
from datetime import date
from typing import NamedTuple, Optional, Union

import requests
from defusedxml import DefusedXmlException
from defusedxml import ElementTree as SafeET

from asset_tracker.models.rates import LIVE, RateTable
from asset_tracker.services.settings import FX_TIMEOUT

logger = logging.getLogger(__name__)

ECB_DAILY_URL = "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml"


class CurrencyAPIError(RuntimeError):
    pass

class RateFetchError(CurrencyAPIError):
    """Network error, timeout or non-2xx answer."""

class RateParseError(CurrencyAPIError):
    """Document doesn't have the Envelope/Cube/Cube/Cube shape."""


class FetchResult(NamedTuple):
    table: RateTable
    error: Optional[CurrencyAPIError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _local_name(tag) -> str:
    return str(tag).rsplit("}", 1)[-1]

def _first_cube(node, **required):
    for child in node:
        if _local_name(child.tag) != "Cube":
            continue
        if all(child.get(attr) for attr in required):
            return child
    return None


def parse_rate_document(document: Union[bytes, str]) -> RateTable:
    """
    Parse an ECB rate document into a RateTable.

    A DOCTYPE is tolerated and never resolved; entity declarations are
    rejected. Raises RateParseError for anything that isn't a usable table.
    """
    try:
        root = SafeET.fromstring(document)
    except (SafeET.ParseError, DefusedXmlException) as exc:
        raise RateParseError(f"Malformed rate document: {exc}") from exc

    outer = _first_cube(root)
    if outer is None:
        raise RateParseError("Missing outer Cube element")
    dated = _first_cube(outer, time=True)
    if dated is None:
        raise RateParseError("Missing dated Cube element")

    try:
        as_of = date.fromisoformat(dated.get("time").strip())
    except ValueError as exc:
        raise RateParseError(f"Bad rate date {dated.get('time')!r}") from exc

    rates = {}
    for leaf in dated:
        if _local_name(leaf.tag) != "Cube":
            continue
        code = (leaf.get("currency") or "").strip().upper()
        raw = (leaf.get("rate") or "").strip()
        if not code:
            raise RateParseError("Rate entry without currency code")
        rates[code] = raw

    if not rates:
        raise RateParseError("Rate document holds no currencies")
    try:
        return RateTable(as_of=as_of, rates=rates, source=LIVE)
    except ValueError as exc:
        raise RateParseError(str(exc)) from exc


class RateSource:
    """
    Single-shot fetcher for the ECB daily feed.

    Failures never escape `fetch`: the caller gets the fallback table and can
    tell it apart through `RateTable.is_fallback`.
    """

    BASE_URL = ECB_DAILY_URL

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = FX_TIMEOUT if timeout is None else timeout

    def _download(self) -> bytes:
        try:
            resp = requests.get(self.BASE_URL, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise RateFetchError(f"{self.BASE_URL}: {exc}") from exc
        return resp.content

    def try_fetch(self, today: Optional[date] = None) -> FetchResult:
        try:
            table = parse_rate_document(self._download())
        except CurrencyAPIError as exc:
            return FetchResult(RateTable.fallback(today), exc)
        return FetchResult(table)

    def fetch(self, suppress_errors: bool = False) -> RateTable:
        result = self.try_fetch()
        if result.ok:
            logger.debug("Fetched %d rates dated %s", len(result.table), result.table.as_of)
        elif not suppress_errors:
            logger.warning("Error updating currency rates: %s", result.error)
        return result.table
