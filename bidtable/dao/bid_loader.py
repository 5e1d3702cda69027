"""Bid loading layer.

Reads the eBid monthly sales CSV export and feeds one `Bid` per row into a
`HashTable`. It adds:

- Column lookup by position (the export has no stable header names)
- Currency parsing for the amount column ("$1,250.00" -> 1250.0)
- Recoverable row errors: a bad row is logged and skipped, loading goes on
"""

from __future__ import annotations

import csv
import logging
import math
import re
from dataclasses import dataclass, field
from typing import List, Mapping

from .. import config
from ..datastructures import HashTable
from ..errors import BidParseError, InvalidKeyError
from ..models import Bid

log = logging.getLogger(__name__)

# Lone surrogates left by errors="surrogateescape" for undecodable bytes
_UNDECODABLE = re.compile("[\udc80-\udcff]")


@dataclass
class LoadResult:
    """Outcome of one load: how many bids went in and which rows were skipped."""

    loaded: int = 0
    skipped: List[str] = field(default_factory=list)
    header: List[str] = field(default_factory=list)


def parse_amount(text: str, symbol: str = config.CURRENCY_SYMBOL) -> float:
    """Parse a monetary cell into a float.

    A single leading *symbol* and any thousands separators are stripped.
    Empty text is 0.0.

    Raises
    ------
    BidParseError
        If what remains is not a finite, non-negative number.
    """
    s = (text or "").strip()
    if symbol and s.startswith(symbol):
        s = s[len(symbol):]
    s = s.replace(",", "").strip()
    if not s:
        return 0.0
    try:
        amount = float(s)
    except ValueError:
        raise BidParseError(f"unparseable amount {text!r}") from None
    if not math.isfinite(amount) or amount < 0:
        raise BidParseError(f"amount out of range {text!r}")
    return amount


def row_to_bid(row: List[str], columns: Mapping[str, int] = config.COLUMNS,
               symbol: str = config.CURRENCY_SYMBOL, line: int | None = None) -> Bid:
    """Build a Bid from one CSV row using the *columns* position map."""
    width = max(columns.values()) + 1
    if len(row) < width:
        raise BidParseError(f"expected at least {width} columns, got {len(row)}", line)

    def cell(name: str) -> str:
        return (row[columns[name]] or "").strip()

    try:
        amount = parse_amount(cell("amount"), symbol)
    except BidParseError as e:
        raise BidParseError(str(e), line) from None
    return Bid(id=cell("id"), title=cell("title"), fund=cell("fund"), amount=amount)


def _has_undecodable(row: List[str]) -> bool:
    """True when a cell carries bytes that were not valid UTF-8 (surrogateescape)."""
    return any(_UNDECODABLE.search(c or "") for c in row)


def load_bids(csv_path: str, table: HashTable, *, columns: Mapping[str, int] = config.COLUMNS,
              symbol: str = config.CURRENCY_SYMBOL) -> LoadResult:
    """Load every bid in *csv_path* into *table*.

    Parameters
    ----------
    csv_path: str
        Path to the CSV export; the first row is the header.
    table: HashTable
        Destination table; bids are inserted in file order.
    columns: Mapping[str, int]
        Positions of the title, id, amount and fund columns.
    symbol: str
        Currency symbol stripped from the amount column.

    Malformed rows (too short, bad amount, bad id, invalid UTF-8, broken CSV
    quoting) are logged, recorded in ``LoadResult.skipped`` and do not stop
    the load. A missing file raises FileNotFoundError.
    """
    result = LoadResult()
    log.info("Loading CSV file %s", csv_path)
    with open(csv_path, newline="", encoding="utf-8-sig", errors="surrogateescape") as f:
        reader = csv.reader(f)
        try:
            result.header = next(reader, [])
        except csv.Error as e:
            raise BidParseError(f"unreadable header: {e}", reader.line_num) from None
        log.info("Header: %s", " | ".join(result.header))

        while True:
            try:
                row = next(reader)
            except StopIteration:
                break
            except csv.Error as e:
                notice = str(BidParseError(str(e), reader.line_num))
                log.warning("Skipping row: %s", notice)
                result.skipped.append(notice)
                continue

            line = reader.line_num
            if not any((c or "").strip() for c in row):
                continue  # blank line
            try:
                if _has_undecodable(row):
                    raise BidParseError("row is not valid UTF-8", line)
                bid = row_to_bid(row, columns, symbol, line)
                try:
                    table.insert(bid)
                except InvalidKeyError as e:
                    raise BidParseError(str(e), line) from None
            except BidParseError as e:
                log.warning("Skipping row: %s", e)
                result.skipped.append(str(e))
                continue
            result.loaded += 1

    log.info("Loaded %d bids (%d skipped)", result.loaded, len(result.skipped))
    return result
