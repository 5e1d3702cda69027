"""Exception types raised by the bid table and its loader."""

from __future__ import annotations

from typing import Optional


class BidTableError(Exception):
    """Base class for every error raised by this package."""


class InvalidKeyError(BidTableError, ValueError):
    """A bid id that is not a non-empty string of digits."""

    def __init__(self, bid_id: object) -> None:
        shown = bid_id[:20] + "..." if isinstance(bid_id, str) and len(bid_id) > 20 else bid_id
        super().__init__(f"Invalid bid id: {shown!r} (expected digits only)")
        self.bid_id = bid_id


class BidParseError(BidTableError, ValueError):
    """A CSV row that cannot be turned into a Bid.

    ``line`` is the 1-based line number in the source file when known.
    """

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line
