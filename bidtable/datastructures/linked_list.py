from __future__ import annotations
from typing import Iterator, Optional

from ..models import Bid


class _Entry:
    """A node of a bucket chain: the bid, the bucket it hashed to, and the next node."""

    __slots__ = ("bid", "key", "next")

    def __init__(self, bid: Bid, key: int, next: Optional["_Entry"] = None) -> None:
        self.bid = bid
        self.key = key
        self.next = next


class Chain:
    """Singly-linked list of the bids that collided into one bucket.

    The head is the first bid inserted into the bucket; later colliders are
    appended at the tail, so iteration yields insertion order.
    """

    __slots__ = ("head", "_size")

    def __init__(self, bid: Bid, key: int) -> None:
        self.head: Optional[_Entry] = _Entry(bid, key)
        self._size = 1

    def append(self, bid: Bid, key: int) -> None:
        """Append (bid, key) after the last node of the chain."""
        if self.head is None:
            self.head = _Entry(bid, key)
            self._size = 1
            return
        n = self.head
        while n.next:
            n = n.next
        n.next = _Entry(bid, key)
        self._size += 1

    def find(self, bid_id: str) -> Optional[Bid]:
        """Return the first bid whose id equals *bid_id*, or None."""
        n = self.head
        while n:
            if n.bid.id == bid_id:
                return n.bid
            n = n.next
        return None

    def delete(self, bid_id: str) -> bool:
        """Unlink the first node whose bid id equals *bid_id*; True if one was removed."""
        prev: Optional[_Entry] = None
        cur = self.head
        while cur:
            if cur.bid.id == bid_id:
                if prev:
                    prev.next = cur.next
                else:
                    self.head = cur.next
                self._size -= 1
                return True
            prev, cur = cur, cur.next
        return False

    def bids(self) -> Iterator[Bid]:
        """Yield bids in link order."""
        n = self.head
        while n:
            yield n.bid
            n = n.next

    def __iter__(self) -> Iterator[Bid]:  # pragma: no cover - simple
        return self.bids()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "Chain([" + ", ".join(repr(b.id) for b in self.bids()) + "])"
