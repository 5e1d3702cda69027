from __future__ import annotations
from typing import Iterator, List, Optional

from ..config import DEFAULT_SIZE, MAX_ID_DIGITS
from ..errors import InvalidKeyError
from ..models import Bid
from .linked_list import Chain


def parse_key(bid_id: str) -> int:
    """Convert a bid id to its integer key.

    Raises InvalidKeyError for empty, non-digit or overlong ids instead of
    quietly mapping them to 0.
    """
    if not isinstance(bid_id, str) or not bid_id.isascii() or not bid_id.isdigit() \
            or len(bid_id) > MAX_ID_DIGITS:
        raise InvalidKeyError(bid_id)
    try:
        return int(bid_id)
    except ValueError:
        # over the interpreter's int conversion digit limit
        raise InvalidKeyError(bid_id) from None


class HashTable:
    """A fixed-size, separate-chaining hash table of bids keyed by bid id.

    - The slot array never grows; chains absorb every collision.
    - An empty slot is ``None``; an occupied slot holds the bucket's Chain,
      whose head is the first bid hashed there.
    - Remove unlinks only the matching bid, bucket-mates stay searchable.
    """

    __slots__ = ("_cap", "_slots", "_size")

    def __init__(self, capacity: int = DEFAULT_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._cap: int = capacity
        self._slots: list[Optional[Chain]] = [None] * self._cap
        self._size: int = 0

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def hash(self, key: int) -> int:
        """Bucket index for an integer key: ``key % capacity``."""
        return key % self._cap

    def _bucket_index(self, bid_id: str) -> int:
        return self.hash(parse_key(bid_id))

    # -----------------------------
    # Core operations
    # -----------------------------
    def insert(self, bid: Bid) -> None:
        """Insert a bid, appending it to the bucket's chain on collision.

        Duplicate ids are appended too; search returns the oldest one.
        """
        key = self._bucket_index(bid.id)
        chain = self._slots[key]
        if chain is None:
            self._slots[key] = Chain(bid, key)
        else:
            chain.append(bid, key)
        self._size += 1

    def search(self, bid_id: str) -> Optional[Bid]:
        """Return the bid with exactly this id, or None when absent."""
        try:
            key = self._bucket_index(bid_id)
        except InvalidKeyError:
            return None
        chain = self._slots[key]
        if chain is None:
            return None
        return chain.find(bid_id)

    def remove(self, bid_id: str) -> bool:
        """Remove the bid with this id; bucket-mates are left in place."""
        try:
            key = self._bucket_index(bid_id)
        except InvalidKeyError:
            return False
        chain = self._slots[key]
        if chain is None or not chain.delete(bid_id):
            return False
        if not chain:
            self._slots[key] = None
        self._size -= 1
        return True

    def print_all(self) -> Iterator[Bid]:
        """Yield every stored bid: slots in index order, each chain oldest first."""
        for chain in self._slots:
            if chain is not None:
                yield from chain.bids()

    def clear(self) -> None:
        """Empty every slot. Capacity is unchanged."""
        self._slots = [None] * self._cap
        self._size = 0

    # -----------------------------
    # Diagnostics
    # -----------------------------
    @property
    def capacity(self) -> int:
        return self._cap

    @property
    def load_factor(self) -> float:
        return self._size / self._cap

    def bucket(self, index: int) -> List[Bid]:
        """Bids stored in slot *index*, in chain order."""
        if index < 0 or index >= self._cap:
            raise IndexError("bucket index out of range")
        chain = self._slots[index]
        return list(chain.bids()) if chain is not None else []

    def bucket_sizes(self) -> List[int]:
        """Chain length of every slot (0 for empty slots)."""
        return [len(chain) if chain is not None else 0 for chain in self._slots]

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Bid]:
        return self.print_all()

    def __contains__(self, bid_id: str) -> bool:
        return self.search(bid_id) is not None

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"HashTable(capacity={self._cap}, size={self._size})"
