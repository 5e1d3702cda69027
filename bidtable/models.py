"""
Domain objects for the bid table.

- Bid: one auction record (id, title, fund, amount).

`id` is kept as the original digit string; the table derives its bucket
from it but always compares ids as strings.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Bid:
    """A single bid from the monthly sales export."""

    id: str = ""
    title: str = ""
    fund: str = ""
    amount: float = 0.0

    def display(self) -> str:
        """One-line form used by the CLI: ``id: title | amount | fund``."""
        return f"{self.id}: {self.title} | {self.amount} | {self.fund}"
