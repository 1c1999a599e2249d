"""Mini README: Display helpers for ledger rows and the balance overlay.

Amounts render with two decimal places and dates use the short numeric
``M/D/YY`` form. The aggregate balance carries no currency label since
mixed currencies are summed as plain numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List

from .ledger import Entry


def format_amount(value: float) -> str:
    return f"{value:.2f}"


def format_short_date(value: date) -> str:
    return f"{value.month}/{value.day}/{value:%y}"


def format_balance(value: float) -> str:
    return f"Total Balance: {format_amount(value)}"


@dataclass(frozen=True, slots=True)
class EntryRow:
    """One rendered line of the entry list."""

    entry_id: str
    position: int
    title: str
    subtitle: str
    is_income: bool


def build_rows(entries: Iterable[Entry]) -> List[EntryRow]:
    """Convert entries into rows, keeping sequence order and positions."""

    return [
        EntryRow(
            entry_id=entry.entry_id,
            position=position,
            title=f"{entry.currency} {format_amount(entry.amount)}",
            subtitle=format_short_date(entry.occurred_on),
            is_income=entry.is_income,
        )
        for position, entry in enumerate(entries)
    ]
