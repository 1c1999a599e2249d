"""Mini README: In-memory ledger of income and expense entries.

Structure:
    * Currency - closed set of currencies offered by the entry forms.
    * Entry - immutable record of one income or expense.
    * LedgerChange - payload delivered to change observers.
    * Ledger - ordered entry sequence with removal by position and balance.

The ledger never parses or validates amounts. Callers hand it numbers that
are already parsed, and currencies are kept as plain labels. Positive amounts
are income and negative amounts are expenses. The balance is a straight sum
that ignores the currency label, because no conversion takes place.

Every mutation is announced to subscribed observers before the mutating call
returns. Observers always see the fully updated sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Tuple, Union
from uuid import uuid4

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class Currency(str, Enum):
    """Currencies selectable on the entry forms."""

    USD = "USD"
    EUR = "EUR"
    TRY = "TRY"

    @classmethod
    def choices(cls) -> List[str]:
        """Return the picker labels in display order."""

        return [member.value for member in cls]


def _new_entry_id() -> str:
    return uuid4().hex


@dataclass(frozen=True, slots=True)
class Entry:
    """A single recorded income (positive) or expense (negative)."""

    entry_id: str
    amount: float
    currency: str
    occurred_on: date

    @property
    def is_income(self) -> bool:
        return self.amount >= 0

    def as_dict(self) -> Dict[str, object]:
        """Export the entry with serialisable values."""

        return {
            "entry_id": self.entry_id,
            "amount": self.amount,
            "currency": self.currency,
            "occurred_on": self.occurred_on.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class LedgerChange:
    """Describe one mutation of the ledger."""

    action: str
    entries: Tuple[Entry, ...]
    positions: Tuple[int, ...]
    size: int


ADDED = "added"
REMOVED = "removed"

Observer = Callable[[LedgerChange], None]


class Ledger:
    """Own the ordered entry sequence and derive the balance from it."""

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._entries: List[Entry] = list(entries)
        self._observers: List[Observer] = []
        LOGGER.debug("Ledger initialised with %s entries", len(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries))

    def __getitem__(self, position: int) -> Entry:
        return self._entries[position]

    def entries(self) -> List[Entry]:
        """Return a snapshot of the entries in insertion order."""

        return list(self._entries)

    def subscribe(self, observer: Observer) -> None:
        """Register a callable notified after every mutation."""

        self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        """Stop notifying ``observer``; unknown observers are ignored."""

        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self, change: LedgerChange) -> None:
        for observer in list(self._observers):
            observer(change)

    def add_entry(
        self,
        amount: float,
        currency: Union[Currency, str],
        occurred_on: date,
    ) -> str:
        """Append a new entry and return its identifier."""

        label = currency.value if isinstance(currency, Currency) else str(currency)
        entry = Entry(
            entry_id=_new_entry_id(),
            amount=amount,
            currency=label,
            occurred_on=occurred_on,
        )
        self._entries.append(entry)
        position = len(self._entries) - 1
        LOGGER.info(
            "Added entry %s at position %s: %s %.2f on %s",
            entry.entry_id,
            position,
            entry.currency,
            entry.amount,
            entry.occurred_on.isoformat(),
        )
        self._notify(
            LedgerChange(
                action=ADDED,
                entries=(entry,),
                positions=(position,),
                size=len(self._entries),
            )
        )
        return entry.entry_id

    def remove_entries(self, positions: Iterable[int]) -> List[Entry]:
        """Remove the entries at ``positions`` in a single batch.

        Positions refer to the sequence as it stood before the call, so the
        order in which they are given does not matter. Duplicates collapse.
        An out-of-range position raises ``IndexError`` and nothing is removed.
        """

        targets = sorted(set(positions))
        if not targets:
            return []

        size = len(self._entries)
        invalid = [position for position in targets if not 0 <= position < size]
        if invalid:
            raise IndexError(
                f"Entry positions {invalid} out of range for ledger of {size} entries"
            )

        doomed = set(targets)
        removed = [self._entries[position] for position in targets]
        self._entries = [
            entry for position, entry in enumerate(self._entries) if position not in doomed
        ]
        LOGGER.info(
            "Removed %s entries at positions %s (%s remaining)",
            len(removed),
            targets,
            len(self._entries),
        )
        self._notify(
            LedgerChange(
                action=REMOVED,
                entries=tuple(removed),
                positions=tuple(targets),
                size=len(self._entries),
            )
        )
        return removed

    def total_balance(self) -> float:
        """Sum every amount, ignoring the currency label."""

        return sum((entry.amount for entry in self._entries), 0.0)

    def export_snapshot(self) -> Dict[str, object]:
        """Export entries and balance for JSON responses."""

        return {
            "entries": [entry.as_dict() for entry in self._entries],
            "balance": self.total_balance(),
        }
