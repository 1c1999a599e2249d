"""Mini README: Add-income and add-expense form handling.

Structure:
    * EntryKind - which sheet the user submitted.
    * parse_amount - turn free text into a finite float or ``None``.
    * EntryForm - captured form fields with a ``submit`` helper.
    * submit_income / submit_expense - shortcuts used by the web routes.

Amounts that cannot be read as a decimal number are discarded without
raising. The ledger stays untouched and no message reaches the user; the
discard is only visible in debug logs.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Union

from ..logging_utils import get_logger
from .ledger import Currency, Ledger

LOGGER = get_logger(__name__)

_DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class EntryKind(str, Enum):
    """Distinguish the two add forms."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "EntryKind":
        """Coerce arbitrary casing into a valid entry kind."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported entry kind: {value}") from error

    def signed(self, magnitude: float) -> float:
        """Apply the sign convention: expenses are stored negated."""

        return -magnitude if self is EntryKind.EXPENSE else magnitude


def parse_amount(text: Optional[str]) -> Optional[float]:
    """Return the decimal value of ``text`` or ``None`` when unreadable."""

    if text is None:
        return None
    candidate = text.strip()
    if not _DECIMAL_PATTERN.fullmatch(candidate):
        return None
    try:
        value = float(candidate)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


@dataclass(slots=True)
class EntryForm:
    """Fields of an add sheet as typed by the user."""

    kind: EntryKind
    amount_text: str = ""
    currency: Union[Currency, str] = Currency.USD
    occurred_on: date = field(default_factory=date.today)

    def submit(self, ledger: Ledger) -> Optional[str]:
        """Record the entry, returning its id, or ``None`` if the amount is unreadable."""

        magnitude = parse_amount(self.amount_text)
        if magnitude is None:
            LOGGER.debug(
                "Discarded %s submission with unparseable amount %r",
                self.kind.value,
                self.amount_text,
            )
            return None
        return ledger.add_entry(self.kind.signed(magnitude), self.currency, self.occurred_on)


def submit_income(
    ledger: Ledger,
    amount_text: str,
    currency: Union[Currency, str] = Currency.USD,
    occurred_on: Optional[date] = None,
) -> Optional[str]:
    """Record an income entry from typed amount text."""

    return _submit(EntryKind.INCOME, ledger, amount_text, currency, occurred_on)


def submit_expense(
    ledger: Ledger,
    amount_text: str,
    currency: Union[Currency, str] = Currency.USD,
    occurred_on: Optional[date] = None,
) -> Optional[str]:
    """Record an expense entry, negating the typed magnitude."""

    return _submit(EntryKind.EXPENSE, ledger, amount_text, currency, occurred_on)


def _submit(
    kind: EntryKind,
    ledger: Ledger,
    amount_text: str,
    currency: Union[Currency, str],
    occurred_on: Optional[date],
) -> Optional[str]:
    form = EntryForm(
        kind=kind,
        amount_text=amount_text,
        currency=currency,
        occurred_on=occurred_on or date.today(),
    )
    return form.submit(ledger)
