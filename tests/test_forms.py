"""Mini README: Tests for the add-income and add-expense forms.

Checks amount parsing, expense negation, and that unreadable amounts are
dropped without touching the ledger.
"""

from __future__ import annotations

from datetime import date

import pytest

from cashwave.finance import (
    Currency,
    EntryForm,
    EntryKind,
    Ledger,
    parse_amount,
    submit_expense,
    submit_income,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("25.50", 25.5), ("  7 ", 7.0), ("-3", -3.0), ("1e2", 100.0)],
)
def test_parse_amount_reads_decimals(text, expected) -> None:
    """Plain decimal text converts to a float."""

    assert parse_amount(text) == pytest.approx(expected)


@pytest.mark.parametrize(
    "text",
    ["", "   ", "abc", "12,50", "inf", "nan", "1e999", "1_000", "\u0661\u0662", "+", ".", None],
)
def test_parse_amount_rejects_unreadable_text(text) -> None:
    """Empty, non-decimal and non-finite text yields ``None``."""

    assert parse_amount(text) is None


def test_expense_is_stored_negated() -> None:
    """An expense of 25.50 is recorded as -25.50."""

    ledger = Ledger()
    entry_id = submit_expense(ledger, "25.50", Currency.EUR, date(2024, 4, 1))

    assert entry_id == ledger[0].entry_id
    assert ledger[0].amount == pytest.approx(-25.50)
    assert ledger[0].currency == "EUR"


def test_income_keeps_sign() -> None:
    """Income is stored exactly as parsed."""

    ledger = Ledger()
    submit_income(ledger, "100", "USD", date(2024, 4, 1))
    assert ledger[0].amount == pytest.approx(100)


def test_unparseable_income_is_silently_dropped() -> None:
    """Submitting ``abc`` returns ``None`` and appends nothing."""

    ledger = Ledger()
    ledger.add_entry(5, Currency.USD, date(2024, 1, 1))

    assert submit_income(ledger, "abc") is None
    assert len(ledger) == 1


def test_form_defaults_to_usd_and_today() -> None:
    """A form without explicit currency or date uses USD and today's date."""

    ledger = Ledger()
    EntryForm(kind=EntryKind.INCOME, amount_text="3").submit(ledger)

    assert ledger[0].currency == "USD"
    assert ledger[0].occurred_on == date.today()


def test_entry_kind_from_str() -> None:
    """Kinds accept any casing and reject unknown names."""

    assert EntryKind.from_str(" Expense ") is EntryKind.EXPENSE
    with pytest.raises(ValueError):
        EntryKind.from_str("transfer")


def test_expense_of_negative_magnitude_is_stored_positive() -> None:
    """The expense sheet negates whatever was typed, including a leading minus."""

    ledger = Ledger()
    submit_expense(ledger, "-5", Currency.USD, date(2024, 4, 1))
    assert ledger[0].amount == pytest.approx(5)


def test_shortcuts_pass_unknown_currency_labels_through() -> None:
    """Labels outside the picker set are stored as given rather than raising."""

    ledger = Ledger()
    entry_id = submit_income(ledger, "5", "GBP", date(2024, 1, 1))

    assert entry_id == ledger[0].entry_id
    assert ledger[0].currency == "GBP"
