"""Mini README: Tests for row and balance formatting."""

from __future__ import annotations

from datetime import date

from cashwave.finance import Currency, Ledger, build_rows, format_balance, format_short_date


def test_rows_show_currency_amount_and_short_date() -> None:
    """Rows render the currency, two decimals, and an M/D/YY date."""

    ledger = Ledger()
    ledger.add_entry(12.5, Currency.USD, date(2024, 5, 1))
    ledger.add_entry(-25.5, Currency.TRY, date(2023, 12, 31))

    rows = build_rows(ledger.entries())

    assert [row.title for row in rows] == ["USD 12.50", "TRY -25.50"]
    assert [row.subtitle for row in rows] == ["5/1/24", "12/31/23"]
    assert [row.position for row in rows] == [0, 1]
    assert rows[0].is_income and not rows[1].is_income


def test_balance_has_no_currency_label() -> None:
    assert format_balance(60) == "Total Balance: 60.00"
    assert format_balance(-25.5) == "Total Balance: -25.50"


def test_short_date_pads_year_only() -> None:
    assert format_short_date(date(2005, 1, 9)) == "1/9/05"
