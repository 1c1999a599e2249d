"""Mini README: Finance core for Cash Wave.

The ledger owns the entry sequence and balance, the forms module turns typed
text into ledger entries, and the formatting module prepares rows for the
screen. Everything is in-memory and lost when the process exits.
"""

from .formatting import EntryRow, build_rows, format_amount, format_balance, format_short_date
from .forms import EntryForm, EntryKind, parse_amount, submit_expense, submit_income
from .ledger import Currency, Entry, Ledger, LedgerChange

__all__ = [
    "Currency",
    "Entry",
    "EntryForm",
    "EntryKind",
    "EntryRow",
    "Ledger",
    "LedgerChange",
    "build_rows",
    "format_amount",
    "format_balance",
    "format_short_date",
    "parse_amount",
    "submit_expense",
    "submit_income",
]
