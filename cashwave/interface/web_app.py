"""Mini README: FastAPI-powered single screen for Cash Wave.

Structure:
    * ScreenState - which add sheet is open and whether the balance shows.
    * create_application - application factory wiring routes and templates.

The screen lists entries in the order they were recorded, opens an income or
expense sheet on demand, removes rows by position, and toggles a balance
overlay. Every POST redirects back to ``/`` so a reload never resubmits a
form. The page re-reads the ledger on each render and the ledger's change
feed is tapped for logging while the application is running.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import AsyncIterator, List, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import get_settings
from ..finance import (
    Currency,
    EntryForm,
    EntryKind,
    Ledger,
    LedgerChange,
    build_rows,
    format_amount,
    format_balance,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

SCREEN_TITLE = "Cash Wave"


@dataclass(slots=True)
class ScreenState:
    """Presentation toggles that live alongside the ledger."""

    balance_visible: bool = False
    open_sheet: Optional[EntryKind] = None


def _back_to_screen() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


def create_application(ledger: Optional[Ledger] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = get_settings()
    ledger = ledger if ledger is not None else Ledger()
    screen = ScreenState()

    def log_change(change: LedgerChange) -> None:
        LOGGER.debug(
            "Ledger %s %s entries at %s; %s rows now on screen",
            change.action,
            len(change.entries),
            list(change.positions),
            change.size,
        )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        ledger.subscribe(log_change)
        try:
            yield
        finally:
            ledger.unsubscribe(log_change)

    app = FastAPI(title="Cash Wave", version="0.1.0", lifespan=lifespan)
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")
    app.state.ledger = ledger
    app.state.screen = screen

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the entry list, toolbar, open sheet and balance overlay."""

        rows = build_rows(ledger.entries())
        LOGGER.debug(
            "Rendering screen with %s rows, sheet=%s balance_visible=%s",
            len(rows),
            screen.open_sheet.value if screen.open_sheet else None,
            screen.balance_visible,
        )
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "title": SCREEN_TITLE,
                "rows": rows,
                "open_sheet": screen.open_sheet.value if screen.open_sheet else None,
                "currencies": Currency.choices(),
                "default_currency": settings.default_currency.value,
                "today": date.today().isoformat(),
                "balance_visible": screen.balance_visible,
                "balance_text": format_balance(ledger.total_balance()),
            },
        )

    @app.post("/sheet/close")
    async def close_sheet() -> RedirectResponse:
        """Dismiss whichever add sheet is open."""

        screen.open_sheet = None
        return _back_to_screen()

    @app.post("/sheet/{kind}")
    async def open_sheet(kind: str) -> RedirectResponse:
        """Open the add-income or add-expense sheet."""

        try:
            screen.open_sheet = EntryKind.from_str(kind)
        except ValueError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return _back_to_screen()

    def submit_sheet(
        kind: EntryKind,
        amount: str,
        currency: Optional[Currency],
        occurred_on: Optional[date],
    ) -> RedirectResponse:
        form = EntryForm(
            kind=kind,
            amount_text=amount,
            currency=currency or settings.default_currency,
            occurred_on=occurred_on or date.today(),
        )
        if form.submit(ledger) is None:
            screen.open_sheet = kind
        else:
            screen.open_sheet = None
        return _back_to_screen()

    @app.post("/entries/income")
    async def add_income(
        amount: str = Form(""),
        currency: Optional[Currency] = Form(None),
        occurred_on: Optional[date] = Form(None),
    ) -> RedirectResponse:
        """Record an income entry with the amount as typed."""

        return submit_sheet(EntryKind.INCOME, amount, currency, occurred_on)

    @app.post("/entries/expense")
    async def add_expense(
        amount: str = Form(""),
        currency: Optional[Currency] = Form(None),
        occurred_on: Optional[date] = Form(None),
    ) -> RedirectResponse:
        """Record an expense entry, negating the typed magnitude."""

        return submit_sheet(EntryKind.EXPENSE, amount, currency, occurred_on)

    @app.post("/entries/delete")
    async def delete_entries(positions: List[int] = Form([])) -> RedirectResponse:
        """Remove the rows at the submitted positions in one batch."""

        try:
            ledger.remove_entries(positions)
        except IndexError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return _back_to_screen()

    @app.post("/balance/toggle")
    async def toggle_balance() -> RedirectResponse:
        """Show or hide the total balance overlay."""

        screen.balance_visible = not screen.balance_visible
        LOGGER.debug("Balance overlay visible=%s", screen.balance_visible)
        return _back_to_screen()

    @app.get("/api/entries")
    async def entries_snapshot() -> JSONResponse:
        """Return all entries with the current balance."""

        return JSONResponse(ledger.export_snapshot())

    @app.get("/api/balance")
    async def balance() -> JSONResponse:
        total = ledger.total_balance()
        return JSONResponse({"balance": total, "formatted": format_amount(total)})

    return app
