"""Mini README: Entry point CLI for the personal expense tracker.

This script exposes a Typer command that loads the ledger file, applies the
requested operations in a fixed order (add, update, delete, summary, list,
month summary, category filter, set budget), warns when the current month
is over budget, and saves the ledger if any expense changed. Several
operations can be combined in one invocation, e.g.::

    expense-tracker --add 12.50 "Lunch" food --summary

Reports go to stdout; errors and warnings go to stderr. Business errors
such as an unknown id do not change the exit code; a failed save exits 1.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple, TypeVar

import typer

from expense_ledger.configuration import get_settings
from expense_ledger.errors import LedgerError, PersistenceError
from expense_ledger.interface import (
    format_budget_set,
    format_budget_warning,
    format_expense,
    format_month_summary,
    format_summary,
)
from expense_ledger.ledger import ExpenseCategory, LedgerEngine, LedgerStore, parse_month
from expense_ledger.logging_utils import configure_root_logger

T = TypeVar("T")

cli = typer.Typer(
    help="Record, categorise and summarise personal expenses.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

CATEGORY_HELP = ", ".join(ExpenseCategory.names())


def _given(values: Optional[Sequence[Optional[str]]]) -> bool:
    """Tuple options arrive as all-``None`` tuples when omitted."""

    return bool(values) and values[0] is not None


def _echo_warnings(engine: LedgerEngine) -> None:
    for message in engine.drain_warnings():
        typer.echo(message, err=True)


def _attempt(engine: LedgerEngine, operation: Callable[[], T]) -> Optional[T]:
    """Run one operation, reporting ledger errors without stopping the batch."""

    try:
        return operation()
    except LedgerError as error:
        typer.echo(str(error), err=True)
        return None
    finally:
        _echo_warnings(engine)


@cli.command()
def track(
    add: Tuple[str, str, str] = typer.Option(
        (None, None, None),
        "--add",
        "-a",
        metavar="AMOUNT DESCRIPTION CATEGORY",
        help=f"Add a new expense. Categories: {CATEGORY_HELP}.",
    ),
    on: Optional[datetime] = typer.Option(
        None,
        "--on",
        formats=["%Y-%m-%d"],
        help="Date of the expense added with --add (defaults to today).",
    ),
    update: Tuple[str, str, str, str] = typer.Option(
        (None, None, None, None),
        "--update",
        "-u",
        metavar="ID AMOUNT DESCRIPTION CATEGORY",
        help="Update an existing expense.",
    ),
    delete: Optional[str] = typer.Option(
        None, "--delete", "-d", metavar="ID", help="Delete an existing expense by id."
    ),
    summary: bool = typer.Option(False, "--summary", "-s", help="Show the summary of expenses."),
    list_all: bool = typer.Option(False, "--all", "-l", help="List all recorded expenses."),
    month_summary: Optional[int] = typer.Option(
        None,
        "--month-summary",
        "-m",
        min=1,
        max=12,
        help="Show the expenses of a specific month (1-12) across all years.",
    ),
    category_filter: Optional[str] = typer.Option(
        None, "--category-filter", "-c", help="List the expenses of one category."
    ),
    set_budget: Tuple[str, str] = typer.Option(
        (None, None),
        "--set-budget",
        "-b",
        metavar="MONTH AMOUNT",
        help="Set a budget for a month (1-12 or a month name). Budgets are not saved.",
    ),
    ledger_file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Ledger file to use instead of the configured one."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Apply the requested operations to the expense ledger."""

    settings = get_settings()
    configure_root_logger("DEBUG" if verbose else settings.log_level)
    symbol = settings.currency_symbol

    budget_month: Optional[int] = None
    if _given(set_budget):
        try:
            budget_month = parse_month(set_budget[0])
        except LedgerError as error:
            raise typer.BadParameter(str(error), param_hint="--set-budget") from error

    store = LedgerStore(
        ledger_file or settings.ledger_file,
        backup_corrupt_files=settings.backup_corrupt_files,
    )
    engine = LedgerEngine(store)
    engine.load()
    _echo_warnings(engine)

    if _given(add):
        amount, description, category = add
        added = _attempt(
            engine,
            lambda: engine.add_expense(
                amount,
                description,
                occurred_on=on.date() if on is not None else None,
                category=category,
            ),
        )
        if added is not None:
            typer.echo(f"Added {format_expense(added, symbol)}")

    if _given(update):
        expense_id, amount, description, category = update
        updated = _attempt(
            engine, lambda: engine.update_expense(expense_id, amount, description, category)
        )
        if updated is not None:
            typer.echo(f"Updated {format_expense(updated, symbol)}")

    if delete is not None:
        deleted = _attempt(engine, lambda: engine.delete_expense(delete))
        if deleted is not None:
            typer.echo(f"Deleted {format_expense(deleted, symbol)}")

    if summary:
        for line in format_summary(engine.summarise(), symbol):
            typer.echo(line)

    if list_all:
        if len(engine) == 0:
            typer.echo("No recorded expenses.")
        else:
            typer.echo("All Recorded Expenses:")
            for expense in engine.iter_expenses():
                typer.echo(format_expense(expense, symbol))

    if month_summary is not None:
        for line in format_month_summary(engine.summarise_month(month_summary), symbol):
            typer.echo(line)

    if category_filter is not None:
        filtered = _attempt(engine, lambda: engine.filter_by_category(category_filter))
        if filtered is not None:
            typer.echo(f"Filtered expenses by category '{category_filter.lower()}':")
            for expense in filtered:
                typer.echo(format_expense(expense, symbol))

    if budget_month is not None:
        budget = _attempt(engine, lambda: engine.set_budget(budget_month, set_budget[1]))
        if budget is not None:
            typer.echo(format_budget_set(budget, symbol))

    status = engine.check_budget(date.today().month)
    if status.exceeded:
        typer.echo(format_budget_warning(status, symbol))

    try:
        engine.save()
    except PersistenceError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=1) from error


if __name__ == "__main__":
    cli()
