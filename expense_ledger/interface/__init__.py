"""Mini README: Console presentation helpers for the expense tracker.

The Typer entry point in ``expense_tracker.py`` parses arguments and calls
the engine; the functions exported here turn engine results into the lines
it echoes so the wording lives in one place.
"""

from .console import (
    format_amount,
    format_budget_set,
    format_budget_warning,
    format_expense,
    format_month_summary,
    format_summary,
)

__all__ = [
    "format_amount",
    "format_budget_set",
    "format_budget_warning",
    "format_expense",
    "format_month_summary",
    "format_summary",
]
