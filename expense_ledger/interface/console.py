"""Mini README: Text rendering for expenses, summaries and budgets.

Structure:
    * format_amount - currency symbol plus two decimal places.
    * format_expense - one line per expense for listings and echoes.
    * format_summary / format_month_summary - report blocks as line lists.
    * format_budget_set / format_budget_warning - budget messages.

Nothing here writes to a stream; callers decide between stdout and stderr.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

from ..ledger.models import Budget, BudgetStatus, Expense, ExpenseSummary, MonthSummary, month_label


def format_amount(amount: Decimal, currency_symbol: str = "$") -> str:
    """Render ``amount`` with two decimals, keeping the sign in front."""

    digits = f"{amount.copy_abs():,.2f}"
    sign = "-" if amount < 0 and digits != "0.00" else ""
    return f"{sign}{currency_symbol}{digits}"


def format_expense(expense: Expense, currency_symbol: str = "$") -> str:
    return (
        f"{expense.expense_id}  {expense.occurred_on.isoformat()}  "
        f"{expense.category.value:<13} {format_amount(expense.amount, currency_symbol):>12}  "
        f"{expense.description}"
    )


def format_summary(summary: ExpenseSummary, currency_symbol: str = "$") -> List[str]:
    """An empty ledger reads differently from a ledger that nets to zero."""

    if summary.is_empty:
        return ["No expenses recorded."]
    return [
        "Expense Summary:",
        f"Expenses: {summary.count}",
        f"Total: {format_amount(summary.total, currency_symbol)}",
    ]


def format_month_summary(summary: MonthSummary, currency_symbol: str = "$") -> List[str]:
    label = month_label(summary.month)
    if summary.is_empty:
        return [f"No recorded expenses for month: {label}"]
    lines = [f"Expense Summary for {label}:"]
    lines.extend(format_expense(expense, currency_symbol) for expense in summary.expenses)
    lines.append(f"Total Expenses for {label}: {format_amount(summary.total, currency_symbol)}")
    return lines


def format_budget_set(budget: Budget, currency_symbol: str = "$") -> str:
    return f"Budget set for {month_label(budget.month)}: {format_amount(budget.amount, currency_symbol)}"


def format_budget_warning(status: BudgetStatus, currency_symbol: str = "$") -> str:
    if status.cap is None:
        raise ValueError(f"No budget is set for month {status.month}")
    return (
        f"Warning: You have exceeded your budget for {month_label(status.month)} "
        f"({format_amount(status.total, currency_symbol)} spent of "
        f"{format_amount(status.cap, currency_symbol)})."
    )
