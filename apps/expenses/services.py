"""
Expense Services Module
=======================

Business logic for the expense tracker: recording expenses and reading
them back by date. Views validate request shape; the rules an expense must
satisfy regardless of where it came from live here.

Example:
    Recording an expense::

        from apps.expenses.services import record_expense

        expense = record_expense(
            payee='Starbucks',
            amount=Decimal('5.75'),
            date=date(2017, 6, 10),
        )
        expense.id  # returned to API clients as ``expense_id``
"""

import logging
from datetime import date as date_type
from decimal import Decimal

from django.db import transaction
from django.db.models import QuerySet

from .exceptions import ExpenseNotFoundError, InvalidExpenseError
from .models import Expense

logger = logging.getLogger(__name__)


@transaction.atomic
def record_expense(*, payee: str, amount: Decimal, date: date_type) -> Expense:
    """
    Persist a new expense.

    Args:
        payee: Who was paid
        amount: How much, must be positive
        date: When the expense was incurred

    Returns:
        Created Expense instance

    Raises:
        InvalidExpenseError: If payee is blank or amount is not positive
    """
    if not payee or not payee.strip():
        raise InvalidExpenseError("Invalid expense: `payee` is required")
    if amount is None:
        raise InvalidExpenseError("Invalid expense: `amount` is required")
    if amount <= 0:
        raise InvalidExpenseError("Invalid expense: `amount` must be positive")
    if date is None:
        raise InvalidExpenseError("Invalid expense: `date` is required")

    expense = Expense.objects.create(
        payee=payee.strip(),
        amount=amount,
        date=date,
    )
    logger.info("Recorded expense %s: %s %s on %s", expense.id, expense.payee, expense.amount, expense.date)
    return expense


def expenses_on(date: date_type) -> QuerySet:
    """Return all expenses recorded for ``date``, oldest first."""
    return Expense.objects.filter(date=date).order_by('id')


def get_expense_by_id(expense_id: int) -> Expense:
    """
    Get expense by primary key.

    Raises:
        ExpenseNotFoundError: If no expense has this id
    """
    try:
        return Expense.objects.get(id=expense_id)
    except Expense.DoesNotExist:
        raise ExpenseNotFoundError(f"Expense with id {expense_id} not found")
