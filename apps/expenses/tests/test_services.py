"""
Service layer unit tests for expenses app.

Tests cover:
- Recording valid expenses
- Domain rule violations
- Lookups by date and id
"""

import pytest
from decimal import Decimal
from datetime import date

from apps.expenses.models import Expense
from apps.expenses.services import (
    record_expense,
    expenses_on,
    get_expense_by_id,
)
from apps.expenses.exceptions import (
    ExpenseServiceError,
    InvalidExpenseError,
    ExpenseNotFoundError,
)


# =============================================================================
# record_expense
# =============================================================================

@pytest.mark.django_db
class TestRecordExpense:
    """Tests for record_expense()."""

    def test_record_expense_success(self, expense_date):
        expense = record_expense(
            payee='Starbucks',
            amount=Decimal('5.75'),
            date=expense_date,
        )

        assert expense.id is not None
        assert Expense.objects.filter(id=expense.id).exists()

    def test_record_expense_strips_payee(self, expense_date):
        expense = record_expense(
            payee='  Starbucks  ',
            amount=Decimal('5.75'),
            date=expense_date,
        )

        assert expense.payee == 'Starbucks'

    @pytest.mark.parametrize('payee', ['', '   ', None])
    def test_blank_payee_rejected(self, expense_date, payee):
        with pytest.raises(InvalidExpenseError, match='`payee` is required'):
            record_expense(payee=payee, amount=Decimal('5.75'), date=expense_date)

        assert Expense.objects.count() == 0

    @pytest.mark.parametrize('amount', [Decimal('0.00'), Decimal('-1.00')])
    def test_non_positive_amount_rejected(self, expense_date, amount):
        with pytest.raises(InvalidExpenseError, match='`amount` must be positive'):
            record_expense(payee='Starbucks', amount=amount, date=expense_date)

    def test_missing_amount_rejected(self, expense_date):
        with pytest.raises(InvalidExpenseError, match='`amount` is required'):
            record_expense(payee='Starbucks', amount=None, date=expense_date)

    def test_missing_date_rejected(self):
        with pytest.raises(InvalidExpenseError, match='`date` is required'):
            record_expense(payee='Starbucks', amount=Decimal('5.75'), date=None)

    def test_invalid_expense_is_a_service_error(self, expense_date):
        """Callers can catch every domain error through the base class."""
        with pytest.raises(ExpenseServiceError):
            record_expense(payee='', amount=Decimal('5.75'), date=expense_date)


# =============================================================================
# Lookups
# =============================================================================

@pytest.mark.django_db
class TestExpenseLookups:
    """Tests for expenses_on() and get_expense_by_id()."""

    def test_expenses_on_returns_only_that_date(
        self, expense_date, coffee_expense, zoo_expense, groceries_expense
    ):
        result = list(expenses_on(expense_date))

        assert result == [coffee_expense, zoo_expense]

    def test_expenses_on_empty_date(self):
        assert list(expenses_on(date(2017, 6, 12))) == []

    def test_get_expense_by_id(self, coffee_expense):
        assert get_expense_by_id(coffee_expense.id) == coffee_expense

    def test_get_expense_by_id_not_found(self):
        with pytest.raises(ExpenseNotFoundError):
            get_expense_by_id(999999)
