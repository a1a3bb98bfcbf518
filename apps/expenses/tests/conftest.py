import pytest
from decimal import Decimal
from datetime import date
from rest_framework.test import APIClient
from apps.expenses.models import Expense


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def expense_date():
    """The day most fixture expenses were incurred on."""
    return date(2017, 6, 10)


@pytest.fixture
def coffee_expense(db, expense_date):
    """Create and return a coffee expense."""
    return Expense.objects.create(
        payee='Starbucks',
        amount=Decimal('5.75'),
        date=expense_date,
    )


@pytest.fixture
def zoo_expense(db, expense_date):
    """Create and return a second expense on the same day."""
    return Expense.objects.create(
        payee='Zoo',
        amount=Decimal('15.25'),
        date=expense_date,
    )


@pytest.fixture
def groceries_expense(db):
    """Create and return an expense on a different day."""
    return Expense.objects.create(
        payee='Whole Foods',
        amount=Decimal('95.20'),
        date=date(2017, 6, 11),
    )


@pytest.fixture
def valid_expense_data(expense_date):
    """Request body for a valid expense."""
    return {
        'payee': 'Starbucks',
        'amount': '5.75',
        'date': str(expense_date),
    }
