from datetime import date
from decimal import Decimal
from apps.expenses.serializers import (
    ExpenseInputSerializer,
    ExpenseDateSerializer,
    validation_error_message,
)


# =============================================================================
# ExpenseInputSerializer Tests
# =============================================================================

class TestExpenseInputSerializer:
    """Tests for ExpenseInputSerializer input validation."""

    def test_valid_expense(self):
        serializer = ExpenseInputSerializer(data={
            'payee': 'Starbucks',
            'amount': '5.75',
            'date': '2017-06-10',
        })

        assert serializer.is_valid()
        assert serializer.validated_data == {
            'payee': 'Starbucks',
            'amount': Decimal('5.75'),
            'date': date(2017, 6, 10),
        }

    def test_too_many_decimal_places(self):
        serializer = ExpenseInputSerializer(data={
            'payee': 'Starbucks',
            'amount': '5.755',
            'date': '2017-06-10',
        })

        assert not serializer.is_valid()
        assert 'amount' in serializer.errors

    def test_blank_payee(self):
        serializer = ExpenseInputSerializer(data={
            'payee': '',
            'amount': '5.75',
            'date': '2017-06-10',
        })

        assert not serializer.is_valid()
        assert validation_error_message(serializer.errors) == 'Invalid expense: `payee` is required'


class TestExpenseDateSerializer:
    """Tests for ExpenseDateSerializer."""

    def test_valid_date(self):
        serializer = ExpenseDateSerializer(data={'date': '2017-06-10'})

        assert serializer.is_valid()
        assert serializer.validated_data['date'] == date(2017, 6, 10)

    def test_impossible_date(self):
        serializer = ExpenseDateSerializer(data={'date': '2017-02-30'})

        assert not serializer.is_valid()
        assert 'date' in serializer.errors


# =============================================================================
# validation_error_message Tests
# =============================================================================

class TestValidationErrorMessage:
    """Tests for flattening serializer errors."""

    def test_required_fields(self):
        serializer = ExpenseInputSerializer(data={})
        serializer.is_valid()

        message = validation_error_message(serializer.errors)

        assert message == (
            'Invalid expense: `payee` is required; '
            '`amount` is required; `date` is required'
        )

    def test_other_errors_keep_detail_text(self):
        serializer = ExpenseInputSerializer(data={
            'payee': 'Starbucks',
            'amount': 'lots',
            'date': '2017-06-10',
        })
        serializer.is_valid()

        message = validation_error_message(serializer.errors)

        assert message == 'Invalid expense: `amount`: A valid number is required.'
