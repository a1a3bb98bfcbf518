from rest_framework import serializers
from .models import Expense


# =============================================================================
# Input Serializers
# =============================================================================

class ExpenseInputSerializer(serializers.Serializer):
    """
    Validate the body of POST /api/expenses/.

    Fields:
        payee (str): Who was paid
        amount (decimal): How much was paid
        date (date): When, as YYYY-MM-DD
    """

    payee = serializers.CharField(max_length=200)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    date = serializers.DateField()


class ExpenseDateSerializer(serializers.Serializer):
    """Validate the date segment of GET /api/expenses/<date>/."""

    date = serializers.DateField(input_formats=['%Y-%m-%d'])


# =============================================================================
# Output Serializers
# =============================================================================

class ExpenseSerializer(serializers.ModelSerializer):
    """Serializer for recorded expenses."""

    class Meta:
        model = Expense
        fields = [
            'id',
            'payee',
            'amount',
            'date',
        ]
        read_only_fields = fields


class RecordedExpenseSerializer(serializers.Serializer):
    expense_id = serializers.IntegerField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def validation_error_message(errors):
    """
    Flatten serializer errors into a single human-readable message.

    ``{'payee': [ErrorDetail('This field is required.', code='required')]}``
    becomes ``Invalid expense: `payee` is required``.
    """
    parts = []
    for field, details in errors.items():
        for detail in details:
            if getattr(detail, 'code', None) in ('required', 'blank', 'null'):
                parts.append(f"`{field}` is required")
            else:
                parts.append(f"`{field}`: {detail}")
    return "Invalid expense: " + "; ".join(parts)
