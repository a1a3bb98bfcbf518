import logging

from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ParseError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer

from .exceptions import InvalidExpenseError, ExpenseNotFoundError
from .serializers import (
    ExpenseInputSerializer,
    ExpenseDateSerializer,
    ExpenseSerializer,
    RecordedExpenseSerializer,
    ErrorResponseSerializer,
    validation_error_message,
)
from . import services

logger = logging.getLogger(__name__)


@extend_schema(
    request=ExpenseInputSerializer,
    responses={
        200: RecordedExpenseSerializer,
        422: ErrorResponseSerializer,
    },
    description="Record an expense. Returns the new expense id, or an error message when the expense fails validation.",
    tags=['expenses'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def record_expense(request):
    """Record an expense using service layer."""
    try:
        data = request.data
    except ParseError as e:
        logger.info("Rejected unparseable expense body: %s", e.detail)
        return Response(
            {'error': f"Invalid expense: {e.detail}"},
            status=status.HTTP_422_UNPROCESSABLE_ENTITY
        )

    input_serializer = ExpenseInputSerializer(data=data)
    if not input_serializer.is_valid():
        message = validation_error_message(input_serializer.errors)
        logger.info("Rejected expense: %s", message)
        return Response(
            {'error': message},
            status=status.HTTP_422_UNPROCESSABLE_ENTITY
        )

    try:
        expense = services.record_expense(**input_serializer.validated_data)
    except InvalidExpenseError as e:
        logger.info("Rejected expense: %s", e)
        return Response(
            {'error': str(e)},
            status=status.HTTP_422_UNPROCESSABLE_ENTITY
        )

    return Response({'expense_id': expense.id}, status=status.HTTP_200_OK)


@extend_schema(
    responses={
        200: ExpenseSerializer(many=True),
        400: inline_serializer(
            name='ExpenseDateErrorResponse',
            fields={'date': drf_serializers.ListField(child=drf_serializers.CharField())},
        ),
    },
    description="List all expenses recorded on the given date (YYYY-MM-DD).",
    tags=['expenses'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def expenses_on_date(request, date):
    """Get all expenses for a date."""
    date_serializer = ExpenseDateSerializer(data={'date': date})
    date_serializer.is_valid(raise_exception=True)

    expenses = services.expenses_on(date_serializer.validated_data['date'])
    serializer = ExpenseSerializer(expenses, many=True)
    return Response(serializer.data)


@extend_schema(
    responses={
        200: ExpenseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Get a single expense by its id.",
    tags=['expenses'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def expense_detail(request, expense_id):
    """Get one expense using service layer."""
    try:
        expense = services.get_expense_by_id(expense_id)
    except ExpenseNotFoundError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_404_NOT_FOUND
        )

    return Response(ExpenseSerializer(expense).data)
