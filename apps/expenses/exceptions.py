"""
Domain exceptions for expenses app.

Service functions raise these; views turn them into JSON error responses.

Exception Hierarchy:
    ExpenseServiceError (base)
    ├── InvalidExpenseError
    └── ExpenseNotFoundError
"""


class ExpenseServiceError(Exception):
    """Base exception for expense service errors."""
    pass


class InvalidExpenseError(ExpenseServiceError):
    """
    Raised when an expense breaks a domain rule.

    Example:
        raise InvalidExpenseError("Invalid expense: `amount` must be positive")
    """
    pass


class ExpenseNotFoundError(ExpenseServiceError):
    """Raised when expense does not exist."""
    pass
