"""
Expenses App - Expense Tracker API

Records expenses over a small JSON API and looks them up by date.

Key Features:
- POST an expense, get its id back (200) or an error message (422)
- List every expense recorded for a given date

Architecture:
- Models: Expense
- Services: record_expense, expenses_on, get_expense_by_id
- Views: function views with input serializers
- Exceptions: domain exception hierarchy rooted at ExpenseServiceError
"""

__version__ = '0.1.0'
