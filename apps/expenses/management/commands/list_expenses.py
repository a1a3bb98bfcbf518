"""
Management command to print the expenses recorded on a date.

Usage:
    python manage.py list_expenses --date 2017-06-10
"""

from datetime import date as date_type
from decimal import Decimal

from django.core.management.base import BaseCommand, CommandError
from apps.expenses.services import expenses_on


class Command(BaseCommand):
    help = 'List the expenses recorded on a date and their total'

    def add_arguments(self, parser):
        parser.add_argument(
            '--date',
            required=True,
            help='Date to list, as YYYY-MM-DD',
        )

    def handle(self, *args, **options):
        try:
            day = date_type.fromisoformat(options['date'])
        except ValueError:
            raise CommandError(f"Invalid date: {options['date']!r}. Use YYYY-MM-DD")

        expenses = list(expenses_on(day))

        if not expenses:
            self.stdout.write(
                self.style.WARNING(f'No expenses recorded on {day}.')
            )
            return

        self.stdout.write(f'\nExpenses on {day}:\n')
        for expense in expenses:
            self.stdout.write(f'  - #{expense.id} | {expense.payee} | {expense.amount}')

        total = sum((expense.amount for expense in expenses), Decimal('0.00'))
        self.stdout.write(
            self.style.SUCCESS(f'\nTotal: {total} ({len(expenses)} expense(s))')
        )
