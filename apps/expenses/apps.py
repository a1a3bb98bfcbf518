from django.apps import AppConfig


class ExpensesConfig(AppConfig):
    name = 'apps.expenses'
    verbose_name = 'Expenses'
