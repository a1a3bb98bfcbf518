from django.apps import AppConfig


class DrinksConfig(AppConfig):
    name = 'apps.drinks'
    verbose_name = 'Drinks'
