"""
Drink Models Module
===================

Plain Python drinks. A ``Coffee`` collects ingredients and prices itself
from their count; a ``Tea`` only knows its flavor and temperature.

Example:
    Pricing a coffee with milk and sugar::

        from apps.drinks.drinks import Coffee

        coffee = Coffee()
        coffee.add('milk')
        coffee.add('sugar')
        coffee.price()  # Decimal('1.50')
"""

from decimal import Decimal
from typing import Any, List


BASE_PRICE = Decimal('1.00')
INGREDIENT_PRICE = Decimal('0.25')

DEFAULT_TEA_FLAVOR = 'earl_grey'
DEFAULT_TEA_TEMPERATURE_F = 205.0


class Coffee:
    """
    A cup of coffee priced by how many ingredients went into it.

    Ingredients are opaque tokens: only their count affects the price, so
    duplicates count twice and the order of additions never matters.
    """

    def __init__(self):
        self._ingredients: List[Any] = []

    def __repr__(self):
        return f"Coffee(ingredients={self._ingredients!r})"

    @property
    def ingredients(self) -> List[Any]:
        """Ingredients in the order they were added."""
        return list(self._ingredients)

    def add(self, ingredient: Any) -> None:
        """Add one ingredient to the cup."""
        self._ingredients.append(ingredient)

    def price(self) -> Decimal:
        """Return base price plus the per-ingredient increment for each ingredient."""
        return BASE_PRICE + INGREDIENT_PRICE * len(self._ingredients)


class Tea:
    """A cup of tea. Temperature is in degrees Fahrenheit."""

    def __init__(self, flavor: str = DEFAULT_TEA_FLAVOR,
                 temperature: float = DEFAULT_TEA_TEMPERATURE_F):
        self.flavor = flavor
        self.temperature = temperature

    def __repr__(self):
        return f"Tea(flavor={self.flavor!r}, temperature={self.temperature!r})"
