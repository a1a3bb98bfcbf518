"""
Drinks App - Priced Drinks

In-memory drink objects used across the project's examples. Nothing here
touches the database.

Key Features:
- Coffee priced from a fixed base plus a flat increment per ingredient
- Tea served Earl Grey and hot by default
"""
