"""Recipe Text - structured views and ingredient highlighting for freeform recipes."""

__version__ = "0.1.0"

from . import ingredients, matching, recipes
from .matching import match_ingredients_sequence
from .recipes import parse_recipe

__all__ = [
    "ingredients",
    "matching",
    "recipes",
    "match_ingredients_sequence",
    "parse_recipe",
]
