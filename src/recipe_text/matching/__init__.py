"""Ingredient phrase matching in recipe step text."""

from .distance import levenshtein, normalized_levenshtein
from .matcher import (
    DEFAULT_THRESHOLD,
    MAX_NGRAM_SIZE,
    IngredientIndex,
    PreparedIngredient,
    highlighted_ingredients,
    match_ingredients_sequence,
    match_with_index,
    prepare_index,
    tokens_to_dicts,
)
from .models import IngredientToken, MatchInput, SequenceToken, TextToken

__all__ = [
    "levenshtein",
    "normalized_levenshtein",
    "DEFAULT_THRESHOLD",
    "MAX_NGRAM_SIZE",
    "IngredientIndex",
    "PreparedIngredient",
    "highlighted_ingredients",
    "match_ingredients_sequence",
    "match_with_index",
    "prepare_index",
    "tokens_to_dicts",
    "IngredientToken",
    "MatchInput",
    "SequenceToken",
    "TextToken",
]
