"""Ingredient parsing and normalization utilities."""

from .models import Ingredient, IngredientSection
from .normalization import normalize_text, stem_text, stem_word, strip_diacritics
from .number_utils import parse_amount_value, scale_amount_text
from .parsing import (
    extract_amount_label,
    has_unspecified_amount,
    parse_ingredient_line,
    split_amount_unit_and_name,
    split_note,
    strip_bullet,
)
from .units import UNIT_LOOKUP, UNIT_MAP, VAGUE_QUANTITY_MARKERS, normalize_unit

__all__ = [
    "Ingredient",
    "IngredientSection",
    "normalize_text",
    "stem_text",
    "stem_word",
    "strip_diacritics",
    "parse_amount_value",
    "scale_amount_text",
    "extract_amount_label",
    "has_unspecified_amount",
    "parse_ingredient_line",
    "split_amount_unit_and_name",
    "split_note",
    "strip_bullet",
    "UNIT_LOOKUP",
    "UNIT_MAP",
    "VAGUE_QUANTITY_MARKERS",
    "normalize_unit",
]
