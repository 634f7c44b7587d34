"""Recipe parsing utilities."""

from .parsing import (
    DEFAULT_VOCABULARY,
    ParsedRecipe,
    ParserVocabulary,
    ParserWarning,
    WarningCode,
    parse_recipe,
)

__all__ = [
    "DEFAULT_VOCABULARY",
    "ParsedRecipe",
    "ParserVocabulary",
    "ParserWarning",
    "WarningCode",
    "parse_recipe",
]
