"""Ingredient normalization utilities."""

import re
import unicodedata

MIN_STEM_LENGTH = 3

_NON_WORD = re.compile(r"[\W_]+")


def strip_diacritics(text: str) -> str:
    """Remove combining marks after canonical decomposition ('šťáva' -> 'stava')."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


# Inflectional endings of Czech nouns and adjectives (case, number, gender),
# written the way they look after normalize_text. Longest suffixes first.
CZECH_SUFFIXES = tuple(
    sorted(
        {
            strip_diacritics(suffix)
            for suffix in (
                "atech", "ětem", "atům", "ovat", "ového", "ovému",
                "ými", "ami", "emi", "ovi", "ové", "ého", "ému", "ách", "ích",
                "ice", "ici", "iku", "ika", "iky",
                "ou", "ům", "em", "ěm", "mi", "ce", "ci", "ku", "ka", "ky", "ek",
                "í", "y",
            )
        },
        key=lambda suffix: (-len(suffix), suffix),
    )
)


def normalize_text(text: str) -> str:
    """Normalize free text for fuzzy comparison.

    Lower-cases, strips diacritics, turns every run of characters that is not
    a letter or digit into a single space and trims the result.

    Examples:
        >>> normalize_text("Citronová  šťáva!")
        'citronova stava'
        >>> normalize_text("mother's")
        'mother s'
    """
    text = strip_diacritics(text.lower())
    return _NON_WORD.sub(" ", text).strip()


def stem_word(word: str) -> str:
    """Strip one inflectional suffix, never leaving fewer than three characters."""
    if len(word) <= MIN_STEM_LENGTH:
        return word

    for suffix in CZECH_SUFFIXES:
        if word.endswith(suffix) and len(word) - len(suffix) >= MIN_STEM_LENGTH:
            return word[: -len(suffix)]
    return word


def stem_text(text: str) -> str:
    """Normalize ``text`` and stem each of its words.

    Examples:
        >>> stem_text("citronovou šťávou")
        'citronov stav'
    """
    return " ".join(stem_word(word) for word in normalize_text(text).split())
