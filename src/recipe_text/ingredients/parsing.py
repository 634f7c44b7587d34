"""Ingredient line parsing utilities."""

import re
from typing import Iterable, Mapping, Optional, Tuple

from recipe_text.ingredients.models import Ingredient
from recipe_text.ingredients.number_utils import FRACTION_GLYPHS
from recipe_text.ingredients.units import UNIT_LOOKUP, VAGUE_QUANTITY_MARKERS

# --- Constants ---

BULLET_PATTERN = re.compile(r"^(?:[-–•*]|\d+[.)](?!\d))\s*")

_NUMBER = r"\d+(?:[.,]\d+)?"

# Amount grammar, tried in order; the first pattern matching at the start wins.
AMOUNT_PATTERNS = (
    ("range", re.compile(rf"{_NUMBER}\s*[-–]\s*{_NUMBER}")),
    ("fraction", re.compile(rf"{_NUMBER}\s*/\s*{_NUMBER}")),
    ("mixed", re.compile(rf"{_NUMBER}\s?[{FRACTION_GLYPHS}]")),
    ("number", re.compile(_NUMBER)),
    ("glyph", re.compile(rf"[{FRACTION_GLYPHS}]")),
)

# A run of letters, optionally abbreviated with a dot, ending at a token boundary.
UNIT_TOKEN_PATTERN = re.compile(r"([^\W\d_]+)\.?(?!\w)")

PAREN_NOTE_PATTERN = re.compile(r"\(([^)]*)\)\s*$")
DASH_NOTE_PATTERN = re.compile(r"\s+[-–]\s+")

# --- Functions ---


def strip_bullet(line: str) -> str:
    """Remove a leading '-', '–', '•', '*' or '1.' / '1)' marker."""
    return BULLET_PATTERN.sub("", line, count=1)


def is_bulleted(line: str) -> bool:
    return BULLET_PATTERN.match(line) is not None


def _parse_amount(text: str) -> Tuple[Optional[str], str]:
    """Parse an amount literal from the start of an ingredient string.

    Returns:
        A tuple containing:
            - amount: The amount exactly as written, or None if none was found
            - rest: Remaining text with leading whitespace removed
    """
    for _name, pattern in AMOUNT_PATTERNS:
        match = pattern.match(text)
        if match:
            return match.group(0), text[match.end() :].lstrip()
    return None, text


def _parse_unit(
    text: str, unit_lookup: Mapping[str, str] = UNIT_LOOKUP
) -> Tuple[Optional[str], str]:
    """Parse a unit word from the start of an ingredient string.

    Only a whole leading token counts, so 'gin' is never read as 'g'.
    """
    match = UNIT_TOKEN_PATTERN.match(text)
    if match and match.group(1).lower() in unit_lookup:
        return match.group(1), text[match.end() :].lstrip()

    # No unit found - return None for unit and the original text
    return None, text


def _find_note_comma(text: str) -> Optional[int]:
    """Index of the first comma not sitting between two digits ('1,5')."""
    for index, char in enumerate(text):
        if char != ",":
            continue
        between_digits = (
            0 < index < len(text) - 1
            and text[index - 1].isdigit()
            and text[index + 1].isdigit()
        )
        if not between_digits:
            return index
    return None


def _find_note_dash(text: str) -> Optional[re.Match]:
    """First ' - ' separator that is not part of a spaced range ('2 - 3')."""
    for match in DASH_NOTE_PATTERN.finditer(text):
        before = text[: match.start()]
        after = text[match.end() :]
        if before[-1:].isdigit() and after[:1].isdigit():
            continue
        return match
    return None


def split_note(text: str) -> Tuple[str, Optional[str]]:
    """Split trailing annotations off an ingredient line.

    A parenthesized suffix, a ' - ' suffix and a comma all introduce a note;
    the earliest of them ends the core text. When several are present their
    fragments are joined with '; '.

    Examples:
        >>> split_note("rajčata (zralá)")
        ('rajčata', 'zralá')
        >>> split_note("1,5 kg mouky, hladké - prosáté")
        ('1,5 kg mouky', 'hladké; prosáté')
    """
    paren = PAREN_NOTE_PATTERN.search(text)
    head_end = paren.start() if paren else len(text)
    head = text[:head_end]

    cuts = []
    dash = _find_note_dash(head)
    if dash:
        cuts.append((dash.start(), dash.end()))
    comma = _find_note_comma(head)
    if comma is not None:
        cuts.append((comma, comma + 1))
    cuts.sort()

    fragments = []
    for index, (_start, body_start) in enumerate(cuts):
        body_end = cuts[index + 1][0] if index + 1 < len(cuts) else head_end
        fragments.append(text[body_start:body_end].strip())
    if paren:
        fragments.append(paren.group(1).strip())

    core_end = cuts[0][0] if cuts else head_end
    note = "; ".join(fragment for fragment in fragments if fragment)
    return text[:core_end].strip(), note or None


def split_amount_unit_and_name(
    text: str, unit_lookup: Mapping[str, str] = UNIT_LOOKUP
) -> Tuple[Optional[str], Optional[str], str]:
    """Extract amount, unit and name from the core text of an ingredient line.

    The name falls back to the whole core text when amount and unit leave
    nothing behind.
    """
    core = text.strip()
    amount, rest = _parse_amount(core)
    unit, rest = _parse_unit(rest, unit_lookup)
    return amount, unit, rest.strip() or core


def parse_ingredient_line(
    line: str, unit_lookup: Mapping[str, str] = UNIT_LOOKUP
) -> Ingredient:
    """Parse one ingredient line into an Ingredient.

    Args:
        line: Source line, possibly starting with a bullet marker
            (e.g. "- 2 stroužky česneku (nasekané)").
        unit_lookup: Mapping of accepted unit spellings to canonical units.

    Returns:
        Ingredient with ``raw`` set to the line without its bullet marker.
    """
    raw = strip_bullet(line.strip()).strip()
    core, note = split_note(raw)
    amount, unit, name = split_amount_unit_and_name(core, unit_lookup)
    return Ingredient(
        raw=raw,
        name=name or raw or line.strip(),
        amount=amount,
        unit=unit,
        note=note,
    )


def extract_amount_label(
    original: str, unit_lookup: Mapping[str, str] = UNIT_LOOKUP
) -> Optional[str]:
    """Leading amount of an ingredient line together with its unit, if any.

    Examples:
        >>> extract_amount_label("400 g tomatoes")
        '400 g'
        >>> extract_amount_label("citronová šťáva") is None
        True
    """
    trimmed = original.strip()
    amount, rest = _parse_amount(trimmed)
    if amount is None:
        return None
    _unit, rest = _parse_unit(rest, unit_lookup)
    return trimmed[: len(trimmed) - len(rest)].strip()


def has_unspecified_amount(
    text: str, markers: Iterable[str] = VAGUE_QUANTITY_MARKERS
) -> bool:
    """Check whether ``text`` opens with a vague quantity word such as 'trochu'."""
    lowered = text.strip().lower()
    return any(
        re.match(rf"{re.escape(marker)}(?!\w)", lowered) for marker in markers
    )
