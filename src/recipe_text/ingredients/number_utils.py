import re
from decimal import Decimal
from typing import Optional

# Unicode fraction mappings
UNICODE_FRAC = {
    "¼": Decimal("0.25"),
    "½": Decimal("0.5"),
    "¾": Decimal("0.75"),
    "⅓": Decimal("0.333"),
    "⅔": Decimal("0.667"),
    "⅛": Decimal("0.125"),
}

FRACTION_GLYPHS = "".join(UNICODE_FRAC)

_NUMBER_CHUNK = re.compile(r"\d+(?:[.,]\d+)?")
_RANGE_SPLIT = re.compile(r"\s*[-–]\s*")
_RANGE_SEPARATOR = re.compile(r"(\s*[-–]\s*)")


def _is_integer(text: str) -> bool:
    """Check if a string represents a valid integer."""
    try:
        int(text)
        return True
    except ValueError:
        return False


def _is_number(text: str) -> bool:
    """Check if a string represents a valid number, accepting a decimal comma."""
    try:
        float(text.replace(",", "."))
        return True
    except ValueError:
        return False


def _is_fraction(text: str) -> bool:
    """Check if a string represents a valid fraction (e.g., '1/2')."""
    if "/" not in text:
        return False
    parts = [part.strip() for part in text.split("/")]
    return len(parts) == 2 and all(_is_integer(part) for part in parts)


def _parse_fraction(text: str) -> Decimal:
    """Parse a fraction string (e.g., '1/2') into a Decimal."""
    if "/" not in text:
        raise ValueError(f"Not a fraction: {text}")

    numerator_str, denominator_str = text.split("/")
    numerator = Decimal(numerator_str.strip())
    denominator = Decimal(denominator_str.strip())

    if denominator == 0:
        raise ZeroDivisionError("Division by zero in fraction")

    return numerator / denominator


def _parse_single_amount(text: str) -> Decimal:
    """Parse one amount like '2', '1,5', '1/2', '½' or '1½'."""
    text = text.strip()
    if _is_fraction(text):
        return _parse_fraction(text)

    glyph_part = Decimal(0)
    if text and text[-1] in UNICODE_FRAC:
        glyph_part = UNICODE_FRAC[text[-1]]
        text = text[:-1].strip()
        if not text:
            return glyph_part

    if not _is_number(text):
        raise ValueError(f"Not a number: {text}")
    return Decimal(text.replace(",", ".")) + glyph_part


def parse_amount_value(amount: Optional[str]) -> Optional[float]:
    """Convert an amount literal into a float.

    Ranges such as '2-3' resolve to their midpoint.

    Examples:
        >>> parse_amount_value("1,5")
        1.5
        >>> parse_amount_value("2-3")
        2.5
        >>> parse_amount_value("1½")
        1.5
    """
    if not amount:
        return None

    parts = _RANGE_SPLIT.split(amount.strip())
    try:
        if len(parts) == 2:
            low, high = (_parse_single_amount(part) for part in parts)
            return float((low + high) / 2)
        if len(parts) == 1:
            return float(_parse_single_amount(parts[0]))
    except (ValueError, ZeroDivisionError, ArithmeticError):
        return None
    return None


def _trim_float(value: float) -> str:
    """Format with at most two decimals and no trailing zeros."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def scale_amount_text(amount: str, multiplier: float) -> str:
    """Multiply the numbers inside an amount literal.

    Each side of a range is scaled on its own, so '2-3' scaled by 2 becomes
    '4-6'. Fractions and vulgar fractions are written back as decimals
    ('1/2' by 2 is '1'). A decimal comma in the source is kept as a comma.
    Parts that are not a plain amount only get their digit runs scaled.
    """
    if multiplier == 1:
        return amount

    def _format_scaled(source: str, value: float) -> str:
        scaled = _trim_float(value * multiplier)
        return scaled.replace(".", ",") if "," in source else scaled

    def _scale_chunk(chunk: re.Match) -> str:
        return _format_scaled(chunk.group(0), float(chunk.group(0).replace(",", ".")))

    parts = _RANGE_SEPARATOR.split(amount)
    for position in range(0, len(parts), 2):
        part = parts[position]
        try:
            parts[position] = _format_scaled(part, float(_parse_single_amount(part)))
        except (ValueError, ArithmeticError):
            parts[position] = _NUMBER_CHUNK.sub(_scale_chunk, part)
    return "".join(parts)
