"""Controlled vocabulary of ingredient units and quantity words."""

from typing import Dict, List

# Canonical unit -> every spelling accepted at the start of an ingredient line.
# Czech inflections first, English forms after.
UNIT_MAP: Dict[str, List[str]] = {
    # Mass
    "g": ["g", "gram", "gramy", "gramů", "grams"],
    "kg": ["kg", "kilo", "kila", "kilogram", "kilograms"],
    "mg": ["mg"],
    "dkg": ["dkg", "dag"],
    "oz": ["oz", "ounce", "ounces"],
    "lb": ["lb", "lbs", "pound", "pounds"],
    # Volume
    "ml": ["ml", "mililitr", "mililitrů", "milliliter", "milliliters"],
    "dl": ["dl", "decilitr", "decilitry"],
    "l": ["l", "litr", "litry", "litrů", "liter", "liters", "litre", "litres"],
    "lžíce": ["lžíce", "lžíci", "lžic", "tbsp", "tablespoon", "tablespoons"],
    "lžička": ["lžička", "lžičky", "lžiček", "lžičku", "tsp", "teaspoon", "teaspoons"],
    "hrnek": ["hrnek", "hrnky", "hrnků", "hrnku", "cup", "cups"],
    # Count
    "ks": ["ks", "kus", "kusy", "kusů", "pc", "pcs", "piece", "pieces"],
    "stroužek": ["stroužek", "stroužky", "stroužků", "clove", "cloves"],
    "špetka": ["špetka", "špetky", "špetku", "pinch", "pinches"],
    "plátek": ["plátek", "plátky", "plátků", "slice", "slices"],
    "hrst": ["hrst", "hrsti", "handful", "handfuls"],
    "svazek": ["svazek", "svazky", "svazeček", "bunch", "bunches"],
    "snítka": ["snítka", "snítky", "sprig", "sprigs"],
    # Containers and shapes
    "balení": ["balení", "bal", "pack", "packs", "package", "packages"],
    "plechovka": ["plechovka", "plechovky", "plechovek", "can", "cans", "tin", "tins"],
    "sklenice": ["sklenice", "sklenic", "jar", "jars"],
    "kostka": ["kostka", "kostky", "kostek", "cube", "cubes"],
    "konzerva": ["konzerva", "konzervy", "konzerv"],
    "sáček": ["sáček", "sáčky", "sáčků", "sachet", "sachets", "bag", "bags"],
}

# Create reverse mapping for lookup
UNIT_LOOKUP: Dict[str, str] = {v: k for k, vs in UNIT_MAP.items() for v in vs}

# Words that stand in for an amount ("trochu soli", "a pinch of salt").
VAGUE_QUANTITY_MARKERS = (
    "trochu",
    "dle",
    "podle",
    "špetka",
    "špetku",
    "několik",
    "pár",
    "some",
    "a little",
    "a pinch",
    "pinch",
    "a few",
    "few",
    "a handful",
    "handful",
    "to taste",
)


def normalize_unit(unit: str) -> str:
    """Normalize unit names to their standard form.

    Args:
        unit: Raw unit string

    Returns:
        Normalized unit name, or the lower-cased input if it is unknown

    Examples:
        >>> normalize_unit("stroužky")
        'stroužek'
        >>> normalize_unit("Tbsp.")
        'lžíce'
    """
    unit = unit.lower().strip(".")
    return UNIT_LOOKUP.get(unit, unit)  # Return original if not found
