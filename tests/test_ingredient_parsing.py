import pytest

from recipe_text.ingredients import Ingredient
from recipe_text.ingredients.parsing import (
    _parse_amount,
    _parse_unit,
    extract_amount_label,
    has_unspecified_amount,
    parse_ingredient_line,
    split_note,
    strip_bullet,
)
from recipe_text.ingredients.units import normalize_unit


@pytest.mark.parametrize(
    "input_unit, expected_unit",
    [
        ("stroužky", "stroužek"),
        ("Tbsp.", "lžíce"),
        ("cups", "hrnek"),
        ("KS", "ks"),
        ("unknown", "unknown"),
    ],
)
def test_normalize_unit(input_unit, expected_unit):
    """Test unit normalization."""
    assert normalize_unit(input_unit) == expected_unit


@pytest.mark.parametrize(
    "line, expected",
    [
        ("- 400 g tomatoes", "400 g tomatoes"),
        ("– sůl", "sůl"),
        ("• pepř", "pepř"),
        ("* olej", "olej"),
        ("1. mouka", "mouka"),
        ("2) cukr", "cukr"),
        ("1.5 l vody", "1.5 l vody"),
        ("mléko", "mléko"),
    ],
)
def test_strip_bullet(line, expected):
    assert strip_bullet(line) == expected


@pytest.mark.parametrize(
    "input_text, expected_amt, expected_rest",
    [
        ("400 g tomatoes", "400", "g tomatoes"),
        ("1,5 kg mouky", "1,5", "kg mouky"),
        ("2.5 ml water", "2.5", "ml water"),
        ("2-3 stroužky česneku", "2-3", "stroužky česneku"),
        ("2 - 3 eggs", "2 - 3", "eggs"),
        ("1/2 lžičky soli", "1/2", "lžičky soli"),
        ("1½ cup milk", "1½", "cup milk"),
        ("½ hrnku mléka", "½", "hrnku mléka"),
        ("400g rajčat", "400", "g rajčat"),
        ("salt", None, "salt"),
        ("", None, ""),
    ],
)
def test_parse_amount(input_text, expected_amt, expected_rest):
    """Test the private helper _parse_amount."""
    amt, rest = _parse_amount(input_text)
    assert amt == expected_amt
    assert rest == expected_rest


@pytest.mark.parametrize(
    "input_text, expected_unit, expected_rest",
    [
        ("g tomatoes", "g", "tomatoes"),
        ("stroužky česneku", "stroužky", "česneku"),
        ("Tbsp. olive oil", "Tbsp", "olive oil"),
        ("cloves garlic", "cloves", "garlic"),
        ("gin", None, "gin"),
        ("garlic", None, "garlic"),
        ("", None, ""),
    ],
)
def test_parse_unit(input_text, expected_unit, expected_rest):
    """Test the private helper _parse_unit."""
    unit, rest = _parse_unit(input_text)
    assert unit == expected_unit
    assert rest == expected_rest


@pytest.mark.parametrize(
    "input_text, expected_core, expected_note",
    [
        ("rajčata (zralá)", "rajčata", "zralá"),
        ("cibule - nadrobno", "cibule", "nadrobno"),
        ("1,5 kg mouky, hladké", "1,5 kg mouky", "hladké"),
        ("1,5 kg mouky, hladké - prosáté", "1,5 kg mouky", "hladké; prosáté"),
        ("sůl, pepř (dle chuti)", "sůl", "pepř; dle chuti"),
        ("tomatoes (peeled, diced)", "tomatoes", "peeled, diced"),
        ("2 - 3 eggs", "2 - 3 eggs", None),
        ("mléko", "mléko", None),
    ],
)
def test_split_note(input_text, expected_core, expected_note):
    assert split_note(input_text) == (expected_core, expected_note)


@pytest.mark.parametrize(
    "line, expected",
    [
        (
            "- 400 g tomatoes",
            Ingredient(raw="400 g tomatoes", name="tomatoes", amount="400", unit="g"),
        ),
        (
            "• 2 stroužky česneku (nasekané)",
            Ingredient(
                raw="2 stroužky česneku (nasekané)",
                name="česneku",
                amount="2",
                unit="stroužky",
                note="nasekané",
            ),
        ),
        (
            "- 1,5 kg mouky, hladké",
            Ingredient(
                raw="1,5 kg mouky, hladké",
                name="mouky",
                amount="1,5",
                unit="kg",
                note="hladké",
            ),
        ),
        ("1.5 l vody", Ingredient(raw="1.5 l vody", name="vody", amount="1.5", unit="l")),
        ("1. 200 ml mléka", Ingredient(raw="200 ml mléka", name="mléka", amount="200", unit="ml")),
        ("* sůl", Ingredient(raw="sůl", name="sůl")),
        ("- 3 ks", Ingredient(raw="3 ks", name="3 ks", amount="3", unit="ks")),
        ("- (optional)", Ingredient(raw="(optional)", name="(optional)", note="optional")),
    ],
)
def test_parse_ingredient_line(line, expected):
    assert parse_ingredient_line(line) == expected


def test_parse_ingredient_line_name_is_never_empty():
    ingredient = parse_ingredient_line("-")
    assert ingredient.raw == ""
    assert ingredient.name == "-"


@pytest.mark.parametrize(
    "original, expected",
    [
        ("400 g tomatoes", "400 g"),
        ("2 cloves garlic", "2 cloves"),
        ("3 ks avokádo", "3 ks"),
        ("  1,5 kg mouky", "1,5 kg"),
        ("400g rajčat", "400g"),
        ("2 eggs", "2"),
        ("citronová šťáva", None),
        ("", None),
    ],
)
def test_extract_amount_label(original, expected):
    assert extract_amount_label(original) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("trochu soli", True),
        ("Dle chuti pepř", True),
        ("a pinch of salt", True),
        ("několik lístků bazalky", True),
        ("párek", False),
        ("pepper", False),
        ("2 eggs", False),
    ],
)
def test_has_unspecified_amount(text, expected):
    assert has_unspecified_amount(text) is expected
