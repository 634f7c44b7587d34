import pytest

from recipe_text.ingredients import Ingredient, IngredientSection
from recipe_text.matching import MatchInput
from recipe_text.recipes import (
    ParsedRecipe,
    ParserVocabulary,
    ParserWarning,
    WarningCode,
    parse_recipe,
)

TOMATO_PASTA = (
    "# Tomato pasta\n"
    "Ingredients:\n"
    "- 400 g tomatoes\n"
    "- 2 cloves garlic\n"
    "Steps:\n"
    "1. Cook pasta.\n"
    "2. Simmer tomatoes with garlic."
)

KOLAC = """Jablečný koláč

Těsto:
- 250 g hladké mouky
- 1,5 lžičky prášku do pečiva
Prázdná sekce:
Náplň:
- 4 jablka (kyselá)
- trochu skořice

Postup:
1) Smícháme těsto.

2. Poklademe jablky - a pečeme.
"""


def test_parse_recipe_tomato_pasta():
    recipe = parse_recipe(TOMATO_PASTA)

    assert recipe.title == "Tomato pasta"
    assert recipe.ingredient_sections == [
        IngredientSection(
            title="Ingredients",
            items=[
                Ingredient(raw="400 g tomatoes", name="tomatoes", amount="400", unit="g"),
                Ingredient(raw="2 cloves garlic", name="garlic", amount="2", unit="cloves"),
            ],
        )
    ]
    assert recipe.steps == ["Cook pasta.", "Simmer tomatoes with garlic."]
    assert recipe.warnings == []


def test_parse_recipe_sections_and_steps():
    recipe = parse_recipe(KOLAC)

    assert recipe.title == "Jablečný koláč"
    assert [section.title for section in recipe.ingredient_sections] == ["Těsto", "Náplň"]
    assert [item.name for item in recipe.ingredients] == [
        "hladké mouky",
        "prášku do pečiva",
        "jablka",
        "trochu skořice",
    ]
    assert recipe.ingredients[1].amount == "1,5"
    assert recipe.ingredients[1].unit == "lžičky"
    assert recipe.ingredients[2].note == "kyselá"
    assert recipe.steps == ["Smícháme těsto.", "Poklademe jablky - a pečeme."]


def test_unspecified_amount_warning():
    recipe = parse_recipe(KOLAC)

    assert recipe.warnings == [
        ParserWarning(
            code=WarningCode.UNSPECIFIED_AMOUNT,
            message="Unspecified amount for „trochu skořice“.",
            line="- trochu skořice",
        )
    ]


@pytest.mark.parametrize(
    "line, warns",
    [
        ("- trochu soli", True),
        ("- a pinch of salt", True),
        ("- sůl dle chuti", False),
        ("- špetka soli", False),
        ("- pinch salt", False),
        ("- 2 špetky soli", False),
        ("- párek", False),
    ],
)
def test_unspecified_amount_looks_at_name_only(line, warns):
    recipe = parse_recipe(f"Koláč\nSuroviny:\n{line}\nPostup:\nPečeme.")

    codes = [warning.code for warning in recipe.warnings]
    assert codes == ([WarningCode.UNSPECIFIED_AMOUNT] if warns else [])


def test_implicit_section_warning():
    recipe = parse_recipe("Guláš\n500 g hovězího\n2 cibule\nPostup:\nOpečeme cibuli.")

    assert len(recipe.ingredient_sections) == 1
    section = recipe.ingredient_sections[0]
    assert section.title == "Ingredients"
    assert [item.name for item in section.items] == ["hovězího", "cibule"]
    assert recipe.steps == ["Opečeme cibuli."]

    assert len(recipe.warnings) == 1
    warning = recipe.warnings[0]
    assert warning.code is WarningCode.IMPLICIT_SECTION
    assert warning.line == "500 g hovězího"
    assert "500 g hovězího" in warning.message


def test_implicit_section_is_closed_by_header():
    recipe = parse_recipe("Salát\n- 2 rajčata\nZálivka:\n- olej\nPostup\n- Promícháme.")

    assert [section.title for section in recipe.ingredient_sections] == ["Ingredients", "Zálivka"]
    assert recipe.steps == ["Promícháme."]
    assert [warning.code for warning in recipe.warnings] == [WarningCode.IMPLICIT_SECTION]


@pytest.mark.parametrize(
    "header",
    ["Postup", "postup:", "POSTUP:", "Kroky", "příprava:", "Steps", "method:", "Procedure"],
)
def test_step_boundary_headers(header):
    recipe = parse_recipe(f"Polévka\nSuroviny:\n- voda\n{header}\nUvaříme.")
    assert recipe.steps == ["Uvaříme."]
    assert [item.name for item in recipe.ingredients] == ["voda"]


def test_step_boundary_must_be_whole_line():
    recipe = parse_recipe("Polévka\nSuroviny:\n- voda\nPostup je jednoduchý\nUvaříme.")

    assert recipe.steps == []
    assert [item.raw for item in recipe.ingredients] == [
        "voda",
        "Postup je jednoduchý",
        "Uvaříme.",
    ]


def test_no_step_boundary_means_no_steps():
    recipe = parse_recipe("Vejce natvrdo\n- 2 vejce")

    assert recipe.steps == []
    assert recipe.ingredients == [Ingredient(raw="2 vejce", name="vejce", amount="2")]


@pytest.mark.parametrize("text", ["", "   ", "\n\n  \r\n"])
def test_empty_input(text):
    recipe = parse_recipe(text)
    assert recipe == ParsedRecipe(title="Untitled")


@pytest.mark.parametrize(
    "first_line, expected",
    [("## Svíčková", "Svíčková"), ("#Svíčková", "Svíčková"), ("Svíčková", "Svíčková"), ("#", "Untitled")],
)
def test_title(first_line, expected):
    assert parse_recipe(f"\n  {first_line}  \n- maso").title == expected


def test_windows_line_endings():
    recipe = parse_recipe(TOMATO_PASTA.replace("\n", "\r\n"))
    assert recipe == parse_recipe(TOMATO_PASTA)


def test_steps_strip_ordinals_and_bullets():
    recipe = parse_recipe("Čaj\nPostup:\n1. Uvaříme vodu.\n2) Zalijeme.\n- Necháme louhovat.\n3.\n1.5 minuty čekáme.")
    assert recipe.steps == [
        "Uvaříme vodu.",
        "Zalijeme.",
        "Necháme louhovat.",
        "1.5 minuty čekáme.",
    ]


def test_parse_is_idempotent():
    assert parse_recipe(KOLAC) == parse_recipe(KOLAC)
    assert parse_recipe(KOLAC).to_dict() == parse_recipe(KOLAC).to_dict()


def test_match_inputs():
    recipe = parse_recipe(TOMATO_PASTA)
    assert recipe.match_inputs() == [
        MatchInput(original="400 g tomatoes", item="tomatoes"),
        MatchInput(original="2 cloves garlic", item="garlic"),
    ]


def test_to_dict():
    data = parse_recipe("Guláš\n500 g hovězího").to_dict()

    assert data["title"] == "Guláš"
    assert data["ingredientSections"] == [
        {
            "title": "Ingredients",
            "items": [{"raw": "500 g hovězího", "name": "hovězího", "amount": "500", "unit": "g"}],
        }
    ]
    assert data["steps"] == []
    assert data["warnings"][0]["code"] == "IMPLICIT_SECTION"


def test_custom_vocabulary():
    vocabulary = ParserVocabulary(
        step_hints=("zubereitung",),
        untitled="Ohne Titel",
        default_section="Zutaten",
    )
    recipe = parse_recipe("Zutaten 2\n- 1 Ei\nZubereitung:\nKochen.", vocabulary)

    assert recipe.steps == ["Kochen."]
    assert recipe.ingredient_sections[0].title == "Zutaten"
    assert parse_recipe("", vocabulary).title == "Ohne Titel"
