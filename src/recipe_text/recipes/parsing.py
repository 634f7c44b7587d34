"""Recipe parsing utilities."""

import dataclasses
import enum
import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

from recipe_text.ingredients.models import Ingredient, IngredientSection
from recipe_text.ingredients.parsing import (
    BULLET_PATTERN,
    has_unspecified_amount,
    is_bulleted,
    parse_ingredient_line,
)
from recipe_text.ingredients.units import UNIT_LOOKUP, VAGUE_QUANTITY_MARKERS
from recipe_text.matching.models import MatchInput

logger = logging.getLogger(__name__)

TITLE_MARKUP_PATTERN = re.compile(r"^#+\s*")
STEP_ORDINAL_PATTERN = re.compile(r"^\d+[.)](?!\d)\s*")
LINE_SPLIT_PATTERN = re.compile(r"\r?\n")


@dataclasses.dataclass(frozen=True)
class ParserVocabulary:
    """Word tables the recipe parser relies on.

    Attributes:
        step_hints: Whole-line headers that start the steps block.
        unit_lookup: Unit spellings mapped to canonical units.
        vague_markers: Words standing in for an amount ("trochu", "some").
        untitled: Title used when the text has no non-empty line.
        default_section: Title of the implicit ingredient section.
    """

    step_hints: Tuple[str, ...] = (
        "postup",
        "kroky",
        "příprava",
        "steps",
        "method",
        "procedure",
        "instructions",
        "directions",
    )
    unit_lookup: Mapping[str, str] = dataclasses.field(
        default_factory=lambda: dict(UNIT_LOOKUP)
    )
    vague_markers: Tuple[str, ...] = VAGUE_QUANTITY_MARKERS
    untitled: str = "Untitled"
    default_section: str = "Ingredients"

    def is_step_header(self, line: str) -> bool:
        lowered = line.lower()
        return any(lowered in (hint, f"{hint}:") for hint in self.step_hints)


DEFAULT_VOCABULARY = ParserVocabulary()


class WarningCode(str, enum.Enum):
    IMPLICIT_SECTION = "IMPLICIT_SECTION"
    UNSPECIFIED_AMOUNT = "UNSPECIFIED_AMOUNT"


@dataclasses.dataclass(frozen=True)
class ParserWarning:
    """Advisory note about input the parser had to guess at."""

    code: WarningCode
    message: str
    line: str

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code.value, "message": self.message, "line": self.line}


@dataclasses.dataclass
class ParsedRecipe:
    """Dataclass for holding parsed recipe data."""

    title: str
    ingredient_sections: List[IngredientSection] = dataclasses.field(default_factory=list)
    steps: List[str] = dataclasses.field(default_factory=list)
    warnings: List[ParserWarning] = dataclasses.field(default_factory=list)

    @property
    def ingredients(self) -> List[Ingredient]:
        return [item for section in self.ingredient_sections for item in section.items]

    def match_inputs(self) -> List[MatchInput]:
        """Ingredients as (original, item) pairs for the phrase matcher."""
        return [MatchInput(original=item.raw, item=item.name) for item in self.ingredients]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "ingredientSections": [section.to_dict() for section in self.ingredient_sections],
            "steps": list(self.steps),
            "warnings": [warning.to_dict() for warning in self.warnings],
        }


def _find_title_index(lines: List[str]) -> int:
    return next((index for index, line in enumerate(lines) if line), -1)


def _extract_title(lines: List[str], title_index: int, vocabulary: ParserVocabulary) -> str:
    if title_index == -1:
        return vocabulary.untitled
    return TITLE_MARKUP_PATTERN.sub("", lines[title_index]) or vocabulary.untitled


def _find_step_start_index(lines: List[str], vocabulary: ParserVocabulary) -> int:
    return next(
        (index for index, line in enumerate(lines) if vocabulary.is_step_header(line)),
        -1,
    )


def _is_section_header(line: str) -> bool:
    return line.endswith(":") and not is_bulleted(line)


def _parse_ingredient_sections(
    lines: List[str], warnings: List[ParserWarning], vocabulary: ParserVocabulary
) -> List[IngredientSection]:
    sections = []
    current: Optional[IngredientSection] = None

    for line in filter(None, lines):
        if _is_section_header(line):
            if current is not None:
                sections.append(current)
            current = IngredientSection(title=line[:-1].strip())
            continue

        if current is None:
            current = IngredientSection(title=vocabulary.default_section)
            warnings.append(
                ParserWarning(
                    code=WarningCode.IMPLICIT_SECTION,
                    message=(
                        f"Ingredients found outside any section, using the implicit "
                        f"section „{vocabulary.default_section}“: {line}"
                    ),
                    line=line,
                )
            )

        ingredient = parse_ingredient_line(line, vocabulary.unit_lookup)
        if ingredient.amount is None and has_unspecified_amount(
            ingredient.name, vocabulary.vague_markers
        ):
            warnings.append(
                ParserWarning(
                    code=WarningCode.UNSPECIFIED_AMOUNT,
                    message=f"Unspecified amount for „{ingredient.raw}“.",
                    line=line,
                )
            )
        current.items.append(ingredient)

    if current is not None:
        sections.append(current)

    return [section for section in sections if section.items]


def _parse_steps(lines: List[str]) -> List[str]:
    steps = []
    for line in filter(None, lines):
        step = STEP_ORDINAL_PATTERN.sub("", line, count=1)
        step = BULLET_PATTERN.sub("", step, count=1).strip()
        if step:
            steps.append(step)
    return steps


def parse_recipe(
    raw_text: str, vocabulary: ParserVocabulary = DEFAULT_VOCABULARY
) -> ParsedRecipe:
    """Parse freeform recipe text into title, ingredient sections and steps.

    The first non-empty line is the title. A whole-line step header such as
    "Postup:" or "Steps" separates ingredient lines from step lines; without
    one every remaining line is an ingredient line. Colon-terminated lines in
    the ingredient block start named sections.

    Args:
        raw_text: Recipe text as typed by the user.
        vocabulary: Word tables for step headers, units and vague amounts.

    Returns:
        A new ParsedRecipe. Parsing never fails; questionable input is
        reported through ``ParsedRecipe.warnings``.
    """
    lines = [line.strip() for line in LINE_SPLIT_PATTERN.split(raw_text or "")]
    warnings: List[ParserWarning] = []

    title_index = _find_title_index(lines)
    title = _extract_title(lines, title_index, vocabulary)
    steps_index = _find_step_start_index(lines, vocabulary)

    ingredient_end = steps_index if steps_index >= 0 else len(lines)
    ingredient_lines = lines[title_index + 1 : ingredient_end]
    step_lines = lines[steps_index + 1 :] if steps_index >= 0 else []

    recipe = ParsedRecipe(
        title=title,
        ingredient_sections=_parse_ingredient_sections(ingredient_lines, warnings, vocabulary),
        steps=_parse_steps(step_lines),
        warnings=warnings,
    )
    logger.debug(
        "Parsed %r: %d sections, %d ingredients, %d steps, %d warnings",
        recipe.title,
        len(recipe.ingredient_sections),
        len(recipe.ingredients),
        len(recipe.steps),
        len(recipe.warnings),
    )
    return recipe
