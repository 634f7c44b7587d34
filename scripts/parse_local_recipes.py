"""Parse local recipe text files and write their ingredients to a CSV table."""

import argparse
import logging
import pathlib

import pandas as pd
from tqdm import tqdm

from recipe_text.matching import highlighted_ingredients, prepare_index, match_with_index
from recipe_text.recipes import ParsedRecipe, parse_recipe

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def recipe_rows(recipe: ParsedRecipe, file_path: pathlib.Path) -> list[dict]:
    """One row per ingredient, with the steps that mention it."""
    index = prepare_index(recipe.match_inputs())

    mentioned_in = {}
    for number, step in enumerate(recipe.steps, start=1):
        tokens = match_with_index(index, step)
        for ingredient in highlighted_ingredients(recipe.ingredients, tokens):
            mentioned_in.setdefault(ingredient.raw, []).append(number)

    rows = []
    for section in recipe.ingredient_sections:
        for item in section.items:
            rows.append(
                {
                    "source_file": str(file_path),
                    "recipe": recipe.title,
                    "section": section.title,
                    "raw": item.raw,
                    "amount": item.amount,
                    "quantity": item.quantity,
                    "unit": item.canonical_unit,
                    "name": item.name,
                    "note": item.note,
                    "steps": ",".join(str(n) for n in mentioned_in.get(item.raw, [])),
                }
            )
    return rows


def main():
    """Main function to parse recipes and write the ingredient table."""
    parser = argparse.ArgumentParser(
        description="Parse a directory of recipe text files into an ingredient CSV"
    )
    parser.add_argument(
        "--recipe-dir",
        type=str,
        default="raw_recipes",
        help="Directory searched recursively for *.txt recipes",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="data/ingredients.csv",
        help="Path of the CSV file to write",
    )
    args = parser.parse_args()

    recipe_files = sorted(pathlib.Path(args.recipe_dir).rglob("*.txt"))
    if not recipe_files:
        logger.error(f"No recipe files found in {args.recipe_dir}")
        return

    rows = []
    warning_count = 0
    for file_path in tqdm(recipe_files, desc="Parsing recipes"):
        recipe = parse_recipe(file_path.read_text(encoding="utf-8"))
        rows.extend(recipe_rows(recipe, file_path))
        warning_count += len(recipe.warnings)

    df = pd.DataFrame(rows)
    output_path = pathlib.Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)

    unmentioned = int((df["steps"] == "").sum()) if not df.empty else 0
    logger.info(
        f"Wrote {len(df)} ingredients from {len(recipe_files)} recipes to {output_path} "
        f"({warning_count} parser warnings, {unmentioned} ingredients never mentioned in steps)"
    )


if __name__ == "__main__":
    main()
