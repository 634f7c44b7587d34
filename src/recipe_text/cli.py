"""Command line interface: parse recipe text files and highlight their steps."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from recipe_text.matching import (
    DEFAULT_THRESHOLD,
    highlighted_ingredients,
    match_with_index,
    prepare_index,
    tokens_to_dicts,
)
from recipe_text.recipes import parse_recipe

logger = logging.getLogger(__name__)


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _dump(payload) -> None:
    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def command_parse(args: argparse.Namespace) -> int:
    recipe = parse_recipe(_read_text(args.file))
    payload = recipe.to_dict()
    if args.multiplier != 1.0:
        for section_dict, section in zip(payload["ingredientSections"], recipe.ingredient_sections):
            for item_dict, item in zip(section_dict["items"], section.items):
                item_dict["amountLabel"] = item.amount_label(args.multiplier)

    for warning in recipe.warnings:
        logger.info("%s: %s", warning.code.value, warning.message)
    _dump(payload)
    return 0


def command_highlight(args: argparse.Namespace) -> int:
    recipe = parse_recipe(_read_text(args.file))
    index = prepare_index(recipe.match_inputs(), threshold=args.threshold)
    logger.info(
        "Highlighting %d steps of %r against %d ingredients",
        len(recipe.steps),
        recipe.title,
        len(index),
    )

    steps = []
    for number, step in enumerate(recipe.steps, start=1):
        tokens = match_with_index(index, step)
        steps.append(
            {
                "step": number,
                "tokens": tokens_to_dicts(tokens),
                "ingredients": [
                    item.raw for item in highlighted_ingredients(recipe.ingredients, tokens)
                ],
            }
        )
    _dump({"title": recipe.title, "steps": steps})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recipe-text",
        description="Parse freeform recipe text and highlight ingredients in its steps",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level written to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Print the parsed recipe as JSON")
    parse_cmd.add_argument("file", help="Recipe text file, or '-' for stdin")
    parse_cmd.add_argument(
        "--multiplier",
        type=float,
        default=1.0,
        help="Scale ingredient amounts by this factor in the 'amountLabel' field",
    )
    parse_cmd.set_defaults(handler=command_parse)

    highlight_cmd = subparsers.add_parser(
        "highlight", help="Print every step as a sequence of text and ingredient tokens"
    )
    highlight_cmd.add_argument("file", help="Recipe text file, or '-' for stdin")
    highlight_cmd.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_THRESHOLD,
        help="Maximum normalized edit distance accepted as a match",
    )
    highlight_cmd.set_defaults(handler=command_highlight)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    try:
        return args.handler(args)
    except OSError as e:
        logger.error(f"Could not read {args.file}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
