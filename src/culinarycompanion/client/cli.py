"""
Command line front end for the recipe service.

    culinary-companion "chicken, rice" --diet Vegan --cuisine Thai
    culinary-companion --history
"""
import argparse
import json
import sys
from typing import List, Optional

import httpx

from culinarycompanion.client.api_client import CulinaryClient, RecipeServiceError
from culinarycompanion.client.speech import recipe_speech_text
from culinarycompanion.features.recipes.api.schemas import RecipeRequest, RecipeResponse
from culinarycompanion.features.recipes.domain.dietary import KNOWN_RESTRICTIONS


def _print_recipes(resp: RecipeResponse) -> None:
    if resp.adaptation_note:
        print(f"Smart Adaptation: {resp.adaptation_note}\n")
    for i, r in enumerate(resp.recipes, 1):
        print(f"===== {i}. {r.title} =====")
        print(recipe_speech_text(r))
        print(f"{r.cuisine_type} | {r.difficulty_level.value} | prep {r.prep_time} min | cook {r.cook_time} min | serves {r.servings}")
        print("Ingredients:")
        for ing in r.ingredients:
            print(f"  - {ing}")
        print("Instructions:")
        for n, step in enumerate(r.instructions, 1):
            print(f"  {n}. {step}")
        if r.tips:
            print("Tips:")
            for tip in r.tips:
                print(f"  * {tip}")
        print()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate three recipe ideas from your ingredients")
    parser.add_argument("ingredients", nargs="?", help="Comma separated ingredients")
    parser.add_argument("--base-url", default="http://127.0.0.1:8076", help="API base URL")
    parser.add_argument("--lang", default="en")
    parser.add_argument("--diet", action="append", default=[], choices=KNOWN_RESTRICTIONS, help="Dietary restriction (repeatable)")
    parser.add_argument("--cuisine", default=None)
    parser.add_argument("--history", action="store_true", help="Show the latest requests instead")
    args = parser.parse_args(argv)

    if not args.history and not (args.ingredients or "").strip():
        parser.error("ingredients are required unless --history is given")

    with CulinaryClient(args.base_url) as client:
        try:
            if args.history:
                print(json.dumps(client.history(), indent=2, ensure_ascii=False))
                return 0
            request = RecipeRequest(
                ingredients=args.ingredients,
                language=args.lang,
                dietary_restrictions=args.diet or None,
                cuisine_style=args.cuisine,
            )
            _print_recipes(client.generate(request))
        except (RecipeServiceError, httpx.HTTPError) as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
