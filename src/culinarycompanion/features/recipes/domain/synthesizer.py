from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from culinarycompanion.features.recipes.domain.models import Recipe, RecipeStyle
from culinarycompanion.features.recipes.domain.templates import (
    DEFAULT_SECONDARY,
    DESCRIPTION_TEMPLATES,
    EMPTY_MAIN_PLACEHOLDER,
    INSTRUCTION_TEMPLATE,
    PANTRY_STAPLES,
    QUANTITY_PLACEHOLDER,
    STYLE_ORDER,
    STYLE_PROFILES,
    TITLE_TEMPLATES,
)

log = logging.getLogger("recipes.synthesizer")


def _title(style: RecipeStyle, main: str, secondary: str, rng: random.Random) -> str:
    options = TITLE_TEMPLATES.get(style, TITLE_TEMPLATES[RecipeStyle.FUSION])
    return rng.choice(options).format(main=main, secondary=secondary)


def _description(style: RecipeStyle, ingredients: Sequence[str], main: str) -> str:
    first_three = ", ".join(ingredients[:3]) or main
    everything = ", ".join(ingredients) or main
    return DESCRIPTION_TEMPLATES[style].format(first_three=first_three, main=main, all=everything)


def ingredient_list(ingredients: Sequence[str]) -> List[str]:
    return [f"{QUANTITY_PLACEHOLDER} {ing}" for ing in ingredients] + list(PANTRY_STAPLES)


def instructions(main: str) -> List[str]:
    return [step.format(main=main) for step in INSTRUCTION_TEMPLATE]


def synthesize_recipes(
    ingredients: Sequence[str],
    cuisine_style: Optional[str] = None,
    dietary_restrictions: Optional[Sequence[str]] = None,
    *,
    rng: Optional[random.Random] = None,
) -> List[Recipe]:
    """
    Produce one recipe per style, in fusion, traditional, modern order.

    The first ingredient is the main one and the second the secondary one.
    An empty ingredient list falls back to a generic placeholder instead of
    failing. Dietary restrictions are only echoed to the log at this stage.
    """
    rng = rng or random.Random()
    items = [i for i in ingredients if i]
    main = items[0] if items else EMPTY_MAIN_PLACEHOLDER
    secondary = items[1] if len(items) > 1 else DEFAULT_SECONDARY
    if not items:
        log.info("No usable ingredients; using placeholder %r", EMPTY_MAIN_PLACEHOLDER)
    if dietary_restrictions:
        log.debug("Synthesizing for restrictions: %s", ", ".join(dietary_restrictions))

    recipes: List[Recipe] = []
    for style in STYLE_ORDER:
        profile = STYLE_PROFILES[style]
        recipes.append(Recipe(
            title=_title(style, main, secondary, rng),
            description=_description(style, items, main),
            ingredients=ingredient_list(items),
            instructions=instructions(main),
            cuisine_type=cuisine_style or profile["cuisine_type"],
            difficulty_level=profile["difficulty_level"],
            prep_time=profile["prep_time"],
            cook_time=profile["cook_time"],
            servings=profile["servings"],
            tips=list(profile["tips"]),
        ))
    return recipes
