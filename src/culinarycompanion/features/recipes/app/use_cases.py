from __future__ import annotations

import asyncio
import logging
import random
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from culinarycompanion.features.recipes.api.schemas import RecipeRequest, RecipeResponse
from culinarycompanion.features.recipes.domain.dietary import adapt_for_diet, canonical_restrictions
from culinarycompanion.features.recipes.domain.normalizer import normalize_ingredients, split_ingredients
from culinarycompanion.features.recipes.domain.synthesizer import synthesize_recipes
from culinarycompanion.features.recipes.infra.entities import EntityProber
from culinarycompanion.features.recipes.infra.request_log import RequestLog

log = logging.getLogger("recipes.use_cases")


async def generate_recipes(
    request: RecipeRequest,
    *,
    request_log: RequestLog,
    prober: Optional[EntityProber] = None,
    rng: Optional[random.Random] = None,
) -> RecipeResponse:
    """
    Normalize and adapt the ingredients, fire the entity probe without
    waiting on it, synthesize the three recipes and append the request to
    the log. The append runs in a worker thread; only a failing append
    propagates.
    """
    normalized = normalize_ingredients(request.ingredients)
    restrictions = canonical_restrictions(request.dietary_restrictions)
    adaptation = adapt_for_diet(normalized, restrictions)
    if adaptation.adapted:
        log.info("Dietary adaptation applied: %s", adaptation.note)

    ingredients = split_ingredients(adaptation.ingredients)
    if not ingredients:
        log.info("Ingredient input %r was empty after normalization", request.ingredients)

    if prober is not None:
        prober.probe_in_background(ingredients)

    recipes = synthesize_recipes(
        ingredients,
        cuisine_style=request.cuisine_style,
        dietary_restrictions=restrictions,
        rng=rng,
    )
    response_data = {"recipes": [r.model_dump(mode="json", by_alias=True) for r in recipes]}

    await asyncio.to_thread(
        request_log.append,
        input_text=request.ingredients,
        input_type=request.input_type.value,
        response_data=response_data,
        language=request.language,
    )

    return RecipeResponse(
        recipes=recipes,
        language=request.language,
        timestamp=datetime.now(timezone.utc).isoformat(),
        adaptation_note=adaptation.note,
    )


async def recent_history(*, request_log: RequestLog, limit: int = 10) -> List[Dict[str, Any]]:
    return await asyncio.to_thread(request_log.recent, limit)
