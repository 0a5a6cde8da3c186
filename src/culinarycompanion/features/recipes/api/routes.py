from __future__ import annotations
import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from culinarycompanion.shared.config.settings import settings
from culinarycompanion.features.recipes.app.use_cases import generate_recipes, recent_history
from culinarycompanion.features.recipes.infra.entities import EntityProber, get_entity_prober
from culinarycompanion.features.recipes.infra.request_log import RequestLog, get_request_log
from .schemas import HistoryResponse, RecipeRequest, RecipeResponse

log = logging.getLogger("recipes.api")

router = APIRouter(tags=["recipes"])

@router.post("/recipes/generate", response_model=RecipeResponse)
async def create_recipes(
    payload: RecipeRequest,
    request_log: RequestLog = Depends(get_request_log),
    prober: EntityProber = Depends(get_entity_prober),
):
    try:
        return await generate_recipes(payload, request_log=request_log, prober=prober)
    except Exception as e:
        log.exception("Recipe generation failed")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to generate recipes", "details": str(e) or type(e).__name__},
        )

@router.get("/recipes/history", response_model=HistoryResponse)
async def list_history(request_log: RequestLog = Depends(get_request_log)):
    try:
        rows = await recent_history(request_log=request_log, limit=settings.HISTORY_LIMIT)
        return HistoryResponse(history=rows)
    except Exception as e:
        log.exception("History fetch failed")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch history", "details": str(e) or type(e).__name__},
        )
