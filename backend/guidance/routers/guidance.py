import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from openai import AsyncOpenAI
from sqlalchemy.orm import Session

from guidance.config import Settings
from guidance.contract import GUIDANCE_SEARCH
from guidance.database import get_db
from guidance.dependencies import get_client, get_settings
from guidance.schemas.guidance import SuggestionResponse, ValidationErrorBody
from guidance.services.guidance_service import resolve_suggestions
from guidance.services.search_log_service import record_search
from guidance.services.validation import SearchValidationError, validate_search_query

logger = logging.getLogger(__name__)

router = APIRouter(tags=["guidance"])


@router.api_route(
    GUIDANCE_SEARCH.path,
    methods=[GUIDANCE_SEARCH.method],
    response_model=SuggestionResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ValidationErrorBody}},
)
async def search_guidance(
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    client: AsyncOpenAI | None = Depends(get_client),
    settings: Settings = Depends(get_settings),
):
    try:
        query = validate_search_query(payload)
    except SearchValidationError as exc:
        return JSONResponse(
            status_code=400,
            content=ValidationErrorBody(message=exc.message, field=exc.field).model_dump(),
        )

    await record_search(db, query)

    response, source = await resolve_suggestions(query, client, settings)
    logger.info("Resolved %s suggestions for type=%s via %s", len(response.results), query.type.value, source)
    return response
