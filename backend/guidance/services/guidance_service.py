import logging

from openai import AsyncOpenAI

from guidance.config import Settings
from guidance.schemas.guidance import SearchQuery, SuggestionResponse
from guidance.services.heuristic_service import resolve_heuristic
from guidance.services.remote_service import RemoteResolutionError, resolve_remote

logger = logging.getLogger(__name__)


async def resolve_suggestions(
    query: SearchQuery,
    client: AsyncOpenAI | None,
    settings: Settings,
) -> tuple[SuggestionResponse, str]:
    """Try remote generation first, else the keyword heuristic. Returns (response, source)."""
    if settings.remote_enabled:
        try:
            response = await resolve_remote(
                query,
                client,
                model=settings.openai_model,
                timeout=settings.remote_timeout_seconds,
            )
            return response, "remote"
        except RemoteResolutionError as exc:
            logger.warning("Remote suggestions unavailable, using heuristic: %s", exc)

    return resolve_heuristic(query), "heuristic"
