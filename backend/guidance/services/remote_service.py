"""
Suggestion generation through an OpenAI-compatible chat completions API.
"""
import asyncio
import json
import logging
from functools import lru_cache

from openai import AsyncOpenAI
from pydantic import ValidationError

from guidance.config import settings
from guidance.schemas.guidance import SearchQuery, SearchType, SuggestionResponse

logger = logging.getLogger(__name__)

_PROMPTS: dict[SearchType, str] = {
    SearchType.JOB_APPS: (
        "List 3 current or typical job applications/roles for the major or field: {query}. "
        'Return ONLY a JSON object with a "results" array. '
        'Each item should have "title", "description", and "link" (use "#" for link).'
    ),
    SearchType.RELATED_CAREERS: (
        "List 3 related career paths for someone with a major in: {query}. "
        'Return ONLY a JSON object with a "results" array. '
        'Each item should have "title" and "description".'
    ),
    SearchType.SUGGEST_MAJOR: (
        "Suggest 3 suitable college majors for someone who wants to be a: {query}. "
        'Return ONLY a JSON object with a "results" array. '
        'Each item should have "title" and "description".'
    ),
}


class RemoteResolutionError(Exception):
    """The generation service could not produce a usable suggestion list."""


@lru_cache(maxsize=1)
def get_generation_client() -> AsyncOpenAI | None:
    """Process-wide client; None when no API key is configured."""
    if not settings.openai_api_key:
        return None
    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.remote_timeout_seconds,
        max_retries=0,
    )


def build_prompt(query: SearchQuery) -> str:
    return _PROMPTS[query.type].format(query=query.query)


async def generate(client: AsyncOpenAI, prompt: str, *, model: str, timeout: float) -> str | None:
    """Issue one JSON-mode completion and return the first choice's content."""
    response = await asyncio.wait_for(
        client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            response_format={"type": "json_object"},
        ),
        timeout=timeout,
    )
    if not response.choices:
        return None
    return response.choices[0].message.content


async def resolve_remote(
    query: SearchQuery,
    client: AsyncOpenAI | None,
    *,
    model: str,
    timeout: float,
) -> SuggestionResponse:
    if client is None:
        raise RemoteResolutionError("Generation client is not configured")

    try:
        content = await generate(client, build_prompt(query), model=model, timeout=timeout)
    except asyncio.TimeoutError as exc:
        raise RemoteResolutionError(f"Generation timed out after {timeout}s") from exc
    except Exception as exc:
        raise RemoteResolutionError(f"Generation request failed: {exc}") from exc

    if not content:
        raise RemoteResolutionError("Generation returned no content")

    try:
        payload = json.loads(content)
    except json.JSONDecodeError as exc:
        raise RemoteResolutionError("Generation returned invalid JSON") from exc

    try:
        return SuggestionResponse.model_validate(payload)
    except ValidationError as exc:
        raise RemoteResolutionError("Generated JSON does not match the suggestion schema") from exc
