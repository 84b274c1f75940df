"""Route contract for the guidance API, shared with the web client."""
from dataclasses import dataclass, field

from pydantic import BaseModel

from guidance.schemas.guidance import SearchQuery, SuggestionResponse, ValidationErrorBody


@dataclass(frozen=True)
class RouteContract:
    method: str
    path: str
    input: type[BaseModel]
    responses: dict[int, type[BaseModel]] = field(default_factory=dict)


GUIDANCE_SEARCH = RouteContract(
    method="POST",
    path="/guidance/search",
    input=SearchQuery,
    responses={200: SuggestionResponse, 400: ValidationErrorBody},
)
