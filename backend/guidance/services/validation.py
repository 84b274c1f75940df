from typing import Any, Sequence

from pydantic import ValidationError

from guidance.schemas.guidance import SearchQuery


class SearchValidationError(Exception):
    """Raised when a search payload fails validation; carries the first failing rule."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.message = message
        self.field = field


def first_error(errors: Sequence[dict[str, Any]]) -> tuple[str, str]:
    """Return (message, dotted field path) for the first error in a pydantic error list."""
    if not errors:
        return "Invalid request", ""
    err = errors[0]
    loc = list(err.get("loc") or ())
    # FastAPI prefixes request body errors with "body"
    if loc and loc[0] == "body":
        loc = loc[1:]
    return str(err.get("msg") or "Invalid request"), ".".join(str(part) for part in loc)


def validate_search_query(raw: Any) -> SearchQuery:
    try:
        return SearchQuery.model_validate(raw)
    except ValidationError as exc:
        message, field = first_error(exc.errors())
        raise SearchValidationError(message, field) from exc
