from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SearchType(str, Enum):
    JOB_APPS = "job_apps"
    RELATED_CAREERS = "related_careers"
    SUGGEST_MAJOR = "suggest_major"


class SearchQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: SearchType
    query: str = Field(min_length=1)


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    link: str | None = None  # only set for job_apps


class SuggestionResponse(BaseModel):
    results: list[Suggestion]


class ValidationErrorBody(BaseModel):
    message: str
    field: str
