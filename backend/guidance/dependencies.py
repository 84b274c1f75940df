from openai import AsyncOpenAI

from guidance.config import Settings, settings
from guidance.services.remote_service import get_generation_client


def get_settings() -> Settings:
    return settings


def get_client() -> AsyncOpenAI | None:
    return get_generation_client()
