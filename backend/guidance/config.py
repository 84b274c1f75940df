from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: Path = Path.home() / ".career-guidance"
    api_prefix: str = "/api"
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = ["http://127.0.0.1:5173", "http://localhost:5173"]
    log_level: str = "INFO"

    # Any OpenAI-compatible chat completions endpoint works here.
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "GUIDANCE_OPENAI_API_KEY",
            "AI_INTEGRATIONS_OPENAI_API_KEY",
            "OPENAI_API_KEY",
        ),
    )
    openai_base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "GUIDANCE_OPENAI_BASE_URL",
            "AI_INTEGRATIONS_OPENAI_BASE_URL",
        ),
    )
    openai_model: str = "gpt-4o-mini"
    remote_enabled: bool = True
    # Upper bound on the generation call before falling back to the heuristic.
    remote_timeout_seconds: float = 10.0

    @property
    def db_path(self) -> Path:
        return self.data_dir / "guidance.sqlite"

    model_config = {"env_prefix": "GUIDANCE_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
