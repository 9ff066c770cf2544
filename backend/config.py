import json
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    gemini_api_key: str = ""
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"
    rate_limit: str = "10/minute"

    # Completion service settings
    default_chat_model: str = "chat-model"
    update_chat_model: str = "artifact-model"
    model_aliases: dict[str, str] = {
        "chat-model": "gemini-2.5-flash",
        "chat-model-reasoning": "gemini-2.5-pro",
        "title-model": "gemini-2.5-flash",
        "artifact-model": "gemini-2.5-flash",
    }
    extraction_temperature: float = 0.1  # low for repeatable extraction
    max_output_tokens: int = 8192

    # Background information about the user, added to extraction prompts
    background_context: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, value):
        """Accept CORS_ORIGINS as a comma-separated string or a JSON list."""
        if not isinstance(value, str):
            return value
        if value.startswith("["):
            return json.loads(value)
        return [o.strip() for o in value.split(",") if o.strip()]


settings = Settings()
