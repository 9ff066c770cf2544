"""Text-completion service: the pipeline's only external call.

The Gemini implementation wraps every SDK failure in CompletionServiceError so
callers deal with a single error type.
"""

import logging
from abc import ABC, abstractmethod

from google import genai
from google.genai import types

from config import settings
from services.errors import CompletionServiceError

logger = logging.getLogger(__name__)


class CompletionService(ABC):
    """Blocking prompt-in, text-out completion."""

    @abstractmethod
    def complete(self, prompt: str, model_id: str, temperature: float) -> str:
        """Return the model's full text response or raise CompletionServiceError."""

    @property
    def is_configured(self) -> bool:
        return True


def resolve_model(model_id: str) -> str:
    """Map a chat model identifier to a provider model name."""
    return settings.model_aliases.get(model_id, model_id)


class GeminiCompletionService(CompletionService):
    def __init__(self, api_key: str | None = None) -> None:
        self._api_key = api_key if api_key is not None else settings.gemini_api_key
        self._client: genai.Client | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> genai.Client:
        if not self._api_key:
            logger.warning("No GEMINI_API_KEY set - resume extraction disabled")
            raise CompletionServiceError("Completion service is not configured")
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    def complete(self, prompt: str, model_id: str, temperature: float) -> str:
        client = self._get_client()
        model = resolve_model(model_id)
        try:
            response = client.models.generate_content(
                model=model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=temperature,
                    max_output_tokens=settings.max_output_tokens,
                ),
            )
        except Exception as e:
            logger.error("Gemini API error (model=%s): %s", model, e)
            raise CompletionServiceError("Completion request failed") from e

        text = response.text
        if not text:
            logger.error("Gemini returned an empty response (model=%s)", model)
            raise CompletionServiceError("Completion service returned an empty response")
        return text


_service: CompletionService | None = None


def get_completion_service() -> CompletionService:
    global _service
    if _service is None:
        _service = GeminiCompletionService()
    return _service


def call_completion(
    service: CompletionService, prompt: str, model_id: str, temperature: float
) -> str:
    """Single completion call; any failure becomes CompletionServiceError."""
    try:
        return service.complete(prompt, model_id, temperature)
    except CompletionServiceError:
        raise
    except Exception as e:
        logger.error("Completion service error: %s", e)
        raise CompletionServiceError("Completion request failed") from e
