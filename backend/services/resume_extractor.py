"""Extraction orchestrator: conversation in, validated résumé record out.

Flow:
    messages
      ├─ build_transcript()            → transcript (EmptyTranscriptError)
      ├─ build_extraction_prompt()     → prompt
      ├─ CompletionService.complete()  → raw text (CompletionServiceError)
      ├─ extract_json_object()         → candidate (NoStructured/MalformedOutputError)
      └─ validate_with_recovery()      → ResumeRecord (ValidationFailedError)

Every failure is returned as an ExtractionResult; nothing is raised to callers.
"""

import logging
from typing import Iterable

from config import settings
from models.requests import ChatMessage
from models.responses import ExtractionResult
from services.completion_client import CompletionService, call_completion, get_completion_service
from services.conversation import build_transcript
from services.errors import (
    MalformedOutputError,
    NoStructuredOutputError,
    ResumePipelineError,
    ValidationFailedError,
)
from services.llm_output import extract_json_object
from services.prompt_builder import build_extraction_prompt
from services.resume_validator import validate_with_recovery

logger = logging.getLogger(__name__)


def _failure(error: ResumePipelineError) -> ExtractionResult:
    return ExtractionResult(
        success=False,
        error=str(error),
        error_kind=error.kind,
        errors=getattr(error, "errors", []),
        raw_text=getattr(error, "raw_text", None),
    )


def extract_resume_data(
    messages: Iterable[ChatMessage],
    selected_chat_model: str | None = None,
    system_context: str | None = None,
    service: CompletionService | None = None,
) -> ExtractionResult:
    """Extract a validated ResumeRecord from a chat conversation."""
    model_id = selected_chat_model or settings.default_chat_model
    try:
        transcript = build_transcript(messages)
        prompt = build_extraction_prompt(transcript, system_context)
        service = service or get_completion_service()
        text = call_completion(service, prompt, model_id, settings.extraction_temperature)
        candidate = extract_json_object(text)

        validation = validate_with_recovery(candidate)
        if not validation.success:
            raise ValidationFailedError(validation.errors)
    except (NoStructuredOutputError, MalformedOutputError) as e:
        logger.error("Could not recover resume data from model output: %s", e)
        return _failure(e)
    except ResumePipelineError as e:
        logger.warning("Resume extraction failed (%s): %s", e.kind, e)
        return _failure(e)

    return ExtractionResult(success=True, data=validation.data)
