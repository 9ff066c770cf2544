"""Update path: apply free-form edit feedback to a stored résumé.

Unlike creation, a failed update never falls back to defaults; the stored
content is handed back untouched.
"""

import json
import logging

from config import settings
from models.responses import UpdateResult
from services.completion_client import CompletionService, call_completion, get_completion_service
from services.errors import ResumePipelineError
from services.llm_output import extract_json_object
from services.prompt_builder import build_update_prompt

logger = logging.getLogger(__name__)


def update_resume_document(
    content: str,
    description: str,
    selected_chat_model: str | None = None,
    service: CompletionService | None = None,
) -> UpdateResult:
    """Return the edited résumé JSON, or ``content`` unchanged on any failure."""
    try:
        current_data = json.loads(content or "{}")
    except (ValueError, RecursionError) as e:
        logger.error("Stored resume is not valid JSON: %s", e)
        return UpdateResult(content=content, message="Error updating resume: invalid resume data format")

    model_id = selected_chat_model or settings.update_chat_model
    try:
        prompt = build_update_prompt(current_data, description)
        service = service or get_completion_service()
        text = call_completion(service, prompt, model_id, settings.extraction_temperature)
        updated_data = extract_json_object(text)
    except ResumePipelineError as e:
        logger.warning("Resume update failed (%s), keeping original: %s", e.kind, e)
        return UpdateResult(content=content, message=f"Error updating resume: {e}")

    return UpdateResult(
        content=json.dumps(updated_data, indent=2, ensure_ascii=False),
        updated=True,
        message="Resume updated successfully!",
    )
