"""Load a persisted résumé for display, re-checking its shape."""

import json
import logging

from models.responses import PreviewResult
from models.schemas.resume import LOAD_FAILED_SUMMARY
from services.resume_validator import build_fallback_resume, merge_with_defaults, validate_resume

logger = logging.getLogger(__name__)


def load_resume_document(content: str) -> PreviewResult:
    """Parse stored JSON and merge it with defaults so it always renders.

    Stored records are not versioned, so drift is detected by re-validating.
    """
    try:
        parsed = json.loads(content or "{}")
    except (ValueError, RecursionError) as e:
        logger.error("Failed to parse resume data: %s", e)
        resume = build_fallback_resume(LOAD_FAILED_SUMMARY)
        return PreviewResult(resume=resume, valid=False, errors=["content: Invalid resume data format"])

    resume = merge_with_defaults(parsed)
    validation = validate_resume(resume)
    return PreviewResult(resume=resume, valid=validation.success, errors=validation.errors)
