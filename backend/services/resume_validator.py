"""Shape validation and defaults merging for candidate résumé records.

validate_resume     -> exhaustive violation list, never mutates input
merge_with_defaults -> total, fills every missing substructure
validate_with_recovery composes the two: validate, merge, validate again,
keeping the first error list when the retry also fails.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from models.responses import FieldViolation, ValidationResult
from models.schemas.resume import (
    DEFAULT_RESUME_DATA,
    FALLBACK_NAME,
    GENERATION_FAILED_SUMMARY,
    ResumeRecord,
)

logger = logging.getLogger(__name__)


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


def validate_resume(candidate: Any) -> ValidationResult:
    """Check ``candidate`` against the ResumeRecord shape, collecting all violations."""
    try:
        record = ResumeRecord.model_validate(candidate)
    except ValidationError as e:
        violations = [
            FieldViolation(field_path=_field_path(err["loc"]), message=err["msg"])
            for err in e.errors()
        ]
        return ValidationResult(
            success=False,
            errors=[str(v) for v in violations],
            violations=violations,
        )
    return ValidationResult(success=True, data=record)


def _shallow_copy(value: Any) -> Any:
    """Fresh top-level container; nested values are shared, never mutated."""
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    return value


def _value_or_default(partial: Mapping, key: str, default: Any) -> Any:
    value = partial.get(key)
    return _shallow_copy(default if value is None else value)


def merge_with_defaults(partial: Any) -> dict:
    """Fill a partial candidate with baseline values.

    ``personalInfo`` is merged key by key so present sub-fields survive.
    Non-mapping input is treated as empty.
    """
    if not isinstance(partial, Mapping):
        partial = {}

    personal_defaults = DEFAULT_RESUME_DATA["personalInfo"]
    personal = partial.get("personalInfo")
    if not isinstance(personal, Mapping):
        personal = {}
    merged_personal = {
        key: _value_or_default(personal, key, default)
        for key, default in personal_defaults.items()
    }
    # Sub-fields outside the baseline are kept for the validator to judge
    for key, value in personal.items():
        if key not in merged_personal and value is not None:
            merged_personal[key] = _shallow_copy(value)

    merged = {"personalInfo": merged_personal}
    for key, default in DEFAULT_RESUME_DATA.items():
        if key != "personalInfo":
            merged[key] = _value_or_default(partial, key, default)
    return merged


def validate_with_recovery(candidate: Any) -> ValidationResult:
    """Validate, and on failure retry once against the defaults-merged candidate."""
    first = validate_resume(candidate)
    if first.success:
        return first

    logger.warning("Resume data validation failed: %s", first.errors)
    second = validate_resume(merge_with_defaults(candidate))
    if second.success:
        logger.info("Resume data validated after merging with defaults")
        return second

    logger.warning("Resume data still invalid after merging with defaults")
    return first


def build_fallback_resume(summary: str = GENERATION_FAILED_SUMMARY) -> dict:
    """Renderable placeholder shown when no usable record exists."""
    return merge_with_defaults({
        "personalInfo": {"name": FALLBACK_NAME, "email": ""},
        "summary": summary,
    })
