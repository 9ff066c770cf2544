"""Best-effort recovery of a JSON object from free-form model output."""

import json
import logging
import re

from services.errors import MalformedOutputError, NoStructuredOutputError

logger = logging.getLogger(__name__)

# Greedy: first "{" through last "}", spanning newlines and code fences.
JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def extract_json_object(text: str) -> dict:
    """Return the first top-level object literal found in ``text``.

    Raises NoStructuredOutputError when no braces are present and
    MalformedOutputError when the braced substring is not valid JSON.
    """
    match = JSON_OBJECT_RE.search(text or "")
    if not match:
        logger.error("No JSON object found in model response")
        raise NoStructuredOutputError(text or "")

    try:
        return json.loads(match.group(0))
    # JSONDecodeError, oversized integer literals and runaway nesting
    except (ValueError, RecursionError) as e:
        logger.error("Failed to parse model response as JSON: %s", e)
        logger.debug("Unparsable model response: %s", text)
        raise MalformedOutputError(text) from e
