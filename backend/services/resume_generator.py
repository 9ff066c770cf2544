"""Creation flow: extract, enhance, filter sections, serialize, persist.

A failed extraction is reported as a ``degraded`` outcome carrying the
fallback record, so the caller always has something to render.
"""

import json
import logging
import uuid

from config import settings
from models.requests import GenerateResumeRequest
from models.responses import GenerationResponse
from models.schemas.resume import ResumeRecord
from services.completion_client import CompletionService
from services.document_store import DocumentStore, get_document_store
from services.resume_enhancer import enhance_resume, serialize_resume
from services.resume_extractor import extract_resume_data
from services.resume_validator import build_fallback_resume

logger = logging.getLogger(__name__)

DOCUMENT_KIND = "resume"


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def describe_resume(
    record: ResumeRecord,
    title: str,
    include_projects: bool = True,
    include_certifications: bool = True,
) -> str:
    """Short user-facing summary of what the generated resume contains.

    Requested optional sections are listed even when empty ("0 projects").
    """
    lines = [
        f'Resume "{title}" has been generated successfully. The resume includes:',
        f"- Personal information: {record.personal_info.name or 'Not provided'}",
        f"- Professional summary: {'Included' if record.summary else 'Not provided'}",
        f"- Work experience: {_plural(len(record.experience), 'position', 'positions')}",
        f"- Education: {_plural(len(record.education), 'degree', 'degrees')}",
        f"- Skills: {_plural(len(record.skills), 'category', 'categories')}",
    ]
    if include_projects and record.projects is not None:
        lines.append(f"- Projects: {_plural(len(record.projects), 'project', 'projects')}")
    if include_certifications and record.certifications is not None:
        lines.append(
            f"- Certifications: {_plural(len(record.certifications), 'certification', 'certifications')}"
        )
    lines.append("")
    lines.append("You can now preview the resume and download it as a PDF.")
    return "\n".join(lines)


def _save(store: DocumentStore, doc_id: str, title: str, content: str, owner_id: str) -> None:
    try:
        store.save(doc_id, title, content, DOCUMENT_KIND, owner_id)
    except Exception as e:
        logger.warning("Failed to save resume %s: %s", doc_id, e)


def generate_resume(
    request: GenerateResumeRequest,
    owner_id: str | None = None,
    service: CompletionService | None = None,
    store: DocumentStore | None = None,
) -> GenerationResponse:
    doc_id = str(uuid.uuid4())
    system_context = request.system_context or settings.background_context or None

    result = extract_resume_data(
        request.messages,
        selected_chat_model=request.selected_chat_model,
        system_context=system_context,
        service=service,
    )

    if not result.success or result.data is None:
        logger.warning("Resume %s degraded to fallback record: %s", doc_id, result.error)
        return GenerationResponse(
            id=doc_id,
            title=request.title,
            status="degraded",
            content=json.dumps(build_fallback_resume(), indent=2, ensure_ascii=False),
            message=(
                f"Failed to generate resume: {result.error or 'Unknown error occurred'}. "
                "Please try again or provide more information about your background, "
                "experience, and skills in the conversation."
            ),
            errors=result.errors,
        )

    record = enhance_resume(result.data)
    if not request.include_projects:
        record = record.model_copy(update={"projects": []})
    if not request.include_certifications:
        record = record.model_copy(update={"certifications": []})

    content = serialize_resume(record)
    if owner_id:
        _save(store or get_document_store(), doc_id, request.title, content, owner_id)

    return GenerationResponse(
        id=doc_id,
        title=request.title,
        status="success",
        content=content,
        message=describe_resume(
            record,
            request.title,
            include_projects=request.include_projects,
            include_certifications=request.include_certifications,
        ),
    )
