from fastapi import APIRouter, Depends, Header, Request
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.concurrency import run_in_threadpool

from api.dependencies import get_completion, get_store
from config import settings
from models.requests import GenerateResumeRequest, PreviewResumeRequest, UpdateResumeRequest
from models.responses import GenerationResponse, PreviewResult, UpdateResult
from services import resume_generator, resume_loader, resume_updater
from services.completion_client import CompletionService
from services.document_store import DocumentStore

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health(service: CompletionService = Depends(get_completion)):
    return {
        "status": "ok",
        "gemini_configured": service.is_configured,
    }


@router.post("/resume/generate", response_model=GenerationResponse)
@limiter.limit(settings.rate_limit)
async def generate(
    request: Request,
    body: GenerateResumeRequest,
    x_user_id: str | None = Header(None),
    service: CompletionService = Depends(get_completion),
    store: DocumentStore = Depends(get_store),
):
    # The completion call blocks; keep it off the event loop
    return await run_in_threadpool(
        resume_generator.generate_resume,
        body,
        owner_id=x_user_id,
        service=service,
        store=store,
    )


@router.post("/resume/update", response_model=UpdateResult)
@limiter.limit(settings.rate_limit)
async def update(
    request: Request,
    body: UpdateResumeRequest,
    service: CompletionService = Depends(get_completion),
):
    return await run_in_threadpool(
        resume_updater.update_resume_document,
        body.content,
        body.description,
        selected_chat_model=body.selected_chat_model,
        service=service,
    )


@router.post("/resume/preview", response_model=PreviewResult)
async def preview(body: PreviewResumeRequest):
    return resume_loader.load_resume_document(body.content)
