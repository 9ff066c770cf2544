"""Shared dependencies for API routes."""

from services.completion_client import CompletionService, get_completion_service
from services.document_store import DocumentStore, get_document_store


def get_completion() -> CompletionService:
    return get_completion_service()


def get_store() -> DocumentStore:
    return get_document_store()
