"""Persistence collaborator for generated résumé documents."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


@dataclass
class StoredDocument:
    id: str
    title: str
    content: str
    kind: str
    owner_id: str
    created_at: datetime


class DocumentStore(ABC):
    @abstractmethod
    def save(self, id: str, title: str, content: str, kind: str, owner_id: str) -> None:
        """Persist a document. Implementations may raise on failure."""


class InMemoryDocumentStore(DocumentStore):
    """Process-local store for development and tests.

    Holds at most ``max_documents``; the oldest document is evicted first.
    """

    def __init__(self, max_documents: int = 1000) -> None:
        self.max_documents = max_documents
        self._documents: dict[str, StoredDocument] = {}

    def save(self, id: str, title: str, content: str, kind: str, owner_id: str) -> None:
        self._documents[id] = StoredDocument(
            id=id,
            title=title,
            content=content,
            kind=kind,
            owner_id=owner_id,
            created_at=datetime.now(timezone.utc),
        )
        while len(self._documents) > self.max_documents:
            oldest = next(iter(self._documents))
            del self._documents[oldest]
        logger.debug("Saved %s document %s for %s", kind, id, owner_id)

    def get(self, id: str) -> StoredDocument | None:
        return self._documents.get(id)

    def clear(self) -> None:
        """Drop all documents. Useful for testing."""
        self._documents.clear()


_store: DocumentStore | None = None


def get_document_store() -> DocumentStore:
    """Default store: bounded and in-memory, for development only.

    Deployments provide a durable DocumentStore via dependency override.
    """
    global _store
    if _store is None:
        _store = InMemoryDocumentStore()
    return _store
