"""Document stores: the ``DocumentStore`` protocol and its in-memory backend.

The in-memory store keeps documents in a dict keyed by id. It lives as long
as the instance does; there is no persistence and no deletion. Callers that
need shared access hold one instance and pass it around explicitly.
"""

from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable

from loguru import logger

from .config import StoreConfig
from .models import Document, SearchRequest
from .search import DocumentSearcher


@runtime_checkable
class DocumentStore(Protocol):
    """Protocol for document backends.

    Implementations upsert whole documents, look them up by id, and
    evaluate a ``SearchRequest`` against their current contents.
    """

    def save(self, document: Document) -> Document:
        """Upsert *document* and return the instance actually stored."""
        ...

    def find_by_id(self, doc_id: str) -> Document | None:
        """Return the document stored under *doc_id*, or None."""
        ...

    def search(self, request: SearchRequest) -> list[Document]:
        """Return every stored document matching *request*, unordered."""
        ...


class InMemoryDocumentStore:
    """Dict-backed ``DocumentStore``.

    Mutations are serialised via a lock; searches filter a snapshot taken
    under the lock.
    """

    def __init__(self, config: StoreConfig | None = None, searcher: DocumentSearcher | None = None) -> None:
        self.config = config or StoreConfig()
        self._searcher = searcher or DocumentSearcher()
        self._documents: dict[str, Document] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def save(self, document: Document) -> Document:
        """Upsert *document*.

        Without an id, a new id is generated and ``created`` is kept if set,
        otherwise stamped with the current time. With an id, the document
        is stored verbatim, replacing any earlier entry under that id; its
        ``created`` (even None) wins over the earlier record's.

        Returns:
            The Document instance now held by the store.
        """
        if not document.has_id:
            created = document.created if document.created is not None else self.config.now()
            document = document.with_identity(self.config.id_factory(), created)
            logger.debug(f"Assigned id {document.id} to new document")

        with self._lock:
            replaced = document.id in self._documents
            self._documents[document.id] = document

        if replaced:
            logger.debug(f"Overwrote document {document.id}")
        return document

    def find_by_id(self, doc_id: str) -> Document | None:
        """Get a document by id. Returns None if not found."""
        with self._lock:
            return self._documents.get(doc_id)

    def all(self) -> list[Document]:
        """Snapshot of every stored document, in no particular order."""
        with self._lock:
            return list(self._documents.values())

    def search(self, request: SearchRequest) -> list[Document]:
        """Return every stored document satisfying all filter groups of *request*.

        Raises whatever a predicate raises when a stored document lacks a
        field an active filter reads.
        """
        return self._searcher.search(self.all(), request)
