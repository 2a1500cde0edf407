"""In-memory document store with multi-predicate search.

Provides immutable document models, a DocumentStore protocol with an
in-memory backend, the predicate query engine, and store configuration.
"""

from .config import StoreConfig
from .models import Author, Document, SearchRequest
from .search import DocumentSearcher, matches, search
from .store import DocumentStore, InMemoryDocumentStore

__all__ = [
    "Author",
    "Document",
    "DocumentSearcher",
    "DocumentStore",
    "InMemoryDocumentStore",
    "SearchRequest",
    "StoreConfig",
    "matches",
    "search",
]
