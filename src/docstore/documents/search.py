"""Predicate search over a collection of Documents.

A ``SearchRequest`` is a conjunction of five filter groups. Each group is
checked by its own predicate; a predicate whose request field is ``None``
accepts every document. Predicates are pure, so evaluation order and
short-circuiting do not affect the result.

Only the request side is null-checked. A stored document missing a field
an active filter needs (``title``, ``content``, ``author`` or ``created``)
raises straight through to the caller.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from loguru import logger

from .models import Document, SearchRequest

Predicate = Callable[[Document, SearchRequest], bool]


def matches_title_prefixes(document: Document, request: SearchRequest) -> bool:
    if request.title_prefixes is None:
        return True
    return any(document.title.startswith(prefix) for prefix in request.title_prefixes)


def matches_content(document: Document, request: SearchRequest) -> bool:
    if request.contains_contents is None:
        return True
    return any(fragment in document.content for fragment in request.contains_contents)


def matches_author(document: Document, request: SearchRequest) -> bool:
    if request.author_ids is None:
        return True
    return any(document.author.id == author_id for author_id in request.author_ids)


def matches_created_from(document: Document, request: SearchRequest) -> bool:
    if request.created_from is None:
        return True
    return request.created_from < document.created


def matches_created_to(document: Document, request: SearchRequest) -> bool:
    if request.created_to is None:
        return True
    return request.created_to > document.created


PREDICATES: tuple[Predicate, ...] = (
    matches_title_prefixes,
    matches_content,
    matches_author,
    matches_created_from,
    matches_created_to,
)


def matches(document: Document, request: SearchRequest) -> bool:
    """Return True if *document* satisfies every filter group in *request*."""
    return all(predicate(document, request) for predicate in PREDICATES)


def search(documents: Iterable[Document], request: SearchRequest) -> list[Document]:
    """Return the documents that match *request*, in iteration order."""
    return [document for document in documents if matches(document, request)]


class DocumentSearcher:
    """Stateless query engine.

    Example::

        searcher = DocumentSearcher()
        hits = searcher.search(store.all(), SearchRequest(author_ids=["u1"]))
    """

    def search(self, documents: Iterable[Document], request: SearchRequest) -> list[Document]:
        """Filter *documents* by *request*.

        Args:
            documents: Candidate documents, typically a store snapshot.
            request: Filter groups to apply.

        Returns:
            Matching documents. Order follows *documents* and carries no meaning.
        """
        results = search(documents, request)
        logger.debug("Search matched {} document(s) for {}", len(results), request)
        return results
