"""Core data models for the document store.

Plain immutable values: an ``Author`` embedded in a ``Document``, and the
``SearchRequest`` the query engine evaluates. None of them carry behaviour
beyond light validation.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields, replace
from datetime import datetime


@dataclass(frozen=True)
class Author:
    """The author embedded in a document. Not shared between documents."""

    id: str | None
    name: str | None = None


@dataclass(frozen=True)
class Document:
    """A stored record.

    Every field may be left unset at construction time; the store fills in
    ``id`` (and ``created``, when missing) on the generate-id save path.

    Attributes:
        id: Unique identifier. Empty or None means "assign one on save".
        title: Document title, matched by prefix.
        content: Body text, matched by substring.
        author: Embedded author value.
        created: Creation timestamp. Never overwritten once the store sets it.
    """

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    @property
    def has_id(self) -> bool:
        return bool(self.id)

    def with_identity(self, doc_id: str, created: datetime | None) -> Document:
        """Return a copy carrying *doc_id* and *created*, other fields unchanged."""
        return replace(self, id=doc_id, created=created)

    def __repr__(self) -> str:
        title = self.title if self.title is None or len(self.title) <= 40 else self.title[:40] + "..."
        author_id = self.author.id if self.author is not None else None
        return f"Document(id={self.id!r}, title={title!r}, author={author_id!r}, created={self.created!r})"


def _as_criteria(name: str, value: Iterable[str] | None) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        raise ValueError(f"{name} must be a collection of strings, not a single string")
    return tuple(value)


@dataclass(frozen=True)
class SearchRequest:
    """A conjunction of independently optional filter groups.

    Each field follows the same three-way rule:

    * ``None`` - the dimension imposes no constraint.
    * empty collection - nothing can match the dimension.
    * non-empty collection - a document matches if **any** entry matches.

    Collections are normalised to tuples so requests stay immutable.

    Attributes:
        title_prefixes: Candidate prefixes for ``Document.title``.
        contains_contents: Candidate substrings of ``Document.content``.
        author_ids: Candidate values for ``Document.author.id``.
        created_from: Exclusive lower bound on ``Document.created``.
        created_to: Exclusive upper bound on ``Document.created``.

    Time bounds must share awareness with the stored timestamps: the store
    stamps timezone-aware UTC times by default (see ``StoreConfig``), and
    comparing a naive bound against them raises ``TypeError`` during search.
    """

    title_prefixes: tuple[str, ...] | None = None
    contains_contents: tuple[str, ...] | None = None
    author_ids: tuple[str, ...] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    def __post_init__(self):
        for name in ("title_prefixes", "contains_contents", "author_ids"):
            object.__setattr__(self, name, _as_criteria(name, getattr(self, name)))
        for name in ("created_from", "created_to"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, datetime):
                raise ValueError(f"{name} must be a datetime, got {type(value).__name__}")

    @property
    def is_unconstrained(self) -> bool:
        """True when every filter group is absent."""
        return all(getattr(self, f.name) is None for f in fields(self))
