"""Search predicates: one function per SearchRequest dimension, combined by matches()"""

from datetime import datetime
from typing import Any

from docstore.crud.models import Document, SearchRequest, as_utc
from docstore.errors import IncompleteDocumentError


def _require(doc: Document, field: str, value: Any) -> Any:
    """Return value, or raise IncompleteDocumentError if the document lacks it."""
    if value is None:
        raise IncompleteDocumentError(doc.id, field)
    return value


def title_matches(doc: Document, prefixes: list[str] | None) -> bool:
    """True if the title starts with any prefix; None skips the check."""
    if prefixes is None:
        return True
    title = _require(doc, "title", doc.title)
    return any(title.startswith(p) for p in prefixes)


def content_matches(doc: Document, substrings: list[str] | None) -> bool:
    """True if the content contains any substring; None skips the check."""
    if substrings is None:
        return True
    content = _require(doc, "content", doc.content)
    return any(s in content for s in substrings)


def author_matches(doc: Document, author_ids: list[str] | None) -> bool:
    if author_ids is None:
        return True
    author = _require(doc, "author", doc.author)
    return author.id in author_ids


def created_in_range(
    doc: Document,
    created_from: datetime | None = None,
    created_to: datetime | None = None,
    ) -> bool:
    """Inclusive on both ends, compared in UTC; a None bound is open."""
    if created_from is None and created_to is None:
        return True
    created = as_utc(_require(doc, "created", doc.created))
    created_from, created_to = as_utc(created_from), as_utc(created_to)
    if created_from is not None and created < created_from:
        return False
    if created_to is not None and created > created_to:
        return False
    return True


def matches(doc: Document, request: SearchRequest) -> bool:
    """AND of every active predicate in the request."""
    return (
        title_matches(doc, request.title_prefixes)
        and content_matches(doc, request.contains_contents)
        and author_matches(doc, request.author_ids)
        and created_in_range(doc, request.created_from, request.created_to)
    )
