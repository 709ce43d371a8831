from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from docstore.config import Settings
from docstore.crud.filters import matches
from docstore.crud.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo
from docstore.errors import InvalidDocumentError
from docstore.log import logger


def _created_key(doc: Document) -> tuple:
    # undated documents sort last
    return (doc.created is None, doc.created or datetime.min.replace(tzinfo=timezone.utc))


@dataclass
class MemoryRepo(DocumentRepo):
    """Dict-backed document store. Each instance owns its own storage.

    An embedding application builds it with `MemoryRepo(settings=load_config())`;
    without settings the defaults apply.
    """
    settings: Settings = field(default_factory=Settings)
    _docs: dict[str, Document] = field(default_factory=dict)

    def save(self, document: Document) -> Document:
        """Upsert a document and return the same instance, now carrying an id.

        New documents (no id or "") get a uuid4 id; the caller's `created` is
        kept as given. Saving an existing id overwrites every field except
        `created`, which stays at the value from the first insert and is
        written back onto `document`. The store keeps a deep copy.
        """
        if not isinstance(document, Document):
            raise InvalidDocumentError(f"Expected a Document, got {type(document).__name__}")

        if document.is_new():
            document.id = str(uuid4())
            status = "created"
        else:
            existing = self._docs.get(document.id)
            status = "created" if existing is None else "updated"
            if existing is not None and existing.created is not None:
                document.created = existing.created

        self._docs[document.id] = document.model_copy(deep=True)
        logger.debug(f"{status}: {document.id}")
        return document

    def find_by_id(self, doc_id: str) -> Document | None:
        doc = self._docs.get(doc_id)
        return doc.model_copy(deep=True) if doc is not None else None

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Return copies of every stored document matching all active filters."""
        if request is None:
            request = SearchRequest()
        found = [d for d in self._docs.values() if matches(d, request)]
        if self.settings.result_order == "created":
            found.sort(key=_created_key)
        logger.debug(f"search matched {len(found)} of {len(self._docs)} document(s)")
        return [d.model_copy(deep=True) for d in found]

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs


DocumentStore = MemoryRepo
