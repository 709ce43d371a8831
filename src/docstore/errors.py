"""Exceptions raised by the document store"""


class DocumentStoreError(Exception):
    """Base class for document store errors."""


class InvalidDocumentError(DocumentStoreError, ValueError):
    """Raised when save() is handed something that is not a Document."""


class IncompleteDocumentError(DocumentStoreError, ValueError):
    """A stored document lacks a field that an active search filter reads."""

    def __init__(self, doc_id: str, field: str):
        self.doc_id = doc_id
        self.field = field
        super().__init__(f"Document {doc_id} has no {field}; cannot apply {field} filter")
