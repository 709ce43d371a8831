from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.crud.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, document: Document) -> Document:
        """Upsert by id, generating one for new documents. Return the given instance."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest | None = None) -> list[Document]:
        raise NotImplementedError

    def findById(self, doc_id: str) -> Document | None:
        """Alias of find_by_id kept for callers using the camelCase name."""
        return self.find_by_id(doc_id)
