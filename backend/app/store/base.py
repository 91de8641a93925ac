"""
Booklist Backend - Abstract Document Store Interface
=====================================================

What:  Abstract base class defining the persistence collaborator contract.
Why:   Services only ever talk to collections of documents. Which database
       backs them (PostgreSQL tables today, a document database tomorrow) is
       an implementation detail behind this interface.
How:   Concrete stores inherit from DocumentStore and implement every method.
Who:   Called by ResourceService; built per request by `get_store`.

Document shape:
    A plain dict with the record's identifier under "id" (always a string)
    and one key per declared field:

        {"id": "3f1c…", "title": "Dune", "author": "Herbert", …}
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional

Document = Dict[str, Any]


class Match(str, Enum):
    """Comparison strategy applied by a filter."""

    PREFIX = "prefix"  # case-sensitive "starts with"
    EQUALS = "equals"


class FieldFilter(NamedTuple):
    field: str
    match: Match
    value: Any


class DocumentStore(ABC):
    """
    Abstract interface over a set of named document collections.

    Contract:
        - Collections are addressed by name ("books", "movies", "shows")
        - Identifiers are strings; an identifier that cannot exist in the
          store (malformed) behaves exactly like one that does not exist
        - Unique index violations raise ConflictError
        - Any other backend failure raises StoreUnavailableError
        - Writes become durable when the surrounding unit of work commits
    """

    @abstractmethod
    async def find(self, collection: str, filters: List[FieldFilter]) -> List[Document]:
        """
        Return every document matching all filters (logical AND).

        No ordering is guaranteed. An empty filter list returns the whole
        collection.
        """
        ...

    @abstractmethod
    async def find_one(self, collection: str, document_id: str) -> Optional[Document]:
        """Return the document with this identifier, or None."""
        ...

    @abstractmethod
    async def insert(self, collection: str, document_id: str, fields: Dict[str, Any]) -> Document:
        """
        Insert a new document under a caller-assigned identifier.

        Raises:
            ConflictError: a unique index rejected the document.
        """
        ...

    @abstractmethod
    async def update_by_id(
        self, collection: str, document_id: str, fields: Dict[str, Any]
    ) -> Optional[Document]:
        """
        Overwrite the given fields of an existing document.

        Fields not present in `fields` are left untouched. Returns the updated
        document, or None when no document has this identifier.

        Raises:
            ConflictError: a unique index rejected the new values.
        """
        ...

    @abstractmethod
    async def delete_by_id(self, collection: str, document_id: str) -> bool:
        """Remove the document. Returns False when there was nothing to remove."""
        ...

    @abstractmethod
    async def ensure_indexes(self) -> None:
        """
        Declare the indexes the resources rely on.

        books.isbn unique ("isbn_index") and a title index per collection.
        Idempotent.
        """
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """Lightweight reachability check used by GET /health."""
        ...
