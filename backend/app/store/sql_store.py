"""
Booklist Backend - SQLAlchemy Document Store
============================================

What:  DocumentStore implementation backed by async SQLAlchemy.
Why:   Keeps one table per collection in PostgreSQL (SQLite in tests) while
       presenting the collection/document interface services expect.
How:   Each collection name maps to an ORM model. Rows are converted to
       plain dict documents on the way out; driver exceptions are translated
       to application exceptions on the way up.
Who:   Built per request by `app.store.get_store` around the request's session.

Transactions:
    The store only flushes. Commit and rollback belong to the session
    dependency (app/database.py), which makes every request one unit of work.

Prefix matching:
    `substr(column, 1, len(prefix)) = prefix` rather than LIKE. It is
    case-sensitive on both PostgreSQL and SQLite (SQLite's LIKE is not) and
    needs no escaping of `%` / `_` in user input.
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Type

from sqlalchemy import func, select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import ConflictError, StoreUnavailableError
from app.models import Book, Movie, Show
from app.store.base import Document, DocumentStore, FieldFilter, Match

logger = logging.getLogger(__name__)

# Collection name → ORM model
COLLECTIONS: Dict[str, Type[Base]] = {
    "books": Book,
    "movies": Movie,
    "shows": Show,
}


def _parse_id(document_id: str) -> Optional[uuid.UUID]:
    """Malformed identifiers can never match a row; treat them as missing."""
    try:
        return uuid.UUID(str(document_id))
    except ValueError:
        return None


def _unique_field(model: Type[Base]) -> Optional[str]:
    """Name of the column guarded by the model's unique index, if any."""
    for index in model.__table__.indexes:
        if index.unique and len(index.columns) == 1:
            return next(iter(index.columns)).key
    return None


class SQLDocumentStore(DocumentStore):
    """
    Document store over the request's AsyncSession.

    Error translation:
        IntegrityError        → ConflictError (unique index violated)
        other SQLAlchemyError → StoreUnavailableError
        OSError               → StoreUnavailableError (database unreachable)
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    # ── Helpers ───────────────────────────────────────────────────────────

    def _model(self, collection: str) -> Type[Base]:
        try:
            return COLLECTIONS[collection]
        except KeyError:
            raise ValueError(f"Unknown collection '{collection}'") from None

    @staticmethod
    def _field_names(model: Type[Base]) -> List[str]:
        return [column.key for column in model.__table__.columns if column.key != "id"]

    def _to_document(self, row: Base) -> Document:
        document: Document = {"id": str(row.id)}
        for name in self._field_names(type(row)):
            document[name] = getattr(row, name)
        return document

    def _check_fields(self, model: Type[Base], fields: Dict[str, Any]) -> None:
        unknown = set(fields) - set(self._field_names(model))
        if unknown:
            raise ValueError(f"Unknown fields for {model.__tablename__}: {sorted(unknown)}")

    @contextmanager
    def _translate_errors(self, operation: str, collection: str) -> Iterator[None]:
        try:
            yield
        except IntegrityError as e:
            model = COLLECTIONS.get(collection)
            field = _unique_field(model) if model is not None else None
            logger.info("Unique index rejected %s on %s (field=%s)", operation, collection, field)
            raise ConflictError(
                field=field,
                context={"collection": collection, "operation": operation},
            ) from e
        except (SQLAlchemyError, OSError) as e:
            logger.error("Store %s on %s failed: %s", operation, collection, str(e))
            raise StoreUnavailableError(
                context={
                    "collection": collection,
                    "operation": operation,
                    "error_type": type(e).__name__,
                },
            ) from e

    async def _get_row(self, model: Type[Base], document_id: str) -> Optional[Base]:
        row_id = _parse_id(document_id)
        if row_id is None:
            return None
        return await self.session.get(model, row_id)

    # ── DocumentStore API ─────────────────────────────────────────────────

    async def find(self, collection: str, filters: List[FieldFilter]) -> List[Document]:
        model = self._model(collection)
        self._check_fields(model, {f.field: f.value for f in filters})

        stmt = select(model)
        for f in filters:
            column = getattr(model, f.field)
            if f.match is Match.PREFIX:
                prefix = str(f.value)
                stmt = stmt.where(func.substr(column, 1, len(prefix)) == prefix)
            else:
                stmt = stmt.where(column == f.value)

        with self._translate_errors("find", collection):
            result = await self.session.execute(stmt)
            rows = result.scalars().all()
        return [self._to_document(row) for row in rows]

    async def find_one(self, collection: str, document_id: str) -> Optional[Document]:
        model = self._model(collection)
        with self._translate_errors("find_one", collection):
            row = await self._get_row(model, document_id)
        return self._to_document(row) if row is not None else None

    async def insert(self, collection: str, document_id: str, fields: Dict[str, Any]) -> Document:
        model = self._model(collection)
        self._check_fields(model, fields)
        row = model(id=uuid.UUID(document_id), **fields)

        with self._translate_errors("insert", collection):
            self.session.add(row)
            # Flush so unique index violations surface here, not at commit
            await self.session.flush()

        logger.info("Inserted %s/%s", collection, row.id)
        return self._to_document(row)

    async def update_by_id(
        self, collection: str, document_id: str, fields: Dict[str, Any]
    ) -> Optional[Document]:
        model = self._model(collection)
        self._check_fields(model, fields)

        with self._translate_errors("update", collection):
            row = await self._get_row(model, document_id)
            if row is None:
                return None
            for name, value in fields.items():
                setattr(row, name, value)
            await self.session.flush()

        logger.info("Updated %s/%s fields=%s", collection, row.id, sorted(fields))
        return self._to_document(row)

    async def delete_by_id(self, collection: str, document_id: str) -> bool:
        model = self._model(collection)
        with self._translate_errors("delete", collection):
            row = await self._get_row(model, document_id)
            if row is None:
                return False
            await self.session.delete(row)
            await self.session.flush()

        logger.info("Deleted %s/%s", collection, document_id)
        return True

    async def ensure_indexes(self) -> None:
        # create_all is checkfirst: existing tables and indexes are left alone
        with self._translate_errors("ensure_indexes", "*"):
            await self.session.run_sync(
                lambda sync_session: Base.metadata.create_all(sync_session.connection())
            )

    async def ping(self) -> bool:
        try:
            await self.session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Store ping failed: %s", str(e))
            # Leave the session clean so the dependency's commit is a no-op
            await self.session.rollback()
            return False
