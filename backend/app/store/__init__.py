"""
Booklist Backend - Persistence Client Package
==============================================

What:  The document store the services talk to, plus its FastAPI dependency.

    - base.py:       DocumentStore interface, FieldFilter, Match
    - sql_store.py:  SQLAlchemy implementation (one table per collection)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.store.base import Document, DocumentStore, FieldFilter, Match
from app.store.sql_store import SQLDocumentStore


async def get_store(session: AsyncSession = Depends(get_db_session)) -> DocumentStore:
    """
    FastAPI dependency: a document store bound to this request's session.

    Tests override this dependency to swap the store.
    """
    return SQLDocumentStore(session)


__all__ = [
    "Document",
    "DocumentStore",
    "FieldFilter",
    "Match",
    "SQLDocumentStore",
    "get_store",
]
