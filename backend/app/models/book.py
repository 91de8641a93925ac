"""
Booklist Backend - Book SQLAlchemy Model
=========================================

What:  ORM model for the `books` collection.
Who:   Used by SQLDocumentStore for CRUD operations and by Alembic.

Table Design:
    - UUID primary key, generated in Python when the record object is built,
      so even an unsaved (invalid) record has an identifier to serialize
    - All four fields NOT NULL: presence is validated before every write,
      the constraint only backs that up
    - isbn_index (unique): duplicate isbn inserts fail with IntegrityError,
      which the store turns into ConflictError (409)
    - idx_books_title: serves the title prefix filter
"""

import uuid

from sqlalchemy import Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Book(Base):
    """A book in the catalogue."""

    __tablename__ = "books"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str] = mapped_column(String(64), nullable=False)
    image: Mapped[str] = mapped_column(String(1024), nullable=False)

    __table_args__ = (
        Index("isbn_index", "isbn", unique=True),
        Index("idx_books_title", "title"),
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')>"
