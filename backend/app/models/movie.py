"""
Booklist Backend - Movie SQLAlchemy Model
==========================================

What:  ORM model for the `movies` collection.
Why rating is a Float: the API accepts any JSON number (4, 7.5) and returns
it unchanged apart from int → float widening.
"""

import uuid

from sqlalchemy import Float, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Movie(Base):
    """A movie, rated by the catalogue's curators."""

    __tablename__ = "movies"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    director: Mapped[str] = mapped_column(String(255), nullable=False)
    image: Mapped[str] = mapped_column(String(1024), nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)

    __table_args__ = (
        Index("idx_movies_title", "title"),
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}')>"
