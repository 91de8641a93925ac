"""
Booklist Backend - Show SQLAlchemy Model
=========================================

What:  ORM model for the `shows` collection. Same shape as Movie.
"""

import uuid

from sqlalchemy import Float, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Show(Base):
    """A television show."""

    __tablename__ = "shows"

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
        Index("idx_shows_title", "title"),
    )

    def __repr__(self) -> str:
        return f"<Show(id={self.id}, title='{self.title}')>"
