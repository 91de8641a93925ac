"""
Booklist Backend - ORM Models
==============================

One table per collection. Importing this package registers every table with
`Base.metadata` (used by Alembic autogenerate and
`SQLDocumentStore.ensure_indexes`).
"""

from app.models.book import Book
from app.models.movie import Movie
from app.models.show import Show

__all__ = ["Book", "Movie", "Show"]
