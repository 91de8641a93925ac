"""Create books, movies and shows tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates one table per collection with the indexes the API relies on:
       - isbn_index: unique books.isbn (duplicate isbn → 409)
       - idx_<collection>_title: title prefix filtering

Rollback: downgrade() drops all three tables (all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _screen_columns() -> list:
    """Columns shared by movies and shows."""
    return [
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("director", sa.String(255), nullable=False),
        sa.Column("image", sa.String(1024), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    ]


def upgrade() -> None:
    op.create_table(
        "books",
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("isbn", sa.String(64), nullable=False),
        sa.Column("image", sa.String(1024), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("isbn_index", "books", ["isbn"], unique=True)
    op.create_index("idx_books_title", "books", ["title"])

    op.create_table("movies", *_screen_columns())
    op.create_index("idx_movies_title", "movies", ["title"])

    op.create_table("shows", *_screen_columns())
    op.create_index("idx_shows_title", "shows", ["title"])


def downgrade() -> None:
    op.drop_index("idx_shows_title", table_name="shows")
    op.drop_table("shows")
    op.drop_index("idx_movies_title", table_name="movies")
    op.drop_table("movies")
    op.drop_index("idx_books_title", table_name="books")
    op.drop_index("isbn_index", table_name="books")
    op.drop_table("books")
