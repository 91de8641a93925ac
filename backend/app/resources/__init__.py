"""
Booklist Backend - Resource Registry
=====================================

The three resource types served under the API prefix.

    Resource  Filterable (strategy)
    books     title (prefix), isbn (equals), author (equals)
    movies    title (prefix), director (equals), rating (equals)
    shows     title (prefix), director (equals), rating (equals)
"""

from typing import Dict

from app.resources.definition import ResourceDefinition, is_blank
from app.schemas.resources import BookFields, MovieFields, ShowFields
from app.store.base import Match

BOOKS = ResourceDefinition(
    name="books",
    label="Book",
    fields_schema=BookFields,
    required=("title", "author", "isbn", "image"),
    filters={"title": Match.PREFIX, "isbn": Match.EQUALS, "author": Match.EQUALS},
)

MOVIES = ResourceDefinition(
    name="movies",
    label="Movie",
    fields_schema=MovieFields,
    required=("title", "director", "image", "rating"),
    filters={"title": Match.PREFIX, "director": Match.EQUALS, "rating": Match.EQUALS},
)

SHOWS = ResourceDefinition(
    name="shows",
    label="Show",
    fields_schema=ShowFields,
    required=("title", "director", "image", "rating"),
    filters={"title": Match.PREFIX, "director": Match.EQUALS, "rating": Match.EQUALS},
)

RESOURCES: Dict[str, ResourceDefinition] = {
    definition.name: definition for definition in (BOOKS, MOVIES, SHOWS)
}

__all__ = ["BOOKS", "MOVIES", "SHOWS", "RESOURCES", "ResourceDefinition", "is_blank"]
