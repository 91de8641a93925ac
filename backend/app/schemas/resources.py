"""
Booklist Backend - Resource Field Schemas
==========================================

What:  Pydantic models declaring each resource's fields and their types.
Why:   One declaration drives three things: type coercion of request bodies
       and filter values, the serializer's field order, and the OpenAPI docs.
How:   Every field is Optional. Presence is a separate rule enforced by
       ResourceService (so a missing field becomes "can't be blank" in the
       422 body instead of FastAPI's generic validation error).

Coercion:
    - JSON numbers sent for string fields become strings (123 → "123")
    - rating accepts numbers and numeric strings ("7.5" → 7.5)
    - Unknown keys are ignored, including "id"
    - NaN and infinite ratings are rejected (they have no JSON form)
    - String lengths match the column sizes in app/models; a longer value
      is "is invalid" rather than a database error
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Column sizes of app/models and migration 001
NAME_LENGTH = 255
ISBN_LENGTH = 64
IMAGE_LENGTH = 1024


class ResourceFields(BaseModel):
    """Common configuration for all resource field schemas."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True, allow_inf_nan=False)


class BookFields(ResourceFields):
    title: Optional[str] = Field(
        default=None,
        max_length=NAME_LENGTH,
        description="Book title",
        examples=["Dune"],
    )
    author: Optional[str] = Field(
        default=None,
        max_length=NAME_LENGTH,
        description="Author name",
        examples=["Frank Herbert"],
    )
    isbn: Optional[str] = Field(
        default=None,
        max_length=ISBN_LENGTH,
        description="ISBN, unique across books",
        examples=["9780441013593"],
    )
    image: Optional[str] = Field(
        default=None,
        max_length=IMAGE_LENGTH,
        description="Cover image URL",
        examples=["dune.jpg"],
    )


class MovieFields(ResourceFields):
    title: Optional[str] = Field(
        default=None,
        max_length=NAME_LENGTH,
        description="Movie title",
        examples=["Alien"],
    )
    director: Optional[str] = Field(
        default=None,
        max_length=NAME_LENGTH,
        description="Director name",
        examples=["Ridley Scott"],
    )
    image: Optional[str] = Field(
        default=None,
        max_length=IMAGE_LENGTH,
        description="Poster image URL",
        examples=["alien.jpg"],
    )
    rating: Optional[float] = Field(
        default=None,
        description="Numeric rating",
        examples=[8.5],
    )


class ShowFields(ResourceFields):
    title: Optional[str] = Field(
        default=None,
        max_length=NAME_LENGTH,
        description="Show title",
        examples=["Severance"],
    )
    director: Optional[str] = Field(
        default=None,
        max_length=NAME_LENGTH,
        description="Director name",
        examples=["Ben Stiller"],
    )
    image: Optional[str] = Field(
        default=None,
        max_length=IMAGE_LENGTH,
        description="Poster image URL",
        examples=["severance.jpg"],
    )
    rating: Optional[float] = Field(
        default=None,
        description="Numeric rating",
        examples=[8.7],
    )
