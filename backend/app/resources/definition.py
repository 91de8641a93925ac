"""
Booklist Backend - Resource Definitions
========================================

What:  Declarative description of one resource type.
Why:   Books, movies and shows are structurally identical apart from their
       fields. A definition captures the differences; services, serializers
       and routers are written once against it.

A definition holds:
    - name / label:  collection and URL segment ("books"), display name ("Book")
    - fields_schema: pydantic model declaring field names, order and types
    - required:      fields that must be present on every persisted record
    - filters:       allow-list of filterable fields → comparison strategy

Filters are an explicit mapping, never a method lookup by name: a query
parameter is applied only if its field appears here.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple, Type

from pydantic import BaseModel, ValidationError as PydanticValidationError

from app.exceptions import MalformedRequestError
from app.store.base import FieldFilter, Match

BLANK_MESSAGE = "can't be blank"
INVALID_MESSAGE = "is invalid"


def _echo(value: Any) -> Any:
    """A rejected value as it can appear in a JSON body; NaN and infinities become strings."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


def is_blank(value: Any) -> bool:
    """None, empty strings and whitespace-only strings are blank."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


@dataclass(frozen=True)
class ResourceDefinition:
    name: str
    label: str
    fields_schema: Type[BaseModel]
    required: Tuple[str, ...]
    filters: Mapping[str, Match] = field(default_factory=dict)

    @property
    def singular(self) -> str:
        return self.label.lower()

    @property
    def fields(self) -> Tuple[str, ...]:
        """Declared field names, in declaration order."""
        return tuple(self.fields_schema.model_fields)

    def coerce(self, raw: Mapping[str, Any]) -> Tuple[Dict[str, Any], Dict[str, List[str]]]:
        """
        Convert client-supplied values to the declared field types.

        Only declared fields present in `raw` are returned. A value that
        cannot be converted is kept as sent (so the 422 body echoes it, with
        NaN and infinities as strings) and reported as "is invalid".

        Returns:
            (values, errors)
        """
        supplied = {name: raw[name] for name in self.fields if name in raw}
        errors: Dict[str, List[str]] = {}
        try:
            parsed = self.fields_schema.model_validate(supplied)
        except PydanticValidationError as e:
            for err in e.errors():
                errors.setdefault(str(err["loc"][0]), [INVALID_MESSAGE])
            valid = {k: v for k, v in supplied.items() if k not in errors}
            parsed = self.fields_schema.model_validate(valid)

        values = {
            name: (_echo(supplied[name]) if name in errors else getattr(parsed, name))
            for name in supplied
        }
        return values, errors

    def presence_errors(self, values: Mapping[str, Any]) -> Dict[str, List[str]]:
        """One "can't be blank" entry per required field that is blank."""
        return {
            name: [BLANK_MESSAGE]
            for name in self.required
            if is_blank(values.get(name))
        }

    def build_filters(self, params: Mapping[str, str]) -> List[FieldFilter]:
        """
        Turn query parameters into store filters.

        Parameters outside the allow-list are ignored. Values are converted
        to the field's type; a value that does not convert (rating=abc) is a
        malformed request.
        """
        candidates = {name: params[name] for name in self.filters if name in params}
        values, errors = self.coerce(candidates)
        if errors:
            raise MalformedRequestError(
                message=f"Invalid filter value for {', '.join(sorted(errors))}",
                context={"filters": sorted(errors)},
            )
        return [FieldFilter(name, self.filters[name], values[name]) for name in values]
