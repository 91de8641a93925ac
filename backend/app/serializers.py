"""
Booklist Backend - Record Serializers
======================================

What:  Converts a stored document (or a rejected would-be document) into the
       canonical JSON mapping returned by the API.
How:   Pure functions. Key order: "id" (always a string), then the
       resource's declared fields in declaration order, then "errors" when
       the record failed validation.

Example (rejected create):
    {
        "id": "7d1e0c7e-…",
        "title": "Dune",
        "author": "",
        "isbn": "123",
        "image": "x.jpg",
        "errors": {"author": ["can't be blank"]}
    }
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from app.resources.definition import ResourceDefinition


def serialize(
    definition: ResourceDefinition,
    document: Mapping[str, Any],
    errors: Optional[Mapping[str, List[str]]] = None,
) -> Dict[str, Any]:
    """Serialize one document. Fields the document lacks render as null."""
    data: Dict[str, Any] = {"id": str(document["id"])}
    for name in definition.fields:
        data[name] = document.get(name)
    if errors:
        data["errors"] = {name: list(messages) for name, messages in errors.items()}
    return data


def serialize_many(
    definition: ResourceDefinition, documents: Iterable[Mapping[str, Any]]
) -> List[Dict[str, Any]]:
    return [serialize(definition, document) for document in documents]
