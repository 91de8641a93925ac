"""
Booklist Backend - Resource Service (Resource Model operations)
================================================================

What:  list / get / create / update / delete for one resource type.
Why:   Encapsulates the business rules (presence validation, partial-update
       merge, idempotent delete) independent of HTTP concerns.
How:   Parameterized by a ResourceDefinition; talks to any DocumentStore.
Who:   Called by the resource routers (app/routes/resources.py).

Write Flow (create / update):
    ┌──────────┐    ┌──────────────┐    ┌──────────────┐    ┌──────────┐
    │  Coerce  │───▶│  Merge with  │───▶│  Presence    │───▶│  Store   │
    │  types   │    │  existing    │    │  validation  │    │  write   │
    └──────────┘    │  (update)    │    └──────────────┘    └──────────┘
                    └──────────────┘
    Any error before the store write raises RecordInvalidError carrying the
    serialized would-be record; nothing reaches the store.

Design Decision:
    ResourceService is stateless. The store is passed to every call, so one
    service instance per resource type is shared by all requests and tests
    can hand in a mock store.
"""

import logging
import uuid
from typing import Any, Dict, List, Mapping, Optional

from app.exceptions import ConflictError, NotFoundError, RecordInvalidError
from app.resources import RESOURCES
from app.resources.definition import ResourceDefinition
from app.serializers import serialize
from app.store.base import Document, DocumentStore

logger = logging.getLogger(__name__)

TAKEN_MESSAGE = "is already taken"


def _merge_errors(*groups: Mapping[str, List[str]]) -> Dict[str, List[str]]:
    merged: Dict[str, List[str]] = {}
    for group in groups:
        for name, messages in group.items():
            merged.setdefault(name, []).extend(messages)
    return merged


class ResourceService:
    """
    Business logic for one resource type.

    Error Handling Strategy:
        NotFoundError        missing id on get/update
        RecordInvalidError   presence or type validation failed (nothing written)
        ConflictError        store rejected a unique value; re-raised with the
                             serialized record attached
        StoreUnavailableError propagates from the store untouched
    """

    def __init__(self, definition: ResourceDefinition):
        self.definition = definition

    @property
    def collection(self) -> str:
        return self.definition.name

    def _invalid(self, document: Document, errors: Dict[str, List[str]]) -> RecordInvalidError:
        logger.info(
            "%s %s rejected: %s", self.definition.label, document["id"], sorted(errors)
        )
        return RecordInvalidError(
            payload=serialize(self.definition, document, errors),
            errors=errors,
            context={"resource": self.collection},
        )

    def _conflict(self, document: Document, error: ConflictError) -> ConflictError:
        errors = {error.field: [TAKEN_MESSAGE]} if error.field else {}
        return ConflictError(
            field=error.field,
            payload=serialize(self.definition, document, errors),
            context=error.context,
        )

    async def list(self, store: DocumentStore, params: Mapping[str, str]) -> List[Document]:
        """
        Records matching the allow-listed filters in `params`.

        Title filters are case-sensitive prefix matches; every other filter is
        an exact match. Order is whatever the store returns.
        """
        filters = self.definition.build_filters(params)
        return await store.find(self.collection, filters)

    async def get(self, store: DocumentStore, resource_id: str) -> Document:
        document = await store.find_one(self.collection, resource_id)
        if document is None:
            raise NotFoundError(resource=self.definition.label, resource_id=resource_id)
        return document

    async def create(self, store: DocumentStore, raw: Mapping[str, Any]) -> Document:
        """
        Validate and insert a new record.

        The identifier is assigned before validation so a rejected record
        still serializes with an id, as it would on success.

        Raises:
            RecordInvalidError: a required field is blank or a value has the
                wrong type (nothing persisted)
            ConflictError: the store's unique index rejected the record
        """
        document_id = str(uuid.uuid4())
        values, type_errors = self.definition.coerce(raw)
        candidate: Document = {"id": document_id, **values}

        errors = _merge_errors(type_errors, self.definition.presence_errors(values))
        if errors:
            raise self._invalid(candidate, errors)

        try:
            document = await store.insert(self.collection, document_id, values)
        except ConflictError as e:
            raise self._conflict(candidate, e) from e

        logger.info("%s %s created", self.definition.label, document["id"])
        return document

    async def update(
        self,
        store: DocumentStore,
        resource_id: str,
        raw: Mapping[str, Any],
        existing: Optional[Document] = None,
    ) -> Document:
        """
        Merge `raw` into the existing record, re-validate, persist.

        Fields absent from `raw` keep their stored values. The identifier is
        never changed. Pass `existing` when the caller has already read the
        record; it is read from the store otherwise.

        Raises:
            NotFoundError: no record with this id
            RecordInvalidError: the merged record fails validation
            ConflictError: the store's unique index rejected the new values
        """
        if existing is None:
            existing = await self.get(store, resource_id)
        values, type_errors = self.definition.coerce(raw)
        merged: Document = {**existing, **values}

        errors = _merge_errors(type_errors, self.definition.presence_errors(merged))
        if errors:
            raise self._invalid(merged, errors)

        if not values:
            return existing

        try:
            document = await store.update_by_id(self.collection, resource_id, values)
        except ConflictError as e:
            raise self._conflict(merged, e) from e

        if document is None:
            # Deleted by a concurrent request between the read and the write
            raise NotFoundError(resource=self.definition.label, resource_id=resource_id)
        return document

    async def delete(self, store: DocumentStore, resource_id: str) -> bool:
        """Remove the record if present. Missing ids are a no-op."""
        deleted = await store.delete_by_id(self.collection, resource_id)
        if not deleted:
            logger.debug("%s %s already absent", self.definition.label, resource_id)
        return deleted


# ── Service Instances ─────────────────────────────────────────────────────
# One stateless service per resource type
resource_services: Dict[str, ResourceService] = {
    name: ResourceService(definition) for name, definition in RESOURCES.items()
}
