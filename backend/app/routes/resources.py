"""
Booklist Backend - Resource Route Handlers
===========================================

What:  Builds the CRUD router for one resource type.
Why:   The five routes are identical for books, movies and shows apart from
       the resource definition, so they are generated from it.
How:   Each handler parses the request (query params or JSON body),
       delegates to ResourceService, serializes, and sets status/headers.
       Errors are raised, never returned; the global handlers in main.py
       turn them into responses.

Route table (per resource R, under settings.api_prefix):
    GET    /R        → 200 [records]          400 bad filter value
    GET    /R/{id}   → 200 record             404
    POST   /R        → 201 record + Location  400, 409, 422
    PATCH  /R/{id}   → 200 record             400, 404, 409, 422
    DELETE /R/{id}   → 204                    (missing ids are a no-op)
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import MalformedRequestError
from app.resources import RESOURCES
from app.resources.definition import ResourceDefinition
from app.schemas.common import ErrorResponse
from app.serializers import serialize, serialize_many
from app.services.resource_service import resource_services
from app.store import DocumentStore, get_store

logger = logging.getLogger(__name__)


async def read_json_object(request: Request) -> Dict[str, Any]:
    """
    Parse the request body as a JSON object.

    Fails fast: anything that is not a JSON object raises
    MalformedRequestError (400) before any other processing.
    """
    try:
        data = await request.json()
    except ValueError:
        raise MalformedRequestError(message="Invalid JSON") from None
    if not isinstance(data, dict):
        raise MalformedRequestError(
            message="Invalid JSON",
            context={"reason": "request body must be a JSON object"},
        )
    return data


def build_resource_router(definition: ResourceDefinition) -> APIRouter:
    """Create the five CRUD routes for `definition`."""
    service = resource_services[definition.name]
    router = APIRouter(
        prefix=f"{settings.api_prefix}/{definition.name}",
        tags=[definition.label + "s"],
    )
    label = definition.label
    item_route = f"get_{definition.singular}"
    body_spec = {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": definition.fields_schema.model_json_schema()}
            },
        }
    }

    @router.get(
        "",
        name=f"list_{definition.name}",
        summary=f"List {definition.name}",
        description=(
            f"Filterable by {', '.join(definition.filters)}. "
            "title matches by case-sensitive prefix; the others by equality."
        ),
        responses={400: {"description": "Invalid filter value", "model": ErrorResponse}},
    )
    async def list_resources(
        request: Request,
        store: DocumentStore = Depends(get_store),
    ) -> JSONResponse:
        documents = await service.list(store, request.query_params)
        return JSONResponse(content=serialize_many(definition, documents))

    @router.get(
        "/{resource_id}",
        name=item_route,
        summary=f"Get a single {definition.singular}",
        responses={404: {"description": f"{label} Not Found", "model": ErrorResponse}},
    )
    async def get_resource(
        resource_id: str,
        store: DocumentStore = Depends(get_store),
    ) -> JSONResponse:
        document = await service.get(store, resource_id)
        return JSONResponse(content=serialize(definition, document))

    @router.post(
        "",
        name=f"create_{definition.singular}",
        status_code=201,
        summary=f"Create a {definition.singular}",
        openapi_extra=body_spec,
        responses={
            400: {"description": "Invalid JSON", "model": ErrorResponse},
            409: {"description": "Unique field already taken"},
            422: {"description": "Record with validation errors"},
        },
    )
    async def create_resource(
        request: Request,
        store: DocumentStore = Depends(get_store),
    ) -> JSONResponse:
        payload = await read_json_object(request)
        document = await service.create(store, payload)
        location = str(request.url_for(item_route, resource_id=document["id"]))
        return JSONResponse(
            status_code=201,
            content=serialize(definition, document),
            headers={"Location": location},
        )

    @router.patch(
        "/{resource_id}",
        name=f"update_{definition.singular}",
        summary=f"Partially update a {definition.singular}",
        openapi_extra=body_spec,
        responses={
            400: {"description": "Invalid JSON", "model": ErrorResponse},
            404: {"description": f"{label} Not Found", "model": ErrorResponse},
            409: {"description": "Unique field already taken"},
            422: {"description": "Record with validation errors"},
        },
    )
    async def update_resource(
        resource_id: str,
        request: Request,
        store: DocumentStore = Depends(get_store),
    ) -> JSONResponse:
        # Existence is checked first so a missing record is 404 whatever the body
        existing = await service.get(store, resource_id)
        payload = await read_json_object(request)
        document = await service.update(store, resource_id, payload, existing=existing)
        return JSONResponse(content=serialize(definition, document))

    @router.delete(
        "/{resource_id}",
        name=f"delete_{definition.singular}",
        status_code=204,
        summary=f"Delete a {definition.singular}",
        description="Idempotent: deleting a missing id also returns 204.",
    )
    async def delete_resource(
        resource_id: str,
        store: DocumentStore = Depends(get_store),
    ) -> Response:
        await service.delete(store, resource_id)
        return Response(status_code=204)

    return router


routers = [build_resource_router(definition) for definition in RESOURCES.values()]
