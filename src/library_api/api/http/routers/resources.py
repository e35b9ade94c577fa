"""CRUD router factory shared by every resource kind."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from sqlmodel import Session

from src.library_api.api.http.deps import get_db_session
from src.library_api.core.errors import NotFoundError
from src.library_api.core.services import ResourceService
from src.library_api.entities.registry import ResourceDescriptor

# Identifiers are stored as signed 64-bit integers
MIN_RECORD_ID = -(2**63)
MAX_RECORD_ID = 2**63 - 1

RecordId = Annotated[int, Path(ge=MIN_RECORD_ID, le=MAX_RECORD_ID)]


def create_resource_router(resource: ResourceDescriptor) -> APIRouter:
    """Build the list/get/create/update/delete routes for one resource.

    Mount the result under ``/{resource.name}``.
    """
    router = APIRouter(tags=[resource.name])
    entity_type = resource.entity_type

    def get_service(session: Session = Depends(get_db_session)) -> ResourceService:
        return resource.service(session)

    @router.get(
        "",
        response_model=list[entity_type],
        name=f"list_{resource.name}",
        summary=f"List all {resource.name}",
    )
    def list_records(service: ResourceService = Depends(get_service)):
        return service.list()

    @router.get(
        "/{record_id}",
        response_model=entity_type,
        name=f"get_{resource.name}",
        summary=f"Get one {resource.kind} by ID",
    )
    def get_record(record_id: RecordId, service: ResourceService = Depends(get_service)):
        try:
            return service.get(record_id)
        except NotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e

    @router.post(
        "",
        response_model=entity_type,
        name=f"create_{resource.name}",
        summary=f"Create a {resource.kind}",
    )
    def create_record(
        payload: entity_type,  # type: ignore[valid-type]
        service: ResourceService = Depends(get_service),
    ):
        return service.create(payload)

    @router.put(
        "/{record_id}",
        response_model=entity_type,
        name=f"update_{resource.name}",
        summary=f"Replace every field of a {resource.kind}",
    )
    def update_record(
        record_id: RecordId,
        payload: entity_type,  # type: ignore[valid-type]
        service: ResourceService = Depends(get_service),
    ):
        try:
            return service.update(record_id, payload)
        except NotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e

    @router.delete(
        "/{record_id}",
        response_class=Response,
        name=f"delete_{resource.name}",
        summary=f"Delete a {resource.kind}",
    )
    def delete_record(record_id: RecordId, service: ResourceService = Depends(get_service)):
        service.delete(record_id)
        return Response(status_code=200)

    return router
