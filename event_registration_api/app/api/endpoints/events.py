"""
Event endpoints (``/api/eventos``).

CRUD for events plus two read‑only views: the participants enrolled in
an event and its capacity status.  Business errors become 400, or 404
on direct lookups; store failures are rendered by the handlers
registered in ``main``.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from event_registration_api.app.api.deps import get_services, http_error
from event_registration_api.app.core.errors import DomainError
from event_registration_api.app.schemas.enrollment import MessageRead
from event_registration_api.app.schemas.event import (
    CapacityStatusRead,
    EventCreate,
    EventRead,
    EventUpdate,
)
from event_registration_api.app.schemas.participant import ParticipantEnrollmentRead
from event_registration_api.app.services import Services


router = APIRouter()


@router.post("", response_model=EventRead, status_code=status.HTTP_201_CREATED)
async def create_event(
    event: EventCreate,
    services: Services = Depends(get_services),
) -> EventRead:
    """Criar um novo evento."""
    try:
        created = await services.events.create_event(event.model_dump())
    except DomainError as e:
        raise http_error(e) from e
    return EventRead.model_validate(created)


@router.get("", response_model=List[EventRead])
async def list_events(services: Services = Depends(get_services)) -> List[EventRead]:
    """List all events ordered by date."""
    events = await services.events.list_events()
    return [EventRead.model_validate(e) for e in events]


@router.get("/{event_id}", response_model=EventRead)
async def get_event(event_id: int, services: Services = Depends(get_services)) -> EventRead:
    try:
        event = await services.events.get_event(event_id)
    except DomainError as e:
        raise http_error(e, not_found_status=status.HTTP_404_NOT_FOUND) from e
    return EventRead.model_validate(event)


@router.put("/{event_id}", response_model=EventRead)
async def update_event(
    event_id: int,
    updates: EventUpdate,
    services: Services = Depends(get_services),
) -> EventRead:
    """Update an existing event.

    Partial updates are supported; fields absent from the body remain
    unchanged.  The merged event is validated as a whole.
    """
    try:
        event = await services.events.update_event(event_id, updates.model_dump(exclude_unset=True))
    except DomainError as e:
        raise http_error(e) from e
    return EventRead.model_validate(event)


@router.delete("/{event_id}", response_model=MessageRead)
async def delete_event(event_id: int, services: Services = Depends(get_services)) -> dict:
    """Delete an event after removing all of its enrollments."""
    try:
        return await services.events.delete_event(event_id)
    except DomainError as e:
        raise http_error(e) from e


@router.get("/{event_id}/participantes", response_model=List[ParticipantEnrollmentRead])
async def list_event_participants(
    event_id: int,
    services: Services = Depends(get_services),
) -> List[dict]:
    """Listar os participantes inscritos no evento."""
    return await services.events.list_participants(event_id)


@router.get("/{event_id}/vagas", response_model=CapacityStatusRead)
async def get_capacity_status(
    event_id: int,
    services: Services = Depends(get_services),
) -> CapacityStatusRead:
    """Verificar vagas disponíveis: total, ocupadas, disponíveis e ``tem_vagas``."""
    try:
        capacity = await services.events.capacity_status(event_id)
    except DomainError as e:
        raise http_error(e, not_found_status=status.HTTP_404_NOT_FOUND) from e
    return CapacityStatusRead.model_validate(capacity)
