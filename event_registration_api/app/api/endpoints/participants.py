"""Participant endpoints (``/api/participantes``)."""

from typing import List

from fastapi import APIRouter, Depends, status

from event_registration_api.app.api.deps import get_services, http_error
from event_registration_api.app.core.errors import DomainError
from event_registration_api.app.schemas.enrollment import MessageRead
from event_registration_api.app.schemas.event import EventEnrollmentRead
from event_registration_api.app.schemas.participant import (
    ParticipantCreate,
    ParticipantRead,
    ParticipantUpdate,
)
from event_registration_api.app.services import Services


router = APIRouter()


@router.post("", response_model=ParticipantRead, status_code=status.HTTP_201_CREATED)
async def create_participant(
    participant: ParticipantCreate,
    services: Services = Depends(get_services),
) -> ParticipantRead:
    """Cadastrar participante.  O e‑mail deve ser único."""
    try:
        created = await services.participants.create_participant(participant.model_dump())
    except DomainError as e:
        raise http_error(e) from e
    return ParticipantRead.model_validate(created)


@router.get("", response_model=List[ParticipantRead])
async def list_participants(services: Services = Depends(get_services)) -> List[ParticipantRead]:
    participants = await services.participants.list_participants()
    return [ParticipantRead.model_validate(p) for p in participants]


@router.get("/{participant_id}", response_model=ParticipantRead)
async def get_participant(
    participant_id: int,
    services: Services = Depends(get_services),
) -> ParticipantRead:
    try:
        participant = await services.participants.get_participant(participant_id)
    except DomainError as e:
        raise http_error(e, not_found_status=status.HTTP_404_NOT_FOUND) from e
    return ParticipantRead.model_validate(participant)


@router.put("/{participant_id}", response_model=ParticipantRead)
async def update_participant(
    participant_id: int,
    updates: ParticipantUpdate,
    services: Services = Depends(get_services),
) -> ParticipantRead:
    try:
        participant = await services.participants.update_participant(
            participant_id, updates.model_dump(exclude_unset=True)
        )
    except DomainError as e:
        raise http_error(e) from e
    return ParticipantRead.model_validate(participant)


@router.delete("/{participant_id}", response_model=MessageRead)
async def delete_participant(
    participant_id: int,
    services: Services = Depends(get_services),
) -> dict:
    """Remove the participant and all of their enrollments."""
    try:
        return await services.participants.delete_participant(participant_id)
    except DomainError as e:
        raise http_error(e) from e


@router.get("/{participant_id}/eventos", response_model=List[EventEnrollmentRead])
async def list_participant_events(
    participant_id: int,
    services: Services = Depends(get_services),
) -> List[dict]:
    """Listar os eventos em que o participante está inscrito."""
    return await services.participants.list_events(participant_id)
