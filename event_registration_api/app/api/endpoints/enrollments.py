"""
Enrollment endpoints (``/api/inscricoes``).

``POST`` runs the admission procedure of ``EnrollmentService.enroll``;
any business failure (unknown event or participant, duplicate
enrollment, full event) answers 400 with the reason in ``erro``.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from event_registration_api.app.api.deps import get_services, http_error
from event_registration_api.app.core.errors import DomainError
from event_registration_api.app.schemas.enrollment import (
    AdmissionRead,
    EnrollmentCreate,
    EnrollmentListItem,
    EnrollmentRead,
    MessageRead,
)
from event_registration_api.app.schemas.event import EventRead
from event_registration_api.app.schemas.participant import ParticipantRead
from event_registration_api.app.services import Services


router = APIRouter()


@router.post("", response_model=AdmissionRead, status_code=status.HTTP_201_CREATED)
async def enroll(
    enrollment: EnrollmentCreate,
    services: Services = Depends(get_services),
) -> AdmissionRead:
    """Inscrever participante em evento."""
    try:
        admission = await services.enrollments.enroll(enrollment.evento_id, enrollment.participante_id)
    except DomainError as e:
        raise http_error(e) from e
    return AdmissionRead(
        mensagem="Inscrição realizada com sucesso",
        inscricao=EnrollmentRead.model_validate(admission.enrollment),
        evento=EventRead.model_validate(admission.event),
        participante=ParticipantRead.model_validate(admission.participant),
    )


@router.delete("/{enrollment_id}", response_model=MessageRead)
async def cancel_enrollment(
    enrollment_id: int,
    services: Services = Depends(get_services),
) -> dict:
    try:
        return await services.enrollments.cancel(enrollment_id)
    except DomainError as e:
        raise http_error(e) from e


@router.delete(
    "/evento/{event_id}/participante/{participant_id}",
    response_model=MessageRead,
)
async def cancel_enrollment_by_pair(
    event_id: int,
    participant_id: int,
    services: Services = Depends(get_services),
) -> dict:
    """Cancelar inscrição a partir do par evento/participante."""
    try:
        return await services.enrollments.cancel_by_pair(event_id, participant_id)
    except DomainError as e:
        raise http_error(e) from e


@router.get("", response_model=List[EnrollmentListItem])
async def list_enrollments(services: Services = Depends(get_services)) -> List[dict]:
    """All enrollments, most recent first."""
    return await services.enrollments.list_enrollments()
