"""
Business logic for enrollments (inscrições).

``EnrollmentService.enroll`` implements the admission procedure:

1. the event must exist;
2. the participant must exist;
3. the pair must not be enrolled already;
4. the event must have a free place;
5. the enrollment is written with the current timestamp.

Steps 3 and 4 are lookups that give precise error messages.  They are
not what keeps the rules safe under concurrent requests: the insert in
step 5 re‑checks capacity inside the same SQL statement and the store
rejects a second row for the same pair, so a request that loses a race
gets the same ``ConflictError`` instead of over‑filling the event.
"""

import logging
from typing import List

from fastapi.concurrency import run_in_threadpool

from ..core.errors import ConflictError, NotFoundError
from ..models import Admission, Enrollment
from ..repositories import EnrollmentRepository
from .event_service import EventService
from .participant_service import ParticipantService

logger = logging.getLogger(__name__)

ALREADY_ENROLLED = "Participante já inscrito neste evento"
NO_AVAILABILITY = "Não há vagas disponíveis para este evento"


class EnrollmentService:
    """Serviço de inscrições; compõe os serviços de eventos e participantes."""

    def __init__(
        self,
        enrollments: EnrollmentRepository,
        events: EventService,
        participants: ParticipantService,
    ) -> None:
        self._enrollments = enrollments
        self._events = events
        self._participants = participants

    async def enroll(self, event_id: int, participant_id: int) -> Admission:
        event = await self._events.get_event(event_id)
        participant = await self._participants.get_participant(participant_id)

        if await run_in_threadpool(self._enrollments.find_by_pair, event_id, participant_id) is not None:
            logger.info("Participant %s already enrolled in event %s", participant_id, event_id)
            raise ConflictError(ALREADY_ENROLLED)

        status = await self._events.capacity_status(event_id)
        if not status.tem_vagas:
            logger.info("Event %s is full (%s/%s)", event_id, status.vagas_ocupadas, status.total_vagas)
            raise ConflictError(NO_AVAILABILITY)

        enrollment = await run_in_threadpool(self._enrollments.create, Enrollment.new(event_id, participant_id))
        if enrollment is None:
            # Filled up between the capacity check and the insert.
            logger.warning("Event %s filled up during enrollment of participant %s", event_id, participant_id)
            raise ConflictError(NO_AVAILABILITY)

        logger.info("Participant %s enrolled in event %s (inscrição %s)", participant_id, event_id, enrollment.id)
        return Admission(enrollment=enrollment, event=event, participant=participant)

    async def cancel(self, enrollment_id: int) -> dict:
        if not await run_in_threadpool(self._enrollments.delete_by_id, enrollment_id):
            raise NotFoundError("Inscrição não encontrada")
        logger.info("Enrollment %s cancelled", enrollment_id)
        return {"mensagem": "Inscrição cancelada com sucesso"}

    async def cancel_by_pair(self, event_id: int, participant_id: int) -> dict:
        if not await run_in_threadpool(self._enrollments.delete_by_pair, event_id, participant_id):
            raise NotFoundError("Inscrição não encontrada")
        logger.info("Enrollment of participant %s in event %s cancelled", participant_id, event_id)
        return {"mensagem": "Inscrição cancelada com sucesso"}

    async def list_enrollments(self) -> List[dict]:
        """All enrollments with event and participant data, newest first."""
        return await run_in_threadpool(self._enrollments.find_all)
