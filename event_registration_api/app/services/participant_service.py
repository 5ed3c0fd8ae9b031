"""
Business logic for participants.

E‑mail addresses are unique.  The service looks the address up before
writing and reports a clash as ``ConflictError``; the unique index in
the store catches the rare case where two requests race past the
lookup.
"""

import logging
from typing import Any, List, Mapping

from fastapi.concurrency import run_in_threadpool

from ..core.errors import ConflictError, NotFoundError
from ..models import Participant
from ..repositories import EnrollmentRepository, ParticipantRepository

logger = logging.getLogger(__name__)


class ParticipantService:
    """Serviço de participantes."""

    def __init__(self, participants: ParticipantRepository, enrollments: EnrollmentRepository) -> None:
        self._participants = participants
        self._enrollments = enrollments

    async def create_participant(self, fields: Mapping[str, Any]) -> Participant:
        participant = Participant.create(fields)
        if await run_in_threadpool(self._participants.find_by_email, participant.email) is not None:
            logger.info("Rejected participant with duplicate email %s", participant.email)
            raise ConflictError("Email já cadastrado")
        created = await run_in_threadpool(self._participants.create, participant)
        logger.info("Participant %s created (%s)", created.id, created.email)
        return created

    async def list_participants(self) -> List[Participant]:
        return await run_in_threadpool(self._participants.find_all)

    async def get_participant(self, participant_id: int) -> Participant:
        participant = await run_in_threadpool(self._participants.find_by_id, participant_id)
        if participant is None:
            raise NotFoundError("Participante não encontrado")
        return participant

    async def update_participant(self, participant_id: int, changes: Mapping[str, Any]) -> Participant:
        """Apply a partial update.

        When ``email`` is among the changes it must not belong to another
        participant; keeping one's own address is allowed.
        """
        current = await self.get_participant(participant_id)
        if "email" in changes:
            owner = await run_in_threadpool(self._participants.find_by_email, changes["email"])
            if owner is not None and owner.id != participant_id:
                raise ConflictError("Email já cadastrado para outro participante")
        updated = await run_in_threadpool(self._participants.update, current.with_changes(changes))
        if updated is None:
            raise NotFoundError("Participante não encontrado")
        logger.info("Participant %s updated: %s", participant_id, sorted(changes))
        return updated

    async def delete_participant(self, participant_id: int) -> dict:
        await self.get_participant(participant_id)
        removed = await run_in_threadpool(self._enrollments.delete_by_participant, participant_id)
        if not await run_in_threadpool(self._participants.delete, participant_id):
            raise NotFoundError("Participante não encontrado")
        logger.info("Participant %s deleted together with %s enrollment(s)", participant_id, removed)
        return {"mensagem": "Participante removido com sucesso"}

    async def list_events(self, participant_id: int) -> List[dict]:
        """Events the participant is enrolled in, with enrollment id and timestamp."""
        return await run_in_threadpool(self._participants.find_events, participant_id)
