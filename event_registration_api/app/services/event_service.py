"""
Business logic for events.

``EventService`` validates event data through the ``Event`` model,
delegates persistence to ``EventRepository`` and answers capacity
questions for the enrollment service.  Deleting an event removes its
enrollments first; the two deletes are separate store calls, so a
failure in between leaves the event without enrollments but still
present.
"""

import logging
from typing import Any, List, Mapping

from fastapi.concurrency import run_in_threadpool

from ..core.errors import NotFoundError
from ..models import CapacityStatus, Event
from ..repositories import EnrollmentRepository, EventRepository

logger = logging.getLogger(__name__)


class EventService:
    """Serviço de eventos: criação, consulta, alteração e remoção."""

    def __init__(self, events: EventRepository, enrollments: EnrollmentRepository) -> None:
        self._events = events
        self._enrollments = enrollments

    async def create_event(self, fields: Mapping[str, Any]) -> Event:
        """Validate and store a new event.

        No capacity check happens here; capacity only limits future
        enrollments.
        """
        event = Event.create(fields)
        created = await run_in_threadpool(self._events.create, event)
        logger.info("Event %s created: '%s' (%s vagas)", created.id, created.nome, created.numero_vagas)
        return created

    async def list_events(self) -> List[Event]:
        return await run_in_threadpool(self._events.find_all)

    async def get_event(self, event_id: int) -> Event:
        event = await run_in_threadpool(self._events.find_by_id, event_id)
        if event is None:
            raise NotFoundError("Evento não encontrado")
        return event

    async def update_event(self, event_id: int, changes: Mapping[str, Any]) -> Event:
        """Apply a partial update.

        Only the keys present in ``changes`` are replaced; the merged
        event is validated as a whole before anything is written.
        """
        current = await self.get_event(event_id)
        updated = await run_in_threadpool(self._events.update, current.with_changes(changes))
        if updated is None:
            raise NotFoundError("Evento não encontrado")
        logger.info("Event %s updated: %s", event_id, sorted(changes))
        return updated

    async def delete_event(self, event_id: int) -> dict:
        await self.get_event(event_id)
        removed = await run_in_threadpool(self._enrollments.delete_by_event, event_id)
        if not await run_in_threadpool(self._events.delete, event_id):
            raise NotFoundError("Evento não encontrado")
        logger.info("Event %s deleted together with %s enrollment(s)", event_id, removed)
        return {"mensagem": "Evento removido com sucesso"}

    async def list_participants(self, event_id: int) -> List[dict]:
        """Participants enrolled in the event, with enrollment id and timestamp."""
        return await run_in_threadpool(self._events.find_participants, event_id)

    async def capacity_status(self, event_id: int) -> CapacityStatus:
        event = await self.get_event(event_id)
        occupied = await run_in_threadpool(self._events.count_enrollments, event_id)
        return CapacityStatus(total_vagas=event.numero_vagas, vagas_ocupadas=occupied)
