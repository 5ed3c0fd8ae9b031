"""
Service layer.

Each service encapsulates the business rules of one domain and talks
to the store only through repositories passed to its constructor.
``build_services`` wires the whole graph for a given connection
factory; the application calls it once at start‑up and tests call it
with a temporary database.

Repositories are synchronous.  Services reach them through
``run_in_threadpool``, so a store call waiting on a locked database
occupies a worker thread and not the event loop.
"""

from dataclasses import dataclass

from ..core.db import ConnectionFactory
from ..repositories import EnrollmentRepository, EventRepository, ParticipantRepository
from .enrollment_service import EnrollmentService
from .event_service import EventService
from .participant_service import ParticipantService


@dataclass(frozen=True)
class Services:
    events: EventService
    participants: ParticipantService
    enrollments: EnrollmentService


def build_services(connect: ConnectionFactory) -> Services:
    enrollment_repository = EnrollmentRepository(connect)
    events = EventService(EventRepository(connect), enrollment_repository)
    participants = ParticipantService(ParticipantRepository(connect), enrollment_repository)
    enrollments = EnrollmentService(enrollment_repository, events, participants)
    return Services(events=events, participants=participants, enrollments=enrollments)


__all__ = [
    "EventService",
    "ParticipantService",
    "EnrollmentService",
    "Services",
    "build_services",
]
