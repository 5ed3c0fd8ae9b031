"""
Repository layer.

Each repository wraps one table (or join) and converts rows to domain
models.  Repositories receive a connection factory in their
constructor, so they can be pointed at any SQLite file.
"""

from .enrollment_repository import EnrollmentRepository
from .event_repository import EventRepository
from .participant_repository import ParticipantRepository

__all__ = ["EventRepository", "ParticipantRepository", "EnrollmentRepository"]
