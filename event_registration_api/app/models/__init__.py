"""
Domain models.

Plain immutable dataclasses that enforce their invariants at
construction time.  They know nothing about SQL or HTTP; repositories
map them to rows and schemas map them to JSON.
"""

from .enrollment import Admission, Enrollment
from .event import CapacityStatus, Event
from .participant import Participant

__all__ = ["Event", "CapacityStatus", "Participant", "Enrollment", "Admission"]
