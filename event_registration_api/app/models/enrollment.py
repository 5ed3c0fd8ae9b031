"""Enrollment: the join record between an event and a participant."""

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from .event import Event
from .participant import Participant


def utc_now_iso() -> str:
    """Current UTC time as ISO‑8601 text; sorts chronologically as a string."""
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Enrollment:
    id: Optional[int]
    evento_id: int
    participante_id: int
    data_inscricao: str

    @classmethod
    def new(cls, evento_id: int, participante_id: int) -> "Enrollment":
        return cls(
            id=None,
            evento_id=evento_id,
            participante_id=participante_id,
            data_inscricao=utc_now_iso(),
        )

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Enrollment":
        return cls(
            id=row["id"],
            evento_id=row["evento_id"],
            participante_id=row["participante_id"],
            data_inscricao=row["data_inscricao"],
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Admission:
    """Outcome of a successful enrollment: the new row plus both parents."""

    enrollment: Enrollment
    event: Event
    participant: Participant
