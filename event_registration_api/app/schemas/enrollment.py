"""
Pydantic models for enrollments (inscrições).

``EnrollmentListItem`` nests the event and participant under the keys
``eventos`` and ``participantes``, the shape the web frontend reads.
"""

from pydantic import BaseModel, Field

from .event import EventRead
from .participant import ParticipantRead


class EnrollmentCreate(BaseModel):
    evento_id: int = Field(..., examples=[1])
    participante_id: int = Field(..., examples=[1])


class EnrollmentRead(BaseModel):
    id: int
    evento_id: int
    participante_id: int
    data_inscricao: str

    model_config = {
        "from_attributes": True,
    }


class AdmissionRead(BaseModel):
    """Response body of a successful enrollment."""

    mensagem: str
    inscricao: EnrollmentRead
    evento: EventRead
    participante: ParticipantRead


class EventSummary(BaseModel):
    id: int
    nome: str
    data: str
    local: str


class EnrollmentListItem(BaseModel):
    id: int
    data_inscricao: str
    eventos: EventSummary
    participantes: ParticipantRead


class MessageRead(BaseModel):
    mensagem: str
