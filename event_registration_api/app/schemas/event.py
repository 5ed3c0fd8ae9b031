"""
Pydantic models for event data.

Request models leave every field optional on purpose: presence and
format rules live in ``models.Event`` so that a missing field produces
the same message whether the event is being created or updated.
``EventRead`` is built straight from the domain object.
"""

from typing import Optional

from pydantic import BaseModel, Field


class EventBase(BaseModel):
    nome: Optional[str] = Field(None, examples=["Semana de Tecnologia"])
    data: Optional[str] = Field(None, examples=["2025-01-01"], description="Data no formato AAAA-MM-DD")
    local: Optional[str] = Field(None, examples=["Auditório Central"])
    numero_vagas: Optional[int] = Field(None, examples=[50])
    descricao: Optional[str] = Field(None, examples=["Palestras e oficinas"])


class EventCreate(EventBase):
    """Schema for creating an event."""


class EventUpdate(EventBase):
    """Schema for updating an event.

    Only fields present in the request body are applied; use
    ``model_dump(exclude_unset=True)`` to obtain them.
    """


class EventRead(BaseModel):
    """Schema for reading an event from the API."""

    id: int
    nome: str
    data: str
    local: str
    numero_vagas: int
    descricao: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class EventEnrollmentRead(EventRead):
    """An event as seen from one participant's enrollments."""

    inscricao_id: int
    data_inscricao: str


class CapacityStatusRead(BaseModel):
    total_vagas: int
    vagas_ocupadas: int
    vagas_disponiveis: int
    tem_vagas: bool

    model_config = {
        "from_attributes": True,
    }
