"""
Pydantic models for participant data.

As with events, request fields are optional and validated by the
domain model, which also owns the e‑mail format rule.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ParticipantBase(BaseModel):
    nome: Optional[str] = Field(None, examples=["Maria Silva"])
    email: Optional[str] = Field(None, examples=["maria@example.com"])


class ParticipantCreate(ParticipantBase):
    """Schema for registering a participant."""


class ParticipantUpdate(ParticipantBase):
    """Schema for a partial update; unset fields are left unchanged."""


class ParticipantRead(BaseModel):
    id: int
    nome: str
    email: str

    model_config = {
        "from_attributes": True,
    }


class ParticipantEnrollmentRead(ParticipantRead):
    """A participant as listed under an event, with the enrollment data."""

    inscricao_id: int
    data_inscricao: str
