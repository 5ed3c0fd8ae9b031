"""Domain representation of a participant."""

import re
from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping, Optional

from ..core.errors import ValidationError

FIELDS = ("nome", "email")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: Any) -> bool:
    return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None


@dataclass(frozen=True)
class Participant:
    """A person that can enroll in events.  Validated on construction."""

    id: Optional[int]
    nome: str
    email: str

    def __post_init__(self) -> None:
        if not isinstance(self.nome, str) or not self.nome.strip():
            raise ValidationError("Nome do participante é obrigatório")
        if not self.email:
            raise ValidationError("Email válido é obrigatório")
        if not is_valid_email(self.email):
            raise ValidationError("Email inválido")

    @classmethod
    def create(cls, fields: Mapping[str, Any]) -> "Participant":
        return cls(id=None, nome=fields.get("nome"), email=fields.get("email"))

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Participant":
        return cls(id=row["id"], nome=row["nome"], email=row["email"])

    def with_changes(self, changes: Mapping[str, Any]) -> "Participant":
        return replace(self, **{k: v for k, v in changes.items() if k in FIELDS})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
