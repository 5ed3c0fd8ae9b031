"""
Domain representation of an event.

``Event`` is immutable and validates itself on construction, so an
invalid event can never exist in memory or reach the store.  Partial
updates go through :meth:`Event.with_changes`, which builds a new
instance from the merged fields and therefore re‑runs the whole
validation.
"""

from dataclasses import asdict, dataclass, replace
from datetime import date, datetime, timezone
from typing import Any, Mapping, Optional

from ..core.errors import ValidationError

FIELDS = ("nome", "data", "local", "numero_vagas", "descricao")


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _normalize_date(value: str) -> Optional[str]:
    """Return the canonical ISO form of a date or date-time, or ``None``.

    Dates become ``YYYY-MM-DD``; date-times become naive UTC
    ``YYYY-MM-DDTHH:MM:SS[.ffffff]``.  Stored values then sort by text in
    chronological order whatever ISO variant was submitted.
    """
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        pass
    try:
        moment = datetime.fromisoformat(value)
    except ValueError:
        return None
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment.isoformat()


@dataclass(frozen=True)
class Event:
    """An event with a fixed number of places."""

    id: Optional[int]
    nome: str
    data: str
    local: str
    numero_vagas: int
    descricao: Optional[str] = None

    def __post_init__(self) -> None:
        if _is_blank(self.nome):
            raise ValidationError("Nome do evento é obrigatório")
        if self.data is None or self.data == "":
            raise ValidationError("Data do evento é obrigatória")
        normalized = _normalize_date(self.data) if isinstance(self.data, str) else None
        if normalized is None:
            raise ValidationError("Data inválida")
        object.__setattr__(self, "data", normalized)
        if _is_blank(self.local):
            raise ValidationError("Local do evento é obrigatório")
        if self.numero_vagas is None:
            raise ValidationError("Número de vagas é obrigatório")
        if isinstance(self.numero_vagas, bool) or not isinstance(self.numero_vagas, int):
            raise ValidationError("Número de vagas deve ser um número inteiro")
        if self.numero_vagas < 0:
            raise ValidationError("Número de vagas não pode ser negativo")
        if self.descricao is not None and not isinstance(self.descricao, str):
            raise ValidationError("Descrição inválida")

    @classmethod
    def create(cls, fields: Mapping[str, Any]) -> "Event":
        """Build a new, not yet persisted event from request fields."""
        return cls(id=None, **{name: fields.get(name) for name in FIELDS})

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Event":
        return cls(
            id=row["id"],
            nome=row["nome"],
            data=row["data"],
            local=row["local"],
            numero_vagas=row["numero_vagas"],
            descricao=row["descricao"],
        )

    def with_changes(self, changes: Mapping[str, Any]) -> "Event":
        """Return a copy with the given fields replaced, validated as a whole."""
        return replace(self, **{k: v for k, v in changes.items() if k in FIELDS})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CapacityStatus:
    """Places of an event: total, taken and still free."""

    total_vagas: int
    vagas_ocupadas: int

    @property
    def vagas_disponiveis(self) -> int:
        return self.total_vagas - self.vagas_ocupadas

    @property
    def tem_vagas(self) -> bool:
        return self.vagas_ocupadas < self.total_vagas

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_vagas": self.total_vagas,
            "vagas_ocupadas": self.vagas_ocupadas,
            "vagas_disponiveis": self.vagas_disponiveis,
            "tem_vagas": self.tem_vagas,
        }
