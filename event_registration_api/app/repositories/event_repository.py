"""
Data access for the ``eventos`` table.

The repository only translates between ``Event`` objects and rows; it
holds no business rules.  Each method opens its own connection through
the injected factory.
"""

import sqlite3
from typing import Any, Optional

from ..core.db import ConnectionFactory, get_cursor
from ..core.errors import ConflictError
from ..models import Event

_COLUMNS = "id, nome, data, local, numero_vagas, descricao"


class EventRepository:
    """Persistence operations for events."""

    def __init__(self, connect: ConnectionFactory) -> None:
        self._connect = connect

    def create(self, event: Event) -> Event:
        with get_cursor(self._connect) as cursor:
            cursor.execute(
                """
                INSERT INTO eventos (nome, data, local, numero_vagas, descricao)
                VALUES (?, ?, ?, ?, ?)
                """,
                (event.nome, event.data, event.local, event.numero_vagas, event.descricao),
            )
            event_id = cursor.lastrowid
        return Event.from_row({**event.to_dict(), "id": event_id})

    def find_all(self) -> list[Event]:
        """Return all events ordered by date ascending."""
        with get_cursor(self._connect) as cursor:
            rows = cursor.execute(
                f"SELECT {_COLUMNS} FROM eventos ORDER BY data ASC, id ASC"
            ).fetchall()
        return [Event.from_row(row) for row in rows]

    def find_by_id(self, event_id: int) -> Optional[Event]:
        with get_cursor(self._connect) as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM eventos WHERE id = ?", (event_id,)
            ).fetchone()
        return Event.from_row(row) if row else None

    def update(self, event: Event) -> Optional[Event]:
        """Overwrite every column of the event.  Returns ``None`` if the row is gone."""
        with get_cursor(self._connect) as cursor:
            cursor.execute(
                """
                UPDATE eventos
                SET nome = ?, data = ?, local = ?, numero_vagas = ?, descricao = ?
                WHERE id = ?
                """,
                (event.nome, event.data, event.local, event.numero_vagas, event.descricao, event.id),
            )
            updated = cursor.rowcount
        return event if updated else None

    def delete(self, event_id: int) -> bool:
        try:
            with get_cursor(self._connect) as cursor:
                cursor.execute("DELETE FROM eventos WHERE id = ?", (event_id,))
                return cursor.rowcount > 0
        except sqlite3.IntegrityError as exc:
            # An enrollment was added between the cascade and this delete.
            raise ConflictError("Evento possui inscrições e não pode ser removido") from exc

    def count_enrollments(self, event_id: int) -> int:
        with get_cursor(self._connect) as cursor:
            row = cursor.execute(
                "SELECT COUNT(*) AS total FROM evento_participante WHERE evento_id = ?",
                (event_id,),
            ).fetchone()
        return row["total"] if row else 0

    def find_participants(self, event_id: int) -> list[dict[str, Any]]:
        """Participants of an event, each annotated with its enrollment."""
        with get_cursor(self._connect) as cursor:
            rows = cursor.execute(
                """
                SELECT ep.id AS inscricao_id, ep.data_inscricao, p.id, p.nome, p.email
                FROM evento_participante ep
                JOIN participantes p ON p.id = ep.participante_id
                WHERE ep.evento_id = ?
                ORDER BY ep.data_inscricao ASC, ep.id ASC
                """,
                (event_id,),
            ).fetchall()
        return [dict(row) for row in rows]
