"""
Data access for the ``evento_participante`` join table (inscrições).

``create`` is a conditional insert: the row is only written while the
event still has room, evaluated inside a single statement.  Together
with the unique index on (evento_id, participante_id) this keeps the
capacity and one‑enrollment‑per‑pair rules intact even when two
requests pass the service‑level checks at the same time.
"""

import sqlite3
from typing import Any, Optional

from ..core.db import ConnectionFactory, get_cursor
from ..core.errors import ConflictError, NotFoundError
from ..models import Enrollment


class EnrollmentRepository:
    """Persistence operations for enrollments."""

    def __init__(self, connect: ConnectionFactory) -> None:
        self._connect = connect

    def create(self, enrollment: Enrollment) -> Optional[Enrollment]:
        """Insert the enrollment if the event is not full.

        Returns the stored enrollment, or ``None`` when the capacity
        guard rejected the insert.
        """
        try:
            with get_cursor(self._connect) as cursor:
                cursor.execute(
                    """
                    INSERT INTO evento_participante (evento_id, participante_id, data_inscricao)
                    SELECT ?, ?, ?
                    WHERE (SELECT COUNT(*) FROM evento_participante WHERE evento_id = ?)
                          < (SELECT numero_vagas FROM eventos WHERE id = ?)
                    """,
                    (
                        enrollment.evento_id,
                        enrollment.participante_id,
                        enrollment.data_inscricao,
                        enrollment.evento_id,
                        enrollment.evento_id,
                    ),
                )
                if cursor.rowcount == 0:
                    return None
                enrollment_id = cursor.lastrowid
        except sqlite3.IntegrityError as exc:
            if "UNIQUE" in str(exc):
                raise ConflictError("Participante já inscrito neste evento") from exc
            raise NotFoundError("Evento ou participante não encontrado") from exc
        return Enrollment(
            id=enrollment_id,
            evento_id=enrollment.evento_id,
            participante_id=enrollment.participante_id,
            data_inscricao=enrollment.data_inscricao,
        )

    def find_by_pair(self, event_id: int, participant_id: int) -> Optional[Enrollment]:
        with get_cursor(self._connect) as cursor:
            row = cursor.execute(
                """
                SELECT id, evento_id, participante_id, data_inscricao
                FROM evento_participante
                WHERE evento_id = ? AND participante_id = ?
                """,
                (event_id, participant_id),
            ).fetchone()
        return Enrollment.from_row(row) if row else None

    def delete_by_id(self, enrollment_id: int) -> bool:
        with get_cursor(self._connect) as cursor:
            cursor.execute("DELETE FROM evento_participante WHERE id = ?", (enrollment_id,))
            return cursor.rowcount > 0

    def delete_by_pair(self, event_id: int, participant_id: int) -> bool:
        with get_cursor(self._connect) as cursor:
            cursor.execute(
                "DELETE FROM evento_participante WHERE evento_id = ? AND participante_id = ?",
                (event_id, participant_id),
            )
            return cursor.rowcount > 0

    def delete_by_event(self, event_id: int) -> int:
        with get_cursor(self._connect) as cursor:
            cursor.execute("DELETE FROM evento_participante WHERE evento_id = ?", (event_id,))
            return cursor.rowcount

    def delete_by_participant(self, participant_id: int) -> int:
        with get_cursor(self._connect) as cursor:
            cursor.execute(
                "DELETE FROM evento_participante WHERE participante_id = ?", (participant_id,)
            )
            return cursor.rowcount

    def find_all(self) -> list[dict[str, Any]]:
        """Every enrollment with its event and participant, newest first."""
        with get_cursor(self._connect) as cursor:
            rows = cursor.execute(
                """
                SELECT ep.id, ep.data_inscricao,
                       e.id AS evento_id, e.nome AS evento_nome,
                       e.data AS evento_data, e.local AS evento_local,
                       p.id AS participante_id, p.nome AS participante_nome,
                       p.email AS participante_email
                FROM evento_participante ep
                JOIN eventos e ON e.id = ep.evento_id
                JOIN participantes p ON p.id = ep.participante_id
                ORDER BY ep.data_inscricao DESC, ep.id DESC
                """
            ).fetchall()
        # Nested keys follow the table names, as existing clients expect.
        return [
            {
                "id": row["id"],
                "data_inscricao": row["data_inscricao"],
                "eventos": {
                    "id": row["evento_id"],
                    "nome": row["evento_nome"],
                    "data": row["evento_data"],
                    "local": row["evento_local"],
                },
                "participantes": {
                    "id": row["participante_id"],
                    "nome": row["participante_nome"],
                    "email": row["participante_email"],
                },
            }
            for row in rows
        ]
