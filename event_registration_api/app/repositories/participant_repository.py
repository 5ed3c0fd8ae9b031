"""Data access for the ``participantes`` table."""

import sqlite3
from typing import Any, Optional

from ..core.db import ConnectionFactory, get_cursor
from ..core.errors import ConflictError
from ..models import Participant


class ParticipantRepository:
    """Persistence operations for participants."""

    def __init__(self, connect: ConnectionFactory) -> None:
        self._connect = connect

    def create(self, participant: Participant) -> Participant:
        try:
            with get_cursor(self._connect) as cursor:
                cursor.execute(
                    "INSERT INTO participantes (nome, email) VALUES (?, ?)",
                    (participant.nome, participant.email),
                )
                participant_id = cursor.lastrowid
        except sqlite3.IntegrityError as exc:
            # Unique index on email; reached only when a concurrent
            # request inserted the same address after our lookup.
            raise ConflictError("Email já cadastrado") from exc
        return Participant(id=participant_id, nome=participant.nome, email=participant.email)

    def find_all(self) -> list[Participant]:
        """Return all participants ordered by name."""
        with get_cursor(self._connect) as cursor:
            rows = cursor.execute(
                "SELECT id, nome, email FROM participantes ORDER BY nome ASC, id ASC"
            ).fetchall()
        return [Participant.from_row(row) for row in rows]

    def find_by_id(self, participant_id: int) -> Optional[Participant]:
        with get_cursor(self._connect) as cursor:
            row = cursor.execute(
                "SELECT id, nome, email FROM participantes WHERE id = ?",
                (participant_id,),
            ).fetchone()
        return Participant.from_row(row) if row else None

    def find_by_email(self, email: str) -> Optional[Participant]:
        with get_cursor(self._connect) as cursor:
            row = cursor.execute(
                "SELECT id, nome, email FROM participantes WHERE email = ?",
                (email,),
            ).fetchone()
        return Participant.from_row(row) if row else None

    def update(self, participant: Participant) -> Optional[Participant]:
        try:
            with get_cursor(self._connect) as cursor:
                cursor.execute(
                    "UPDATE participantes SET nome = ?, email = ? WHERE id = ?",
                    (participant.nome, participant.email, participant.id),
                )
                updated = cursor.rowcount
        except sqlite3.IntegrityError as exc:
            raise ConflictError("Email já cadastrado para outro participante") from exc
        return participant if updated else None

    def delete(self, participant_id: int) -> bool:
        try:
            with get_cursor(self._connect) as cursor:
                cursor.execute("DELETE FROM participantes WHERE id = ?", (participant_id,))
                return cursor.rowcount > 0
        except sqlite3.IntegrityError as exc:
            raise ConflictError("Participante possui inscrições e não pode ser removido") from exc

    def find_events(self, participant_id: int) -> list[dict[str, Any]]:
        """Events of a participant, each annotated with its enrollment."""
        with get_cursor(self._connect) as cursor:
            rows = cursor.execute(
                """
                SELECT ep.id AS inscricao_id, ep.data_inscricao,
                       e.id, e.nome, e.data, e.local, e.numero_vagas, e.descricao
                FROM evento_participante ep
                JOIN eventos e ON e.id = ep.evento_id
                WHERE ep.participante_id = ?
                ORDER BY e.data ASC, e.id ASC
                """,
                (participant_id,),
            ).fetchall()
        return [dict(row) for row in rows]
