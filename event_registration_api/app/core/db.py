"""
SQLite database integration and simple migration system.

This module provides functions for opening connections
(``get_connection``), running statements with uniform error
translation (``get_cursor``) and applying migrations on application
start (``init_db``).  Every store call opens its own short‑lived
connection; nothing is cached between requests.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator

from .errors import StoreError, StoreUnavailableError

logger = logging.getLogger(__name__)

# Zero‑argument callable returning a fresh connection.  Repositories are
# constructed with one of these so tests can point them at another file.
ConnectionFactory = Callable[[], sqlite3.Connection]


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS eventos (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            nome TEXT NOT NULL,
            data TEXT NOT NULL,
            local TEXT NOT NULL,
            numero_vagas INTEGER NOT NULL CHECK (numero_vagas >= 0),
            descricao TEXT
        );

        CREATE TABLE IF NOT EXISTS participantes (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            nome TEXT NOT NULL,
            email TEXT NOT NULL
        );

        -- No ON DELETE CASCADE: enrollments are removed by the services
        -- before their parent row, and the foreign keys reject the
        -- parent delete if any are left behind.
        CREATE TABLE IF NOT EXISTS evento_participante (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            evento_id INTEGER NOT NULL,
            participante_id INTEGER NOT NULL,
            data_inscricao TEXT NOT NULL,
            FOREIGN KEY(evento_id) REFERENCES eventos(id),
            FOREIGN KEY(participante_id) REFERENCES participantes(id)
        );
        """,
    ),
    # Migration 2: store-level guards for the uniqueness rules
    (
        2,
        """
        CREATE UNIQUE INDEX IF NOT EXISTS uq_participantes_email ON participantes(email);
        CREATE UNIQUE INDEX IF NOT EXISTS uq_evento_participante_par
            ON evento_participante(evento_id, participante_id);
        CREATE INDEX IF NOT EXISTS idx_evento_participante_participante
            ON evento_participante(participante_id);
        CREATE INDEX IF NOT EXISTS idx_eventos_data ON eventos(data);
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are used as given.  Relative paths
    are resolved against the project root.
    """
    if database_url == ":memory:" or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parents[3]
    return str((base_dir / database_url).resolve())


def get_connection(database_url: str, timeout: float = 5.0) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be read by
    name.  ``timeout`` is how long a statement waits on a locked
    database before failing.  Foreign keys are enabled per connection,
    since SQLite leaves them off by default.
    """
    try:
        conn = sqlite3.connect(get_database_path(database_url), timeout=timeout)
    except sqlite3.Error as exc:
        raise StoreUnavailableError(f"Banco de dados indisponível: {exc}") from exc
    try:
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error as exc:
        conn.close()
        raise StoreUnavailableError(f"Banco de dados indisponível: {exc}") from exc
    return conn


def connection_factory(database_url: str, timeout: float = 5.0) -> ConnectionFactory:
    """Bind ``get_connection`` to a database so it can be injected."""

    def connect() -> sqlite3.Connection:
        return get_connection(database_url, timeout)

    return connect


@contextmanager
def get_cursor(connect: ConnectionFactory) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit on success and close the connection on exit.

    ``sqlite3.IntegrityError`` is re‑raised untouched so repositories
    can turn constraint violations into business errors.  A locked or
    unreachable database becomes ``StoreUnavailableError``; any other
    driver error becomes ``StoreError``.
    """
    conn = connect()
    try:
        yield conn.cursor()
        conn.commit()
    except sqlite3.IntegrityError:
        conn.rollback()
        raise
    except sqlite3.OperationalError as exc:
        conn.rollback()
        message = str(exc)
        if "locked" in message or "busy" in message or "unable to open" in message:
            logger.warning("Store unavailable: %s", message)
            raise StoreUnavailableError(f"Banco de dados indisponível: {message}") from exc
        raise StoreError(f"Erro no banco de dados: {message}") from exc
    except sqlite3.Error as exc:
        conn.rollback()
        raise StoreError(f"Erro no banco de dados: {exc}") from exc
    finally:
        conn.close()


def init_db(connect: ConnectionFactory) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS`` in order.
    """
    with get_cursor(connect) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
