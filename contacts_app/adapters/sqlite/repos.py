import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

from contacts_app.domain.entities import Contact
from contacts_app.ports.repo import RepositoryError


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def _row_to_contact(row: dict[str, Any]) -> Contact:
    return Contact(
        id=row["id"],
        first=row["first"],
        last=row["last"],
        avatar=row["avatar"],
        twitter=row["twitter"],
        notes=row["notes"],
        favorite=bool(row["favorite"]),
        created_at=datetime.fromisoformat(row["created_at"]),
    )


class SQLiteContactRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        conn = self._get_conn()
        try:
            yield conn
        except sqlite3.Error as e:
            raise RepositoryError(f"contacts store error: {e}") from e
        finally:
            conn.close()

    def save(self, contact: Contact) -> Contact:
        with self._connection() as conn:
            conn.execute(
                """
                INSERT INTO contacts (
                    id, first, last, avatar, twitter, notes, favorite, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    first=excluded.first,
                    last=excluded.last,
                    avatar=excluded.avatar,
                    twitter=excluded.twitter,
                    notes=excluded.notes,
                    favorite=excluded.favorite
            """,
                (
                    contact.id,
                    contact.first,
                    contact.last,
                    contact.avatar,
                    contact.twitter,
                    contact.notes,
                    1 if contact.favorite else 0,
                    contact.created_at.isoformat(),
                ),
            )
            conn.commit()
            return contact

    def get_all(self) -> list[Contact]:
        with self._connection() as conn:
            rows = conn.execute("SELECT * FROM contacts ORDER BY created_at ASC").fetchall()
            return [_row_to_contact(row) for row in rows]

    def get_by_id(self, contact_id: str) -> Contact | None:
        with self._connection() as conn:
            row = conn.execute("SELECT * FROM contacts WHERE id = ?", (contact_id,)).fetchone()
            return _row_to_contact(row) if row else None

    def delete(self, contact_id: str) -> None:
        with self._connection() as conn:
            conn.execute("DELETE FROM contacts WHERE id = ?", (contact_id,))
            conn.commit()
