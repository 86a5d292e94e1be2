"""
Persistence for registrations.

``RegistrationStore`` wraps the ``registrations`` table.  Every method
opens its own connection and closes it before returning, so the store
is safe to call from concurrent request handlers.  Uniqueness of the
(name, class, division) triple is enforced by the table itself; a
violation surfaces as ``DuplicateRegistrationError`` no matter how many
writers race on the same key.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..core.db import get_connection
from ..core.exceptions import DuplicateRegistrationError, NotFoundError, StoreError
from ..schemas.registration import RegistrationRead, RegistrationStatus


# Columns that may appear in filters and count predicates.  Anything
# else is rejected before it can reach the SQL text.
FILTER_COLUMNS = {"status", "committee", "class", "division"}

_SELECT_COLUMNS = "id, name, class, division, committee, email, suggestions, status, created_at"

SQLITE_MAX_INTEGER = 2**63 - 1

Predicate = Mapping[str, Sequence[str]]


def _check_registration_id(registration_id: int) -> None:
    # Ids outside SQLite's INTEGER range cannot be bound, so no such row exists.
    if not -SQLITE_MAX_INTEGER - 1 <= registration_id <= SQLITE_MAX_INTEGER:
        raise NotFoundError("Registration", registration_id)


def _row_to_registration(row: sqlite3.Row) -> RegistrationRead:
    return RegistrationRead(
        id=row["id"],
        name=row["name"],
        class_=row["class"],
        division=row["division"],
        committee=row["committee"],
        email=row["email"],
        suggestions=row["suggestions"],
        status=row["status"],
        created_at=row["created_at"],
    )


def _predicate_sql(predicate: Predicate) -> Tuple[str, List[Any]]:
    """Translate ``{column: [values]}`` into an AND of ``IN`` clauses.

    An empty predicate matches every row; a column with no values
    matches nothing.
    """
    clauses: List[str] = []
    params: List[Any] = []
    for column, values in predicate.items():
        if column not in FILTER_COLUMNS:
            raise ValueError(f"Unsupported filter column '{column}'")
        values = list(values)
        if not values:
            clauses.append("0")
            continue
        placeholders = ", ".join("?" for _ in values)
        clauses.append(f"{column} IN ({placeholders})")
        params.extend(values)
    if not clauses:
        return "1", params
    return " AND ".join(clauses), params


class RegistrationStore:
    """SQLite-backed storage for registration records."""

    @classmethod
    def find_by_natural_key(cls, name: str, class_: str, division: str) -> Optional[RegistrationRead]:
        """Return the registration with exactly this name, class and division."""
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {_SELECT_COLUMNS} FROM registrations WHERE name = ? AND class = ? AND division = ?",
                (name, class_, division),
            ).fetchone()
            return _row_to_registration(row) if row else None
        except sqlite3.Error as e:
            raise StoreError("find_by_natural_key", str(e)) from e
        finally:
            conn.close()

    @classmethod
    def insert(
        cls,
        name: str,
        class_: str,
        division: str,
        committee: str,
        email: Optional[str] = None,
        suggestions: Optional[str] = None,
    ) -> RegistrationRead:
        """Insert a new pending registration and return the stored row.

        ``created_at`` is stamped here in UTC.  A UNIQUE violation on the
        natural key raises ``DuplicateRegistrationError``.
        """
        created_at = datetime.now(timezone.utc).isoformat()
        conn = get_connection()
        try:
            cursor = conn.execute(
                """
                INSERT INTO registrations (name, class, division, committee, email, suggestions, status, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    name,
                    class_,
                    division,
                    committee,
                    email,
                    suggestions,
                    RegistrationStatus.PENDING.value,
                    created_at,
                ),
            )
            registration_id = cursor.lastrowid
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if "UNIQUE" in str(e).upper():
                raise DuplicateRegistrationError(name, class_, division) from e
            raise StoreError("insert", str(e)) from e
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError("insert", str(e)) from e
        finally:
            conn.close()
        return RegistrationRead(
            id=registration_id,
            name=name,
            class_=class_,
            division=division,
            committee=committee,
            email=email,
            suggestions=suggestions,
            status=RegistrationStatus.PENDING,
            created_at=created_at,
        )

    @classmethod
    def get(cls, registration_id: int) -> RegistrationRead:
        _check_registration_id(registration_id)
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {_SELECT_COLUMNS} FROM registrations WHERE id = ?",
                (registration_id,),
            ).fetchone()
        except sqlite3.Error as e:
            raise StoreError("get", str(e)) from e
        finally:
            conn.close()
        if not row:
            raise NotFoundError("Registration", registration_id)
        return _row_to_registration(row)

    @classmethod
    def find_all(cls, filters: Optional[Predicate] = None) -> List[RegistrationRead]:
        """Return registrations matching ``filters`` in submission order.

        ``filters`` maps a column from ``FILTER_COLUMNS`` to the values
        it may take.  Ties on ``created_at`` are broken by ``id``.
        """
        where_sql, params = _predicate_sql(filters or {})
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT {_SELECT_COLUMNS} FROM registrations WHERE {where_sql} ORDER BY created_at ASC, id ASC",
                tuple(params),
            ).fetchall()
            return [_row_to_registration(row) for row in rows]
        except sqlite3.Error as e:
            raise StoreError("find_all", str(e)) from e
        finally:
            conn.close()

    @classmethod
    def update_status(cls, registration_id: int, status: RegistrationStatus) -> RegistrationRead:
        """Overwrite the status of one registration and return the updated row."""
        _check_registration_id(registration_id)
        conn = get_connection()
        try:
            cursor = conn.execute(
                "UPDATE registrations SET status = ? WHERE id = ?",
                (status.value, registration_id),
            )
            if cursor.rowcount == 0:
                raise NotFoundError("Registration", registration_id)
            conn.commit()
            row = conn.execute(
                f"SELECT {_SELECT_COLUMNS} FROM registrations WHERE id = ?",
                (registration_id,),
            ).fetchone()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError("update_status", str(e)) from e
        finally:
            conn.close()
        if not row:
            # Deleted between the update and the read-back.
            raise NotFoundError("Registration", registration_id)
        return _row_to_registration(row)

    @classmethod
    def delete(cls, registration_id: int) -> None:
        _check_registration_id(registration_id)
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM registrations WHERE id = ?", (registration_id,))
            if cursor.rowcount == 0:
                raise NotFoundError("Registration", registration_id)
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError("delete", str(e)) from e
        finally:
            conn.close()

    @classmethod
    def count_where(cls, predicates: Mapping[str, Predicate]) -> Dict[str, int]:
        """Count rows matching each named predicate in a single query.

        ``predicates`` maps a result name to a predicate in the same
        ``{column: [values]}`` form used by ``find_all``.  All counts are
        computed in one ``SELECT`` so they describe the same snapshot.

        Example::

            RegistrationStore.count_where({
                "total": {},
                "senior": {"class": ["11th", "12th"]},
            })
        """
        if not predicates:
            return {}
        select_parts: List[str] = []
        params: List[Any] = []
        names = list(predicates)
        for index, name in enumerate(names):
            where_sql, where_params = _predicate_sql(predicates[name])
            select_parts.append(f"COALESCE(SUM(CASE WHEN {where_sql} THEN 1 ELSE 0 END), 0) AS c{index}")
            params.extend(where_params)
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {', '.join(select_parts)} FROM registrations",
                tuple(params),
            ).fetchone()
        except sqlite3.Error as e:
            raise StoreError("count_where", str(e)) from e
        finally:
            conn.close()
        return {name: int(row[f"c{index}"]) for index, name in enumerate(names)}
