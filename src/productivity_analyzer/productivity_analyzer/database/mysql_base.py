from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def as_float(value: Any) -> float:
    """DECIMAL columns come back as ``Decimal``."""
    return 0.0 if value is None else float(value)


def normalize_hhmm(value: Any) -> Optional[str]:
    """Normalize stored time values to ``HH:MM``.

    mysql-connector can return:
    - string (e.g. '08:30' or '08:30:00')
    - datetime.timedelta for TIME columns
    """

    if value is None:
        return None

    if hasattr(value, "total_seconds"):
        total_minutes = int(value.total_seconds()) // 60 % (24 * 60)
        return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"

    text = str(value).strip()
    if not text:
        return None
    parts = text.split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    return f"{int(parts[0]):02d}:{int(parts[1]):02d}"
