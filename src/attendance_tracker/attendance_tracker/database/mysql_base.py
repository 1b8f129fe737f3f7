from __future__ import annotations

import logging
from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import DuplicateRecordError, StoreUnavailableError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor); commit on success, rollback on error.

    mysql-connector errors are translated: duplicate keys become
    DuplicateRecordError, everything else StoreUnavailableError.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        logger.error("Cannot connect to the attendance store: %s", exc)
        raise StoreUnavailableError("Attendance store is unavailable") from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.IntegrityError as exc:
        conn.rollback()
        if exc.errno == errorcode.ER_DUP_ENTRY:
            raise DuplicateRecordError(str(exc)) from exc
        logger.error("Integrity failure in attendance store", exc_info=True)
        raise StoreUnavailableError("Attendance store rejected the write") from exc
    except mysql.connector.Error as exc:
        conn.rollback()
        logger.error("Attendance store query failed", exc_info=True)
        raise StoreUnavailableError("Attendance store is unavailable") from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_decimal(value: Any) -> Optional[Decimal]:
    """Normalize NUMERIC values (Decimal, float, str) to a 2-place Decimal."""

    if value is None:
        return None
    if isinstance(value, Decimal):
        return value.quantize(Decimal("0.01"))
    return Decimal(str(value)).quantize(Decimal("0.01"))
