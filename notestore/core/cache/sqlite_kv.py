# -*- coding: utf-8 -*-
"""
sqlite_kv

Persistent SQLite-backed key/value surface for on-device storage.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from threading import RLock
from typing import Iterable


class SQLiteKeyValueStore:
    """Persist text values under string keys in a single SQLite table."""

    def __init__(
        self,
        path: str | None = None,
        *,
        table_name: str = "kv_store",
    ) -> None:
        """Initialize the store and prepare the SQLite schema."""

        self._path = path or ":memory:"
        self._table = self._validate_table(table_name)
        self._connection: sqlite3.Connection | None = None
        self._lock = RLock()
        self._connect()

    @property
    def path(self) -> str:
        """Return the SQLite database path used for persistence."""

        return self._path

    def set(self, key: str, value: str) -> None:
        """Store ``value`` for ``key`` replacing any previous value."""

        with self._lock:
            assert self._connection is not None
            self._connection.execute(
                f"""
                INSERT INTO {self._table}(key, value)
                VALUES(?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value=excluded.value,
                    updated_at=strftime('%s', 'now')
                """.strip(),
                (key, value),
            )
            self._connection.commit()

    def get(self, key: str) -> str | None:
        """Return the stored value for ``key`` or ``None`` when absent."""

        with self._lock:
            assert self._connection is not None
            cursor = self._connection.execute(
                f"SELECT value FROM {self._table} WHERE key = ?",
                (key,),
            )
            row = cursor.fetchone()
            cursor.close()
        if not row:
            return None
        return str(row[0])

    def delete(self, key: str) -> None:
        """Remove the value for ``key`` if present."""

        with self._lock:
            assert self._connection is not None
            self._connection.execute(
                f"DELETE FROM {self._table} WHERE key = ?",
                (key,),
            )
            self._connection.commit()

    def keys(self) -> list[str]:
        """Return every key currently stored."""

        with self._lock:
            assert self._connection is not None
            cursor = self._connection.execute(
                f"SELECT key FROM {self._table} ORDER BY key",
            )
            rows = cursor.fetchall()
            cursor.close()
        return [str(row[0]) for row in rows]

    def reconfigure(self, path: str | None = None) -> None:
        """Reconnect the store using a new database ``path`` if provided."""

        target = path or ":memory:"
        if target == self._path and self._connection is not None:
            return
        self._path = target
        self._connect()

    def close(self) -> None:
        """Close the underlying SQLite connection."""

        with self._lock:
            if self._connection is not None:
                self._connection.close()
                self._connection = None

    def _connect(self) -> None:
        with self._lock:
            if self._connection is not None:
                self._connection.close()
            if self._path != ":memory:":
                Path(self._path).parent.mkdir(parents=True, exist_ok=True)
            self._connection = sqlite3.connect(self._path, check_same_thread=False)
            self._connection.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {self._table} (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL DEFAULT (strftime('%s', 'now'))
                )
                """.strip()
            )
            self._connection.commit()

    def _validate_table(self, name: str) -> str:
        """Ensure ``name`` is safe for use as an SQLite identifier."""

        if not name or not all(ch.isalnum() or ch == "_" for ch in name):
            raise ValueError("Table name must contain only alphanumeric characters or underscores")
        return name


__all__: Iterable[str] = ["SQLiteKeyValueStore"]


# The End
