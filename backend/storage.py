"""Key-value persistence for workout data.

Values are stored as JSON text under string keys. Two backends share the
:class:`Storage` interface: :class:`SQLiteStore` keeps everything in a
single table of a SQLite file and :class:`MemoryStore` keeps it in a dict,
which is what the tests use.

Serialisation always sorts object keys so that loading a value and saving
it back unchanged writes exactly the same text.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any, Iterator

from backend import DEFAULT_DB_PATH


class StorageError(ValueError):
    """Raised when stored text cannot be decoded."""

    def __init__(self, key: str, message: str):
        super().__init__(f"Malformed data stored under '{key}': {message}")
        self.key = key


def dumps(value: Any) -> str:
    """Return the JSON text written for ``value``."""

    return json.dumps(value, sort_keys=True)


class Storage:
    """Base class for key-value stores holding JSON values.

    Subclasses only implement raw text access via :meth:`get_raw`,
    :meth:`set_raw`, :meth:`delete_raw` and :meth:`keys`.
    """

    def get_raw(self, key: str) -> str | None:
        raise NotImplementedError

    def set_raw(self, key: str, text: str) -> None:
        raise NotImplementedError

    def delete_raw(self, key: str) -> None:
        raise NotImplementedError

    def keys(self) -> list[str]:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def save(self, key: str, value: Any) -> None:
        """Serialise ``value`` and store it under ``key``."""

        self.set_raw(key, dumps(value))

    def load(self, key: str, fallback: Any = None) -> Any:
        """Return the value stored under ``key``.

        ``fallback`` is returned unchanged when the key is absent or when its
        content cannot be decoded. Decode failures are logged.
        """

        try:
            return self.load_strict(key)
        except KeyError:
            return fallback
        except StorageError:
            logging.exception("Ignoring malformed data for key %s", key)
            return fallback

    def load_strict(self, key: str) -> Any:
        """Return the value stored under ``key`` or raise.

        Raises :class:`KeyError` if ``key`` is absent and
        :class:`StorageError` if the stored text is not valid JSON.
        """

        text = self.get_raw(key)
        if text is None:
            raise KeyError(key)
        try:
            return json.loads(text)
        except ValueError as exc:
            raise StorageError(key, str(exc)) from exc

    def remove(self, key: str) -> None:
        """Delete ``key``. Missing keys are ignored."""

        self.delete_raw(key)

    def __contains__(self, key: str) -> bool:
        return self.get_raw(key) is not None


class MemoryStore(Storage):
    """Store kept entirely in memory."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get_raw(self, key: str) -> str | None:
        return self._data.get(key)

    def set_raw(self, key: str, text: str) -> None:
        self._data[key] = text

    def delete_raw(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())


class SQLiteStore(Storage):
    """Durable store backed by a ``kv_store`` table in ``db_path``.

    Every write is committed before the call returns, so a value is visible
    to any other reader of the same file immediately.
    """

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv_store (
                    key   TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )

    def get_raw(self, key: str) -> str | None:
        with sqlite3.connect(str(self.db_path)) as conn:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
        return row[0] if row else None

    def set_raw(self, key: str, text: str) -> None:
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.execute(
                "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
                (key, text),
            )

    def delete_raw(self, key: str) -> None:
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))

    def keys(self) -> list[str]:
        with sqlite3.connect(str(self.db_path)) as conn:
            rows = conn.execute("SELECT key FROM kv_store ORDER BY key").fetchall()
        return [row[0] for row in rows]
