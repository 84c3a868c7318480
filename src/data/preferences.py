"""SQLite-backed store for user display preferences.

Loaded once at startup and written on every change. The calculators never
read it.
"""

import logging
import sqlite3
from dataclasses import asdict, fields, replace
from pathlib import Path

from src.models.preferences import Theme, UserPreferences

logger = logging.getLogger(__name__)

_FIELDS = {f.name for f in fields(UserPreferences)}


class PreferenceStore:
    def __init__(self, db_path: str = "data/preferences.db"):
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._ensure_tables()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_tables(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS preferences (
                    key TEXT PRIMARY KEY,
                    value TEXT
                )
            """)

    def load(self) -> UserPreferences:
        """Stored preferences, falling back to defaults for missing keys."""
        with self._connect() as conn:
            rows = conn.execute("SELECT key, value FROM preferences").fetchall()
        stored = {row["key"]: row["value"] for row in rows if row["key"] in _FIELDS}
        if "theme" in stored:
            try:
                stored["theme"] = Theme(stored["theme"])
            except ValueError:
                logger.warning("Ignoring unknown stored theme %r", stored.pop("theme"))
        logger.debug("Loaded %d preference keys", len(stored))
        return UserPreferences(**stored)

    def save(self, prefs: UserPreferences) -> None:
        values = asdict(prefs)
        values["theme"] = prefs.theme.value
        with self._connect() as conn:
            conn.executemany(
                "INSERT OR REPLACE INTO preferences (key, value) VALUES (?, ?)",
                list(values.items()),
            )

    def update(self, **changes) -> UserPreferences:
        """Apply `changes` on top of the stored preferences and persist them."""
        unknown = set(changes) - _FIELDS
        if unknown:
            raise ValueError(f"Unknown preference fields: {sorted(unknown)}")
        if isinstance(changes.get("theme"), str):
            changes["theme"] = Theme(changes["theme"])
        prefs = replace(self.load(), **changes)
        self.save(prefs)
        return prefs
