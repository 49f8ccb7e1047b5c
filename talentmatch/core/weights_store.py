from __future__ import annotations

import logging
import os
import sqlite3
import threading
from datetime import datetime, timezone
from typing import Protocol

from talentmatch.core.config import settings
from talentmatch.core.config.scoring import get_scoring_config
from talentmatch.geometry import normalize_weights
from talentmatch.schemas import MatchWeights

logger = logging.getLogger(__name__)

# Stored triples are integer percentages; allow for rounding drift from older writers.
_SUM_TOLERANCE = 2

_store: SQLiteWeightStore | None = None
_store_lock = threading.Lock()


class WeightStoreError(RuntimeError):
    pass


class WeightStore(Protocol):
    def load(self, owner_id: str) -> MatchWeights: ...

    def save(self, owner_id: str, weights: MatchWeights) -> MatchWeights: ...


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _is_valid_triple(skills: float, compensation: float, culture: float) -> bool:
    if min(skills, compensation, culture) < 0:
        return False
    return abs(skills + compensation + culture - 100) <= _SUM_TOLERANCE


class SQLiteWeightStore:
    """Per-owner re-ranking weights in a WAL-mode SQLite table."""

    def __init__(self, db_path: str, defaults: MatchWeights | None = None):
        self.db_path = db_path
        self._defaults = defaults
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    @property
    def defaults(self) -> MatchWeights:
        return self._defaults or get_scoring_config().triangle.default_weights

    def _get_connection(self) -> sqlite3.Connection:
        with self._lock:
            if self._conn is not None:
                return self._conn

            directory = os.path.dirname(self.db_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            try:
                conn = sqlite3.connect(
                    self.db_path,
                    check_same_thread=False,
                    timeout=5,
                    isolation_level=None,
                )
                conn.execute("PRAGMA journal_mode=WAL;")
                conn.execute("PRAGMA synchronous=NORMAL;")
                conn.execute("PRAGMA busy_timeout=5000;")
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS match_weights (
                        owner_id TEXT PRIMARY KEY,
                        skills REAL NOT NULL,
                        compensation REAL NOT NULL,
                        culture REAL NOT NULL,
                        updated_at TEXT NOT NULL
                    );
                    """
                )
            except sqlite3.Error as exc:
                raise WeightStoreError(f"Failed to open weight store '{self.db_path}': {exc}") from exc

            self._conn = conn
            return conn

    def load(self, owner_id: str) -> MatchWeights:
        """Stored weights for ``owner_id``; defaults when absent or invalid."""
        conn = self._get_connection()
        try:
            with self._lock:
                row = conn.execute(
                    "SELECT skills, compensation, culture FROM match_weights WHERE owner_id = ?",
                    (owner_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise WeightStoreError(f"Failed to read weights for '{owner_id}': {exc}") from exc

        if not row:
            return self.defaults
        if not _is_valid_triple(*row):
            logger.warning("weights_invalid_stored owner_id=%s values=%s", owner_id, row)
            return self.defaults
        return MatchWeights(skills=row[0], compensation=row[1], culture=row[2])

    def save(self, owner_id: str, weights: MatchWeights) -> MatchWeights:
        normalized = normalize_weights(weights)
        conn = self._get_connection()
        try:
            with self._lock:
                conn.execute(
                    """
                    INSERT INTO match_weights (owner_id, skills, compensation, culture, updated_at)
                    VALUES (?, ?, ?, ?, ?)
                    ON CONFLICT(owner_id) DO UPDATE SET
                        skills = excluded.skills,
                        compensation = excluded.compensation,
                        culture = excluded.culture,
                        updated_at = excluded.updated_at
                    """,
                    (
                        owner_id,
                        normalized.skills,
                        normalized.compensation,
                        normalized.culture,
                        _utc_now().isoformat(),
                    ),
                )
        except sqlite3.Error as exc:
            raise WeightStoreError(f"Failed to save weights for '{owner_id}': {exc}") from exc

        logger.info("weights_saved owner_id=%s weights=%s", owner_id, normalized.model_dump())
        return normalized

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None


def get_weight_store() -> WeightStore:
    global _store
    with _store_lock:
        if _store is None:
            _store = SQLiteWeightStore(settings.weights_db_path)
        return _store
