# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""
SQLite-backed reading store.

One connection per store, opened with retry and guarded by a lock so the
store can be shared across threads. Timestamps are stored as UTC ISO-8601
text; ties on timestamp are broken by id so "latest" is always defined.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
import time
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from colorread.config import StoreConfig
from colorread.errors import StoreError
from colorread.schema import LAB, ColorReading, ColorValues, LabSample
from colorread.store.base import ReadingStore

logger = logging.getLogger(__name__)


_CREATE_SAMPLES_SQL = """
CREATE TABLE IF NOT EXISTS lab_samples (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    device_id TEXT NOT NULL,
    name TEXT NOT NULL,
    notes TEXT,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_samples_device ON lab_samples(device_id);
CREATE INDEX IF NOT EXISTS idx_samples_created ON lab_samples(created_at DESC);
"""

_CREATE_READINGS_SQL = """
CREATE TABLE IF NOT EXISTS color_readings (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    device_id TEXT NOT NULL,
    sample_id INTEGER REFERENCES lab_samples(id) ON DELETE CASCADE,
    timestamp TEXT NOT NULL,
    r INTEGER NOT NULL CHECK (r >= 0 AND r <= 255),
    g INTEGER NOT NULL CHECK (g >= 0 AND g <= 255),
    b INTEGER NOT NULL CHECK (b >= 0 AND b <= 255),
    hex TEXT NOT NULL,
    hue REAL,
    saturation_l REAL,
    lightness REAL,
    saturation_v REAL,
    value REAL,
    lab_l REAL,
    lab_a REAL,
    lab_b REAL,
    notes TEXT,
    sample_name TEXT,
    delta_e REAL
);
CREATE INDEX IF NOT EXISTS idx_readings_device ON color_readings(device_id);
CREATE INDEX IF NOT EXISTS idx_readings_timestamp ON color_readings(timestamp DESC);
CREATE INDEX IF NOT EXISTS idx_readings_device_timestamp
    ON color_readings(device_id, timestamp DESC);
"""

_CREATE_SAMPLE_INDEX_SQL = (
    "CREATE INDEX IF NOT EXISTS idx_readings_sample ON color_readings(sample_id)"
)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


def _row_to_sample(row: sqlite3.Row) -> LabSample:
    keys = row.keys()
    return LabSample(
        id=row["id"],
        device_id=row["device_id"],
        name=row["name"],
        notes=row["notes"],
        created_at=datetime.fromisoformat(row["created_at"]),
        reading_count=row["reading_count"] if "reading_count" in keys else None,
    )


def _row_to_reading(row: sqlite3.Row) -> ColorReading:
    return ColorReading.from_dict(dict(row))


class SQLiteReadingStore(ReadingStore):
    """ReadingStore on a single SQLite database.

    Usage::

        with SQLiteReadingStore(load_config()) as store:
            store.migrate()
            ...
    """

    def __init__(self, config: Optional[StoreConfig] = None):
        super().__init__()
        self.config = config or StoreConfig()
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    # -- lifecycle ----------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        """Connect, retrying ``connect_retries`` times with a fixed delay.

        Raises:
            StoreError: If every attempt fails.
        """
        if self._conn is not None:
            return

        retries = self.config.connect_retries
        last_error: Optional[Exception] = None
        for attempt in range(1, retries + 1):
            logger.info("Database connection attempt %d/%d", attempt, retries)
            try:
                conn = sqlite3.connect(
                    self.config.database_path,
                    timeout=self.config.timeout_s,
                    check_same_thread=False,
                )
                conn.row_factory = sqlite3.Row
                conn.execute("PRAGMA foreign_keys = ON")
                conn.execute("SELECT 1")
            except sqlite3.Error as exc:
                last_error = exc
                logger.warning("Connection attempt %d failed: %s", attempt, exc)
                if attempt < retries:
                    time.sleep(self.config.retry_delay_s)
                continue
            self._conn = conn
            logger.info("Database connected: %s", self.config.database_path)
            return

        raise StoreError(
            f"Could not connect to {self.config.database_path} after {retries} attempts"
        ) from last_error

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreError("Store is not open")
        return self._conn

    def _execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        with self._lock:
            conn = self._connection()
            try:
                with conn:
                    return conn.execute(sql, params)
            except sqlite3.Error as exc:
                logger.error("Query failed: %s", exc)
                raise StoreError(str(exc)) from exc

    def _fetchone(self, sql: str, params: Sequence[Any] = ()) -> Optional[sqlite3.Row]:
        with self._lock:
            return self._execute(sql, params).fetchone()

    def _fetchall(self, sql: str, params: Sequence[Any] = ()) -> list[sqlite3.Row]:
        with self._lock:
            return self._execute(sql, params).fetchall()

    def migrate(self) -> None:
        """Create tables and indexes; add ``sample_id`` to older readings tables."""
        logger.info("Running database migrations")
        with self._lock:
            conn = self._connection()
            try:
                with conn:
                    conn.executescript(_CREATE_SAMPLES_SQL)
                    conn.executescript(_CREATE_READINGS_SQL)
                    columns = {
                        row["name"]
                        for row in conn.execute("PRAGMA table_info(color_readings)")
                    }
                    if "sample_id" not in columns:
                        logger.info("Adding sample_id column to color_readings")
                        conn.execute(
                            "ALTER TABLE color_readings ADD COLUMN sample_id "
                            "INTEGER REFERENCES lab_samples(id) ON DELETE CASCADE"
                        )
                    conn.execute(_CREATE_SAMPLE_INDEX_SQL)
            except sqlite3.Error as exc:
                logger.error("Migration error: %s", exc)
                raise StoreError(f"Migration failed: {exc}") from exc
        logger.info("Migrations completed")

    # -- samples ------------------------------------------------------------

    def insert_sample(self, device_id: str, name: str, notes: Optional[str]) -> LabSample:
        with self._lock:
            cur = self._execute(
                "INSERT INTO lab_samples (device_id, name, notes, created_at) VALUES (?, ?, ?, ?)",
                (device_id, name, notes, _now()),
            )
            return self.get_sample(cur.lastrowid)

    def list_samples(self, device_id: str) -> list[LabSample]:
        rows = self._fetchall(
            """
            SELECT s.*,
                   (SELECT COUNT(*) FROM color_readings r WHERE r.sample_id = s.id)
                       AS reading_count
            FROM lab_samples s
            WHERE s.device_id = ?
            ORDER BY s.created_at DESC, s.id DESC
            """,
            (device_id,),
        )
        return [_row_to_sample(row) for row in rows]

    def get_sample(self, sample_id: int) -> Optional[LabSample]:
        row = self._fetchone("SELECT * FROM lab_samples WHERE id = ?", (sample_id,))
        return _row_to_sample(row) if row is not None else None

    def update_sample(self, sample_id: int, name: str, notes: Optional[str]) -> Optional[LabSample]:
        with self._lock:
            cur = self._execute(
                "UPDATE lab_samples SET name = ?, notes = ? WHERE id = ?",
                (name, notes, sample_id),
            )
            if cur.rowcount == 0:
                return None
            return self.get_sample(sample_id)

    def delete_sample(self, sample_id: int) -> bool:
        cur = self._execute("DELETE FROM lab_samples WHERE id = ?", (sample_id,))
        return cur.rowcount > 0

    # -- readings -----------------------------------------------------------

    def latest_lab(self, device_id: str) -> Optional[LAB]:
        row = self._fetchone(
            """
            SELECT lab_l, lab_a, lab_b FROM color_readings
            WHERE device_id = ?
            ORDER BY timestamp DESC, id DESC LIMIT 1
            """,
            (device_id,),
        )
        if row is None:
            return None
        return LAB(l=float(row["lab_l"]), a=float(row["lab_a"]), b=float(row["lab_b"]))

    def insert_reading(
        self,
        device_id: str,
        r: int,
        g: int,
        b: int,
        values: ColorValues,
        *,
        sample_id: Optional[int] = None,
        notes: Optional[str] = None,
        sample_name: Optional[str] = None,
        delta_e: Optional[float] = None,
    ) -> ColorReading:
        with self._lock:
            cur = self._execute(
                """
                INSERT INTO color_readings
                (device_id, sample_id, timestamp, r, g, b, hex, hue, saturation_l,
                 lightness, saturation_v, value, lab_l, lab_a, lab_b, notes,
                 sample_name, delta_e)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    device_id, sample_id, _now(), r, g, b,
                    values.hex,
                    values.hue,
                    values.saturation_l,
                    values.lightness,
                    values.saturation_v,
                    values.value,
                    values.lab_l,
                    values.lab_a,
                    values.lab_b,
                    notes,
                    sample_name,
                    delta_e,
                ),
            )
            return self.get_reading(cur.lastrowid)

    def list_readings(self, device_id: str, limit: int = 100, offset: int = 0) -> list[ColorReading]:
        rows = self._fetchall(
            """
            SELECT * FROM color_readings
            WHERE device_id = ?
            ORDER BY timestamp DESC, id DESC
            LIMIT ? OFFSET ?
            """,
            (device_id, limit, offset),
        )
        return [_row_to_reading(row) for row in rows]

    def readings_for_sample(self, sample_id: int) -> list[ColorReading]:
        rows = self._fetchall(
            "SELECT * FROM color_readings WHERE sample_id = ? ORDER BY timestamp ASC, id ASC",
            (sample_id,),
        )
        return [_row_to_reading(row) for row in rows]

    def get_reading(self, reading_id: int) -> Optional[ColorReading]:
        row = self._fetchone("SELECT * FROM color_readings WHERE id = ?", (reading_id,))
        return _row_to_reading(row) if row is not None else None

    def get_readings(self, reading_ids: Sequence[int]) -> dict[int, ColorReading]:
        ids = list(dict.fromkeys(reading_ids))
        if not ids:
            return {}
        placeholders = ", ".join("?" for _ in ids)
        rows = self._fetchall(
            f"SELECT * FROM color_readings WHERE id IN ({placeholders})", ids
        )
        return {row["id"]: _row_to_reading(row) for row in rows}

    def delete_reading(self, reading_id: int) -> bool:
        cur = self._execute("DELETE FROM color_readings WHERE id = ?", (reading_id,))
        return cur.rowcount > 0
