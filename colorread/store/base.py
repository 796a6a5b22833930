# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""Abstract reading store.

A store durably keeps samples and readings and returns them by id or by
device. Implementations are constructed explicitly and passed to the
service; there is no module-level connection.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

from colorread.schema import LAB, ColorReading, ColorValues, LabSample


class ReadingStore(ABC):
    """Persistence interface for samples and color readings."""

    def __init__(self) -> None:
        self._device_locks: dict[str, threading.Lock] = {}
        self._device_locks_guard = threading.Lock()

    @contextmanager
    def device_lock(self, device_id: str) -> Iterator[None]:
        """Serialize "read previous reading, insert new one" per device.

        Without it, two concurrent submissions for one device could both
        compute ΔE against the same previous row.
        """
        with self._device_locks_guard:
            lock = self._device_locks.setdefault(device_id, threading.Lock())
        with lock:
            yield

    # -- lifecycle ----------------------------------------------------------

    def open(self) -> None:
        """Acquire resources. Default: nothing to do."""

    def close(self) -> None:
        """Release resources. Default: nothing to do."""

    def __enter__(self) -> ReadingStore:
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @abstractmethod
    def migrate(self) -> None:
        """Create tables and indexes if they do not exist."""

    # -- samples ------------------------------------------------------------

    @abstractmethod
    def insert_sample(self, device_id: str, name: str, notes: Optional[str]) -> LabSample:
        ...

    @abstractmethod
    def list_samples(self, device_id: str) -> list[LabSample]:
        """Samples for a device, newest first, with ``reading_count``."""

    @abstractmethod
    def get_sample(self, sample_id: int) -> Optional[LabSample]:
        ...

    @abstractmethod
    def update_sample(self, sample_id: int, name: str, notes: Optional[str]) -> Optional[LabSample]:
        ...

    @abstractmethod
    def delete_sample(self, sample_id: int) -> bool:
        """Delete a sample and all its readings. False if it did not exist."""

    # -- readings -----------------------------------------------------------

    @abstractmethod
    def latest_lab(self, device_id: str) -> Optional[LAB]:
        """LAB of the device's most recent reading, or None if it has none."""

    @abstractmethod
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
        ...

    @abstractmethod
    def list_readings(self, device_id: str, limit: int = 100, offset: int = 0) -> list[ColorReading]:
        """Readings for a device, newest first."""

    @abstractmethod
    def readings_for_sample(self, sample_id: int) -> list[ColorReading]:
        """Readings for a sample, oldest first."""

    @abstractmethod
    def get_reading(self, reading_id: int) -> Optional[ColorReading]:
        ...

    def get_readings(self, reading_ids: Sequence[int]) -> dict[int, ColorReading]:
        """Fetch several readings; missing ids are absent from the result."""
        found = {}
        for reading_id in reading_ids:
            reading = self.get_reading(reading_id)
            if reading is not None:
                found[reading_id] = reading
        return found

    @abstractmethod
    def delete_reading(self, reading_id: int) -> bool:
        """False if the reading did not exist."""
