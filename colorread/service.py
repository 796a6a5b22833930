# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""
Reading service: boundary validation around the conversion core.

This is the primary entry point for recording readings. It validates
input, computes derived values, sources the previous LAB for ΔE and
hands the combined record to the injected store.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from colorread.convert import delta_e_76, get_all_color_values, interpret_delta_e
from colorread.errors import NotFoundError, ValidationError
from colorread.schema import (
    RGB,
    ColorReading,
    LabSample,
    ReadingComparison,
    SampleDetail,
)
from colorread.store import ReadingStore

logger = logging.getLogger(__name__)

MAX_LIST_LIMIT = 1000


def _clean_text(value: Optional[str]) -> Optional[str]:
    """Trim; empty or missing becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _require_device(device_id: Any) -> str:
    if not isinstance(device_id, str) or not device_id.strip():
        raise ValidationError("device_id is required")
    return device_id


def _require_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name is required")
    return name.strip()


def _require_id(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{what} must be an integer, got {value!r}")
    return value


class ReadingService:
    """
    Records, lists, compares and deletes readings and samples.

    Args:
        store: An opened and migrated ReadingStore.
    """

    def __init__(self, store: ReadingStore):
        self.store = store

    # -- readings -----------------------------------------------------------

    def record_reading(
        self,
        device_id: str,
        r: int,
        g: int,
        b: int,
        *,
        sample_id: Optional[int] = None,
        notes: Optional[str] = None,
        sample_name: Optional[str] = None,
    ) -> ColorReading:
        """
        Validate, convert and store one reading.

        ΔE is computed against the device's most recent reading and is
        None for its first. The lookup and insert run under the store's
        per-device lock so concurrent submissions chain correctly.

        Raises:
            ValidationError: Missing fields, RGB outside 0-255, or an
                unknown ``sample_id`` or one owned by another device.
        """
        if not device_id or r is None or g is None or b is None:
            logger.debug("Rejected reading with missing fields")
            raise ValidationError("Missing required fields: device_id, r, g, b")
        _require_device(device_id)
        try:
            rgb = RGB(r=r, g=g, b=b)
        except ValueError as exc:
            logger.debug("Rejected reading for %s: %s", device_id, exc)
            raise ValidationError(str(exc)) from exc

        if sample_id is not None:
            _require_id(sample_id, "sample_id")
            sample = self.store.get_sample(sample_id)
            if sample is None:
                raise ValidationError(f"Sample {sample_id} does not exist")
            if sample.device_id != device_id:
                raise ValidationError(
                    f"Sample {sample_id} belongs to device {sample.device_id}, not {device_id}"
                )

        values = get_all_color_values(rgb.r, rgb.g, rgb.b)

        with self.store.device_lock(device_id):
            prev_lab = self.store.latest_lab(device_id)
            delta_e = delta_e_76(values.lab, prev_lab) if prev_lab is not None else None
            reading = self.store.insert_reading(
                device_id,
                rgb.r,
                rgb.g,
                rgb.b,
                values,
                sample_id=sample_id,
                notes=_clean_text(notes),
                sample_name=_clean_text(sample_name),
                delta_e=delta_e,
            )

        logger.info(
            "Recorded reading %d for %s: %s (ΔE=%s)",
            reading.id, device_id, reading.hex, reading.delta_e,
        )
        return reading

    def list_readings(self, device_id: str, limit: int = 100, offset: int = 0) -> list[ColorReading]:
        """Readings for a device, newest first."""
        _require_device(device_id)
        limit = _require_id(limit, "limit")
        offset = _require_id(offset, "offset")
        if not 1 <= limit <= MAX_LIST_LIMIT:
            raise ValidationError(f"limit must be 1-{MAX_LIST_LIMIT}, got {limit}")
        if offset < 0:
            raise ValidationError(f"offset must be >= 0, got {offset}")
        return self.store.list_readings(device_id, limit=limit, offset=offset)

    def get_reading(self, reading_id: int) -> ColorReading:
        reading = self.store.get_reading(_require_id(reading_id, "id"))
        if reading is None:
            raise NotFoundError("Reading not found")
        return reading

    def delete_reading(self, reading_id: int) -> int:
        """Delete a reading and return its id."""
        if not self.store.delete_reading(_require_id(reading_id, "id")):
            raise NotFoundError("Reading not found")
        logger.info("Deleted reading %d", reading_id)
        return reading_id

    def compare_readings(self, reading_id1: int, reading_id2: int) -> ReadingComparison:
        """ΔE between two stored readings, with its interpretation.

        Comparing a reading with itself is allowed and gives ΔE 0.

        Raises:
            NotFoundError: If either reading does not exist.
        """
        _require_id(reading_id1, "id1")
        _require_id(reading_id2, "id2")
        found = self.store.get_readings([reading_id1, reading_id2])
        if reading_id1 not in found or reading_id2 not in found:
            raise NotFoundError("One or both readings not found")

        reading1 = found[reading_id1]
        reading2 = found[reading_id2]
        delta_e = delta_e_76(reading1.lab, reading2.lab)
        return ReadingComparison(
            reading1=reading1,
            reading2=reading2,
            delta_e=delta_e,
            interpretation=interpret_delta_e(delta_e),
        )

    # -- samples ------------------------------------------------------------

    def create_sample(self, device_id: str, name: str, notes: Optional[str] = None) -> LabSample:
        if not device_id or not name:
            raise ValidationError("Missing required fields: device_id, name")
        _require_device(device_id)
        sample = self.store.insert_sample(device_id, _require_name(name), _clean_text(notes))
        logger.info("Created sample %d (%s) for %s", sample.id, sample.name, device_id)
        return sample

    def list_samples(self, device_id: str) -> list[LabSample]:
        """Samples for a device, newest first, with reading counts."""
        return self.store.list_samples(_require_device(device_id))

    def get_sample(self, sample_id: int) -> SampleDetail:
        """A sample and all of its readings, oldest first."""
        sample = self.store.get_sample(_require_id(sample_id, "id"))
        if sample is None:
            raise NotFoundError("Sample not found")
        readings = self.store.readings_for_sample(sample_id)
        return SampleDetail(sample=sample, readings=tuple(readings))

    def update_sample(self, sample_id: int, name: str, notes: Optional[str] = None) -> LabSample:
        name = _require_name(name)
        sample = self.store.update_sample(_require_id(sample_id, "id"), name, _clean_text(notes))
        if sample is None:
            raise NotFoundError("Sample not found")
        return sample

    def delete_sample(self, sample_id: int) -> int:
        """Delete a sample and, by cascade, all of its readings."""
        if not self.store.delete_sample(_require_id(sample_id, "id")):
            raise NotFoundError("Sample not found")
        logger.info("Deleted sample %d and its readings", sample_id)
        return sample_id
