# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""
ColorReading — schema for colorimeter readings and their derived values.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same RGB → same derived values
- Serializable: ``to_dict`` / ``from_dict`` for storage and output

Units:
- RGB: integers 0-255 (validated here, at the boundary)
- HSL / HSV: hue in degrees [0, 360), other channels in percent [0, 100]
- LAB: L in [0, 100]; a and b nominally [-128, 127], never clamped
- ΔE: CIE76, None for a device's first reading
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


# =============================================================================
# Parsing Helpers
# =============================================================================


def _parse_timestamp(value) -> datetime:
    """Accept a datetime or an ISO-8601 string."""
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


def _optional_float(value) -> Optional[float]:
    return None if value is None else float(value)


# =============================================================================
# Color Value Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB:
    """
    A raw reading from the instrument.

    This is where channel range validation lives; the conversion
    functions themselves accept any number.
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate each channel is an integer in 0-255."""
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"RGB channel {name} must be an integer, got {v!r}")
            if not 0 <= v <= 255:
                raise ValueError("RGB values must be between 0 and 255")

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True, slots=True)
class HSL:
    """Hue (degrees), saturation and lightness (percent)."""
    h: float
    s: float
    l: float  # noqa: E741

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "l": self.l}


@dataclass(frozen=True, slots=True)
class HSV:
    """Hue (degrees), saturation and value (percent)."""
    h: float
    s: float
    v: float

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "v": self.v}


@dataclass(frozen=True, slots=True)
class XYZ:
    """CIE XYZ tristimulus under D65, 0-100 scale. Never rounded."""
    x: float
    y: float
    z: float


@dataclass(frozen=True, slots=True)
class LAB:
    """
    A point in CIE-LAB (D65).

    Attributes:
        l: Lightness (0 = black, 100 = white)
        a: Green (-) to red (+)
        b: Blue (-) to yellow (+)
    """
    l: float  # noqa: E741
    a: float
    b: float

    def to_dict(self) -> dict:
        return {"l": self.l, "a": self.a, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> LAB:
        return cls(l=float(data["l"]), a=float(data["a"]), b=float(data["b"]))


@dataclass(frozen=True, slots=True)
class ColorValues:
    """
    Every derived value for one RGB reading, in its stored shape.

    ``hue`` comes from HSL; HSV hue is identical whenever saturation is
    nonzero, so it is not stored twice.
    """
    hex: str
    hue: float
    saturation_l: float
    lightness: float
    saturation_v: float
    value: float
    lab_l: float
    lab_a: float
    lab_b: float

    @property
    def lab(self) -> LAB:
        return LAB(l=self.lab_l, a=self.lab_a, b=self.lab_b)

    def to_dict(self) -> dict:
        return {
            "hex": self.hex,
            "hue": self.hue,
            "saturation_l": self.saturation_l,
            "lightness": self.lightness,
            "saturation_v": self.saturation_v,
            "value": self.value,
            "lab_l": self.lab_l,
            "lab_a": self.lab_a,
            "lab_b": self.lab_b,
        }


# =============================================================================
# Stored Records
# =============================================================================


@dataclass(frozen=True, slots=True)
class LabSample:
    """
    A named physical sample that readings can be grouped under.

    Attributes:
        reading_count: Populated by listings; None when not queried.
    """
    id: int
    device_id: str
    name: str
    notes: Optional[str]
    created_at: datetime
    reading_count: Optional[int] = None

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "device_id": self.device_id,
            "name": self.name,
            "notes": self.notes,
            "created_at": self.created_at.isoformat(),
        }
        if self.reading_count is not None:
            d["reading_count"] = self.reading_count
        return d

    @classmethod
    def from_dict(cls, data: dict) -> LabSample:
        return cls(
            id=int(data["id"]),
            device_id=data["device_id"],
            name=data["name"],
            notes=data.get("notes"),
            created_at=_parse_timestamp(data["created_at"]),
            reading_count=data.get("reading_count"),
        )


@dataclass(frozen=True, slots=True)
class ColorReading:
    """
    One stored measurement: raw RGB, derived values and ΔE.

    Attributes:
        delta_e: CIE76 distance to the previous reading from the same
            device, or None if this was the device's first reading.
    """
    id: int
    device_id: str
    sample_id: Optional[int]
    timestamp: datetime
    r: int
    g: int
    b: int
    hex: str
    hue: float
    saturation_l: float
    lightness: float
    saturation_v: float
    value: float
    lab_l: float
    lab_a: float
    lab_b: float
    notes: Optional[str] = None
    sample_name: Optional[str] = None
    delta_e: Optional[float] = None

    @property
    def rgb(self) -> RGB:
        return RGB(r=self.r, g=self.g, b=self.b)

    @property
    def lab(self) -> LAB:
        return LAB(l=self.lab_l, a=self.lab_a, b=self.lab_b)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "device_id": self.device_id,
            "sample_id": self.sample_id,
            "timestamp": self.timestamp.isoformat(),
            "r": self.r,
            "g": self.g,
            "b": self.b,
            "hex": self.hex,
            "hue": self.hue,
            "saturation_l": self.saturation_l,
            "lightness": self.lightness,
            "saturation_v": self.saturation_v,
            "value": self.value,
            "lab_l": self.lab_l,
            "lab_a": self.lab_a,
            "lab_b": self.lab_b,
            "notes": self.notes,
            "sample_name": self.sample_name,
            "delta_e": self.delta_e,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorReading:
        sample_id = data.get("sample_id")
        return cls(
            id=int(data["id"]),
            device_id=data["device_id"],
            sample_id=None if sample_id is None else int(sample_id),
            timestamp=_parse_timestamp(data["timestamp"]),
            r=int(data["r"]),
            g=int(data["g"]),
            b=int(data["b"]),
            hex=data["hex"],
            hue=float(data["hue"]),
            saturation_l=float(data["saturation_l"]),
            lightness=float(data["lightness"]),
            saturation_v=float(data["saturation_v"]),
            value=float(data["value"]),
            lab_l=float(data["lab_l"]),
            lab_a=float(data["lab_a"]),
            lab_b=float(data["lab_b"]),
            notes=data.get("notes"),
            sample_name=data.get("sample_name"),
            delta_e=_optional_float(data.get("delta_e")),
        )


@dataclass(frozen=True, slots=True)
class SampleDetail:
    """A sample together with its readings, oldest first."""
    sample: LabSample
    readings: tuple[ColorReading, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        d = self.sample.to_dict()
        d["readings"] = [r.to_dict() for r in self.readings]
        return d


@dataclass(frozen=True, slots=True)
class ReadingComparison:
    """ΔE between two stored readings plus its perceptual interpretation."""
    reading1: ColorReading
    reading2: ColorReading
    delta_e: float
    interpretation: str

    def to_dict(self) -> dict:
        return {
            "reading1": self.reading1.to_dict(),
            "reading2": self.reading2.to_dict(),
            "delta_e": self.delta_e,
            "interpretation": self.interpretation,
        }
