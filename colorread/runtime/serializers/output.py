# Copyright (c) 2026 Colorread
# SPDX-License-Identifier: MIT

"""
Serializer for stored readings, samples and comparisons.

JSON output is the ``to_dict`` shape of each schema object. NATURAL output
is a short block of text, one fact per line.
"""

from __future__ import annotations

import json
from typing import Sequence, Union

from colorread.runtime.serializers.base import SerializerFormat
from colorread.schema import ColorReading, LabSample, ReadingComparison, SampleDetail

Serializable = Union[
    ColorReading,
    LabSample,
    SampleDetail,
    ReadingComparison,
    Sequence[ColorReading],
]


def to_output(
    obj: Serializable,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize a schema object or a list of readings.

    Args:
        obj: The object to serialize.
        format: JSON, JSON_PRETTY or NATURAL.

    Returns:
        The rendered string.

    Example (NATURAL, ColorReading)::

        Reading #2 -- device lab-01 -- 2026-10-19T10:00:00.000000+00:00
          RGB: 255, 0, 0  (#FF0000)
          HSL: H=0.0 S=100.0 L=50.0
          HSV: S=100.0 V=100.0
          LAB: L=53.24 a=80.09 b=67.2
          ΔE from previous: 12.5
    """
    if format == SerializerFormat.NATURAL:
        return "\n".join(_natural_lines(obj))

    data = _to_data(obj)
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2, ensure_ascii=False)
    else:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def _to_data(obj: Serializable):
    if isinstance(obj, (ColorReading, LabSample, SampleDetail, ReadingComparison)):
        return obj.to_dict()
    return [r.to_dict() for r in obj]


def _natural_lines(obj: Serializable) -> list[str]:
    if isinstance(obj, ColorReading):
        return _describe_reading(obj)
    if isinstance(obj, LabSample):
        return _describe_sample(obj)
    if isinstance(obj, SampleDetail):
        lines = _describe_sample(obj.sample)
        lines.append(f"  Readings: {len(obj.readings)}")
        for reading in obj.readings:
            lines.extend("  " + line for line in _describe_reading(reading))
        return lines
    if isinstance(obj, ReadingComparison):
        return [
            f"Comparison of reading #{obj.reading1.id} ({obj.reading1.hex}) "
            f"and #{obj.reading2.id} ({obj.reading2.hex})",
            f"  ΔE (CIE76): {obj.delta_e}",
            f"  {obj.interpretation}",
        ]

    lines: list[str] = []
    for reading in obj:
        lines.extend(_describe_reading(reading))
    return lines


def _describe_reading(reading: ColorReading) -> list[str]:
    lines = [
        f"Reading #{reading.id} -- device {reading.device_id} -- {reading.timestamp.isoformat()}",
        f"  RGB: {reading.r}, {reading.g}, {reading.b}  ({reading.hex})",
        f"  HSL: H={reading.hue} S={reading.saturation_l} L={reading.lightness}",
        f"  HSV: S={reading.saturation_v} V={reading.value}",
        f"  LAB: L={reading.lab_l} a={reading.lab_a} b={reading.lab_b}",
    ]
    if reading.delta_e is None:
        lines.append("  ΔE from previous: n/a (first reading)")
    else:
        lines.append(f"  ΔE from previous: {reading.delta_e}")
    if reading.sample_name:
        lines.append(f"  Sample: {reading.sample_name}")
    if reading.notes:
        lines.append(f"  Notes: {reading.notes}")
    return lines


def _describe_sample(sample: LabSample) -> list[str]:
    lines = [f"Sample #{sample.id} -- {sample.name} (device {sample.device_id})"]
    if sample.notes:
        lines.append(f"  Notes: {sample.notes}")
    if sample.reading_count is not None:
        lines.append(f"  Reading count: {sample.reading_count}")
    return lines
