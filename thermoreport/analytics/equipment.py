"""
thermoreport/analytics/equipment.py
───────────────────────────────────
Equipment row projections for the two equipment listings:

  - project_all()      : every reading, numbered by its position in the payload
  - project_critical() : alarm/critical readings only, renumbered 01, 02, …
                         inside the filtered set, each pointing at its
                         operational report ("VIDE R.O. NN")
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TypeVar

from config.report import OBSERVATION_PREFIX
from config.status import StatusCategory
from thermoreport.analytics.status import classify, needs_attention
from thermoreport.data.models import ThermographyReading

T = TypeVar("T")


@dataclass(frozen=True)
class EquipmentRow:
    index: int
    name: str
    sector: str
    tag: str
    status: StatusCategory
    status_label: str | None = None
    observation: str | None = None


def number_sequence(items: Iterable[T], start: int = 1) -> Iterator[tuple[int, T]]:
    """Enumerate an already-filtered sequence; numbering never sees the filter."""
    return enumerate(items, start=start)


def sequence_ref(index: int) -> str:
    """Two-digit, zero-padded reference: 3 → "03"."""
    return f"{index:02d}"


def equipment_name(reading: ThermographyReading) -> str:
    return f"{reading.location} - {reading.tag}"


def attention_readings(readings: Iterable[ThermographyReading]) -> list[ThermographyReading]:
    """Alarm and critical readings, payload order kept."""
    return [r for r in readings if needs_attention(r.status)]


def project_all(readings: Sequence[ThermographyReading]) -> list[EquipmentRow]:
    return [
        EquipmentRow(
            index=index,
            name=equipment_name(reading),
            sector=reading.sector,
            tag=reading.tag,
            status=classify(reading.status),
            status_label=reading.status.upper(),
        )
        for index, reading in number_sequence(readings)
    ]


def project_critical(readings: Sequence[ThermographyReading]) -> list[EquipmentRow]:
    return [
        EquipmentRow(
            index=index,
            name=equipment_name(reading),
            sector=reading.sector,
            tag=reading.tag,
            status=classify(reading.status),
            observation=f"{OBSERVATION_PREFIX} {sequence_ref(index)}",
        )
        for index, reading in number_sequence(attention_readings(readings))
    ]
