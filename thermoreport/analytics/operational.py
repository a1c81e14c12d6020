"""
thermoreport/analytics/operational.py
─────────────────────────────────────
Operational report ("R.O.") selection.

Every alarm or critical reading gets a narrative incident page. Case IDs run
01, 02, … over the selected readings only and line up with the
"VIDE R.O. NN" references of the critical equipment listing.

Urgency:
  critical → INTERVENÇÃO IMEDIATA
  alert    → INTERVENÇÃO PROGRAMADA
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from config.report import (
    DEFAULT_PROBLEM,
    DEFAULT_RECOMMENDATION,
    EMISSIVITY,
    MEASUREMENT_DISTANCE,
    NOT_AVAILABLE,
)
from config.status import URGENCY_IMMEDIATE, URGENCY_SCHEDULED, StatusCategory
from thermoreport.analytics.equipment import (
    attention_readings,
    equipment_name,
    number_sequence,
    sequence_ref,
)
from thermoreport.analytics.status import classify
from thermoreport.data.models import ThermographyReading


@dataclass(frozen=True)
class OperationalCase:
    case_id: str
    area: str
    equipment: str
    components: str
    date: str
    status: StatusCategory
    urgency: str
    problem: str
    recommendations: tuple[str, ...]
    max_temp: str = NOT_AVAILABLE
    max_admissible_temp: str = NOT_AVAILABLE
    readings: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    thermal_image: str = ""
    visible_image: str = ""
    emissivity: str = EMISSIVITY
    distance: str = MEASUREMENT_DISTANCE


def _present(value) -> bool:
    return value is not None and str(value).strip() != ""


def format_temperature(value: float | str | None) -> str:
    """85.0 → "85 °C", "72,5" → "72,5 °C", None → "N/A"."""
    if not _present(value):
        return NOT_AVAILABLE
    text = f"{value:.10g}" if isinstance(value, float) else str(value).strip()
    return f"{text} °C"


def urgency_for(raw_status: str | None) -> str:
    if classify(raw_status) is StatusCategory.CRITICAL:
        return URGENCY_IMMEDIATE
    return URGENCY_SCHEDULED


def _text_or(value: str | None, fallback: str) -> str:
    return value if _present(value) else fallback


def build_case(case_id: str, reading: ThermographyReading, report_date: str = "") -> OperationalCase:
    measured = format_temperature(reading.measured_temp)
    admissible = format_temperature(reading.admissible_temp)
    readings: tuple[tuple[str, str], ...] = ()
    if _present(reading.measured_temp):
        readings = (("Temp. Medida", measured), ("Temp. Admissível", admissible))

    problem = reading.problem if _present(reading.problem) else _text_or(reading.observation, DEFAULT_PROBLEM)
    recommendation = _text_or(reading.recommendation, DEFAULT_RECOMMENDATION)

    return OperationalCase(
        case_id=case_id,
        area=reading.sector,
        equipment=equipment_name(reading),
        components=_text_or(reading.component, NOT_AVAILABLE),
        date=report_date,
        status=classify(reading.status),
        urgency=urgency_for(reading.status),
        problem=problem,
        recommendations=(recommendation,),
        max_temp=measured,
        max_admissible_temp=admissible,
        readings=readings,
        thermal_image=reading.thermal_image or "",
        visible_image=reading.visible_image or "",
    )


def select(readings: Sequence[ThermographyReading], report_date: str = "") -> list[OperationalCase]:
    """
    One OperationalCase per alarm/critical reading, payload order kept.

    Args:
        readings: Thermography readings from the payload
        report_date: Already-normalized inspection date shown on every case
    """
    return [
        build_case(sequence_ref(index), reading, report_date)
        for index, reading in number_sequence(attention_readings(readings))
    ]
