"""
thermoreport/analytics/statistics.py
────────────────────────────────────
Status distribution for the summary chart.

Each category's share is rounded on its own (half-up), so the five
percentages may add up to 99, 100, or 101.
"""
from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

from config.status import CHART_LABELS, CHART_ORDER, COLOR_TAGS, StatusCategory
from thermoreport.analytics.status import classify
from thermoreport.data.models import ThermographyReading


@dataclass(frozen=True)
class StatusShare:
    category: StatusCategory
    label: str
    percentage: int
    color_tag: str


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def count_by_category(readings: Sequence[ThermographyReading]) -> dict[StatusCategory, int]:
    """Readings per category, every category present (zero when absent)."""
    categories = pd.Series([classify(r.status).value for r in readings], dtype="object")
    counts = categories.value_counts().reindex([c.value for c in CHART_ORDER], fill_value=0)
    return {StatusCategory(key): int(value) for key, value in counts.items()}


def aggregate(readings: Sequence[ThermographyReading]) -> list[StatusShare]:
    counts = count_by_category(readings)
    total = max(len(readings), 1)
    return [
        StatusShare(
            category=category,
            label=CHART_LABELS[category],
            percentage=round_half_up(counts[category] / total * 100),
            color_tag=COLOR_TAGS[category],
        )
        for category in CHART_ORDER
    ]
