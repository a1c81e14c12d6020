"""
thermoreport/analytics/status.py
────────────────────────────────
Status classifier.

Maps the free-text status written by the inspection system ("Normal",
"ALARME", "Crítico", "Em manutenção", "desligado" …) to a StatusCategory.

Matching is case- and accent-insensitive and runs the patterns below in
order; the first hit wins. Anything unmatched falls back to DEFAULT_STATUS.
New vocabulary is added to STATUS_PATTERNS only.
"""
from __future__ import annotations

import re
import unicodedata

from config.status import ATTENTION_STATUSES, DEFAULT_STATUS, StatusCategory

# (pattern over the folded status, category); first match wins
STATUS_PATTERNS: list[tuple[re.Pattern[str], StatusCategory]] = [
    (re.compile(r"\bcritic"), StatusCategory.CRITICAL),
    (re.compile(r"\b(alarm|alert|atenc)"), StatusCategory.ALERT),
    (re.compile(r"\b(manut|mainten)"), StatusCategory.MAINTENANCE),
    (re.compile(r"\b(deslig|off\b|inativ|parad)"), StatusCategory.OFF),
    (re.compile(r"\b(normal|ok)\b"), StatusCategory.NORMAL),
]


def fold_status(raw_status: str | None) -> str:
    """Lowercase, trim, and strip diacritics ("Crítico " → "critico")."""
    if not raw_status:
        return ""
    decomposed = unicodedata.normalize("NFKD", raw_status.strip().lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def classify(raw_status: str | None) -> StatusCategory:
    folded = fold_status(raw_status)
    for pattern, category in STATUS_PATTERNS:
        if pattern.search(folded):
            return category
    return DEFAULT_STATUS


def needs_attention(raw_status: str | None) -> bool:
    """True for readings that belong in the alarm / critical listings."""
    return classify(raw_status) in ATTENTION_STATUSES
