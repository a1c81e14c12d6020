"""
config/status.py
────────────────
Equipment status categories, chart ordering, and display configuration.
"""

from enum import Enum


class StatusCategory(str, Enum):
    NORMAL = "normal"
    ALERT = "alert"
    CRITICAL = "critical"
    MAINTENANCE = "maintenance"
    OFF = "off"


# Category used when the upstream vocabulary is not recognised
DEFAULT_STATUS = StatusCategory.NORMAL

# Categories that feed the alarm/critical listing and the operational reports
ATTENTION_STATUSES: frozenset[StatusCategory] = frozenset(
    {StatusCategory.ALERT, StatusCategory.CRITICAL}
)

# Presentation order of the status summary chart
CHART_ORDER: list[StatusCategory] = [
    StatusCategory.NORMAL,
    StatusCategory.MAINTENANCE,
    StatusCategory.OFF,
    StatusCategory.ALERT,
    StatusCategory.CRITICAL,
]

CHART_LABELS: dict[str, str] = {
    StatusCategory.NORMAL: "NORMAIS",
    StatusCategory.MAINTENANCE: "EM MANUTENÇÃO",
    StatusCategory.OFF: "DESLIGADOS",
    StatusCategory.ALERT: "ALARME",
    StatusCategory.CRITICAL: "CRÍTICO",
}

# Theme color tags consumed by the presentation layer
COLOR_TAGS: dict[str, str] = {
    StatusCategory.NORMAL: "success",
    StatusCategory.MAINTENANCE: "muted",
    StatusCategory.OFF: "border",
    StatusCategory.ALERT: "warning",
    StatusCategory.CRITICAL: "destructive",
}

TAG_COLORS: dict[str, str] = {
    "success": "#2ea44f",
    "muted": "#8b949e",
    "border": "#c9d1d9",
    "warning": "#e8a020",
    "destructive": "#da3633",
}

STATUS_COLORS: dict[str, str] = {
    category: TAG_COLORS[tag] for category, tag in COLOR_TAGS.items()
}

STATUS_LABELS_PT: dict[str, str] = {
    StatusCategory.NORMAL: "Normal",
    StatusCategory.ALERT: "Alarme",
    StatusCategory.CRITICAL: "Crítico",
    StatusCategory.MAINTENANCE: "Manutenção",
    StatusCategory.OFF: "Desligado",
}

# Urgency labels for operational reports
URGENCY_IMMEDIATE = "INTERVENÇÃO IMEDIATA"
URGENCY_SCHEDULED = "INTERVENÇÃO PROGRAMADA"
