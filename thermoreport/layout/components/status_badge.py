"""
thermoreport/layout/components/status_badge.py
──────────────────────────────────────────────
Equipment status badge component.
"""

from dash import html

from config.status import STATUS_COLORS, STATUS_LABELS_PT


def status_badge(status: str, label: str | None = None) -> html.Span:
    """Inline status badge with color-coded border."""
    color = STATUS_COLORS.get(status, "#8b949e")
    text = label or STATUS_LABELS_PT.get(status, str(status).capitalize())

    return html.Span(
        text,
        className="status-badge",
        style={
            "fontSize": ".65rem",
            "fontWeight": "700",
            "color": color,
            "border": f"1px solid {color}",
            "borderRadius": "4px",
            "padding": "1px 7px",
            "whiteSpace": "nowrap",
        },
    )
