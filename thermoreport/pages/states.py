"""
thermoreport/pages/states.py
────────────────────────────
Full-screen messages shown instead of the report: missing ID, fetch error,
and empty response.
"""
from __future__ import annotations

from dash import html

from thermoreport.i18n.translator import t

MUTED = "#6e7781"
DANGER = "#da3633"
ACCENT = "#0b4f8a"

_CENTERED = {
    "minHeight": "80vh",
    "display": "flex",
    "alignItems": "center",
    "justifyContent": "center",
    "padding": "1rem",
}


def no_id(lang: str | None = None) -> html.Div:
    """Guidance screen: how to pass the report ID in the URL."""
    return html.Div(
        html.Div(
            [
                html.H1(t("state.title", lang), style={"fontSize": "1.6rem", "fontWeight": "700", "color": ACCENT}),
                html.P(t("state.no_id", lang), style={"color": MUTED}),
                html.Div(
                    [
                        html.P("/relatorio/8", style={"margin": "0"}),
                        html.P(t("state.or", lang), style={"color": MUTED, "margin": "6px 0"}),
                        html.P("/?idRelatorio=8", style={"margin": "0"}),
                    ],
                    style={"fontFamily": "monospace", "backgroundColor": "#f6f8fa",
                           "borderRadius": "8px", "padding": "16px"},
                ),
            ],
            style={"textAlign": "center", "maxWidth": "28rem"},
        ),
        id="state-no-id",
        style=_CENTERED,
    )


def error(message: str, lang: str | None = None) -> html.Div:
    return html.Div(
        html.Div(
            [
                html.Div("⚠️", style={"fontSize": "3rem"}),
                html.H1(t("state.error_title", lang), style={"fontSize": "1.3rem", "fontWeight": "700", "color": DANGER}),
                html.P(message, style={"color": MUTED}),
            ],
            style={"textAlign": "center", "maxWidth": "28rem"},
        ),
        id="state-error",
        style=_CENTERED,
    )


def no_data(lang: str | None = None) -> html.Div:
    return html.Div(html.P(t("state.no_data", lang), style={"color": MUTED}), id="state-no-data", style=_CENTERED)
