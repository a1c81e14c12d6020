"""
thermoreport/layout/main.py
───────────────────────────
Main application layout composition.

Contains:
  - dcc.Location for routing (path segment or ?idRelatorio=)
  - dcc.Loading spinner shown while the report is fetched
  - Page content container filled by callbacks.navigation
"""
from dash import dcc, html
import dash_bootstrap_components as dbc

from config.settings import settings
from thermoreport.i18n.translator import t


def _loading_spinner() -> html.Div:
    return html.Div(
        [
            dbc.Spinner(color="primary", spinner_style={"width": "3rem", "height": "3rem"}),
            html.P(t("state.loading", settings.LOCALE), style={"color": "#6e7781", "marginTop": "1rem"}),
        ],
        style={"textAlign": "center"},
    )


def create_layout() -> html.Div:
    """Assemble the root application layout."""
    return html.Div(
        [
            # ── Routing ───────────────────────────────────────────────────────
            dcc.Location(id="url", refresh=False),

            # ── Report content (pending while the fetch runs) ─────────────────
            dcc.Loading(
                html.Div(id="page-content", style={"minHeight": "100vh"}),
                id="page-loading",
                custom_spinner=_loading_spinner(),
                parent_style={"minHeight": "100vh"},
            ),
        ],
        style={"backgroundColor": "#eaeef2", "minHeight": "100vh", "color": "#24292f"},
    )
