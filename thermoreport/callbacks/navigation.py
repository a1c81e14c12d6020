"""
thermoreport/callbacks/navigation.py
────────────────────────────────────
URL routing: resolve the report ID, load the payload, render the document.

Accepted URLs:
  /relatorio/<id>
  /?idRelatorio=<id>
The path segment wins when both are present.
"""
from __future__ import annotations

import logging
import re
from urllib.parse import parse_qs, unquote

from dash import Input, Output

from config.settings import settings
from thermoreport.analytics.document import build_report_document
from thermoreport.data.client import FetchState, ReportResult, load_report
from thermoreport.pages import report, states

logger = logging.getLogger(__name__)

_REPORT_PATH = re.compile(r"^/relatorio/([^/]+)/?$")
QUERY_PARAM = "idRelatorio"


def resolve_report_id(pathname: str | None, search: str | None) -> str | None:
    """Report ID from the path segment, else from the query string, else None."""
    match = _REPORT_PATH.match(pathname or "")
    if match:
        report_id = unquote(match.group(1)).strip()
        if report_id:
            return report_id
    values = parse_qs((search or "").lstrip("?")).get(QUERY_PARAM, [])
    for value in values:
        if value.strip():
            return value.strip()
    return None


def render_result(result: ReportResult, lang: str | None = None):
    if result.state is FetchState.NO_ID:
        return states.no_id(lang)
    if result.state is FetchState.FAILED:
        return states.error(result.error or "", lang)
    if result.payload is None:
        return states.no_data(lang)
    return report.layout(build_report_document(result.payload, lang))


def register(app) -> None:
    """Register the report routing callback."""

    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname"),
        Input("url", "search"),
    )
    def display_report(pathname: str | None, search: str | None):
        report_id = resolve_report_id(pathname, search)
        result = load_report(report_id)
        if result.state is FetchState.FAILED:
            logger.error("Report %s could not be loaded: %s", report_id, result.error)
        return render_result(result, settings.LOCALE)
