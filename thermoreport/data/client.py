"""
thermoreport/data/client.py
───────────────────────────
Report API client.

Provides:
  - fetch_report() : GET one report payload and validate it
  - load_report()  : fetch_report() folded into a ReportResult
                     (no_id / failed / resolved) for the page callback

Any transport, HTTP, JSON, or schema problem surfaces as ReportFetchError
carrying a human-readable message; it is shown to the user verbatim and
never retried here.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

import requests
from pydantic import ValidationError

from config.settings import settings
from thermoreport.data.models import ReportPayload

logger = logging.getLogger(__name__)


class ReportFetchError(RuntimeError):
    """The report could not be retrieved or did not match the expected schema."""


class FetchState(str, Enum):
    NO_ID = "no_id"
    PENDING = "pending"
    FAILED = "failed"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class ReportResult:
    state: FetchState
    payload: ReportPayload | None = None
    error: str | None = None


def report_url(report_id: str | int) -> str:
    path = settings.REPORT_ENDPOINT.format(report_id=quote(str(report_id), safe=""))
    return settings.API_BASE_URL.rstrip("/") + "/" + path.lstrip("/")


def fetch_report(report_id: str | int) -> ReportPayload | None:
    """
    Fetch and validate one report.

    Returns None when the API answers with an empty body (unknown report).
    Raises ReportFetchError on any other failure.
    """
    if settings.DEMO_MODE:
        from thermoreport.data.sample import sample_payload

        logger.info("DEMO_MODE: serving sample payload for report %s", report_id)
        return sample_payload(report_id)

    url = report_url(report_id)
    logger.info("Fetching report %s from %s", report_id, url)
    try:
        response = requests.get(
            url,
            headers={"Accept": "application/json"},
            timeout=settings.REQUEST_TIMEOUT_S,
        )
        response.raise_for_status()
        body = response.json()
    except requests.RequestException as exc:
        # JSON decode errors are RequestException subclasses in requests >= 2.27
        logger.warning("Report %s request failed: %s", report_id, exc)
        raise ReportFetchError(str(exc)) from exc

    if not body:
        logger.info("Report %s: empty response", report_id)
        return None

    try:
        return ReportPayload.model_validate(body)
    except ValidationError as exc:
        logger.warning("Report %s payload rejected: %s", report_id, exc)
        raise ReportFetchError(
            f"Resposta inválida para o relatório {report_id}: {exc.error_count()} campo(s) inválido(s)"
        ) from exc


def load_report(report_id: str | None) -> ReportResult:
    if not report_id:
        return ReportResult(state=FetchState.NO_ID)
    try:
        payload = fetch_report(report_id)
    except ReportFetchError as exc:
        return ReportResult(state=FetchState.FAILED, error=str(exc))
    return ReportResult(state=FetchState.RESOLVED, payload=payload)
