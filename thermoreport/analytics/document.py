"""
thermoreport/analytics/document.py
──────────────────────────────────
Assembles everything the report pages need from one API payload.

build_report_document() is the single entry point used by the page
renderer. It is recomputed on every render and never mutates the payload.

Field precedence:
  - client / user / approver : top-level payload record, then the copy
                               nested in ``relatorio``
  - execution date (letter)  : data_execucao → data_Execucao → dataExe,
                               first non-blank value, shown as sent
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from config.report import (
    DEFAULT_ATTENTION,
    DEFAULT_INSPECTION_TYPE,
    DEFAULT_RESPONSIBLE,
    Signatory,
)
from config.settings import settings
from thermoreport.analytics.dates import format_date, format_month_year
from thermoreport.analytics.equipment import EquipmentRow, project_all, project_critical
from thermoreport.analytics.operational import OperationalCase, select
from thermoreport.analytics.pagination import paginate_default, paginate_with_observation
from thermoreport.analytics.statistics import StatusShare, aggregate
from thermoreport.data.models import Party, ReportPayload, ReportRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportDocument:
    report_number: str
    inspection_type: str
    client: Party | None
    responsible: Signatory
    approver: Signatory | None
    attention: str
    reference_month: str
    letter_date: str
    execution_date: str
    critical_pages: list[list[EquipmentRow]]
    equipment_pages: list[list[EquipmentRow]]
    statistics: list[StatusShare]
    operational_cases: list[OperationalCase]


def _blank(value) -> bool:
    return value is None or str(value).strip() == ""


def report_number(report: ReportRecord) -> str:
    """Report ID and revision joined by a space, blank parts dropped: "8 B"."""
    return " ".join(str(part) for part in (report.id, report.revision) if not _blank(part))


def inspection_type_label(report: ReportRecord) -> str:
    if _blank(report.inspection_type):
        return DEFAULT_INSPECTION_TYPE
    return report.inspection_type.upper()


def execution_date_text(report: ReportRecord) -> str:
    for candidate in (report.execution_date, report.execution_date_alt, report.executed_at):
        if not _blank(candidate):
            return candidate
    return ""


def resolve_parties(payload: ReportPayload) -> tuple[Party | None, Party | None, Party | None]:
    """(client, user, approver), top-level records taking precedence."""
    report = payload.report
    return (
        payload.client or report.client,
        payload.user or report.user,
        payload.approver or report.approver,
    )


def responsible_signatory(user: Party | None) -> Signatory:
    if user is None:
        return DEFAULT_RESPONSIBLE
    return Signatory(
        name=user.name or DEFAULT_RESPONSIBLE.name,
        role=user.department or DEFAULT_RESPONSIBLE.role,
        email=user.email or DEFAULT_RESPONSIBLE.email,
        phones=(user.phone,) if user.phone else DEFAULT_RESPONSIBLE.phones,
    )


def approver_signatory(approver: Party | None) -> Signatory | None:
    if approver is None:
        return None
    return Signatory(
        name=approver.name or "",
        role=approver.department or "",
        email=approver.email or "",
        phones=(approver.phone,) if approver.phone else (),
    )


def build_report_document(payload: ReportPayload, locale: str | None = None) -> ReportDocument:
    locale = locale or settings.LOCALE
    report = payload.report
    readings = payload.readings
    client, user, approver = resolve_parties(payload)
    letter_date = format_date(report.executed_at, locale)

    critical_rows = project_critical(readings)
    all_rows = project_all(readings)
    cases = select(readings, report_date=letter_date)

    logger.debug(
        "Report %s: %d readings, %d in alarm/critical",
        report_number(report), len(readings), len(critical_rows),
    )

    return ReportDocument(
        report_number=report_number(report),
        inspection_type=inspection_type_label(report),
        client=client,
        responsible=responsible_signatory(user),
        approver=approver_signatory(approver),
        attention=(client.contact_person if client and client.contact_person else DEFAULT_ATTENTION),
        reference_month=format_month_year(report.executed_at, locale),
        letter_date=letter_date,
        execution_date=execution_date_text(report),
        critical_pages=paginate_with_observation(critical_rows),
        equipment_pages=paginate_default(all_rows),
        statistics=aggregate(readings),
        operational_cases=cases,
    )
