"""
tests/test_document.py
──────────────────────
Tests for report document assembly.
"""
from config.report import DEFAULT_ATTENTION, DEFAULT_INSPECTION_TYPE, DEFAULT_RESPONSIBLE
from thermoreport.analytics.document import (
    build_report_document,
    execution_date_text,
    inspection_type_label,
    report_number,
    resolve_parties,
    responsible_signatory,
)
from thermoreport.data.models import Party, ReportPayload, ReportRecord


class TestReportNumber:
    def test_id_and_revision(self):
        assert report_number(ReportRecord(id=8, num_revisao="B")) == "8 B"

    def test_blank_revision_dropped(self):
        assert report_number(ReportRecord(id=8, num_revisao="  ")) == "8"

    def test_zero_revision_kept(self):
        assert report_number(ReportRecord(id=8, num_revisao=0)) == "8 0"

    def test_nothing(self):
        assert report_number(ReportRecord()) == ""


class TestInspectionType:
    def test_uppercased(self):
        assert inspection_type_label(ReportRecord(tipo="termográfica")) == "TERMOGRÁFICA"

    def test_default(self):
        assert inspection_type_label(ReportRecord()) == DEFAULT_INSPECTION_TYPE


class TestExecutionDate:
    def test_snake_case_field_wins(self):
        record = ReportRecord(data_execucao="10/03/2024", data_Execucao="11/03/2024", dataExe="2024-03-12")
        assert execution_date_text(record) == "10/03/2024"

    def test_camel_variant_second(self):
        record = ReportRecord(data_Execucao="11/03/2024", dataExe="2024-03-12")
        assert execution_date_text(record) == "11/03/2024"

    def test_raw_date_last(self):
        assert execution_date_text(ReportRecord(data_execucao="", dataExe="2024-03-12")) == "2024-03-12"

    def test_none(self):
        assert execution_date_text(ReportRecord()) == ""


class TestParties:
    def test_top_level_takes_precedence(self, payload):
        client, user, approver = resolve_parties(payload)
        assert client.name == "Metalúrgica Alfa"
        assert approver.name == "Ana Lima"

    def test_nested_used_when_top_level_missing(self, payload):
        _, user, _ = resolve_parties(payload)
        assert user.name == "Usuário Aninhado"

    def test_responsible_fallbacks(self):
        signatory = responsible_signatory(Party(nome="Rafael"))
        assert signatory.name == "Rafael"
        assert signatory.role == DEFAULT_RESPONSIBLE.role
        assert signatory.email == DEFAULT_RESPONSIBLE.email

    def test_no_user_uses_default_responsible(self):
        assert responsible_signatory(None) == DEFAULT_RESPONSIBLE


class TestBuildReportDocument:
    def test_header_fields(self, payload):
        doc = build_report_document(payload)
        assert doc.report_number == "8 B"
        assert doc.inspection_type == "TERMOGRÁFICA"
        assert doc.reference_month == "março 2024"
        assert doc.letter_date == "15/03/2024"
        assert doc.execution_date == "2024-03-15"
        assert doc.attention == "Eng. Paulo"

    def test_iso_date_with_small_day(self, report_body):
        report_body["relatorio"]["dataExe"] = "2024-03-05"
        doc = build_report_document(ReportPayload.model_validate(report_body))
        assert doc.reference_month == "março 2024"
        assert doc.letter_date == "05/03/2024"
        assert doc.operational_cases[0].date == "05/03/2024"

    def test_listings(self, payload):
        doc = build_report_document(payload)
        assert len(doc.critical_pages) == 1
        assert [r.observation for r in doc.critical_pages[0]] == ["VIDE R.O. 01", "VIDE R.O. 02"]
        assert [r.index for r in doc.equipment_pages[0]] == [1, 2, 3]

    def test_statistics(self, payload):
        doc = build_report_document(payload)
        assert [s.percentage for s in doc.statistics] == [33, 0, 0, 33, 33]

    def test_operational_cases(self, payload):
        doc = build_report_document(payload)
        assert [c.case_id for c in doc.operational_cases] == ["01", "02"]
        assert doc.operational_cases[0].date == "15/03/2024"
        assert doc.operational_cases[0].urgency == "INTERVENÇÃO IMEDIATA"
        assert doc.operational_cases[1].urgency == "INTERVENÇÃO PROGRAMADA"
        assert doc.operational_cases[1].problem == "Desequilíbrio entre fases"

    def test_empty_readings(self):
        doc = build_report_document(ReportPayload.model_validate({"relatorio": {"id": 1}}))
        assert doc.critical_pages == [[]]
        assert doc.equipment_pages == [[]]
        assert all(s.percentage == 0 for s in doc.statistics)
        assert doc.operational_cases == []
        assert doc.reference_month == ""
        assert doc.attention == DEFAULT_ATTENTION
        assert doc.approver is None

    def test_many_readings_paginated(self, make_reading):
        readings = [make_reading("Alarme" if i % 2 else "Normal", i) for i in range(1, 31)]
        payload = ReportPayload(relatorio=ReportRecord(id=2), termografias=readings)
        doc = build_report_document(payload)
        assert [len(p) for p in doc.critical_pages] == [13, 2]
        assert [len(p) for p in doc.equipment_pages] == [15, 15]
        assert doc.critical_pages[1][-1].observation == "VIDE R.O. 15"

    def test_payload_unchanged(self, payload):
        before = payload.model_dump()
        build_report_document(payload)
        assert payload.model_dump() == before
