"""
tests/test_models.py
─────────────────────
Tests for the Pydantic v2 payload models.
"""
import pytest
from pydantic import ValidationError

from thermoreport.data.models import Party, ReportPayload, ThermographyReading


class TestThermographyReading:
    def test_portuguese_wire_keys(self):
        reading = ThermographyReading.model_validate({
            "localizacao": "Cabine", "tag": "QGBT-01", "setor": "Subestação", "status": "Normal",
            "componente": "Barramento", "descricao_problema": "x", "recomendacao": "y",
            "foto_painel": "ir.jpg", "foto_camera": "cam.jpg",
        })
        assert reading.location == "Cabine"
        assert reading.sector == "Subestação"
        assert reading.component == "Barramento"
        assert reading.thermal_image == "ir.jpg"
        assert reading.visible_image == "cam.jpg"

    def test_optional_fields_default_to_none(self):
        reading = ThermographyReading.model_validate({"status": "Normal"})
        assert reading.measured_temp is None
        assert reading.recommendation is None

    def test_null_text_fields_become_blank(self):
        reading = ThermographyReading.model_validate({"localizacao": None, "setor": None, "status": None})
        assert reading.location == ""
        assert reading.status == ""

    def test_numeric_temperature(self):
        reading = ThermographyReading.model_validate({"temp_aquecimento": 98.5, "temp_admissivel": 70})
        assert reading.measured_temp == 98.5
        assert reading.admissible_temp == 70

    def test_frozen(self):
        reading = ThermographyReading.model_validate({"status": "Normal"})
        with pytest.raises(ValidationError):
            reading.status = "Crítico"

    def test_unknown_keys_ignored(self):
        reading = ThermographyReading.model_validate({"status": "Normal", "campo_novo": 1})
        assert not hasattr(reading, "campo_novo")


class TestReportPayload:
    def test_valid_payload(self, payload):
        assert payload.report.id == 8
        assert payload.report.revision == "B"
        assert payload.report.executed_at == "2024-03-15"
        assert payload.client.name == "Metalúrgica Alfa"
        assert payload.user is None
        assert payload.report.user.name == "Usuário Aninhado"
        assert len(payload.readings) == 3

    def test_readings_are_immutable_sequence(self, payload):
        assert isinstance(payload.readings, tuple)

    def test_null_readings(self):
        payload = ReportPayload.model_validate({"relatorio": {"id": 1}, "termografias": None})
        assert payload.readings == ()

    def test_missing_report_rejected(self):
        with pytest.raises(ValidationError):
            ReportPayload.model_validate({"termografias": []})

    def test_populate_by_field_name(self):
        party = Party(name="Ana", phone="123")
        assert party.name == "Ana"
        assert party.phone == "123"
