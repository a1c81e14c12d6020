"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the report renderer test suite.
"""
import os

import pytest

# Never hit a real API from tests
os.environ.setdefault("DEMO_MODE", "false")
os.environ.setdefault("LOCALE", "pt-BR")
os.environ.setdefault("API_BASE_URL", "http://api.test")


@pytest.fixture
def make_reading():
    """Factory for ThermographyReading with sensible defaults."""
    from thermoreport.data.models import ThermographyReading

    def _make(status: str = "Normal", n: int = 1, **fields):
        data = {
            "id": n,
            "localizacao": f"Painel {n}",
            "tag": f"QD-{n:02d}",
            "setor": "Produção",
            "status": status,
        }
        data.update(fields)
        return ThermographyReading.model_validate(data)

    return _make


@pytest.fixture
def mixed_readings(make_reading):
    """Six readings; alarm/critical at positions 2, 4 and 6."""
    return [
        make_reading("Normal", 1),
        make_reading("Alarme", 2, temp_aquecimento=82.4, temp_admissivel=70),
        make_reading("Manutenção", 3),
        make_reading("Crítico", 4, temp_aquecimento=120, temp_admissivel=90,
                     descricao_problema="Conexão oxidada", recomendacao="Substituir terminal"),
        make_reading("Desligado", 5),
        make_reading("ALERTA", 6),
    ]


@pytest.fixture
def report_body() -> dict:
    """Raw API response as sent by the report service."""
    return {
        "relatorio": {
            "id": 8,
            "num_revisao": "B",
            "dataExe": "2024-03-15",
            "tipo": "termográfica",
            "cliente": {"nome": "Cliente Aninhado", "cidade": "Campinas", "estado": "SP"},
            "usuario": {"nome": "Usuário Aninhado"},
        },
        "cliente": {
            "nome": "Metalúrgica Alfa",
            "cidade": "Jundiaí",
            "estado": "SP",
            "pessoa_contato": "Eng. Paulo",
            "email": "paulo@alfa.com.br",
            "telefone": "(11) 4000-0000",
        },
        "usuario": None,
        "aprovador": {"nome": "Ana Lima", "departamento": "Coordenação", "email": "ana@jundpred.com.br"},
        "termografias": [
            {"id": 11, "localizacao": "Cabine", "tag": "QGBT-01", "setor": "Subestação", "status": "Normal"},
            {"id": 12, "localizacao": "Compressor", "tag": "CCM-02", "setor": "Utilidades", "status": "Crítico",
             "componente": "Contator K1", "temp_aquecimento": 98.5, "temp_admissivel": 70,
             "foto_painel": "/img/12-ir.jpg", "foto_camera": "/img/12.jpg"},
            {"id": 13, "localizacao": "Bombas", "tag": "QDF-03", "setor": "Utilidades", "status": "alarme",
             "observacao": "Desequilíbrio entre fases"},
        ],
    }


@pytest.fixture
def payload(report_body):
    from thermoreport.data.models import ReportPayload
    return ReportPayload.model_validate(report_body)
