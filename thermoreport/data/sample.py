"""
thermoreport/data/sample.py
───────────────────────────
Synthetic report payload for DEMO_MODE and local development.

Generates one client, a responsible user, an approver, and a plant walk of
thermography readings whose statuses follow a realistic mix (mostly normal,
a few in alarm, one or two critical, some under maintenance or switched off).
Reproducible with SAMPLE_SEED.
"""
from __future__ import annotations

import numpy as np

from config.settings import settings
from thermoreport.data.models import ReportPayload

# ── Plant layout: (sector, location, tag prefix, component) ───────────────────
PLANT_POINTS: list[tuple[str, str, str, str]] = [
    ("Subestação", "Cabine Primária", "QGBT", "Barramento"),
    ("Subestação", "Transformador TR-01", "TR", "Bucha de BT"),
    ("Utilidades", "Painel Compressores", "CCM", "Contator"),
    ("Utilidades", "Casa de Bombas", "QDF", "Disjuntor"),
    ("Produção", "Linha de Extrusão", "CCM", "Fusível NH"),
    ("Produção", "Prensa Hidráulica", "QD", "Borne"),
    ("Produção", "Forno Elétrico", "QF", "Cabo de força"),
    ("Expedição", "Iluminação Galpão", "QDL", "Disjuntor"),
]

# Upstream status vocabulary and its sampling weights
STATUS_WEIGHTS: dict[str, float] = {
    "Normal": 0.62,
    "Alarme": 0.16,
    "Crítico": 0.07,
    "Manutenção": 0.08,
    "Desligado": 0.07,
}

_PROBLEMS = [
    "Aquecimento anormal na conexão da fase R",
    "Desequilíbrio térmico entre fases",
    "Mau contato no terminal de saída",
]
_RECOMMENDATIONS = [
    "Reapertar conexões e verificar torque",
    "Substituir terminal e limpar contatos",
    None,  # some readings arrive without a recommendation
]


def _readings(n_readings: int, rng: np.random.Generator) -> list[dict]:
    statuses = list(STATUS_WEIGHTS)
    weights = np.array(list(STATUS_WEIGHTS.values()))
    weights = weights / weights.sum()

    readings = []
    for i in range(n_readings):
        sector, location, prefix, component = PLANT_POINTS[i % len(PLANT_POINTS)]
        status = str(rng.choice(statuses, p=weights))
        admissible = float(rng.choice([70.0, 75.0, 90.0]))
        reading: dict = {
            "id": 1000 + i,
            "localizacao": location,
            "tag": f"{prefix}-{i + 1:02d}",
            "setor": sector,
            "status": status,
        }
        if status in ("Alarme", "Crítico"):
            excess = rng.uniform(5.0, 15.0) if status == "Alarme" else rng.uniform(20.0, 60.0)
            reading.update(
                componente=component,
                temp_aquecimento=round(admissible + excess, 1),
                temp_admissivel=admissible,
                descricao_problema=str(rng.choice(_PROBLEMS)),
                recomendacao=_RECOMMENDATIONS[int(rng.integers(len(_RECOMMENDATIONS)))],
            )
        readings.append(reading)
    return readings


def sample_payload(
    report_id: str | int = 8,
    n_readings: int = 24,
    seed: int | None = None,
) -> ReportPayload:
    """Build a validated demo payload for ``report_id``."""
    rng = np.random.default_rng(settings.SAMPLE_SEED if seed is None else seed)
    body = {
        "relatorio": {
            "id": report_id,
            "num_revisao": "R01",
            "dataExe": "2024-03-15",
            "tipo": "Termográfica",
        },
        "cliente": {
            "nome": "Indústria Exemplo Ltda.",
            "cidade": "Jundiaí",
            "estado": "SP",
            "pessoa_contato": "Eng. Carla Mendes",
            "departamento_contato": "Manutenção Elétrica",
            "email": "manutencao@exemplo.com.br",
            "telefone": "(11) 4523-0000",
        },
        "usuario": {
            "nome": "Rafael Souza",
            "departamento": "DEPTO. DE PREDITIVA",
            "email": "rafael@jundpred.com.br",
            "telefone": "Tel.: (11) 2817-0616",
        },
        "aprovador": {
            "nome": "Marina Alves",
            "departamento": "Coordenação Técnica",
            "email": "marina@jundpred.com.br",
            "telefone": "Tel.: (11) 2817-0616",
        },
        "termografias": _readings(n_readings, rng),
    }
    return ReportPayload.model_validate(body)
