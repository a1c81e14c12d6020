"""
thermoreport/layout/components/operational_report.py
────────────────────────────────────────────────────
Operational report ("R.O.") sheet for one alarm/critical reading.
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from config.status import STATUS_COLORS, URGENCY_IMMEDIATE
from thermoreport.analytics.operational import OperationalCase
from thermoreport.layout.components.status_badge import status_badge

BORDER = "#d0d7de"
MUTED = "#6e7781"


def _field(label: str, value) -> html.Div:
    return html.Div(
        [
            html.Div(label, style={"fontSize": ".62rem", "color": MUTED, "textTransform": "uppercase"}),
            html.Div(value, style={"fontSize": ".85rem", "fontWeight": "600"}),
        ],
        style={"padding": "4px 0"},
    )


def _image(src: str, caption: str) -> html.Figure:
    body = (
        html.Img(src=src, alt=caption, style={"width": "100%", "height": "200px", "objectFit": "cover"})
        if src
        else html.Div("Imagem indisponível", style={"height": "200px", "color": MUTED, "border": f"1px dashed {BORDER}",
                                                    "display": "flex", "alignItems": "center", "justifyContent": "center"})
    )
    return html.Figure([body, html.Figcaption(caption, style={"fontSize": ".7rem", "color": MUTED})])


def _readings_table(case: OperationalCase) -> html.Table | html.Div:
    if not case.readings:
        return html.Div()
    return html.Table(
        [html.Tr([html.Td(label), html.Td(value, style={"fontWeight": "600"})]) for label, value in case.readings],
        style={"width": "100%", "fontSize": ".8rem", "marginBottom": "8px"},
    )


def operational_report(case: OperationalCase) -> html.Div:
    urgency_color = STATUS_COLORS["critical"] if case.urgency == URGENCY_IMMEDIATE else STATUS_COLORS["alert"]

    return html.Div(
        [
            html.Div(
                [
                    html.H2(f"RELATÓRIO OPERACIONAL Nº {case.case_id}", className="report-title"),
                    status_badge(case.status.value),
                ],
                style={"display": "flex", "justifyContent": "space-between", "alignItems": "center"},
            ),
            dbc.Row(
                [
                    dbc.Col(_field("Área", case.area), xs=6),
                    dbc.Col(_field("Data", case.date), xs=6),
                    dbc.Col(_field("Equipamento", case.equipment), xs=6),
                    dbc.Col(_field("Componentes", case.components), xs=6),
                    dbc.Col(_field("Emissividade", case.emissivity), xs=3),
                    dbc.Col(_field("Distância", case.distance), xs=3),
                    dbc.Col(_field("Temp. Máxima", case.max_temp), xs=3),
                    dbc.Col(_field("Temp. Máx. Admissível", case.max_admissible_temp), xs=3),
                ],
                className="g-2 mb-2",
            ),
            dbc.Row(
                [
                    dbc.Col(_image(case.thermal_image, "Imagem termográfica"), xs=6),
                    dbc.Col(_image(case.visible_image, "Imagem real"), xs=6),
                ],
                className="g-2 mb-2",
            ),
            _readings_table(case),
            _field("Problema encontrado", case.problem),
            _field(
                "Classificação",
                html.Span(case.urgency, style={"color": urgency_color, "fontWeight": "700"}),
            ),
            html.Div(
                [
                    html.Div("Recomendações", style={"fontSize": ".62rem", "color": MUTED, "textTransform": "uppercase"}),
                    html.Ul([html.Li(text) for text in case.recommendations], style={"fontSize": ".85rem"}),
                ]
            ),
        ]
    )
