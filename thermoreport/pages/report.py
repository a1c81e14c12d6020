"""
thermoreport/pages/report.py
────────────────────────────
Full report document: one html.Section per printed page.

Page sequence:
  cover → letter → technical principles → temperature reference →
  alarm/critical listing pages →
  general listing pages → status summary → [R.O. divider → one page per
  operational case] → final considerations → services
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from config.report import (
    CLOSING_TEXT,
    COMMERCIAL_SIGNATORY,
    ISSUER_CITY,
    LOCATION_CRITERIA,
    SERVICES,
    TECHNICAL_SECTIONS,
    TEMPERATURE_REFERENCE,
    TEMPERATURE_REFERENCE_NOTE,
    TEMPERATURE_REFERENCE_TITLE,
    Signatory,
)
from thermoreport.analytics.document import ReportDocument
from thermoreport.layout.components.equipment_table import equipment_table
from thermoreport.layout.components.operational_report import operational_report
from thermoreport.layout.components.report_page import ACCENT, MUTED, report_page
from thermoreport.layout.components.status_chart import status_chart

CRITICAL_TITLE = "RESUMO DOS EQUIPAMENTOS EM ALARME / CRÍTICOS"
GENERAL_TITLE = "LISTAGEM GERAL DOS EQUIPAMENTOS"


def _signature(signatory: Signatory) -> html.Div:
    lines = [
        html.P(signatory.name, style={"fontWeight": "600", "margin": "0"}),
        html.P(signatory.role, style={"color": MUTED, "fontSize": ".85rem", "margin": "0"}),
    ]
    if signatory.email:
        lines.append(html.P(signatory.email, style={"fontSize": ".85rem", "margin": "6px 0 0"}))
    lines.extend(html.P(phone, style={"fontSize": ".85rem", "margin": "0"}) for phone in signatory.phones)
    return html.Div(lines, style={"borderLeft": f"4px solid {ACCENT}", "paddingLeft": "12px"})


def cover_page(doc: ReportDocument) -> html.Section:
    client = doc.client
    children = [
        html.Div(
            [
                html.H2("RELATÓRIO DE MANUTENÇÃO PREDITIVA", style={"fontWeight": "700"}),
                html.P(f"REF. INSPEÇÃO {doc.inspection_type}", style={"fontSize": "1.1rem"}),
                html.P(f"Nº {doc.report_number}", style={"opacity": ".8"}),
            ],
            style={"backgroundColor": ACCENT, "color": "#ffffff", "padding": "16px 24px",
                   "borderRadius": "8px", "marginBottom": "32px"},
        ),
    ]
    if client and client.logo:
        children.append(html.Img(src=client.logo, alt=client.name or "", style={"height": "80px", "marginBottom": "32px"}))
    if client:
        children.append(html.Div(
            [
                html.H3("Cliente / Unidade", style={"fontSize": "1rem", "color": ACCENT}),
                html.P(f"{client.name or ''} - {client.city or ''}/{client.state or ''}", style={"fontWeight": "700"}),
            ],
            style={"marginBottom": "24px"},
        ))
    children.append(html.Div(
        [
            html.P("Mês de Referência", style={"color": MUTED, "fontSize": ".85rem", "margin": "0"}),
            html.P(doc.reference_month, style={"fontWeight": "600"}),
        ]
    ))
    return report_page(html.Div(children, style={"textAlign": "center"}), header=False, page_id="page-cover")


def letter_page(doc: ReportDocument) -> html.Section:
    client = doc.client
    recipient = [
        html.P("A/C:", style={"color": MUTED, "fontSize": ".85rem", "margin": "0"}),
        html.P(doc.attention, style={"fontWeight": "600", "margin": "0"}),
    ]
    if client and client.contact_department:
        recipient.append(html.P(client.contact_department, style={"color": MUTED, "fontSize": ".85rem"}))
    if client:
        recipient.append(html.Div(
            [
                html.P(client.name or "", style={"fontWeight": "500", "margin": "8px 0 0"}),
                html.P(client.email or "", style={"color": MUTED, "margin": "0"}),
                html.P(client.phone or "", style={"color": MUTED, "margin": "0"}),
            ],
            style={"fontSize": ".85rem"},
        ))

    return report_page(
        [
            html.P(f"{ISSUER_CITY}, {doc.letter_date}.", style={"textAlign": "right", "color": MUTED}),
            html.Div(recipient, style={"marginBottom": "32px"}),
            html.P(
                [
                    "Referente à inspeção realizada nos equipamentos na data de ",
                    html.Strong(doc.execution_date),
                    ".",
                    html.Br(),
                    "Relatório Nº ",
                    html.Strong(doc.report_number),
                    ".",
                ],
                style={"marginBottom": "32px"},
            ),
            html.P("Atenciosamente,"),
            _signature(COMMERCIAL_SIGNATORY),
        ],
        page_id="page-letter",
    )


def technical_page() -> html.Section:
    sections = [
        html.Div([html.H3(title, className="report-subtitle"), html.P(text)], className="report-section")
        for title, text in TECHNICAL_SECTIONS
    ]
    criteria = [
        html.Div([html.P(f"3.{i}", style={"color": ACCENT, "fontWeight": "500", "margin": "0"}), html.P(text)])
        for i, text in enumerate(LOCATION_CRITERIA, start=1)
    ]
    sections.append(html.Div(
        [html.H3("3 - CRITÉRIOS DE LOCALIZAÇÃO DE PONTOS AQUECIDOS", className="report-subtitle"), *criteria],
        className="report-section",
    ))
    return report_page(
        [html.H2("RELATÓRIO DE INSPEÇÃO TERMOGRÁFICA", className="report-title"), *sections],
        page_id="page-technical",
    )


def temperature_reference_page() -> html.Section:
    cell = {"padding": "6px 10px", "borderBottom": "1px solid #d0d7de", "fontSize": ".85rem"}
    rows = [
        html.Tr([
            html.Td(component, style=cell),
            html.Td(limit, style={**cell, "textAlign": "center", "fontWeight": "600"}),
        ])
        for component, limit in TEMPERATURE_REFERENCE
    ]
    header = html.Tr([
        html.Th("Componente", style=cell),
        html.Th("Temperatura máxima", style={**cell, "textAlign": "center"}),
    ])
    return report_page(
        [
            html.H2(TEMPERATURE_REFERENCE_TITLE, className="report-title"),
            html.Table([html.Thead(header), html.Tbody(rows)], style={"width": "100%", "marginBottom": "16px"}),
            html.P(TEMPERATURE_REFERENCE_NOTE, style={"color": MUTED, "fontSize": ".8rem"}),
        ],
        page_id="page-temperature",
    )


def operational_divider_page() -> html.Section:
    return report_page(
        html.Div(
            [
                html.H2("RELATÓRIOS OPERACIONAIS", className="report-title", style={"fontSize": "1.8rem"}),
                html.P("Detalhamento das ocorrências encontradas durante a inspeção termográfica",
                       style={"color": MUTED}),
            ],
            style={"textAlign": "center", "paddingTop": "35%"},
        ),
        page_id="page-operational-divider",
    )


def closing_page(doc: ReportDocument) -> html.Section:
    children = [
        html.H2("CONSIDERAÇÕES FINAIS", className="report-title"),
        html.Div(
            [
                html.P(CLOSING_TEXT),
                html.P("Muito obrigado pela confiança.", style={"color": ACCENT, "fontWeight": "600"}),
            ],
            style={"backgroundColor": "#f6f8fa", "borderRadius": "8px", "padding": "20px", "marginBottom": "32px"},
        ),
        html.P("Atenciosamente,"),
        _signature(doc.responsible),
    ]
    if doc.approver is not None:
        children.extend([html.P("Aprovado por,", style={"marginTop": "32px"}), _signature(doc.approver)])
    return report_page(children, page_id="page-closing")


def services_page() -> html.Section:
    cards = [
        dbc.Col(
            html.Div(
                [
                    html.H4(title, style={"fontSize": ".95rem", "color": ACCENT, "fontWeight": "600"}),
                    html.P(desc, style={"fontSize": ".8rem", "color": MUTED, "margin": "0"}),
                ],
                className="info-card",
                style={"border": "1px solid #d0d7de", "borderRadius": "8px", "padding": "12px", "height": "100%"},
            ),
            xs=6,
        )
        for title, desc in SERVICES
    ]
    return report_page(
        [html.H2("NOSSOS SERVIÇOS", className="report-title"), dbc.Row(cards, className="g-3")],
        page_id="page-services",
    )


def layout(doc: ReportDocument) -> html.Div:
    pages = [cover_page(doc), letter_page(doc), technical_page(), temperature_reference_page()]

    pages.extend(
        report_page(equipment_table(CRITICAL_TITLE, rows, show_observation=True), page_id=f"page-critical-{i}")
        for i, rows in enumerate(doc.critical_pages)
    )
    pages.extend(
        report_page(equipment_table(GENERAL_TITLE, rows), page_id=f"page-equipment-{i}")
        for i, rows in enumerate(doc.equipment_pages)
    )
    pages.append(report_page(status_chart(doc.statistics), page_id="page-status"))

    if doc.operational_cases:
        pages.append(operational_divider_page())
        pages.extend(
            report_page(operational_report(case), page_id=f"page-ro-{case.case_id}")
            for case in doc.operational_cases
        )

    pages.extend([closing_page(doc), services_page()])
    return html.Div(pages, className="a4-container", style={"padding": "2rem 0"})
