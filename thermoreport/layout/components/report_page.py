"""
thermoreport/layout/components/report_page.py
─────────────────────────────────────────────
Printed page frame: header, content area, footer.
"""

from dash import html

from config.report import ISSUER_FOOTER, ISSUER_NAME

BORDER = "#d0d7de"
MUTED = "#6e7781"
ACCENT = "#0b4f8a"


def report_header() -> html.Div:
    return html.Div(
        [
            html.Span(ISSUER_NAME, style={"fontWeight": "700", "color": ACCENT}),
            html.Span("Relatório de Manutenção Preditiva", style={"fontSize": ".72rem", "color": MUTED}),
        ],
        style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "borderBottom": f"2px solid {ACCENT}",
            "paddingBottom": "6px",
            "marginBottom": "18px",
        },
    )


def report_footer() -> html.Footer:
    return html.Footer(
        ISSUER_FOOTER,
        style={
            "textAlign": "center",
            "fontSize": ".68rem",
            "color": MUTED,
            "borderTop": f"1px solid {BORDER}",
            "paddingTop": "6px",
            "marginTop": "auto",
        },
    )


def report_page(children, header: bool = True, page_id: str | None = None) -> html.Section:
    """One A4 sheet; ``children`` fill the space between header and footer."""
    body = [report_header()] if header else []
    body.append(html.Div(children, style={"flex": "1"}))
    body.append(report_footer())
    props = {"id": page_id} if page_id else {}
    return html.Section(
        body,
        className="report-page",
        style={
            "display": "flex",
            "flexDirection": "column",
            "backgroundColor": "#ffffff",
            "color": "#24292f",
            "width": "210mm",
            "minHeight": "297mm",
            "margin": "0 auto 24px",
            "padding": "18mm 16mm",
            "boxShadow": "0 1px 6px rgba(0,0,0,.15)",
        },
        **props,
    )
