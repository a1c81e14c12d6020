"""
thermoreport/layout/components/equipment_table.py
─────────────────────────────────────────────────
Equipment listing table (one printed page of rows).
"""

from dash import html

from thermoreport.analytics.equipment import EquipmentRow
from thermoreport.layout.components.status_badge import status_badge

BORDER = "#d0d7de"
MUTED = "#6e7781"

_CELL = {"padding": "4px 8px", "borderBottom": f"1px solid {BORDER}", "fontSize": ".78rem"}


def _row(row: EquipmentRow, show_observation: bool) -> html.Tr:
    cells = [
        html.Td(str(row.index), style={**_CELL, "textAlign": "center", "color": MUTED}),
        html.Td(row.name, style=_CELL),
        html.Td(row.sector, style=_CELL),
        html.Td(row.tag, style=_CELL),
        html.Td(status_badge(row.status.value, row.status_label), style=_CELL),
    ]
    if show_observation:
        cells.append(html.Td(row.observation or "", style={**_CELL, "fontWeight": "600"}))
    return html.Tr(cells)


def equipment_table(
    title: str,
    rows: list[EquipmentRow],
    show_observation: bool = False,
) -> html.Div:
    """
    Titled equipment table.

    Args:
        title: Section title printed above the table
        rows: One page of rows (may be empty; the header still renders)
        show_observation: Adds the "Observação" column (critical listing)
    """
    headers = ["Item", "Equipamento", "Setor", "TAG", "Status"]
    if show_observation:
        headers.append("Observação")

    return html.Div(
        [
            html.H2(title, className="report-title"),
            html.Table(
                [
                    html.Thead(
                        html.Tr(
                            [html.Th(h, style={**_CELL, "textAlign": "left"}) for h in headers],
                            style={"color": MUTED, "fontSize": ".68rem", "textTransform": "uppercase"},
                        )
                    ),
                    html.Tbody([_row(r, show_observation) for r in rows]),
                ],
                style={"width": "100%", "borderCollapse": "collapse"},
            ),
        ]
    )
