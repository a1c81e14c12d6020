"""
thermoreport/layout/components/status_chart.py
──────────────────────────────────────────────
Status distribution chart (horizontal bars, one per category) using Plotly.
"""
from __future__ import annotations

import plotly.graph_objects as go
from dash import dcc, html

from config.status import TAG_COLORS
from thermoreport.analytics.statistics import StatusShare

PAGE_BG = "#ffffff"
MUTED = "#6e7781"


def status_figure(shares: list[StatusShare], height: int = 320) -> go.Figure:
    # Plotly draws the first category at the bottom; reverse to keep chart order top-down
    ordered = list(reversed(shares))
    fig = go.Figure(go.Bar(
        x=[s.percentage for s in ordered],
        y=[s.label for s in ordered],
        orientation="h",
        marker={"color": [TAG_COLORS.get(s.color_tag, MUTED) for s in ordered]},
        text=[f"{s.percentage}%" for s in ordered],
        textposition="outside",
        cliponaxis=False,
        hoverinfo="skip",
    ))

    fig.update_layout(
        paper_bgcolor=PAGE_BG,
        plot_bgcolor=PAGE_BG,
        margin=dict(l=20, r=40, t=20, b=20),
        height=height,
        font=dict(color="#24292f", size=12),
        xaxis=dict(range=[0, 110], showgrid=True, gridcolor="#eaeef2", ticksuffix="%"),
        yaxis=dict(showgrid=False),
        showlegend=False,
    )
    return fig


def status_chart(shares: list[StatusShare]) -> html.Div:
    """
    Status summary block: the bar chart plus a label / percentage legend.

    Args:
        shares: Output of analytics.statistics.aggregate(), chart order
    """
    legend = html.Ul(
        [
            html.Li(
                [
                    html.Span(
                        style={
                            "display": "inline-block",
                            "width": "12px",
                            "height": "12px",
                            "marginRight": "8px",
                            "backgroundColor": TAG_COLORS.get(s.color_tag, MUTED),
                        }
                    ),
                    html.Span(s.label, style={"fontWeight": "600"}),
                    html.Span(f" {s.percentage}%", style={"color": MUTED}),
                ],
                style={"listStyle": "none", "marginBottom": "4px"},
            )
            for s in shares
        ],
        style={"paddingLeft": "0"},
    )

    return html.Div(
        [
            html.H2("SITUAÇÃO GERAL DOS EQUIPAMENTOS", className="report-title"),
            dcc.Graph(
                figure=status_figure(shares),
                config={"displayModeBar": False, "staticPlot": True},
            ),
            legend,
        ]
    )
