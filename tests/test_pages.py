"""
tests/test_pages.py
───────────────────
Structure tests for the rendered report (component tree, no browser).
"""
from config.report import TEMPERATURE_REFERENCE
from thermoreport.analytics.document import build_report_document
from thermoreport.data.models import ReportPayload, ReportRecord
from thermoreport.layout.components.status_chart import status_figure
from thermoreport.layout.main import create_layout
from thermoreport.pages import report


def _page_ids(layout) -> list[str]:
    return [page.id for page in layout.children]


class TestReportLayout:
    def test_page_sequence(self, payload):
        ids = _page_ids(report.layout(build_report_document(payload)))
        assert ids == [
            "page-cover",
            "page-letter",
            "page-technical",
            "page-temperature",
            "page-critical-0",
            "page-equipment-0",
            "page-status",
            "page-operational-divider",
            "page-ro-01",
            "page-ro-02",
            "page-closing",
            "page-services",
        ]

    def test_no_operational_section_without_cases(self, make_reading):
        payload = ReportPayload(relatorio=ReportRecord(id=1), termografias=[make_reading("Normal")])
        ids = _page_ids(report.layout(build_report_document(payload)))
        assert "page-operational-divider" not in ids
        assert "page-critical-0" in ids  # empty listing still gets its page

    def test_one_page_per_chunk(self, make_reading):
        readings = [make_reading("Normal", i) for i in range(1, 32)]
        payload = ReportPayload(relatorio=ReportRecord(id=1), termografias=readings)
        ids = _page_ids(report.layout(build_report_document(payload)))
        assert [i for i in ids if i.startswith("page-equipment-")] == [
            "page-equipment-0", "page-equipment-1", "page-equipment-2",
        ]

    def test_temperature_reference_lists_every_component(self):
        page = str(report.temperature_reference_page())
        assert all(component in page for component, _ in TEMPERATURE_REFERENCE)

    def test_cover_shows_reference_month(self, payload):
        cover = report.cover_page(build_report_document(payload))
        assert "março 2024" in str(cover)


class TestStatusFigure:
    def test_bars_top_down_in_chart_order(self, payload):
        fig = status_figure(build_report_document(payload).statistics)
        assert list(fig.data[0].y) == ["CRÍTICO", "ALARME", "DESLIGADOS", "EM MANUTENÇÃO", "NORMAIS"]


class TestMainLayout:
    def test_has_router_and_content(self):
        layout = str(create_layout())
        assert "url" in layout
        assert "page-content" in layout
