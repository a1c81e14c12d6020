"""
tests/test_statistics.py
────────────────────────
Tests for the status distribution aggregator.
"""
from config.status import CHART_ORDER, StatusCategory
from thermoreport.analytics.statistics import (
    StatusShare,
    aggregate,
    count_by_category,
    round_half_up,
)


def _as_dict(shares: list[StatusShare]) -> dict[StatusCategory, int]:
    return {s.category: s.percentage for s in shares}


class TestRoundHalfUp:
    def test_half_rounds_up(self):
        assert round_half_up(12.5) == 13
        assert round_half_up(0.5) == 1

    def test_below_half(self):
        assert round_half_up(33.333) == 33


class TestCountByCategory:
    def test_counts_sum_to_total(self, mixed_readings):
        counts = count_by_category(mixed_readings)
        assert sum(counts.values()) == len(mixed_readings)

    def test_every_category_present(self, make_reading):
        counts = count_by_category([make_reading("Normal")])
        assert set(counts) == set(StatusCategory)
        assert counts[StatusCategory.NORMAL] == 1
        assert counts[StatusCategory.CRITICAL] == 0

    def test_empty(self):
        assert sum(count_by_category([]).values()) == 0


class TestAggregate:
    def test_three_readings_rounded_independently(self, make_reading):
        readings = [make_reading("normal", 1), make_reading("crítico", 2), make_reading("alarme", 3)]
        assert _as_dict(aggregate(readings)) == {
            StatusCategory.NORMAL: 33,
            StatusCategory.MAINTENANCE: 0,
            StatusCategory.OFF: 0,
            StatusCategory.ALERT: 33,
            StatusCategory.CRITICAL: 33,
        }

    def test_fixed_presentation_order(self, make_reading):
        readings = [make_reading("Crítico", 1), make_reading("Desligado", 2), make_reading("Normal", 3)]
        assert [s.category for s in aggregate(readings)] == CHART_ORDER

    def test_labels_and_color_tags(self, make_reading):
        shares = aggregate([make_reading("Normal")])
        assert [s.label for s in shares] == ["NORMAIS", "EM MANUTENÇÃO", "DESLIGADOS", "ALARME", "CRÍTICO"]
        assert [s.color_tag for s in shares] == ["success", "muted", "border", "warning", "destructive"]

    def test_empty_is_all_zero(self):
        shares = aggregate([])
        assert len(shares) == 5
        assert all(s.percentage == 0 for s in shares)

    def test_single_category_is_hundred(self, make_reading):
        shares = _as_dict(aggregate([make_reading("Normal", i) for i in range(1, 5)]))
        assert shares[StatusCategory.NORMAL] == 100

    def test_half_up_rounding(self, make_reading):
        readings = [make_reading("Alarme", 1)] + [make_reading("Normal", i) for i in range(2, 9)]
        shares = _as_dict(aggregate(readings))
        assert shares[StatusCategory.ALERT] == 13  # 12.5 %
        assert shares[StatusCategory.NORMAL] == 88  # 87.5 %

    def test_unknown_status_counted_as_default(self, make_reading):
        shares = _as_dict(aggregate([make_reading("???")]))
        assert shares[StatusCategory.NORMAL] == 100
