"""
tests/test_pagination.py
────────────────────────
Tests for page chunking.
"""
import pytest

from config.settings import settings
from thermoreport.analytics.pagination import (
    paginate,
    paginate_default,
    paginate_with_observation,
)


class TestPaginate:
    @pytest.mark.parametrize("n_rows,page_size", [(1, 1), (10, 3), (15, 15), (16, 15), (40, 13)])
    def test_concatenation_reconstructs_input(self, n_rows, page_size):
        rows = list(range(n_rows))
        pages = paginate(rows, page_size)
        assert [row for page in pages for row in page] == rows

    def test_full_pages_except_last(self):
        pages = paginate(list(range(10)), 3)
        assert [len(p) for p in pages] == [3, 3, 3, 1]

    def test_exact_multiple_has_no_empty_tail(self):
        assert len(paginate(list(range(30)), 15)) == 2

    def test_empty_input_yields_one_empty_page(self):
        assert paginate([], 13) == [[]]

    def test_zero_page_size_returns_single_page(self):
        rows = [1, 2, 3]
        assert paginate(rows, 0) == [rows]

    def test_negative_page_size_returns_single_page(self):
        assert paginate([1, 2], -5) == [[1, 2]]

    def test_input_not_mutated(self):
        rows = [1, 2, 3, 4]
        paginate(rows, 3)
        assert rows == [1, 2, 3, 4]


class TestConfiguredSizes:
    def test_observation_tables_use_smaller_pages(self):
        assert settings.ROWS_PER_PAGE_OBSERVATION == 13
        assert settings.ROWS_PER_PAGE == 15
        assert [len(p) for p in paginate_with_observation(list(range(14)))] == [13, 1]

    def test_default_tables(self):
        assert [len(p) for p in paginate_default(list(range(16)))] == [15, 1]
