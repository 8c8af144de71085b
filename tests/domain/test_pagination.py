"""Unit tests for the pagination calculator."""

import pytest

from catview.domain.exceptions import ValidationError
from catview.domain.service.pagination import paginate, total_pages


class TestTotalPages:

    def test_empty_has_one_page(self):
        assert total_pages(0, 10) == 1

    def test_exact_multiple(self):
        assert total_pages(30, 10) == 3

    def test_partial_last_page(self):
        assert total_pages(31, 10) == 4


class TestPaginate:

    def test_last_partial_page(self):
        b = paginate(25, 10, 3)
        assert (b.page, b.total_pages) == (3, 3)
        assert (b.start, b.end) == (20, 25)
        assert (b.display_start, b.display_end) == (21, 25)

    def test_first_page(self):
        b = paginate(25, 10, 1)
        assert (b.start, b.end) == (0, 10)
        assert (b.display_start, b.display_end) == (1, 10)

    def test_empty_count(self):
        b = paginate(0, 10, 1)
        assert b.page == 1
        assert b.total_pages == 1
        assert (b.start, b.end) == (0, 0)
        assert (b.display_start, b.display_end) == (0, 0)

    def test_page_past_end_clamped(self):
        b = paginate(25, 10, 99)
        assert b.page == 3
        assert (b.start, b.end) == (20, 25)

    def test_page_below_one_clamped(self):
        b = paginate(25, 10, -4)
        assert b.page == 1
        assert b.start == 0

    def test_page_on_empty_count_clamped_to_one(self):
        b = paginate(0, 20, 7)
        assert b.page == 1
        assert (b.start, b.end) == (0, 0)

    @pytest.mark.parametrize("count", [0, 1, 9, 10, 11, 49, 50, 51])
    @pytest.mark.parametrize("size", [1, 3, 10, 20, 50])
    @pytest.mark.parametrize("page", [-1, 0, 1, 2, 5, 100])
    def test_bounds_hold(self, count, size, page):
        b = paginate(count, size, page)
        assert 1 <= b.page <= b.total_pages
        assert 0 <= b.start <= b.end <= count
        assert b.end - b.start <= size

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            paginate(-1, 10, 1)

    def test_zero_page_size_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            paginate(10, 0, 1)
