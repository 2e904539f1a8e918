"""Unit tests for the paginator."""

import pytest

from petadmin.domain.exceptions import ValidationError
from petadmin.domain.service.paginator import paginate, total_pages


class TestTotalPages:

    def test_exact_multiple(self):
        assert total_pages(20, 10) == 2

    def test_rounds_up(self):
        assert total_pages(23, 10) == 3

    def test_empty_still_has_one_page(self):
        assert total_pages(0, 10) == 1

    def test_zero_page_size_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            total_pages(5, 0)


class TestPaginate:

    def test_first_page(self):
        page = paginate(list(range(23)), 10, 1)
        assert page.items == list(range(10))
        assert page.total_pages == 3
        assert page.clamped_page == 1
        assert page.total_items == 23

    def test_last_partial_page(self):
        page = paginate(list(range(23)), 10, 3)
        assert page.items == [20, 21, 22]
        assert page.first_index == 21
        assert page.last_index == 23

    def test_page_beyond_end_is_clamped(self):
        page = paginate(list(range(7)), 10, 3)
        assert page.clamped_page == 1
        assert page.items == list(range(7))

    def test_page_below_one_is_clamped(self):
        page = paginate(list(range(23)), 10, -4)
        assert page.clamped_page == 1

    def test_empty_sequence(self):
        page = paginate([], 10, 2)
        assert page.items == []
        assert page.total_pages == 1
        assert page.clamped_page == 1
        assert page.first_index == 0
        assert page.last_index == 0

    def test_has_next_and_prev(self):
        middle = paginate(list(range(30)), 10, 2)
        assert middle.has_next and middle.has_prev
        last = paginate(list(range(30)), 10, 3)
        assert not last.has_next

    @pytest.mark.parametrize("length", [0, 1, 9, 10, 11, 23, 100])
    @pytest.mark.parametrize("page_size", [1, 3, 10])
    @pytest.mark.parametrize("requested", [-1, 0, 1, 2, 5, 50])
    def test_clamp_invariant(self, length, page_size, requested):
        page = paginate(list(range(length)), page_size, requested)
        assert 1 <= page.clamped_page <= max(1, -(-length // page_size))
        assert len(page.items) <= page_size
