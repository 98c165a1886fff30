"""pagination モジュールのユニットテスト."""

import pytest

from product_table.pagination import page_window, plan


class TestPlan:
    """plan のテスト."""

    def test_zero_items(self):
        for page in [-5, 0, 1, 3, 100]:
            p = plan(0, 10, page)
            assert p.current_page == 1
            assert p.total_pages == 1
            assert (p.start, p.end) == (0, 0)
            assert p.page_numbers is None
            assert not p.has_prev
            assert not p.has_next

    def test_clamp_to_last_page(self):
        p = plan(95, 10, 50)

        assert p.current_page == 10
        assert p.total_pages == 10
        assert (p.start, p.end) == (90, 95)

    def test_clamp_below_one(self):
        p = plan(95, 10, 0)

        assert p.current_page == 1
        assert (p.start, p.end) == (0, 10)

    def test_three_pages(self):
        p = plan(25, 10, 1)

        assert p.total_pages == 3
        assert p.page_numbers == [1, 2, 3]
        assert not p.has_prev
        assert p.has_next

    def test_last_page_flags(self):
        p = plan(25, 10, 3)

        assert p.has_prev
        assert not p.has_next
        assert (p.start, p.end) == (20, 25)

    def test_single_page_has_no_controls(self):
        p = plan(10, 10, 1)

        assert p.total_pages == 1
        assert p.page_numbers is None

    def test_invalid_page_size(self):
        with pytest.raises(ValueError):
            plan(10, 0, 1)


class TestPageWindow:
    """page_window のテスト."""

    def test_middle(self):
        """中央のページでは両側に省略記号が入ること."""
        assert plan(1000, 10, 50).page_numbers == [1, "...", 47, 48, 49, 50, 51, 52, 53, "...", 100]

    def test_start(self):
        assert page_window(1, 100) == [1, 2, 3, 4, 5, 6, 7, "...", 100]

    def test_end_shifts_left(self):
        """末尾付近では幅 7 になるよう左にずらすこと."""
        assert page_window(100, 100) == [1, "...", 94, 95, 96, 97, 98, 99, 100]

    def test_adjacent_first_page_without_ellipsis(self):
        assert page_window(5, 20) == [1, 2, 3, 4, 5, 6, 7, 8, "...", 20]

    def test_adjacent_last_page_without_ellipsis(self):
        assert page_window(16, 20) == [1, "...", 13, 14, 15, 16, 17, 18, 19, 20]

    def test_exactly_window_width(self):
        assert page_window(4, 7) == [1, 2, 3, 4, 5, 6, 7]

    def test_one_more_than_window(self):
        assert page_window(1, 8) == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_single_page(self):
        assert page_window(1, 1) is None
