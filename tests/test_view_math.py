"""Tests for the fit-to-bounds resize policy and window sizing."""

import pytest

from siv.types import Bounds
from siv.view_math import effective_scale, fit_to_bounds, window_size_for

FIXED = Bounds.fixed()


def test_fixed_bounds():
    assert (FIXED.max_width, FIXED.max_height) == (2400, 1350)


@pytest.mark.parametrize("size", [(800, 600), (1, 1), (2400, 1350), (2399, 1349)])
def test_images_within_bounds_are_unchanged(size):
    assert fit_to_bounds(*size, FIXED) == size


def test_tall_image_is_clamped_by_height():
    assert fit_to_bounds(1000, 2700, FIXED) == (500, 1350)


def test_wide_image_width_equals_bound_exactly():
    w, h = fit_to_bounds(4800, 1350, FIXED)
    assert w == 2400
    assert h == 675


def test_height_is_clamped_before_width():
    # 6000x2000 -> height clamp gives 4050x1350 -> width clamp gives 2400x800
    assert fit_to_bounds(6000, 2000, FIXED) == (2400, 800)


def test_wide_short_image_only_width_clamped():
    w, h = fit_to_bounds(5000, 500, FIXED)
    assert w == 2400
    assert h == 500 * 2400 // 5000


def test_extreme_aspect_never_collapses_to_zero():
    w, h = fit_to_bounds(100000, 1, FIXED)
    assert (w, h) == (2400, 1)
    w, h = fit_to_bounds(1, 100000, FIXED)
    assert (w, h) == (1, 1350)


@pytest.mark.parametrize("size", [(0, 10), (10, 0), (-1, 5)])
def test_empty_image_rejected(size):
    with pytest.raises(ValueError):
        fit_to_bounds(*size, FIXED)


def test_monitor_bounds_leave_room_for_pane():
    b = Bounds.from_monitor(1920, 1080)
    assert b.max_width == 1728
    assert b.max_height == 972 - 40


def test_effective_scale():
    assert effective_scale(False, 0.4) == 1.0
    assert effective_scale(True, 0.4) == pytest.approx(0.4)


def test_window_size_includes_pane():
    assert window_size_for(1000, 500, 1.0) == (1000, 540)
    assert window_size_for(1000, 500, 0.4) == (400, 240)
