"""Tests for VisitDebouncePolicy."""

from rules_site.domain.policies.debounce import is_within_cooldown


def test_no_previous_increment_never_debounces():
    assert is_within_cooldown(None, 10_000, 2.0) is False


def test_inside_window():
    assert is_within_cooldown(10_000, 11_999, 2.0) is True


def test_window_boundary_is_accepted():
    assert is_within_cooldown(10_000, 12_000, 2.0) is False


def test_clock_moved_backwards_debounces():
    assert is_within_cooldown(10_000, 9_000, 2.0) is True
