"""Tests for field normalization."""

import pytest

from health_dashboard.domain.fields import numeric, round_half_up, whole_number


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (30, 30.0),
        (12.5, 12.5),
        ("30", 30.0),
        (" 1.5 ", 1.5),
        ("-2", -2.0),
        (None, 0.0),
        ("", 0.0),
        ("abc", 0.0),
        ("12g", 0.0),
        ("nan", 0.0),
        (float("inf"), 0.0),
        (True, 0.0),
        ([1], 0.0),
    ],
)
def test_numeric_normalizes_loose_values(value: object, expected: float) -> None:
    assert numeric(value) == expected


def test_numeric_uses_custom_default() -> None:
    assert numeric(None, default=1.0) == 1.0
    assert numeric("oops", default=-1.0) == -1.0
    assert numeric("4", default=-1.0) == 4.0


def test_whole_number_truncates() -> None:
    assert whole_number("1200") == 1200
    assert whole_number(300.7) == 300
    assert whole_number(None) == 0
    assert whole_number("many") == 0


@pytest.mark.parametrize(
    ("value", "expected"),
    [(49.4, 49), (49.5, 50), (2.5, 3), (0.0, 0), (150.0, 150)],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected
