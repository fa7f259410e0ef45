import math

import pytest

from tenshades.core.rounding import round_half_away


@pytest.mark.parametrize(
    "value, decimals, expected",
    [
        (0.125, 2, 0.13),
        (-0.125, 2, -0.13),
        (2.5, 0, 3.0),
        (-2.5, 0, -3.0),
        (0.081666, 2, 0.08),
        (338.571, 0, 339.0),
        (0.505882, 2, 0.51),
    ],
)
def test_rounds_half_away_from_zero(value, decimals, expected):
    assert round_half_away(value, decimals) == expected


def test_default_precision_is_two_decimals():
    assert round_half_away(0.833333) == 0.83


def test_tiny_negative_rounds_to_positive_zero():
    result = round_half_away(-0.0001)
    assert result == 0.0
    assert math.copysign(1.0, result) == 1.0
