"""
Тесты для линейной и логарифмической шкал.
"""

import math

import numpy as np
import pytest

from coinchart.domain.layout.scales import LinearScale, LogScale


def test_linear_scale_maps_endpoints():
    scale = LinearScale((0, 1), (15, 50))
    assert scale(0) == pytest.approx(15)
    assert scale(1) == pytest.approx(50)
    assert scale(0.5) == pytest.approx(32.5)


def test_linear_scale_degenerate_domain_maps_to_range_start():
    """Домен из одной точки - всё уходит в начало диапазона, без деления на ноль."""
    scale = LinearScale((2015, 2015), (100, 400))
    assert scale.is_degenerate
    assert scale(2015) == pytest.approx(100)


def test_linear_scale_accepts_arrays():
    scale = LinearScale((0, 10), (0, 1))
    out = scale(np.array([0.0, 5.0, 10.0]))
    assert out.tolist() == pytest.approx([0.0, 0.5, 1.0])


def test_log_scale_is_base_independent_normalisation():
    scale = LogScale((0.01, 1), (0, 1), base=1.1)
    assert scale(1) == pytest.approx(1.0)
    assert scale(0.01) == pytest.approx(0.0)
    assert scale(0.1) == pytest.approx(0.5)
    assert scale(0.5) == pytest.approx(math.log(50) / math.log(100))


def test_log_scale_clamp_flattens_small_values():
    """Всё ниже 0.01 (включая ноль) прижимается к 0."""
    scale = LogScale((0.01, 1), (0, 1), base=1.1, clamp=True)
    assert scale(0.001) == 0.0
    assert scale(0.0) == 0.0
    assert scale(5.0) == 1.0


def test_log_scale_rejects_non_positive_domain():
    with pytest.raises(ValueError):
        LogScale((0, 1), (0, 1))


def test_log_scale_without_clamp_rejects_zero_input():
    scale = LogScale((0.01, 1), (0, 1))
    with pytest.raises(ValueError):
        scale(0.0)
