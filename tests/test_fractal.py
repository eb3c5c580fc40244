import math

import pytest

from fractol.fractal import (
    MAX_ITER,
    Budget,
    FractalKind,
    absolute_squared,
    escape,
    iterate,
    next_z,
    smooth_iteration,
)


@pytest.mark.parametrize("z", [0j, 1 + 1j, -0.5 + 2j, 3 - 4j])
def test_absolute_squared_matches_abs(z):
    assert absolute_squared(z) == pytest.approx(abs(z) ** 2)


@pytest.mark.parametrize(
    "z, c", [(0j, 0j), (1 + 1j, 0.5j), (-0.3 + 0.2j, -1 + 0.1j)]
)
def test_next_z_is_square_plus_c(z, c):
    result = next_z(z, c)
    expected = z * z + c
    assert result.real == pytest.approx(expected.real)
    assert result.imag == pytest.approx(expected.imag)


def test_origin_never_escapes():
    assert iterate(0j, 0j, 50) == 50


def test_far_point_escapes_with_smooth_value():
    assert iterate(0j, 3 + 0j, 50) == smooth_iteration(1, 3 + 0j)


def test_start_outside_radius_escapes_immediately():
    assert iterate(5 + 0j, 0j, 50) == smooth_iteration(0, 5 + 0j)


def test_smooth_decreases_with_larger_magnitude():
    assert smooth_iteration(3, 10 + 0j) > smooth_iteration(3, 1000 + 0j)


def test_smooth_increases_with_count():
    assert smooth_iteration(5, 3 + 0j) - smooth_iteration(4, 3 + 0j) == pytest.approx(1.0)


def test_budget_exhaustion_returns_max_iter():
    budget = Budget(limit=14)
    assert iterate(0j, 0j, 50, budget) == float(MAX_ITER)
    assert budget.spent == 14
    assert budget.exhausted


def test_budget_spend_and_reset():
    budget = Budget(limit=10)
    assert budget.spend(7) is False
    assert budget.spend(7) is True
    budget.reset()
    assert budget.spent == 0
    assert not budget.exhausted


def test_budget_counts_steps():
    budget = Budget()
    iterate(0j, 0j, 5, budget)
    # one charge per loop pass: five steps plus the final check
    assert budget.spent == 6 * 7


def test_escape_mandelbrot_starts_at_zero():
    point = -0.75 + 0.1j
    assert escape(point, FractalKind.MANDELBROT, 0j, 100) == iterate(0j, point, 100)


def test_escape_julia_uses_seed():
    point = 0.3 + 0.5j
    seed = -0.8 + 0.156j
    assert escape(point, FractalKind.JULIA, seed, 100) == iterate(point, seed, 100)


@pytest.mark.parametrize("point", [-2 + 1.5j, 1 - 1.5j, 0.25 + 0j])
def test_escape_values_are_finite_and_bounded_inside_view(point):
    value = escape(point, FractalKind.MANDELBROT, 0j, 50)
    assert math.isfinite(value)
    assert 0 <= value <= 50


def test_escape_point_in_set_reaches_pass_limit():
    assert escape(0.25 + 0j, FractalKind.MANDELBROT, 0j, 50) == 50