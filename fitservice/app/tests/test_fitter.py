import numpy as np
import pytest
from fitservice.app.services.fitter import fit_inverse_square, r_squared

def test_perfect_fit_recovers_coefficients():
    x = np.linspace(0.5, 6.0, 12)
    y = 3.0 / x ** 2 + 2.0
    res = fit_inverse_square(x, y)
    assert res is not None
    assert abs(res.a - 2.0) < 1e-9
    assert abs(res.b - 3.0) < 1e-9
    assert abs(res.r2 - 1.0) < 1e-12

def test_decreasing_sample_fits_well():
    r2 = r_squared([1, 2, 3, 4], [5, 2, 1.2, 0.8])
    assert r2 is not None
    assert 0.95 < r2 <= 1.0

def test_two_points_fit_exactly():
    r2 = r_squared([1.0, 2.0], [7.0, 1.0])
    assert abs(r2 - 1.0) < 1e-12

@pytest.mark.parametrize("xv", [1.0, 2.0, 3.0, 0.7])
def test_identical_x_is_degenerate(xv):
    assert fit_inverse_square([xv] * 5, [1, 2, 3, 4, 5]) is None

def test_constant_y_gives_zero():
    assert r_squared([1, 2, 3], [4, 4, 4]) == 0.0

def test_r2_bounded_and_deterministic():
    rng = np.random.default_rng(7)
    for _ in range(20):
        x = rng.uniform(0.2, 10.0, size=30)
        y = rng.normal(size=30)
        first = r_squared(x, y)
        assert first <= 1.0 + 1e-12
        assert r_squared(x, y) == first

def test_r2_not_clamped_for_noisy_data():
    # least squares with intercept stays >= 0 up to rounding
    r2 = r_squared([1, 2, 3, 4, 5], [1, -1, 1, -1, 1])
    assert -1e-12 <= r2 < 0.5

def test_preconditions():
    with pytest.raises(ValueError):
        fit_inverse_square([1, 2], [1])
    with pytest.raises(ValueError):
        fit_inverse_square([1], [1])
    with pytest.raises(ValueError):
        fit_inverse_square([1, 0], [1, 2])
    with pytest.raises(ValueError):
        fit_inverse_square([1, -2], [1, 2])

def _sequential_r2(xs, ys):
    n = len(xs)
    su = su2 = sy = suy = 0.0
    for xi, yi in zip(xs, ys):
        ui = 1 / (xi * xi)
        su += ui
        su2 += ui * ui
        sy += yi
        suy += ui * yi
    det = n * su2 - su * su
    a = (sy * su2 - su * suy) / det
    b = (n * suy - su * sy) / det
    mean = sy / n
    ss_res = ss_tot = 0.0
    for xi, yi in zip(xs, ys):
        ss_res += (yi - (b / (xi * xi) + a)) ** 2
        ss_tot += (yi - mean) ** 2
    return 1 - ss_res / ss_tot

def test_r2_matches_left_to_right_summation_exactly():
    rng = np.random.default_rng(11)
    for _ in range(50):
        xs = [float(v) for v in rng.uniform(0.1, 20.0, size=40)]
        ys = [float(v) for v in rng.normal(3.0, 2.0, size=40)]
        assert r_squared(xs, ys) == _sequential_r2(xs, ys)
