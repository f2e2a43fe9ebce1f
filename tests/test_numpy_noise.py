import numpy as np
import pytest

from numpy_noise import fade, fractal_brownian_motion, gradient, lerp, perlin_noise_2d
from permutation import build_permutation_table


@pytest.fixture(scope="module")
def p():
    return build_permutation_table(42)


def test_fade_endpoints_and_midpoint():
    t = np.array([0.0, 0.5, 1.0], dtype=np.float32)
    assert np.allclose(fade(t), [0.0, 0.5, 1.0])


def test_lerp():
    assert lerp(0.0, 2.0, 6.0) == 2.0
    assert lerp(1.0, 2.0, 6.0) == 6.0
    assert lerp(0.25, 2.0, 6.0) == 3.0


def test_gradient_uses_four_axis_directions():
    x, y = np.float32(0.25), np.float32(0.75)
    assert gradient(0, x, y) == pytest.approx(0.75)
    assert gradient(1, x, y) == pytest.approx(-0.75)
    assert gradient(2, x, y) == pytest.approx(0.25)
    assert gradient(3, x, y) == pytest.approx(-0.25)
    # Only the low two bits matter
    assert gradient(6, x, y) == gradient(2, x, y)
    assert gradient(255, x, y) == gradient(3, x, y)


def test_noise_is_zero_on_lattice_points(p):
    for x, y in [(0, 0), (3, 7), (-2, 5), (255, 256), (-300, -41)]:
        assert float(perlin_noise_2d(x, y, p)) == 0.0


def test_noise_is_deterministic(p):
    x = np.array([0.1, 1.25, 10.5, -7.3])
    y = np.array([0.2, 2.75, 9.0, -0.6])
    assert np.array_equal(perlin_noise_2d(x, y, p), perlin_noise_2d(x, y, p))


def test_scalar_and_array_evaluation_agree(p):
    xs = np.array([0.3, 4.6, -2.2, 100.01], dtype=np.float32)
    ys = np.array([7.9, -0.4, 3.5, 55.5], dtype=np.float32)
    values = perlin_noise_2d(xs, ys, p)
    assert values.shape == xs.shape
    for x, y, value in zip(xs, ys, values):
        assert float(perlin_noise_2d(x, y, p)) == float(value)


def test_negative_coordinates_wrap_with_period_256(p):
    # Dyadic fractions keep the fractional part exact in float32.
    for x, y in [(-3.25, 1.5), (-0.75, -0.125), (10.5, -200.25)]:
        wrapped = perlin_noise_2d(x + 256, y + 256, p)
        assert float(perlin_noise_2d(x, y, p)) == float(wrapped)


def test_noise_is_continuous_across_cell_boundaries(p):
    eps = 1e-3
    for boundary in [1.0, 5.0, 17.0, -4.0]:
        for other in [0.3, 2.7, -6.1]:
            before = float(perlin_noise_2d(boundary - eps, other, p))
            after = float(perlin_noise_2d(boundary + eps, other, p))
            assert abs(before - after) < 2e-2
            before = float(perlin_noise_2d(other, boundary - eps, p))
            after = float(perlin_noise_2d(other, boundary + eps, p))
            assert abs(before - after) < 2e-2


def test_noise_stays_in_sane_range(p):
    rng = np.random.default_rng(0)
    x = rng.uniform(-300, 300, size=20000)
    y = rng.uniform(-300, 300, size=20000)
    values = perlin_noise_2d(x, y, p)
    assert np.isfinite(values).all()
    assert float(np.max(np.abs(values))) <= 1.5


def test_single_octave_is_one_evaluation_at_base_frequency(p):
    xg, yg = np.meshgrid(np.arange(0, 600, 37, dtype=np.float32), np.arange(0, 400, 29, dtype=np.float32))
    frequency = np.float32(0.005)
    expected = perlin_noise_2d(xg * frequency, yg * frequency, p)
    assert np.array_equal(fractal_brownian_motion(xg, yg, 1, p), expected)


def test_two_octaves_add_half_amplitude_double_frequency(p):
    xg, yg = np.meshgrid(np.arange(0, 300, 13, dtype=np.float32), np.arange(0, 300, 17, dtype=np.float32))
    f = np.float32(0.005)
    expected = perlin_noise_2d(xg * f, yg * f, p) + 0.5 * perlin_noise_2d(xg * (2 * f), yg * (2 * f), p)
    assert np.allclose(fractal_brownian_motion(xg, yg, 2, p), expected, atol=1e-6)


def test_zero_octaves_is_zero(p):
    xg, yg = np.meshgrid(np.arange(5, dtype=np.float32), np.arange(3, dtype=np.float32))
    out = fractal_brownian_motion(xg, yg, 0, p)
    assert out.shape == (3, 5)
    assert not out.any()


def test_fbm_output_is_float32_and_finite(p):
    xg, yg = np.meshgrid(np.arange(64, dtype=np.float32), np.arange(64, dtype=np.float32))
    out = fractal_brownian_motion(xg, yg, 8, p)
    assert out.dtype == np.float32
    assert np.isfinite(out).all()
