import math

import numpy as np
import pytest

from normplot.density import density, sample_step


@pytest.mark.parametrize("mean,sd", [(0, 1), (72, 16), (5.2, 0.08), (-3, 0.5)])
def test_peak_at_mean(mean, sd):
    xs = np.linspace(mean - 5 * sd, mean + 5 * sd, 1001)
    assert density(mean, mean, sd) >= density(xs, mean, sd).max()


@pytest.mark.parametrize("sd1,sd2", [(0.5, 1), (1, 2), (0.08, 16)])
def test_narrower_curve_has_taller_peak(sd1, sd2):
    assert density(0, 0, sd1) > density(0, 0, sd2)


def test_matches_closed_form():
    x, mean, sd = 1.3, 0.4, 2.1
    expected = math.exp(-((x - mean) ** 2) / (2 * sd**2)) / (sd * math.sqrt(2 * math.pi))
    assert density(x, mean, sd) == pytest.approx(expected)


def test_vectorised():
    ys = density(np.array([-1.0, 0.0, 1.0]), 0, 1)
    assert ys.shape == (3,)
    assert ys[0] == pytest.approx(ys[2])


def test_non_positive_sd_is_nan():
    assert np.isnan(density(0, 0, -1))


@pytest.mark.parametrize(
    "sd,expected",
    [
        (5, 1),
        (1, 1),
        (16, 1),
        (0.5, 0.1),
        (0.08, 0.01),
        (0.1, 0.1),
        (0.0035, 0.001),
    ],
)
def test_sample_step(sd, expected):
    assert sample_step(sd) == pytest.approx(expected)


def test_sample_step_exact_for_narrow_sd():
    assert sample_step(0.08) == 0.01
