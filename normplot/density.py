"""Normal density evaluation and the sampling step used for shading."""

import math

from scipy.stats import norm


def density(x, mean, sd):
    """Normal probability density at x (scalar or array).

    Non-positive sd is passed straight to scipy, which returns NaN.
    """
    return norm.pdf(x, loc=mean, scale=sd)


def sample_step(sd):
    """Spacing between x samples along the top edge of a shaded region.

    1 for sd >= 1, otherwise one order of magnitude below sd's scale
    (sd=0.08 -> 0.01) so narrow curves still get a smooth outline.
    """
    if sd >= 1:
        return 1
    return 10.0 ** math.floor(math.log10(sd))
