import numpy as np

from psflab.types import Array


FWHM_TO_SIGMA = 2*np.sqrt(2*np.log(2))


def gauss(x: float | Array[float], sigma: float) -> float | Array[float]:
    """Gaussian curve with unit height at `x = 0`.

    Params:
        sigma - standard deviation
    """
    return np.exp(-np.square(x) / (2*sigma**2))


def lorentz(x: float | Array[float], gamma: float) -> float | Array[float]:
    """Lorentzian curve (Cauchy distribution) with position at `x = 0`, not normalized.

    Params:
        gamma - scale parameter
    """
    return gamma / (np.square(x) + gamma**2)


def box(x: float | Array[float]) -> float | Array[float]:
    """Box curve. Equals one everywhere, the support of the shape cuts it off."""
    if np.ndim(x) == 0:
        return 1.0

    return np.ones(np.shape(x))
