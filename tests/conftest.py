import numpy as np
import pytest

from psflab.curves import FWHM_TO_SIGMA, gauss
from psflab.spectra import Spectrum


def gaussian_peaks(peaks, n_steps=40):
    """Spectrum of separated Gaussian peaks, given as `(position, fwhm, intensity)`.

    Every peak is sampled on its own grid over `position ± 2 * fwhm` with a step
    of `fwhm / 20`, so the half maximum falls onto a sample.
    """
    mz, intensity = [], []
    for position, fwhm, height in peaks:
        x = position + (fwhm / 20) * np.arange(-n_steps, n_steps + 1)

        mz.extend(x)
        intensity.extend(height * gauss(x - position, sigma=fwhm / FWHM_TO_SIGMA))

    return Spectrum.from_arrays(mz, intensity)


@pytest.fixture
def make_spectrum():
    return gaussian_peaks


@pytest.fixture
def peak():
    return [(.4, .12), (1.1, 1.1), (1.2, 1.9), (1.4, 3.1), (1.5, 2.2), (1.6, .98), (1.69, 1.14)]
