import numpy as np
import pytest

from psflab.curves import FWHM_TO_SIGMA
from psflab.errors import PreconditionViolation
from psflab.shapes import BoxPeakShape, GaussianPeakShape, LorentzianPeakShape


def test_fwhm_to_sigma():
    assert FWHM_TO_SIGMA == pytest.approx(2.35482, abs=1e-5)


# --------        gaussian        --------
def test_gaussian_defaults():
    shape = GaussianPeakShape()

    assert shape.sigma == pytest.approx(.1)
    assert shape.sigma_factor == pytest.approx(3.)
    assert shape.support_threshold == pytest.approx(.3)
    assert shape.fwhm == pytest.approx(.1 * FWHM_TO_SIGMA)


def test_gaussian_support_threshold():
    assert GaussianPeakShape(sigma=1.5).support_threshold == pytest.approx(4.5)
    assert GaussianPeakShape(sigma=1.5, sigma_factor=2).support_threshold == pytest.approx(3.)


def test_gaussian_half_maximum():
    shape = GaussianPeakShape()
    shape.fwhm = 2.

    assert shape.sigma == pytest.approx(2. / FWHM_TO_SIGMA)
    assert shape.at(0.) == pytest.approx(1.)
    assert shape.at(1.) == pytest.approx(.5)
    assert shape.at(-1.) == pytest.approx(.5)


@pytest.mark.parametrize('value', [0., -1.])
def test_gaussian_not_positive_parameters(value):
    shape = GaussianPeakShape()

    with pytest.raises(PreconditionViolation):
        shape.sigma = value
    with pytest.raises(PreconditionViolation):
        shape.fwhm = value
    with pytest.raises(PreconditionViolation):
        shape.sigma_factor = value
    with pytest.raises(PreconditionViolation):
        GaussianPeakShape(sigma=value)


def test_scaled_copy():
    shape = GaussianPeakShape(sigma=1.)

    scaled = shape.scaled(2.)
    assert scaled.fwhm == pytest.approx(2.)
    assert scaled.sigma_factor == shape.sigma_factor
    assert shape.sigma == 1.


def test_call():
    shape = GaussianPeakShape(sigma=1.)

    y = shape(np.array([9., 10., 11., 20.]), position=10.)
    assert y == pytest.approx([np.exp(-.5), 1., np.exp(-.5), 0.])

    assert shape(10., position=10., intensity=2., background=1.) == pytest.approx(3.)


# --------        box        --------
def test_box():
    shape = BoxPeakShape(sigma=1.)

    assert shape.at(0.) == 1.
    assert shape.at(2.9) == 1.
    assert shape(np.array([-3.5, -1., 0., 2.9, 3.5])) == pytest.approx([0., 1., 1., 1., 0.])


# --------        lorentzian        --------
def test_lorentzian_defaults():
    shape = LorentzianPeakShape()

    assert shape.fwhm == pytest.approx(.1)
    assert shape.fwhm_factor == pytest.approx(5.)
    assert shape.support_threshold == pytest.approx(.5)


def test_lorentzian_values():
    shape = LorentzianPeakShape(fwhm=2.)

    assert shape.at(0.) == pytest.approx(2/4)
    assert shape.at(2.) == pytest.approx(2/8)
    assert shape.at(-2.) == pytest.approx(2/8)
    assert shape.at(1.) == pytest.approx(2/5)


def test_lorentzian_scaled():
    shape = LorentzianPeakShape(fwhm=2.).scaled(.5)

    assert shape.at(0.) == pytest.approx(2.)
    assert shape.at(.5) == pytest.approx(1.)


def test_lorentzian_not_positive_parameters():
    with pytest.raises(PreconditionViolation):
        LorentzianPeakShape(fwhm=0.)
    with pytest.raises(PreconditionViolation):
        LorentzianPeakShape(fwhm_factor=-1.)


def test_repr():
    assert repr(GaussianPeakShape(sigma=1.)).startswith('GaussianPeakShape(fwhm=2.3548; support_threshold=3.0000')
