import pytest
from pydantic import ValidationError

from psflab.parameters import ConstantModel, PeakParameterConfig, PeakParameterFwhm
from psflab.shapes import GaussianPeakShape, LorentzianPeakShape, PeakShapeConfig


def test_peak_shape_config(monkeypatch):
    monkeypatch.setenv('PEAK_SHAPE_SIGMA', '0.2')
    monkeypatch.setenv('PEAK_SHAPE_FWHM_FACTOR', '7')
    config = PeakShapeConfig()

    assert GaussianPeakShape(config=config).sigma == pytest.approx(.2)
    assert GaussianPeakShape(sigma=.5, config=config).sigma == pytest.approx(.5)
    assert LorentzianPeakShape(config=config).fwhm_factor == pytest.approx(7.)


def test_peak_shape_config_is_validated(monkeypatch):
    monkeypatch.setenv('PEAK_SHAPE_SIGMA_FACTOR', '-1')

    with pytest.raises(ValidationError):
        PeakShapeConfig()


def test_peak_parameter_config(monkeypatch):
    monkeypatch.setenv('PEAK_PARAMETER_MINIMAL_PEAK_HEIGHT', '50')
    config = PeakParameterConfig()

    assert PeakParameterFwhm(ConstantModel(), config=config).minimal_peak_height == pytest.approx(50.)
    assert PeakParameterFwhm(ConstantModel(), minimal_peak_height=-1., config=config).minimal_peak_height == -1.


def test_peak_parameter_config_defaults():
    config = PeakParameterConfig()

    assert config.minimal_peak_height == 0.
    assert config.reference_mz == 400.
    assert config.initial_value == .1
