import math

import pytest

from psflab.errors import PreconditionViolation
from psflab.parameters import (
    ConstantModel,
    LinearSqrtModel,
    LinearSqrtOriginModel,
    ParameterModel,
    QuadraticModel,
    SqrtModel,
)


@pytest.mark.parametrize(['model', 'expected'], [
    (LinearSqrtModel(.43, .76), 3440.76),
    (QuadraticModel(.43, .76), 68800.76),
    (SqrtModel(.43, .76), 9.36),
    (LinearSqrtOriginModel(.43), 3440.),
    (ConstantModel(.43), .43),
])
def test_at(model, expected):
    assert model.at(400) == pytest.approx(expected, abs=1e-2)
    assert model(400) == model.at(400)


@pytest.mark.parametrize(['model', 'expected'], [
    (ConstantModel(), (1., 0.)),
    (LinearSqrtModel(), (8000., 1., 0.)),
    (LinearSqrtOriginModel(), (8000., 0.)),
    (SqrtModel(), (20., 1., 0.)),
    (QuadraticModel(), (160000., 1., 0.)),
])
def test_slope(model, expected):
    slope = model.slope(400)

    assert len(slope) == model.n_parameters + 1
    assert slope == pytest.approx(expected)


@pytest.mark.parametrize('model', [LinearSqrtModel(), LinearSqrtOriginModel(), SqrtModel()])
def test_negative_mz(model):
    with pytest.raises(PreconditionViolation):
        model.at(-123.2)


def test_quadratic_accepts_negative_mz():
    model = QuadraticModel(1., 2.)

    assert model.at(-2.) == pytest.approx(6.)


def test_default_parameters():
    assert LinearSqrtModel().parameters == (.1, .1)
    assert ConstantModel().parameters == (.1,)


def test_set_and_get_parameter():
    model = SqrtModel()

    model.set_parameter(0, .43)
    model.set_parameter(1, .76)
    assert model.get_parameter(0) == .43
    assert model.get_parameter(1) == .76
    assert (model.a, model.b) == (.43, .76)
    assert model.at(400) == pytest.approx(.43 * math.sqrt(400) + .76)


@pytest.mark.parametrize(['model', 'index'], [
    (LinearSqrtModel(), 2),
    (QuadraticModel(), 2),
    (SqrtModel(), -1),
    (ConstantModel(), 1),
    (LinearSqrtOriginModel(), 1),
])
def test_parameter_index_out_of_range(model, index):
    with pytest.raises(PreconditionViolation):
        model.get_parameter(index)
    with pytest.raises(PreconditionViolation):
        model.set_parameter(index, 1.)


def test_too_many_parameters():
    with pytest.raises(PreconditionViolation):
        ConstantModel(1., 2.)


def test_model_without_parameters():
    with pytest.raises(TypeError):

        class EmptyModel(ParameterModel):
            parameter_names = ()

            def at(self, mz):
                return 0.

            def slope(self, mz):
                return (0.,)


def test_repr():
    assert repr(LinearSqrtModel(.43, .76)) == 'LinearSqrtModel(a: 0.43; b: 0.76)'
