"""Width models: the full width of a peak as a function of its mz.

Every model is linear in its parameters. `slope(mz)` is the generalized slope
in parameter space, one component per parameter followed by a trailing bias
component that is never fitted.
"""
import math
from abc import ABC, abstractmethod
from typing import ClassVar

from psflab.errors import PreconditionViolation
from psflab.parameters.config import PEAK_PARAMETER_CONFIG
from psflab.types import MZ


class ParameterModel(ABC):
    parameter_names: ClassVar[tuple[str, ...]]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)

        if not getattr(cls, 'parameter_names', ()):
            raise TypeError(f'{cls.__name__}: a parameter model requires at least one parameter!')

    def __init__(self, *args: float) -> None:
        if len(args) > self.n_parameters:
            raise PreconditionViolation(f'{self.__class__.__name__}: too many parameters: {args}')

        for name in self.parameter_names:
            setattr(self, name, PEAK_PARAMETER_CONFIG.initial_value)
        for index, value in enumerate(args):
            self.set_parameter(index, value)

    @property
    def n_parameters(self) -> int:
        return len(self.parameter_names)

    def set_parameter(self, index: int, value: float) -> None:
        self._check_index(index)
        setattr(self, self.parameter_names[index], value)

    def get_parameter(self, index: int) -> float:
        self._check_index(index)
        return getattr(self, self.parameter_names[index])

    @property
    def parameters(self) -> tuple[float, ...]:
        return tuple(getattr(self, name) for name in self.parameter_names)

    @abstractmethod
    def at(self, mz: MZ) -> MZ:
        """Width of a peak at `mz`."""

    @abstractmethod
    def slope(self, mz: MZ) -> tuple[float, ...]:
        """Generalized slope in parameter space at `mz` (with trailing bias)."""

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.n_parameters:
            raise PreconditionViolation(f'{self.__class__.__name__}: parameter index out of range: {index}')

    def __call__(self, mz: MZ) -> MZ:
        return self.at(mz)

    def __repr__(self) -> str:
        cls = self.__class__

        content = '; '.join([
            f'{name}: {getattr(self, name)}'
            for name in self.parameter_names
        ])
        return f'{cls.__name__}({content})'


class ConstantModel(ParameterModel):
    """`a`"""
    parameter_names = ('a',)

    def at(self, mz: MZ) -> MZ:
        return self.a

    def slope(self, mz: MZ) -> tuple[float, ...]:
        return (1., 0.)


class LinearSqrtModel(ParameterModel):
    """`a * mz * sqrt(mz) + b`"""
    parameter_names = ('a', 'b')

    def at(self, mz: MZ) -> MZ:
        _check_nonnegative(self, mz)
        return self.a * mz * math.sqrt(mz) + self.b

    def slope(self, mz: MZ) -> tuple[float, ...]:
        return (mz * math.sqrt(mz), 1., 0.)


class LinearSqrtOriginModel(ParameterModel):
    """`a * mz * sqrt(mz)`"""
    parameter_names = ('a',)

    def at(self, mz: MZ) -> MZ:
        _check_nonnegative(self, mz)
        return self.a * mz * math.sqrt(mz)

    def slope(self, mz: MZ) -> tuple[float, ...]:
        return (mz * math.sqrt(mz), 0.)


class SqrtModel(ParameterModel):
    """`a * sqrt(mz) + b`"""
    parameter_names = ('a', 'b')

    def at(self, mz: MZ) -> MZ:
        _check_nonnegative(self, mz)
        return self.a * math.sqrt(mz) + self.b

    def slope(self, mz: MZ) -> tuple[float, ...]:
        return (math.sqrt(mz), 1., 0.)


class QuadraticModel(ParameterModel):
    """`a * mz**2 + b`"""
    parameter_names = ('a', 'b')

    def at(self, mz: MZ) -> MZ:
        return self.a * mz**2 + self.b

    def slope(self, mz: MZ) -> tuple[float, ...]:
        return (mz**2, 1., 0.)


def _check_nonnegative(model: ParameterModel, mz: MZ) -> None:
    if mz < 0:
        raise PreconditionViolation(f'{model.__class__.__name__}.at(): mz have to be >= 0: {mz}')
