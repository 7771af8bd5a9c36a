import copy
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Literal, Self, overload

import numpy as np

from psflab.curves import FWHM_TO_SIGMA, box, gauss, lorentz
from psflab.errors import PreconditionViolation
from psflab.shapes.config import PEAK_SHAPE_CONFIG, PeakShapeConfig
from psflab.types import Array, MZ


class PeakShape(ABC):
    """Spatial shape of a peak with the true mz at `x = 0`.

    The height of the shape is arbitrary (not normalized), only the heights at
    different `x` relative to each other matter. Beyond the support threshold
    the shape is zero for every practical purpose.
    """

    @abstractmethod
    def at(self, x: MZ) -> float:
        """Height of the shape at `x`."""

    @property
    @abstractmethod
    def support_threshold(self) -> MZ:
        """Symmetric distance from the center, beyond which the shape is zero."""

    @property
    @abstractmethod
    def fwhm(self) -> MZ:
        ...

    @fwhm.setter
    @abstractmethod
    def fwhm(self, value: MZ) -> None:
        ...

    def scaled(self, fwhm: MZ) -> Self:
        """Copy of the shape with another full width at half maximum."""
        shape = copy.copy(self)
        shape.fwhm = fwhm

        return shape

    def get_info(
        self,
        sep: Literal[r'\n', '; '] = '; ',
        fields: Mapping[str, Any] | None = None,
    ) -> str:
        fields = fields or {}

        return sep.join([
            f'{key}={value}'
            for key, value in fields.items()
        ] + [
            f'fwhm={self.fwhm:.4f}',
            f'support_threshold={self.support_threshold:.4f}',
        ])

    @overload
    def __call__(self, x: MZ, position: MZ = 0, intensity: float = 1, background: float = 0) -> float: ...
    @overload
    def __call__(self, x: Array[MZ], position: MZ = 0, intensity: float = 1, background: float = 0) -> Array[float]: ...
    def __call__(self, x, position=0, intensity=1, background=0):
        dx = np.asarray(x, dtype=float) - position
        y = np.where(np.abs(dx) <= self.support_threshold, self.at(dx), 0)

        return background + intensity*y

    def __repr__(self) -> str:
        cls = self.__class__

        return f'{cls.__name__}({self.get_info()})'


class _SigmaPeakShape(PeakShape):
    """Peak shape parametrized by the sigma of a Gaussian."""

    def __init__(
        self,
        sigma: MZ | None = None,
        sigma_factor: float | None = None,
        config: PeakShapeConfig | None = None,
    ) -> None:
        config = config or PEAK_SHAPE_CONFIG

        self.sigma = config.sigma if sigma is None else sigma
        self.sigma_factor = config.sigma_factor if sigma_factor is None else sigma_factor

    @property
    def sigma(self) -> MZ:
        return self._sigma

    @sigma.setter
    def sigma(self, value: MZ) -> None:
        if value <= 0:
            raise PreconditionViolation(f'{self.__class__.__name__}: sigma have to be positive: {value}')
        self._sigma = value

    @property
    def fwhm(self) -> MZ:
        return self._sigma * FWHM_TO_SIGMA

    @fwhm.setter
    def fwhm(self, value: MZ) -> None:
        if value <= 0:
            raise PreconditionViolation(f'{self.__class__.__name__}: fwhm have to be positive: {value}')
        self._sigma = value / FWHM_TO_SIGMA

    @property
    def sigma_factor(self) -> float:
        return self._sigma_factor

    @sigma_factor.setter
    def sigma_factor(self, value: float) -> None:
        if value <= 0:
            raise PreconditionViolation(f'{self.__class__.__name__}: sigma_factor have to be positive: {value}')
        self._sigma_factor = value

    @property
    def support_threshold(self) -> MZ:
        return self._sigma * self._sigma_factor


class GaussianPeakShape(_SigmaPeakShape):

    def at(self, x: MZ) -> float:
        return gauss(x, sigma=self._sigma)


class BoxPeakShape(_SigmaPeakShape):
    """Box of the support of a Gaussian with the same sigma."""

    def at(self, x: MZ) -> float:
        return box(x)


class LorentzianPeakShape(PeakShape):

    def __init__(
        self,
        fwhm: MZ | None = None,
        fwhm_factor: float | None = None,
        config: PeakShapeConfig | None = None,
    ) -> None:
        config = config or PEAK_SHAPE_CONFIG

        self.fwhm = config.fwhm if fwhm is None else fwhm
        self.fwhm_factor = config.fwhm_factor if fwhm_factor is None else fwhm_factor

    @property
    def fwhm(self) -> MZ:
        return self._fwhm

    @fwhm.setter
    def fwhm(self, value: MZ) -> None:
        if value <= 0:
            raise PreconditionViolation(f'{self.__class__.__name__}: fwhm have to be positive: {value}')
        self._fwhm = value

    @property
    def fwhm_factor(self) -> float:
        return self._fwhm_factor

    @fwhm_factor.setter
    def fwhm_factor(self, value: float) -> None:
        if value <= 0:
            raise PreconditionViolation(f'{self.__class__.__name__}: fwhm_factor have to be positive: {value}')
        self._fwhm_factor = value

    @property
    def support_threshold(self) -> MZ:
        return self._fwhm * self._fwhm_factor

    def at(self, x: MZ) -> float:
        return lorentz(x, gamma=self._fwhm)
