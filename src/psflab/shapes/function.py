from collections.abc import Sequence
from enum import Enum

from psflab.errors import PreconditionViolation
from psflab.extractors import get_intensity as default_get_intensity
from psflab.extractors import get_mz as default_get_mz
from psflab.parameters.fwhm import (
    ConstantFwhm,
    OrbitrapWithOriginFwhm,
    PeakParameterFwhm,
    TofFwhm,
)
from psflab.shapes.shape import BoxPeakShape, GaussianPeakShape, PeakShape
from psflab.types import E, Extractor, Intensity, MZ


class PeakShapeFunctionType(Enum):
    """Enums with types of peak shape functions."""

    BOX = 'box'
    GAUSSIAN = 'gaussian'
    ORBI = 'orbi'
    ORBI_BOX = 'orbiBox'
    TOF = 'time-of-flight'

    def __str__(self) -> str:
        return self.value


class PeakShapeFunction:
    """Intensity contributed at an observed mz by a peak centered at a reference mz.

    A spatial peak shape is combined with a full width at half maximum depending
    on the reference mz.
    """

    def __init__(
        self,
        shape: PeakShape,
        parameter: PeakParameterFwhm,
        kind: PeakShapeFunctionType,
    ) -> None:
        self.shape = shape
        self.parameter = parameter
        self._kind = kind

    @property
    def kind(self) -> PeakShapeFunctionType:
        return self._kind

    def evaluate(self, reference_mz: MZ, observed_mz: MZ) -> float:
        shape = self.shape.scaled(self.parameter.at(reference_mz))

        dx = observed_mz - reference_mz
        if -shape.support_threshold <= dx <= shape.support_threshold:
            return float(shape.at(dx))
        return 0.

    def support_threshold(self, mz: MZ) -> MZ:
        return self.shape.scaled(self.parameter.at(mz)).support_threshold

    def calibrate(
        self,
        elements: Sequence[E],
        get_mz: Extractor = default_get_mz,
        get_intensity: Extractor = default_get_intensity,
    ) -> None:
        """Learn the full width at half maximum from the pure peaks of a spectrum."""
        self.parameter.learn_from(elements, get_mz=get_mz, get_intensity=get_intensity)

    @property
    def minimal_peak_height(self) -> Intensity:
        return self.parameter.minimal_peak_height

    @minimal_peak_height.setter
    def minimal_peak_height(self, value: Intensity) -> None:
        self.parameter.minimal_peak_height = value

    @property
    def a(self) -> float:
        return self._get('a')

    @a.setter
    def a(self, value: float) -> None:
        self._set('a', value)

    @property
    def b(self) -> float:
        return self._get('b')

    @b.setter
    def b(self, value: float) -> None:
        self._set('b', value)

    def _get(self, name: str) -> float:
        model = self.parameter.model

        if name not in model.parameter_names:
            raise PreconditionViolation(f'{self.__class__.__name__}: {model.__class__.__name__} has no parameter `{name}`!')
        return model.get_parameter(model.parameter_names.index(name))

    def _set(self, name: str, value: float) -> None:
        model = self.parameter.model

        if name not in model.parameter_names:
            raise PreconditionViolation(f'{self.__class__.__name__}: {model.__class__.__name__} has no parameter `{name}`!')
        model.set_parameter(model.parameter_names.index(name), value)

    def __call__(self, reference_mz: MZ, observed_mz: MZ) -> float:
        return self.evaluate(reference_mz, observed_mz)

    def __repr__(self) -> str:
        cls = self.__class__

        content = '; '.join([
            f'kind: {self.kind}',
            f'shape: {self.shape}',
            f'parameter: {self.parameter}',
        ])
        return f'{cls.__name__}({content})'


# --------        instruments        --------
class OrbitrapPeakShapeFunction(PeakShapeFunction):

    def __init__(self, *args: float) -> None:
        super().__init__(GaussianPeakShape(), OrbitrapWithOriginFwhm(*args), PeakShapeFunctionType.ORBI)


class OrbitrapBoxPeakShapeFunction(PeakShapeFunction):

    def __init__(self, *args: float) -> None:
        super().__init__(BoxPeakShape(), OrbitrapWithOriginFwhm(*args), PeakShapeFunctionType.ORBI_BOX)


class GaussianPeakShapeFunction(PeakShapeFunction):

    def __init__(self, *args: float) -> None:
        super().__init__(GaussianPeakShape(), ConstantFwhm(*args), PeakShapeFunctionType.GAUSSIAN)


class BoxPeakShapeFunction(PeakShapeFunction):

    def __init__(self, *args: float) -> None:
        super().__init__(BoxPeakShape(), ConstantFwhm(*args), PeakShapeFunctionType.BOX)


class TofPeakShapeFunction(PeakShapeFunction):

    def __init__(self, *args: float) -> None:
        super().__init__(GaussianPeakShape(), TofFwhm(*args), PeakShapeFunctionType.TOF)
