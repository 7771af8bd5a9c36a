import logging
from collections.abc import Sequence

import numpy as np
from scipy import optimize

from psflab.errors import (
    InvariantViolation,
    PostconditionViolation,
    PreconditionViolation,
    Starvation,
)
from psflab.extractors import get_intensity as default_get_intensity
from psflab.extractors import get_mz as default_get_mz
from psflab.parameters.config import (
    PEAK_PARAMETER_CONFIG,
    PeakParameterConfig,
)
from psflab.parameters.models import (
    ConstantModel,
    LinearSqrtModel,
    LinearSqrtOriginModel,
    ParameterModel,
    QuadraticModel,
    SqrtModel,
)
from psflab.peaks.widths import CalibrationSample, measure_full_widths
from psflab.types import E, Extractor, Intensity, MZ
from psflab.utils import rmse


LOGGER = logging.getLogger('psflab')

FRACTION_OF_MAXIMUM = .5


class PeakParameterFwhm:
    """Full width at half maximum of a peak as a function of mz.

    The mz dependence is described by a parameter model, whose parameters are
    learned from the pure peaks of a spectrum by non-negative least squares.
    """

    def __init__(
        self,
        model: ParameterModel,
        minimal_peak_height: Intensity | None = None,
        config: PeakParameterConfig | None = None,
    ) -> None:
        self.config = config or PEAK_PARAMETER_CONFIG

        self._model = model
        self.minimal_peak_height = self.config.minimal_peak_height if minimal_peak_height is None else minimal_peak_height

    @property
    def model(self) -> ParameterModel:
        return self._model

    def at(self, mz: MZ) -> MZ:
        if mz <= 0:
            raise PreconditionViolation(f'PeakParameterFwhm.at(): mz have to be positive: {mz}')

        fwhm = self._model.at(mz)
        if fwhm <= 0:
            raise PostconditionViolation(f'PeakParameterFwhm.at(): model returned not positive fwhm: {fwhm} (mz: {mz}, model: {self._model})')

        return fwhm

    def learn_from(
        self,
        elements: Sequence[E],
        get_mz: Extractor = default_get_mz,
        get_intensity: Extractor = default_get_intensity,
    ) -> None:
        """Learn the parameters of the model from the pure peaks of a spectrum.

        Raises:
            Starvation: no peak could be measured or the regression failed.
        """
        samples = measure_full_widths(
            elements,
            fraction=FRACTION_OF_MAXIMUM,
            minimal_peak_height=self.minimal_peak_height,
            get_mz=get_mz,
            get_intensity=get_intensity,
        )
        if not samples:
            raise Starvation('PeakParameterFwhm.learn_from(): no (mz | fwhm) could be measured in the spectrum to learn from.')

        self._learn(samples)

        mz = self.config.reference_mz
        fwhm = self.at(mz)
        LOGGER.info('Learned peak parameter FWHM from %s peaks. FWHM at %s Th is now %s Th. This corresponds to a resolution of %s.', len(samples), mz, fwhm, mz/fwhm)

    def _learn(self, samples: Sequence[CalibrationSample]) -> None:
        n_parameters = self._model.n_parameters

        a = np.zeros((len(samples), n_parameters))
        b = np.zeros(len(samples))
        for i, (mz, width) in enumerate(samples):
            slope = self._model.slope(mz)
            if len(slope) - 1 != n_parameters:
                raise InvariantViolation(f'PeakParameterFwhm: generalized slope has {len(slope) - 1} components, but model has {n_parameters} parameters!')

            a[i, :] = slope[:-1]
            b[i] = width

        try:
            x, _ = optimize.nnls(a, b)
        except (RuntimeError, ValueError, np.linalg.LinAlgError) as error:
            LOGGER.warning('PeakParameterFwhm.learn_from(): numerical regression failed: %s', error)
            raise Starvation('PeakParameterFwhm.learn_from(): regression of the parameter model for the measured (mz | fwhm) failed.') from error

        if not np.all(np.isfinite(x)):
            LOGGER.warning('PeakParameterFwhm.learn_from(): numerical regression failed: %s', x)
            raise Starvation('PeakParameterFwhm.learn_from(): regression of the parameter model for the measured (mz | fwhm) failed.')

        for index, value in enumerate(x):
            LOGGER.debug('PeakParameterFwhm.learn_from(): parameter %s found: %s', index, value)
            self._model.set_parameter(index, float(value))
        LOGGER.debug('PeakParameterFwhm.learn_from(): rmse of the regression: %s', rmse(b, a @ x))

    def __call__(self, mz: MZ) -> MZ:
        return self.at(mz)

    def __repr__(self) -> str:
        cls = self.__class__

        content = '; '.join([
            f'model: {self._model}',
            f'minimal_peak_height: {self.minimal_peak_height}',
        ])
        return f'{cls.__name__}({content})'


# --------        instruments        --------
class OrbitrapFwhm(PeakParameterFwhm):

    def __init__(self, *args: float, **kwargs) -> None:
        super().__init__(LinearSqrtModel(*args), **kwargs)


class OrbitrapWithOriginFwhm(PeakParameterFwhm):

    def __init__(self, *args: float, **kwargs) -> None:
        super().__init__(LinearSqrtOriginModel(*args), **kwargs)


class FtIcrFwhm(PeakParameterFwhm):

    def __init__(self, *args: float, **kwargs) -> None:
        super().__init__(QuadraticModel(*args), **kwargs)


class TofFwhm(PeakParameterFwhm):

    def __init__(self, *args: float, **kwargs) -> None:
        super().__init__(SqrtModel(*args), **kwargs)


class ConstantFwhm(PeakParameterFwhm):

    def __init__(self, *args: float, **kwargs) -> None:
        super().__init__(ConstantModel(*args), **kwargs)
