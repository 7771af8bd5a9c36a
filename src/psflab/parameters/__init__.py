from .config import (
    PeakParameterConfig, PEAK_PARAMETER_CONFIG,
)
from .fwhm import (
    ConstantFwhm, FtIcrFwhm, OrbitrapFwhm, OrbitrapWithOriginFwhm, TofFwhm,
    PeakParameterFwhm,
)
from .models import (
    ConstantModel, LinearSqrtModel, LinearSqrtOriginModel, QuadraticModel, SqrtModel,
    ParameterModel,
)

__all__ = [
    'PeakParameterConfig', 'PEAK_PARAMETER_CONFIG',
    'ConstantFwhm', 'FtIcrFwhm', 'OrbitrapFwhm', 'OrbitrapWithOriginFwhm', 'TofFwhm',
    'PeakParameterFwhm',
    'ConstantModel', 'LinearSqrtModel', 'LinearSqrtOriginModel', 'QuadraticModel', 'SqrtModel',
    'ParameterModel',
]
