from .config import (
    PeakShapeConfig, PEAK_SHAPE_CONFIG,
)
from .shape import (
    BoxPeakShape, GaussianPeakShape, LorentzianPeakShape,
    PeakShape,
)
from .function import (
    BoxPeakShapeFunction, GaussianPeakShapeFunction, OrbitrapBoxPeakShapeFunction, OrbitrapPeakShapeFunction, TofPeakShapeFunction,
    PeakShapeFunction, PeakShapeFunctionType,
)

__all__ = [
    'PeakShapeConfig', 'PEAK_SHAPE_CONFIG',
    'BoxPeakShape', 'GaussianPeakShape', 'LorentzianPeakShape',
    'PeakShape',
    'BoxPeakShapeFunction', 'GaussianPeakShapeFunction', 'OrbitrapBoxPeakShapeFunction', 'OrbitrapPeakShapeFunction', 'TofPeakShapeFunction',
    'PeakShapeFunction', 'PeakShapeFunctionType',
]
