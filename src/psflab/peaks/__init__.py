from .bump import Bump, find_bump
from .spectral_peak import (
    full_width_at_fraction_of_maximum, height, lowness,
)
from .widths import (
    CalibrationSample, measure_full_widths,
)

__all__ = [
    'Bump', 'find_bump',
    'full_width_at_fraction_of_maximum', 'height', 'lowness',
    'CalibrationSample', 'measure_full_widths',
]
