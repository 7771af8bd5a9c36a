import logging
from collections.abc import Sequence
from typing import NamedTuple

from psflab.errors import InvariantViolation, PreconditionViolation
from psflab.extractors import get_intensity as default_get_intensity
from psflab.extractors import get_mz as default_get_mz
from psflab.extractors import less_by
from psflab.peaks.bump import find_bump
from psflab.peaks.spectral_peak import (
    argmax,
    full_width_at_fraction_of_maximum,
    height,
    lowness,
)
from psflab.types import E, Extractor, Intensity, MZ


LOGGER = logging.getLogger('psflab')


class CalibrationSample(NamedTuple):
    mz: MZ
    width: MZ


def measure_full_widths(
    elements: Sequence[E],
    fraction: float,
    minimal_peak_height: Intensity = 0,
    get_mz: Extractor = default_get_mz,
    get_intensity: Extractor = default_get_intensity,
) -> list[CalibrationSample]:
    """Measure full widths at a fraction of maximum of all pure peaks of a spectrum.

    The spectrum is scanned for bumps; a bump ends where the next one may begin.
    A bump is accepted if its lowness is at least `1 - fraction` (both flanks
    descend below the fraction of the maximum) and its height is at least
    `minimal_peak_height`.

    Returns:
        (mz of maximum, width) of every accepted bump in scan order.
    """
    if not 0 <= fraction <= 1:
        raise PreconditionViolation(f'measure_full_widths(): fraction out of range [0, 1]: {fraction}')

    samples = []
    if len(elements) < 1:
        return samples

    required_lowness = 1 - fraction
    less = less_by(get_intensity)

    start = 0
    while start < len(elements):
        bump = find_bump(elements, less, start=start)
        if bump is None:
            break
        if not start <= bump.left < bump.right < len(elements):
            raise InvariantViolation(f'measure_full_widths(): bump in illegal state: {bump}')

        peak = elements[bump.slice]
        bump_height = height(peak, get_intensity=get_intensity)

        if lowness(peak, get_intensity=get_intensity) >= required_lowness and bump_height >= minimal_peak_height:
            width = full_width_at_fraction_of_maximum(peak, fraction, get_mz=get_mz, get_intensity=get_intensity)
            mz = get_mz(peak[argmax(peak, get_intensity=get_intensity)])

            LOGGER.debug('measure_full_widths(): measured peak (mz | width): (%s | %s)', mz, width)
            samples.append(CalibrationSample(mz, width))

        start = bump.right

    return samples
