"""Geometry of a spectral peak.

Every measurement takes the whole sequence as the peak; narrow it with a slice,
e.g. `elements[bump.slice]`.
"""
import logging
from collections.abc import Sequence

from psflab.errors import InvariantViolation, PreconditionViolation, Starvation
from psflab.extractors import get_intensity as default_get_intensity
from psflab.extractors import get_mz as default_get_mz
from psflab.types import E, Extractor, Intensity, MZ


LOGGER = logging.getLogger('psflab')


def height(
    elements: Sequence[E],
    get_intensity: Extractor = default_get_intensity,
) -> Intensity:
    """The height of a spectral peak, i.e. the highest intensity of its elements."""
    if len(elements) < 1:
        raise PreconditionViolation('height(): a peak requires at least one element!')

    return get_intensity(elements[argmax(elements, get_intensity)])


def lowness(
    elements: Sequence[E],
    get_intensity: Extractor = default_get_intensity,
) -> float:
    """The lowness of a spectral peak.

    The lowest elements on the left and on the right of the maximum are searched
    (the maximum itself is eligible on both sides); the more abundant one is the
    shoulder of the peak. The lowness is `1 - shoulder / maximum`.

    An equiabundant sequence and a single element have a lowness of 0.0; a
    maximum flanked by elements with (almost) zero intensity has a lowness of
    (almost) 1.0.
    """
    if len(elements) < 1:
        raise PreconditionViolation('lowness(): a peak requires at least one element!')

    maximum = argmax(elements, get_intensity)
    top = get_intensity(elements[maximum])
    if top == 0:
        return 0.0

    left = min(get_intensity(element) for element in elements[:maximum + 1])
    right = min(get_intensity(element) for element in elements[maximum:])
    shoulder = max(left, right)

    return 1. - shoulder/top


def full_width_at_fraction_of_maximum(
    elements: Sequence[E],
    fraction: float,
    get_mz: Extractor = default_get_mz,
    get_intensity: Extractor = default_get_intensity,
) -> MZ:
    """The full width of a spectral peak at a fraction of its maximum.

    On both flanks the outermost element with an intensity not less than
    `fraction * maximum` is searched (from the first element onwards on the
    left, from the last element backwards on the right). It is interpolated
    linearly with its outer neighbour to the mz where the intensity equals the
    target exactly. The width is the distance of the two interpolated mz.

    Raises:
        PreconditionViolation: `fraction` is out of range [0, 1].
        Starvation: a flank does not descend below the target intensity.
        InvariantViolation: the two elements to interpolate differ in mz but not in intensity.
    """
    if not 0 <= fraction <= 1:
        raise PreconditionViolation(f'full_width_at_fraction_of_maximum(): fraction out of range [0, 1]: {fraction}')
    if len(elements) < 1:
        raise PreconditionViolation('full_width_at_fraction_of_maximum(): a peak requires at least one element!')

    maximum = argmax(elements, get_intensity)
    target = get_intensity(elements[maximum]) * fraction
    LOGGER.debug('full_width_at_fraction_of_maximum(): maximum at (mz, intensity): (%s, %s)', get_mz(elements[maximum]), get_intensity(elements[maximum]))
    LOGGER.debug('full_width_at_fraction_of_maximum(): target intensity: %s', target)

    below_on_left, above_on_left = _find_flank(
        elements,
        scan=range(0, maximum + 1),
        target=target,
        get_intensity=get_intensity,
    )
    below_on_right, above_on_right = _find_flank(
        elements,
        scan=range(len(elements) - 1, maximum - 1, -1),
        target=target,
        get_intensity=get_intensity,
    )

    left = _interpolate(below_on_left, above_on_left, target, get_mz=get_mz, get_intensity=get_intensity)
    right = _interpolate(below_on_right, above_on_right, target, get_mz=get_mz, get_intensity=get_intensity)
    LOGGER.debug('full_width_at_fraction_of_maximum(): interpolated mz: (%s, %s)', left, right)

    return right - left


def argmax(elements: Sequence[E], get_intensity: Extractor = default_get_intensity) -> int:
    """Index of the most intense element. Ties resolve to the first one."""
    return max(range(len(elements)), key=lambda i: get_intensity(elements[i]))


def _find_flank(
    elements: Sequence[E],
    scan: range,
    target: Intensity,
    get_intensity: Extractor,
) -> tuple[E, E]:
    """Find the elements just below and just above `target` along `scan` order."""

    for position, index in enumerate(scan):
        if get_intensity(elements[index]) >= target:
            break
    else:
        raise Starvation('full_width_at_fraction_of_maximum(): no element reaches the target intensity.')

    above = elements[index]
    if position == 0:
        if target < get_intensity(above):
            raise Starvation('full_width_at_fraction_of_maximum(): no element on the flank is below the target intensity.')

        return above, above

    below = elements[scan[position - 1]]
    return below, above


def _interpolate(
    below: E,
    above: E,
    target: Intensity,
    get_mz: Extractor,
    get_intensity: Extractor,
) -> MZ:
    """Solve the line through `below` and `above` for the mz at `target` intensity."""

    if get_mz(below) == get_mz(above):
        return get_mz(above)

    if get_intensity(below) == get_intensity(above):
        raise InvariantViolation('full_width_at_fraction_of_maximum(): elements to interpolate differ in mz, but not in intensity.')

    slope = (get_intensity(above) - get_intensity(below)) / (get_mz(above) - get_mz(below))
    shift = get_intensity(below) - slope*get_mz(below)

    return (target - shift) / slope
