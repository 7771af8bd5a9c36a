"""Access to the mass and the intensity of an opaque spectrum element.

Algorithms never touch an element directly; they receive a pair of extractors
instead. Defaults work for `SpectrumElement` and anything else exposing `mz`
and `intensity` attributes; for plain `(mz, intensity)` tuples pass
`operator.itemgetter(0)` and `operator.itemgetter(1)`.
"""
from operator import attrgetter

from psflab.types import E, Extractor, Less


get_mz: Extractor = attrgetter('mz')
get_intensity: Extractor = attrgetter('intensity')


def less_by(extract: Extractor) -> Less:
    """Strict less-than comparator of two elements by an extracted value."""

    def less(lhs: E, rhs: E) -> bool:
        return extract(lhs) < extract(rhs)

    return less
