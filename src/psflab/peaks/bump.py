from collections.abc import Sequence
from typing import NamedTuple

from psflab.types import E, Less


class Bump(NamedTuple):
    """Indices of the first and the last element of a bump (both included)."""

    left: int
    right: int

    @property
    def slice(self) -> slice:
        return slice(self.left, self.right + 1)

    @property
    def size(self) -> int:
        return self.right - self.left + 1


def find_bump(
    elements: Sequence[E],
    less: Less,
    start: int = 0,
    stop: int | None = None,
) -> Bump | None:
    """Find the first bump in `elements[start:stop]`.

    A bump is a contiguous run of elements strictly increasing up to a single
    maximum and strictly decreasing after it. The scan is greedy: the bump is
    extended until the first rising step (or the first tie) after its top.
    A tie before the top restarts the search at the second element of the tie,
    a tie right after the top ends the bump (flat tops are truncated there).

    Params:
        elements - sequence to scan
        less - strict less-than comparator of two elements (e.g. by intensity)
        start, stop - half-open range of the scan

    Returns:
        The bump found or `None` if there is no bump in the range.
    """
    stop = len(elements) if stop is None else stop

    left = start
    on_increasing_slope = False
    found_bump_top = False

    current = start
    while current + 1 < stop:
        if less(elements[current], elements[current + 1]):  # rising step
            if found_bump_top:
                break

            if not on_increasing_slope:
                on_increasing_slope = True
                left = current

        elif less(elements[current + 1], elements[current]):  # falling step
            if on_increasing_slope:
                found_bump_top = True

        else:  # tie
            if found_bump_top:
                break

            left = current + 1
            on_increasing_slope = False

        current += 1

    if found_bump_top:
        return Bump(left, current)
    return None
