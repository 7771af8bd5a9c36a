from operator import lt

import pytest

from psflab.extractors import get_intensity, less_by
from psflab.peaks import Bump, find_bump
from psflab.spectra import Spectrum


@pytest.mark.parametrize('values', [
    [1, 2, 1],
    [1, 3, 5, 4, 2],
    [.1, .2, .3, .4, .3, .2, .1],
])
def test_unimodal_sequence_is_one_bump(values):
    assert find_bump(values, lt) == Bump(0, len(values) - 1)


@pytest.mark.parametrize('values', [
    [1, 2, 3, 4],
    [4, 3, 2, 1],
    [1, 1, 1, 1],
])
def test_monotonic_sequence_has_no_bump(values):
    assert find_bump(values, lt) is None


@pytest.mark.parametrize('values', [
    [],
    [1],
    [1, 2],
    [2, 1],
])
def test_short_sequence_has_no_bump(values):
    assert find_bump(values, lt) is None


def test_bump_ends_at_next_rising_step():
    values = [1, 3, 1, 4, 1]

    bump = find_bump(values, lt)
    assert bump == Bump(0, 2)

    assert find_bump(values, lt, start=bump.right) == Bump(2, 4)


def test_leading_descent_is_skipped():
    assert find_bump([5, 4, 3, 4, 5, 2], lt) == Bump(2, 5)


def test_tie_before_top_restarts_search():
    assert find_bump([1, 2, 2, 3, 1], lt) == Bump(2, 4)


def test_plateau_after_top_truncates_bump():
    assert find_bump([1, 3, 2, 2, 1], lt) == Bump(0, 2)


def test_flat_top_is_not_a_bump():
    assert find_bump([1, 3, 3, 1], lt) is None


def test_start_and_stop():
    values = [1, 3, 1, 4, 1]

    assert find_bump(values, lt, start=3) is None
    assert find_bump(values, lt, start=1, stop=4) is None
    assert find_bump(values, lt, start=2, stop=5) == Bump(2, 4)


def test_bump_slice():
    values = [5, 1, 3, 1, 5]

    bump = find_bump(values, lt)
    assert values[bump.slice] == [1, 3, 1]
    assert bump.size == 3


def test_compare_spectrum_elements_by_intensity():
    spectrum = Spectrum([(100., 1.), (100.1, 5.), (100.2, 2.), (100.3, 3.)])

    assert find_bump(spectrum, less_by(get_intensity)) == Bump(0, 2)
