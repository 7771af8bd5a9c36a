import bisect
from collections.abc import Iterable, Iterator, Sequence
from typing import NamedTuple, overload

import numpy as np
import pandas as pd

from psflab.errors import PreconditionViolation
from psflab.types import Array, FilePath, Frame, Intensity, MZ


class SpectrumElement(NamedTuple):
    mz: MZ
    intensity: Intensity


class Spectrum(Sequence[SpectrumElement]):
    """Sparse spectrum: an ordered sequence of (mz, intensity) elements.

    Elements are expected in non-decreasing mz order. It is the caller's duty,
    only `subset` checks it.
    """

    def __init__(
        self,
        elements: Iterable[SpectrumElement | tuple[float, float]] = (),
        retention_time: float = 0,
        ms_level: int = 0,
    ) -> None:

        self._elements = [SpectrumElement(float(mz), float(intensity)) for mz, intensity in elements]
        self.retention_time = retention_time
        self.ms_level = ms_level

    @classmethod
    def from_arrays(
        cls,
        mz: Sequence[float] | Array[float],
        intensity: Sequence[float] | Array[float],
        **kwargs,
    ) -> 'Spectrum':
        if len(mz) != len(intensity):
            raise PreconditionViolation(f'Spectrum.from_arrays(): len of `mz` ({len(mz)}) have to be equal to len of `intensity` ({len(intensity)})')

        return cls(zip(mz, intensity), **kwargs)

    # --------        io        --------
    @classmethod
    def load(cls, filepath: FilePath, **kwargs) -> 'Spectrum':
        """Load spectrum from whitespace separated `mz intensity` lines.

        Elements without positive intensity are skipped.
        """

        frame = pd.read_csv(
            filepath,
            sep=r'\s+',
            header=None,
            names=['mz', 'intensity'],
            usecols=[0, 1],
            comment='#',
            dtype=float,
        )
        frame = frame[frame['intensity'] > 0]

        return cls.from_arrays(frame['mz'].to_numpy(), frame['intensity'].to_numpy(), **kwargs)

    def save(self, filepath: FilePath) -> None:
        self.to_frame().to_csv(
            filepath,
            sep=' ',
            header=False,
            index=False,
        )

    def to_frame(self) -> Frame:
        return pd.DataFrame({
            'mz': self.mz,
            'intensity': self.intensity,
        })

    # --------        arrays        --------
    @property
    def mz(self) -> Array[MZ]:
        return np.array([element.mz for element in self._elements], dtype=float)

    @property
    def intensity(self) -> Array[Intensity]:
        return np.array([element.intensity for element in self._elements], dtype=float)

    def is_sorted(self) -> bool:
        return all(
            lhs.mz <= rhs.mz
            for lhs, rhs in zip(self._elements, self._elements[1:])
        )

    # --------        handlers        --------
    def subset(self, begin_mz: MZ, end_mz: MZ) -> 'Spectrum':
        """Get elements with `begin_mz <= mz <= end_mz`."""
        if not self.is_sorted():
            raise PreconditionViolation('Spectrum.subset(): spectrum have to be sorted by mz!')

        mz = [element.mz for element in self._elements]
        lb = bisect.bisect_left(mz, begin_mz)
        ub = bisect.bisect_right(mz, end_mz, lo=lb)

        return Spectrum(
            self._elements[lb:ub],
            retention_time=self.retention_time,
            ms_level=self.ms_level,
        )

    def shift_by(self, delta: MZ) -> None:
        self._elements = [
            SpectrumElement(element.mz + delta, element.intensity)
            for element in self._elements
        ]

    def shift_to(self, mz: MZ) -> None:
        """Shift the spectrum so that its first element lies at `mz`."""
        self.shift_by(mz - self._elements[0].mz)

    def shift_max_to_monoisotopic_mass(self) -> None:
        """Shift the spectrum so that its most abundant element lies at the mz of the first element."""
        index = self._argmax()

        if index != 0:
            self.shift_by(self._elements[0].mz - self._elements[index].mz)

    def max_abundance_peak(self) -> SpectrumElement:
        return self._elements[self._argmax()]

    def total_abundance(self) -> float:
        return float(sum(element.intensity for element in self._elements))

    def mean_mz(self) -> MZ:
        """Abundance weighted mean mz."""
        return float(np.dot(self.mz, self.intensity) / self.total_abundance())

    def merge(self, other: 'Spectrum') -> None:
        """Merge elements of `other` in mz order. Abundances of elements with equal mz are summed."""
        result = []

        i, j = 0, 0
        while i < len(self._elements) and j < len(other):
            lhs, rhs = self._elements[i], other[j]

            if lhs.mz < rhs.mz:
                result.append(lhs)
                i += 1
            elif lhs.mz > rhs.mz:
                result.append(rhs)
                j += 1
            else:
                result.append(SpectrumElement(lhs.mz, lhs.intensity + rhs.intensity))
                i += 1
                j += 1

        result.extend(self._elements[i:])
        result.extend(other[j:])

        self._elements = result

    def _argmax(self) -> int:
        if not self._elements:
            raise PreconditionViolation('Spectrum: spectrum is empty!')

        return max(range(len(self._elements)), key=lambda i: self._elements[i].intensity)

    # --------        sequence        --------
    @overload
    def __getitem__(self, index: int) -> SpectrumElement: ...
    @overload
    def __getitem__(self, index: slice) -> 'Spectrum': ...
    def __getitem__(self, index):
        if isinstance(index, slice):
            return Spectrum(self._elements[index], retention_time=self.retention_time, ms_level=self.ms_level)

        return self._elements[index]

    def __iter__(self) -> Iterator[SpectrumElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Spectrum):
            return NotImplemented

        return (
            self._elements == other._elements
            and self.retention_time == other.retention_time
            and self.ms_level == other.ms_level
        )

    def __repr__(self) -> str:
        cls = self.__class__

        content = '; '.join([
            f'n_elements: {len(self)}',
            f'retention_time: {self.retention_time}',
            f'ms_level: {self.ms_level}',
        ])
        return f'{cls.__name__}({content})'
