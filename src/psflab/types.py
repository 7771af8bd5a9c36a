from pathlib import Path
from typing import Callable, NewType, TypeAlias, TypeVar

import pandas as pd
from numpy.typing import NDArray  # noqa: I100


# --------        paths        --------
FilePath: TypeAlias = str | Path


# --------        structures        --------
Array: TypeAlias = NDArray

Frame: TypeAlias = pd.DataFrame


# --------        spectral units        --------
MZ = NewType('MZ', float)
Intensity = NewType('Intensity', float)


# --------        elements        --------
E = TypeVar('E')

Extractor: TypeAlias = Callable[[E], float]
Less: TypeAlias = Callable[[E, E], bool]
