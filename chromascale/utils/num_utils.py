import math
from typing import Sequence

import numpy as np
from numpy import ndarray as NDArray


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going towards +inf."""
    return math.floor(value + 0.5)


def np_round_half_up(values: NDArray) -> NDArray:
    return np.floor(np.asarray(values, dtype=float) + 0.5)


def gaussian(x: float, center: float, sigma: float) -> float:
    """Unnormalised Gaussian ``exp(-((x - center) / sigma) ** 2)``."""
    return math.exp(-(((x - center) / sigma) ** 2))


def frozen_matrix(rows: Sequence[Sequence[float]]) -> NDArray:
    """Build a float64 matrix that cannot be written to."""
    matrix = np.array(rows, dtype=np.float64)
    matrix.setflags(write=False)
    return matrix
