import numpy as np

from psflab.types import Array


# --------        calculate errors        --------
def se(y: float | Array[float], y_hat: Array[float]) -> Array[float]:
    r"""Calculate squared error (SE) between true values $y$ and predicted values $\hat{y}$."""

    return np.square(y - y_hat)


def rmse(y: float | Array[float], y_hat: Array[float]) -> float:
    r"""Calculate root mean squared error (RMSE) between true values $y$ and predicted values $\hat{y}$."""
    n = len(y_hat)

    xi = se(y, y_hat)
    return float(np.sqrt(np.sum(xi) / n))
