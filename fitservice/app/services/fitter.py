"""Closed-form least squares for the model y = b/x² + a.

Substituting u = 1/x² turns the model into a straight line y = b·u + a, which
is solved with the normal equations of simple linear regression.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence
import numpy as np

DET_TOLERANCE = 1e-20


@dataclass(frozen=True)
class InverseSquareFit:
    a: float
    b: float
    r2: float


def _running_sum(v: np.ndarray) -> float:
    # strict left-to-right accumulation, not pairwise
    return float(np.add.accumulate(v)[-1])


def _r2(y: np.ndarray, yhat: np.ndarray, y_mean: float) -> float:
    ss_res = _running_sum((y - yhat) ** 2)
    ss_tot = _running_sum((y - y_mean) ** 2)
    # not clamped: negative when the fit is worse than the mean
    return float(1 - ss_res / ss_tot) if ss_tot > 0 else 0.0


def fit_inverse_square(
    x: Sequence[float],
    y: Sequence[float],
    det_tol: float = DET_TOLERANCE,
) -> Optional[InverseSquareFit]:
    """Fit ``y = b/x² + a``. Returns None when the normal equations are singular."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.shape != y.shape or x.ndim != 1:
        raise ValueError("x and y must be 1-D sequences of equal length")
    n = len(x)
    if n < 2:
        raise ValueError(f"need at least 2 points, got {n}")
    if np.any(x <= 0):
        raise ValueError("x values must be strictly positive")

    u = 1.0 / (x * x)
    su = _running_sum(u)
    su2 = _running_sum(u * u)
    sy = _running_sum(y)
    suy = _running_sum(u * y)

    det = n * su2 - su * su
    if abs(det) < det_tol or np.all(u == u[0]):
        return None

    a = (sy * su2 - su * suy) / det
    b = (n * suy - su * sy) / det
    yhat = b / (x * x) + a
    return InverseSquareFit(a=float(a), b=float(b), r2=_r2(y, yhat, sy / n))


def r_squared(x: Sequence[float], y: Sequence[float]) -> Optional[float]:
    res = fit_inverse_square(x, y)
    return None if res is None else res.r2
