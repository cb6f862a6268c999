from __future__ import annotations
import logging
import math
from typing import Any, Iterable, List, Optional, Tuple, Union
from fitservice.app.core.config import settings
from fitservice.app.services.fitter import r_squared
from fitservice.app.services.transforms import TRANSFORMS, Transform, lookup

logger = logging.getLogger(__name__)


class FitServiceError(Exception):
    status_code = 422
    message = "Fit service error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class InsufficientPointsError(FitServiceError):
    status_code = 400
    message = "Need at least 2 valid points"


class DegenerateFitError(FitServiceError):
    message = "Fit failed"


class TransformFailedError(FitServiceError):
    message = "Transform failed"


def _to_float(value: Any) -> Optional[float]:
    # bools are ints in Python but never numeric samples here
    if isinstance(value, bool) or value is None:
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        out = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    return out if math.isfinite(out) else None


def parse_rows(rows: Iterable[Any]) -> Tuple[List[float], List[float]]:
    """Keep rows whose first two entries parse as finite floats with x > 0."""
    xs: List[float] = []
    ys: List[float] = []
    dropped = 0
    for row in rows:
        if not isinstance(row, (list, tuple)) or len(row) < 2:
            dropped += 1
            continue
        xi, yi = _to_float(row[0]), _to_float(row[1])
        if xi is None or yi is None or xi <= 0:
            dropped += 1
            continue
        xs.append(xi)
        ys.append(yi)
    if dropped:
        logger.debug(f"dropped {dropped} invalid rows")
    return xs, ys


def finalize(value: float, decimals: int = 6) -> float:
    if isinstance(value, float) and math.isfinite(value):
        # + 0.0 turns -0.0 into 0.0
        return round(value, decimals) + 0.0
    return value


class ResultService:
    def __init__(self, min_points: Optional[int] = None, decimals: Optional[int] = None):
        self.min_points = settings.MIN_POINTS if min_points is None else min_points
        self.decimals = settings.RESULT_DECIMALS if decimals is None else decimals

    def sample(self, rows: Iterable[Any]) -> Tuple[List[float], List[float]]:
        x, y = parse_rows(rows)
        if len(x) < max(2, self.min_points):
            raise InsufficientPointsError()
        return x, y

    def evaluate(self, x: List[float], y: List[float], transform: Union[str, Transform]) -> float:
        t = lookup(transform)
        r2 = r_squared(x, y)
        if r2 is None:
            logger.warning("degenerate fit", extra={"points": len(x), "transform": t.value})
            raise DegenerateFitError()
        try:
            value = TRANSFORMS[t].apply(r2)
        except Exception:
            logger.exception("transform evaluation failed", extra={"transform": t.value})
            raise TransformFailedError()
        logger.info("result computed", extra={"points": len(x), "transform": t.value})
        return finalize(value, self.decimals)

    def compute(self, rows: Iterable[Any], transform: Union[str, Transform]) -> float:
        x, y = self.sample(rows)
        return self.evaluate(x, y, transform)
