"""Monotonic maps from R² to the scalar reported as ``mainResult``.

Each entry clamps R² to its own domain before evaluating its formula. Entries
with a saturation value return it outright once the raw R² reaches the
ceiling, instead of evaluating the formula at the clamp.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Union
import numpy as np

# smallest complement 1 - r allowed inside log / root / power formulas
COMPLEMENT_FLOOR = 1e-10


class Transform(str, Enum):
    reciprocal_complement = "reciprocal-complement"
    exp_reciprocal_complement = "exp-reciprocal-complement"
    neg_log_complement = "neg-log-complement"
    inverse_sqrt_complement = "inverse-sqrt-complement"
    tangent_half_pi = "tangent-half-pi"
    exp_decay_scaled = "exp-decay-scaled"
    inverse_cube_complement = "inverse-cube-complement"
    log1p = "log1p"
    exp_clamped_low = "exp-clamped-low"
    sqrt1p = "sqrt1p"
    square = "square"
    arctan_normalized = "arctan-normalized"
    saturating_ratio = "saturating-ratio"
    sinh = "sinh"
    exp_negative = "exp-negative"


class UnknownTransformError(KeyError):
    pass


@dataclass(frozen=True)
class TransformSpec:
    label: str
    formula: Callable[[float], float]
    floor: float = 0.0
    ceiling: Optional[float] = None
    saturation: Optional[float] = None

    def apply(self, r2: float) -> float:
        r = float(r2)
        if self.saturation is not None and r >= self.ceiling:
            return self.saturation
        with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
            clamped = np.clip(r, self.floor, self.ceiling)
            return float(self.formula(clamped))


def _complement(r):
    return np.maximum(COMPLEMENT_FLOOR, 1.0 - r)


def _saturating_ratio(r):
    v = r / (1.0 + r)
    return 0.0 if np.isnan(v) or v == 0 else v


TRANSFORMS: Mapping[Transform, TransformSpec] = MappingProxyType({
    Transform.reciprocal_complement: TransformSpec(
        "1/(1-R²) ★", lambda r: 1.0 / (1.0 - r), ceiling=0.999, saturation=1e10),
    Transform.exp_reciprocal_complement: TransformSpec(
        "exp(1/(1-R²)) ★", lambda r: np.exp(1.0 / (1.0 - r)), ceiling=0.999, saturation=1e100),
    Transform.neg_log_complement: TransformSpec(
        "-log(1-R²) ★", lambda r: -np.log(_complement(r)), ceiling=0.9999),
    Transform.inverse_sqrt_complement: TransformSpec(
        "1/√(1-R²) ★", lambda r: 1.0 / np.sqrt(_complement(r)), ceiling=0.999, saturation=1e10),
    Transform.tangent_half_pi: TransformSpec(
        "tan(π·R²/2) ★", lambda r: np.tan(np.pi * r / 2), ceiling=0.999),
    Transform.exp_decay_scaled: TransformSpec(
        "exp(10·(R²-1)) ★", lambda r: np.exp(10.0 * (r - 1.0))),
    Transform.inverse_cube_complement: TransformSpec(
        "(1-R²)⁻³ ★", lambda r: 1.0 / _complement(r) ** 3, ceiling=0.999, saturation=1e30),
    Transform.log1p: TransformSpec("log(1 + R²)", np.log1p),
    Transform.exp_clamped_low: TransformSpec("exp(R²)", np.exp, floor=-10.0),
    Transform.sqrt1p: TransformSpec("√(1 + R²)", lambda r: np.sqrt(1.0 + r)),
    Transform.square: TransformSpec("R²²", lambda r: r ** 2),
    Transform.arctan_normalized: TransformSpec("arctan(R²)×2/π", lambda r: np.arctan(r) * 2 / np.pi),
    Transform.saturating_ratio: TransformSpec("R²/(1+R²)", _saturating_ratio),
    Transform.sinh: TransformSpec("sinh(R²)", np.sinh),
    Transform.exp_negative: TransformSpec("exp(-R²)", lambda r: np.exp(-r)),
})

_BY_LABEL: Dict[str, Transform] = {spec.label: t for t, spec in TRANSFORMS.items()}


def lookup(key: Union[str, Transform]) -> Transform:
    """Resolve a kebab-case name or a legacy display label. No fallback."""
    if isinstance(key, Transform):
        return key
    if isinstance(key, str):
        try:
            return Transform(key)
        except ValueError:
            pass
        if key in _BY_LABEL:
            return _BY_LABEL[key]
    raise UnknownTransformError(key)


def apply_transform(name: Union[str, Transform], r2: float) -> float:
    return TRANSFORMS[lookup(name)].apply(r2)
