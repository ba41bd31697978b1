"""Toy fitness landscapes.

Every function returns a negated cost so that the optimum is a maximum.
"""
from __future__ import annotations

import functools

import numpy as np

from typing import Any
from typing import Callable
from typing import Optional

from ._errors import InvalidParameterError


def sphere(x: Any, shift: Optional[Any] = None) -> float:
    x = _shifted(x, shift)
    return float(-np.sum(x**2))


def himmelblau(x: Any) -> float:
    x = np.asarray(x, dtype=float)
    if x.shape != (2,):
        raise InvalidParameterError(
            f"Himmelblau function is defined only for 2-D inputs, got shape {x.shape}."
        )
    x1, x2 = x
    return float(-((x1**2 + x2 - 11.0) ** 2 + (x1 + x2**2 - 7.0) ** 2))


def styblinski_tang(x: Any) -> float:
    x = np.asarray(x, dtype=float)
    return float(-(np.sum(x**4 - 16 * x**2 + 5 * x) / 2))


def rastrigin(x: Any, shift: Optional[Any] = None) -> float:
    x = _shifted(x, shift)
    return float(-(10 * x.size + np.sum(x**2 - 10 * np.cos(2 * np.pi * x))))


OBJECTIVES = {
    "sphere": sphere,
    "himmelblau": himmelblau,
    "styblinski-tang": styblinski_tang,
    "rastrigin": rastrigin,
}

# Maximizers of the unshifted 2-D landscapes.
GLOBAL_OPTIMA = {
    "sphere": [(0.0, 0.0)],
    "himmelblau": [
        (3.0, 2.0),
        (-2.805118, 3.131312),
        (-3.779310, -3.283186),
        (3.584428, -1.848126),
    ],
    "styblinski-tang": [(-2.903534, -2.903534)],
    "rastrigin": [(0.0, 0.0)],
}

_SHIFTABLE = ("sphere", "rastrigin")


def get_objective(name: str, shift: Optional[Any] = None) -> Callable[[Any], float]:
    """Look up a fitness function by name.

    ``shift`` moves the optimum of the sphere and Rastrigin landscapes.
    """
    if name not in OBJECTIVES:
        raise InvalidParameterError(
            f"Unknown objective {name!r}, choose from {sorted(OBJECTIVES)}."
        )
    if shift is None:
        return OBJECTIVES[name]
    if name not in _SHIFTABLE:
        raise InvalidParameterError(f"{name} does not accept a shift.")
    return functools.partial(OBJECTIVES[name], shift=np.asarray(shift, dtype=float))


def _shifted(x: Any, shift: Optional[Any]) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    if shift is None:
        return x
    shift = np.asarray(shift, dtype=float)
    if shift.shape != x.shape:
        raise InvalidParameterError(
            f"shift {shift.shape} and input {x.shape} dimensions mismatch."
        )
    return x - shift
