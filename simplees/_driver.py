from __future__ import annotations

import warnings

import numpy as np

from dataclasses import dataclass
from typing import Any
from typing import Optional

from ._errors import DegenerateFitnessError
from ._errors import InvalidParameterError
from ._es import Objective
from ._es import StepCallback
from ._es import es_step


@dataclass
class OptimizeResult:
    x0: np.ndarray
    x: np.ndarray
    initial_value: float
    final_value: float
    n_iterations: int
    n_skipped: int = 0


def optimize(
    objective: Objective,
    x0: Optional[np.ndarray] = None,
    dim: int = 2,
    n_iterations: int = 300,
    npop: int = 50,
    sigma: float = 0.1,
    alpha: float = 0.001,
    seed: Optional[int] = None,
    rng: Optional[Any] = None,
    callback: Optional[StepCallback] = None,
    on_degenerate: str = "raise",
    executor: Optional[Any] = None,
) -> OptimizeResult:
    """Repeat :func:`es_step` for a fixed number of iterations.

    Args:

        x0:
            Initial estimate. A standard normal vector of length ``dim`` is
            drawn from the random source when omitted.

        seed:
            A seed number, ignored when ``rng`` is given (optional).

        on_degenerate:
            ``"raise"`` propagates :class:`DegenerateFitnessError`,
            ``"skip"`` warns and keeps the estimate for that iteration.

    The remaining arguments are passed to :func:`es_step` on every iteration.
    """
    if on_degenerate not in ("raise", "skip"):
        raise InvalidParameterError(
            f"on_degenerate must be 'raise' or 'skip', got {on_degenerate!r}."
        )
    if n_iterations < 0:
        raise InvalidParameterError("n_iterations must be non-negative.")
    if rng is None:
        rng = np.random.default_rng(seed)
    if x0 is None:
        if dim < 1:
            raise InvalidParameterError("dim must be positive.")
        x0 = rng.standard_normal(dim)
    x0 = np.array(x0, dtype=float)

    x = x0
    n_skipped = 0
    for i in range(n_iterations):
        try:
            x = es_step(
                x,
                objective,
                npop=npop,
                sigma=sigma,
                alpha=alpha,
                rng=rng,
                callback=callback,
                executor=executor,
            )
        except DegenerateFitnessError as e:
            if on_degenerate == "raise":
                raise
            n_skipped += 1
            warnings.warn(
                f"Skipped iteration {i}: {e}",
                RuntimeWarning,
                stacklevel=2,
            )

    return OptimizeResult(
        x0=x0,
        x=x,
        initial_value=float(objective(x0)),
        final_value=float(objective(x)),
        n_iterations=n_iterations,
        n_skipped=n_skipped,
    )
