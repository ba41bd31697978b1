from __future__ import annotations

import math

import numpy as np

from typing import Any
from typing import Callable
from typing import Optional

from ._errors import DegenerateFitnessError
from ._errors import InvalidParameterError


_MEAN_MAX = 1e32

Objective = Callable[[np.ndarray], float]
StepCallback = Callable[[np.ndarray, np.ndarray, np.ndarray], None]


def normalize_fitness(values: np.ndarray) -> np.ndarray:
    """Standardize fitness values to zero mean and unit sample variance.

    Raises:
        DegenerateFitnessError: if every value is the same or any value
            is not finite.
    """
    values = np.asarray(values, dtype=float)
    if values.ndim != 1 or values.size < 2:
        raise InvalidParameterError("At least two fitness values are required.")

    if not np.all(np.isfinite(values)):
        raise DegenerateFitnessError(
            "Fitness values must be finite, got "
            f"{np.count_nonzero(~np.isfinite(values))} non-finite of {values.size}."
        )
    # Compared directly since the mean of equal values is not exact.
    if np.all(values == values[0]):
        raise DegenerateFitnessError(
            "Sample standard deviation of fitness values is zero "
            f"(all {values.size} candidates scored {values[0]})."
        )
    with np.errstate(over="ignore", invalid="ignore"):
        normalized = (values - np.mean(values)) / np.std(values, ddof=1)
    if not np.all(np.isfinite(normalized)):
        raise DegenerateFitnessError("Spread of fitness values overflows.")
    return normalized


def es_gradient(noise: np.ndarray, normalized: np.ndarray) -> np.ndarray:
    """Fitness-weighted mean of the perturbation directions.

    Args:

        noise:
            ``(npop, dim)`` standard normal samples used to build the population.

        normalized:
            ``(npop,)`` standardized fitness of each sample.

    Returns:
        The ``(dim,)`` ascent direction estimate.
    """
    noise = np.asarray(noise, dtype=float)
    normalized = np.asarray(normalized, dtype=float)
    if noise.ndim != 2 or normalized.shape != (noise.shape[0],):
        raise InvalidParameterError(
            f"noise {noise.shape} and fitness {normalized.shape} shapes mismatch."
        )
    return noise.T.dot(normalized) / noise.shape[0]


def es_step(
    x: np.ndarray,
    objective: Objective,
    npop: int,
    sigma: float,
    alpha: float,
    rng: Optional[Any] = None,
    callback: Optional[StepCallback] = None,
    executor: Optional[Any] = None,
) -> np.ndarray:
    """Run one iteration of the evolution strategy and return a new estimate.

    Example:

        .. code::

           import numpy as np
           from simplees import es_step, sphere

           rng = np.random.default_rng(0)
           x = np.zeros(2)
           for _ in range(300):
               x = es_step(x, sphere, npop=50, sigma=0.1, alpha=0.001, rng=rng)

    Args:

        x:
            Current estimate. It is never modified in place.

        objective:
            Fitness function to maximize, called once per population member.

        npop:
            A population size (two or more).

        sigma:
            Standard deviation of the gaussian perturbations.

        alpha:
            Step size. ``0`` leaves the estimate where it is.

        rng:
            Random source exposing ``standard_normal(size)``, like
            ``np.random.Generator`` or ``np.random.RandomState`` (optional).

        callback:
            Called with ``(population, fitness, new_x)`` after the update
            (optional).

        executor:
            ``concurrent.futures.Executor`` used to evaluate the population
            (optional).
    """
    x = _validate_estimate(x)
    _validate_hyperparameters(npop, sigma, alpha)
    if rng is None:
        rng = np.random.default_rng()

    noise = rng.standard_normal((npop, x.size))  # ~ N(0, I)
    population = x + sigma * noise
    fitness = _evaluate(objective, population, executor)

    normalized = normalize_fitness(fitness)
    grad = es_gradient(noise, normalized)
    x_new = x + (alpha / (npop * sigma)) * grad

    if callback is not None:
        callback(population, fitness, x_new)
    return x_new


class SimpleES:
    """Evolution strategy with fixed sigma and ask-and-tell interface.

    Evaluation values are fitness: higher is better.

    Example:

        .. code::

           import numpy as np
           from simplees import SimpleES

           def fitness(x):
               return -((x[0] - 3.5) ** 2 + (x[1] + 0.2) ** 2)

           optimizer = SimpleES(mean=np.zeros(2), sigma=0.1, alpha=0.01, seed=1)

           for generation in range(100):
               solutions = []
               for _ in range(optimizer.population_size):
                   x = optimizer.ask()
                   solutions.append((x, fitness(x)))
               optimizer.tell(solutions)

    Args:

        mean:
            Initial estimate.

        sigma:
            Standard deviation of the gaussian perturbations.

        alpha:
            Step size.

        population_size:
            A population size (optional).

        seed:
            A seed number (optional).

        rng:
            A random source used instead of ``seed`` (optional).
    """

    def __init__(
        self,
        mean: np.ndarray,
        sigma: float,
        alpha: float,
        population_size: Optional[int] = None,
        seed: Optional[int] = None,
        rng: Optional[Any] = None,
    ):
        mean = _validate_estimate(mean)
        n_dim = mean.size

        if population_size is None:
            population_size = max(2, 4 + math.floor(3 * math.log(n_dim)))
        _validate_hyperparameters(population_size, sigma, alpha)

        self._n_dim = n_dim
        self._popsize = population_size
        self._mean = mean.copy()
        self._sigma = sigma
        self._alpha = alpha

        self._g = 0
        self._rng = rng if rng is not None else np.random.RandomState(seed)

    @property
    def dim(self) -> int:
        """A number of dimensions"""
        return self._n_dim

    @property
    def population_size(self) -> int:
        """A population size"""
        return self._popsize

    @property
    def generation(self) -> int:
        """Generation number which is monotonically incremented
        when the estimate is updated."""
        return self._g

    @property
    def mean(self) -> np.ndarray:
        return self._mean.copy()

    @property
    def sigma(self) -> float:
        return self._sigma

    @property
    def alpha(self) -> float:
        return self._alpha

    def reseed_rng(self, seed: int) -> None:
        if not isinstance(self._rng, np.random.RandomState):
            raise InvalidParameterError("Only the seeded RandomState can be reseeded.")
        self._rng.seed(seed)

    def ask(self) -> np.ndarray:
        """Sample a parameter"""
        z = self._rng.standard_normal(self._n_dim)  # ~ N(0, I)
        return self._mean + self._sigma * z

    def tell(self, solutions: list[tuple[np.ndarray, float]]) -> None:
        """Tell evaluation values"""
        if len(solutions) != self._popsize:
            raise InvalidParameterError("Must tell popsize-length solutions.")

        params = np.array([np.asarray(s[0], dtype=float) for s in solutions])
        if params.shape != (self._popsize, self._n_dim):
            raise InvalidParameterError(
                f"Solutions must have shape ({self._n_dim},), got {params.shape[1:]}."
            )
        if not np.all(np.abs(params) < _MEAN_MAX):
            raise InvalidParameterError(
                f"Abs of all param values must be less than {_MEAN_MAX}"
            )
        fitness = np.array([s[1] for s in solutions], dtype=float)

        # Raises before any state changes on a flat or non-finite population.
        normalized = normalize_fitness(fitness)

        z_k = (params - self._mean) / self._sigma
        grad = es_gradient(z_k, normalized)

        step = self._alpha / (self._popsize * self._sigma)
        with np.errstate(over="ignore", invalid="ignore"):
            mean = self._mean + step * grad
        if not np.all(np.isfinite(mean)):
            raise InvalidParameterError("The updated mean overflows.")

        self._g += 1
        self._mean = mean


def _validate_estimate(x: Any) -> np.ndarray:
    x = np.array(x, dtype=float)
    if x.ndim != 1 or x.size < 1:
        raise InvalidParameterError(
            f"The estimate must be a non-empty 1-D vector, got shape {x.shape}."
        )
    if not np.all(np.isfinite(x)) or not np.all(np.abs(x) < _MEAN_MAX):
        raise InvalidParameterError(
            "Abs of all elements of the estimate must be finite and less than "
            f"{_MEAN_MAX}"
        )
    return x


def _validate_hyperparameters(npop: int, sigma: float, alpha: float) -> None:
    if not isinstance(npop, (int, np.integer)) or npop < 2:
        raise InvalidParameterError(f"Population size must be two or more, got {npop}.")
    if not sigma > 0:
        raise InvalidParameterError(
            f"sigma must be non-zero positive value, got {sigma}."
        )
    if not alpha >= 0:
        raise InvalidParameterError(f"alpha must be non-negative, got {alpha}.")


def _evaluate(
    objective: Objective, population: np.ndarray, executor: Optional[Any]
) -> np.ndarray:
    if executor is None:
        values = [objective(p) for p in population]
    else:
        values = list(executor.map(objective, population))

    fitness = np.empty(len(values), dtype=float)
    for i, value in enumerate(values):
        if np.ndim(value) != 0:
            raise InvalidParameterError(
                f"objective must return a scalar, got shape {np.shape(value)}."
            )
        fitness[i] = value
    return fitness
