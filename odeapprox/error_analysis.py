from __future__ import annotations

import logging
from typing import Iterator, Tuple

import numpy as np
from scipy.stats import linregress

from odeapprox.config import Config
from odeapprox.differential_function import (
    DifferentialFunction,
    ExactSolution,
)
from odeapprox.integrator import integrate
from odeapprox.step_function import Method
from odeapprox.trajectory import Trajectory


class ErrorSeries:
    """
    A sequence of error values along with their arguments: step counts for
    global errors and x coordinates for local errors.
    """

    def __init__(self, label: str, arguments: np.ndarray, values: np.ndarray):
        """
        :param label: the name of the series
        :param arguments: the arguments the errors are evaluated at
        :param values: the error values
        """
        if arguments.ndim != 1:
            raise ValueError(
                f"number of argument dimensions ({arguments.ndim}) must be 1"
            )
        if arguments.shape != values.shape:
            raise ValueError(
                f"arguments shape {arguments.shape} must match values shape "
                f"{values.shape}"
            )

        self._label = label
        self._arguments = np.copy(arguments)
        self._values = np.array(values, dtype=float)

        self._arguments.setflags(write=False)
        self._values.setflags(write=False)

    @property
    def label(self) -> str:
        """
        The name of the series.
        """
        return self._label

    @property
    def arguments(self) -> np.ndarray:
        """
        The step counts or x coordinates the errors are evaluated at.
        """
        return self._arguments

    @property
    def values(self) -> np.ndarray:
        """
        The error values.
        """
        return self._values

    def __len__(self) -> int:
        return len(self._arguments)

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return zip(self._arguments.tolist(), self._values.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorSeries):
            return NotImplemented
        return (
            self._label == other._label
            and np.array_equal(self._arguments, other._arguments)
            and np.array_equal(self._values, other._values, equal_nan=True)
        )

    def __repr__(self) -> str:
        return f"ErrorSeries(label={self._label!r}, entries={len(self)})"


def pointwise_error(
    trajectory: Trajectory, exact: ExactSolution
) -> np.ndarray:
    """
    Returns the difference between the exact solution and the approximation
    at each point of the trajectory.

    :param trajectory: the approximate solution
    :param exact: the exact solution y(x)
    :return: the array of exact(x_i) - y_i values
    """
    exact_y = np.array([exact(x) for x in trajectory.x.tolist()], dtype=float)
    return exact_y - trajectory.y


def local_error(
    trajectory: Trajectory, exact: ExactSolution, label: str = ""
) -> ErrorSeries:
    """
    Returns the error introduced by each step of the trajectory, that is the
    change in the pointwise error from the previous point. The local error
    at the first point is 0.

    :param trajectory: the approximate solution
    :param exact: the exact solution y(x)
    :param label: the name of the series
    :return: the local error at each x coordinate of the trajectory
    """
    errors = pointwise_error(trajectory, exact)
    values = np.zeros_like(errors)
    values[1:] = np.diff(errors)
    return ErrorSeries(label, trajectory.x, values)


def estimate_convergence_order(series: ErrorSeries) -> float:
    """
    Estimates the empirical order of convergence of a global error series as
    the slope of log|error| against log N. Zero and non-finite errors are
    ignored.

    :param series: the global error series indexed by step count
    :return: the estimated order of convergence
    """
    n = series.arguments.astype(float)
    errors = np.abs(series.values)
    mask = np.isfinite(errors) & (errors > 0.0) & (n > 0.0)
    if mask.sum() < 2:
        raise ValueError(
            "at least two non-zero finite errors are required to estimate "
            "the order of convergence"
        )

    result = linregress(np.log(n[mask]), np.log(errors[mask]))
    return -float(result.slope)


class ErrorAnalyzer:
    """
    An analyzer of the accuracy of single step methods on a differential
    equation with a known exact solution.
    """

    def __init__(self, differential_function: DifferentialFunction):
        """
        :param differential_function: the differential equation and its exact
            solution
        """
        self._differential_function = differential_function
        self._logger = logging.getLogger(__name__)

    @property
    def differential_function(self) -> DifferentialFunction:
        """
        The differential equation and its exact solution.
        """
        return self._differential_function

    def global_error(
        self, method: Method, config: Config, n_max: int, n_min: int = 1
    ) -> ErrorSeries:
        """
        Computes the error of the approximation at the right endpoint of the
        domain for every step count between n_min and n_max. The step size of
        the config is ignored.

        :param method: the single step method to analyze
        :param config: the initial point and the domain
        :param n_max: the largest step count
        :param n_min: the smallest step count
        :return: the global error series indexed by step count
        """
        if n_min < 1:
            raise ValueError(
                f"minimum step count ({n_min}) must be at least 1"
            )
        if n_max < n_min:
            raise ValueError(
                f"maximum step count ({n_max}) must not be less than minimum "
                f"step count ({n_min})"
            )

        df = self._differential_function
        exact_y_end = df.exact(config.x_end)
        step_counts = np.arange(n_min, n_max + 1)
        errors = np.empty(len(step_counts))
        for i, n in enumerate(step_counts.tolist()):
            trajectory = integrate(
                method.step, df.derivative, config.with_step_count(n)
            )
            errors[i] = exact_y_end - trajectory.last.y

        self._logger.debug(
            "%s global error computed for N in [%s, %s]",
            method.label,
            n_min,
            n_max,
        )
        return ErrorSeries(method.label, step_counts, errors)

    def local_error(self, method: Method, config: Config) -> ErrorSeries:
        """
        Computes the error introduced by each step of the approximation
        using the step size of the config.

        :param method: the single step method to analyze
        :param config: the initial point, the domain, and the step size
        :return: the local error series indexed by x coordinate
        """
        df = self._differential_function
        trajectory = integrate(method.step, df.derivative, config)
        self._logger.debug(
            "%s local error computed over %s points",
            method.label,
            len(trajectory),
        )
        return local_error(trajectory, df.exact, method.label)
