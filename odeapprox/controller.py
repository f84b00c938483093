from __future__ import annotations

import logging
import math
import numbers
from typing import Dict, Optional, Sequence, Union

import numpy as np

from odeapprox.config import Config, InvalidConfigError
from odeapprox.differential_function import DifferentialFunction
from odeapprox.error_analysis import ErrorAnalyzer, ErrorSeries
from odeapprox.events import Event, EventPublisher
from odeapprox.integrator import (
    discretize_domain,
    exact_trajectory,
    integrate,
)
from odeapprox.step_function import Method
from odeapprox.trajectory import Trajectory

# Names of the inbound parameters mapped to the corresponding config fields.
PARAMETERS = {"x0": "x_0", "y0": "y_0", "X": "x_end", "h": "h"}

# Name of the inbound parameter setting the step size through the number of
# steps.
STEP_COUNT_PARAMETER = "N"


class ApproximationsSnapshot:
    """
    The approximate and exact solutions computed by a single rebuild.
    """

    def __init__(
        self,
        config: Config,
        domain: np.ndarray,
        trajectories: Dict[Method, Trajectory],
        exact: Trajectory,
    ):
        """
        :param config: the config the snapshot was computed with
        :param domain: the discretized domain
        :param trajectories: the approximate solution of each method
        :param exact: the exact solution over the domain
        """
        self._config = config
        self._domain = np.copy(domain)
        self._trajectories = dict(trajectories)
        self._exact = exact

        self._domain.setflags(write=False)

    @property
    def config(self) -> Config:
        """
        The config the snapshot was computed with.
        """
        return self._config

    @property
    def domain(self) -> np.ndarray:
        """
        The x coordinates of the discretized domain.
        """
        return self._domain

    @property
    def trajectories(self) -> Dict[Method, Trajectory]:
        """
        The approximate solutions keyed by method.
        """
        return dict(self._trajectories)

    @property
    def exact(self) -> Trajectory:
        """
        The exact solution evaluated over the domain.
        """
        return self._exact

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApproximationsSnapshot):
            return NotImplemented
        return (
            self._config == other._config
            and np.array_equal(self._domain, other._domain)
            and self._trajectories == other._trajectories
            and self._exact == other._exact
        )


class ErrorSnapshot:
    """
    The error series of each method computed by a single rebuild.
    """

    def __init__(self, config: Config, series: Dict[Method, ErrorSeries]):
        """
        :param config: the config the snapshot was computed with
        :param series: the error series of each method
        """
        self._config = config
        self._series = dict(series)

    @property
    def config(self) -> Config:
        """
        The config the snapshot was computed with.
        """
        return self._config

    @property
    def series(self) -> Dict[Method, ErrorSeries]:
        """
        The error series keyed by method.
        """
        return dict(self._series)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorSnapshot):
            return NotImplemented
        return self._config == other._config and self._series == other._series


class ApproximationController:
    """
    The owner of the current config that rebuilds the approximations and
    their error series and notifies the listeners of the publisher after
    each successful rebuild.
    """

    def __init__(
        self,
        differential_function: DifferentialFunction,
        config: Config,
        methods: Sequence[Method] = tuple(Method),
        n_max: int = 100,
        n_min: int = 1,
        publisher: Optional[EventPublisher] = None,
    ):
        """
        :param differential_function: the differential equation and its exact
            solution
        :param config: the initial config
        :param methods: the single step methods to compare
        :param n_max: the largest step count of the global error series
        :param n_min: the smallest step count of the global error series
        :param publisher: the publisher to notify; if it is None, a new one is
            created
        """
        if not methods:
            raise ValueError("at least one method must be provided")
        if n_min < 1:
            raise ValueError(
                f"minimum step count ({n_min}) must be at least 1"
            )
        if n_max < n_min:
            raise ValueError(
                f"maximum step count ({n_max}) must not be less than minimum "
                f"step count ({n_min})"
            )

        self._differential_function = differential_function
        self._config = config
        self._methods = tuple(methods)
        self._n_max = n_max
        self._n_min = n_min
        self._publisher = (
            publisher if publisher is not None else EventPublisher()
        )
        self._analyzer = ErrorAnalyzer(differential_function)
        self._logger = logging.getLogger(__name__)

        self._approximations: Optional[ApproximationsSnapshot] = None
        self._global_error: Optional[ErrorSnapshot] = None
        self._local_error: Optional[ErrorSnapshot] = None

    @property
    def config(self) -> Config:
        """
        The config of the last successful rebuild or the initial config.
        """
        return self._config

    @property
    def methods(self) -> Sequence[Method]:
        """
        The single step methods compared.
        """
        return self._methods

    @property
    def publisher(self) -> EventPublisher:
        """
        The publisher notified after each successful rebuild.
        """
        return self._publisher

    @property
    def approximations(self) -> Optional[ApproximationsSnapshot]:
        """
        The approximations of the last successful rebuild.
        """
        return self._approximations

    @property
    def global_error(self) -> Optional[ErrorSnapshot]:
        """
        The global error series of the last successful rebuild.
        """
        return self._global_error

    @property
    def local_error(self) -> Optional[ErrorSnapshot]:
        """
        The local error series of the last successful rebuild.
        """
        return self._local_error

    def build(self):
        """
        Recomputes every approximation and error series using the current
        config and notifies the listeners.
        """
        self._rebuild(self._config)

    def update(self, name: str, value: Union[str, float]) -> bool:
        """
        Sets a parameter of the config and rebuilds. Values that are not
        finite numbers or that leave the config unchanged are ignored.

        :param name: the name of the parameter; one of 'x0', 'y0', 'X', 'h',
            or 'N' to set the step size through the number of steps
        :param value: the new value of the parameter
        :return: whether a rebuild took place
        """
        if name not in PARAMETERS and name != STEP_COUNT_PARAMETER:
            raise ValueError(
                f"unknown parameter {name!r}; expected one of "
                f"{list(PARAMETERS) + [STEP_COUNT_PARAMETER]}"
            )

        parsed_value = _parse_finite(value)
        if parsed_value is None:
            self._logger.debug("Ignoring non-finite %s value %r", name, value)
            return False

        try:
            config = self._updated_config(name, parsed_value)
        except InvalidConfigError as error:
            self._logger.warning(
                "Rejected %s value %r: %s", name, value, error
            )
            raise

        if config == self._config:
            return False

        self._rebuild(config)
        return True

    def _updated_config(self, name: str, value: float) -> Config:
        """
        Returns a copy of the current config with the parameter set.

        :param name: the name of the parameter
        :param value: the new value of the parameter
        :return: the new config
        """
        if name == STEP_COUNT_PARAMETER:
            if not value.is_integer():
                raise InvalidConfigError(
                    f"number of steps ({value}) must be an integer"
                )
            return self._config.with_step_count(int(value))

        return self._config.replace(**{PARAMETERS[name]: value})

    def _rebuild(self, config: Config):
        """
        Computes all snapshots for the config and only then stores them and
        publishes them.

        :param config: the config to build with
        """
        self._logger.info("Rebuilding approximations with %s", config)
        approximations = self._build_approximations(config)
        global_error = self._build_global_error(config)
        local_error = self._build_local_error(config)

        self._config = config
        self._approximations = approximations
        self._global_error = global_error
        self._local_error = local_error

        self._publisher.publish(Event.APPROXIMATIONS_UPDATED, approximations)
        self._publisher.publish(Event.GLOBAL_ERROR_UPDATED, global_error)
        self._publisher.publish(Event.LOCAL_ERROR_UPDATED, local_error)

    def _build_approximations(self, config: Config) -> ApproximationsSnapshot:
        df = self._differential_function
        trajectories = {
            method: integrate(method.step, df.derivative, config)
            for method in self._methods
        }
        return ApproximationsSnapshot(
            config,
            discretize_domain(config),
            trajectories,
            exact_trajectory(df.exact, config),
        )

    def _build_global_error(self, config: Config) -> ErrorSnapshot:
        return ErrorSnapshot(
            config,
            {
                method: self._analyzer.global_error(
                    method, config, self._n_max, self._n_min
                )
                for method in self._methods
            },
        )

    def _build_local_error(self, config: Config) -> ErrorSnapshot:
        return ErrorSnapshot(
            config,
            {
                method: self._analyzer.local_error(method, config)
                for method in self._methods
            },
        )


def _parse_finite(value: Union[str, float]) -> Optional[float]:
    """
    Converts an inbound value to a float.

    :param value: a number or a string representation of a number
    :return: the float value or None if the value is not a finite number
    """
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    elif isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None

    value = float(value)
    return value if math.isfinite(value) else None
