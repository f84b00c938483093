from __future__ import annotations

import math
import numbers
from typing import Any, Dict, Mapping


class InvalidConfigError(ValueError):
    """
    Raised when the parameters of an approximation are inconsistent.
    """


class Config:
    """
    The parameters of a fixed step approximation: the initial point
    (x_0, y_0), the right endpoint of the domain and the step size.
    """

    def __init__(self, x_0: float, y_0: float, x_end: float, h: float):
        """
        :param x_0: the left endpoint of the domain
        :param y_0: the initial value y(x_0)
        :param x_end: the right endpoint of the domain
        :param h: the step size; if it is 0, approximations are empty
        """
        _check_finite_real("x_0", x_0)
        _check_finite_real("y_0", y_0)
        _check_finite_real("x_end", x_end)
        _check_finite_real("h", h)
        if x_end <= x_0:
            raise InvalidConfigError(
                f"right endpoint ({x_end}) must be greater than left endpoint "
                f"({x_0})"
            )
        if h < 0.0:
            raise InvalidConfigError(f"step size ({h}) must be non-negative")

        self._x_0 = float(x_0)
        self._y_0 = float(y_0)
        self._x_end = float(x_end)
        self._h = float(h)

    @classmethod
    def from_step_count(
        cls, x_0: float, y_0: float, x_end: float, n: int
    ) -> Config:
        """
        Creates a config whose step size divides the domain into n steps.

        :param x_0: the left endpoint of the domain
        :param y_0: the initial value y(x_0)
        :param x_end: the right endpoint of the domain
        :param n: the number of steps
        :return: the config
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise InvalidConfigError(
                f"number of steps must be an integer but got {n!r}"
            )
        if n <= 0:
            raise InvalidConfigError(
                f"number of steps ({n}) must be greater than 0"
            )
        _check_finite_real("x_0", x_0)
        _check_finite_real("x_end", x_end)

        return cls(x_0, y_0, x_end, (x_end - x_0) / n)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> Config:
        """
        Creates a config from a mapping with the keys 'x0', 'y0', 'X' and
        either 'h' or 'N'.

        :param values: the mapping of parameter values
        :return: the config
        """
        missing = [key for key in ("x0", "y0", "X") if key not in values]
        if missing:
            raise InvalidConfigError(f"missing parameters: {missing}")

        if "h" in values:
            if "N" in values:
                raise InvalidConfigError("only one of 'h' and 'N' may be set")
            return cls(values["x0"], values["y0"], values["X"], values["h"])
        if "N" in values:
            return cls.from_step_count(
                values["x0"], values["y0"], values["X"], values["N"]
            )

        raise InvalidConfigError("one of 'h' and 'N' must be set")

    @property
    def x_0(self) -> float:
        """
        The left endpoint of the domain.
        """
        return self._x_0

    @property
    def y_0(self) -> float:
        """
        The initial value of the solution.
        """
        return self._y_0

    @property
    def x_end(self) -> float:
        """
        The right endpoint of the domain.
        """
        return self._x_end

    @property
    def h(self) -> float:
        """
        The step size.
        """
        return self._h

    def with_step_count(self, n: int) -> Config:
        """
        Returns a copy of the config with the step size set so that the
        domain is divided into n steps.

        :param n: the number of steps
        :return: the new config
        """
        return Config.from_step_count(self._x_0, self._y_0, self._x_end, n)

    def replace(self, **changes: float) -> Config:
        """
        Returns a validated copy of the config with the specified parameters
        replaced.

        :param changes: the new values keyed by parameter name
        :return: the new config
        """
        values = self.to_dict()
        unknown = set(changes) - set(values)
        if unknown:
            raise InvalidConfigError(f"unknown parameters: {sorted(unknown)}")

        values.update(changes)
        return Config(**values)

    def to_dict(self) -> Dict[str, float]:
        """
        Returns the parameters keyed by name.
        """
        return {
            "x_0": self._x_0,
            "y_0": self._y_0,
            "x_end": self._x_end,
            "h": self._h,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(tuple(self.to_dict().values()))

    def __repr__(self) -> str:
        return (
            f"Config(x_0={self._x_0}, y_0={self._y_0}, x_end={self._x_end}, "
            f"h={self._h})"
        )


def _check_finite_real(name: str, value: Any):
    """
    Ensures that the value of the named parameter is a finite real number.

    :param name: the name of the parameter
    :param value: the value of the parameter
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfigError(
            f"{name} must be a real number but got {value!r}"
        )
    if not math.isfinite(value):
        raise InvalidConfigError(f"{name} ({value}) must be finite")
