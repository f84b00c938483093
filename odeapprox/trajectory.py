from __future__ import annotations

from typing import Iterator, Sequence

import numpy as np

from odeapprox.step_function import Point


class Trajectory:
    """
    An ordered sequence of points of an approximate or exact solution.
    """

    def __init__(self, x: np.ndarray, y: np.ndarray):
        """
        :param x: the x coordinates of the points
        :param y: the values of the solution at the x coordinates
        """
        if x.ndim != 1:
            raise ValueError(f"number of x dimensions ({x.ndim}) must be 1")
        if x.shape != y.shape:
            raise ValueError(
                f"x shape {x.shape} must match y shape {y.shape}"
            )

        self._x = np.array(x, dtype=float)
        self._y = np.array(y, dtype=float)

        self._x.setflags(write=False)
        self._y.setflags(write=False)

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> Trajectory:
        """
        Creates a trajectory from a sequence of points.

        :param points: the points of the trajectory
        :return: the trajectory
        """
        return cls(
            np.array([point.x for point in points], dtype=float),
            np.array([point.y for point in points], dtype=float),
        )

    @property
    def x(self) -> np.ndarray:
        """
        The x coordinates of the points.
        """
        return self._x

    @property
    def y(self) -> np.ndarray:
        """
        The y coordinates of the points.
        """
        return self._y

    @property
    def first(self) -> Point:
        """
        The first point of the trajectory.
        """
        return self[0]

    @property
    def last(self) -> Point:
        """
        The last point of the trajectory.
        """
        return self[-1]

    def __len__(self) -> int:
        return len(self._x)

    def __getitem__(self, index: int) -> Point:
        if not len(self._x):
            raise ValueError("trajectory is empty")
        return Point(float(self._x[index]), float(self._y[index]))

    def __iter__(self) -> Iterator[Point]:
        for x, y in zip(self._x, self._y):
            yield Point(float(x), float(y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trajectory):
            return NotImplemented
        return np.array_equal(self._x, other._x, equal_nan=True) and (
            np.array_equal(self._y, other._y, equal_nan=True)
        )

    def __repr__(self) -> str:
        return f"Trajectory(points={len(self)})"
