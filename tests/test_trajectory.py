import numpy as np
import pytest

from odeapprox.step_function import Point
from odeapprox.trajectory import Trajectory


def test_trajectory_with_wrong_x_rank():
    with pytest.raises(ValueError):
        Trajectory(np.zeros((2, 2)), np.zeros((2, 2)))


def test_trajectory_with_mismatched_x_and_y():
    with pytest.raises(ValueError):
        Trajectory(np.zeros(3), np.zeros(4))


def test_trajectory():
    trajectory = Trajectory.from_points(
        [Point(0.0, 1.0), Point(0.5, 2.0), Point(1.0, 4.0)]
    )

    assert len(trajectory) == 3
    assert trajectory.first == Point(0.0, 1.0)
    assert trajectory.last == Point(1.0, 4.0)
    assert trajectory[1] == Point(0.5, 2.0)
    assert list(trajectory) == [
        Point(0.0, 1.0),
        Point(0.5, 2.0),
        Point(1.0, 4.0),
    ]
    assert np.allclose(trajectory.x, [0.0, 0.5, 1.0])
    assert np.allclose(trajectory.y, [1.0, 2.0, 4.0])


def test_trajectory_arrays_are_read_only():
    x = np.array([0.0, 1.0])
    trajectory = Trajectory(x, np.array([1.0, 2.0]))
    x[0] = 5.0

    assert trajectory.x[0] == 0.0
    with pytest.raises(ValueError):
        trajectory.y[0] = 3.0


def test_empty_trajectory():
    trajectory = Trajectory(np.empty(0), np.empty(0))

    assert len(trajectory) == 0
    assert list(trajectory) == []
    with pytest.raises(ValueError):
        _ = trajectory.last


def test_trajectory_equality():
    trajectory = Trajectory(np.array([0.0, 1.0]), np.array([np.nan, 2.0]))

    assert trajectory == Trajectory(
        np.array([0.0, 1.0]), np.array([np.nan, 2.0])
    )
    assert trajectory != Trajectory(
        np.array([0.0, 1.0]), np.array([1.0, 2.0])
    )
