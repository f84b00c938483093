from __future__ import absolute_import

from odeapprox.config import Config
from odeapprox.config import InvalidConfigError
from odeapprox.controller import ApproximationController
from odeapprox.controller import ApproximationsSnapshot
from odeapprox.controller import ErrorSnapshot
from odeapprox.differential_function import ArityError
from odeapprox.differential_function import DifferentialFunction
from odeapprox.error_analysis import ErrorAnalyzer
from odeapprox.error_analysis import ErrorSeries
from odeapprox.error_analysis import estimate_convergence_order
from odeapprox.error_analysis import local_error
from odeapprox.error_analysis import pointwise_error
from odeapprox.events import Event
from odeapprox.events import EventPublisher
from odeapprox.integrator import discretize_domain
from odeapprox.integrator import exact_trajectory
from odeapprox.integrator import integrate
from odeapprox.integrator import step_count
from odeapprox.step_function import Method
from odeapprox.step_function import Point
from odeapprox.step_function import StepFunction
from odeapprox.step_function import euler_step
from odeapprox.step_function import heun_step
from odeapprox.step_function import rk4_step
from odeapprox.trajectory import Trajectory

__all__ = [
    'Config',
    'InvalidConfigError',
    'ApproximationController',
    'ApproximationsSnapshot',
    'ErrorSnapshot',
    'ArityError',
    'DifferentialFunction',
    'ErrorAnalyzer',
    'ErrorSeries',
    'estimate_convergence_order',
    'local_error',
    'pointwise_error',
    'Event',
    'EventPublisher',
    'discretize_domain',
    'exact_trajectory',
    'integrate',
    'step_count',
    'Method',
    'Point',
    'StepFunction',
    'euler_step',
    'heun_step',
    'rk4_step',
    'Trajectory'
]
