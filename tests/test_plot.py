import os

import matplotlib

from odeapprox.config import Config
from odeapprox.controller import ApproximationController
from odeapprox.differential_function import DifferentialFunction
from odeapprox.plot import ApproximationPlot, GlobalErrorPlot, LocalErrorPlot

matplotlib.use('Agg')


def _built_controller():
    controller = ApproximationController(
        DifferentialFunction(
            lambda x: 3.0 * x**2 - x, lambda x, y: 1.0 + 2.0 * y / x
        ),
        Config(1.0, 2.0, 10.0, 0.1),
        n_max=10,
    )
    controller.build()
    return controller


def test_approximation_plot():
    file_path = 'approximation_plot'
    plot = ApproximationPlot(_built_controller().approximations)

    assert len(plot.figure.axes[0].get_lines()) == 4

    plot.save(file_path).close()
    os.remove(f'{file_path}.png')


def test_global_error_plot():
    file_path = 'global_error_plot'
    GlobalErrorPlot(_built_controller().global_error).save(file_path).close()
    os.remove(f'{file_path}.png')


def test_log_scale_global_error_plot():
    file_path = 'log_scale_global_error_plot'
    plot = GlobalErrorPlot(_built_controller().global_error, log_scale=True)

    assert plot.figure.axes[0].get_yscale() == 'log'

    plot.save(file_path).close()
    os.remove(f'{file_path}.png')


def test_local_error_plot_without_legend():
    file_path = 'local_error_plot'
    plot = LocalErrorPlot(
        _built_controller().local_error, legend_location=None
    )

    assert plot.figure.axes[0].get_legend() is None

    plot.save(file_path).close()
    os.remove(f'{file_path}.png')


def test_plot_axis_labels():
    controller = _built_controller()
    approximation_plot = ApproximationPlot(controller.approximations)
    global_error_plot = GlobalErrorPlot(controller.global_error)
    local_error_plot = LocalErrorPlot(controller.local_error)

    assert approximation_plot.figure.axes[0].get_xlabel() == 'x'
    assert approximation_plot.figure.axes[0].get_ylabel() == 'y'
    assert global_error_plot.figure.axes[0].get_xlabel() == 'N'
    assert local_error_plot.figure.axes[0].get_ylabel() == 'local error'

    for plot in (approximation_plot, global_error_plot, local_error_plot):
        plot.close()
