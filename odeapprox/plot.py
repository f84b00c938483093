from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from odeapprox.controller import ApproximationsSnapshot, ErrorSnapshot


class Plot:
    """
    A base class for plots of approximations and their errors.
    """

    def __init__(
        self,
        figure: Figure,
        x_label: str,
        y_label: str,
        legend_location: Optional[str],
    ):
        """
        :param figure: the figure of the plot with a single set of axes
            holding one line per series
        :param x_label: the label of the horizontal axis
        :param y_label: the label of the vertical axis
        :param legend_location: the location of the legend naming the series;
            if it is None, no legend is drawn
        """
        ax = figure.axes[0]
        ax.set_xlabel(x_label)
        ax.set_ylabel(y_label)
        if legend_location is not None:
            ax.legend(loc=legend_location)

        figure.tight_layout()
        self._figure = figure

    @property
    def figure(self) -> Figure:
        """
        The figure of the plot.
        """
        return self._figure

    def show(self) -> Plot:
        """
        Displays the plot along with any other open figures. Saving the plot
        afterwards is not supported as showing it may close it.

        :return: the plot object the method is invoked on
        """
        plt.show()
        return self

    def save(self, file_path: str, extension: str = "png", **kwargs) -> Plot:
        """
        Saves the figure to an image file.

        :param file_path: the path of the image file without its extension
        :param extension: the image format to save the figure in
        :param kwargs: any extra arguments passed to matplotlib
        :return: the plot object the method is invoked on
        """
        self._figure.savefig(f"{file_path}.{extension}", **kwargs)
        return self

    def close(self):
        """
        Releases the figure of the plot.
        """
        plt.close(self._figure)


class ApproximationPlot(Plot):
    """
    A y against x plot of the approximate solution of each method along with
    the exact solution.
    """

    def __init__(
        self,
        snapshot: ApproximationsSnapshot,
        legend_location: Optional[str] = "best",
    ):
        """
        :param snapshot: the approximations to plot
        :param legend_location: the location of the legend; if it is None, no
            legend is drawn
        """
        fig, ax = plt.subplots()

        for method, trajectory in snapshot.trajectories.items():
            ax.plot(trajectory.x, trajectory.y, label=method.label)
        ax.plot(snapshot.exact.x, snapshot.exact.y, label="Exact")

        super(ApproximationPlot, self).__init__(fig, "x", "y", legend_location)


class GlobalErrorPlot(Plot):
    """
    A plot of the error at the right endpoint of the domain against the step
    count for each method.
    """

    def __init__(
        self,
        snapshot: ErrorSnapshot,
        log_scale: bool = False,
        legend_location: Optional[str] = "best",
    ):
        """
        :param snapshot: the global error series to plot
        :param log_scale: whether to plot the absolute errors on logarithmic
            axes
        :param legend_location: the location of the legend; if it is None, no
            legend is drawn
        """
        fig, ax = plt.subplots()

        for method, series in snapshot.series.items():
            values = np.abs(series.values) if log_scale else series.values
            ax.plot(series.arguments, values, label=method.label)

        if log_scale:
            ax.set_xscale("log")
            ax.set_yscale("log")

        super(GlobalErrorPlot, self).__init__(
            fig, "N", "|error|" if log_scale else "error", legend_location
        )


class LocalErrorPlot(Plot):
    """
    A plot of the error introduced by each step against x for each method.
    """

    def __init__(
        self, snapshot: ErrorSnapshot, legend_location: Optional[str] = "best"
    ):
        """
        :param snapshot: the local error series to plot
        :param legend_location: the location of the legend; if it is None, no
            legend is drawn
        """
        fig, ax = plt.subplots()

        for method, series in snapshot.series.items():
            ax.plot(series.arguments, series.values, label=method.label)

        super(LocalErrorPlot, self).__init__(
            fig, "x", "local error", legend_location
        )
