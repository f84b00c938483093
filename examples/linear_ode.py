import logging

from odeapprox import *
from odeapprox.plot import ApproximationPlot, GlobalErrorPlot, LocalErrorPlot

logging.basicConfig(level=logging.INFO)

df = DifferentialFunction(
    lambda x: 3. * x ** 2 - x,
    lambda x, y: 1. + 2. * y / x)
config = Config.from_dict({'x0': 1., 'y0': 2., 'X': 10., 'h': .1})

publisher = EventPublisher()
publisher.subscribe(
    Event.APPROXIMATIONS_UPDATED,
    lambda snapshot: ApproximationPlot(snapshot).show().close())
publisher.subscribe(
    Event.GLOBAL_ERROR_UPDATED,
    lambda snapshot: GlobalErrorPlot(snapshot, log_scale=True).show().close())
publisher.subscribe(
    Event.LOCAL_ERROR_UPDATED,
    lambda snapshot: LocalErrorPlot(snapshot).show().close())

controller = ApproximationController(
    df, config, n_max=100, publisher=publisher)
controller.build()
controller.update('h', .05)
