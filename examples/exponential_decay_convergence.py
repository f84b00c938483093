import logging

from odeapprox import *

logging.basicConfig(level=logging.INFO)

df = DifferentialFunction.from_expressions('exp(-2*x)', '-2*y')
config = Config.from_dict({'x0': 0., 'y0': 1., 'X': 2., 'N': 20})
analyzer = ErrorAnalyzer(df)

for method in Method:
    series = analyzer.global_error(method, config, n_max=64, n_min=8)
    print(
        f'{method.label}: expected order {method.order}, '
        f'estimated order {estimate_convergence_order(series):.2f}')
