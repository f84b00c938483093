from setuptools import setup
from setuptools import find_packages

setup(
    name='odeapprox',
    version='0.0.1',
    description='Fixed step single step methods for first order ordinary '
                'differential equations with global and local error analysis',
    license='MIT',
    packages=find_packages(include=['odeapprox', 'odeapprox.*']),
    install_requires=[
        'numpy',
        'scipy',
        'sympy',
        'matplotlib',
    ],
    extras_require={
        'test': ['pytest'],
    },
    include_package_data=True,
    zip_safe=False)
