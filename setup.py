# setup.py

from setuptools import setup, find_packages

setup(
    name='biquad-calculator',
    version='1.0.0',
    description='Biquad filter coefficient calculator and frequency response viewer',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'scipy',
        'matplotlib',
        'PyQt5',
        'pyqtgraph',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'biquad-calculator=biquad_calculator.cli.__main__:main',
        ],
    },
)
