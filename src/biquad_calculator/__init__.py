"""Biquad filter coefficient calculator and frequency response viewer."""

__version__ = "1.0.0"
