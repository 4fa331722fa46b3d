# src/biquad_calculator/core/axis.py

from .. import config
from .filter_types import FilterType

_PASS_STOP_TYPES = (FilterType.LOWPASS, FilterType.HIGHPASS, FilterType.BANDPASS, FilterType.NOTCH)
_GAIN_TYPES = (FilterType.PEAK, FilterType.LOW_SHELF, FilterType.HIGH_SHELF)


def select_axis_range(filter_type, min_db, max_db):
    """
    Pick the y-axis bounds (in dB) for displaying a response.

    Pass/stop filters sit in [-100, 0] and only grow upward for resonant peaks.
    Gain filters sit in [-10, 10] and grow outward on either side.
    One-pole filters always use [-40, 0].

    Returns (y_min, y_max).
    """
    filter_type = FilterType.from_name(filter_type)
    if filter_type in _GAIN_TYPES:
        y_min, y_max = config.GAIN_AXIS_RANGE
        return min(y_min, min_db), max(y_max, max_db)
    if filter_type in _PASS_STOP_TYPES:
        y_min, y_max = config.PASS_STOP_AXIS_RANGE
        return y_min, max(y_max, max_db)
    return config.ONE_POLE_AXIS_RANGE
