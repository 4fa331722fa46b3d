# src/biquad_calculator/utils.py

"""
Helpers shared by the UI, the CLI and the figure export: input clamping,
control enable state, log-axis tick labels and coefficient listing.
"""

import logging
import math
from typing import NamedTuple

from . import config
from .core.filter_types import Coefficients, FilterType, Parameters

logger = logging.getLogger(__name__)


class ControlState(NamedTuple):
    q_enabled: bool
    gain_enabled: bool


_CONTROL_STATES = {
    FilterType.LOWPASS: ControlState(q_enabled=True, gain_enabled=False),
    FilterType.HIGHPASS: ControlState(q_enabled=True, gain_enabled=False),
    FilterType.BANDPASS: ControlState(q_enabled=True, gain_enabled=False),
    FilterType.NOTCH: ControlState(q_enabled=True, gain_enabled=False),
    FilterType.PEAK: ControlState(q_enabled=True, gain_enabled=True),
    FilterType.LOW_SHELF: ControlState(q_enabled=False, gain_enabled=True),
    FilterType.HIGH_SHELF: ControlState(q_enabled=False, gain_enabled=True),
    FilterType.ONE_POLE_LOWPASS: ControlState(q_enabled=False, gain_enabled=False),
    FilterType.ONE_POLE_HIGHPASS: ControlState(q_enabled=False, gain_enabled=False),
}


def control_state(filter_type) -> ControlState:
    """Which of the Q and gain inputs a filter type actually uses."""
    return _CONTROL_STATES[FilterType.from_name(filter_type)]


def parse_parameter(text, name):
    """
    Parse a numeric field typed by the user.

    Raises ValueError naming the field when the text is not a finite number.
    """
    try:
        value = float(text)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid value for {name}: {text!r}") from e
    if not math.isfinite(value):
        raise ValueError(f"Invalid value for {name}: {text!r}")
    return value


def clamp_parameters(sample_rate_hz, cutoff_hz, q, gain_db) -> Parameters:
    """
    Clamp raw inputs into the ranges the designer expects.

    Fs is at least MIN_SAMPLE_RATE, Fc lies in [0, Fs/2] and Q is at least MIN_Q.
    Gain passes through unchanged.
    """
    fs = max(sample_rate_hz, config.MIN_SAMPLE_RATE)
    fc = min(max(cutoff_hz, 0), fs / 2)
    clamped_q = max(q, config.MIN_Q)
    if (fs, fc, clamped_q) != (sample_rate_hz, cutoff_hz, q):
        logger.warning("Clamped parameters: fs %s -> %s, fc %s -> %s, Q %s -> %s",
                       sample_rate_hz, fs, cutoff_hz, fc, q, clamped_q)
    return Parameters(cutoff_hz=fc, sample_rate_hz=fs, q=clamped_q, gain_db=gain_db)


def log_position_to_hz(x, sample_rate_hz):
    """Map a normalized log-position in [0, 0.5] back to Hz."""
    return math.exp(math.log(1 / config.LOG_SWEEP_START_RATIO) * x * 2) \
        * config.LOG_SWEEP_START_RATIO * sample_rate_hz * 0.5


def format_frequency_tick(x, sample_rate_hz):
    """Label for a log-axis tick: 3 decimals below 1 Hz, 2 below 10 Hz, else 1."""
    hz = log_position_to_hz(x, sample_rate_hz)
    if hz < 1:
        return f"{hz:.3f}"
    if hz < 10:
        return f"{hz:.2f}"
    return f"{hz:.1f}"


def format_coefficients(coefficients: Coefficients) -> str:
    """List the coefficients one per line, e.g. 'a0 = 0.0046'."""
    names = ("a0", "a1", "a2", "b1", "b2")
    return "\n".join(f"{name} = {value!r}" for name, value in zip(names, coefficients.as_tuple()))
