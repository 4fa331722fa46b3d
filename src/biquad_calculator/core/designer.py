# src/biquad_calculator/core/designer.py

"""
Biquad coefficient design.

Second-order formulas are the bilinear-transform designs with a pre-warped
cutoff, K = tan(pi * fc / fs). The gain-sensitive types (peak, low shelf,
high shelf) have separate boost and cut branches: the cut branch moves the
linear gain V to the denominator so that cutting by X dB is the exact
reciprocal of boosting by X dB.
"""

import logging
import math

from .filter_types import Coefficients, FilterType, Parameters

logger = logging.getLogger(__name__)

SQRT2 = math.sqrt(2)


def _one_pole_lowpass(p, K, V):
    decay = math.exp(-2.0 * math.pi * (p.cutoff_hz / p.sample_rate_hz))
    return Coefficients(a0=1.0 - decay, a1=0.0, a2=0.0, b1=-decay, b2=0.0)


def _one_pole_highpass(p, K, V):
    # Mirror of the lowpass pole around fs/4
    decay = math.exp(-2.0 * math.pi * (0.5 - p.cutoff_hz / p.sample_rate_hz))
    return Coefficients(a0=1.0 - decay, a1=0.0, a2=0.0, b1=decay, b2=0.0)


def _lowpass(p, K, V):
    norm = 1 / (1 + K / p.q + K * K)
    a0 = K * K * norm
    return Coefficients(
        a0=a0,
        a1=2 * a0,
        a2=a0,
        b1=2 * (K * K - 1) * norm,
        b2=(1 - K / p.q + K * K) * norm,
    )


def _highpass(p, K, V):
    norm = 1 / (1 + K / p.q + K * K)
    a0 = 1 * norm
    return Coefficients(
        a0=a0,
        a1=-2 * a0,
        a2=a0,
        b1=2 * (K * K - 1) * norm,
        b2=(1 - K / p.q + K * K) * norm,
    )


def _bandpass(p, K, V):
    norm = 1 / (1 + K / p.q + K * K)
    a0 = K / p.q * norm
    return Coefficients(
        a0=a0,
        a1=0.0,
        a2=-a0,
        b1=2 * (K * K - 1) * norm,
        b2=(1 - K / p.q + K * K) * norm,
    )


def _notch(p, K, V):
    norm = 1 / (1 + K / p.q + K * K)
    a0 = (1 + K * K) * norm
    a1 = 2 * (K * K - 1) * norm
    return Coefficients(
        a0=a0,
        a1=a1,
        a2=a0,
        b1=a1,
        b2=(1 - K / p.q + K * K) * norm,
    )


def _peak(p, K, V):
    if p.gain_db >= 0:
        norm = 1 / (1 + 1 / p.q * K + K * K)
        a1 = 2 * (K * K - 1) * norm
        return Coefficients(
            a0=(1 + V / p.q * K + K * K) * norm,
            a1=a1,
            a2=(1 - V / p.q * K + K * K) * norm,
            b1=a1,
            b2=(1 - 1 / p.q * K + K * K) * norm,
        )
    norm = 1 / (1 + V / p.q * K + K * K)
    a1 = 2 * (K * K - 1) * norm
    return Coefficients(
        a0=(1 + 1 / p.q * K + K * K) * norm,
        a1=a1,
        a2=(1 - 1 / p.q * K + K * K) * norm,
        b1=a1,
        b2=(1 - V / p.q * K + K * K) * norm,
    )


def _low_shelf(p, K, V):
    root_2v = math.sqrt(2 * V)
    if p.gain_db >= 0:
        norm = 1 / (1 + SQRT2 * K + K * K)
        return Coefficients(
            a0=(1 + root_2v * K + V * K * K) * norm,
            a1=2 * (V * K * K - 1) * norm,
            a2=(1 - root_2v * K + V * K * K) * norm,
            b1=2 * (K * K - 1) * norm,
            b2=(1 - SQRT2 * K + K * K) * norm,
        )
    norm = 1 / (1 + root_2v * K + V * K * K)
    return Coefficients(
        a0=(1 + SQRT2 * K + K * K) * norm,
        a1=2 * (K * K - 1) * norm,
        a2=(1 - SQRT2 * K + K * K) * norm,
        b1=2 * (V * K * K - 1) * norm,
        b2=(1 - root_2v * K + V * K * K) * norm,
    )


def _high_shelf(p, K, V):
    root_2v = math.sqrt(2 * V)
    if p.gain_db >= 0:
        norm = 1 / (1 + SQRT2 * K + K * K)
        return Coefficients(
            a0=(V + root_2v * K + K * K) * norm,
            a1=2 * (K * K - V) * norm,
            a2=(V - root_2v * K + K * K) * norm,
            b1=2 * (K * K - 1) * norm,
            b2=(1 - SQRT2 * K + K * K) * norm,
        )
    norm = 1 / (V + root_2v * K + K * K)
    return Coefficients(
        a0=(1 + SQRT2 * K + K * K) * norm,
        a1=2 * (K * K - 1) * norm,
        a2=(1 - SQRT2 * K + K * K) * norm,
        b1=2 * (K * K - V) * norm,
        b2=(V - root_2v * K + K * K) * norm,
    )


_DESIGNERS = {
    FilterType.ONE_POLE_LOWPASS: _one_pole_lowpass,
    FilterType.ONE_POLE_HIGHPASS: _one_pole_highpass,
    FilterType.LOWPASS: _lowpass,
    FilterType.HIGHPASS: _highpass,
    FilterType.BANDPASS: _bandpass,
    FilterType.NOTCH: _notch,
    FilterType.PEAK: _peak,
    FilterType.LOW_SHELF: _low_shelf,
    FilterType.HIGH_SHELF: _high_shelf,
}


def _linear_gain(gain_db):
    # Saturates to inf once |gain| exceeds the float range (about 6166 dB)
    try:
        return 10.0 ** (abs(gain_db) / 20)
    except OverflowError:
        return math.inf


def design_coefficients(filter_type, params: Parameters) -> Coefficients:
    """
    Compute biquad coefficients for a filter type and a set of parameters.

    :param filter_type: FilterType member, or any name FilterType.from_name accepts.
    :param params: Parameters already clamped to their valid ranges.
    :return: A new Coefficients value.
    """
    filter_type = FilterType.from_name(filter_type)
    K = math.tan(math.pi * params.cutoff_hz / params.sample_rate_hz)
    V = _linear_gain(params.gain_db)
    coefficients = _DESIGNERS[filter_type](params, K, V)
    logger.debug("Designed %s: fc=%.3f Hz, fs=%.1f Hz, Q=%.3f, gain=%.2f dB -> %s",
                 filter_type.value, params.cutoff_hz, params.sample_rate_hz,
                 params.q, params.gain_db, coefficients)
    return coefficients
