# src/biquad_calculator/core/response.py

import logging

import numpy as np

from .. import config
from .filter_types import Coefficients, FrequencyResponse, PlotScale

logger = logging.getLogger(__name__)

LOG_SWEEP_SPAN = np.log(1 / config.LOG_SWEEP_START_RATIO)  # ln(1000)


def sweep(num_points, scale, sample_rate_hz):
    """
    Angular frequencies and reported x positions for a response sweep.

    Linear: w runs 0..pi and x is the frequency in Hz.
    Logarithmic: w runs 0.001*pi..pi on a log law and x is the normalized
    log-position i / (N - 1) / 2.

    Returns (w, x).
    """
    if num_points < 2:
        raise ValueError(f"Response needs at least 2 points, got {num_points}")
    scale = PlotScale.from_name(scale)
    position = np.arange(num_points) / (num_points - 1)
    if scale is PlotScale.LINEAR:
        w = position * np.pi
        x = position * sample_rate_hz / 2
    else:
        w = np.exp(LOG_SWEEP_SPAN * position) * config.LOG_SWEEP_START_RATIO * np.pi
        x = position / 2
    return w, x


def magnitude_db(coefficients: Coefficients, w):
    """
    Magnitude response in dB at angular frequencies w (radians/sample).

    Uses the expansion of |H(e^jw)|^2 in phi = sin^2(w/2), so no complex
    arithmetic is needed. Values at or below the floor (including log of a
    non-positive ratio) are reported as config.MAGNITUDE_FLOOR_DB.
    """
    a0, a1, a2, b1, b2 = coefficients.as_tuple()
    phi = np.sin(np.asarray(w, dtype=float) / 2) ** 2
    numerator = (a0 + a1 + a2) ** 2 - 4 * (a0 * a1 + 4 * a0 * a2 + a1 * a2) * phi + 16 * a0 * a2 * phi * phi
    denominator = (1 + b1 + b2) ** 2 - 4 * (b1 + 4 * b2 + b1 * b2) * phi + 16 * b2 * phi * phi
    with np.errstate(divide="ignore", invalid="ignore"):
        y = (np.log(numerator) - np.log(denominator)) * 10 / np.log(10)
    y = np.where(np.isnan(y), config.MAGNITUDE_FLOOR_DB, y)
    return np.maximum(y, config.MAGNITUDE_FLOOR_DB)


def evaluate_response(coefficients: Coefficients, sample_rate_hz,
                      scale=PlotScale.LOGARITHMIC,
                      num_points=config.RESPONSE_NUM_POINTS) -> FrequencyResponse:
    """
    Sample the magnitude response of a coefficient set.

    :param coefficients: Designed biquad (or one-pole) coefficients.
    :param sample_rate_hz: Sample rate used to label the linear axis in Hz.
    :param scale: PlotScale, or "linear" / "log".
    :param num_points: Number of samples, at least 2.
    :return: FrequencyResponse with the curve and its min/max magnitude.
    """
    scale = PlotScale.from_name(scale)
    w, x = sweep(num_points, scale, sample_rate_hz)
    y = magnitude_db(coefficients, w)
    response = FrequencyResponse(
        scale=scale,
        x=x,
        frequencies_hz=w / np.pi * sample_rate_hz / 2,
        magnitude_db=y,
        min_db=float(np.min(y)),
        max_db=float(np.max(y)),
    )
    logger.debug("Evaluated %d-point %s response: min=%.2f dB, max=%.2f dB",
                 num_points, scale.value, response.min_db, response.max_db)
    return response
