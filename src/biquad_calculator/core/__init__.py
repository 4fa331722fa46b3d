from .filter_types import (
    Coefficients,
    FilterType,
    FrequencyResponse,
    Parameters,
    PlotScale,
    ResponseSample,
)
from .designer import design_coefficients
from .response import evaluate_response, magnitude_db
from .axis import select_axis_range

__all__ = [
    "Coefficients",
    "FilterType",
    "FrequencyResponse",
    "Parameters",
    "PlotScale",
    "ResponseSample",
    "design_coefficients",
    "evaluate_response",
    "magnitude_db",
    "select_axis_range",
]
