# src/biquad_calculator/plotting.py

"""
Static matplotlib rendering of a sampled magnitude response.
"""

import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter

from .core.axis import select_axis_range
from .core.filter_types import FilterType, PlotScale
from .utils import format_frequency_tick


def plot_response(response, filter_type, sample_rate_hz, ax=None):
    """
    Draw a FrequencyResponse on a matplotlib Axes and return the Axes.

    The y range follows select_axis_range for the filter type. On the log
    scale the x values are log-positions, so ticks are relabelled in Hz.
    """
    filter_type = FilterType.from_name(filter_type)
    if ax is None:
        _, ax = plt.subplots(figsize=(12, 8))

    ax.plot(response.x, response.magnitude_db, label=filter_type.label)
    ax.set_title(f"{filter_type.label} Magnitude Response")
    ax.set_xlabel("Frequency (Hz)")
    ax.set_ylabel("Magnitude (dB)")
    ax.grid(True, which="both", ls="-", alpha=0.3)
    ax.set_xlim(response.x[0], response.x[-1])
    ax.set_ylim(*select_axis_range(filter_type, response.min_db, response.max_db))

    if response.scale is PlotScale.LOGARITHMIC:
        ax.xaxis.set_major_formatter(
            FuncFormatter(lambda x, pos: format_frequency_tick(x, sample_rate_hz)))

    ax.axhline(y=0, color="k", linestyle="-", linewidth=0.8)
    ax.legend()
    return ax


def save_response_plot(response, filter_type, sample_rate_hz, path, dpi=150):
    """Render the response to an image file."""
    fig, ax = plt.subplots(figsize=(12, 8))
    try:
        plot_response(response, filter_type, sample_rate_hz, ax=ax)
        fig.tight_layout()
        fig.savefig(path, dpi=dpi)
    finally:
        plt.close(fig)
    return path
