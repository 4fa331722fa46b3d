# src/biquad_calculator/core/filter_types.py

"""
Value types shared by the coefficient designer and the response evaluator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import numpy as np
from scipy import signal


def _normalize_name(name: str) -> str:
    return name.strip().lower().replace(" ", "-").replace("_", "-")


class FilterType(Enum):
    """Filter archetypes supported by the designer."""
    ONE_POLE_LOWPASS = "one-pole-lp"
    ONE_POLE_HIGHPASS = "one-pole-hp"
    LOWPASS = "lowpass"
    HIGHPASS = "highpass"
    BANDPASS = "bandpass"
    NOTCH = "notch"
    PEAK = "peak"
    LOW_SHELF = "lowshelf"
    HIGH_SHELF = "highshelf"

    @classmethod
    def from_name(cls, name):
        """
        Look up a filter type by name.

        Accepts the enum value ("lowshelf"), the member name ("LOW_SHELF") and
        the calculator's historical spellings ("lowShelf", "one-pole lp").
        """
        if isinstance(name, cls):
            return name
        key = _normalize_name(name)
        for member in cls:
            if key in (member.value, _normalize_name(member.name)):
                return member
        raise ValueError(f"Unsupported filter type: {name}")

    @property
    def label(self):
        return _LABELS[self]

    @property
    def is_one_pole(self):
        return self in (FilterType.ONE_POLE_LOWPASS, FilterType.ONE_POLE_HIGHPASS)


_LABELS = {
    FilterType.ONE_POLE_LOWPASS: "One-pole lowpass",
    FilterType.ONE_POLE_HIGHPASS: "One-pole highpass",
    FilterType.LOWPASS: "Lowpass",
    FilterType.HIGHPASS: "Highpass",
    FilterType.BANDPASS: "Bandpass",
    FilterType.NOTCH: "Notch",
    FilterType.PEAK: "Peak",
    FilterType.LOW_SHELF: "Low shelf",
    FilterType.HIGH_SHELF: "High shelf",
}


class PlotScale(Enum):
    """Frequency sampling law used by the response evaluator."""
    LINEAR = "linear"
    LOGARITHMIC = "log"

    @classmethod
    def from_name(cls, name):
        if isinstance(name, cls):
            return name
        key = _normalize_name(name)
        if key in ("linear", "lin"):
            return cls.LINEAR
        if key in ("log", "logarithmic"):
            return cls.LOGARITHMIC
        raise ValueError(f"Unsupported plot scale: {name}")


@dataclass(frozen=True)
class Parameters:
    """
    User-facing design parameters.

    The designer assumes sample_rate_hz > 0, 0 <= cutoff_hz <= sample_rate_hz / 2
    and q >= 0.01. Use utils.clamp_parameters to enforce this on raw input.
    """
    cutoff_hz: float
    sample_rate_hz: float
    q: float
    gain_db: float = 0.0

    @property
    def nyquist_hz(self):
        return self.sample_rate_hz / 2


@dataclass(frozen=True)
class Coefficients:
    """
    Normalized second-order section (a0 + a1 z^-1 + a2 z^-2) / (1 + b1 z^-1 + b2 z^-2).

    One-pole designs set a1, a2 and b2 to zero.
    """
    a0: float
    a1: float
    a2: float
    b1: float
    b2: float

    def as_tuple(self):
        return (self.a0, self.a1, self.a2, self.b1, self.b2)

    def to_ba(self):
        """Return (b, a) arrays in scipy.signal's numerator/denominator convention."""
        b = np.array([self.a0, self.a1, self.a2], dtype=float)
        a = np.array([1.0, self.b1, self.b2], dtype=float)
        return b, a

    def zpk(self):
        b, a = self.to_ba()
        return signal.tf2zpk(b, a)

    def poles(self):
        return self.zpk()[1]

    def zeros(self):
        return self.zpk()[0]

    @property
    def is_stable(self):
        """True when every pole lies strictly inside the unit circle."""
        if not np.all(np.isfinite(self.as_tuple())):
            return False
        return bool(np.all(np.abs(self.poles()) < 1.0))


class ResponseSample(NamedTuple):
    x: float
    magnitude_db: float


@dataclass(frozen=True, eq=False)
class FrequencyResponse:
    """
    Sampled magnitude response.

    x holds frequencies in Hz on the linear scale and normalized log-positions
    in [0, 0.5] on the logarithmic scale. frequencies_hz always holds Hz.
    """
    scale: PlotScale
    x: np.ndarray
    frequencies_hz: np.ndarray
    magnitude_db: np.ndarray
    min_db: float
    max_db: float

    def __len__(self):
        return len(self.x)

    @property
    def samples(self):
        return [ResponseSample(float(x), float(y)) for x, y in zip(self.x, self.magnitude_db)]
