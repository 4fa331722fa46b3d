# src/biquad_calculator/config.py

"""
Central configuration settings for the Biquad Calculator application.
"""

# =============================================================================
# DEFAULT FILTER PARAMETERS
# =============================================================================
DEFAULT_FILTER_TYPE = "lowpass"
DEFAULT_PLOT_SCALE = "log"
DEFAULT_SAMPLE_RATE = 44100  # Hz
DEFAULT_CUTOFF_FREQ = 1000  # Hz
DEFAULT_Q = 0.7071  # Butterworth
DEFAULT_GAIN_DB = 6  # dB, only used by peak and shelf filters

# =============================================================================
# INPUT LIMITS
# =============================================================================
MIN_SAMPLE_RATE = 1  # Hz
MIN_Q = 0.01  # designer is numerically unstable below this

# =============================================================================
# FREQUENCY RESPONSE SETTINGS
# =============================================================================
RESPONSE_NUM_POINTS = 512
MAGNITUDE_FLOOR_DB = -200  # reported in place of -inf
LOG_SWEEP_START_RATIO = 0.001  # log sweep starts at 0.001 * Nyquist

# =============================================================================
# AXIS RANGES (dB)
# =============================================================================
PASS_STOP_AXIS_RANGE = (-100, 0)  # lowpass, highpass, bandpass, notch
GAIN_AXIS_RANGE = (-10, 10)  # peak and shelves
ONE_POLE_AXIS_RANGE = (-40, 0)

# =============================================================================
# UI SLIDERS (slider value / factor = parameter value)
# =============================================================================
SLIDER_SETTINGS = {
    "fs": {"minimum": 1000, "maximum": 192000, "factor": 1},
    "fc": {"minimum": 1, "maximum": 96000, "factor": 1},
    "q": {"minimum": 1, "maximum": 2000, "factor": 100},
    "gain": {"minimum": -300, "maximum": 300, "factor": 10},
}
