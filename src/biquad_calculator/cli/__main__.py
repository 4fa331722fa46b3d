# src/biquad_calculator/cli/__main__.py

"""
Main entry point for the Biquad Calculator.

Launches the interactive window by default. With --no-gui the coefficients
and response extrema are printed instead.
"""

import argparse
import logging

from .. import config
from ..core.designer import design_coefficients
from ..core.filter_types import FilterType, PlotScale
from ..core.response import evaluate_response
from ..plotting import save_response_plot
from ..utils import clamp_parameters, format_coefficients

logging_format = '%(asctime)s - %(levelname)s - %(message)s'


def build_parser():
    parser = argparse.ArgumentParser(
        prog="biquad-calculator",
        description="Design biquad filter coefficients and inspect their magnitude response.")
    parser.add_argument("--type", dest="filter_type", type=FilterType.from_name,
                        default=config.DEFAULT_FILTER_TYPE,
                        help="filter type: " + ", ".join(member.value for member in FilterType))
    parser.add_argument("--fs", type=float, default=config.DEFAULT_SAMPLE_RATE, help="sample rate in Hz")
    parser.add_argument("--fc", type=float, default=config.DEFAULT_CUTOFF_FREQ, help="cutoff/center frequency in Hz")
    parser.add_argument("--q", type=float, default=config.DEFAULT_Q, help="quality factor")
    parser.add_argument("--gain", type=float, default=config.DEFAULT_GAIN_DB, help="gain in dB (peak and shelves)")
    parser.add_argument("--scale", type=PlotScale.from_name, default=config.DEFAULT_PLOT_SCALE,
                        help="frequency axis: linear or log")
    parser.add_argument("--points", type=int, default=config.RESPONSE_NUM_POINTS,
                        help="number of response samples")
    parser.add_argument("--no-gui", action="store_true", help="print results instead of opening the window")
    parser.add_argument("--plot", metavar="PATH", help="save a response plot image (with --no-gui)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def run_headless(args):
    """Design, evaluate and print; optionally save a plot."""
    params = clamp_parameters(args.fs, args.fc, args.q, args.gain)
    coefficients = design_coefficients(args.filter_type, params)
    response = evaluate_response(coefficients, params.sample_rate_hz, args.scale, args.points)

    print(f"{args.filter_type.label}: Fs={params.sample_rate_hz:g} Hz, Fc={params.cutoff_hz:g} Hz, "
          f"Q={params.q:g}, Gain={params.gain_db:g} dB")
    print(format_coefficients(coefficients))
    print(f"Stable: {'yes' if coefficients.is_stable else 'no'}")
    print(f"Response: min {response.min_db:.2f} dB, max {response.max_db:.2f} dB")

    if args.plot:
        save_response_plot(response, args.filter_type, params.sample_rate_hz, args.plot)
        print(f"Plot saved to {args.plot}")
    return 0


def run_gui(args):
    """Launch the Biquad Calculator window."""
    from PyQt5 import QtWidgets
    from ..ui.biquad_plotter import BiquadPlotter

    print("Launching Biquad Calculator UI...")
    app = QtWidgets.QApplication([])
    plotter = BiquadPlotter(
        app,
        filter_type=args.filter_type,
        sample_rate_hz=args.fs,
        cutoff_hz=args.fc,
        q=args.q,
        gain_db=args.gain,
        scale=args.scale,
    )
    plotter.win.raise_()
    return app.exec_()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.points < 2:
        parser.error("--points must be at least 2")
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=logging_format)

    if args.no_gui:
        return run_headless(args)
    return run_gui(args)


if __name__ == "__main__":
    raise SystemExit(main())
