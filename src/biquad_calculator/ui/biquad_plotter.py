# src/biquad_calculator/ui/biquad_plotter.py

"""Interactive biquad calculator window with a dark theme."""

import logging
import math

import pyqtgraph as pg
from PyQt5 import QtWidgets, QtCore

from .. import config
from ..core.axis import select_axis_range
from ..core.designer import design_coefficients
from ..core.filter_types import FilterType, PlotScale
from ..core.response import evaluate_response
from ..utils import (
    clamp_parameters,
    control_state,
    format_coefficients,
    format_frequency_tick,
    parse_parameter,
)

logger = logging.getLogger(__name__)

# This makes the entire UI, including inputs and backgrounds, dark.
DARK_STYLESHEET = """
    QWidget {
        background-color: #1e1e1e;
        color: #dcdcdc;
        font-family: Segoe UI, sans-serif;
        font-size: 11pt;
    }
    QMainWindow {
        background-color: #1e1e1e;
    }
    QGroupBox {
        background-color: #2d2d2d;
        border: 1px solid #444444;
        border-radius: 5px;
        margin-top: 1ex;
        font-weight: bold;
    }
    QGroupBox::title {
        subcontrol-origin: margin;
        subcontrol-position: top center;
        padding: 0 3px;
        background-color: #2d2d2d;
        color: #dcdcdc;
    }
    QLineEdit:disabled, QSlider:disabled {
        color: #666666;
    }
    QPlainTextEdit {
        font-family: Consolas, monospace;
    }
"""

# (field key, label)
PARAMETER_FIELDS = (
    ("fs", "Sample rate (Hz)"),
    ("fc", "Fc (Hz)"),
    ("q", "Q"),
    ("gain", "Gain (dB)"),
)


class FrequencyAxis(pg.AxisItem):
    """Bottom axis that labels log-position ticks in Hz."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.log_scale = False
        self.sample_rate_hz = config.DEFAULT_SAMPLE_RATE

    def tickStrings(self, values, scale, spacing):
        if not self.log_scale:
            return super().tickStrings(values, scale, spacing)
        return [format_frequency_tick(value, self.sample_rate_hz) for value in values]


class BiquadPlotter:
    """
    Filter parameter controls, magnitude response plot and coefficient list.
    """

    def __init__(self, app, filter_type=config.DEFAULT_FILTER_TYPE,
                 sample_rate_hz=config.DEFAULT_SAMPLE_RATE,
                 cutoff_hz=config.DEFAULT_CUTOFF_FREQ,
                 q=config.DEFAULT_Q,
                 gain_db=config.DEFAULT_GAIN_DB,
                 scale=config.DEFAULT_PLOT_SCALE,
                 show=True):
        self.app = app
        self.app.setStyleSheet(DARK_STYLESHEET)

        pg.setConfigOption("background", "#1e1e1e")
        pg.setConfigOption("foreground", "#dcdcdc")

        self.win = QtWidgets.QMainWindow()
        self.win.setWindowTitle("Biquad Calculator")

        central_widget = QtWidgets.QWidget()
        self.win.setCentralWidget(central_widget)
        main_layout = QtWidgets.QVBoxLayout(central_widget)

        # --- Create Plotting Widget ---
        self.freq_axis = FrequencyAxis(orientation="bottom")
        self.plot_widget = pg.PlotWidget(axisItems={"bottom": self.freq_axis})
        self.freq_plot = self.plot_widget.getPlotItem()
        self.freq_plot.setTitle("Magnitude Response")
        self.freq_plot.setLabels(left="Magnitude (dB)", bottom="Frequency (Hz)")
        self.freq_plot.showGrid(x=True, y=True, alpha=0.3)
        self.freq_plot.setMouseEnabled(x=False, y=False)
        self.response_curve = self.freq_plot.plot(pen=pg.mkPen("#55aaff", width=2))
        main_layout.addWidget(self.plot_widget, stretch=1)

        # --- Create Controls Widget ---
        controls_group = QtWidgets.QGroupBox("Filter Parameters")
        controls_layout = QtWidgets.QGridLayout()
        controls_group.setLayout(controls_layout)
        main_layout.addWidget(controls_group)

        self.type_combo = QtWidgets.QComboBox()
        for member in FilterType:
            self.type_combo.addItem(member.label, member.value)
        self.type_combo.setCurrentIndex(self.type_combo.findData(FilterType.from_name(filter_type).value))
        controls_layout.addWidget(QtWidgets.QLabel("Type"), 0, 0)
        controls_layout.addWidget(self.type_combo, 0, 1)

        self.radio_linear = QtWidgets.QRadioButton("Linear")
        self.radio_log = QtWidgets.QRadioButton("Log")
        if PlotScale.from_name(scale) is PlotScale.LINEAR:
            self.radio_linear.setChecked(True)
        else:
            self.radio_log.setChecked(True)
        scale_layout = QtWidgets.QHBoxLayout()
        scale_layout.addWidget(self.radio_linear)
        scale_layout.addWidget(self.radio_log)
        scale_layout.addStretch(1)
        controls_layout.addWidget(QtWidgets.QLabel("Plot"), 0, 2)
        controls_layout.addLayout(scale_layout, 0, 3)

        # --- Parameter fields, each a text box plus a slider ---
        initial_values = {"fs": sample_rate_hz, "fc": cutoff_hz, "q": q, "gain": gain_db}
        self.fields = {}
        self.sliders = {}
        for row, (key, label) in enumerate(PARAMETER_FIELDS, start=1):
            settings = config.SLIDER_SETTINGS[key]
            field = QtWidgets.QLineEdit(str(initial_values[key]))
            slider = QtWidgets.QSlider(QtCore.Qt.Horizontal)
            slider.setRange(settings["minimum"], settings["maximum"])
            controls_layout.addWidget(QtWidgets.QLabel(label), row, 0)
            controls_layout.addWidget(field, row, 1)
            controls_layout.addWidget(slider, row, 2, 1, 2)
            field.editingFinished.connect(self.recalculate)
            slider.valueChanged.connect(lambda value, k=key: self.on_slider_changed(k, value))
            self.fields[key] = field
            self.sliders[key] = slider

        # --- Coefficient list ---
        coefs_group = QtWidgets.QGroupBox("Coefficients")
        coefs_layout = QtWidgets.QVBoxLayout()
        coefs_group.setLayout(coefs_layout)
        self.coefs_list = QtWidgets.QPlainTextEdit()
        self.coefs_list.setReadOnly(True)
        self.coefs_list.setMaximumHeight(130)
        coefs_layout.addWidget(self.coefs_list)
        main_layout.addWidget(coefs_group)

        self.type_combo.currentIndexChanged.connect(lambda index: self.recalculate())
        self.radio_linear.toggled.connect(lambda checked: self.recalculate())

        # --- Latest results ---
        self.parameters = None
        self.coefficients = None
        self.response = None

        self.recalculate()

        if show:
            self.win.resize(1000, 800)
            self.win.show()

    @property
    def filter_type(self):
        return FilterType.from_name(self.type_combo.currentData())

    @property
    def scale(self):
        return PlotScale.LINEAR if self.radio_linear.isChecked() else PlotScale.LOGARITHMIC

    def on_slider_changed(self, key, value):
        """Copy a slider position into its text field and redraw."""
        self.fields[key].setText(str(value / config.SLIDER_SETTINGS[key]["factor"]))
        self.recalculate()

    def _sync_slider(self, key, value):
        slider = self.sliders[key]
        position = value * config.SLIDER_SETTINGS[key]["factor"]
        if not math.isfinite(position):
            return
        # Field values may lie outside the slider range; pin the handle to the end
        position = min(max(position, slider.minimum()), slider.maximum())
        slider.blockSignals(True)
        slider.setValue(int(round(position)))
        slider.blockSignals(False)

    def recalculate(self):
        """Clamp the inputs, redesign the filter and redraw everything."""
        try:
            raw = {key: parse_parameter(field.text(), key) for key, field in self.fields.items()}
        except ValueError as e:
            self.win.statusBar().showMessage(str(e))
            return
        self.win.statusBar().clearMessage()

        params = clamp_parameters(raw["fs"], raw["fc"], raw["q"], raw["gain"])
        values = {"fs": params.sample_rate_hz, "fc": params.cutoff_hz,
                  "q": params.q, "gain": params.gain_db}
        for key, value in values.items():
            self.fields[key].setText(str(value))
            self._sync_slider(key, value)

        state = control_state(self.filter_type)
        for key, enabled in (("q", state.q_enabled), ("gain", state.gain_enabled)):
            self.fields[key].setEnabled(enabled)
            self.sliders[key].setEnabled(enabled)

        self.parameters = params
        self.coefficients = design_coefficients(self.filter_type, params)
        self.response = evaluate_response(self.coefficients, params.sample_rate_hz, self.scale)

        self.freq_axis.log_scale = self.scale is PlotScale.LOGARITHMIC
        self.freq_axis.sample_rate_hz = params.sample_rate_hz
        self.freq_axis.picture = None  # drop cached tick labels
        self.freq_axis.update()
        y_min, y_max = select_axis_range(self.filter_type, self.response.min_db, self.response.max_db)
        self.freq_plot.setYRange(y_min, y_max, padding=0)
        self.freq_plot.setXRange(self.response.x[0], self.response.x[-1], padding=0)
        self.response_curve.setData(self.response.x, self.response.magnitude_db)

        self.coefs_list.setPlainText(format_coefficients(self.coefficients))
        logger.debug("Redrew %s response", self.filter_type.value)
