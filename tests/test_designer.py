# tests/test_designer.py

import math

import numpy as np
import pytest
from scipy import signal

from biquad_calculator.core.designer import design_coefficients
from biquad_calculator.core.filter_types import Coefficients, FilterType, Parameters
from biquad_calculator.core.response import evaluate_response, magnitude_db

FS = 44100


def rbj_lowpass(fc, fs, q):
    """Cookbook lowpass, used as an independent reference."""
    w0 = 2 * math.pi * fc / fs
    alpha = math.sin(w0) / (2 * q)
    norm = 1 + alpha
    b0 = (1 - math.cos(w0)) / 2 / norm
    return b0, 2 * b0, b0, -2 * math.cos(w0) / norm, (1 - alpha) / norm


def boost_formula_peak(fc, fs, q, gain_db):
    """Peak built from the boost formula for any gain sign."""
    K = math.tan(math.pi * fc / fs)
    V = 10 ** (gain_db / 20)
    norm = 1 / (1 + K / q + K * K)
    a1 = 2 * (K * K - 1) * norm
    return Coefficients(
        a0=(1 + V / q * K + K * K) * norm,
        a1=a1,
        a2=(1 - V / q * K + K * K) * norm,
        b1=a1,
        b2=(1 - K / q + K * K) * norm,
    )


class TestFilterTypeNames:
    """Parsing of filter type names."""

    @pytest.mark.parametrize("name, expected", [
        ("lowpass", FilterType.LOWPASS),
        ("lowShelf", FilterType.LOW_SHELF),
        ("highShelf", FilterType.HIGH_SHELF),
        ("one-pole lp", FilterType.ONE_POLE_LOWPASS),
        ("one-pole hp", FilterType.ONE_POLE_HIGHPASS),
        ("LOW_SHELF", FilterType.LOW_SHELF),
        (FilterType.NOTCH, FilterType.NOTCH),
    ])
    def test_from_name(self, name, expected):
        assert FilterType.from_name(name) is expected

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unsupported filter type"):
            FilterType.from_name("allpass")


class TestSecondOrderDesigns:
    """Coefficient values for the pass/stop designs."""

    def test_lowpass_matches_cookbook(self):
        coefs = design_coefficients(FilterType.LOWPASS, Parameters(1000, FS, 0.707))
        assert coefs.as_tuple() == pytest.approx(rbj_lowpass(1000, FS, 0.707), rel=1e-9)

    def test_lowpass_reference_values(self):
        coefs = design_coefficients("lowpass", Parameters(1000, FS, 0.707))
        assert coefs.a0 == pytest.approx(0.0046, abs=1e-4)
        assert coefs.b1 == pytest.approx(-1.7990, abs=1e-3)
        assert coefs.b2 == pytest.approx(0.8174, abs=1e-3)

    @pytest.mark.parametrize("filter_type, btype", [
        (FilterType.LOWPASS, "low"),
        (FilterType.HIGHPASS, "high"),
    ])
    def test_butterworth_q_matches_scipy(self, filter_type, btype):
        coefs = design_coefficients(filter_type, Parameters(1000, FS, 1 / math.sqrt(2)))
        b, a = signal.butter(2, 1000, btype=btype, fs=FS)
        assert coefs.to_ba()[0] == pytest.approx(b, rel=1e-9)
        assert coefs.to_ba()[1] == pytest.approx(a, rel=1e-9)

    def test_lowpass_is_minus_3db_at_cutoff(self):
        coefs = design_coefficients(FilterType.LOWPASS, Parameters(1000, FS, 0.707))
        at_cutoff = magnitude_db(coefs, np.array([2 * math.pi * 1000 / FS]))[0]
        assert at_cutoff == pytest.approx(-3.01, abs=0.01)

    def test_bandpass_and_notch_structure(self):
        params = Parameters(2000, FS, 2.0)
        bandpass = design_coefficients(FilterType.BANDPASS, params)
        notch = design_coefficients(FilterType.NOTCH, params)
        assert bandpass.a1 == 0
        assert bandpass.a2 == -bandpass.a0
        assert notch.a2 == notch.a0
        assert notch.b1 == notch.a1

    def test_gain_is_ignored_by_pass_stop_designs(self):
        for filter_type in (FilterType.LOWPASS, FilterType.HIGHPASS, FilterType.BANDPASS, FilterType.NOTCH):
            flat = design_coefficients(filter_type, Parameters(500, FS, 1.0, 0.0))
            boosted = design_coefficients(filter_type, Parameters(500, FS, 1.0, 12.0))
            assert flat == boosted


class TestOnePoleDesigns:
    """The degenerate one-pole variants."""

    def test_one_pole_lowpass(self):
        coefs = design_coefficients(FilterType.ONE_POLE_LOWPASS, Parameters(500, FS, 0.707))
        decay = math.exp(-2 * math.pi * 500 / FS)
        assert coefs.a1 == 0 and coefs.a2 == 0 and coefs.b2 == 0
        assert coefs.a0 == pytest.approx(1 - decay)
        assert coefs.b1 == pytest.approx(-decay)
        assert magnitude_db(coefs, np.array([0.0]))[0] == pytest.approx(0.0, abs=1e-9)

    def test_one_pole_highpass(self):
        coefs = design_coefficients(FilterType.ONE_POLE_HIGHPASS, Parameters(500, FS, 0.707))
        decay = math.exp(-2 * math.pi * (0.5 - 500 / FS))
        assert coefs.a1 == 0 and coefs.a2 == 0 and coefs.b2 == 0
        assert coefs.a0 == pytest.approx(1 - decay)
        assert coefs.b1 == pytest.approx(decay)
        assert magnitude_db(coefs, np.array([np.pi]))[0] == pytest.approx(0.0, abs=1e-9)


class TestGainDesigns:
    """Peak and shelf designs, including the boost/cut mirroring."""

    def test_peak_reaches_gain_at_center(self):
        w0 = np.array([2 * math.pi * 3000 / FS])
        boost = design_coefficients(FilterType.PEAK, Parameters(3000, FS, 2.0, 6.0))
        cut = design_coefficients(FilterType.PEAK, Parameters(3000, FS, 2.0, -6.0))
        assert magnitude_db(boost, w0)[0] == pytest.approx(6.0, abs=1e-9)
        assert magnitude_db(cut, w0)[0] == pytest.approx(-6.0, abs=1e-9)

    def test_low_shelf_levels(self):
        coefs = design_coefficients(FilterType.LOW_SHELF, Parameters(200, FS, 0.707, 9.0))
        dc, nyquist = magnitude_db(coefs, np.array([0.0, np.pi]))
        assert dc == pytest.approx(9.0, abs=1e-9)
        assert nyquist == pytest.approx(0.0, abs=1e-9)

    def test_high_shelf_levels(self):
        coefs = design_coefficients(FilterType.HIGH_SHELF, Parameters(5000, FS, 0.707, -9.0))
        dc, nyquist = magnitude_db(coefs, np.array([0.0, np.pi]))
        assert dc == pytest.approx(0.0, abs=1e-9)
        assert nyquist == pytest.approx(-9.0, abs=1e-9)

    def test_shelves_ignore_q(self):
        for filter_type in (FilterType.LOW_SHELF, FilterType.HIGH_SHELF):
            narrow = design_coefficients(filter_type, Parameters(1000, FS, 5.0, 6.0))
            wide = design_coefficients(filter_type, Parameters(1000, FS, 0.3, 6.0))
            assert narrow == wide

    @pytest.mark.parametrize("filter_type", [FilterType.PEAK, FilterType.LOW_SHELF, FilterType.HIGH_SHELF])
    @pytest.mark.parametrize("gain", [0.5, 6.0, 18.0])
    def test_cut_is_reciprocal_of_boost(self, filter_type, gain):
        w = np.linspace(0.001, np.pi, 512)
        boost = design_coefficients(filter_type, Parameters(1500, FS, 1.3, gain))
        cut = design_coefficients(filter_type, Parameters(1500, FS, 1.3, -gain))
        np.testing.assert_allclose(magnitude_db(boost, w), -magnitude_db(cut, w), atol=1e-6)

    def test_cut_is_not_negated_boost(self):
        w = np.linspace(0.001, np.pi, 512)
        boost = design_coefficients(FilterType.PEAK, Parameters(1500, FS, 1.3, 6.0))
        cut = design_coefficients(FilterType.PEAK, Parameters(1500, FS, 1.3, -6.0))
        negated = Coefficients(*(-value for value in boost.as_tuple()))
        assert cut.b2 != pytest.approx(boost.b2)
        assert not np.allclose(magnitude_db(cut, w), magnitude_db(negated, w), atol=0.1)

    def test_cut_moves_gain_to_denominator(self):
        # Reusing the boost formula with V < 1 also gives -6 dB at the center,
        # but its skirts do not mirror the boost.
        w = np.linspace(0.001, np.pi, 512)
        boost = design_coefficients(FilterType.PEAK, Parameters(1500, FS, 1.3, 6.0))
        cut = design_coefficients(FilterType.PEAK, Parameters(1500, FS, 1.3, -6.0))
        naive = boost_formula_peak(1500, FS, 1.3, -6.0)
        assert naive.b2 == pytest.approx(boost.b2)
        assert cut.b2 != pytest.approx(naive.b2)
        assert np.max(np.abs(magnitude_db(cut, w) - magnitude_db(naive, w))) > 0.1
        assert not np.allclose(magnitude_db(naive, w), -magnitude_db(boost, w), atol=0.1)


class TestNumericalRange:
    """Coefficients stay finite and stable across the valid parameter space."""

    @pytest.mark.parametrize("filter_type", list(FilterType))
    def test_coefficients_are_finite(self, filter_type):
        for fc in (1, 100, 1000, 10000, 22000):
            for q in (0.01, 0.707, 10, 100):
                for gain in (-24, 0, 24):
                    coefs = design_coefficients(filter_type, Parameters(fc, FS, q, gain))
                    assert np.all(np.isfinite(coefs.as_tuple())), (fc, q, gain)

    @pytest.mark.parametrize("filter_type", list(FilterType))
    def test_designs_are_stable(self, filter_type):
        coefs = design_coefficients(filter_type, Parameters(1000, FS, 0.707, 6.0))
        assert coefs.is_stable

    @pytest.mark.parametrize("filter_type", [FilterType.PEAK, FilterType.LOW_SHELF, FilterType.HIGH_SHELF])
    @pytest.mark.parametrize("gain", [7000.0, -7000.0])
    def test_huge_gain_saturates(self, filter_type, gain):
        coefs = design_coefficients(filter_type, Parameters(1000, FS, 1.0, gain))
        assert not coefs.is_stable
        response = evaluate_response(coefs, FS)
        assert np.all(np.isfinite(response.magnitude_db))
        assert response.min_db >= -200

    def test_unstable_coefficients_are_reported(self):
        assert not Coefficients(a0=1.0, a1=0.0, a2=0.0, b1=-2.0, b2=0.0).is_stable
