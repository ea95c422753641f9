import numpy as np
import pytest

from mfskmodem.fft import fft
from mfskmodem.peaks import Peak, bin_frequency, dominant_frequency, find_peaks


def _spectrum(size, bins):
    spectrum = np.zeros(size, dtype=np.complex128)
    for index, value in bins.items():
        spectrum[index] = value
    return spectrum

def test_sorted_by_magnitude():
    spectrum = _spectrum(16, {3: 5, 5: 7})

    assert find_peaks(spectrum, 16, 8) == [Peak(5.0, 7.0), Peak(3.0, 5.0)]

def test_excludes_dc_and_mirror_bins():
    spectrum = _spectrum(16, {0: 1000, 3: 5, 8: 900, 13: 100})

    peaks = find_peaks(spectrum, 16, 8)

    assert [peak.frequency for peak in peaks] == [3.0]

def test_ties_broken_by_lower_bin():
    spectrum = _spectrum(32, {6: 4, 2: 4, 10: 4})

    assert [peak.frequency for peak in find_peaks(spectrum, 32, 8)] == [2.0, 6.0, 10.0]

def test_limits_count():
    spectrum = _spectrum(32, {2: 1, 4: 2, 6: 3, 8: 4})

    assert [peak.magnitude for peak in find_peaks(spectrum, 32, 2)] == [4.0, 3.0]

def test_adjacent_bins_yield_one_peak():
    spectrum = _spectrum(32, {4: 3, 5: 3, 11: 2, 12: 1})

    assert [peak.frequency for peak in find_peaks(spectrum, 32, 8)] == [4.0, 11.0]

def test_silence_has_no_peaks():
    assert find_peaks(np.zeros(1024, dtype=np.complex128), 44100, 8) == []

def test_bin_frequency():
    assert bin_frequency(1, 65536, 44100) == pytest.approx(0.6729, abs=1e-4)
    assert bin_frequency(512, 1024, 8000) == 4000

def test_tone_frequency_estimate():
    sample_rate = 44100
    t = np.arange(sample_rate) / sample_rate
    samples = np.zeros(65536)
    samples[:sample_rate] = np.sin(2 * np.pi * 1300 * t)

    frequency = dominant_frequency(fft(samples), sample_rate)

    assert frequency == pytest.approx(1300, abs=1)

def test_dominant_frequency_of_silence():
    assert dominant_frequency(np.zeros(64, dtype=np.complex128), 44100) is None
