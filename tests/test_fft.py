import numpy as np
import pytest

from mfskmodem.fft import fft, is_power_of_two, next_power_of_two, zero_pad


@pytest.mark.parametrize('n', [1, 2, 4, 8, 64, 1024, 4096])
def test_matches_numpy(n):
    rng = np.random.default_rng(n)
    samples = rng.standard_normal(n)

    assert np.allclose(fft(samples), np.fft.fft(samples))

def test_complex_input():
    rng = np.random.default_rng(7)
    samples = rng.standard_normal(256) + 1j * rng.standard_normal(256)

    assert np.allclose(fft(samples), np.fft.fft(samples))

@pytest.mark.parametrize('n,m', [(64, 5), (1024, 37), (8192, 1000)])
def test_pure_tone_peaks_at_its_bin(n, m):
    samples = np.sin(2 * np.pi * m * np.arange(n) / n)
    magnitude = np.abs(fft(samples))

    assert np.argmax(magnitude[1:n // 2]) + 1 == m
    assert magnitude[m] == pytest.approx(n / 2)
    assert magnitude[n - m] == pytest.approx(magnitude[m])

    others = np.delete(magnitude, [m, n - m])
    assert np.all(others < 1e-6 * magnitude[m])

def test_single_sample_unchanged():
    assert np.array_equal(fft([3.0]), np.array([3.0 + 0j]))

@pytest.mark.parametrize('n', [0, 3, 6, 1000, 44100])
def test_rejects_non_power_of_two(n):
    with pytest.raises(ValueError):
        fft(np.ones(n))

def test_rejects_two_dimensional_input():
    with pytest.raises(ValueError):
        fft(np.ones((4, 4)))

def test_power_of_two_helpers():
    assert is_power_of_two(1)
    assert is_power_of_two(32768)
    assert not is_power_of_two(0)
    assert not is_power_of_two(44100)

    assert next_power_of_two(1) == 1
    assert next_power_of_two(5) == 8
    assert next_power_of_two(44100) == 65536
    assert next_power_of_two(65536) == 65536

    with pytest.raises(ValueError):
        next_power_of_two(0)

def test_zero_pad():
    padded = zero_pad(np.array([1, 2, 3]))
    assert padded.tolist() == [1, 2, 3, 0]

    assert zero_pad(np.arange(10), 4).tolist() == [0, 1, 2, 3]
    assert len(zero_pad(np.ones(44100))) == 65536
    assert zero_pad(np.ones(8)).tolist() == [1] * 8
