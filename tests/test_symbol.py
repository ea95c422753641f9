import numpy as np
import pytest

from mfskmodem.bands import Band, BandTable, DEFAULT_BANDS, SINGLE_TONE_BANDS
from mfskmodem.peaks import Peak
from mfskmodem.symbol import FULL_SCALE, dbfs_to_amplitude, decode_symbol, encode_symbol, match_band


SAMPLE_RATE = 44100
AMPLITUDE = dbfs_to_amplitude(-3)


def _round_trip(value, duration=1, sample_rate=SAMPLE_RATE, bands=DEFAULT_BANDS):
    block = encode_symbol(value, duration, sample_rate, AMPLITUDE, bands)
    return decode_symbol(block, sample_rate, bands)

def test_dbfs_to_amplitude():
    assert dbfs_to_amplitude(0) == 1
    assert dbfs_to_amplitude(-3) == pytest.approx(0.7079, abs=1e-4)
    assert dbfs_to_amplitude(-20) == pytest.approx(0.1)

    with pytest.raises(ValueError):
        dbfs_to_amplitude(1)

def test_encoded_block_shape():
    block = encode_symbol(0x41, 0.5, SAMPLE_RATE, AMPLITUDE, DEFAULT_BANDS)

    assert block.dtype == np.int16
    assert len(block) == 22050
    assert np.max(np.abs(block)) <= FULL_SCALE * AMPLITUDE
    assert block[0] == 0

def test_encoder_is_pure():
    first = encode_symbol(0x5A, 0.1, SAMPLE_RATE, AMPLITUDE, DEFAULT_BANDS)
    second = encode_symbol(0x5A, 0.1, SAMPLE_RATE, AMPLITUDE, DEFAULT_BANDS)

    assert np.array_equal(first, second)

def test_encode_value_out_of_range():
    with pytest.raises(ValueError):
        encode_symbol(256, 1, SAMPLE_RATE, AMPLITUDE, DEFAULT_BANDS)

def test_round_trip_all_byte_values():
    for value in range(256):
        assert _round_trip(value).value == value

def test_letter_a():
    decision = _round_trip(0x41)

    assert decision.value == 0x41
    assert [bit.value for bit in decision.bits] == [1, 0, 0, 0, 0, 0, 1, 0]

@pytest.mark.parametrize('value,expected', [(0x00, 0), (0xFF, 1)])
def test_uniform_bytes(value, expected):
    decision = _round_trip(value)

    assert decision.value == value
    assert all(bit.detected for bit in decision.bits)
    assert all(bit.value == expected for bit in decision.bits)

def test_detected_frequencies_near_tones():
    decision = _round_trip(0xFF)

    for band, bit in zip(DEFAULT_BANDS, decision.bits):
        assert bit.frequency == pytest.approx(band.freq_one, abs=1)

def test_silence_is_undetected():
    decision = decode_symbol(np.zeros(SAMPLE_RATE, dtype=np.int16), SAMPLE_RATE, DEFAULT_BANDS)

    assert decision.value == 0x00
    assert len(decision.bits) == 8
    assert not any(bit.detected for bit in decision.bits)
    assert all(bit.frequency is None for bit in decision.bits)

def test_round_trip_with_noise():
    rng = np.random.default_rng(1)
    block = encode_symbol(0xA5, 1, SAMPLE_RATE, AMPLITUDE, DEFAULT_BANDS)
    noisy = block + rng.normal(0, 500, len(block))

    assert decode_symbol(noisy, SAMPLE_RATE, DEFAULT_BANDS).value == 0xA5

def test_fixed_transform_size():
    block = encode_symbol(0x41, 1, SAMPLE_RATE, AMPLITUDE, DEFAULT_BANDS)

    assert decode_symbol(block, SAMPLE_RATE, DEFAULT_BANDS, fft_size=32768).value == 0x41

    with pytest.raises(ValueError):
        decode_symbol(block, SAMPLE_RATE, DEFAULT_BANDS, fft_size=44100)

def test_single_tone_symbols():
    assert _round_trip(0, 0.1, bands=SINGLE_TONE_BANDS).value == 0
    assert _round_trip(1, 0.1, bands=SINGLE_TONE_BANDS).value == 1

def test_tolerance_boundary():
    band = Band(0, 300, 500)

    assert match_band(band, [Peak(349, 1.0)]) == (0, 0, True, 349)
    assert match_band(band, [Peak(251, 1.0)]).detected
    assert match_band(band, [Peak(451, 1.0)]).value == 1
    assert not match_band(band, [Peak(351, 1.0)]).detected
    assert not match_band(band, [Peak(551, 1.0)]).detected

def test_undetected_bit_defaults_to_zero():
    bit = match_band(Band(3, 1500, 1700), [Peak(1000, 1.0)])

    assert bit == (3, 0, False, None)

def test_closest_peak_wins():
    band = Band(0, 300, 500)

    bit = match_band(band, [Peak(340, 10.0), Peak(510, 1.0)])

    assert bit.value == 1
    assert bit.frequency == 510

def test_bands_matched_independently():
    bands = BandTable([Band(0, 300, 500), Band(1, 700, 900)])
    peaks = [Peak(505, 1.0), Peak(695, 1.0)]

    assert [match_band(band, peaks) for band in bands] == [(0, 1, True, 505), (1, 0, True, 695)]
