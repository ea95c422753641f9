import numpy as np
import pytest

import mfskmodem
from mfskmodem.peaks import dominant_frequency
from mfskmodem.fft import fft, zero_pad


def test_letter_a_scenario():
    modem = mfskmodem.Modem(symbol_rate=1, level=-3, sample_rate=44100)

    samples = modem.encode('01000001')

    assert len(samples) == 44100
    assert modem.decode_bits(samples) == '01000001'
    assert modem.decode_bytes(samples) == b'A'

def test_text_round_trip():
    modem = mfskmodem.Modem(symbol_rate=10)
    message = b'Hello, world!'

    samples = modem.encode(message)

    assert len(samples) == len(message) * 4410
    assert modem.decode_bytes(samples) == message

def test_encode_bytes_and_bits_match():
    modem = mfskmodem.Modem(symbol_rate=10)

    assert np.array_equal(modem.encode(b'AB'), modem.encode('0100000101000010'))

def test_decode_returns_decisions():
    modem = mfskmodem.Modem(symbol_rate=10)

    decisions = modem.decode(modem.encode(b'\x00\xff'))

    assert [decision.value for decision in decisions] == [0x00, 0xFF]
    assert all(bit.detected for decision in decisions for bit in decision.bits)

def test_decode_has_no_state():
    modem = mfskmodem.Modem(symbol_rate=10)
    samples = modem.encode(b'xyz')

    assert modem.decode_bytes(samples) == b'xyz'
    assert modem.decode_bytes(samples) == b'xyz'

def test_short_final_block_dropped():
    modem = mfskmodem.Modem()
    samples = modem.encode(b'AB')

    assert modem.decode_bytes(samples[:-200]) == b'A'
    assert modem.decode_bytes(samples[:-50]) == b'AB'

def test_silence_decodes_to_zero_bytes():
    modem = mfskmodem.Modem(symbol_rate=10)

    decisions = modem.decode(np.zeros(3 * 4410))

    assert [decision.value for decision in decisions] == [0, 0, 0]
    assert not any(bit.detected for decision in decisions for bit in decision.bits)

def test_level_sets_amplitude():
    loud = mfskmodem.Modem(symbol_rate=10, level=0).encode(b'\xff')
    quiet = mfskmodem.Modem(symbol_rate=10, level=-20).encode(b'\xff')

    assert np.max(np.abs(quiet)) <= 32767 * 0.1
    assert np.max(np.abs(quiet)) < np.max(np.abs(loud))

def test_duration():
    modem = mfskmodem.Modem(symbol_rate=2)

    assert modem.symbol_duration == 0.5
    assert modem.duration(b'abcd') == 2
    assert modem.duration('01000001') == 0.5

def test_single_tone():
    modem = mfskmodem.Modem.single_tone(symbol_rate=10)

    samples = modem.encode('1011')

    assert modem.bits_per_symbol == 1
    assert len(samples) == 4 * 4410
    assert modem.decode_bits(samples) == '1011'
    assert dominant_frequency(fft(zero_pad(samples[:4410].astype(float))), 44100) == pytest.approx(1950, abs=6)

def test_fixed_transform_size():
    modem = mfskmodem.Modem(fft_size=32768)

    assert modem.decode_bytes(modem.encode(b'Q')) == b'Q'

@pytest.mark.parametrize('kwargs', [
    {'symbol_rate': 0},
    {'symbol_rate': -1},
    {'sample_rate': 0},
    {'level': 1},
    {'tolerance': 150},
    {'tolerance': 0},
    {'fft_size': 1000},
    {'sample_rate': 6000},
    {'symbol_rate': 100000},
])
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        mfskmodem.Modem(**kwargs)

@pytest.mark.parametrize('message', ['', b'', '0101', '0100000x'])
def test_invalid_message(message):
    modem = mfskmodem.Modem()

    with pytest.raises(ValueError):
        modem.encode(message)

def test_message_type():
    with pytest.raises(TypeError):
        mfskmodem.Modem().encode(0x41)
