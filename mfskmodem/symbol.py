# MIT License
# 
# Copyright (c) 2022-2023 Simply Equipped
# 
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

__docformat__ = 'google'


'''Multi-tone symbol encoder and decoder.

A symbol carries one bit per band of a band table. The encoder sums one tone per band, and the decoder recovers each bit by matching the strongest spectral peaks against the band tones.
'''

import logging
from collections import namedtuple

import numpy as np

from mfskmodem.fft import fft, is_power_of_two, zero_pad
from mfskmodem.peaks import find_peaks


log = logging.getLogger(__name__)

# full scale of a signed 16-bit sample
FULL_SCALE = 32767
# maximum distance in Hz between a detected peak and a band tone
DEFAULT_TOLERANCE = 50


DecodedBit = namedtuple('DecodedBit', ['bit_position', 'value', 'detected', 'frequency'])
DecodedBit.__doc__ = '''Result of matching one band against the detected peaks.

Attributes:
    bit_position (int): Bit position of the band
    value (int): 0 or 1 (0 if not detected)
    detected (bool): True if a peak matched one of the band tones, False otherwise
    frequency (float or None): Frequency of the matching peak in Hz, None if not detected
'''

SymbolDecision = namedtuple('SymbolDecision', ['value', 'bits'])
SymbolDecision.__doc__ = '''Decoded symbol.

Attributes:
    value (int): Assembled symbol value (bit position 0 is the least significant bit)
    bits (tuple): DecodedBit objects in band order
'''


def dbfs_to_amplitude(level):
    '''Convert a level in dBFS to a full scale ratio.

    Args:
        level (float): Level in dB relative to full scale, 0 or less

    Returns:
        float: Amplitude ratio (ex. -3 dBFS -> 0.708)

    Raises:
        ValueError: Level is above full scale
    '''
    if level > 0:
        raise ValueError('Level must be 0 dBFS or less, {} given'.format(level))

    return 10 ** (level / 20)

def symbol_length(duration, sample_rate):
    '''Get the number of samples in one symbol period.'''
    return int(round(duration * sample_rate))

def encode_symbol(value, duration, sample_rate, amplitude, bands):
    '''Synthesize the sample block of one symbol.

    Each band contributes a sinusoid at the tone selected by its bit. The sum is divided by the number of bands so the combined peak cannot clip, scaled by *amplitude* and quantized to signed 16-bit samples.

    Args:
        value (int): Symbol value, 0 through 2^bits - 1
        duration (float): Symbol duration in seconds
        sample_rate (float): Sample rate in Hz
        amplitude (float): Full scale ratio, 0 to 1
        bands (mfskmodem.bands.BandTable): Band table

    Returns:
        numpy.ndarray: int16 sample block of round(duration * sample_rate) samples

    Raises:
        ValueError: Value does not fit in the symbol
    '''
    freqs = np.array(bands.frequencies(value), dtype=np.float64)
    t = np.arange(symbol_length(duration, sample_rate)) / sample_rate

    tones = np.sin(2 * np.pi * np.outer(freqs, t))
    samples = tones.sum(axis=0) / len(freqs) * amplitude * FULL_SCALE

    # truncate toward zero
    return samples.astype(np.int16)

def match_band(band, peaks, tolerance=DEFAULT_TOLERANCE):
    '''Match a band against detected peaks.

    The peak closest to either tone of the band is selected, if it is strictly within *tolerance* of that tone.

    Args:
        band (mfskmodem.bands.Band): Band to match
        peaks (list): Peak objects
        tolerance (float): Maximum distance in Hz, defaults to 50

    Returns:
        DecodedBit: Matched bit, or an undetected 0 bit if no peak qualifies
    '''
    best = None

    for peak in peaks:
        for bit, freq in ((0, band.freq_zero), (1, band.freq_one)):
            distance = abs(peak.frequency - freq)
            if distance < tolerance and (best is None or distance < best[0]):
                best = (distance, bit, peak.frequency)

    if best is None:
        return DecodedBit(band.bit_position, 0, False, None)

    return DecodedBit(band.bit_position, best[1], True, best[2])

def decode_symbol(block, sample_rate, bands, tolerance=DEFAULT_TOLERANCE, fft_size=None):
    '''Recover a symbol from the sample block of one symbol period.

    Bands are matched independently of each other. A band with no qualifying peak decodes as an undetected 0 bit.

    Args:
        block (array-like): Samples of one symbol period
        sample_rate (float): Sample rate in Hz
        bands (mfskmodem.bands.BandTable): Band table
        tolerance (float): Maximum distance in Hz between a peak and a tone, defaults to 50
        fft_size (int): Transform length (power of two), defaults to None (next power of two of the block length)

    Returns:
        SymbolDecision: Assembled value and per-band decoded bits

    Raises:
        ValueError: *fft_size* is not a power of two
    '''
    if fft_size is not None and not is_power_of_two(fft_size):
        raise ValueError('Transform size must be a power of two, {} given'.format(fft_size))

    samples = zero_pad(np.asarray(block, dtype=np.float64), fft_size)
    peaks = find_peaks(fft(samples), sample_rate, len(bands))

    bits = tuple(match_band(band, peaks, tolerance) for band in bands)
    value = 0

    for bit in bits:
        value |= bit.value << bit.bit_position

    undetected = [bit.bit_position for bit in bits if not bit.detected]
    if len(undetected) > 0:
        log.debug('No tone detected for bit positions {}'.format(undetected))

    return SymbolDecision(value, bits)
