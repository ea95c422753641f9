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


'''A multi-tone FSK soft modem.

Every symbol period carries one bit per band of the band table as a superposition of tones, one tone per band. With the default 8 band table one symbol carries one byte.

Modem Defaults:

| Setting | Default | Notes |
| -------- | -------- | -------- |
| symbol_rate | 1 | symbols per second (one byte per second with the default band table) |
| level | -3 | output level in dBFS |
| sample_rate | 44100 | Hz |
| tolerance | 50 | Hz, maximum distance between a detected peak and a band tone |
| bands | DEFAULT_BANDS | 8 bands from 300 Hz to 3300 Hz |

Symbol boundaries are assumed to be aligned with the start of the samples, there is no synchronization preamble.
'''

import logging

import numpy as np

from mfskmodem import framer
from mfskmodem.bands import DEFAULT_BANDS, SINGLE_TONE_BANDS
from mfskmodem.fft import is_power_of_two
from mfskmodem.symbol import DEFAULT_TOLERANCE, dbfs_to_amplitude, decode_symbol, encode_symbol, symbol_length


log = logging.getLogger(__name__)


class Modem:
    '''Create and manage a multi-tone FSK modem.

    Attributes:
        symbol_rate (float): Symbols per second
        level (float): Output level in dBFS
        amplitude (float): Output full scale ratio, based on *level*
        sample_rate (int): Sample rate in Hz
        bands (mfskmodem.bands.BandTable): Band table defining the modulation alphabet
        tolerance (float): Maximum distance in Hz between a detected peak and a band tone
        fft_size (int or None): Transform length, None to zero-pad each block to the next power of two
        block_size (int): Samples per symbol period
        bits_per_symbol (int): Bits carried by one symbol
    '''

    @staticmethod
    def single_tone(**kwargs):
        '''Create a modem sending one tone (one bit) per symbol period.

        Args:
            **kwargs: Modem keyword arguments other than *bands*

        Returns:
            mfskmodem.Modem: Modem instance object using SINGLE_TONE_BANDS
        '''
        return Modem(bands=SINGLE_TONE_BANDS, **kwargs)

    def __init__(self, symbol_rate=1, level=-3, sample_rate=44100, bands=DEFAULT_BANDS, tolerance=DEFAULT_TOLERANCE, fft_size=None):
        '''Initialize Modem class instance.

        The configuration is validated before any encoding or decoding.

        Args:
            symbol_rate (float): Symbols per second, defaults to 1
            level (float): Output level in dBFS, defaults to -3
            sample_rate (int): Sample rate in Hz, defaults to 44100
            bands (mfskmodem.bands.BandTable): Band table, defaults to DEFAULT_BANDS
            tolerance (float): Maximum distance in Hz between a detected peak and a band tone, defaults to 50
            fft_size (int): Transform length (power of two), defaults to None (next power of two of the block size)

        Returns:
            mfskmodem.Modem: Modem instance object

        Raises:
            ValueError: Invalid symbol rate, sample rate, level, transform size, or band table
        '''
        if symbol_rate <= 0:
            raise ValueError('Symbol rate must be positive, {} given'.format(symbol_rate))
        if sample_rate <= 0:
            raise ValueError('Sample rate must be positive, {} given'.format(sample_rate))
        if fft_size is not None and not is_power_of_two(fft_size):
            raise ValueError('Transform size must be a power of two, {} given'.format(fft_size))

        bands.validate(tolerance, sample_rate)

        self.symbol_rate = symbol_rate
        self.level = level
        self.amplitude = dbfs_to_amplitude(level)
        self.sample_rate = sample_rate
        self.bands = bands
        self.tolerance = tolerance
        self.fft_size = fft_size
        self.block_size = symbol_length(1 / symbol_rate, sample_rate)
        self.bits_per_symbol = bands.bits

        if self.block_size < 1:
            raise ValueError('Symbol rate {} is too high for sample rate {}'.format(symbol_rate, sample_rate))

    @property
    def symbol_duration(self):
        '''float: Duration of one symbol in seconds.'''
        return 1 / self.symbol_rate

    def duration(self, message):
        '''Get the transmit duration of a message.

        Args:
            message (bytes or str): Message bytes, or a string of '0' and '1' characters

        Returns:
            float: Duration in seconds
        '''
        bits = framer.to_bits(message)
        return len(bits) // self.bits_per_symbol * self.symbol_duration

    def encode(self, message):
        '''Encode a message to audio samples.

        Symbols are concatenated with no gap between them.

        Args:
            message (bytes or str): Message bytes, or a string of '0' and '1' characters

        Returns:
            numpy.ndarray: int16 mono samples

        Raises:
            TypeError: Message is not bytes or str
            ValueError: Message is empty or its bit count is not a multiple of *bits_per_symbol*
        '''
        symbols = framer.split_symbols(framer.to_bits(message), self.bits_per_symbol)
        blocks = [encode_symbol(value, self.symbol_duration, self.sample_rate, self.amplitude, self.bands) for value in symbols]

        log.debug('Encoded {} symbols at {} symbols/s, {} dBFS'.format(len(symbols), self.symbol_rate, self.level))
        return np.concatenate(blocks)

    def decode(self, samples):
        '''Decode audio samples to symbols.

        A final partial block shorter than framer.MIN_BLOCK_FRACTION of a symbol period is dropped.

        Args:
            samples (array-like): Mono samples at *sample_rate*

        Returns:
            list: SymbolDecision objects in arrival order
        '''
        samples = np.asarray(samples)
        decisions = []

        for block in framer.iter_blocks(samples, self.block_size):
            decision = decode_symbol(block, self.sample_rate, self.bands, self.tolerance, self.fft_size)
            log.debug('Symbol {}: {}'.format(len(decisions), framer.symbol_bits(decision.value, self.bits_per_symbol)))
            decisions.append(decision)

        dropped = len(samples) - len(decisions) * self.block_size
        if dropped > 0:
            log.debug('Dropped {} trailing samples (partial symbol)'.format(dropped))

        return decisions

    def decode_bits(self, samples):
        '''Decode audio samples to a bit string.

        Args:
            samples (array-like): Mono samples at *sample_rate*

        Returns:
            str: Bit string, most significant bit of each symbol first
        '''
        return ''.join(framer.symbol_bits(decision.value, self.bits_per_symbol) for decision in self.decode(samples))

    def decode_bytes(self, samples):
        '''Decode audio samples to bytes.

        Args:
            samples (array-like): Mono samples at *sample_rate*

        Returns:
            bytes: Decoded bytes, trailing bits that do not fill a byte are dropped
        '''
        return framer.to_bytes(self.decode_bits(samples))
