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


'''Band tables defining the modulation alphabet.

Each band carries one bit of a symbol as a choice between two tones. Bit position 0 is the least significant bit and uses the lowest frequency band.

Default band table:

| Bit | Tone for 0 | Tone for 1 |
| -------- | -------- | -------- |
| 0 (LSB) | 300 Hz | 500 Hz |
| 1 | 700 Hz | 900 Hz |
| 2 | 1100 Hz | 1300 Hz |
| 3 | 1500 Hz | 1700 Hz |
| 4 | 1900 Hz | 2100 Hz |
| 5 | 2300 Hz | 2500 Hz |
| 6 | 2700 Hz | 2900 Hz |
| 7 (MSB) | 3100 Hz | 3300 Hz |
'''

import itertools
from collections import namedtuple


Band = namedtuple('Band', ['bit_position', 'freq_zero', 'freq_one'])
Band.__doc__ = '''Tone pair for one bit position.

Attributes:
    bit_position (int): Bit position within the symbol, 0 is the least significant bit
    freq_zero (float): Tone in Hz sent when the bit is 0
    freq_one (float): Tone in Hz sent when the bit is 1
'''


class BandTable:
    '''Immutable ordered sequence of bands.

    Attributes:
        bands (tuple): Band objects ordered by bit position
        bits (int): Number of bits carried by one symbol
    '''

    def __init__(self, bands):
        '''Initialize BandTable class instance.

        Args:
            bands (iterable): Band objects or (bit_position, freq_zero, freq_one) tuples

        Raises:
            ValueError: Table is empty or bit positions are not 0 through n-1 in order
        '''
        bands = tuple(Band(*band) for band in bands)

        if len(bands) == 0:
            raise ValueError('Band table must contain at least one band')

        for position, band in enumerate(bands):
            if band.bit_position != position:
                raise ValueError('Band {} has bit position {}, expected {}'.format(position, band.bit_position, position))

        self._bands = bands

    @property
    def bands(self):
        return self._bands

    @property
    def bits(self):
        return len(self._bands)

    def __len__(self):
        return len(self._bands)

    def __iter__(self):
        return iter(self._bands)

    def __getitem__(self, index):
        return self._bands[index]

    def __eq__(self, other):
        return isinstance(other, BandTable) and self._bands == other._bands

    def __hash__(self):
        return hash(self._bands)

    def __repr__(self):
        return 'BandTable({!r})'.format(list(self._bands))

    def tones(self):
        '''Get every tone of the table.

        Returns:
            list: Tone frequencies in Hz, in band order (0 tone then 1 tone)
        '''
        return [freq for band in self._bands for freq in (band.freq_zero, band.freq_one)]

    def min_spacing(self):
        '''Get the minimum distance between any two tones of the table.

        Returns:
            float: Minimum tone spacing in Hz
        '''
        return min(abs(a - b) for a, b in itertools.combinations(self.tones(), 2))

    def frequencies(self, value):
        '''Get the tones that encode a symbol value.

        Args:
            value (int): Symbol value, 0 through 2^bits - 1

        Returns:
            list: One tone frequency per band, in band order

        Raises:
            ValueError: Value does not fit in the symbol
        '''
        if not 0 <= value < (1 << self.bits):
            raise ValueError('Symbol value must be between 0 and {}, {} given'.format((1 << self.bits) - 1, value))

        return [band.freq_one if (value >> band.bit_position) & 1 else band.freq_zero for band in self._bands]

    def validate(self, tolerance, sample_rate=None):
        '''Check that the table can be decoded without ambiguity.

        Detection tolerance must be strictly smaller than half the minimum tone spacing so that a detected peak can match at most one tone.

        Args:
            tolerance (float): Decoder match tolerance in Hz
            sample_rate (float): Sample rate in Hz used to check tones against Nyquist, defaults to None (not checked)

        Raises:
            ValueError: Tolerance is not positive, tolerance overlaps neighboring tones, or a tone is not below Nyquist
        '''
        if tolerance <= 0:
            raise ValueError('Tolerance must be positive, {} given'.format(tolerance))

        for freq in self.tones():
            if freq <= 0:
                raise ValueError('Tone frequencies must be positive, {} given'.format(freq))

        spacing = self.min_spacing()
        if tolerance >= spacing / 2:
            raise ValueError('Tolerance {} Hz must be less than half the minimum tone spacing ({} Hz)'.format(tolerance, spacing))

        if sample_rate is not None:
            nyquist = sample_rate / 2
            for freq in self.tones():
                if freq >= nyquist:
                    raise ValueError('Tone {} Hz is not below the Nyquist frequency ({} Hz)'.format(freq, nyquist))


DEFAULT_BANDS = BandTable([
    Band(0, 300, 500),
    Band(1, 700, 900),
    Band(2, 1100, 1300),
    Band(3, 1500, 1700),
    Band(4, 1900, 2100),
    Band(5, 2300, 2500),
    Band(6, 2700, 2900),
    Band(7, 3100, 3300),
])

# one tone per symbol, accepted within 900-1000 Hz (0) and 1900-2000 Hz (1)
SINGLE_TONE_BANDS = BandTable([
    Band(0, 950, 1950),
])
