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


'''Multi-tone FSK acoustic data modem.

Encodes binary messages as parallel tones, one band per bit, and decodes captured audio back to bits by spectral peak matching.

Example:
    >>> import mfskmodem
    >>> modem = mfskmodem.Modem()
    >>> samples = modem.encode('01000001')
    >>> modem.decode_bytes(samples)
    b'A'

Try `python -m mfskmodem --help` for command line options.
'''

from mfskmodem.bands import Band, BandTable, DEFAULT_BANDS, SINGLE_TONE_BANDS
from mfskmodem.fft import fft, next_power_of_two, zero_pad
from mfskmodem.framer import MIN_BLOCK_FRACTION, printable
from mfskmodem.modem import Modem
from mfskmodem.peaks import Peak, dominant_frequency, find_peaks
from mfskmodem.symbol import DecodedBit, SymbolDecision, dbfs_to_amplitude, decode_symbol, encode_symbol, match_band

__version__ = '0.1.0'
