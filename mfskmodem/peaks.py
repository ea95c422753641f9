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


'''Spectral peak extraction.'''

from collections import namedtuple

import numpy as np


Peak = namedtuple('Peak', ['frequency', 'magnitude'])
Peak.__doc__ = '''A spectral peak derived from one transform bin.

Attributes:
    frequency (float): Bin frequency in Hz
    magnitude (float): Magnitude of the bin coefficient
'''


def bin_frequency(index, size, sample_rate):
    '''Get the frequency of a transform bin.

    Args:
        index (int): Bin index
        size (int): Transform length
        sample_rate (float): Sample rate in Hz

    Returns:
        float: Bin frequency in Hz
    '''
    return index * sample_rate / size

def find_peaks(spectrum, sample_rate, count):
    '''Get the strongest peaks of a spectrum.

    Only bins 1 through N/2-1 are considered, which excludes DC and the mirrored negative frequencies. A bin is a peak if its magnitude is greater than its lower neighbor and not less than its upper neighbor, so a tone spread over adjacent bins yields a single peak.

    Args:
        spectrum (numpy.ndarray): Complex transform result of length N
        sample_rate (float): Sample rate in Hz
        count (int): Maximum number of peaks to return

    Returns:
        list: Up to *count* Peak objects, ordered by magnitude (descending, ties by lower bin first)
    '''
    size = len(spectrum)
    magnitude = np.abs(np.asarray(spectrum)[:size // 2 + 1])

    if size < 4 or count < 1:
        return []

    bins = np.arange(1, size // 2)
    is_peak = (magnitude[bins] > magnitude[bins - 1]) & (magnitude[bins] >= magnitude[bins + 1])
    bins = bins[is_peak]

    order = np.argsort(-magnitude[bins], kind='stable')[:count]

    return [Peak(bin_frequency(int(i), size, sample_rate), float(magnitude[i])) for i in bins[order]]

def dominant_frequency(spectrum, sample_rate):
    '''Get the frequency of the strongest peak of a spectrum.

    Args:
        spectrum (numpy.ndarray): Complex transform result
        sample_rate (float): Sample rate in Hz

    Returns:
        - float: Frequency of the strongest peak in Hz
        - None: Spectrum has no peaks (ex. silence)
    '''
    peaks = find_peaks(spectrum, sample_rate, 1)

    if len(peaks) == 0:
        return None

    return peaks[0].frequency
