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


'''WAV container reader and writer.

Output files are 16-bit PCM mono. Input files with more than one channel are down-mixed to mono by averaging the channels of each sample.
'''

import logging

import numpy as np
from scipy.io import wavfile


log = logging.getLogger(__name__)


def write(path, samples, sample_rate):
    '''Write samples to a 16-bit PCM mono WAV file.

    Args:
        path (str): Output file path
        samples (array-like): Mono samples, values outside the int16 range are clipped
        sample_rate (int): Sample rate in Hz

    Raises:
        ValueError: Samples are not one dimensional
    '''
    samples = np.asarray(samples)

    if samples.ndim != 1:
        raise ValueError('Samples must be mono (one dimensional), got shape {}'.format(samples.shape))

    if samples.dtype != np.int16:
        samples = np.clip(np.round(samples), -32768, 32767).astype(np.int16)

    wavfile.write(path, int(sample_rate), samples)
    log.info('Generated WAV file: {} ({} samples at {} Hz)'.format(path, len(samples), int(sample_rate)))

def downmix(samples):
    '''Down-mix multi-channel samples to mono.

    Args:
        samples (numpy.ndarray): Samples shaped (frames,) or (frames, channels)

    Returns:
        numpy.ndarray: float64 mono samples
    '''
    samples = np.asarray(samples, dtype=np.float64)

    if samples.ndim == 1:
        return samples

    return samples.mean(axis=1)

def read(path):
    '''Read a WAV file as mono samples.

    Integer samples keep their scale (ex. int16 full scale is 32767). Float samples are rescaled to the int16 range.

    Args:
        path (str): Input file path

    Returns:
        tuple: (sample_rate, samples) where *sample_rate* is type *int* and *samples* is a float64 numpy.ndarray

    Raises:
        OSError: File cannot be opened
        ValueError: File is not a supported WAV file
    '''
    sample_rate, data = wavfile.read(path)
    channels = 1 if data.ndim == 1 else data.shape[1]

    if np.issubdtype(data.dtype, np.floating):
        data = data * 32767
    elif data.dtype == np.uint8:
        # 8-bit PCM is unsigned
        data = (data.astype(np.float64) - 128) * 256

    samples = downmix(data)
    log.info('Read samples: {} ({} channel(s) at {} Hz)'.format(len(samples), channels, sample_rate))

    return sample_rate, samples
