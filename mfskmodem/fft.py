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


'''Radix-2 discrete Fourier transform of a sample block.

The transform is a recursive even/odd divide and conquer. Both halves of every
level are stacked on a leading axis and transformed in a single recursive
call, so the recursion depth is log2(N) and each level is one numpy pass.
'''

import numpy as np


def is_power_of_two(n):
    '''Check if an integer is a positive power of two.

    Args:
        n (int): Value to check

    Returns:
        bool: True if *n* is 1, 2, 4, 8, ..., False otherwise
    '''
    return n > 0 and (n & (n - 1)) == 0

def next_power_of_two(n):
    '''Get the smallest power of two greater than or equal to *n*.

    Args:
        n (int): Minimum length, must be at least 1

    Returns:
        int: Power of two length

    Raises:
        ValueError: *n* is less than 1
    '''
    if n < 1:
        raise ValueError('Length must be at least 1, {} given'.format(n))

    return 1 << (int(n) - 1).bit_length()

def zero_pad(samples, length=None):
    '''Zero-pad or truncate a sample block.

    Args:
        samples (array-like): Sample block
        length (int): Target length, defaults to None (next power of two of the block length)

    Returns:
        numpy.ndarray: Sample block of the target length
    '''
    samples = np.asarray(samples)

    if length is None:
        length = next_power_of_two(max(len(samples), 1))

    if len(samples) >= length:
        return samples[:length]

    padded = np.zeros(length, dtype=samples.dtype)
    padded[:len(samples)] = samples
    return padded

def _fft(data):
    n = data.shape[-1]

    if n <= 1:
        return data

    # even and odd halves share one recursive call
    halves = _fft(np.stack((data[..., ::2], data[..., 1::2])))
    even = halves[0]
    odd = halves[1] * np.exp(-2j * np.pi * np.arange(n // 2) / n)

    return np.concatenate((even + odd, even - odd), axis=-1)

def fft(samples):
    '''Compute the discrete Fourier transform of a sample block.

    Real samples are converted to complex values with a zero imaginary part before the transform.

    Args:
        samples (array-like): Sample block, length must be a power of two

    Returns:
        numpy.ndarray: Complex spectrum, one coefficient per input sample

    Raises:
        ValueError: Block length is not a power of two
    '''
    data = np.asarray(samples, dtype=np.complex128)

    if data.ndim != 1:
        raise ValueError('Sample block must be one dimensional, got shape {}'.format(data.shape))

    if not is_power_of_two(len(data)):
        raise ValueError('Transform length must be a power of two, {} given (zero-pad first)'.format(len(data)))

    return _fft(data)
