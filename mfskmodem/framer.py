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


'''Message framing helpers.

Messages are handled as strings of '0' and '1' characters between the byte level and the symbol level. Bytes are expanded most significant bit first.
'''

import string

import numpy as np


# a block is decoded only if it holds at least this share of a symbol period
MIN_BLOCK_FRACTION = 44000 / 44100

_PRINTABLE = set(ord(char) for char in string.printable if char not in '\t\r\x0b\x0c')


def to_bits(message):
    '''Convert a message to a bit string.

    Args:
        message (bytes, bytearray, or str): Message bytes, or a string of '0' and '1' characters

    Returns:
        str: Bit string, most significant bit of each byte first

    Raises:
        TypeError: Message is not bytes or str
        ValueError: Message is empty, or a str message contains characters other than '0' and '1'
    '''
    if isinstance(message, (bytes, bytearray)):
        bits = ''.join(format(byte, '08b') for byte in message)
    elif isinstance(message, str):
        bits = message.strip()
        invalid = set(bits) - {'0', '1'}
        if len(invalid) > 0:
            raise ValueError('Binary message must contain only 0 and 1 characters, found: {}'.format(''.join(sorted(invalid))))
    else:
        raise TypeError('Message must be of type bytes or str, {} given'.format(type(message)))

    if len(bits) == 0:
        raise ValueError('Message is empty')

    return bits

def to_bytes(bits):
    '''Pack a bit string into bytes.

    Trailing bits that do not fill a complete byte are dropped.

    Args:
        bits (str): Bit string, most significant bit of each byte first

    Returns:
        bytes: Packed bytes
    '''
    return bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits) - 7, 8))

def split_symbols(bits, width):
    '''Split a bit string into symbol values.

    Args:
        bits (str): Bit string
        width (int): Number of bits per symbol

    Returns:
        list: Symbol values, the first bit of each group is the most significant bit

    Raises:
        ValueError: Bit count is not a multiple of *width*
    '''
    if len(bits) % width != 0:
        raise ValueError('Message length ({} bits) must be a multiple of {} bits'.format(len(bits), width))

    return [int(bits[i:i + width], 2) for i in range(0, len(bits), width)]

def symbol_bits(value, width):
    '''Format a symbol value as a bit string, most significant bit first.'''
    return format(value, '0{}b'.format(width))

def iter_blocks(samples, block_size, min_fraction=MIN_BLOCK_FRACTION):
    '''Slice samples into consecutive symbol blocks.

    A final partial block is zero-padded to *block_size* if it holds at least *min_fraction* of a block, and dropped otherwise.

    Args:
        samples (array-like): Mono samples
        block_size (int): Samples per symbol period
        min_fraction (float): Minimum share of a block required to decode a partial block, defaults to MIN_BLOCK_FRACTION

    Yields:
        numpy.ndarray: Sample blocks of *block_size* samples

    Raises:
        ValueError: Block size is less than 1
    '''
    if block_size < 1:
        raise ValueError('Block size must be at least 1, {} given'.format(block_size))

    samples = np.asarray(samples)
    min_samples = int(round(block_size * min_fraction))

    for start in range(0, len(samples), block_size):
        block = samples[start:start + block_size]

        if len(block) < min_samples:
            # partial symbol at end of input
            break

        if len(block) < block_size:
            block = np.concatenate((block, np.zeros(block_size - len(block), dtype=block.dtype)))

        yield block

def printable(data, placeholder='.'):
    '''Render bytes for display.

    Args:
        data (bytes): Data to render
        placeholder (str): Replacement for non-printable bytes, defaults to '.'

    Returns:
        str: Printable text
    '''
    return ''.join(chr(byte) if byte in _PRINTABLE else placeholder for byte in data)
