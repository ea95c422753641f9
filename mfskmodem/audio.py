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


'''Live audio playback and capture.

Requires the *pyaudio* package (`pip install mfskmodem[audio]`), which is imported on first use.
'''

import logging

import numpy as np


log = logging.getLogger(__name__)

# frames per buffer
CHUNK = 1024


def _open(sample_rate, device=None, output=False):
    import pyaudio

    p = pyaudio.PyAudio()

    if output:
        stream = p.open(format=pyaudio.paInt16, channels=1, rate=int(sample_rate), output=True, output_device_index=device, frames_per_buffer=CHUNK)
    else:
        stream = p.open(format=pyaudio.paInt16, channels=1, rate=int(sample_rate), input=True, input_device_index=device, frames_per_buffer=CHUNK)

    return p, stream

def play(samples, sample_rate, device=None):
    '''Play samples on an audio output device.

    Blocks until playback is complete.

    Args:
        samples (array-like): int16 mono samples
        sample_rate (int): Sample rate in Hz
        device (int): PyAudio output device index, defaults to None (system default device)
    '''
    samples = np.asarray(samples, dtype=np.int16)
    p, stream = _open(sample_rate, device, output=True)

    try:
        log.info('Playing {:.2f} s of audio'.format(len(samples) / sample_rate))
        stream.write(samples.tobytes())
    finally:
        stream.stop_stream()
        stream.close()
        p.terminate()

def record(duration, sample_rate, device=None):
    '''Record samples from an audio input device.

    Args:
        duration (float): Recording duration in seconds
        sample_rate (int): Sample rate in Hz
        device (int): PyAudio input device index, defaults to None (system default device)

    Returns:
        numpy.ndarray: float64 mono samples

    Raises:
        ValueError: Duration is not positive
    '''
    if duration <= 0:
        raise ValueError('Recording duration must be positive, {} given'.format(duration))

    remaining = int(round(duration * sample_rate))
    frames = []
    p, stream = _open(sample_rate, device)

    try:
        log.info('Recording {:.2f} s of audio'.format(duration))
        while remaining > 0:
            size = min(CHUNK, remaining)
            frames.append(np.frombuffer(stream.read(size), dtype=np.int16))
            remaining -= size
    finally:
        stream.stop_stream()
        stream.close()
        p.terminate()

    return np.concatenate(frames).astype(np.float64)
