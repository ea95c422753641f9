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

'''Command line interface for mfskmodem.

Encode a binary message to a WAV file (or the speaker), and decode a WAV file (or the microphone) back to a message.

Try `python -m mfskmodem --help` for command line switch options.
'''

import sys
import logging
import argparse

import mfskmodem
from mfskmodem import audio, framer, wav
from mfskmodem.symbol import DEFAULT_TOLERANCE


log = logging.getLogger('mfskmodem')


def _modem(args, sample_rate):
    kwargs = {
        'symbol_rate': args.bps,
        'sample_rate': sample_rate,
        'tolerance': args.tolerance,
    }

    if getattr(args, 'level', None) is not None:
        kwargs['level'] = args.level

    if args.single_tone:
        return mfskmodem.Modem.single_tone(**kwargs)

    return mfskmodem.Modem(**kwargs)

def _encode(args):
    if args.text is not None:
        message = args.text.encode('utf-8')
    else:
        message = args.message

    sample_rate = int(round(args.rate * 1000))
    modem = _modem(args, sample_rate)
    samples = modem.encode(message)

    if args.play:
        audio.play(samples, sample_rate, args.device)

    output_file = args.output
    if output_file is None and not args.play:
        output_file = 'sine_message_{}.wav'.format(int(modem.duration(message)))

    if output_file is not None:
        wav.write(output_file, samples, sample_rate)

def _decode(args):
    if args.record is not None:
        sample_rate = int(round(args.rate * 1000))
        samples = audio.record(args.record, sample_rate, args.device)
    elif args.file is not None:
        sample_rate, samples = wav.read(args.file)
    else:
        raise ValueError('A WAV file or --record duration is required')

    modem = _modem(args, sample_rate)
    bits = modem.decode_bits(samples)
    data = framer.to_bytes(bits)

    print('Message: {}'.format(bits))
    if args.raw:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        print(framer.printable(data))

def main(argv=None):
    '''Run the command line interface.

    Args:
        argv (list): Command line arguments, defaults to None (sys.argv)

    Returns:
        int: Exit status
    '''
    help_epilog = 'With the default band table each symbol carries one byte, so --bps is the byte rate.\n'
    help_epilog += 'Use --single-tone to send one tone (one bit) per symbol instead.\n'

    program = 'python -m mfskmodem'

    parser = argparse.ArgumentParser(prog=program, description='CLI for mfskmodem package', epilog=help_epilog)
    parser.add_argument('--debug', help='Log per-symbol decoding details', action='store_true')
    parser.add_argument('--quiet', help='Only log warnings and errors', action='store_true')

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('-s', '--bps', help='Symbols per second, defaults to 1', default=1, type=float, metavar='BPS')
    common.add_argument('-r', '--rate', help='Sample rate in kHz, defaults to 44.1', default=44.1, type=float, metavar='KHZ')
    common.add_argument('--tolerance', help='Peak match tolerance in Hz, defaults to 50', default=DEFAULT_TOLERANCE, type=float, metavar='HZ')
    common.add_argument('--single-tone', help='Use the single tone band table (one bit per symbol)', action='store_true')
    common.add_argument('--device', help='PyAudio device index for --play or --record', type=int, metavar='INDEX')

    commands = parser.add_subparsers(dest='command', metavar='COMMAND')
    commands.required = True

    encode_parser = commands.add_parser('encode', parents=[common], help='Encode a message to a WAV file')
    message = encode_parser.add_mutually_exclusive_group(required=True)
    message.add_argument('-m', '--message', help='Binary message as 0 and 1 characters (ex. 01000001)', metavar='BITS')
    message.add_argument('-t', '--text', help='Text message, utf-8 encoded', metavar='TEXT')
    encode_parser.add_argument('-l', '--level', help='Output level in dBFS, defaults to -3', default=-3, type=float, metavar='DBFS')
    encode_parser.add_argument('-o', '--output', help='Output WAV file, defaults to sine_message_<seconds>.wav', metavar='FILE')
    encode_parser.add_argument('--play', help='Play the message on the audio output device', action='store_true')
    encode_parser.set_defaults(func=_encode)

    decode_parser = commands.add_parser('decode', parents=[common], help='Decode a WAV file to a message')
    decode_parser.add_argument('file', help='Input WAV file', nargs='?', metavar='FILE')
    decode_parser.add_argument('--record', help='Record from the audio input device instead of reading a file', type=float, metavar='SECONDS')
    decode_parser.add_argument('--raw', help='Write decoded bytes to stdout instead of printable text', action='store_true')
    decode_parser.set_defaults(func=_decode)

    args = parser.parse_args(argv)

    log_level = logging.INFO
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.WARNING

    logging.basicConfig(level=log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        args.func(args)
    except (OSError, ValueError, TypeError) as e:
        log.error(str(e))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
