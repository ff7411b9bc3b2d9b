"""Hill: encrypt and decrypt letters with a key matrix."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from hill import config
from hill.__version__ import __version__
from hill.engine import decrypt, encrypt
from hill.error import CipherError
from hill.result import Err
from hill.utils import square

logger = logging.getLogger('hill')

actions = {
    'encrypt': encrypt,
    'decrypt': decrypt,
}


def parse(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='hill',
        description='Hill cipher with a square key matrix modulo 26.',
    )
    parser.add_argument('action', choices=actions)
    parser.add_argument('message', help='letters only')
    parser.add_argument(
        '-k', '--key',
        nargs='+',
        type=int,
        required=True,
        metavar='INT',
        help='key matrix entries, row by row (e.g. 3 3 2 5)',
    )
    parser.add_argument(
        '--upper',
        action='store_true',
        default=config.UPPERCASE,
        help='print the result in uppercase',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='log debug output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        key = square(args.key)
    except CipherError as err:
        result = Err(err)
    else:
        result = actions[args.action](key, args.message)

    if isinstance(result, Err):
        logger.debug('%s failed.', args.action, exc_info=result.error)
        print(f'error: {result.error}', file=sys.stderr)
        return 1

    print(result.value.upper() if args.upper else result.value)
    return 0


if __name__ == '__main__':
    sys.exit(main())
