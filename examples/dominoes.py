"""Prints every stone of a double-six domino set, then rolls a die
once per face to show ordinal sequences."""

# Standard python Packages
import logging
from argparse import ArgumentParser

# 3rd-Party Packages
from haka_seq import cardinal, ordinal, seq

LOG_FMT='%(asctime)s %(name)s %(levelname)s %(message)s'


def main():
    parser = ArgumentParser(description=__doc__)
    parser.add_argument('--pips', type=int, default=6, help='Highest pip count on a stone (default: 6).')
    parser.add_argument('--verbose', action='store_true', help='Log range creation and exhaustion.')
    args = parser.parse_args()

    logging.basicConfig(format=LOG_FMT, level=logging.DEBUG if args.verbose else logging.INFO)

    count = 0
    for first in cardinal(args.pips, log='dominoes'):
        for second in seq(first, args.pips, log='dominoes'):
            print('({}|{})'.format(first, second))
            count += 1

    logging.getLogger('dominoes').info('%d stones.', count)

    for face in ordinal(6):
        print('Die face {}.'.format(face))


if __name__ == '__main__':
    main()
