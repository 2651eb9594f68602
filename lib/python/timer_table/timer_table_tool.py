#!/usr/bin/python3 -B

# Copyright 2026 mjbots Robotic Systems, LLC.  info@mjbots.com
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Generate the ADC to timer capture-control register lookup table.

With no arguments, the C declaration is written to stdout, suitable
for redirecting into the firmware source tree.
"""

import argparse
import logging
import sys

from timer_table import emit, table


def plot_table(values):
    import matplotlib.pyplot as plt
    import numpy

    indices = numpy.arange(len(values))
    frequencies = [table.frequency(i) for i in indices]

    fig, ax = plt.subplots()
    ax.plot(indices, values, label='register')
    ax.set_xlabel('ADC reading')
    ax.set_ylabel('register value')

    ax2 = ax.twinx()
    ax2.plot(indices, frequencies, color='tab:orange', label='frequency')
    ax2.set_ylabel('frequency')

    fig.legend()
    plt.show()


def check_table(filename, values):
    '''Return None if the declaration in 'filename' matches 'values',
    otherwise a description of the first difference.'''
    with open(filename) as inf:
        existing = emit.parse_table(inf.read())

    if len(existing) != len(values):
        return f'expected {len(values)} entries, found {len(existing)}'

    for index, (old, new) in enumerate(zip(existing, values)):
        if old != new:
            return f'index {index}: expected {new}, found {old}'

    return None


def make_parser():
    parser = argparse.ArgumentParser(description=__doc__)

    parser.add_argument('--qualifier', default='PROGMEM',
                        help='storage qualifier, empty to omit')
    parser.add_argument('--name', default='TIMER_TABLE',
                        help='name of the emitted array')
    parser.add_argument('--per-line', type=int, default=8, metavar='N',
                        help='values per line of output')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('--plot', action='store_true',
                        help='display the table after writing it')
    parser.add_argument('--check', metavar='FILE',
                        help='compare against an existing declaration '
                        'instead of writing one')

    return parser


def run(args, stdout=None):
    if stdout is None:
        stdout = sys.stdout

    values = table.generate_table()
    logging.debug(f'generated {len(values)} entries, ' +
                  f'range {values.min()} - {values.max()}')

    if args.check:
        difference = check_table(args.check, values)
        if difference:
            print(f'{args.check} differs: {difference}', file=sys.stderr)
            return 1
        logging.debug(f'{args.check} matches')
        return 0

    fmt = emit.Format(qualifier=args.qualifier,
                      name=args.name,
                      per_line=args.per_line)
    logging.debug(f'using qualifier {fmt.qualifier!r}')

    emit.write_table(stdout, values, fmt)
    stdout.flush()

    if args.plot:
        plot_table(values)

    return 0


def main():
    parser = make_parser()
    args = parser.parse_args()

    if args.per_line < 1:
        parser.error('--per-line must be at least 1')

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        result = run(args)
    except (OSError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    sys.exit(result)


if __name__ == '__main__':
    main()
