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

"""Computes the table which maps ADC readings to timer capture-control
register values.

Each ADC count is mapped linearly onto a 0-5V range, the voltage is
converted to a frequency with a 1V/octave exponential model, and the
frequency is converted to a timer count by dividing it into the timer
clock.
"""

import math
import numpy

TABLE_SIZE = 4096
FULL_SCALE_VOLTS = 5
BASE_FREQUENCY = 65.406391325
TIMER_CLOCK = 500000

UINT16_MASK = 0xffff


def volts(index):
    return (FULL_SCALE_VOLTS * index) / float(TABLE_SIZE)


def frequency(index):
    # math.pow is the libm pow, so this matches the firmware host
    # build bit for bit.
    return BASE_FREQUENCY * math.pow(2.0, volts(index))


def register_value(index):
    '''Return the 16 bit register value for a single ADC reading.

    The result is truncated toward zero and then wrapped to 16 bits,
    identically to a C cast to uint16_t.  It is never rounded.'''
    return int(TIMER_CLOCK / frequency(index)) & UINT16_MASK


def iter_table():
    for index in range(TABLE_SIZE):
        yield register_value(index)


def generate_table():
    '''Return the complete table as a read-only numpy uint16 array.'''
    result = numpy.fromiter(iter_table(), dtype=numpy.uint16,
                            count=TABLE_SIZE)
    result.flags.writeable = False
    return result
