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

"""Generator for the ADC to timer capture-control register lookup
table embedded in the firmware."""

__all__ = ['Format', 'format_table', 'write_table', 'parse_table',
           'generate_table', 'iter_table', 'register_value', 'frequency',
           'volts', 'TABLE_SIZE']
from timer_table.emit import (Format, format_table, write_table, parse_table)
from timer_table.table import (
    generate_table, iter_table, register_value, frequency, volts, TABLE_SIZE)


VERSION = "0.1.0"
