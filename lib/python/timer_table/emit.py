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

"""Render a register table as a C array declaration."""

from dataclasses import dataclass
import io
import re


@dataclass(frozen=True)
class Format:
    """Controls how the table is rendered.  The defaults produce the
    declaration used by the AVR firmware, where PROGMEM places the
    table in flash rather than RAM.  An empty qualifier omits it
    entirely."""

    qualifier: str = 'PROGMEM'
    ctype: str = 'uint16_t'
    name: str = 'TIMER_TABLE'
    per_line: int = 8

    def __post_init__(self):
        if self.per_line < 1:
            raise ValueError(f'per_line must be at least 1, not {self.per_line}')

    def declaration(self, size):
        words = ['const']
        if self.qualifier:
            words.append(self.qualifier)
        words.append(self.ctype)
        words.append(f'{self.name}[{size}]')
        return ' '.join(words)


def write_table(stream, table, fmt=Format()):
    '''Write the declaration for 'table' to 'stream'.

    Any error from the stream propagates to the caller.'''
    stream.write(fmt.declaration(len(table)) + '\n')
    stream.write('{')
    for index, value in enumerate(table):
        if index % fmt.per_line == 0:
            stream.write('\n\t')
        stream.write(f'{int(value)}, ')
    stream.write('};\n')


def format_table(table, fmt=Format()):
    result = io.StringIO()
    write_table(result, table, fmt)
    return result.getvalue()


_BODY_RE = re.compile(r'\{(.*)\}', re.DOTALL)


def parse_table(text):
    '''Return the list of integers between the braces of a generated
    declaration.'''
    match = _BODY_RE.search(text)
    if match is None:
        raise ValueError('no array initializer found')

    return [int(x) for x in match.group(1).split(',') if x.strip()]
