# Copyright 2024 Google Inc. All Rights Reserved.
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

"""Classifies single source lines.

Only the lines the bundler cares about are recognized: the two forms of
#include, #pragma once and the preserve-mode sentinel comments.  Everything
else is plain text.
"""

import re
from collections import namedtuple

LOCAL = 'local'
SEARCH_PATH = 'search_path'
PRAGMA_ONCE = 'pragma_once'
PRESERVE_BEGIN = 'preserve_begin'
PRESERVE_END = 'preserve_end'
PLAIN = 'plain'

INCLUDE_KINDS = (LOCAL, SEARCH_PATH)

BEGIN_PRESERVE = '// BEGIN_PRESERVE_NEWLINES'
END_PRESERVE = '// END_PRESERVE_NEWLINES'
PRAGMA_ONCE_TEXT = '#pragmaonce'

# |spec| is the text between the include delimiters, or the line itself for
# PLAIN.
Directive = namedtuple('Directive', ['kind', 'spec'])

LOCAL_INCLUDE_RE = re.compile(r'^\s*#\s*include\s*"([^"]*)"?')
SEARCH_INCLUDE_RE = re.compile(r'^\s*#\s*include\s*<([^>]*)>?')


def parse(line):
    """Returns the Directive for |line|."""
    # Whitespace anywhere is insignificant: "#pra gma once" still counts.
    if ''.join(line.split()) == PRAGMA_ONCE_TEXT:
        return Directive(PRAGMA_ONCE, None)

    stripped = line.strip()
    if stripped == BEGIN_PRESERVE:
        return Directive(PRESERVE_BEGIN, None)
    if stripped == END_PRESERVE:
        return Directive(PRESERVE_END, None)

    match = LOCAL_INCLUDE_RE.match(line)
    if match:
        return Directive(LOCAL, match.group(1))
    match = SEARCH_INCLUDE_RE.match(line)
    if match:
        return Directive(SEARCH_PATH, match.group(1))

    return Directive(PLAIN, line)


def is_include(directive):
    return directive.kind in INCLUDE_KINDS
