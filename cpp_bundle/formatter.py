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

"""Line formatting for the bundle body.

In normal mode statement text is compacted: whitespace runs collapse to a
single space, // comments are dropped and consecutive lines are joined onto
one physical line.  Preprocessor lines always keep a line of their own.
"""

import re
import typing as T

WHITESPACE_RE = re.compile(r'\s+')
LINE_COMMENT = '//'


def compact(text: str) -> str:
    """Collapses whitespace runs and strips a trailing // comment."""
    text = WHITESPACE_RE.sub(' ', text.strip())
    comment = text.find(LINE_COMMENT)
    if comment >= 0:
        text = text[:comment].rstrip()
    return text


def format_line(
    line: str, ends_with_newline: bool, preserve: bool, enabled: bool = True
) -> T.Tuple[str, bool]:
    """Formats one retained line.

    Args:
      line: the source line, without its line terminator.
      ends_with_newline: whether the output so far ends with a newline.
      preserve: whether preserve mode is active.
      enabled: False disables formatting entirely.

    Returns:
      A (fragment, ends_with_newline) pair.  A fragment returned with False
      carries no newline and is meant to be joined to the next compacted
      fragment with a single space.
    """
    if not enabled:
        return line + '\n', True

    if preserve:
        if ends_with_newline:
            return line + '\n', True
        return '\n' + line + '\n', True

    trimmed = line.strip()
    if not trimmed:
        return '', ends_with_newline

    if trimmed.startswith('#'):
        if ends_with_newline:
            return trimmed + '\n', True
        return '\n' + trimmed + '\n', True

    return compact(trimmed), False
