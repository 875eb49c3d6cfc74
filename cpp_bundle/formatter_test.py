#!/usr/bin/env python3

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

import unittest

from cpp_bundle.formatter import compact, format_line


class TestNormalMode(unittest.TestCase):
    def test_collapse_and_strip_comment(self) -> None:
        self.assertEqual(('int x = 1;', False),
                         format_line('int   x   =   1; // comment', True, False))

    def test_blank_line_is_skipped(self) -> None:
        self.assertEqual(('', True), format_line('   \t', True, False))
        self.assertEqual(('', False), format_line('', False, False))

    def test_comment_only_line_is_empty(self) -> None:
        self.assertEqual(('', False), format_line('  // note', True, False))

    def test_preprocessor_line_gets_own_line(self) -> None:
        self.assertEqual(('#define N 10\n', True),
                         format_line('  #define N 10  ', True, False))
        self.assertEqual(('\n#define N 10\n', True),
                         format_line('#define N 10', False, False))

    def test_idempotent(self) -> None:
        once, _ = format_line('  for (int i = 0;   i < n;\ti++) { // loop',
                              True, False)
        self.assertEqual('for (int i = 0; i < n; i++) {', once)
        self.assertEqual((once, False), format_line(once, True, False))
        self.assertEqual(once, compact(once))


class TestPreserveMode(unittest.TestCase):
    def test_verbatim(self) -> None:
        self.assertEqual(('  a   b // c\n', True),
                         format_line('  a   b // c', True, True))

    def test_blank_lines_kept(self) -> None:
        self.assertEqual(('\n', True), format_line('', True, True))

    def test_breaks_compacted_line(self) -> None:
        self.assertEqual(('\n  x\n', True), format_line('  x', False, True))


class TestDisabled(unittest.TestCase):
    def test_pass_through(self) -> None:
        self.assertEqual(('  int  a; // c\n', True),
                         format_line('  int  a; // c', False, False,
                                     enabled=False))
        self.assertEqual(('\n', True), format_line('', True, False,
                                                   enabled=False))


if __name__ == '__main__':
    unittest.main()
