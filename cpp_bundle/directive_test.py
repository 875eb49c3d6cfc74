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

from cpp_bundle import directive
from cpp_bundle.directive import Directive


class TestPragmaOnce(unittest.TestCase):
    def test_spacing_variants(self) -> None:
        for line in ['#pragma once', '  #  pragma   once  ', '#pragmaonce',
                     '\t#pragma\tonce', '#pra gma  on ce']:
            self.assertEqual(Directive(directive.PRAGMA_ONCE, None),
                             directive.parse(line), line)

    def test_other_pragmas_are_plain(self) -> None:
        self.assertEqual(directive.PLAIN,
                         directive.parse('#pragma GCC optimize("O3")').kind)
        self.assertEqual(directive.PLAIN,
                         directive.parse('#pragma once_more').kind)


class TestPreserveSentinels(unittest.TestCase):
    def test_exact_after_trim(self) -> None:
        self.assertEqual(directive.PRESERVE_BEGIN,
                         directive.parse('  // BEGIN_PRESERVE_NEWLINES ').kind)
        self.assertEqual(directive.PRESERVE_END,
                         directive.parse('// END_PRESERVE_NEWLINES').kind)

    def test_spelling_must_match(self) -> None:
        self.assertEqual(directive.PLAIN,
                         directive.parse('//BEGIN_PRESERVE_NEWLINES').kind)
        self.assertEqual(directive.PLAIN,
                         directive.parse('// END_PRESERVE_NEWLINES x').kind)


class TestIncludes(unittest.TestCase):
    def test_local(self) -> None:
        for line in ['#include "x.h"', '# include "x.h"', '#include"x.h"',
                     '  #  include   "x.h"  ']:
            self.assertEqual(Directive(directive.LOCAL, 'x.h'),
                             directive.parse(line), line)

    def test_search_path(self) -> None:
        self.assertEqual(Directive(directive.SEARCH_PATH, 'vector'),
                         directive.parse('#include <vector>'))
        self.assertEqual(Directive(directive.SEARCH_PATH, 'user/graph.hpp'),
                         directive.parse('#include<user/graph.hpp>'))

    def test_spec_keeps_inner_spaces(self) -> None:
        self.assertEqual(Directive(directive.LOCAL, 'my dir/a.h'),
                         directive.parse('#include "my dir/a.h"'))

    def test_trailing_comment_ignored(self) -> None:
        self.assertEqual(Directive(directive.LOCAL, 'a.h'),
                         directive.parse('#include "a.h" // for helper()'))

    def test_missing_closing_delimiter(self) -> None:
        self.assertEqual(Directive(directive.LOCAL, 'a.h'),
                         directive.parse('#include "a.h'))
        self.assertEqual(Directive(directive.SEARCH_PATH, 'vector'),
                         directive.parse('#include <vector'))

    def test_is_include(self) -> None:
        self.assertTrue(directive.is_include(directive.parse('#include <a>')))
        self.assertTrue(directive.is_include(directive.parse('#include "a"')))
        self.assertFalse(directive.is_include(directive.parse('#pragma once')))


class TestPlain(unittest.TestCase):
    def test_plain_keeps_line(self) -> None:
        line = '  int x = 1;  '
        self.assertEqual(Directive(directive.PLAIN, line),
                         directive.parse(line))

    def test_other_preprocessor_lines(self) -> None:
        self.assertEqual(directive.PLAIN, directive.parse('#define N 10').kind)
        self.assertEqual(directive.PLAIN,
                         directive.parse('// #include "a.h"').kind)


if __name__ == '__main__':
    unittest.main()
