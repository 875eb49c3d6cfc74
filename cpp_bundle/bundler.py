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

"""Inlines local #include directives into a single translation unit.

Each local file is emitted at most once, the first time it is reached in a
depth-first walk from the entry file, so include cycles simply end.  Includes
that do not resolve to a local file (system headers, unknown namespaces) are
external references: by default they are collected in a first pass and
hoisted to the top of the bundle.
"""

import datetime
import sys
import typing as T

from cpp_bundle import directive as directives
from cpp_bundle.formatter import format_line
from cpp_bundle.resolver import BundleError, PathTable, Resolver, canonical

# What happens to an #include line whose target gets inlined.
DROP = 'drop'
AUDIT = 'audit'
INCLUDE_STYLES = (DROP, AUDIT)

PROVENANCE = '// converted by https://github.com/kk2a/cpp-bundle'
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


def read_lines(path: str) -> T.List[str]:
    """Returns the lines of |path| without line terminators.

    A file that cannot be opened has no lines.  Content that is not UTF-8
    aborts the run.
    """
    try:
        with open(path, encoding='utf-8') as f:
            return [line.rstrip('\n') for line in f]
    except UnicodeDecodeError as err:
        raise BundleError('%s: not valid UTF-8 (%s)' %
                          (path, err.reason)) from err
    except OSError:
        return []


def assemble(body: str, author: str,
             external: T.Optional[T.Iterable[str]] = None,
             now: T.Optional[datetime.datetime] = None) -> str:
    """Builds the final document around the bundled |body|.

    |external| is the hoisted list of external references; None means
    nothing was hoisted and no separator line is written.
    """
    parts = []
    if external is not None:
        parts.extend(ref + '\n' for ref in external)
        parts.append('\n')
    parts.append(body)
    if body and not body.endswith('\n'):
        parts.append('\n')

    if now is None:
        now = datetime.datetime.now()
    parts.append('// Author: %s\n' % author)
    parts.append(PROVENANCE + '\n')
    parts.append('// %s\n' % now.strftime(TIMESTAMP_FORMAT))
    return ''.join(parts)


class Bundler(object):
    def __init__(self, entry: str, resolver: Resolver,
                 format_enabled: bool = True,
                 hoist_external: bool = True,
                 include_style: str = DROP,
                 verbose: bool = False):
        assert include_style in INCLUDE_STYLES, \
            'unknown include style %r' % include_style
        self.entry = canonical(entry)
        self.resolver = resolver
        self.format_enabled = format_enabled
        self.hoist_external = hoist_external
        self.include_style = include_style
        self.verbose = verbose

        self.paths = PathTable()
        self.external: T.Dict[str, None] = {}
        self._reset()

    def _reset(self):
        self.visited: T.Set[int] = set()
        self.out: T.List[str] = []
        self.ends_with_newline = True
        self.preserve = False

    def _log(self, message):
        if self.verbose:
            print(message, file=sys.stderr)

    def _enter(self, path: str) -> bool:
        """Marks |path| visited; False if it already was."""
        path_id = self.paths.intern(path)
        if path_id in self.visited:
            return False
        self.visited.add(path_id)
        return True

    def _add_external(self, line: str) -> bool:
        ref = line.strip()
        if ref in self.external:
            return False
        self.external[ref] = None
        self._log('external: %s' % ref)
        return True

    def collect_external(self) -> T.List[str]:
        """Walks the include graph and returns the external references only."""
        self.external = {}
        self._reset()
        self._enter(self.entry)
        self._walk(self._collect)
        return list(self.external)

    def _walk(self, visit):
        try:
            visit(self.entry)
        except RecursionError as err:
            raise BundleError('include chain from %s nests deeper than %d '
                              'files' % (self.entry, sys.getrecursionlimit())
                              ) from err

    def _collect(self, path: str):
        for line in read_lines(path):
            directive = directives.parse(line)
            if not directives.is_include(directive):
                continue
            target = self.resolver.resolve(directive, path)
            if target is None:
                self._add_external(line)
            elif self._enter(target):
                self._collect(target)

    def expand(self) -> str:
        """Returns the bundled body, without hoisted references or trailer."""
        if self.hoist_external:
            self.collect_external()
        else:
            self.external = {}
        self._reset()
        self._enter(self.entry)
        self._walk(self._add_src)
        return ''.join(self.out)

    def bundle(self, author: str,
               now: T.Optional[datetime.datetime] = None) -> str:
        body = self.expand()
        external = list(self.external) if self.hoist_external else None
        return assemble(body, author, external, now)

    def _add_src(self, path: str):
        self._log('inlining %s' % path)
        for line in read_lines(path):
            directive = directives.parse(line)
            kind = directive.kind
            if kind == directives.PRAGMA_ONCE:
                continue
            if kind == directives.PRESERVE_BEGIN:
                self.preserve = True
                continue
            if kind == directives.PRESERVE_END:
                self.preserve = False
                continue
            if kind == directives.PLAIN:
                self._emit(line)
                continue

            target = self.resolver.resolve(directive, path)
            if target is not None:
                if self.include_style == AUDIT:
                    self._emit_own_line('// ' + line.strip())
                if self._enter(target):
                    # An inlined body never shares a line with its includer.
                    self._break_line()
                    self._add_src(target)
                    self._break_line()
            elif self._add_external(line) and not self.hoist_external:
                self._emit_own_line('// ' + line.strip())

    def _emit(self, line: str):
        fragment, ends_with_newline = format_line(
            line, self.ends_with_newline, self.preserve, self.format_enabled)
        if not fragment:
            return
        if not ends_with_newline and not self.ends_with_newline:
            fragment = ' ' + fragment
        self.out.append(fragment)
        self.ends_with_newline = ends_with_newline

    def _emit_own_line(self, text: str):
        self._break_line()
        self.out.append(text + '\n')
        self.ends_with_newline = True

    def _break_line(self):
        if not self.ends_with_newline:
            self.out.append('\n')
            self.ends_with_newline = True
