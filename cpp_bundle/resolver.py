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

"""Maps include directives to canonical file paths."""

import os
import typing as T

from cpp_bundle import directive as directives


class BundleError(Exception):
    """A condition that aborts the run before any output is produced."""


def canonical(path: str) -> str:
    return os.path.realpath(path)


def canonical_file(path: str, description: str) -> str:
    if not os.path.isfile(path):
        raise BundleError('%s %s does not exist or is not a file' %
                          (description, path))
    return canonical(path)


def canonical_dir(path: str, description: str) -> str:
    if not os.path.isdir(path):
        raise BundleError('%s %s does not exist or is not a directory' %
                          (description, path))
    return canonical(path)


class PathTable(object):
    """Hands out a small integer id per distinct canonical path."""
    def __init__(self):
        self._ids: T.Dict[str, int] = {}
        self._paths: T.List[str] = []

    def intern(self, path: str) -> int:
        path_id = self._ids.get(path)
        if path_id is None:
            path_id = len(self._paths)
            self._ids[path] = path_id
            self._paths.append(path)
        return path_id

    def path(self, path_id: int) -> str:
        return self._paths[path_id]

    def __len__(self) -> int:
        return len(self._paths)


class Resolver(object):
    """Resolves #include directives.

    Quoted includes are looked up next to the including file and always
    resolve; whether the file exists is only found out when it is opened.
    Angle-bracket includes resolve only if the file exists under the search
    root.  When |prefixes| is given, angle-bracket includes must also start
    with one of those namespace directories (e.g. 'user' matches
    <user/graph.hpp>); everything else is left to the compiler.
    """
    def __init__(self, search_root: str,
                 prefixes: T.Optional[T.Iterable[str]] = None):
        self.search_root = canonical(search_root)
        self.prefixes = tuple(p.strip('/') + '/' for p in prefixes or ()
                              if p.strip('/'))

    def resolve(self, directive: directives.Directive,
                including_path: str) -> T.Optional[str]:
        if directive.kind == directives.LOCAL:
            return canonical(os.path.join(os.path.dirname(including_path),
                                          directive.spec))

        if directive.kind == directives.SEARCH_PATH:
            if self.prefixes and not directive.spec.startswith(self.prefixes):
                return None
            path = os.path.join(self.search_root, directive.spec)
            if os.path.exists(path):
                return canonical(path)

        return None
