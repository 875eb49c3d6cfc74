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

"""Bundle a C++ source file and the headers it includes into one file.

Quoted includes are resolved next to the including file, angle-bracket
includes under INCLUDE_PATH.  Every local file is inlined once; includes that
cannot be resolved locally (the standard library, other libraries) are kept
as #include lines at the top of the bundle.

Lines between '// BEGIN_PRESERVE_NEWLINES' and '// END_PRESERVE_NEWLINES'
are copied verbatim, everything else is compacted unless --no-format is given.

With neither --write, --clip nor --output the bundle goes to stdout.
"""

import argparse
import getpass
import os
import sys
import time
import typing as T

from cpp_bundle import __version__
from cpp_bundle.bundler import AUDIT, DROP, Bundler
from cpp_bundle.output import copy_to_clipboard, write_file
from cpp_bundle.resolver import (BundleError, Resolver, canonical_dir,
                                 canonical_file)

AUTHOR_ENV = 'CPP_BUNDLE_AUTHOR'


def default_author() -> str:
    author = os.environ.get(AUTHOR_ENV)
    if author:
        return author
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return 'unknown'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cpp-bundle', description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('input', help='source file to bundle')
    parser.add_argument('include_path',
                        help='search root for #include <...> directives')
    parser.add_argument('author', nargs='?',
                        help='author named in the trailer (default $%s, '
                             'then the login name)' % AUTHOR_ENV)
    parser.add_argument('-w', '--write', action='store_true',
                        help='overwrite the input file with the bundle')
    parser.add_argument('-c', '--clip', action='store_true',
                        help='copy the bundle to the clipboard')
    parser.add_argument('-o', '--output', metavar='FILE',
                        help='write the bundle to FILE')
    parser.add_argument('--no-format', action='store_true',
                        help='keep lines as they are instead of compacting')
    parser.add_argument('--prefix', action='append', default=[],
                        metavar='NAME',
                        help='only resolve <NAME/...> includes under '
                             'INCLUDE_PATH (repeatable)')
    parser.add_argument('--single-pass', action='store_true',
                        help='leave external #include lines behind as '
                             'comments where they first appear instead of '
                             'hoisting them')
    parser.add_argument('--audit', action='store_true',
                        help='leave inlined #include lines behind as comments')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='report inlined files and external references')
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + __version__)
    return parser


def run(args: argparse.Namespace) -> None:
    entry = canonical_file(args.input, 'input file')
    search_root = canonical_dir(args.include_path, 'include path')
    author = args.author or default_author()

    bundler = Bundler(entry, Resolver(search_root, args.prefix),
                      format_enabled=not args.no_format,
                      hoist_external=not args.single_pass,
                      include_style=AUDIT if args.audit else DROP,
                      verbose=args.verbose)
    text = bundler.bundle(author)

    if args.write:
        write_file(entry, text)
    if args.output:
        write_file(args.output, text)
    if args.clip:
        copy_to_clipboard(text)
    if not (args.write or args.output or args.clip):
        sys.stdout.write(text)


def main(argv: T.Optional[T.List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    start = time.time()
    try:
        run(args)
    except BundleError as err:
        print('ERROR: %s' % err, file=sys.stderr)
        return 1
    print('Elapsed: %.3fs' % (time.time() - start), file=sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
