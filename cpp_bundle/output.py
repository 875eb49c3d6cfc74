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

"""Destinations for a finished bundle."""

import pyperclip

from cpp_bundle.resolver import BundleError


def write_file(path: str, text: str) -> None:
    try:
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(text)
    except OSError as err:
        raise BundleError('cannot write %s: %s' % (path, err.strerror)) from err


def copy_to_clipboard(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as err:
        raise BundleError('cannot copy to clipboard: %s' % err) from err
