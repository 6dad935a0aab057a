################################################################################
#  Licensed to the Apache Software Foundation (ASF) under one
#  or more contributor license agreements.  See the NOTICE file
#  distributed with this work for additional information
#  regarding copyright ownership.  The ASF licenses this file
#  to you under the Apache License, Version 2.0 (the
#  "License"); you may not use this file except in compliance
#  with the License.  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
# limitations under the License.
################################################################################
import re
from typing import Optional, Tuple, Union

from pydatatypes.common.options import Options, PathOptions
from pydatatypes.path.path_exception import PartRole, PathError


class FilePathGrammar:
    """
    Separator and character rules for file paths of one flavor.

    The posix flavor only forbids NUL and "/" inside a part. The windows flavor
    uses "\\" as separator (accepting "/" as an alias), forbids the characters
    reserved by Windows and recognizes a leading drive letter.
    """

    _POSIX_INVALID = re.compile(r'[\0/]')
    _WINDOWS_INVALID = re.compile(r'[\0<>:*?"|/\\]')
    _DRIVE = re.compile(r'^[a-zA-Z]$')
    _NOT_A_LETTER = re.compile(r'[^a-zA-Z]')

    def __init__(self, windows: bool):
        self.windows = windows
        self.separator = "\\" if windows else "/"
        self._invalid = self._WINDOWS_INVALID if windows else self._POSIX_INVALID

    @classmethod
    def from_options(cls, options: Optional[Union[Options, dict]] = None) -> "FilePathGrammar":
        flavor = Options.of(options).get(PathOptions.FILE_PATH_FLAVOR)
        return WINDOWS_GRAMMAR if flavor.is_windows() else POSIX_GRAMMAR

    def normalize_separators(self, text: str) -> str:
        return text.replace("/", self.separator) if self.windows else text

    def validate_part(self, part: str, role: PartRole) -> Optional[PathError]:
        match = self._invalid.search(part)
        if match is not None:
            return PathError.invalid_character(part, role, match.group(0))
        return None

    def split_drive(self, text: str) -> Union[Tuple[Optional[str], str], PathError]:
        """
        Splits "X:rest" into the upper-cased drive and the rest. Texts without a
        colon, and any text of the posix flavor, have no drive.
        """
        if not self.windows or ":" not in text:
            return None, text

        drive, rest = text.split(":", 1)
        if not self._DRIVE.match(drive):
            match = self._NOT_A_LETTER.search(drive)
            if match is not None:
                return PathError.invalid_character(drive, PartRole.DRIVE, match.group(0))
            return PathError.invalid_part(drive, PartRole.DRIVE)
        return drive.upper(), rest

    def __repr__(self) -> str:
        return "FilePathGrammar(windows={})".format(self.windows)


POSIX_GRAMMAR = FilePathGrammar(windows=False)
WINDOWS_GRAMMAR = FilePathGrammar(windows=True)
