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
from typing import Optional, Union

from pydatatypes.common.options import Options
from pydatatypes.path import path_core
from pydatatypes.path.file_path_grammar import FilePathGrammar
from pydatatypes.path.path import Path
from pydatatypes.path.path_core import PathCore
from pydatatypes.path.path_exception import (FilePathInvalidArgumentException,
                                             FilePathLogicException,
                                             PartRole, PathError)


class FilePath(Path):
    """
    A file system path, e.g. "/usr/bin/python" or, with the windows flavor,
    "C:\\Windows\\notepad.exe".

    The flavor is taken from the "file-path.flavor" option when parsing and kept
    by the path, so rendering and with_filename() follow the grammar the path
    was parsed with. A drive is only ever present on absolute paths.
    """

    _LABEL = "File path"
    _INVALID_ARGUMENT_EXCEPTION = FilePathInvalidArgumentException
    _LOGIC_EXCEPTION = FilePathLogicException

    def __init__(self, core: PathCore, drive: Optional[str], grammar: FilePathGrammar):
        super().__init__(core)
        self._drive = drive if core.is_absolute else None
        self._grammar = grammar

    @classmethod
    def _do_parse(cls, text: str, options: Optional[Union[Options, dict]]) -> Union["FilePath", PathError]:
        grammar = FilePathGrammar.from_options(options)

        split = grammar.split_drive(text)
        if isinstance(split, PathError):
            return split
        drive, rest = split

        core = path_core.parse(grammar.normalize_separators(rest), grammar.separator, grammar.validate_part)
        if isinstance(core, PathError):
            return core
        if drive is not None and not core.is_absolute:
            return PathError.drive_without_root(drive, rest)

        return cls(core, drive, grammar)

    def drive(self) -> Optional[str]:
        return self._drive

    def separator(self) -> str:
        return self._grammar.separator

    def with_file_path(self, other: "FilePath") -> "FilePath":
        return self.combine(other)

    def combine(self, other: "FilePath") -> "FilePath":
        """
        Resolves other against this path's directory, see Path.combine. Both paths
        must have been parsed with the same flavor.
        """
        if isinstance(other, FilePath) and other._grammar.windows != self._grammar.windows:
            raise TypeError("Can not combine file paths of different flavors: {!r} with {!r}".format(
                self._grammar, other._grammar))
        return super().combine(other)

    def _with_core(self, core: PathCore) -> "FilePath":
        return FilePath(core, self._drive, self._grammar)

    def _combined_with(self, other: "FilePath", core: PathCore) -> "FilePath":
        return FilePath(core, other._drive or self._drive, self._grammar)

    def _validate_part(self, part: str, role: PartRole) -> Optional[PathError]:
        return self._grammar.validate_part(part, role)

    def _identity(self) -> tuple:
        return (self._drive,) + super()._identity()

    def to_string(self) -> str:
        rendered = self._core.render(self._grammar.separator)
        return self._drive + ":" + rendered if self._drive is not None else rendered
