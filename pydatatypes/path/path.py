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
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Type, TypeVar, Union

from pydatatypes.common.options import Options
from pydatatypes.path.path_core import CURRENT_DIRECTORY, PARENT_DIRECTORY, PathCore
from pydatatypes.path.path_exception import (PartRole, PathError,
                                             PathInvalidArgumentException,
                                             PathLogicException)

logger = logging.getLogger(__name__)

P = TypeVar("P", bound="Path")


class Path(ABC):
    """
    Immutable, validated path.

    A path is either absolute or relative and denotes either a directory (no
    filename) or a file. Relative paths may climb above their own starting point,
    in which case directory_parts() starts with the corresponding number of "..".
    Subclasses supply the grammar: how text is split, validated, decoded and
    rendered.
    """

    _LABEL = "Path"
    _INVALID_ARGUMENT_EXCEPTION: Type[PathInvalidArgumentException] = PathInvalidArgumentException
    _LOGIC_EXCEPTION: Type[PathLogicException] = PathLogicException

    def __init__(self, core: PathCore):
        self._core = core

    @classmethod
    def parse(cls: Type[P], text: str, options: Optional[Union[Options, dict]] = None) -> P:
        return cls.from_parse_result(text, cls.parse_result(text, options))

    @classmethod
    def parse_as_directory(cls: Type[P], text: str, options: Optional[Union[Options, dict]] = None) -> P:
        """Parses text, treating a trailing filename as the last directory part."""
        return cls.parse(text, options).as_directory()

    @classmethod
    def try_parse(cls: Type[P], text: str, options: Optional[Union[Options, dict]] = None) -> Optional[P]:
        return cls.try_from_parse_result(text, cls.parse_result(text, options))

    @classmethod
    def try_parse_as_directory(cls: Type[P], text: str,
                               options: Optional[Union[Options, dict]] = None) -> Optional[P]:
        result = cls.try_parse(text, options)
        return result.as_directory() if result is not None else None

    @classmethod
    def parse_result(cls: Type[P], text: str,
                     options: Optional[Union[Options, dict]] = None) -> Union[P, PathError]:
        """Parses text without raising: returns the path, or the reason text is not one."""
        return cls._do_parse(text, options)

    @classmethod
    def from_parse_result(cls: Type[P], text: str, result: Union[P, PathError]) -> P:
        """
        Returns the parsed path, or raises the variant's invalid argument
        exception for a rejected text.
        """
        if isinstance(result, PathError):
            raise cls._INVALID_ARGUMENT_EXCEPTION(
                '{} "{}" is invalid: {}'.format(cls._LABEL, text, result.message), result)
        return result

    @classmethod
    def try_from_parse_result(cls: Type[P], text: str, result: Union[P, PathError]) -> Optional[P]:
        if isinstance(result, PathError):
            logger.debug("Rejected %s %r: %s", cls._LABEL.lower(), text, result.message)
            return None
        return result

    @classmethod
    def is_valid(cls, text: str, options: Optional[Union[Options, dict]] = None) -> bool:
        return cls.try_parse(text, options) is not None

    @classmethod
    @abstractmethod
    def _do_parse(cls: Type[P], text: str, options: Optional[Union[Options, dict]]) -> Union[P, PathError]:
        """Parses text into a path, or returns the reason it is not one."""

    @abstractmethod
    def _with_core(self: P, core: PathCore) -> P:
        """Returns a path of the same variant holding core."""

    @abstractmethod
    def _validate_part(self, part: str, role: PartRole) -> Optional[PathError]:
        pass

    @abstractmethod
    def to_string(self) -> str:
        pass

    def is_absolute(self) -> bool:
        return self._core.is_absolute

    def is_relative(self) -> bool:
        return not self._core.is_absolute

    def is_file(self) -> bool:
        return self._core.filename is not None

    def is_directory(self) -> bool:
        return self._core.filename is None

    def depth(self) -> int:
        return self._core.depth()

    def directory_parts(self) -> List[str]:
        return self._core.visible_directory_parts()

    def filename(self) -> Optional[str]:
        return self._core.filename

    def has_parent_directory(self) -> bool:
        return self._core.has_parent_directory()

    def directory(self: P) -> P:
        return self._with_core(self._core.directory())

    def parent_directory(self: P) -> Optional[P]:
        """
        Returns the directory containing this path's directory, or None for an
        absolute root. The parent of a relative path with no directory parts
        climbs one more level above base.
        """
        parent = self._core.parent_directory()
        return self._with_core(parent) if parent is not None else None

    def to_absolute(self: P) -> P:
        result = self._core.to_absolute()
        if isinstance(result, PathError):
            raise self._LOGIC_EXCEPTION(
                '{} "{}" can not be made absolute: {}'.format(self._LABEL, self.to_string(), result.message),
                result)
        return self._with_core(result)

    def to_relative(self: P) -> P:
        return self._with_core(self._core.to_relative())

    def with_filename(self: P, filename: str) -> P:
        if filename in ("", CURRENT_DIRECTORY, PARENT_DIRECTORY):
            error = PathError.invalid_part(filename, PartRole.FILENAME)
        else:
            error = self._validate_part(filename, PartRole.FILENAME)
        if error is not None:
            raise self._INVALID_ARGUMENT_EXCEPTION(error.message, error)
        return self._with_core(self._core.with_filename(filename))

    def combine(self: P, other: P) -> P:
        """
        Resolves other against this path's directory. An absolute other replaces
        this path; a relative other is appended, its ".." parts consuming this
        path's directory parts.

        Raises:
            PathLogicException: If the result would climb above the root of an
                absolute path.
        """
        if not isinstance(other, type(self)):
            raise TypeError("Can not combine {} with {}".format(type(self).__name__, type(other).__name__))
        result = self._core.combine(other._core)
        if isinstance(result, PathError):
            raise self._LOGIC_EXCEPTION(
                '{} "{}" can not be combined with {} "{}": {}'.format(
                    self._LABEL, self.to_string(), self._LABEL.lower(), other.to_string(), result.message),
                result)
        return self._combined_with(other, result)

    def _combined_with(self: P, other: P, core: PathCore) -> P:
        return self._with_core(core)

    def as_directory(self: P) -> P:
        """Returns this path with its filename, if any, as the last directory part."""
        return self._with_core(self._core.as_directory())

    def _identity(self) -> tuple:
        return self._core.is_absolute, tuple(self.directory_parts()), self._core.filename

    def equals(self, other: "Path") -> bool:
        """Note: file path flavor is not compared, "/a/" (posix) equals "\\a\\" (windows)."""
        return self == other

    def __truediv__(self: P, other: P) -> P:
        return self.combine(other)

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return False
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._identity())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return "{}({!r})".format(type(self).__name__, self.to_string())


def combine(base: P, addition: P) -> P:
    return base.combine(addition)
