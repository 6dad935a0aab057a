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
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PartRole(Enum):
    DIRECTORY = "directory"
    FILENAME = "filename"
    DRIVE = "drive"


class PathErrorKind(Enum):
    GRAMMAR = "grammar"
    ROOT_OVERFLOW = "root-overflow"
    ABOVE_BASE = "above-base"
    DRIVE = "drive"


@dataclass(frozen=True)
class PathError:
    """
    Structured reason why a path could not be parsed, combined or derived.

    Grammar errors name the offending segment, its role and the first invalid
    character; the other kinds only carry a message.
    """

    kind: PathErrorKind
    message: str
    segment: Optional[str] = None
    role: Optional[PartRole] = None
    character: Optional[str] = None

    @classmethod
    def invalid_character(cls, segment: str, role: PartRole, character: str) -> "PathError":
        return cls(
            PathErrorKind.GRAMMAR,
            '{} "{}" contains invalid character "{}".'.format(_ROLE_LABELS[role], segment, character),
            segment=segment,
            role=role,
            character=character,
        )

    @classmethod
    def invalid_part(cls, segment: str, role: PartRole) -> "PathError":
        return cls(
            PathErrorKind.GRAMMAR,
            '{} "{}" is invalid.'.format(_ROLE_LABELS[role], segment),
            segment=segment,
            role=role,
        )

    @classmethod
    def root_overflow(cls) -> "PathError":
        return cls(PathErrorKind.ROOT_OVERFLOW, "Absolute path is above root level.")

    @classmethod
    def above_base(cls) -> "PathError":
        return cls(PathErrorKind.ABOVE_BASE, "Relative path is above base level.")

    @classmethod
    def drive_without_root(cls, drive: str, remainder: str) -> "PathError":
        return cls(
            PathErrorKind.DRIVE,
            'Path can not contain drive "{}" and non-absolute path "{}".'.format(drive, remainder),
            segment=drive,
            role=PartRole.DRIVE,
        )


_ROLE_LABELS = {
    PartRole.DIRECTORY: "Part of directory",
    PartRole.FILENAME: "Filename",
    PartRole.DRIVE: "Drive",
}


# Exception classes
class PathException(Exception):
    """Base path exception"""

    def __init__(self, message: str, error: Optional[PathError] = None):
        self.error = error
        super().__init__(message)


class PathInvalidArgumentException(PathException, ValueError):
    """Path text or path part rejected by the grammar"""


class PathLogicException(PathException):
    """Path operation not defined for the given path values"""


class FilePathInvalidArgumentException(PathInvalidArgumentException):
    """File path invalid argument exception"""


class FilePathLogicException(PathLogicException):
    """File path logic exception"""


class UrlPathInvalidArgumentException(PathInvalidArgumentException):
    """Url path invalid argument exception"""


class UrlPathLogicException(PathLogicException):
    """Url path logic exception"""
