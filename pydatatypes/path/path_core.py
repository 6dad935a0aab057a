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

"""
Variant independent path algebra.

A PathCore is the canonical form of a parsed path: an absolute flag, the number
of ".." parts a relative path climbs above its own starting point, the resolved
directory parts and an optional filename. Parsing, combining and rendering are
implemented here once; the file and url variants only contribute a separator,
a part validator and (for urls) a decoder/encoder pair.
"""

from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Sequence, Tuple, Union

from pydatatypes.path.path_exception import PartRole, PathError

CURRENT_DIRECTORY = "."
PARENT_DIRECTORY = ".."

PartValidator = Callable[[str, PartRole], Optional[PathError]]
PartCodec = Callable[[str], str]


@dataclass(frozen=True)
class PathCore:
    is_absolute: bool = False
    above_base: int = 0
    directory_parts: Tuple[str, ...] = ()
    filename: Optional[str] = None

    def __post_init__(self):
        if self.above_base < 0:
            raise ValueError("above_base must be >= 0")
        if self.is_absolute and self.above_base > 0:
            raise ValueError("An absolute path can not be above root level")

    def depth(self) -> int:
        return len(self.directory_parts) - self.above_base

    def visible_directory_parts(self) -> List[str]:
        """Directory parts with one leading ".." per level above base."""
        return [PARENT_DIRECTORY] * self.above_base + list(self.directory_parts)

    def has_parent_directory(self) -> bool:
        return not self.is_absolute or len(self.directory_parts) > 0

    def directory(self) -> "PathCore":
        return replace(self, filename=None)

    def parent_directory(self) -> Optional["PathCore"]:
        if not self.has_parent_directory():
            return None
        if not self.directory_parts:
            return replace(self, above_base=self.above_base + 1, filename=None)
        return replace(self, directory_parts=self.directory_parts[:-1], filename=None)

    def as_directory(self) -> "PathCore":
        if self.filename is None:
            return self
        return replace(self, directory_parts=self.directory_parts + (self.filename,), filename=None)

    def to_absolute(self) -> Union["PathCore", PathError]:
        if self.above_base > 0:
            return PathError.above_base()
        return replace(self, is_absolute=True)

    def to_relative(self) -> "PathCore":
        return replace(self, is_absolute=False)

    def with_filename(self, filename: str) -> "PathCore":
        return replace(self, filename=filename)

    def combine(self, other: "PathCore") -> Union["PathCore", PathError]:
        """
        Resolves other against this path, treating this path as a directory.

        An absolute other replaces this path. A relative other has its directory
        parts (including the leading ".." parts) folded onto this path's parts and
        contributes its filename, or lack of one.
        """
        if other.is_absolute:
            return other

        stack = _PartStack(self.is_absolute, self.above_base, list(self.directory_parts))
        for part in other.visible_directory_parts():
            if part == PARENT_DIRECTORY:
                error = stack.pop_parent()
                if error is not None:
                    return error
            else:
                stack.push(part)
        return stack.build(other.filename)

    def render(self, separator: str, encoder: Optional[PartCodec] = None) -> str:
        encode = encoder if encoder is not None else _identity
        result = (PARENT_DIRECTORY + separator) * self.above_base
        if self.is_absolute:
            result += separator
        if self.directory_parts:
            result += separator.join(encode(part) for part in self.directory_parts) + separator
        if self.filename is not None:
            result += encode(self.filename)
        return result


class _PartStack:
    """Mutable state of one parse or combine pass."""

    def __init__(self, is_absolute: bool, above_base: int = 0, parts: Optional[List[str]] = None):
        self.is_absolute = is_absolute
        self.above_base = above_base
        self.parts = parts if parts is not None else []

    def pop_parent(self) -> Optional[PathError]:
        if self.parts:
            self.parts.pop()
            return None
        if self.is_absolute:
            return PathError.root_overflow()
        self.above_base += 1
        return None

    def push(self, part: str):
        self.parts.append(part)

    def build(self, filename: Optional[str]) -> PathCore:
        return PathCore(self.is_absolute, self.above_base, tuple(self.parts), filename)


def tokenize(text: str, separator: str) -> Tuple[bool, List[str]]:
    """
    Splits text on separator. Returns whether the path is absolute together with
    the tokens following the root, where the last token is the filename candidate.
    """
    tokens = text.split(separator)
    if len(tokens) > 1 and tokens[0] == "":
        return True, tokens[1:]
    return False, tokens


def parse_tokens(is_absolute: bool,
                 tokens: Sequence[str],
                 validator: PartValidator,
                 decoder: Optional[PartCodec] = None) -> Union[PathCore, PathError]:
    decode = decoder if decoder is not None else _identity
    stack = _PartStack(is_absolute)
    filename = None
    last_index = len(tokens) - 1

    for index, token in enumerate(tokens):
        if token == "":
            continue

        part = token
        if token not in (CURRENT_DIRECTORY, PARENT_DIRECTORY):
            role = PartRole.FILENAME if index == last_index else PartRole.DIRECTORY
            error = validator(token, role)
            if error is not None:
                return error
            # An encoded dot segment ("%2e%2e") means the same as the plain one.
            part = decode(token)

        if part == CURRENT_DIRECTORY:
            continue

        if part == PARENT_DIRECTORY:
            error = stack.pop_parent()
            if error is not None:
                return error
            continue

        if index == last_index:
            filename = part
        else:
            stack.push(part)

    return stack.build(filename)


def parse(text: str,
          separator: str,
          validator: PartValidator,
          decoder: Optional[PartCodec] = None) -> Union[PathCore, PathError]:
    is_absolute, tokens = tokenize(text, separator)
    return parse_tokens(is_absolute, tokens, validator, decoder)


def _identity(part: str) -> str:
    return part
