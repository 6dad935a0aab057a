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
from typing import Optional
from urllib.parse import quote, unquote

from pydatatypes.path.path_exception import PartRole, PathError

SEPARATOR = "/"

# RFC 3986 pchar: unreserved, sub-delims, ":" and "@", plus "%" for escapes and
# the brackets tolerated by most user agents.
_INVALID_CHARACTER = re.compile(r"[^0-9a-zA-Z._~!$&'()*+,;=:@\[\]%-]")


def validate_part(part: str, role: PartRole) -> Optional[PathError]:
    match = _INVALID_CHARACTER.search(part)
    if match is not None:
        return PathError.invalid_character(part, role, match.group(0))
    return None


def decode(part: str) -> str:
    # surrogateescape keeps bytes that are not UTF-8 so encode() restores them.
    return unquote(part, errors="surrogateescape")


def encode(part: str) -> str:
    """Escapes everything but the unreserved characters, using upper-case hex."""
    return quote(part, safe="", errors="surrogateescape")
