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
from pydatatypes.path import path_core, url_path_grammar
from pydatatypes.path.path import Path
from pydatatypes.path.path_core import PathCore
from pydatatypes.path.path_exception import (PartRole, PathError,
                                             UrlPathInvalidArgumentException,
                                             UrlPathLogicException)


class UrlPath(Path):
    """
    The path component of a url, e.g. "/docs/api/index.html".

    Parts are percent-decoded when parsed and percent-encoded when rendered, so
    UrlPath.parse("/a%20b/").directory_parts() == ["a b"] and the path renders
    back to "/a%20b/".
    """

    _LABEL = "Url path"
    _INVALID_ARGUMENT_EXCEPTION = UrlPathInvalidArgumentException
    _LOGIC_EXCEPTION = UrlPathLogicException

    @classmethod
    def _do_parse(cls, text: str, options: Optional[Union[Options, dict]]) -> Union["UrlPath", PathError]:
        core = path_core.parse(text, url_path_grammar.SEPARATOR,
                               url_path_grammar.validate_part, url_path_grammar.decode)
        if isinstance(core, PathError):
            return core
        return cls(core)

    def with_url_path(self, other: "UrlPath") -> "UrlPath":
        return self.combine(other)

    def _with_core(self, core: PathCore) -> "UrlPath":
        return UrlPath(core)

    def _validate_part(self, part: str, role: PartRole) -> Optional[PathError]:
        return url_path_grammar.validate_part(part, role)

    def to_string(self) -> str:
        return self._core.render(url_path_grammar.SEPARATOR, url_path_grammar.encode)
