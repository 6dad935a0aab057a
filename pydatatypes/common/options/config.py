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
import sys
from enum import Enum

from pydatatypes.common.options.config_options import ConfigOptions

# Detected once; AUTO resolves against this and never re-reads the platform.
HOST_IS_WINDOWS = sys.platform.startswith("win")


class FilePathFlavor(Enum):
    AUTO = "auto"
    POSIX = "posix"
    WINDOWS = "windows"

    def is_windows(self) -> bool:
        if self == FilePathFlavor.AUTO:
            return HOST_IS_WINDOWS
        return self == FilePathFlavor.WINDOWS


class PathOptions:
    FILE_PATH_FLAVOR = ConfigOptions.key("file-path.flavor").enum_type(FilePathFlavor).default_value(
        FilePathFlavor.AUTO).with_description(
        "Grammar used for file paths: 'posix', 'windows' (drive letters, backslash separator, "
        "reserved characters) or 'auto' to follow the host operating system")
    PARSE_CACHE_SIZE = ConfigOptions.key("path.parse-cache.size").int_type().default_value(1024).with_description(
        "Maximum number of parsed paths kept by a PathParser, 0 disables the cache")
