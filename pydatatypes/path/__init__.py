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

from pydatatypes.path.path_exception import (FilePathInvalidArgumentException,
                                             FilePathLogicException, PartRole,
                                             PathError, PathErrorKind,
                                             PathException,
                                             PathInvalidArgumentException,
                                             PathLogicException,
                                             UrlPathInvalidArgumentException,
                                             UrlPathLogicException)
from pydatatypes.path.path_core import PathCore
from pydatatypes.path.path import Path, combine
from pydatatypes.path.file_path import FilePath
from pydatatypes.path.url_path import UrlPath
from pydatatypes.path.path_parser import PathParser

__all__ = [
    'Path',
    'PathCore',
    'FilePath',
    'UrlPath',
    'PathParser',
    'combine',
    'PartRole',
    'PathError',
    'PathErrorKind',
    'PathException',
    'PathInvalidArgumentException',
    'PathLogicException',
    'FilePathInvalidArgumentException',
    'FilePathLogicException',
    'UrlPathInvalidArgumentException',
    'UrlPathLogicException',
]
