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
from typing import Optional, Tuple, Type, Union

from cachetools import LRUCache
from readerwriterlock import rwlock

from pydatatypes.common.options import Options, PathOptions
from pydatatypes.path.file_path import FilePath
from pydatatypes.path.path import Path
from pydatatypes.path.path_exception import PathError
from pydatatypes.path.url_path import UrlPath

logger = logging.getLogger(__name__)


class PathParser:
    """
    Parses file and url paths with a fixed set of options.

    Parsed values are immutable, so results (including rejections) are kept in an
    LRU cache shared by all threads using this parser. A "path.parse-cache.size"
    of 0 disables the cache.
    """

    def __init__(self, options: Optional[Union[Options, dict]] = None) -> None:
        self.options = Options.of(options)
        cache_size = self.options.get(PathOptions.PARSE_CACHE_SIZE)
        if cache_size < 0:
            raise ValueError("{} must be >= 0, got {}".format(PathOptions.PARSE_CACHE_SIZE.key(), cache_size))
        self._results = LRUCache(cache_size) if cache_size > 0 else None
        self._results_lock = rwlock.RWLockFair()
        logger.debug("PathParser initialized with flavor %s and cache size %d",
                     self.options.get(PathOptions.FILE_PATH_FLAVOR).value, cache_size)

    def parse_file_path(self, text: str) -> FilePath:
        return self._parse(FilePath, text)

    def parse_file_path_as_directory(self, text: str) -> FilePath:
        return self._parse(FilePath, text).as_directory()

    def try_parse_file_path(self, text: str) -> Optional[FilePath]:
        return self._try_parse(FilePath, text)

    def parse_url_path(self, text: str) -> UrlPath:
        return self._parse(UrlPath, text)

    def parse_url_path_as_directory(self, text: str) -> UrlPath:
        return self._parse(UrlPath, text).as_directory()

    def try_parse_url_path(self, text: str) -> Optional[UrlPath]:
        return self._try_parse(UrlPath, text)

    def _parse(self, path_class: Type[Path], text: str) -> Path:
        return path_class.from_parse_result(text, self._load(path_class, text))

    def _try_parse(self, path_class: Type[Path], text: str) -> Optional[Path]:
        return path_class.try_from_parse_result(text, self._load(path_class, text))

    def _load(self, path_class: Type[Path], text: str) -> Union[Path, PathError]:
        if self._results is None:
            return path_class.parse_result(text, self.options)

        key: Tuple[str, str] = (path_class.__name__, text)
        rlock = self._results_lock.gen_rlock()
        rlock.acquire()
        try:
            result = self._results.get(key)
            if result is not None:
                return result
        finally:
            rlock.release()
        wlock = self._results_lock.gen_wlock()
        wlock.acquire()
        try:
            result = self._results.get(key)
            if result is not None:
                return result
            logger.debug("Parsing %s %r", path_class.__name__, text)
            result = path_class.parse_result(text, self.options)
            self._results[key] = result
            return result
        finally:
            wlock.release()

    def clear_cache(self) -> None:
        if self._results is not None:
            self._results.clear()

    def get_cache_size(self) -> int:
        return len(self._results) if self._results is not None else 0

    def __getstate__(self):
        state = self.__dict__.copy()
        del state['_results_lock']
        return state

    def __setstate__(self, state):
        self.__dict__.update(state)
        self._results_lock = rwlock.RWLockFair()
