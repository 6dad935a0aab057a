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
import unittest

from parameterized import parameterized

from pydatatypes.path import (PartRole, PathErrorKind, UrlPath,
                              UrlPathInvalidArgumentException,
                              UrlPathLogicException)


class UrlPathParseTest(unittest.TestCase):

    @parameterized.expand([
        ("", False, [], None, ""),
        ("/", True, [], None, "/"),
        ("foo", False, [], "foo", "foo"),
        ("/foo/bar/", True, ["foo", "bar"], None, "/foo/bar/"),
        ("/foo/bar/baz.html", True, ["foo", "bar"], "baz.html", "/foo/bar/baz.html"),
        ("./foo/./bar/.", False, ["foo", "bar"], None, "foo/bar/"),
        ("//foo//bar", True, ["foo"], "bar", "/foo/bar"),
        ("/foo/../bar/", True, ["bar"], None, "/bar/"),
        ("../../foo", False, ["..", ".."], "foo", "../../foo"),
        ("foo/bar/../../../../baz/file.html", False, ["..", "..", "baz"], "file.html", "../../baz/file.html"),
        ("%2e%2e/foo", False, [".."], "foo", "../foo"),
    ])
    def test_parse(self, text, is_absolute, directory_parts, filename, rendered):
        """Test parsing, normalization and rendering of valid url paths."""
        path = UrlPath.parse(text)
        self.assertEqual(path.is_absolute(), is_absolute)
        self.assertEqual(path.is_relative(), not is_absolute)
        self.assertEqual(path.directory_parts(), directory_parts)
        self.assertEqual(path.filename(), filename)
        self.assertEqual(path.is_file(), filename is not None)
        self.assertEqual(path.is_directory(), filename is None)
        self.assertEqual(path.to_string(), rendered)
        self.assertEqual(str(path), rendered)

    def test_percent_encoding(self):
        path = UrlPath.parse("/path%3f!/file%3f!")
        self.assertEqual(path.directory_parts(), ["path?!"])
        self.assertEqual(path.filename(), "file?!")
        self.assertEqual(path.to_string(), "/path%3F%21/file%3F%21")

        # Hex case of the input does not matter.
        self.assertEqual(UrlPath.parse("/path%3F%21/").to_string(), "/path%3F%21/")
        self.assertEqual(UrlPath.parse("/a%20b/c%C3%A9.txt").directory_parts(), ["a b"])
        self.assertEqual(UrlPath.parse("/a%20b/c%C3%A9.txt").filename(), "cé.txt")
        self.assertEqual(UrlPath.parse("/a%20b/c%c3%a9.txt").to_string(), "/a%20b/c%C3%A9.txt")

    def test_undecodable_bytes_are_preserved(self):
        path = UrlPath.parse("/%ff/")
        self.assertEqual(path.to_string(), "/%FF/")
        self.assertEqual(UrlPath.parse(path.to_string()), path)

    def test_depth(self):
        self.assertEqual(UrlPath.parse("../../foo").depth(), -2)
        self.assertEqual(UrlPath.parse("/").depth(), 0)
        self.assertEqual(UrlPath.parse("/foo/bar/baz.html").depth(), 2)
        self.assertEqual(UrlPath.parse("foo/bar/../../../../baz/file.html").depth(), -1)

    @parameterized.expand([
        ("/foo bar/", "foo bar", PartRole.DIRECTORY, " ",
         'Url path "/foo bar/" is invalid: Part of directory "foo bar" contains invalid character " ".'),
        ("/foo/bar?", "bar?", PartRole.FILENAME, "?",
         'Url path "/foo/bar?" is invalid: Filename "bar?" contains invalid character "?".'),
        ("a/b#c/d", "b#c", PartRole.DIRECTORY, "#",
         'Url path "a/b#c/d" is invalid: Part of directory "b#c" contains invalid character "#".'),
    ])
    def test_invalid_character(self, text, segment, role, character, message):
        with self.assertRaises(UrlPathInvalidArgumentException) as context:
            UrlPath.parse(text)
        error = context.exception.error
        self.assertEqual(str(context.exception), message)
        self.assertEqual(error.kind, PathErrorKind.GRAMMAR)
        self.assertEqual(error.segment, segment)
        self.assertEqual(error.role, role)
        self.assertEqual(error.character, character)

    def test_above_root_level(self):
        with self.assertRaises(UrlPathInvalidArgumentException) as context:
            UrlPath.parse("/foo/../../")
        self.assertEqual(context.exception.error.kind, PathErrorKind.ROOT_OVERFLOW)
        self.assertEqual(str(context.exception),
                         'Url path "/foo/../../" is invalid: Absolute path is above root level.')

    def test_invalid_argument_is_value_error(self):
        with self.assertRaises(ValueError):
            UrlPath.parse("/<script>/")

    def test_try_parse_and_is_valid(self):
        self.assertIsNone(UrlPath.try_parse("/foo bar"))
        self.assertIsNone(UrlPath.try_parse("/.."))
        self.assertEqual(UrlPath.try_parse("/foo/bar").to_string(), "/foo/bar")
        self.assertTrue(UrlPath.is_valid("/foo/bar/"))
        self.assertTrue(UrlPath.is_valid(""))
        self.assertFalse(UrlPath.is_valid("/foo\\bar"))

    def test_parse_as_directory(self):
        self.assertEqual(UrlPath.parse_as_directory("/foo/bar").directory_parts(), ["foo", "bar"])
        self.assertIsNone(UrlPath.parse_as_directory("/foo/bar").filename())
        self.assertEqual(UrlPath.parse_as_directory("/foo/bar").to_string(), "/foo/bar/")
        self.assertEqual(UrlPath.parse_as_directory("/foo/bar/").to_string(), "/foo/bar/")
        self.assertEqual(UrlPath.parse_as_directory("foo%20bar").to_string(), "foo%20bar/")
        self.assertIsNone(UrlPath.try_parse_as_directory("/foo bar"))
        self.assertEqual(UrlPath.try_parse_as_directory("../x").to_string(), "../x/")
        with self.assertRaises(UrlPathInvalidArgumentException):
            UrlPath.parse_as_directory("/../")


class UrlPathDerivationTest(unittest.TestCase):

    def test_directory(self):
        self.assertEqual(UrlPath.parse("/foo/bar.html").directory().to_string(), "/foo/")
        self.assertEqual(UrlPath.parse("../bar.html").directory().to_string(), "../")
        self.assertEqual(UrlPath.parse("/foo/").directory().to_string(), "/foo/")

    @parameterized.expand([
        ("/foo/bar/baz.html", "/foo/"),
        ("/foo/", "/"),
        ("foo/", ""),
        ("", "../"),
        ("../", "../../"),
        ("../foo/bar.html", "../"),
    ])
    def test_parent_directory(self, text, parent):
        path = UrlPath.parse(text)
        self.assertTrue(path.has_parent_directory())
        self.assertEqual(path.parent_directory().to_string(), parent)
        self.assertEqual(path.parent_directory().depth(), path.depth() - 1)

    def test_root_has_no_parent_directory(self):
        root = UrlPath.parse("/index.html")
        self.assertFalse(root.has_parent_directory())
        self.assertIsNone(root.parent_directory())

    def test_to_absolute(self):
        self.assertEqual(UrlPath.parse("foo/bar").to_absolute().to_string(), "/foo/bar")
        self.assertEqual(UrlPath.parse("").to_absolute().to_string(), "/")
        self.assertEqual(UrlPath.parse("/foo/").to_absolute().to_string(), "/foo/")

        with self.assertRaises(UrlPathLogicException) as context:
            UrlPath.parse("../foo").to_absolute()
        self.assertEqual(context.exception.error.kind, PathErrorKind.ABOVE_BASE)
        self.assertEqual(str(context.exception),
                         'Url path "../foo" can not be made absolute: Relative path is above base level.')

    def test_to_relative(self):
        self.assertEqual(UrlPath.parse("/foo/bar").to_relative().to_string(), "foo/bar")
        self.assertEqual(UrlPath.parse("/").to_relative().to_string(), "")
        self.assertEqual(UrlPath.parse("../foo").to_relative().to_string(), "../foo")

    def test_with_filename(self):
        self.assertEqual(UrlPath.parse("/foo/").with_filename("bar.html").to_string(), "/foo/bar.html")
        self.assertEqual(UrlPath.parse("../a.txt").with_filename("b.txt").to_string(), "../b.txt")

    @parameterized.expand([
        ("bar/baz", 'Filename "bar/baz" contains invalid character "/".'),
        ("a b", 'Filename "a b" contains invalid character " ".'),
        ("", 'Filename "" is invalid.'),
        (".", 'Filename "." is invalid.'),
        ("..", 'Filename ".." is invalid.'),
    ])
    def test_with_invalid_filename(self, filename, message):
        with self.assertRaises(UrlPathInvalidArgumentException) as context:
            UrlPath.parse("/foo/").with_filename(filename)
        self.assertEqual(str(context.exception), message)
        self.assertEqual(context.exception.error.role, PartRole.FILENAME)

    def test_derived_paths_do_not_change_original(self):
        path = UrlPath.parse("/foo/bar/baz.html")
        path.parent_directory()
        path.with_filename("other.html")
        path.to_relative()
        self.assertEqual(path.to_string(), "/foo/bar/baz.html")
        path.directory_parts().append("mutated")
        self.assertEqual(path.directory_parts(), ["foo", "bar"])


class UrlPathEqualityTest(unittest.TestCase):

    def test_equals(self):
        self.assertEqual(UrlPath.parse("/foo/./bar"), UrlPath.parse("/foo/bar"))
        self.assertTrue(UrlPath.parse("/a%20b/").equals(UrlPath.parse("/a%20b/")))
        self.assertNotEqual(UrlPath.parse("/foo/"), UrlPath.parse("foo/"))
        self.assertNotEqual(UrlPath.parse("/foo"), UrlPath.parse("/foo/"))
        self.assertNotEqual(UrlPath.parse("../foo/"), UrlPath.parse("foo/"))
        self.assertNotEqual(UrlPath.parse("/foo/"), "/foo/")

    def test_hash(self):
        paths = {UrlPath.parse("/foo/bar/"), UrlPath.parse("/foo/baz/../bar/"), UrlPath.parse("/foo/")}
        self.assertEqual(len(paths), 2)

    def test_repr(self):
        self.assertEqual(repr(UrlPath.parse("/a/b.txt")), "UrlPath('/a/b.txt')")


if __name__ == '__main__':
    unittest.main()
