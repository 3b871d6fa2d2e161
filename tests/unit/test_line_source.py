"""Tests for the line_source module."""

import os
import unittest

from splurge_sshd_config.exceptions import FileOperationError
from splurge_sshd_config.line_source import FileLineSource
from tests.test_utility import TestDataHelper, TestUtilities


class TestFileLineSource(unittest.TestCase):
    """Test cases for FileLineSource."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = TestUtilities.create_temp_dir()

    def tearDown(self):
        """Clean up test fixtures."""
        TestUtilities.cleanup_temp_dir(self.temp_dir)

    def test_reads_lines_with_terminators(self):
        """Test that lines keep their terminators."""
        path = TestDataHelper.write_config(self.temp_dir, "a b\n# c\n\nlast")

        with FileLineSource(path) as source:
            lines = list(source)

        self.assertEqual(lines, ["a b\n", "# c\n", "\n", "last"])

    def test_crlf_normalized(self):
        """Test that CRLF terminators read as LF."""
        path = os.path.join(self.temp_dir, "crlf")
        with open(path, "wb") as f:
            f.write(b"LoginGraceTime 2m\r\n")

        with FileLineSource(path) as source:
            self.assertEqual(list(source), ["LoginGraceTime 2m\n"])

    def test_long_lines_truncated(self):
        """Test that lines beyond the buffer size are cut."""
        long_line = "AuthorizedKeysFile " + "x" * 300 + "\n"
        path = TestDataHelper.write_config(self.temp_dir, long_line + "next\n")

        with FileLineSource(path, max_line_size=160) as source:
            lines = list(source)

        self.assertEqual(len(lines), 2)
        self.assertEqual(len(lines[0]), 159)
        self.assertTrue(lines[0].startswith("AuthorizedKeysFile xxx"))
        self.assertEqual(lines[1], "next\n")

    def test_closed_after_context(self):
        """Test that the file is closed when the context exits."""
        path = TestDataHelper.write_config(self.temp_dir, "a\n")
        source = FileLineSource(path)

        with source:
            self.assertFalse(source.closed)
        self.assertTrue(source.closed)

    def test_closed_after_error(self):
        """Test that the file is closed when the body raises."""
        path = TestDataHelper.write_config(self.temp_dir, "a\n")
        source = FileLineSource(path)

        with self.assertRaises(RuntimeError):
            with source:
                raise RuntimeError("boom")
        self.assertTrue(source.closed)

    def test_missing_file(self):
        """Test opening a file that does not exist."""
        source = FileLineSource(os.path.join(self.temp_dir, "missing"))

        with self.assertRaises(FileOperationError) as cm:
            with source:
                pass

        self.assertIn("Unable to open SSHD config file", str(cm.exception))

    def test_iterate_before_open(self):
        """Test iterating a source that was never opened."""
        source = FileLineSource(os.path.join(self.temp_dir, "any"))

        with self.assertRaises(FileOperationError):
            list(source)

    def test_non_utf8_bytes_read(self):
        """Test that bytes outside UTF-8 do not fail the read."""
        path = os.path.join(self.temp_dir, "latin1")
        with open(path, "wb") as f:
            f.write(b"# caf\xe9 admin note\nLoginGraceTime 2m\n")

        with FileLineSource(path) as source:
            lines = list(source)

        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("# caf"))
        self.assertEqual(lines[1], "LoginGraceTime 2m\n")

    def test_truncation_counts_bytes(self):
        """Test that the line limit applies to encoded bytes, not characters."""
        path = TestDataHelper.write_config(self.temp_dir, "Banner " + "é" * 20 + "\n")

        with FileLineSource(path, max_line_size=18) as source:
            lines = list(source)

        self.assertEqual(lines, ["Banner " + "é" * 5])

    def test_close_twice(self):
        """Test that close is safe to repeat."""
        path = TestDataHelper.write_config(self.temp_dir, "a\n")
        source = FileLineSource(path)
        source.open()
        source.close()
        source.close()
        self.assertTrue(source.closed)


if __name__ == '__main__':
    unittest.main()
