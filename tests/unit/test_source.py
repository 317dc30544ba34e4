#!/usr/bin/env python3
"""
test_source.py - Unit tests for reading password files
"""

import pathlib
import tempfile
import unittest
from unittest.mock import patch

from password_zen._cli.source import read_passwords
from password_zen.exc import InputUnavailableError


class TestReadPasswords(unittest.TestCase):
    """Test newline-delimited password files"""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_path = pathlib.Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_trims_and_skips_blank_lines(self):
        fn = self.tmp_path / "passwords.txt"
        fn.write_text("  first \n\nsecond\r\n\t\n third\n", encoding="utf-8")
        self.assertEqual(read_passwords(fn), ["first", "second", "third"])

    def test_keeps_duplicates_in_order(self):
        fn = self.tmp_path / "passwords.txt"
        fn.write_text("b\na\nb\n", encoding="utf-8")
        self.assertEqual(read_passwords(fn), ["b", "a", "b"])

    def test_missing_file(self):
        with self.assertRaises(InputUnavailableError) as cm:
            read_passwords(self.tmp_path / "nope.txt")
        self.assertIn("File does not exist", str(cm.exception))
        self.assertIn("nope.txt", str(cm.exception))

    def test_directory(self):
        with self.assertRaises(InputUnavailableError) as cm:
            read_passwords(self.tmp_path)
        self.assertIn("Path is a directory", str(cm.exception))

    def test_unreadable_file(self):
        fn = self.tmp_path / "passwords.txt"
        fn.write_text("secret\n", encoding="utf-8")
        with patch.object(
            pathlib.Path, "read_text", side_effect=PermissionError("denied")
        ):
            with self.assertRaises(InputUnavailableError) as cm:
                read_passwords(fn)
        self.assertIn("Cannot read file", str(cm.exception))
        self.assertIsInstance(cm.exception.__cause__, PermissionError)

    def test_undecodable_file(self):
        fn = self.tmp_path / "passwords.bin"
        fn.write_bytes(b"\xff\xfe\xfa\n")
        with self.assertRaises(InputUnavailableError):
            read_passwords(fn)

    def test_blank_file(self):
        fn = self.tmp_path / "passwords.txt"
        fn.write_text("\n   \n", encoding="utf-8")
        with self.assertRaises(InputUnavailableError) as cm:
            read_passwords(fn)
        self.assertIn("No passwords found", str(cm.exception))


if __name__ == "__main__":
    unittest.main()
