#!/usr/bin/env python3
"""
test_generator.py - Unit tests for the secure password generator
Tests output shape, parameter validation and entropy source failures
"""

import unittest
from unittest.mock import patch

from password_zen import charset, generator
from password_zen.exc import (
    EmptyCharsetError,
    GenerationError,
    InvalidLengthError,
    InvalidParametersError,
    RandomSourceError,
)


class TestGenerate(unittest.TestCase):
    """Test password generation"""

    def test_exact_length_and_membership(self):
        """Test every character is drawn from the charset"""
        pool = charset.build(True, True, True)
        for length in (1, 12, 64, generator.MAX_LENGTH):
            password = generator.generate(length, pool)
            self.assertEqual(len(password), length)
            self.assertTrue(all(ch in pool for ch in password))

    def test_single_character_charset(self):
        """Test a one character charset yields a repeated character"""
        self.assertEqual(generator.generate(5, "x"), "xxxxx")

    def test_outputs_differ(self):
        """Test generation is not deterministic"""
        pool = charset.build(True, True, False)
        passwords = {generator.generate(32, pool) for _ in range(10)}
        self.assertEqual(len(passwords), 10)

    def test_uses_secrets_module(self):
        """Test indices come from the secrets module"""
        with patch("password_zen.generator.secrets.randbelow", return_value=2) as m:
            password = generator.generate(4, "abcd")
        self.assertEqual(password, "cccc")
        self.assertEqual(m.call_count, 4)
        m.assert_called_with(4)


class TestGenerateErrors(unittest.TestCase):
    """Test parameter validation and error propagation"""

    def test_zero_length(self):
        with self.assertRaises(InvalidLengthError) as cm:
            generator.generate(0, "abc")
        self.assertIsInstance(cm.exception, InvalidParametersError)
        self.assertIn("must be greater than 0", str(cm.exception))

    def test_negative_length(self):
        with self.assertRaises(InvalidParametersError):
            generator.generate(-1, "abc")

    def test_length_above_maximum(self):
        with self.assertRaises(InvalidLengthError) as cm:
            generator.generate(generator.MAX_LENGTH + 1, "abc")
        self.assertIn("must not exceed 128 characters", str(cm.exception))

    def test_empty_charset(self):
        with self.assertRaises(EmptyCharsetError) as cm:
            generator.generate(12, "")
        self.assertIsInstance(cm.exception, InvalidParametersError)
        self.assertEqual(
            str(cm.exception), "No valid characters available for password generation"
        )

    def test_random_source_failure(self):
        """Test entropy failures are wrapped, not retried"""
        with patch(
            "password_zen.generator.secrets.randbelow",
            side_effect=OSError("getrandom failed"),
        ) as m:
            with self.assertRaises(RandomSourceError) as cm:
                generator.generate(8, "abc")
        self.assertEqual(m.call_count, 1)
        self.assertIsInstance(cm.exception, GenerationError)
        self.assertIsInstance(cm.exception.__cause__, OSError)
        self.assertIn("getrandom failed", str(cm.exception))


class TestGenerateMany(unittest.TestCase):
    """Test batch generation"""

    def test_count(self):
        passwords = generator.generate_many(3, 10, "abc")
        self.assertEqual(len(passwords), 3)
        self.assertTrue(all(len(pwd) == 10 for pwd in passwords))

    def test_invalid_count(self):
        with self.assertRaises(InvalidParametersError):
            generator.generate_many(0, 10, "abc")


if __name__ == "__main__":
    unittest.main()
