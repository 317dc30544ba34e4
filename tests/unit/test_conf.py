#!/usr/bin/env python3
"""
test_conf.py - Unit tests for settings and error message conversion
"""

import os
import unittest
from unittest.mock import patch

import pydantic

from password_zen._conf import Settings
from password_zen.util.model import convert_errors, format_errors


class TestSettings(unittest.TestCase):
    """Test settings defaults and sources"""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = Settings()
        self.assertTrue(settings.color)
        self.assertTrue(settings.animation)
        self.assertEqual(settings.generate.length, 12)
        self.assertEqual(settings.analyze.min_length, 8)

    @patch.dict(os.environ, {}, clear=True)
    def test_as_default_map(self):
        default_map = Settings(generate={"charset": "abc"}, color=False).as_default_map()
        self.assertEqual(
            default_map["generate"],
            {
                "length": 12,
                "include_digits": True,
                "include_symbols": False,
                "exclude_ambiguous": False,
                "custom_charset": "abc",
            },
        )
        self.assertEqual(default_map["analyze"]["min_length"], 8)
        self.assertFalse(default_map["analyze"]["color"])
        self.assertTrue(default_map["analyze"]["animation"])

    @patch.dict(os.environ, {}, clear=True)
    def test_empty_charset_is_unset(self):
        self.assertIsNone(Settings().as_default_map()["generate"]["custom_charset"])

    @patch.dict(
        os.environ,
        {"PASSWORD_ZEN_ANIMATION": "false", "PASSWORD_ZEN_ANALYZE__MIN_LENGTH": "14"},
        clear=True,
    )
    def test_environment_overrides_init(self):
        settings = Settings(animation=True, analyze={"min_length": 10})
        self.assertFalse(settings.animation)
        self.assertEqual(settings.analyze.min_length, 14)


class TestConvertErrors(unittest.TestCase):
    """Test pydantic errors are rewritten for humans"""

    @patch.dict(os.environ, {}, clear=True)
    def test_convert_errors(self):
        with self.assertRaises(pydantic.ValidationError) as cm:
            Settings(generate={"length": 500}, analyze={"min_length": -1}, foo=1)

        errors = convert_errors(cm.exception)
        messages = {".".join(str(p) for p in err["loc"]): err["msg"] for err in errors}
        self.assertEqual(
            messages["generate.length"], "Input must be less than or equal to 128"
        )
        self.assertEqual(
            messages["analyze.min_length"], "Input must be greater than or equal to 0"
        )
        self.assertEqual(messages["foo"], "Extra fields not allowed")
        for err in errors:
            self.assertNotIn("ctx", err)
            self.assertNotIn("input", err)

        text = format_errors(errors)
        self.assertIn("  * generate.length: Input must be less than", text)


if __name__ == "__main__":
    unittest.main()
