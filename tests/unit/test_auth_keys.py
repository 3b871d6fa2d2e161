"""Tests for the auth_keys module."""

import unittest

from splurge_sshd_config.auth_keys import AuthKeysPattern
from splurge_sshd_config.exceptions import BadArgumentError


class TestAuthKeysPattern(unittest.TestCase):
    """Test cases for AuthKeysPattern."""

    def test_default_pattern(self):
        """Test the default pattern resolves under the home directory."""
        pattern = AuthKeysPattern()
        self.assertEqual(pattern.pattern, ".ssh/authorized_keys")
        self.assertEqual(
            pattern.resolve("alice", "/home/alice"),
            "/home/alice/.ssh/authorized_keys",
        )

    def test_user_and_home_escapes(self):
        """Test %u and %h expansion."""
        pattern = AuthKeysPattern("/etc/ssh/keys/%u")
        self.assertEqual(pattern.resolve("bob", "/home/bob"), "/etc/ssh/keys/bob")

        pattern.set_pattern("%h/.ssh/keys_%u")
        self.assertEqual(pattern.resolve("bob", "/home/bob"), "/home/bob/.ssh/keys_bob")

    def test_percent_escape(self):
        """Test that %% yields a literal percent sign."""
        pattern = AuthKeysPattern("/keys/100%%/%u")
        self.assertEqual(pattern.resolve("carol", "/home/carol"), "/keys/100%/carol")

    def test_unknown_escape(self):
        """Test that unknown escapes are rejected."""
        pattern = AuthKeysPattern("/keys/%x")
        with self.assertRaises(BadArgumentError):
            pattern.resolve("dave", "/home/dave")

    def test_trailing_percent(self):
        """Test that a lone trailing percent sign is rejected."""
        pattern = AuthKeysPattern("/keys/%")
        with self.assertRaises(BadArgumentError):
            pattern.resolve("dave", "/home/dave")

    def test_set_pattern_none_restores_default(self):
        """Test that None restores the default pattern."""
        pattern = AuthKeysPattern("/etc/keys")
        pattern.set_pattern(None)
        self.assertEqual(pattern.pattern, ".ssh/authorized_keys")

    def test_set_pattern_strips_whitespace(self):
        """Test that surrounding whitespace is dropped."""
        pattern = AuthKeysPattern()
        pattern.set_pattern("/etc/keys/%u  ")
        self.assertEqual(pattern.pattern, "/etc/keys/%u")

    def test_missing_user_or_home(self):
        """Test that user and home are required."""
        pattern = AuthKeysPattern()
        with self.assertRaises(BadArgumentError):
            pattern.resolve("", "/home/x")
        with self.assertRaises(BadArgumentError):
            pattern.resolve("x", "")


if __name__ == '__main__':
    unittest.main()
