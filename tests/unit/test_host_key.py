"""Tests for the host_key module."""

import base64
import hashlib
import os
import unittest

from cryptography.hazmat.primitives import serialization

from splurge_sshd_config.exceptions import BadArgumentError, HostKeyError
from splurge_sshd_config.host_key import fingerprint_public_key, load_host_key
from splurge_sshd_config.sshd_config import new_config, set_host_private_key
from tests.test_utility import TestDataHelper, TestUtilities


class TestHostKey(unittest.TestCase):
    """Test cases for host key loading."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = TestUtilities.create_temp_dir()
        self.conf = new_config()

    def tearDown(self):
        """Clean up test fixtures."""
        TestUtilities.cleanup_temp_dir(self.temp_dir)

    def test_load_openssh_ed25519(self):
        """Test loading an OpenSSH ed25519 key."""
        path, key = TestDataHelper.write_ed25519_key(self.temp_dir)
        set_host_private_key(self.conf, path)

        host_key = load_host_key(self.conf)

        self.assertEqual(host_key.path, path)
        self.assertEqual(host_key.key_type, "ssh-ed25519")
        self.assertTrue(host_key.fingerprint.startswith("SHA256:"))
        self.assertEqual(
            host_key.private_key.public_key().public_bytes(
                serialization.Encoding.Raw, serialization.PublicFormat.Raw
            ),
            key.public_key().public_bytes(
                serialization.Encoding.Raw, serialization.PublicFormat.Raw
            ),
        )

    def test_fingerprint_matches_ssh_keygen_format(self):
        """Test the fingerprint against a hand-computed digest."""
        _, key = TestDataHelper.write_ed25519_key(self.temp_dir)
        openssh = key.public_key().public_bytes(
            serialization.Encoding.OpenSSH, serialization.PublicFormat.OpenSSH
        )
        blob = base64.b64decode(openssh.split(b" ")[1])
        expected = "SHA256:" + base64.b64encode(hashlib.sha256(blob).digest()).decode().rstrip("=")

        key_type, fingerprint = fingerprint_public_key(key.public_key())

        self.assertEqual(key_type, "ssh-ed25519")
        self.assertEqual(fingerprint, expected)

    def test_load_encrypted_pem_rsa(self):
        """Test loading an encrypted PKCS#8 RSA key."""
        path, _ = TestDataHelper.write_rsa_pem_key(self.temp_dir, password="hunter22")
        set_host_private_key(self.conf, path)

        host_key = load_host_key(self.conf, password="hunter22")

        self.assertEqual(host_key.key_type, "ssh-rsa")
        self.assertNotIn("private_key", host_key.to_dict())

    def test_wrong_password(self):
        """Test loading an encrypted key with a bad passphrase."""
        path, _ = TestDataHelper.write_rsa_pem_key(self.temp_dir, password="hunter22")
        set_host_private_key(self.conf, path)

        with self.assertRaises(HostKeyError):
            load_host_key(self.conf, password="wrong")

    def test_missing_password(self):
        """Test loading an encrypted key without a passphrase."""
        path, _ = TestDataHelper.write_rsa_pem_key(self.temp_dir, password="hunter22")
        set_host_private_key(self.conf, path)

        with self.assertRaises(HostKeyError):
            load_host_key(self.conf)

    def test_garbage_file(self):
        """Test loading a file that holds no key."""
        path = os.path.join(self.temp_dir, "garbage")
        with open(path, "wb") as f:
            f.write(b"not a key\n")
        set_host_private_key(self.conf, path)

        with self.assertRaises(HostKeyError):
            load_host_key(self.conf)

    def test_missing_file(self):
        """Test loading a key file that does not exist."""
        set_host_private_key(self.conf, os.path.join(self.temp_dir, "missing"))

        with self.assertRaises(HostKeyError) as cm:
            load_host_key(self.conf)

        self.assertIn("Failed to read host key", str(cm.exception))

    def test_no_host_key_configured(self):
        """Test loading when no host key path is set."""
        with self.assertRaises(BadArgumentError):
            load_host_key(self.conf)

    def test_none_config(self):
        """Test loading with a None config."""
        with self.assertRaises(BadArgumentError):
            load_host_key(None)


if __name__ == '__main__':
    unittest.main()
