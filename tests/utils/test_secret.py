"""Tests for password hashing utilities."""

from todo_core.utils import secret


class TestPasswordHashing:
    """Tests for password hashing and verification."""

    def test_hash_password_returns_bcrypt_string(self):
        """Password hashing should return a 60 character bcrypt hash."""
        hashed = secret.hash_password("secret1", rounds=4)
        assert isinstance(hashed, str)
        assert len(hashed) == 60
        assert hashed != "secret1"

    def test_hash_password_different_hashes(self):
        """Same password should produce different hashes (due to salt)."""
        assert secret.hash_password("secret1", rounds=4) != secret.hash_password("secret1", rounds=4)

    def test_hash_uses_requested_rounds(self):
        """Work factor is encoded in the hash."""
        hashed = secret.hash_password("secret1", rounds=5)
        assert hashed.startswith("$2b$05$")

    def test_verify_password_valid(self):
        hashed = secret.hash_password("secret1", rounds=4)
        assert secret.verify_password("secret1", hashed) is True

    def test_verify_password_invalid(self):
        hashed = secret.hash_password("secret1", rounds=4)
        assert secret.verify_password("secret2", hashed) is False

    def test_verify_password_empty_string(self):
        hashed = secret.hash_password("secret1", rounds=4)
        assert secret.verify_password("", hashed) is False

    def test_verify_password_unicode(self):
        hashed = secret.hash_password("sécret🔒", rounds=4)
        assert secret.verify_password("sécret🔒", hashed) is True
        assert secret.verify_password("sécret", hashed) is False

    def test_verify_password_corrupt_hash_returns_false(self):
        assert secret.verify_password("secret1", "not-a-bcrypt-hash") is False
