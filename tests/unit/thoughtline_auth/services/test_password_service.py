"""Unit tests for PasswordHashingService."""

import pytest

from thoughtline_auth.exceptions import WeakPasswordError
from thoughtline_auth.services import PasswordHashingService


class TestPasswordHashing:
    """Tests for hashing and verification."""

    def setup_method(self):
        """Use the cheapest work factor to keep tests fast."""
        self.service = PasswordHashingService(rounds=4)

    def test_hash_is_not_plaintext(self):
        hashed = self.service.hash("secret1")

        assert hashed != "secret1"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        assert self.service.hash("secret1") != self.service.hash("secret1")

    def test_verify_correct_password(self):
        hashed = self.service.hash("secret1")

        assert self.service.verify("secret1", hashed) is True

    def test_verify_wrong_password(self):
        hashed = self.service.hash("secret1")

        assert self.service.verify("wrong", hashed) is False

    def test_verify_with_malformed_hash_returns_false(self):
        assert self.service.verify("secret1", "not-a-bcrypt-hash") is False

    def test_verify_against_dummy_is_always_false(self):
        assert self.service.verify_against_dummy("secret1") is False
        assert self.service.verify_against_dummy("") is False

    def test_unicode_password(self):
        hashed = self.service.hash("pässwörd✓")

        assert self.service.verify("pässwörd✓", hashed)


class TestPasswordValidation:
    """Tests for password acceptance rules."""

    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    def test_empty_password_rejected(self):
        with pytest.raises(WeakPasswordError, match="cannot be empty"):
            self.service.hash("")

    def test_short_password_accepted(self):
        self.service.validate("a")

    def test_password_at_byte_limit_accepted(self):
        self.service.validate("x" * 72)

    def test_password_over_byte_limit_rejected(self):
        with pytest.raises(WeakPasswordError, match="72 bytes"):
            self.service.validate("x" * 73)

    def test_multibyte_characters_count_as_bytes(self):
        # 37 two-byte characters = 74 bytes
        with pytest.raises(WeakPasswordError):
            self.service.validate("é" * 37)


class TestNeedsRehash:
    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    def test_same_rounds_does_not_need_rehash(self):
        hashed = self.service.hash("secret1")

        assert self.service.needs_rehash(hashed) is False

    def test_other_rounds_needs_rehash(self):
        hashed = PasswordHashingService(rounds=5).hash("secret1")

        assert self.service.needs_rehash(hashed) is True

    def test_garbage_needs_rehash(self):
        assert self.service.needs_rehash("garbage") is True
