"""Tests for password hashing and remember tokens."""

from sample_app.utils.security import generate_remember_token, hash_password, verify_password


class TestPasswordHashing:
    """Tests for bcrypt helpers."""

    def test_hash_is_not_plain_text(self) -> None:
        """Test that the digest does not contain the password."""
        hashed = hash_password("foobar")

        assert hashed != "foobar"
        assert hashed.startswith("$2")

    def test_hashes_are_salted(self) -> None:
        """Test that hashing twice gives different digests."""
        assert hash_password("foobar") != hash_password("foobar")

    def test_verify_password(self) -> None:
        """Test that verification accepts only the original password."""
        hashed = hash_password("foobar")

        assert verify_password("foobar", hashed) is True
        assert verify_password("foobaz", hashed) is False

    def test_verify_against_malformed_digest(self) -> None:
        """Test that a broken digest is treated as a mismatch."""
        assert verify_password("foobar", "not-a-bcrypt-digest") is False


class TestRememberToken:
    """Tests for remember token generation."""

    def test_token_is_url_safe(self) -> None:
        """Test that tokens only use URL-safe characters."""
        token = generate_remember_token()

        assert token
        assert all(c.isalnum() or c in "-_" for c in token)

    def test_tokens_have_fixed_length(self) -> None:
        """Test that tokens from one configuration have the same length."""
        lengths = {len(generate_remember_token()) for _ in range(20)}

        assert len(lengths) == 1

    def test_tokens_are_unique(self) -> None:
        """Test that tokens are not repeated."""
        tokens = {generate_remember_token() for _ in range(50)}

        assert len(tokens) == 50
