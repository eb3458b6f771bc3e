"""Helpers for random tokens and secret handling."""

import hmac
import secrets


def generate_secure_key(length: int = 32) -> str:
    """Generate a cryptographically secure random key.

    Args:
        length: Number of random bytes

    Returns:
        URL-safe base64-encoded random string
    """
    return secrets.token_urlsafe(length)


def constant_time_equals(a: str, b: str) -> bool:
    """Compare two strings without leaking timing information."""
    return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def mask_secret(secret: str, visible_chars: int = 4) -> str:
    """Mask a secret for logging purposes.

    Args:
        secret: Secret to mask
        visible_chars: Number of characters to show at start and end

    Returns:
        Masked secret like "abc...xyz"
    """
    if len(secret) <= visible_chars * 2:
        return "*" * len(secret)
    return f"{secret[:visible_chars]}...{secret[-visible_chars:]}"
