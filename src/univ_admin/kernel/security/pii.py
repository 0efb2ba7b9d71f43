"""Kernel security – field names that must never reach logs or error payloads."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "password_hash", "passwd", "secret", "jwt_secret", "jwt_refresh_secret",
    "token", "access_token", "refresh_token", "authorization",
})


def is_sensitive(key: str, fields: frozenset[str] = DEFAULT_SENSITIVE_FIELDS) -> bool:
    """Case-insensitive membership test against *fields*."""
    return key.lower() in fields


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "is_sensitive"]
