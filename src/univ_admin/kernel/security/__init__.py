"""Kernel security – PasswordHasher port and sensitive field names."""
from univ_admin.kernel.security.crypto import PasswordHasher
from univ_admin.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS, is_sensitive

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "PasswordHasher", "is_sensitive"]
