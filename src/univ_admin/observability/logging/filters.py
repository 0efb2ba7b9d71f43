"""Observability – SensitiveFieldsFilter, a structlog processor that masks secrets."""
from __future__ import annotations

from typing import Any

from univ_admin.kernel.security import DEFAULT_SENSITIVE_FIELDS, is_sensitive

REDACTED = "[REDACTED]"


class SensitiveFieldsFilter:
    """Mask the values of sensitive keys (``password``, ``token``, ...).

    Key matching is case-insensitive.  :meth:`redact` looks at the top level
    only; :meth:`redact_deep` also walks nested dicts and lists of dicts and
    is what runs as a processor.
    """

    REDACTED = REDACTED

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {key: REDACTED if is_sensitive(key, self._fields) else value for key, value in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        return {
            key: REDACTED if is_sensitive(key, self._fields) else self._walk(value)
            for key, value in data.items()
        }

    def _walk(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.redact_deep(value)
        if isinstance(value, list):
            return [self._walk(item) for item in value]
        return value

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


__all__ = ["REDACTED", "SensitiveFieldsFilter"]
