"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar, Self

from univ_admin.config.validation.errors import ConfigError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses declare fields with defaults and a ``_prefix`` used to build
    variable names (``UNIV`` + ``jwt_secret`` → ``UNIV_JWT_SECRET``).
    Fields without a default are required.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def required_fields(cls) -> list[str]:
        return [
            f.name
            for f in dataclasses.fields(cls)
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        ]

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Self:
        """Construct from already-coerced *values*.

        Validation errors propagate unchanged; anything else (unknown keys,
        a failing ``__post_init__``) is wrapped in :class:`ConfigError`.
        """
        try:
            return cls(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["Settings"]
