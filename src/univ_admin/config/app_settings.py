"""Config – application settings for the univ-admin service."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

import structlog

from univ_admin.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from univ_admin.config.validation import InvalidSettingValueError
from univ_admin.kernel.ddd.guard import Guard

MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31

_SECRET_FIELDS = ("jwt_secret", "jwt_refresh_secret")


@dataclasses.dataclass
class AppSettings(Settings):
    """Settings read from ``UNIV_*`` environment variables."""

    _prefix: ClassVar[str] = "UNIV"

    database_url: str = "sqlite+aiosqlite:///./univ_admin.db"
    jwt_secret: str = "dev_secret"
    jwt_refresh_secret: str = "dev_refresh_secret"
    jwt_access_ttl: str = "15m"
    jwt_refresh_ttl: str = "7d"
    jwt_issuer: str = "univ-admin"
    jwt_audience: str = "univ-admin-clients"
    bcrypt_rounds: int = 10
    log_level: str = "INFO"
    debug: bool = False

    def _validate(self) -> None:
        if Guard.is_out_of_range(self.bcrypt_rounds, MIN_BCRYPT_ROUNDS, MAX_BCRYPT_ROUNDS):
            raise InvalidSettingValueError(
                "bcrypt_rounds",
                self.bcrypt_rounds,
                f"must be between {MIN_BCRYPT_ROUNDS} and {MAX_BCRYPT_ROUNDS}",
            )
        for name in ("database_url", *_SECRET_FIELDS):
            if Guard.is_empty(getattr(self, name)):
                raise InvalidSettingValueError(name, getattr(self, name), "must not be empty")

    def default_secret_fields(self) -> list[str]:
        """JWT secrets still set to their development defaults."""
        defaults = {f.name: f.default for f in dataclasses.fields(self)}
        return [name for name in _SECRET_FIELDS if getattr(self, name) == defaults[name]]


def warn_on_default_secrets(settings: AppSettings) -> bool:
    """Log a warning when a non-debug deployment signs with the dev secrets."""
    fields = settings.default_secret_fields()
    if not fields or settings.debug:
        return False
    structlog.get_logger(__name__).warning("config.default_jwt_secret", fields=fields)
    return True


def load_settings(env_file: str | None = None, **overrides: object) -> AppSettings:
    """Build :class:`AppSettings` from the environment (and *env_file* if given)."""
    loaders: list[SettingsLoader] = [EnvSettingsLoader()]
    if env_file is not None:
        loaders = [DotenvSettingsLoader(env_file)]
    return SettingsFactory.create(AppSettings, loaders, overrides or None)


__all__ = ["AppSettings", "load_settings", "warn_on_default_secrets"]
