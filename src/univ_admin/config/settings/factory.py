"""Config settings – SettingsFactory."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from univ_admin.config.settings.base import Settings
from univ_admin.config.settings.loaders import SettingsLoader
from univ_admin.config.validation.errors import MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Layer several sources into one settings object.

    Precedence, lowest first: field defaults, each loader in order, then
    *overrides*.  A required field only has to be present in one layer.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            A required field is absent from every layer.
        InvalidSettingValueError
            A value cannot be coerced or fails validation.
        ConfigError
            Any other construction failure, e.g. an unknown override key.
        """
        merged: dict[str, Any] = {}
        for loader in loaders or ():
            merged.update(loader.read(settings_cls))
        merged.update(overrides or {})

        missing = [name for name in settings_cls.required_fields() if name not in merged]
        if missing:
            raise MissingRequiredSettingError(missing[0])
        return settings_cls.from_mapping(merged)


__all__ = ["SettingsFactory"]
