"""Config settings – sources of raw setting values.

A loader only *reads*: it returns the fields its source defines, already
coerced to the annotated type.  Merging and construction happen in
:class:`~univ_admin.config.settings.factory.SettingsFactory`.
"""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, Final, TypeVar, get_origin

from dotenv import dotenv_values

from univ_admin.config.settings.base import Settings
from univ_admin.config.validation import InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUTHY: Final = frozenset({"1", "true", "yes", "on"})

_PARSERS: Final[dict[str, Callable[[str], Any]]] = {
    "bool": lambda raw: raw.strip().lower() in _TRUTHY,
    "int": int,
    "float": float,
    "list": lambda raw: [item.strip() for item in raw.split(",") if item.strip()],
}


def env_key(settings_class: type[Settings], field_name: str) -> str:
    prefix = settings_class._prefix
    return f"{prefix}_{field_name}".upper() if prefix else field_name.upper()


def _type_name(annotation: Any) -> str:
    # Annotations are plain strings under ``from __future__ import annotations``.
    if isinstance(annotation, str):
        return annotation.split("[", 1)[0].strip()
    return getattr(get_origin(annotation) or annotation, "__name__", "")


def _read_environ(settings_class: type[Settings], environ: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for field in dataclasses.fields(settings_class):
        key = env_key(settings_class, field.name)
        raw = environ.get(key)
        if raw is None:
            continue
        parse = _PARSERS.get(_type_name(field.type), str)
        try:
            values[field.name] = parse(raw)
        except ValueError as exc:
            raise InvalidSettingValueError(key, raw, str(exc)) from exc
    return values


class SettingsLoader(abc.ABC):
    """Port: a source of setting values."""

    @abc.abstractmethod
    def read(self, settings_class: type[Settings]) -> dict[str, Any]:
        """Coerced values for the fields this source defines."""

    def load(self, settings_class: type[T]) -> T:
        """Build *settings_class* from this source alone."""
        values = self.read(settings_class)
        for name in settings_class.required_fields():
            if name not in values:
                raise MissingRequiredSettingError(env_key(settings_class, name))
        return settings_class.from_mapping(values)


class EnvSettingsLoader(SettingsLoader):
    """Reads ``<PREFIX>_<FIELD>`` from the process environment."""

    def read(self, settings_class: type[Settings]) -> dict[str, Any]:
        return _read_environ(settings_class, os.environ)


class DotenvSettingsLoader(SettingsLoader):
    """Reads a ``.env`` file layered with the process environment.

    The file is parsed with python-dotenv but never exported into
    ``os.environ``.  Process variables win unless *override* is set.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def read(self, settings_class: type[Settings]) -> dict[str, Any]:
        from_file = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        if self._override:
            environ = {**os.environ, **from_file}
        else:
            environ = {**from_file, **os.environ}
        return _read_environ(settings_class, environ)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "env_key"]
