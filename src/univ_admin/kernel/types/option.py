"""Option[T] monad – Some and Nothing variants."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Iterator, NoReturn, TypeVar

from univ_admin.kernel.errors.functional import UnwrapOptionError

if TYPE_CHECKING:
    from univ_admin.kernel.types.result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
R = TypeVar("R")


class Some(Generic[T]):
    """Option with a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def unwrap_or_else(self, func: Callable[[], T]) -> T:  # noqa: ARG002
        return self._value

    def map(self, func: Callable[[T], U]) -> "Some[U]":
        return Some(func(self._value))

    def and_then(self, func: "Callable[[T], Option[U]]") -> "Option[U]":
        return func(self._value)

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        return self if predicate(self._value) else NOTHING

    def match(self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:  # noqa: ARG002
        return some(self._value)

    def to_nullable(self) -> T | None:
        return self._value

    def ok_or(self, error: E) -> "Result[T, E]":  # noqa: ARG002
        from univ_admin.kernel.types.result import Ok

        return Ok(self._value)

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Some):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("Some", self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing:
    """Empty option – a stateless singleton."""

    __slots__ = ()

    _instance: "Nothing | None" = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapOptionError()

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, func: Callable[[], T]) -> T:
        return func()

    def map(self, func: Callable[[Any], Any]) -> "Nothing":  # noqa: ARG002
        return self

    def and_then(self, func: Callable[[Any], Any]) -> "Nothing":  # noqa: ARG002
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> "Nothing":  # noqa: ARG002
        return self

    def match(self, *, some: Callable[[Any], R], none: Callable[[], R]) -> R:  # noqa: ARG002
        return none()

    def to_nullable(self) -> None:
        return None

    def ok_or(self, error: E) -> "Result[Any, E]":
        from univ_admin.kernel.types.result import Err

        return Err(error)

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nothing"


NOTHING = Nothing()

type Option[T] = Some[T] | Nothing


def some(value: T) -> Some[T]:
    return Some(value)


def nothing() -> Nothing:
    return NOTHING


def from_nullable(value: T | None) -> Option[T]:
    """``None`` becomes ``Nothing``; anything else (even falsy) is wrapped."""
    return NOTHING if value is None else Some(value)


def combine_options(options: Iterable[Option[T]]) -> Option[list[T]]:
    """Collect every ``Some`` value, or ``Nothing`` at the first empty option."""
    values: list[T] = []
    for option in options:
        if isinstance(option, Nothing):
            return NOTHING
        values.append(option.value)
    return Some(values)


def all_options(*options: Option[Any]) -> Option[tuple[Any, ...]]:
    """Positional variant of :func:`combine_options`."""
    return combine_options(options).map(tuple)


__all__ = [
    "NOTHING",
    "Nothing",
    "Option",
    "Some",
    "all_options",
    "combine_options",
    "from_nullable",
    "nothing",
    "some",
]
