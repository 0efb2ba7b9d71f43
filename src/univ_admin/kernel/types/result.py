"""Result[T, E] monad – Ok and Err variants.

Expected failures are returned as ``Err`` instead of being raised, and
fallible steps are sequenced with :meth:`Ok.and_then`::

    result = (
        Username.create(raw)
        .and_then(lambda username: repository_lookup(username))
        .map(lambda user: user.id)
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, Iterable, NoReturn, TypeVar

from univ_admin.kernel.errors.functional import UnwrapResultError

if TYPE_CHECKING:
    from univ_admin.kernel.types.option import Option

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
R = TypeVar("R")


class Ok(Generic[T]):
    """Successful result variant."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapResultError("Attempted to unwrap_err a Result.Ok value", cause=self._value)

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def unwrap_or_else(self, func: Callable[[Any], T]) -> T:  # noqa: ARG002
        return self._value

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        return Ok(func(self._value))

    def map_err(self, func: Callable[[Any], Any]) -> "Ok[T]":  # noqa: ARG002
        return self

    def and_then(self, func: "Callable[[T], Result[U, E]]") -> "Result[U, E]":
        return func(self._value)

    flat_map = and_then

    def match(self, *, ok: Callable[[T], R], err: Callable[[Any], R]) -> R:  # noqa: ARG002
        return ok(self._value)

    def tap(self, func: Callable[[T], Any]) -> "Ok[T]":
        func(self._value)
        return self

    def tap_err(self, func: Callable[[Any], Any]) -> "Ok[T]":  # noqa: ARG002
        return self

    def ok_value(self) -> "Option[T]":
        from univ_admin.kernel.types.option import Some

        return Some(self._value)

    def err_value(self) -> "Option[Any]":
        from univ_admin.kernel.types.option import NOTHING

        return NOTHING

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ok):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("Ok", self._value))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err(Generic[E]):
    """Error result variant."""

    __slots__ = ("_error",)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def error(self) -> E:
        return self._error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapResultError(cause=self._error)

    def unwrap_err(self) -> E:
        return self._error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        return func(self._error)

    def map(self, func: Callable[[Any], Any]) -> "Err[E]":  # noqa: ARG002
        return self

    def map_err(self, func: Callable[[E], F]) -> "Err[F]":
        return Err(func(self._error))

    def and_then(self, func: Callable[[Any], Any]) -> "Err[E]":  # noqa: ARG002
        return self

    flat_map = and_then

    def match(self, *, ok: Callable[[Any], R], err: Callable[[E], R]) -> R:  # noqa: ARG002
        return err(self._error)

    def tap(self, func: Callable[[Any], Any]) -> "Err[E]":  # noqa: ARG002
        return self

    def tap_err(self, func: Callable[[E], Any]) -> "Err[E]":
        func(self._error)
        return self

    def ok_value(self) -> "Option[Any]":
        from univ_admin.kernel.types.option import NOTHING

        return NOTHING

    def err_value(self) -> "Option[E]":
        from univ_admin.kernel.types.option import Some

        return Some(self._error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Err):
            return False
        return self._error == other._error

    def __hash__(self) -> int:
        return hash(("Err", self._error))

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


type Result[T, E] = Ok[T] | Err[E]


def ok(value: T = None) -> Ok[T]:  # type: ignore[assignment]
    """Build an ``Ok``; ``ok()`` stands for a successful ``None`` outcome."""
    return Ok(value)


def err(error: E) -> Err[E]:
    """Build an ``Err`` carrying *error*."""
    return Err(error)


def combine_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect every ``Ok`` value, or return the first ``Err`` met left-to-right."""
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def all_results(*results: Result[Any, E]) -> Result[tuple[Any, ...], E]:
    """Positional variant of :func:`combine_results`.

    ``all_results(ok("a"), ok(1))`` yields ``Ok(("a", 1))`` so callers can
    unpack heterogeneous values by position.
    """
    combined = combine_results(results)
    if isinstance(combined, Err):
        return combined
    return Ok(tuple(combined.value))


def from_throwable(func: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """Call *func*; a raised exception is returned verbatim as ``Err``."""
    try:
        return Ok(func(*args, **kwargs))
    except Exception as exc:  # noqa: BLE001
        return Err(exc)


async def from_awaitable(awaitable: Awaitable[T]) -> Result[T, Exception]:
    """Await *awaitable*; a raised exception is returned verbatim as ``Err``."""
    try:
        return Ok(await awaitable)
    except Exception as exc:  # noqa: BLE001
        return Err(exc)


__all__ = [
    "Err",
    "Ok",
    "Result",
    "all_results",
    "combine_results",
    "err",
    "from_awaitable",
    "from_throwable",
    "ok",
]
