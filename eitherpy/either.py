from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, Optional, TypeVar, Union

L = TypeVar("L")
R = TypeVar("R")
A = TypeVar("A")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True)
class Left(Generic[L, R]):
    """The failure case. Every combinator except `map_left` and `swap` returns it untouched."""

    error: L
    tag: ClassVar[str] = "left"
    is_either: ClassVar[bool] = True

    def is_left(self) -> bool: return True
    def is_right(self) -> bool: return False

    def map(self, f: Callable[[R], U]) -> "Either[L, U]":
        return self  # type: ignore[return-value]

    def apply(self, box: "Either[L, A]") -> "Either[L, Any]":
        return self

    def flat_map(self, f: Callable[[R], "Either[L, U]"]) -> "Either[L, U]":
        return self  # type: ignore[return-value]

    def map_left(self, f: Callable[[L], F]) -> "Either[F, R]":
        return Left(f(self.error))

    def swap(self) -> "Either[R, L]":
        return Right(self.error)

    def get_value(self) -> L:
        return self.error

    def or_else(self, default: "Either[L, U]") -> "Either[L, U]":
        return default

    def get_or_else(self, default: U) -> U:
        return default

    def match(self, on_left: Callable[[L], U], on_right: Callable[[R], U]) -> U:
        return on_left(self.error)

    fmap = map
    ap = apply
    bind = flat_map
    __mul__ = apply
    __rshift__ = flat_map
    __or__ = or_else


@dataclass(frozen=True)
class Right(Generic[L, R]):
    """The success case. `L` is carried only so it lines up with `Left` values of the same error type."""

    value: R
    tag: ClassVar[str] = "right"
    is_either: ClassVar[bool] = True

    def is_left(self) -> bool: return False
    def is_right(self) -> bool: return True

    def map(self, f: Callable[[R], U]) -> "Either[L, U]":
        return Right(f(self.value))

    def apply(self, box: "Either[L, A]") -> "Either[L, Any]":
        if box.is_left():
            return box
        return box.map(self.value)  # type: ignore[arg-type]

    def flat_map(self, f: Callable[[R], "Either[L, U]"]) -> "Either[L, U]":
        return f(self.value)

    def map_left(self, f: Callable[[L], F]) -> "Either[F, R]":
        return self  # type: ignore[return-value]

    def swap(self) -> "Either[R, L]":
        return Left(self.value)

    def get_value(self) -> R:
        return self.value

    def or_else(self, default: "Either[L, R]") -> "Either[L, R]":
        return self

    def get_or_else(self, default: R) -> R:
        return self.value

    def match(self, on_left: Callable[[L], U], on_right: Callable[[R], U]) -> U:
        return on_right(self.value)

    fmap = map
    ap = apply
    bind = flat_map
    __mul__ = apply
    __rshift__ = flat_map
    __or__ = or_else


Either = Union[Left[L, R], Right[L, R]]


def left(value: L) -> Either[L, Any]:
    return Left(value)


def right(value: R) -> Either[Any, R]:
    return Right(value)


pack = right


def is_none(value: Any) -> bool:
    return value is None


def is_either(value: Any) -> bool:
    """True for `Left`/`Right` instances, judged by the `is_either` marker rather than by class."""
    if value is None or isinstance(value, type):
        return False
    return getattr(value, "is_either", False) is True


def is_left(value: Any) -> bool:
    """True only for a `Left` whose payload is not None.

    `left(None)` is an Either but is reported by neither `is_left` nor
    `is_right`. Use `value.is_left()` to read the tag alone.
    """
    return is_either(value) and value.match(lambda e: not is_none(e), lambda _: False)


def is_right(value: Any) -> bool:
    """True only for a `Right` whose payload is not None (see `is_left`)."""
    return is_either(value) and value.match(lambda _: False, lambda v: not is_none(v))


def from_nullable(value: Optional[R], error: L) -> Either[L, R]:
    return Right(value) if value is not None else Left(error)  # type: ignore[arg-type]


def attempt(thunk: Callable[[], R], on_error: Optional[Callable[[Exception], L]] = None) -> Either[Any, R]:
    """Run `thunk`, turning a raised `Exception` into a `Left`.

    The exception itself is the error payload unless `on_error` maps it to
    something else. Only `Exception` subclasses are caught; interpreter
    exits and keyboard interrupts still propagate.
    """
    try:
        return Right(thunk())
    except Exception as ex:
        return Left(on_error(ex) if on_error is not None else ex)
