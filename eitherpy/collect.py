from __future__ import annotations
from typing import Any, Callable, Iterable, List, Tuple, TypeVar

from .either import Either, Right

L = TypeVar("L")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def sequence(items: Iterable[Either[L, A]]) -> Either[L, List[A]]:
    """Collect the values of an iterable of Eithers, stopping at the first Left."""
    out: List[A] = []
    for e in items:
        if e.is_left():
            return e  # type: ignore[return-value]
        out.append(e.value)  # type: ignore[union-attr]
    return Right(out)


def traverse(items: Iterable[A], f: Callable[[A], Either[L, B]]) -> Either[L, List[B]]:
    return sequence(f(x) for x in items)


def map2(a: Either[L, A], b: Either[L, B], f: Callable[[A, B], C]) -> Either[L, C]:
    # a is checked before b, same precedence as apply
    if a.is_left():
        return a  # type: ignore[return-value]
    if b.is_left():
        return b  # type: ignore[return-value]
    return Right(f(a.value, b.value))  # type: ignore[union-attr]


def lefts(items: Iterable[Either[L, Any]]) -> List[L]:
    return [e.error for e in items if e.is_left()]  # type: ignore[union-attr]


def rights(items: Iterable[Either[Any, A]]) -> List[A]:
    return [e.value for e in items if e.is_right()]  # type: ignore[union-attr]


def partition(items: Iterable[Either[L, A]]) -> Tuple[List[L], List[A]]:
    ls: List[L] = []
    rs: List[A] = []
    for e in items:
        if e.is_left():
            ls.append(e.error)  # type: ignore[union-attr]
        else:
            rs.append(e.value)  # type: ignore[union-attr]
    return ls, rs
