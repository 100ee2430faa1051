from __future__ import annotations
import functools
import time
from typing import Any, Callable, Optional, TypeVar

from .either import Either
from .logger import ConsoleLogger

L = TypeVar('L'); R = TypeVar('R')


def instrument(
    name: str,
    fn: Callable[..., Either[L, R]],
    tags: dict[str, str] | None = None,
    logger: Optional[ConsoleLogger] = None,
) -> Callable[..., Either[L, R]]:
    """Add logging around a function that returns an Either.

    The wrapped function is called with the same arguments and its result is
    returned untouched. With a logger, every call emits a ``start`` record, a
    ``fail`` record when the result is a ``Left``, a ``die`` record when the
    function raises (the exception is re-raised), and an ``end`` record
    carrying the call duration and the tags.

    Args:
        name: Operation name used in the log messages
        fn: The Either-returning function to wrap
        tags: Optional metadata fields attached to the ``end`` record
        logger: Where to write; without one the wrapper only calls through

    Returns:
        A function with the same call signature as ``fn``

    Example:
        ```python
        parse = instrument(
            "config.parse_port",
            parse_port,
            tags={"component": "config"},
            logger=ConsoleLogger(level="DEBUG"),
        )
        port = parse("8080").get_or_else(80)
        ```
    """
    @functools.wraps(fn)
    def run(*args: Any, **kwargs: Any) -> Either[L, R]:
        if logger is None:
            return fn(*args, **kwargs)
        logger.info(f"start {name}")
        t0 = time.perf_counter()
        try:
            res = fn(*args, **kwargs)
            logger.outcome(name, res)
            return res
        except BaseException as ex:
            logger.error(f"die {name}: {ex}")
            raise
        finally:
            fields = dict(tags or {})
            fields["duration_ms"] = round(max(0.0, time.perf_counter() - t0) * 1000, 3)
            logger.write("INFO", f"end {name}", fields)
    return run
