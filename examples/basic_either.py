"""
Basic Either: composition, error handling, and instrumentation.

Run: python examples/basic_either.py
"""
from eitherpy import (
    Either,
    left,
    right,
    attempt,
    traverse,
    instrument,
    ConsoleLogger,
)


def parse_port(raw: str) -> Either[str, int]:
    return (
        attempt(lambda: int(raw), lambda ex: f"bad:{type(ex).__name__}")
        .flat_map(lambda n: right(n) if 0 < n < 65536 else left(f"out of range: {n}"))
    )


def main():
    logger = ConsoleLogger(level="INFO")

    # Compose with map/flat_map; a Left short-circuits the rest of the chain
    doubled = parse_port("4000").map(lambda p: p * 2)
    print("doubled =>", doubled)                                   # Right(value=8000)

    # Recover with or_else / get_or_else, or leave the context with match
    fallback = parse_port("http").or_else(right(80))
    print("fallback =>", fallback.get_or_else(0))                  # 80
    print("match =>", parse_port("70000").match(lambda e: f"error: {e}", str))

    # Applicative style: both sides must be Right
    url = right(lambda host: lambda port: f"{host}:{port}") * right("localhost") * parse_port("8080")
    print("url =>", url)                                           # Right(value='localhost:8080')

    # Add logging via instrumentation with tags
    checked = instrument("ports.parse", lambda xs: traverse(xs, parse_port), tags={"component": "demo"}, logger=logger)
    print("all ports =>", checked(["80", "443"]))                  # Right(value=[80, 443])
    print("bad ports =>", checked(["80", "x"]))                    # Left(error='bad:ValueError')


if __name__ == "__main__":
    main()
