from __future__ import annotations

from typing import Iterable, Iterator


def values() -> Iterator[int]:
    """Lazily produce a single int: ((1 + 1) + 2) << 3."""
    var = 1 + 1
    var += 2
    var <<= 3

    def foo() -> None:
        pass

    foo()

    yield var


def drain(it: Iterable[object]) -> int:
    """Consume `it` to exhaustion, discarding values. Returns how many were seen."""
    n = 0
    for _ in it:
        n += 1
    return n


__all__ = ["values", "drain"]
