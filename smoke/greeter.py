from __future__ import annotations

from typing import Optional

from .buffer import Output


class Greeter:
    """Stateless greeter; `is_great` returns self so calls can be chained."""

    __slots__ = ("_out",)

    # pinned output label, independent of the Python class name
    METHOD = "phpdbg::isGreat"

    def __init__(self, out: Output):
        self._out = out

    def is_great(self, greeting: Optional[str] = None) -> "Greeter":
        # None formats as an empty string, not "None"
        self._out.printf("%s: %s\n", self.METHOD, "" if greeting is None else greeting)
        return self


__all__ = ["Greeter"]
