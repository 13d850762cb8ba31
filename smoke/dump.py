"""
Verbose debug representation of values.

    >>> var_dump(out, {"a": 1, "b": [None, "x"]})
    array(2) {
      ["a"]=>
      int(1)
      ["b"]=>
      array(2) {
        [0]=>
        NULL
        [1]=>
        string(1) "x"
      }
    }

Objects are printed with a per-Dumper handle (`object(Greeter)#1 (0) {`)
and their instance `__dict__` attributes; slot-only objects show none.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Set

from .buffer import Output

_INDENT = "  "


def _float_repr(value: float) -> str:
    """Whole numbers lose the trailing .0: float(1), float(-0), float(1.5)."""
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value)) if value or math.copysign(1.0, value) > 0 else "-0"
    return repr(value)


class Dumper:
    def __init__(self, out: Output):
        self._out = out
        self._handles: Dict[int, int] = {}
        # ids of containers/objects currently being printed
        self._active: Set[int] = set()

    def handle_of(self, obj: Any) -> int:
        key = id(obj)
        if key not in self._handles:
            self._handles[key] = len(self._handles) + 1
        return self._handles[key]

    def dump(self, value: Any) -> None:
        lines: List[str] = []
        self._emit(value, 0, lines)
        self._out.echo("".join(line + "\n" for line in lines))

    # ------------------------------------------------------------------ #

    def _emit(self, value: Any, depth: int, lines: List[str]) -> None:
        pad = _INDENT * depth
        if value is None:
            lines.append(f"{pad}NULL")
        elif isinstance(value, bool):
            lines.append(f"{pad}bool({'true' if value else 'false'})")
        elif isinstance(value, int):
            lines.append(f"{pad}int({value})")
        elif isinstance(value, float):
            lines.append(f"{pad}float({_float_repr(value)})")
        elif isinstance(value, str):
            lines.append(f'{pad}string({len(value.encode("utf-8"))}) "{value}"')
        elif isinstance(value, (dict, list, tuple)):
            self._emit_array(value, depth, lines)
        else:
            self._emit_object(value, depth, lines)

    def _emit_array(self, value: Any, depth: int, lines: List[str]) -> None:
        pad = _INDENT * depth
        if id(value) in self._active:
            lines.append(f"{pad}*RECURSION*")
            return
        items = list(value.items()) if isinstance(value, dict) else list(enumerate(value))
        lines.append(f"{pad}array({len(items)}) {{")
        self._active.add(id(value))
        try:
            self._emit_entries(items, depth, lines)
        finally:
            self._active.discard(id(value))
        lines.append(f"{pad}}}")

    def _emit_object(self, value: Any, depth: int, lines: List[str]) -> None:
        pad = _INDENT * depth
        if id(value) in self._active:
            lines.append(f"{pad}*RECURSION*")
            return
        props = dict(getattr(value, "__dict__", {}))
        lines.append(
            f"{pad}object({type(value).__name__})#{self.handle_of(value)} ({len(props)}) {{"
        )
        self._active.add(id(value))
        try:
            self._emit_entries(list(props.items()), depth, lines)
        finally:
            self._active.discard(id(value))
        lines.append(f"{pad}}}")

    def _emit_entries(self, items: List[tuple], depth: int, lines: List[str]) -> None:
        inner = _INDENT * (depth + 1)
        for key, val in items:
            label = f"[{key}]" if isinstance(key, int) and not isinstance(key, bool) else f'["{key}"]'
            lines.append(f"{inner}{label}=>")
            self._emit(val, depth + 1, lines)


def var_dump(out: Output, *values: Any, dumper: Dumper | None = None) -> None:
    d = dumper if dumper is not None else Dumper(out)
    for v in values:
        d.dump(v)


__all__ = ["Dumper", "var_dump"]
