"""Message templates with ``{{name}}``, ``{{0}}`` and ``{{@}}`` placeholders.

A message is parsed once into literal and placeholder segments; the
resulting :class:`CompiledTemplate` is reused for every set of arguments.
Unresolved placeholders are left in the output verbatim.
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from reactive_i18n.models import TranslateArgs

_PLACEHOLDER_RE = re.compile(r"\{\{\s*([^{}]+?)\s*\}\}")
_INDEX_RE = re.compile(r"\d+")

_MISSING = object()


def stringify(value: Any) -> str:
    """Coerce a modifier or argument to text.

    Integral floats render as integers so ``0``, ``0.0`` and ``"0"``
    all produce ``"0"``.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Placeholder:
    expr: str
    raw: str  # original "{{ expr }}" text, emitted when unresolved


Segment = str | Placeholder


def _lookup(args: TranslateArgs, expr: str) -> Any:
    is_index = _INDEX_RE.fullmatch(expr) is not None
    if isinstance(args, Mapping):
        value = args.get(expr, _MISSING)
        if value is _MISSING and is_index:
            value = args.get(int(expr), _MISSING)
        return value
    if is_index and isinstance(args, Sequence) and not isinstance(args, str):
        index = int(expr)
        if index < len(args):
            return args[index]
    return _MISSING


class CompiledTemplate:
    """A parsed message; call it with args to render."""

    __slots__ = ("source", "segments")

    def __init__(self, source: str, segments: tuple[Segment, ...]) -> None:
        self.source = source
        self.segments = segments

    def __call__(self, args: TranslateArgs | None = None) -> str:
        parts: list[str] = []
        for segment in self.segments:
            if isinstance(segment, str):
                parts.append(segment)
                continue
            value = _MISSING if args is None else _lookup(args, segment.expr)
            if value is _MISSING or value is None:
                parts.append(segment.raw)
            else:
                parts.append(stringify(value))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"CompiledTemplate({self.source!r})"


def compile_template(template: str) -> CompiledTemplate:
    segments: list[Segment] = []
    pos = 0
    for match in _PLACEHOLDER_RE.finditer(template):
        if match.start() > pos:
            segments.append(template[pos:match.start()])
        segments.append(Placeholder(expr=match.group(1), raw=match.group(0)))
        pos = match.end()
    if pos < len(template):
        segments.append(template[pos:])
    return CompiledTemplate(template, tuple(segments))
