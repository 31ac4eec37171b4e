# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Fragment - a deferred, replayable emission.

Builders are mutated during construction and only read when emitted. A
:class:`Fragment` is the bridge between the two phases: it wraps a callable
``emit(sink, seq) -> int`` and replays it every time it is invoked, so the
same fragment can be rendered any number of times.

Example:
    >>> frag = Element('p', 'Hello').render()
    >>> sink = RecordingSink()
    >>> frag(sink)
    2
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .sink import Sink

EmitFunc = Callable[['Sink', int], int]


@runtime_checkable
class Renderable(Protocol):
    """Anything that can produce a :class:`Fragment` via ``render()``."""

    def render(self) -> Fragment: ...


class Fragment:
    """A deferred emission against a :class:`~genro_fragments.sink.Sink`.

    Calling the fragment starts a new region: positions begin at ``seq``
    (0 by default) and the next free position is returned.
    """

    __slots__ = ('_emit',)

    def __init__(self, emit: EmitFunc) -> None:
        self._emit = emit

    def __call__(self, sink: Sink, seq: int = 0) -> int:
        return self._emit(sink, seq)

    def __repr__(self) -> str:
        return f"Fragment({self._emit!r})"

    def render(self) -> Fragment:
        """A fragment is already rendered."""
        return self

    def build(self, sink: Sink, seq: int) -> int:
        """Splice this fragment into an enclosing region."""
        sink.add_fragment(seq, self)
        return seq + 1

    def combine(self, other: Fragment) -> Fragment:
        """Return a fragment emitting ``self`` then ``other`` in one region."""
        first = self

        def emit(sink: Sink, seq: int) -> int:
            seq = first(sink, seq)
            return other(sink, seq)

        return Fragment(emit)

    def to_html(self) -> str:
        """Render to an HTML string with the default host."""
        from .renderer import render_html

        return render_html(self)

    @classmethod
    def empty(cls) -> Fragment:
        """A fragment that emits nothing."""
        return cls(lambda sink, seq: seq)

    @classmethod
    def concat(cls, nodes: Iterable[Any]) -> Fragment:
        """Emit several builders one after another, with no wrapper element.

        Args:
            nodes: Builders, fragments or any object with ``render()``.
                Materialized immediately so a one-shot iterator can still
                be rendered more than once.

        Raises:
            TypeError: If a node cannot render itself.
        """
        # Fragments splice their own region, everything else emits inline.
        parts = [
            node.build if isinstance(node, Fragment) else as_fragment(node)
            for node in nodes
        ]

        def emit(sink: Sink, seq: int) -> int:
            for part in parts:
                seq = part(sink, seq)
            return seq

        return cls(emit)


def _require_renderable(value: Any) -> None:
    if not isinstance(value, Renderable):
        raise TypeError(
            f"expected a builder or Fragment, not {type(value).__name__}"
        )


def as_fragment(value: Any) -> Fragment:
    """Convert a builder or fragment to a :class:`Fragment`.

    Raises:
        TypeError: If ``value`` cannot render itself.
    """
    if isinstance(value, Fragment):
        return value
    _require_renderable(value)
    return value.render()


def combine(existing: Fragment | None, new: Fragment) -> Fragment:
    """Append ``new`` after ``existing``, which may be None."""
    if existing is None:
        return new
    return existing.combine(new)
