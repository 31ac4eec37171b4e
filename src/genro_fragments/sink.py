# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Sink - the emission contract targeted by every builder.

A sink receives a flat sequence of primitive instructions (open element,
attribute, text, raw markup, nested fragment, close element) and turns it
into something useful: an HTML string, a framework response, or a plain
list of instructions for inspection.

Every ``open_element`` is matched by exactly one ``close_element`` in LIFO
order. Attributes always refer to the most recently opened element.

Position arguments (``seq``) are a cursor local to one render region. Within
a region no two calls share a position. A nested fragment spliced in through
``add_fragment`` starts its own region at position 0.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .fragment import Fragment


class Sink(ABC):
    """Abstract receiver of builder emissions."""

    @abstractmethod
    def open_element(self, seq: int, tag: str) -> None:
        """Begin an element named ``tag``."""

    @abstractmethod
    def close_element(self) -> None:
        """End the most recently opened element."""

    @abstractmethod
    def add_attribute(self, seq: int, name: str, value: Any) -> None:
        """Attach an attribute to the open element."""

    @abstractmethod
    def add_text_content(self, seq: int, text: Any) -> None:
        """Add text content; the sink is responsible for escaping it."""

    @abstractmethod
    def add_raw_content(self, seq: int, markup: str) -> None:
        """Add markup that is written as-is."""

    @abstractmethod
    def add_fragment(self, seq: int, fragment: Fragment) -> None:
        """Splice in the output of another fragment."""


class RecordingSink(Sink):
    """Sink that records every instruction as a tuple.

    Instructions:
        - ``('open', seq, tag)``
        - ``('attr', seq, name, value)``
        - ``('text', seq, text)``
        - ``('raw', seq, markup)``
        - ``('fragment', seq)`` ... ``('end_fragment',)``
        - ``('close',)``

    Nested fragments are expanded inline between the two fragment markers,
    so two renders of the same builder can be compared with ``==``.

    Example:
        >>> sink = RecordingSink()
        >>> Element('p', 'Hi').render()(sink)
        2
        >>> sink.instructions
        [('open', 0, 'p'), ('text', 1, 'Hi'), ('close',)]
    """

    def __init__(self) -> None:
        self.instructions: list[tuple[Any, ...]] = []

    def open_element(self, seq: int, tag: str) -> None:
        self.instructions.append(('open', seq, tag))

    def close_element(self) -> None:
        self.instructions.append(('close',))

    def add_attribute(self, seq: int, name: str, value: Any) -> None:
        self.instructions.append(('attr', seq, name, value))

    def add_text_content(self, seq: int, text: Any) -> None:
        self.instructions.append(('text', seq, text))

    def add_raw_content(self, seq: int, markup: str) -> None:
        self.instructions.append(('raw', seq, markup))

    def add_fragment(self, seq: int, fragment: Fragment) -> None:
        self.instructions.append(('fragment', seq))
        fragment(self)
        self.instructions.append(('end_fragment',))

    def tags(self) -> list[str]:
        """Return the opened tag names in emission order."""
        return [ins[2] for ins in self.instructions if ins[0] == 'open']

    def attributes(self, tag: str | None = None) -> list[tuple[str, Any]]:
        """Return (name, value) pairs, optionally only those of ``tag`` elements."""
        result = []
        stack: list[str] = []
        for ins in self.instructions:
            kind = ins[0]
            if kind == 'open':
                stack.append(ins[2])
            elif kind == 'close':
                stack.pop()
            elif kind == 'attr' and (tag is None or stack[-1] == tag):
                result.append((ins[2], ins[3]))
        return result
