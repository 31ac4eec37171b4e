# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""AttributeBuilder - shared attribute, class and style machinery.

Every builder (elements, void elements, tables, selects) accumulates the
same three kinds of markup state before rendering:

- attributes: name -> value, last write wins
- CSS classes: ordered tokens, duplicates allowed, blank tokens dropped
- inline styles: property -> value, last write wins, call order kept

All mutators return ``self`` so calls can be chained::

    >>> Element('div').class_('card', 'shadow').id('main').style('color', 'red')

Attributes are emitted in a fixed order so output is stable and testable:
``id`` first, then ``class``, then ``style``, then the remaining attributes
in insertion order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping, TypeVar

from ..fragment import Fragment

if TYPE_CHECKING:
    from ..sink import Sink

B = TypeVar('B', bound='AttributeBuilder')


def is_blank(value: Any) -> bool:
    """True for None, non-strings and whitespace-only strings."""
    return not isinstance(value, str) or not value.strip()


class AttributeBuilder(ABC):
    """Abstract base class for chainable markup builders.

    Subclasses implement :meth:`build`, which emits the builder into a sink
    starting at position ``seq`` and returns the next free position.
    """

    def __init__(self) -> None:
        self._attributes: dict[str, Any] = {}
        self._classes: list[str] = []
        self._styles: dict[str, str] = {}

    def class_(self: B, *names: str) -> B:
        """Append CSS class tokens; blank tokens are silently dropped."""
        self._classes.extend(name for name in names if not is_blank(name))
        return self

    def class_if(self: B, name: str, condition: bool) -> B:
        """Append ``name`` only when ``condition`` is true."""
        if condition and not is_blank(name):
            self._classes.append(name)
        return self

    def id(self: B, value: str) -> B:
        """Set the ``id`` attribute."""
        self._attributes['id'] = value
        return self

    def attr(self: B, name: str, value: Any) -> B:
        """Set an attribute, replacing any previous value.

        ``None`` is kept as a value and left for the host to omit.
        """
        self._attributes[name] = value
        return self

    def attrs(self: B, attributes: Mapping[str, Any]) -> B:
        """Merge several attributes at once."""
        self._attributes.update(attributes)
        return self

    def data(self: B, name: str, value: Any) -> B:
        """Set a ``data-*`` attribute."""
        self._attributes[f"data-{name}"] = value
        return self

    def style(self: B, prop: str, value: str) -> B:
        """Set one inline style property."""
        self._styles[prop] = value
        return self

    def styles(self: B, styles: Mapping[str, str]) -> B:
        """Merge several inline style properties."""
        self._styles.update(styles)
        return self

    def _emit_attributes(self, sink: Sink, seq: int) -> int:
        """Emit id, class, style and the remaining attributes, in that order."""
        if 'id' in self._attributes:
            sink.add_attribute(seq, 'id', self._attributes['id'])
            seq += 1

        if self._classes:
            sink.add_attribute(seq, 'class', ' '.join(self._classes))
            seq += 1

        if self._styles:
            sink.add_attribute(
                seq, 'style',
                '; '.join(f"{prop}: {value}" for prop, value in self._styles.items())
            )
            seq += 1

        for name, value in self._attributes.items():
            if name == 'id':
                continue
            sink.add_attribute(seq, name, value)
            seq += 1

        return seq

    @abstractmethod
    def build(self, sink: Sink, seq: int) -> int:
        """Emit this builder into ``sink`` and return the next position."""

    def render(self) -> Fragment:
        """Return a replayable fragment for this builder.

        The fragment reads the builder when invoked, not now, and never
        modifies it: rendering twice gives identical output.
        """
        return Fragment(self.build)

    def to_html(self) -> str:
        """Render to an HTML string with the default host."""
        from ..renderer import render_html

        return render_html(self)


def is_node(value: Any) -> bool:
    """True if ``value`` is a builder or a fragment."""
    return isinstance(value, (AttributeBuilder, Fragment))
