# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element and VoidElement - fluent builders for single HTML tags.

Example:
    Building a card::

        card = (
            Element('div')
            .class_('card')
            .child(Element('h1', 'Title'))
            .child(Element('p', 'Body text'))
        )
        html = card.to_html()
        # <div class="card"><h1>Title</h1><p>Body text</p></div>

Content emission order inside an element is fixed: text, raw markup, the
content fragment (built from ``content()`` and non-Element ``child()``
calls), then child elements in append order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from ..exceptions import InvalidTagError
from ..fragment import Fragment, as_fragment, combine
from .base import AttributeBuilder, is_blank

if TYPE_CHECKING:
    from ..sink import Sink


def _check_tag(tag: Any) -> str:
    if is_blank(tag):
        raise InvalidTagError(f"Invalid tag name: {tag!r}")
    return tag


class VoidElement(AttributeBuilder):
    """A tag that cannot hold content, such as ``br``, ``img`` or ``input``.

    It has the attribute, class and style methods of :class:`Element` and
    nothing else: there is no way to give it text or children.
    """

    def __init__(self, tag: str) -> None:
        super().__init__()
        self._tag = _check_tag(tag)

    @property
    def tag(self) -> str:
        return self._tag

    def __repr__(self) -> str:
        return f"VoidElement({self._tag!r})"

    def build(self, sink: Sink, seq: int) -> int:
        sink.open_element(seq, self._tag)
        seq = self._emit_attributes(sink, seq + 1)
        sink.close_element()
        return seq


class Element(AttributeBuilder):
    """A non-void HTML element with content and children.

    Args:
        tag: The tag name, e.g. ``'div'``. Must not be blank.
        content: Optional initial text content.

    Raises:
        InvalidTagError: If ``tag`` is empty or whitespace.
    """

    def __init__(self, tag: str, content: str | None = None) -> None:
        super().__init__()
        self._tag = _check_tag(tag)
        self._text: str | None = content
        self._raw: str | None = None
        self._fragment: Fragment | None = None
        self._children: list[Element] = []

    @property
    def tag(self) -> str:
        return self._tag

    def __repr__(self) -> str:
        return f"Element({self._tag!r}, children={len(self._children)})"

    def text(self, content: str | None) -> Element:
        """Set or replace the text content. Escaping is left to the sink."""
        self._text = content
        return self

    def raw(self, markup: str | None) -> Element:
        """Set or replace raw markup, written unescaped.

        The caller is responsible for the markup being safe.
        """
        self._raw = markup
        return self

    def content(self, fragment: Any) -> Element:
        """Set or replace the content fragment.

        Args:
            fragment: A :class:`Fragment` or any builder.
        """
        self._fragment = as_fragment(fragment)
        return self

    def child(self, *nodes: Any) -> Element:
        """Add children.

        Elements go to the children list. Void elements, tables, selects and
        fragments are appended to the content fragment, in call order.

        Raises:
            TypeError: If a node is not a builder or fragment.
        """
        for node in nodes:
            if isinstance(node, Element):
                self._children.append(node)
            else:
                self._fragment = combine(self._fragment, as_fragment(node))
        return self

    def children(self, *children: Element | Iterable[Element]) -> Element:
        """Append many child elements, from arguments or from an iterable."""
        for item in children:
            if isinstance(item, Element):
                self._children.append(item)
            elif isinstance(item, AttributeBuilder):
                raise TypeError(
                    f"children() accepts Element only, not {type(item).__name__}"
                )
            else:
                for element in item:
                    if not isinstance(element, Element):
                        raise TypeError(
                            f"children() accepts Element only, "
                            f"not {type(element).__name__}"
                        )
                    self._children.append(element)
        return self

    def build(self, sink: Sink, seq: int) -> int:
        sink.open_element(seq, self._tag)
        seq = self._emit_attributes(sink, seq + 1)

        if self._text is not None:
            sink.add_text_content(seq, self._text)
            seq += 1

        if self._raw is not None:
            sink.add_raw_content(seq, self._raw)
            seq += 1

        if self._fragment is not None:
            sink.add_fragment(seq, self._fragment)
            seq += 1

        for child in self._children:
            seq = child.build(sink, seq)

        sink.close_element()
        return seq
