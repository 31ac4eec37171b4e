# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlRenderer - a sink that turns an emission sequence into an HTML string.

Attribute values are written according to their type:

- ``None`` or ``False``: the attribute is omitted
- ``True``: the bare attribute name (``<option selected>``)
- anything else: ``str(value)``, HTML-escaped

Text content is escaped, raw content is written verbatim, and void tags
never get an end tag.

Example:
    >>> render_html(Element('p').class_('lead').text('a < b'))
    '<p class="lead">a &lt; b</p>'
"""

from __future__ import annotations

import logging
from html import escape
from typing import TYPE_CHECKING, Any, Callable, Mapping

from .builders.html import VOID_ELEMENTS
from .exceptions import RenderError
from .fragment import as_fragment
from .sink import Sink

if TYPE_CHECKING:
    from .fragment import Fragment

logger = logging.getLogger(__name__)


class HtmlRenderer(Sink):
    """Sink writing HTML text.

    Args:
        void_elements: Tag names closed without an end tag. Defaults to
            the HTML5 void elements.

    Raises:
        RenderError: When the emission breaks stack discipline (an attribute
            after content, a close with nothing open, or unclosed elements
            at :meth:`getvalue`).
    """

    def __init__(self, void_elements: frozenset[str] | None = None) -> None:
        self.void_elements = VOID_ELEMENTS if void_elements is None else void_elements
        self._parts: list[str] = []
        self._stack: list[str] = []
        self._start_tag_open = False

    def _finish_start_tag(self) -> None:
        if self._start_tag_open:
            self._parts.append('>')
            self._start_tag_open = False

    def open_element(self, seq: int, tag: str) -> None:
        self._finish_start_tag()
        self._parts.append(f"<{tag}")
        self._stack.append(tag)
        self._start_tag_open = True

    def close_element(self) -> None:
        if not self._stack:
            raise RenderError("close_element() with no open element")
        self._finish_start_tag()
        tag = self._stack.pop()
        if tag not in self.void_elements:
            self._parts.append(f"</{tag}>")

    def add_attribute(self, seq: int, name: str, value: Any) -> None:
        if not self._start_tag_open:
            raise RenderError(f"attribute '{name}' added outside of a start tag")
        if value is None or value is False:
            return
        if value is True:
            self._parts.append(f" {name}")
        else:
            self._parts.append(f' {name}="{escape(str(value), quote=True)}"')

    def add_text_content(self, seq: int, text: Any) -> None:
        self._finish_start_tag()
        if text is not None:
            self._parts.append(escape(str(text), quote=False))

    def add_raw_content(self, seq: int, markup: str) -> None:
        self._finish_start_tag()
        if markup is not None:
            self._parts.append(markup)

    def add_fragment(self, seq: int, fragment: Fragment) -> None:
        self._finish_start_tag()
        fragment(self)

    def getvalue(self) -> str:
        """Return the HTML written so far.

        Raises:
            RenderError: If elements are still open.
        """
        if self._stack:
            raise RenderError(f"unclosed elements: {', '.join(self._stack)}")
        self._finish_start_tag()
        return ''.join(self._parts)


def render_html(renderable: Any, void_elements: frozenset[str] | None = None) -> str:
    """Render a builder or fragment to an HTML string.

    Args:
        renderable: Any builder or :class:`~genro_fragments.fragment.Fragment`.
        void_elements: Optional override of the void tag set.

    Raises:
        TypeError: If ``renderable`` is not a builder or fragment.
    """
    fragment = as_fragment(renderable)
    renderer = HtmlRenderer(void_elements)
    fragment(renderer)
    result = renderer.getvalue()
    logger.debug("Rendered %s to %d characters", type(renderable).__name__, len(result))
    return result


def render_template(template: Callable[[Any], Any], model: Any) -> str:
    """Render ``template(model)`` to an HTML string.

    Raises:
        ValueError: If ``model`` is None.
    """
    if model is None:
        raise ValueError("model must not be None")
    return render_html(template(model))


def render_component(
    component: Callable[..., Any],
    parameters: Mapping[str, Any] | None = None,
) -> str:
    """Render a component, a callable returning a builder, to HTML.

    Args:
        component: Called with ``parameters`` as keyword arguments.
        parameters: Optional keyword arguments for the component.
    """
    return render_html(component(**(parameters or {})))
