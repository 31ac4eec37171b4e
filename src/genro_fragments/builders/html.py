# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlFactory - entry point for building HTML fragments fluently.

The module-level :data:`html` instance offers one method per common tag,
with convenience arguments for the usual attributes, plus the table and
select builders. Any other HTML5 tag is reachable through attribute access.

Example:
    Building a small page section::

        from genro_fragments import html

        section = (
            html.section()
            .class_('users')
            .child(html.h2('Users'))
            .child(
                html.table(users)
                .column('Name', lambda u: u.name)
                .column('Email', lambda u: html.a(f"mailto:{u.email}", u.email))
            )
        )
        markup = section.to_html()

Attributes given as ``None`` (e.g. ``html.a()`` without href) are kept on
the builder and omitted by the host when rendering.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from ..fragment import Fragment, Renderable
from .base import is_node
from .element import Element, VoidElement
from .select import CollectionSelectBuilder, SelectBuilder
from .table import CollectionTableBuilder, TableBuilder

# Void elements (self-closing, no content).
VOID_ELEMENTS: frozenset[str] = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'link',
    'meta', 'param', 'source', 'track', 'wbr',
})

# All HTML5 element names reachable through attribute access.
HTML_TAGS: frozenset[str] = VOID_ELEMENTS | frozenset({
    'a', 'abbr', 'address', 'article', 'aside', 'audio', 'b', 'bdi', 'bdo',
    'blockquote', 'body', 'button', 'canvas', 'caption', 'cite', 'code',
    'colgroup', 'data', 'datalist', 'dd', 'del', 'details', 'dfn', 'dialog',
    'div', 'dl', 'dt', 'em', 'fieldset', 'figcaption', 'figure', 'footer',
    'form', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'head', 'header', 'hgroup',
    'html', 'i', 'iframe', 'ins', 'kbd', 'label', 'legend', 'li', 'main',
    'map', 'mark', 'menu', 'meter', 'nav', 'noscript', 'object', 'ol',
    'optgroup', 'option', 'output', 'p', 'picture', 'pre', 'progress', 'q',
    'rp', 'rt', 'ruby', 's', 'samp', 'script', 'search', 'section', 'select',
    'slot', 'small', 'span', 'strong', 'style', 'sub', 'summary', 'sup',
    'svg', 'table', 'tbody', 'td', 'template', 'textarea', 'tfoot', 'th',
    'thead', 'time', 'title', 'tr', 'u', 'ul', 'var', 'video',
})


def _list_items(tag: str, items: Iterable[Any] | None, selector: Callable[[Any], Any] | None) -> Element:
    element = Element(tag)
    if items is None:
        return element
    for item in items:
        value = selector(item) if selector is not None else item
        if is_node(value):
            element.child(Element('li').child(value))
        else:
            element.child(Element('li', None if value is None else str(value)))
    return element


class HtmlFactory:
    """Factory of HTML builders.

    Explicit methods cover the common tags. Tags without a method are
    resolved by :meth:`__getattr__` against :data:`HTML_TAGS`::

        >>> html.kbd('Ctrl')          # Element('kbd', 'Ctrl')
        >>> html.col()                # VoidElement('col')
        >>> html.blink()              # AttributeError

    Attributes:
        VOID_ELEMENTS: Set of void (self-closing) element names.
        ALL_TAGS: Set of all known HTML5 element names.
    """

    VOID_ELEMENTS = VOID_ELEMENTS
    ALL_TAGS = HTML_TAGS

    def __getattr__(self, name: str) -> Callable[..., Element | VoidElement]:
        """Dynamic factory for any known HTML tag.

        Raises:
            AttributeError: If name is not a known HTML tag.
        """
        if name.startswith('_'):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

        if name in HTML_TAGS:
            return self._make_tag_method(name)

        raise AttributeError(f"'{name}' is not a valid HTML tag")

    def _make_tag_method(self, name: str) -> Callable[..., Element | VoidElement]:
        """Create a factory for a specific tag."""
        if name in VOID_ELEMENTS:
            def void_method() -> VoidElement:
                return VoidElement(name)
            return void_method

        def tag_method(content: str | None = None) -> Element:
            return Element(name, content)

        return tag_method

    # Generic

    def element(self, tag: str, content: str | None = None) -> Element:
        return Element(tag, content)

    def void_element(self, tag: str) -> VoidElement:
        return VoidElement(tag)

    # Document structure

    def div(self, content: str | None = None) -> Element:
        return Element('div', content)

    def span(self, content: str | None = None) -> Element:
        return Element('span', content)

    def p(self, content: str | None = None) -> Element:
        return Element('p', content)

    def section(self, content: str | None = None) -> Element:
        return Element('section', content)

    def article(self, content: str | None = None) -> Element:
        return Element('article', content)

    def header(self, content: str | None = None) -> Element:
        return Element('header', content)

    def footer(self, content: str | None = None) -> Element:
        return Element('footer', content)

    def main(self, content: str | None = None) -> Element:
        return Element('main', content)

    def nav(self, content: str | None = None) -> Element:
        return Element('nav', content)

    def aside(self, content: str | None = None) -> Element:
        return Element('aside', content)

    # Headings

    def h1(self, content: str | None = None) -> Element:
        return Element('h1', content)

    def h2(self, content: str | None = None) -> Element:
        return Element('h2', content)

    def h3(self, content: str | None = None) -> Element:
        return Element('h3', content)

    def h4(self, content: str | None = None) -> Element:
        return Element('h4', content)

    def h5(self, content: str | None = None) -> Element:
        return Element('h5', content)

    def h6(self, content: str | None = None) -> Element:
        return Element('h6', content)

    # Text formatting

    def strong(self, content: str | None = None) -> Element:
        return Element('strong', content)

    def em(self, content: str | None = None) -> Element:
        return Element('em', content)

    def small(self, content: str | None = None) -> Element:
        return Element('small', content)

    def mark(self, content: str | None = None) -> Element:
        return Element('mark', content)

    def del_(self, content: str | None = None) -> Element:
        return Element('del', content)

    def ins(self, content: str | None = None) -> Element:
        return Element('ins', content)

    def sub(self, content: str | None = None) -> Element:
        return Element('sub', content)

    def sup(self, content: str | None = None) -> Element:
        return Element('sup', content)

    def code(self, content: str | None = None) -> Element:
        return Element('code', content)

    def pre(self, content: str | None = None) -> Element:
        return Element('pre', content)

    def blockquote(self, content: str | None = None) -> Element:
        return Element('blockquote', content)

    def cite(self, content: str | None = None) -> Element:
        return Element('cite', content)

    def abbr(self, content: str | None = None) -> Element:
        return Element('abbr', content)

    def time(self, content: str | None = None) -> Element:
        return Element('time', content)

    # Links and media

    def a(self, href: str | None = None, content: str | None = None) -> Element:
        return Element('a', content).attr('href', href)

    def img(self, src: str | None = None, alt: str | None = None) -> VoidElement:
        return VoidElement('img').attr('src', src).attr('alt', alt)

    def video(self, src: str | None = None) -> Element:
        return Element('video').attr('src', src)

    def audio(self, src: str | None = None) -> Element:
        return Element('audio').attr('src', src)

    def source(self, src: str | None = None, type: str | None = None) -> VoidElement:
        return VoidElement('source').attr('src', src).attr('type', type)

    def iframe(self, src: str | None = None) -> Element:
        return Element('iframe').attr('src', src)

    def figure(self) -> Element:
        return Element('figure')

    def figcaption(self, content: str | None = None) -> Element:
        return Element('figcaption', content)

    def picture(self) -> Element:
        return Element('picture')

    # Lists

    def ul(self, items: Iterable[Any] | None = None, selector: Callable[[Any], Any] | None = None) -> Element:
        """Create a ``<ul>``, optionally with one ``<li>`` per item.

        The selector may return text or a builder; builders are nested
        inside the ``<li>``.
        """
        return _list_items('ul', items, selector)

    def ol(self, items: Iterable[Any] | None = None, selector: Callable[[Any], Any] | None = None) -> Element:
        """Create an ``<ol>``, optionally with one ``<li>`` per item."""
        return _list_items('ol', items, selector)

    def li(self, content: str | None = None) -> Element:
        return Element('li', content)

    def dl(self) -> Element:
        return Element('dl')

    def dt(self, content: str | None = None) -> Element:
        return Element('dt', content)

    def dd(self, content: str | None = None) -> Element:
        return Element('dd', content)

    # Void elements

    def br(self) -> VoidElement:
        return VoidElement('br')

    def hr(self) -> VoidElement:
        return VoidElement('hr')

    def wbr(self) -> VoidElement:
        return VoidElement('wbr')

    # Forms

    def form(self, action: str | None = None, method: str | None = None) -> Element:
        return Element('form').attr('action', action).attr('method', method)

    def input(
        self,
        type: str | None = None,
        name: str | None = None,
        value: str | None = None,
    ) -> VoidElement:
        return VoidElement('input').attr('type', type).attr('name', name).attr('value', value)

    def textarea(self, name: str | None = None, content: str | None = None) -> Element:
        return Element('textarea', content).attr('name', name)

    def button(self, content: str | None = None, type: str | None = None) -> Element:
        return Element('button', content).attr('type', type or 'button')

    def label(self, content: str | None = None, for_id: str | None = None) -> Element:
        return Element('label', content).attr('for', for_id)

    def fieldset(self) -> Element:
        return Element('fieldset')

    def legend(self, content: str | None = None) -> Element:
        return Element('legend', content)

    def datalist(self) -> Element:
        return Element('datalist')

    def output(self, content: str | None = None) -> Element:
        return Element('output', content)

    def progress(self, value: float | None = None, max: float | None = None) -> Element:
        return Element('progress').attr('value', value).attr('max', max)

    def meter(
        self,
        value: float | None = None,
        min: float | None = None,
        max: float | None = None,
    ) -> Element:
        return Element('meter').attr('value', value).attr('min', min).attr('max', max)

    # Tables and selects

    def table(self, items: Iterable[Any] | None = None) -> TableBuilder | CollectionTableBuilder:
        """Create a table builder; with ``items``, a collection-driven one."""
        if items is None:
            return TableBuilder()
        return CollectionTableBuilder(items)

    def select(
        self,
        items: Iterable[Any] | None = None,
        name: str | None = None,
    ) -> SelectBuilder | CollectionSelectBuilder:
        """Create a select builder; with ``items``, a collection-driven one."""
        if items is None:
            return SelectBuilder(name)
        return CollectionSelectBuilder(items, name)

    # Interactive

    def details(self) -> Element:
        return Element('details')

    def summary(self, content: str | None = None) -> Element:
        return Element('summary', content)

    def dialog(self) -> Element:
        return Element('dialog')

    # Canvas and SVG

    def canvas(self, width: int | None = None, height: int | None = None) -> Element:
        return Element('canvas').attr('width', width).attr('height', height)

    def svg(self, width: int | None = None, height: int | None = None) -> Element:
        return Element('svg').attr('width', width).attr('height', height)

    # Script and style

    def script(self, src: str | None = None, content: str | None = None) -> Element:
        if src is not None:
            return Element('script').attr('src', src)
        return Element('script', content)

    def style_element(self, content: str | None = None) -> Element:
        return Element('style', content)

    def link(self, rel: str | None = None, href: str | None = None) -> VoidElement:
        return VoidElement('link').attr('rel', rel).attr('href', href)

    def meta(self, name: str | None = None, content: str | None = None) -> VoidElement:
        return VoidElement('meta').attr('name', name).attr('content', content)

    # Fragments

    def fragment(self, *nodes: Any) -> Fragment:
        """Concatenate builders with no wrapper element.

        Accepts renderables as arguments or a single iterable of them.
        """
        if len(nodes) == 1 and not isinstance(nodes[0], Renderable):
            return Fragment.concat(nodes[0])
        return Fragment.concat(nodes)

    def each(
        self,
        items: Iterable[Any],
        builder: Callable[..., Any],
        with_index: bool = False,
    ) -> Fragment:
        """Map each item to a builder and concatenate the results.

        With ``with_index`` the builder is called as ``builder(item, index)``.
        """
        if with_index:
            return Fragment.concat(builder(item, i) for i, item in enumerate(items))
        return Fragment.concat(builder(item) for item in items)


html = HtmlFactory()
