# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Fragments - fluent HTML fragment builders with deferred rendering.

Builders describe HTML (elements, tables, selects) through chained calls and
emit it on demand into a sink. The bundled :class:`HtmlRenderer` sink
produces strings; :func:`html_response` wraps them in a Starlette response.

Example:
    >>> from genro_fragments import html
    >>> html.div('Hello').class_('greeting').to_html()
    '<div class="greeting">Hello</div>'
"""

__version__ = "0.1.0"

from .builders import (
    AttributeBuilder,
    CollectionSelectBuilder,
    CollectionTableBuilder,
    Column,
    Element,
    HtmlFactory,
    OptGroup,
    Option,
    SelectBuilder,
    TableBuilder,
    VoidElement,
    html,
)
from .exceptions import FragmentError, InvalidTagError, RenderError
from .fragment import Fragment, Renderable, as_fragment
from .renderer import HtmlRenderer, render_component, render_html, render_template
from .responses import FragmentResponse, html_response, template_response
from .sink import RecordingSink, Sink

__all__ = [
    # Builders
    "AttributeBuilder",
    "Element",
    "VoidElement",
    "TableBuilder",
    "CollectionTableBuilder",
    "Column",
    "SelectBuilder",
    "CollectionSelectBuilder",
    "Option",
    "OptGroup",
    "HtmlFactory",
    "html",
    # Emission
    "Fragment",
    "Renderable",
    "as_fragment",
    "Sink",
    "RecordingSink",
    # Rendering
    "HtmlRenderer",
    "render_html",
    "render_template",
    "render_component",
    "FragmentResponse",
    "html_response",
    "template_response",
    # Exceptions
    "FragmentError",
    "InvalidTagError",
    "RenderError",
]
