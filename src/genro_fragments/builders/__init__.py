# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Builders for HTML fragments - shared base and tag-specific builders."""

from .base import AttributeBuilder
from .element import Element, VoidElement
from .html import HTML_TAGS, VOID_ELEMENTS, HtmlFactory, html
from .select import CollectionSelectBuilder, OptGroup, Option, SelectBuilder
from .table import Column, CollectionTableBuilder, TableBuilder

__all__ = [
    'AttributeBuilder',
    'Element',
    'VoidElement',
    'TableBuilder',
    'CollectionTableBuilder',
    'Column',
    'SelectBuilder',
    'CollectionSelectBuilder',
    'Option',
    'OptGroup',
    'HtmlFactory',
    'html',
    'HTML_TAGS',
    'VOID_ELEMENTS',
]
