# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SelectBuilder - fluent builders for ``<select>`` markup.

:class:`SelectBuilder` takes options by hand, with optional ``<optgroup>``
sections::

    (SelectBuilder('country')
        .opt_group('Europe')
        .option('it', 'Italy')
        .option('fr', 'France', selected=True)
        .opt_group('Asia')          # closes 'Europe'
        .option('jp', 'Japan')
        .end_group())

:class:`CollectionSelectBuilder` projects a collection into options, with
optional grouping by key and a leading placeholder::

    (CollectionSelectBuilder(cities, 'city')
        .value(lambda c: c.code)
        .text(lambda c: c.name)
        .group_by(lambda c: c.country)
        .placeholder('Choose a city'))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, TypeVar

from .base import AttributeBuilder

if TYPE_CHECKING:
    from ..sink import Sink

T = TypeVar('T')


@dataclass
class Option:
    """A leaf ``<option>``. A ``None`` value omits the value attribute."""

    value: str | None
    text: str
    selected: bool = False
    disabled: bool = False

    def build(self, sink: Sink, seq: int) -> int:
        sink.open_element(seq, 'option')
        seq += 1
        if self.value is not None:
            sink.add_attribute(seq, 'value', self.value)
            seq += 1
        if self.selected:
            sink.add_attribute(seq, 'selected', True)
            seq += 1
        if self.disabled:
            sink.add_attribute(seq, 'disabled', True)
            seq += 1
        sink.add_text_content(seq, self.text)
        sink.close_element()
        return seq + 1


@dataclass
class OptGroup:
    """An ``<optgroup>`` holding leaf options only."""

    label: str
    disabled: bool = False
    options: list[Option] = field(default_factory=list)

    def build(self, sink: Sink, seq: int) -> int:
        sink.open_element(seq, 'optgroup')
        sink.add_attribute(seq + 1, 'label', self.label)
        seq += 2
        if self.disabled:
            sink.add_attribute(seq, 'disabled', True)
            seq += 1
        for option in self.options:
            seq = option.build(sink, seq)
        sink.close_element()
        return seq


class _SelectBase(AttributeBuilder):
    """Select-level attributes shared by both select builders."""

    def __init__(self, name: str | None = None) -> None:
        super().__init__()
        if name is not None:
            self._attributes['name'] = name

    def name(self, name: str):
        """Set the ``name`` attribute."""
        self._attributes['name'] = name
        return self

    def _flag(self, attribute: str, on: bool):
        if on:
            self._attributes[attribute] = True
        else:
            self._attributes.pop(attribute, None)
        return self

    def required(self, required: bool = True):
        """Add (or with False, remove) the ``required`` flag."""
        return self._flag('required', required)

    def disabled(self, disabled: bool = True):
        """Add (or with False, remove) the ``disabled`` flag."""
        return self._flag('disabled', disabled)

    def multiple(self, multiple: bool = True):
        """Add (or with False, remove) the ``multiple`` flag."""
        return self._flag('multiple', multiple)

    def size(self, size: int):
        """Set the number of visible rows."""
        self._attributes['size'] = size
        return self

    def _open_select(self, sink: Sink, seq: int) -> int:
        sink.open_element(seq, 'select')
        return self._emit_attributes(sink, seq + 1)


class SelectBuilder(_SelectBase):
    """Select built from options supplied by hand.

    Options added while a group is open belong to that group. Opening a new
    group closes the current one; rendering treats a still-open group as
    closed without modifying the builder.
    """

    def __init__(self, name: str | None = None) -> None:
        super().__init__(name)
        self._items: list[Option | OptGroup] = []
        self._group: OptGroup | None = None

    def __repr__(self) -> str:
        return f"SelectBuilder(items={len(self.items)})"

    @property
    def items(self) -> list[Option | OptGroup]:
        """Top-level items as they will be rendered, open group included."""
        if self._group is None:
            return list(self._items)
        return [*self._items, self._group]

    def option(
        self,
        value: str | None,
        text: str,
        selected: bool = False,
        disabled: bool = False,
    ) -> SelectBuilder:
        """Append an option to the open group, or to the top level."""
        option = Option(value, text, selected, disabled)
        if self._group is not None:
            self._group.options.append(option)
        else:
            self._items.append(option)
        return self

    def opt_group(self, label: str, disabled: bool = False) -> SelectBuilder:
        """Close the open group, if any, and open a new one."""
        if self._group is not None:
            self._items.append(self._group)
        self._group = OptGroup(label, disabled)
        return self

    def end_group(self) -> SelectBuilder:
        """Close the open group; does nothing if none is open."""
        if self._group is not None:
            self._items.append(self._group)
            self._group = None
        return self

    def build(self, sink: Sink, seq: int) -> int:
        seq = self._open_select(sink, seq)
        for item in self.items:
            seq = item.build(sink, seq)
        sink.close_element()
        return seq


class CollectionSelectBuilder(_SelectBase, Generic[T]):
    """Select whose options are projected from a collection.

    Per item:

    - value: ``value`` selector, or no value attribute when unset or None
    - text: ``text`` selector, or ``str(item)`` when unset or None
    - selected: the ``selected`` predicate if set, otherwise equality of
      the value with ``selected_value``
    - disabled: the ``disabled_option`` predicate

    With ``group_by``, items sharing a key are gathered into one
    ``<optgroup>`` even when they are not adjacent; groups appear in order
    of first occurrence.
    """

    def __init__(self, items: Iterable[T], name: str | None = None) -> None:
        super().__init__(name)
        self._source = items
        self._value: Callable[[T], Any] | None = None
        self._text: Callable[[T], Any] | None = None
        self._selected: Callable[[T], bool] | None = None
        self._selected_value: Any = None
        self._disabled: Callable[[T], bool] | None = None
        self._group_key: Callable[[T], Any] | None = None
        self._placeholder: str | None = None

    def __repr__(self) -> str:
        return f"CollectionSelectBuilder(name={self._attributes.get('name')!r})"

    def value(self, selector: Callable[[T], Any]) -> CollectionSelectBuilder[T]:
        """Select the option value for each item."""
        self._value = selector
        return self

    def text(self, selector: Callable[[T], Any]) -> CollectionSelectBuilder[T]:
        """Select the option label for each item."""
        self._text = selector
        return self

    def selected(self, predicate: Callable[[T], bool]) -> CollectionSelectBuilder[T]:
        """Mark items selected by predicate; takes precedence over selected_value."""
        self._selected = predicate
        return self

    def selected_value(self, value: Any) -> CollectionSelectBuilder[T]:
        """Mark the option whose value equals ``value`` as selected."""
        self._selected_value = value
        return self

    def disabled_option(self, predicate: Callable[[T], bool]) -> CollectionSelectBuilder[T]:
        """Mark items disabled by predicate."""
        self._disabled = predicate
        return self

    def group_by(self, selector: Callable[[T], Any]) -> CollectionSelectBuilder[T]:
        """Group options into ``<optgroup>`` sections labelled by key."""
        self._group_key = selector
        return self

    def placeholder(self, label: str) -> CollectionSelectBuilder[T]:
        """Emit a leading option with an empty value."""
        self._placeholder = label
        return self

    def _option_for(self, item: T) -> Option:
        value = self._value(item) if self._value is not None else None
        text = self._text(item) if self._text is not None else None
        if text is None:
            text = '' if item is None else str(item)

        if self._selected is not None:
            selected = bool(self._selected(item))
        else:
            selected = self._selected_value is not None and value == self._selected_value

        disabled = bool(self._disabled(item)) if self._disabled is not None else False
        return Option(value, text, selected, disabled)

    def _groups(self) -> dict[Any, list[T]]:
        groups: dict[Any, list[T]] = {}
        for item in self._source:
            groups.setdefault(self._group_key(item), []).append(item)
        return groups

    def build(self, sink: Sink, seq: int) -> int:
        seq = self._open_select(sink, seq)

        if self._placeholder is not None:
            seq = Option('', self._placeholder).build(sink, seq)

        if self._group_key is not None:
            for key, members in self._groups().items():
                group = OptGroup(key, options=[self._option_for(m) for m in members])
                seq = group.build(sink, seq)
        else:
            for item in self._source:
                seq = self._option_for(item).build(sink, seq)

        sink.close_element()
        return seq
