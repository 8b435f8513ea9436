"""Helpers filling items collections from enumerations and iterables."""

from enum import Enum
from typing import Any, Iterable, Optional, Type

from treelocale.i18n.markers import MarkerCodec
from treelocale.i18n.models import LanguageDescriptor
from treelocale.i18n.nodes import ItemsHolder, TextItem


def enum_to_items(
    node: ItemsHolder,
    enum_type: Type[Enum],
    exclusions: Optional[Iterable[Enum]] = None,
) -> None:
    """Replace the items of ``node`` with the members of ``enum_type``.

    Args:
        node: Items-bearing node to fill.
        enum_type: Enumeration whose members become the items, in order.
        exclusions: Members to leave out.
    """
    excluded = list(exclusions or [])
    node.items.clear()
    for member in enum_type:
        if member not in excluded:
            node.items.append(member)


def iterable_to_items(node: ItemsHolder, items: Iterable[Any]) -> None:
    """Replace the items of ``node`` with ``items``."""
    node.items.clear()
    node.items.extend(items)


def languages_to_items(node: ItemsHolder, descriptors: Iterable[LanguageDescriptor]) -> None:
    """Replace the items of ``node`` with one TextItem per language.

    Each item holds the marker of the descriptor's name key, so applying a
    Translator renders the display names, and keeps the descriptor in
    ``value`` for the selection handler.
    """
    iterable_to_items(
        node,
        (
            TextItem(MarkerCodec.encode(descriptor.name_key), value=descriptor)
            for descriptor in descriptors
        ),
    )
