"""Display node model.

A display tree is built from nodes exposing one or more capabilities:

- ContentHolder: a single ``content`` slot (single-slot node)
- ItemsHolder: an index-addressable ``items`` list (multi-slot node, and
  composite when items are nodes themselves)
- ChildrenHolder: an ordered ``children`` list (panel-like composite)

Slot values that are neither ``str`` nor ``Translatable`` are ignored by the
translator. Consumers either use the concrete classes below or mix the
capability bases into their own widget classes.
"""

from typing import Any, Iterable, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class Translatable(Protocol):
    """Content object with a single mutable text property."""

    translatable_text: str


class DisplayNode:
    """Base class of every node in a display tree.

    Attributes:
        name: Optional identifier, only used in reprs and log events.
    """

    def __init__(self, name: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.name = name

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name else ""
        return f"<{type(self).__name__}{label}>"


class ContentHolder(DisplayNode):
    """Node with one content slot."""

    def __init__(self, content: Any = None, **kwargs):
        super().__init__(**kwargs)
        self.content = content

    @property
    def has_content(self) -> bool:
        return self.content is not None and self.content != ""


class ItemsHolder(DisplayNode):
    """Node with an ordered items collection."""

    def __init__(self, items: Optional[Iterable[Any]] = None, **kwargs):
        super().__init__(**kwargs)
        self.items: List[Any] = list(items or [])


class ChildrenHolder(DisplayNode):
    """Node with an ordered list of child nodes."""

    def __init__(self, children: Optional[Iterable[DisplayNode]] = None, **kwargs):
        super().__init__(**kwargs)
        self.children: List[DisplayNode] = list(children or [])


class ContentControl(ContentHolder):
    """Label, button, window title: one text slot."""


class ItemsControl(ItemsHolder):
    """List box, combo box, menu: a list of items."""


class HeaderedItemsControl(ContentHolder, ItemsHolder):
    """Menu item or tree item: a header plus items."""


class Panel(ChildrenHolder):
    """Layout container of child nodes."""


class HeaderedPanel(ContentHolder, ChildrenHolder):
    """Group box or tab: a header plus child nodes."""


class TextItem:
    """Plain Translatable item for use in items collections."""

    def __init__(self, translatable_text: str, value: Any = None):
        self.translatable_text = translatable_text
        self.value = value

    def __str__(self) -> str:
        return self.translatable_text

    def __repr__(self) -> str:
        return f"TextItem({self.translatable_text!r})"
