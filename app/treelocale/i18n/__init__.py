"""i18n system - key resolution and in-place translation of display trees.

Main components:
- models: Catalog, CatalogId, LanguageDescriptor
- loader: CatalogLoader, YAMLCatalogLoader, DictCatalogLoader
- markers: MarkerCodec for the {$key$} syntax
- resolver: KeyResolver with primary and fallback tiers
- nodes: DisplayNode capabilities and concrete node classes
- walker: TreeWalker flattening display trees
- translator: Translator applying translations in place
- context: ActiveLanguageContext and implementations
- switch: LanguageSwitch
- selection: enum_to_items, iterable_to_items, languages_to_items
- service / factory: LocalizationService, create_localizer
"""

from treelocale.i18n.context import (
    ActiveLanguageContext,
    SettingsLanguageContext,
    SimpleLanguageContext,
)
from treelocale.i18n.errors import CatalogLoadError, LocalizationError, TreeCycleError
from treelocale.i18n.loader import CatalogLoader, DictCatalogLoader, YAMLCatalogLoader
from treelocale.i18n.markers import MarkerCodec
from treelocale.i18n.models import Catalog, CatalogId, LanguageDescriptor
from treelocale.i18n.nodes import (
    ChildrenHolder,
    ContentControl,
    ContentHolder,
    DisplayNode,
    HeaderedItemsControl,
    HeaderedPanel,
    ItemsControl,
    ItemsHolder,
    Panel,
    TextItem,
    Translatable,
)
from treelocale.i18n.resolver import KeyResolver
from treelocale.i18n.selection import enum_to_items, iterable_to_items, languages_to_items
from treelocale.i18n.service import LocalizationService
from treelocale.i18n.switch import LanguageSwitch
from treelocale.i18n.translator import Translator
from treelocale.i18n.walker import TreeWalker
from treelocale.i18n.factory import create_localizer

__all__ = [
    "ActiveLanguageContext",
    "SettingsLanguageContext",
    "SimpleLanguageContext",
    "CatalogLoadError",
    "LocalizationError",
    "TreeCycleError",
    "CatalogLoader",
    "DictCatalogLoader",
    "YAMLCatalogLoader",
    "MarkerCodec",
    "Catalog",
    "CatalogId",
    "LanguageDescriptor",
    "ChildrenHolder",
    "ContentControl",
    "ContentHolder",
    "DisplayNode",
    "HeaderedItemsControl",
    "HeaderedPanel",
    "ItemsControl",
    "ItemsHolder",
    "Panel",
    "TextItem",
    "Translatable",
    "KeyResolver",
    "enum_to_items",
    "iterable_to_items",
    "languages_to_items",
    "LocalizationService",
    "LanguageSwitch",
    "Translator",
    "TreeWalker",
    "create_localizer",
]
