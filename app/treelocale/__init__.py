"""treelocale - key-based localization for display node trees.

Resolves translation keys through a primary and a fallback catalog and
applies the results in place across a tree of display nodes.

Subpackages:
- configuration: Settings management (settings, LocalizationSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Catalogs, key resolution, marker syntax, tree walking, translation
"""

from treelocale.i18n import (
    ActiveLanguageContext,
    Catalog,
    CatalogLoader,
    KeyResolver,
    LanguageDescriptor,
    LanguageSwitch,
    LocalizationService,
    MarkerCodec,
    Translator,
    TreeWalker,
    create_localizer,
)

__version__ = "1.0.0"

__all__ = [
    "ActiveLanguageContext",
    "Catalog",
    "CatalogLoader",
    "KeyResolver",
    "LanguageDescriptor",
    "LanguageSwitch",
    "LocalizationService",
    "MarkerCodec",
    "Translator",
    "TreeWalker",
    "create_localizer",
]
