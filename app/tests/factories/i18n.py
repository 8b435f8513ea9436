"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- Catalog
- LanguageDescriptor
- Loaders and language contexts
- Small display trees
"""

from typing import Dict, List, Optional

from treelocale.i18n import (
    Catalog,
    CatalogId,
    ContentControl,
    DictCatalogLoader,
    ItemsControl,
    KeyResolver,
    LanguageDescriptor,
    Panel,
    SimpleLanguageContext,
    TextItem,
)


def make_catalog(
    language: str = "en-US",
    entries: Optional[Dict[str, str]] = None,
    namespace: str = "app",
) -> Catalog:
    """Create a Catalog instance.

    Args:
        language: Culture code of the catalog.
        entries: Key to text mapping.
        namespace: Resource namespace.

    Returns:
        Catalog instance.
    """
    if entries is None:
        entries = {
            "greeting": "Hello",
            "farewell": "Goodbye",
        }
    return Catalog(
        catalog_id=CatalogId(namespace=namespace, language=language),
        entries=entries,
        source="factory",
    )


def make_language_descriptor(culture: str = "fr-FR") -> LanguageDescriptor:
    """Create a LanguageDescriptor named by ``language.<culture>``."""
    return LanguageDescriptor.from_culture(culture)


def make_languages(cultures: Optional[List[str]] = None) -> List[LanguageDescriptor]:
    return [
        make_language_descriptor(culture)
        for culture in (cultures or ["en-US", "fr-FR"])
    ]


def make_loader(
    primary: Optional[Dict[str, str]] = None,
    fallback: Optional[Dict[str, str]] = None,
    language: str = "fr-FR",
    fallback_language: str = "en-US",
    namespace: str = "app",
) -> DictCatalogLoader:
    """Create a DictCatalogLoader with up to two bundles.

    A bundle passed as None is left out, so loading it fails.
    """
    loader = DictCatalogLoader()
    if primary is not None:
        loader.add_bundle(namespace, language, primary)
    if fallback is not None:
        loader.add_bundle(namespace, fallback_language, fallback)
    return loader


def make_context(
    language: str = "fr-FR",
    fallback_language: str = "en-US",
    namespace: str = "app",
    languages: Optional[List[LanguageDescriptor]] = None,
    on_persist=None,
) -> SimpleLanguageContext:
    return SimpleLanguageContext(
        language=language,
        fallback_language=fallback_language,
        namespace=namespace,
        languages=languages if languages is not None else make_languages(),
        on_persist=on_persist,
    )


def make_resolver(
    primary: Optional[Dict[str, str]] = None,
    fallback: Optional[Dict[str, str]] = None,
    language: str = "fr-FR",
    fallback_language: str = "en-US",
) -> KeyResolver:
    """Create a KeyResolver over in-memory primary and fallback bundles."""
    loader = make_loader(
        primary=primary,
        fallback=fallback,
        language=language,
        fallback_language=fallback_language,
    )
    context = make_context(language=language, fallback_language=fallback_language)
    return KeyResolver(loader, context)


def make_window() -> Panel:
    """Create a small window-like tree.

    Panel "window"
    ├── ContentControl "title"    {$window.title$}
    ├── ItemsControl "menu"       [{$menu.file$}, TextItem({$menu.help$}), 42]
    └── Panel "body"
        └── ContentControl "ok"   {$common.ok$}
    """
    return Panel(
        children=[
            ContentControl("{$window.title$}", name="title"),
            ItemsControl(
                ["{$menu.file$}", TextItem("{$menu.help$}"), 42],
                name="menu",
            ),
            Panel(
                children=[ContentControl("{$common.ok$}", name="ok")],
                name="body",
            ),
        ],
        name="window",
    )
