"""Factory functions for creating i18n components.

Wires a loader, context, resolver, translator and language switch from the
application settings.
"""

from pathlib import Path
from typing import Optional

import structlog

from treelocale.configuration import Settings, settings as default_settings
from treelocale.i18n.context import ActiveLanguageContext, SettingsLanguageContext
from treelocale.i18n.loader import CatalogLoader, YAMLCatalogLoader
from treelocale.i18n.resolver import KeyResolver
from treelocale.i18n.service import LocalizationService
from treelocale.i18n.switch import LanguageSwitch
from treelocale.i18n.translator import Translator

logger = structlog.get_logger()


def create_localizer(
    settings: Optional[Settings] = None,
    loader: Optional[CatalogLoader] = None,
    context: Optional[ActiveLanguageContext] = None,
    preferences_file: Optional[Path] = None,
    preload: bool = False,
) -> LocalizationService:
    """Create a configured LocalizationService.

    Args:
        settings: Settings to read the i18n section from (default: singleton).
        loader: CatalogLoader to use (default: YAML loader on the locales dir).
        context: Language context to use (default: settings-backed context).
        preferences_file: Preferences file for the default context.
        preload: Bind both catalog tiers immediately instead of on first use.

    Returns:
        LocalizationService ready for resolve() and apply().

    Raises:
        ValueError: If the configured locales directory does not exist.

    Usage:
        localizer = create_localizer()
        localizer.apply(main_window)
    """
    settings = settings or default_settings
    i18n = settings.i18n

    if loader is None:
        loader = YAMLCatalogLoader(i18n.resolved_locales_dir, use_cache=i18n.use_cache)
    if context is None:
        context = SettingsLanguageContext(i18n, preferences_file=preferences_file)

    resolver = KeyResolver(loader, context)
    service = LocalizationService(
        resolver=resolver,
        translator=Translator(resolver),
        switch=LanguageSwitch(context, resolver),
    )

    if preload:
        resolver.init_language()
    logger.info(
        "localizer_created",
        namespace=context.namespace,
        language=context.language,
        fallback_language=context.fallback_language,
        preload=preload,
    )
    return service
