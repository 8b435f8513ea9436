"""Two-tier key resolution.

Keys are looked up in the primary catalog (active language), then in the
fallback catalog. Unresolvable keys come back as their ``{$key$}`` marker so
missing translations stay visible in the rendered UI.
"""

from typing import TYPE_CHECKING, Dict, Optional, Tuple

from treelocale.i18n.errors import CatalogLoadError
from treelocale.i18n.loader import CatalogLoader
from treelocale.i18n.markers import MarkerCodec
from treelocale.i18n.models import Catalog, CatalogId
from treelocale.logging import get_module_logger

if TYPE_CHECKING:
    from treelocale.i18n.context import ActiveLanguageContext

logger = get_module_logger()


class KeyResolver:
    """Resolves keys through a primary and a fallback catalog.

    Catalogs are loaded on first need and memoized per (namespace, language),
    failures included. The tiers are bound to the context's language codes
    at initialization; ``reset()`` makes the next resolution re-read them.

    Attributes:
        loader: CatalogLoader used to obtain catalogs.
        context: ActiveLanguageContext providing language codes and namespace.
    """

    def __init__(self, loader: CatalogLoader, context: "ActiveLanguageContext"):
        self.loader = loader
        self.context = context
        self._catalogs: Dict[CatalogId, Optional[Catalog]] = {}
        self._primary: Optional[Catalog] = None
        self._fallback: Optional[Catalog] = None
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def primary(self) -> Optional[Catalog]:
        self.init_language()
        return self._primary

    @property
    def fallback(self) -> Optional[Catalog]:
        self.init_language()
        return self._fallback

    def init_language(self, force: bool = False) -> None:
        """Bind both tiers to the context's current language codes.

        Args:
            force: Re-bind even if the tiers are already bound.
        """
        if self._initialized and not force:
            return
        namespace = self.context.namespace
        self._primary = self._get_catalog(namespace, self.context.language)
        self._fallback = self._get_catalog(namespace, self.context.fallback_language)
        self._initialized = True
        logger.info(
            "language_initialized",
            namespace=namespace,
            language=self.context.language,
            fallback_language=self.context.fallback_language,
            primary_loaded=self._primary is not None,
            fallback_loaded=self._fallback is not None,
        )

    def reset(self) -> None:
        """Unbind the tiers; memoized catalogs are kept."""
        self._primary = None
        self._fallback = None
        self._initialized = False

    def clear_cache(self) -> None:
        """Forget every memoized catalog and unbind the tiers."""
        self._catalogs.clear()
        self.reset()
        logger.info("resolver_cache_cleared")

    def _get_catalog(self, namespace: str, language: str) -> Optional[Catalog]:
        catalog_id = CatalogId(namespace=namespace, language=language)
        if catalog_id in self._catalogs:
            return self._catalogs[catalog_id]

        catalog: Optional[Catalog] = None
        try:
            catalog = self.loader.load(namespace, language)
        except CatalogLoadError as e:
            logger.warning("catalog_load_failed", catalog=str(catalog_id), error=str(e))
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "catalog_loader_error",
                catalog=str(catalog_id),
                error=str(e),
                error_type=type(e).__name__,
            )
        self._catalogs[catalog_id] = catalog
        return catalog

    @staticmethod
    def _lookup(catalog: Optional[Catalog], key: str) -> Optional[str]:
        if catalog is None:
            return None
        try:
            return catalog.get(key)
        except Exception as e:  # pylint: disable=broad-except
            logger.error("catalog_lookup_failed", key=key, error=str(e))
            return None

    def resolve(self, key: str) -> str:
        """Translate a key.

        Args:
            key: Translation key.

        Returns:
            The primary value, else the fallback value, else ``{$key$}``.
        """
        self.init_language()
        message = self._lookup(self._primary, key)
        if message is None:
            message = self._lookup(self._fallback, key)
            if message is not None and self._primary is not None:
                logger.debug("used_fallback_translation", key=key)
        if message is None:
            logger.debug("translation_not_found", key=key)
            message = MarkerCodec.encode(key)
        return message

    def has_translation(self, key: str) -> bool:
        """True when either tier holds ``key``."""
        self.init_language()
        return any(
            self._lookup(catalog, key) is not None
            for catalog in (self._primary, self._fallback)
        )

    def try_translate(self, text: str) -> Tuple[bool, str]:
        """Translate ``text`` if it is a marker.

        Returns:
            ``(changed, output)``; ``changed`` is False for non-markers and
            for markers whose resolution equals the input.
        """
        matched, key = MarkerCodec.try_decode(text)
        if not matched:
            return False, text
        output = self.resolve(key)
        return output != text, output
