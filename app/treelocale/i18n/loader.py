"""Catalog loading interface and implementations.

Defines the contract for loading catalogs and provides the YAML file loader
and an in-memory bundle loader.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import structlog
import yaml

from treelocale.i18n.errors import CatalogLoadError
from treelocale.i18n.models import Catalog, CatalogId

logger = structlog.get_logger()


class CatalogLoader(ABC):
    """Abstract base for catalog loaders."""

    @abstractmethod
    def load(self, namespace: str, language: str) -> Catalog:
        """Load the catalog for a namespace and culture code.

        Args:
            namespace: Resource namespace (e.g., "app").
            language: Culture code (e.g., "en-US").

        Returns:
            Catalog with the loaded entries.

        Raises:
            CatalogLoadError: If the catalog cannot be loaded.
        """

    def available_languages(self, namespace: str) -> List[str]:
        """Culture codes this loader can serve for a namespace."""
        return []


def flatten_messages(data: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested mappings into dotted keys.

    ``{"menu": {"file": "File"}}`` becomes ``{"menu.file": "File"}``.
    Scalars are stringified; ``None`` values are dropped.
    """
    result: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            result.update(flatten_messages(value, prefix=f"{full_key}."))
        elif value is not None:
            result[full_key] = str(value)
    return result


class YAMLCatalogLoader(CatalogLoader):
    """Loader for YAML catalog files.

    Expects one file per catalog named ``<namespace>.<language>.yml`` in the
    locales directory.

    Attributes:
        locales_dir: Path to the directory containing YAML files.
        use_cache: Whether loaded catalogs are kept in memory.
        cache: Loaded catalogs by CatalogId.
    """

    def __init__(self, locales_dir: Path, use_cache: bool = True):
        """Initialize YAML catalog loader.

        Args:
            locales_dir: Path to directory with YAML catalog files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.locales_dir = Path(locales_dir)
        self.use_cache = use_cache
        self.cache: Dict[CatalogId, Catalog] = {}

        if not self.locales_dir.is_dir():
            raise ValueError(f"Locales directory not found: {self.locales_dir}")

        logger.info(
            "initialized_yaml_catalog_loader",
            locales_dir=str(self.locales_dir),
            use_cache=use_cache,
        )

    def path_for(self, catalog_id: CatalogId) -> Path:
        return self.locales_dir / f"{catalog_id}.yml"

    def load(self, namespace: str, language: str) -> Catalog:
        """Load ``<namespace>.<language>.yml``.

        Raises:
            CatalogLoadError: If the file is missing, unreadable, not valid
                YAML, or not a mapping.
        """
        catalog_id = CatalogId(namespace=namespace, language=language)
        if self.use_cache and catalog_id in self.cache:
            logger.debug("catalog_loaded_from_cache", catalog=str(catalog_id))
            return self.cache[catalog_id]

        path = self.path_for(catalog_id)
        if not path.is_file():
            raise CatalogLoadError(namespace, language, f"{path} not found")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error("catalog_parse_error", file=str(path), error=str(e))
            raise CatalogLoadError(namespace, language, str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise CatalogLoadError(
                namespace, language, f"{path} must contain a mapping"
            )

        catalog = Catalog(
            catalog_id=catalog_id,
            entries=flatten_messages(data),
            source=str(path),
        )
        logger.info(
            "loaded_catalog",
            catalog=str(catalog_id),
            entry_count=len(catalog),
        )

        if self.use_cache:
            self.cache[catalog_id] = catalog
        return catalog

    def available_languages(self, namespace: str) -> List[str]:
        """Culture codes with a ``<namespace>.<language>.yml`` file."""
        languages = []
        for path in sorted(self.locales_dir.glob(f"{namespace}.*.yml")):
            # "app.fr-FR.yml" -> stem "app.fr-FR" -> "fr-FR"
            language = path.stem[len(namespace) + 1 :]
            if language and "." not in language:
                languages.append(language)
        return languages

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_catalog_cache")


class DictCatalogLoader(CatalogLoader):
    """Loader serving catalogs from in-memory bundles.

    Args:
        bundles: Mapping of (namespace, language) to a (possibly nested)
            key/text mapping.
    """

    def __init__(self, bundles: Optional[Mapping[Tuple[str, str], Mapping[str, Any]]] = None):
        self.bundles: Dict[Tuple[str, str], Mapping[str, Any]] = dict(bundles or {})

    def add_bundle(self, namespace: str, language: str, messages: Mapping[str, Any]) -> None:
        self.bundles[(namespace, language)] = messages

    def load(self, namespace: str, language: str) -> Catalog:
        try:
            messages = self.bundles[(namespace, language)]
        except KeyError:
            raise CatalogLoadError(namespace, language, "no such bundle") from None
        return Catalog(
            catalog_id=CatalogId(namespace=namespace, language=language),
            entries=flatten_messages(messages),
            source="bundle",
        )

    def available_languages(self, namespace: str) -> List[str]:
        return [language for ns, language in self.bundles if ns == namespace]
