"""Translation models for the i18n system.

Defines the catalog and language descriptor data structures.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterator, Mapping, Optional

if TYPE_CHECKING:
    from treelocale.i18n.resolver import KeyResolver


@dataclass(frozen=True)
class CatalogId:
    """Identity of a catalog: resource namespace plus culture code.

    Frozen to ensure hashability for memoization.

    Attributes:
        namespace: Resource namespace (e.g., "app").
        language: Culture code (e.g., "en-US", "fr-FR").
    """

    namespace: str
    language: str

    def __str__(self) -> str:
        """Return the dotted form used in file names (e.g., "app.en-US")."""
        return f"{self.namespace}.{self.language}"


@dataclass(frozen=True)
class Catalog:
    """Immutable key to translated string mapping for one language.

    Attributes:
        catalog_id: Namespace and language this catalog belongs to.
        entries: Read-only mapping of key to translated text.
        source: Where the entries came from (file path, bundle name).
    """

    catalog_id: CatalogId
    entries: Mapping[str, str] = field(default_factory=dict)
    source: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @property
    def namespace(self) -> str:
        return self.catalog_id.namespace

    @property
    def language(self) -> str:
        return self.catalog_id.language

    def get(self, key: str) -> Optional[str]:
        """Retrieve a translation by key.

        Args:
            key: Translation key.

        Returns:
            Translated string, or None if the key is absent.
        """
        return self.entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)


@dataclass(frozen=True)
class LanguageDescriptor:
    """A selectable language.

    The display name is not stored: it is looked up through a resolver
    under ``name_key``, so it always renders in the active language rather
    than in the described one.

    Use ``languages_to_items`` to show descriptors in an items collection;
    the descriptor itself has no text of its own.

    Attributes:
        name_key: Translation key of the display name (e.g., "language.fr-FR").
        culture: Culture code (e.g., "fr-FR").
    """

    name_key: str
    culture: str

    @property
    def language(self) -> str:
        """Language part of the culture (e.g., "fr" from "fr-FR")."""
        return self.culture.split("-")[0]

    @property
    def region(self) -> str:
        """Region part of the culture (e.g., "FR" from "fr-FR")."""
        parts = self.culture.split("-")
        return parts[1] if len(parts) > 1 else ""

    def display_name(self, resolver: "KeyResolver") -> str:
        """Resolve the display name in the resolver's active language."""
        return resolver.resolve(self.name_key)

    @classmethod
    def from_culture(cls, culture: str, prefix: str = "language.") -> "LanguageDescriptor":
        """Build a descriptor whose name key is ``prefix + culture``."""
        return cls(name_key=f"{prefix}{culture}", culture=culture)
