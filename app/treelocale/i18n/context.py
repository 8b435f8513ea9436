"""Active language context.

The context tells the resolver which language is active, which one is the
fallback, which resource namespace to load, which languages can be chosen,
and how to persist a new choice.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Iterable, List, Optional

import structlog
import yaml

from treelocale.configuration import LocalizationSettings
from treelocale.i18n.models import LanguageDescriptor

logger = structlog.get_logger(component="i18n.context")


class ActiveLanguageContext(ABC):
    """Contract between the localization core and the application settings."""

    @property
    @abstractmethod
    def language(self) -> str:
        """Active culture code."""

    @language.setter
    @abstractmethod
    def language(self, value: str) -> None:
        """Change the active culture code (not persisted)."""

    @property
    @abstractmethod
    def fallback_language(self) -> str:
        """Culture code of the fallback tier."""

    @property
    @abstractmethod
    def namespace(self) -> str:
        """Resource namespace catalogs are loaded from."""

    @property
    @abstractmethod
    def languages(self) -> List[LanguageDescriptor]:
        """Selectable languages."""

    @abstractmethod
    def persist(self) -> None:
        """Save the active language choice."""


class SimpleLanguageContext(ActiveLanguageContext):
    """In-memory context.

    Args:
        language: Active culture code.
        fallback_language: Fallback culture code, defaults to ``language``.
        namespace: Resource namespace.
        languages: Selectable languages.
        on_persist: Optional callable invoked with the language on persist().
    """

    def __init__(
        self,
        language: str,
        fallback_language: Optional[str] = None,
        namespace: str = "app",
        languages: Optional[Iterable[LanguageDescriptor]] = None,
        on_persist: Optional[Callable[[str], None]] = None,
    ):
        self._language = language
        self._fallback_language = fallback_language or language
        self._namespace = namespace
        self._languages = list(languages or [])
        self._on_persist = on_persist

    @property
    def language(self) -> str:
        return self._language

    @language.setter
    def language(self, value: str) -> None:
        self._language = value

    @property
    def fallback_language(self) -> str:
        return self._fallback_language

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def languages(self) -> List[LanguageDescriptor]:
        return list(self._languages)

    def persist(self) -> None:
        if self._on_persist is not None:
            self._on_persist(self._language)


class SettingsLanguageContext(SimpleLanguageContext):
    """Context backed by LocalizationSettings and a YAML preferences file.

    The preferences file, when present, overrides the configured language;
    ``persist()`` writes ``{"language": <code>}`` back to it.

    Args:
        i18n_settings: Localization settings section.
        preferences_file: Overrides ``i18n_settings.preferences_file``.
    """

    def __init__(
        self,
        i18n_settings: LocalizationSettings,
        preferences_file: Optional[Path] = None,
    ):
        languages = [
            LanguageDescriptor.from_culture(culture, i18n_settings.language_name_prefix)
            for culture in i18n_settings.languages
        ]
        super().__init__(
            language=i18n_settings.language,
            fallback_language=i18n_settings.fallback_language,
            namespace=i18n_settings.namespace,
            languages=languages,
        )
        self.preferences_file = Path(preferences_file or i18n_settings.preferences_file)
        stored = self._read_preferences().get("language")
        if stored:
            self._language = str(stored)

    def _read_preferences(self) -> dict:
        if not self.preferences_file.is_file():
            return {}
        try:
            with open(self.preferences_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(
                "preferences_read_failed",
                file=str(self.preferences_file),
                error=str(e),
            )
            return {}
        return data if isinstance(data, dict) else {}

    def persist(self) -> None:
        """Write the active language to the preferences file.

        Other keys in the file are preserved.

        Raises:
            OSError: If the file cannot be written.
        """
        data = self._read_preferences()
        data["language"] = self._language
        self.preferences_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.preferences_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, allow_unicode=True)
        logger.info(
            "language_persisted",
            language=self._language,
            file=str(self.preferences_file),
        )
        super().persist()
