"""Localization settings."""

import json
from pathlib import Path
from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from treelocale.configuration.base import FeatureSettings

PACKAGED_LOCALES_DIR = Path(__file__).resolve().parents[1] / "locales"


class LocalizationSettings(FeatureSettings):
    """Catalog selection and language preference configuration.

    Environment Variables:
        I18N_LANGUAGE: Active culture code (default: en-US)
        I18N_FALLBACK_LANGUAGE: Culture code of the fallback tier (default: en-US)
        I18N_NAMESPACE: Resource namespace of the catalogs (default: app)
        I18N_LOCALES_DIR: Directory holding <namespace>.<language>.yml files
            (default: the locales shipped with the package)
        I18N_PREFERENCES_FILE: YAML file the chosen language is persisted to
        I18N_LANGUAGES: Selectable culture codes, as a JSON list or comma separated
        I18N_LANGUAGE_NAME_PREFIX: Key prefix for language display names
        I18N_USE_CACHE: Whether the YAML loader caches parsed catalogs

    Example:
        ```python
        from treelocale.configuration import settings

        language = settings.i18n.language
        locales_dir = settings.i18n.resolved_locales_dir
        ```
    """

    language: str = Field(default="en-US", alias="I18N_LANGUAGE")
    fallback_language: str = Field(default="en-US", alias="I18N_FALLBACK_LANGUAGE")
    namespace: str = Field(default="app", alias="I18N_NAMESPACE")
    locales_dir: Optional[Path] = Field(default=None, alias="I18N_LOCALES_DIR")
    preferences_file: Path = Field(
        default=Path("preferences.yml"),
        alias="I18N_PREFERENCES_FILE",
    )
    languages: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["en-US", "fr-FR", "de-DE"],
        alias="I18N_LANGUAGES",
    )
    language_name_prefix: str = Field(
        default="language.",
        alias="I18N_LANGUAGE_NAME_PREFIX",
    )
    use_cache: bool = Field(default=True, alias="I18N_USE_CACHE")

    @field_validator("languages", mode="before")
    @classmethod
    def validate_languages(cls, v):
        """Accept a JSON list or a comma separated string as well as a list."""
        if isinstance(v, str):
            if v.strip().startswith("["):
                return json.loads(v)
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @property
    def resolved_locales_dir(self) -> Path:
        """Locales directory, falling back to the packaged one."""
        return Path(self.locales_dir) if self.locales_dir else PACKAGED_LOCALES_DIR
