"""Tests for treelocale.i18n.context module."""

import pytest
import yaml

from treelocale.configuration import LocalizationSettings
from treelocale.i18n import (
    ActiveLanguageContext,
    LanguageDescriptor,
    SettingsLanguageContext,
    SimpleLanguageContext,
)


@pytest.fixture
def i18n_settings(tmp_path):
    return LocalizationSettings(
        language="en-US",
        fallback_language="en-US",
        namespace="app",
        languages=["en-US", "fr-FR"],
        preferences_file=tmp_path / "prefs" / "preferences.yml",
    )


class TestActiveLanguageContext:
    """Tests for the ActiveLanguageContext contract."""

    def test_cannot_instantiate_abstract(self):
        """ActiveLanguageContext is abstract."""
        with pytest.raises(TypeError):
            ActiveLanguageContext()  # pylint: disable=abstract-class-instantiated


class TestSimpleLanguageContext:
    """Tests for SimpleLanguageContext."""

    def test_defaults(self):
        """Fallback defaults to the active language."""
        context = SimpleLanguageContext("de-DE")
        assert context.language == "de-DE"
        assert context.fallback_language == "de-DE"
        assert context.namespace == "app"
        assert context.languages == []

    def test_language_setter(self):
        """language can be reassigned."""
        context = SimpleLanguageContext("en-US")
        context.language = "fr-FR"
        assert context.language == "fr-FR"

    def test_persist_callback(self):
        """persist() hands the active language to the callback."""
        saved = []
        context = SimpleLanguageContext("en-US", on_persist=saved.append)
        context.language = "fr-FR"
        context.persist()
        assert saved == ["fr-FR"]

    def test_persist_without_callback(self):
        """persist() without a callback does nothing."""
        SimpleLanguageContext("en-US").persist()

    def test_languages_copy(self):
        """languages returns a copy."""
        context = SimpleLanguageContext(
            "en-US", languages=[LanguageDescriptor("language.en-US", "en-US")]
        )
        context.languages.clear()
        assert len(context.languages) == 1


class TestSettingsLanguageContext:
    """Tests for SettingsLanguageContext."""

    def test_reads_settings(self, i18n_settings):
        """Context values come from the settings."""
        context = SettingsLanguageContext(i18n_settings)
        assert context.language == "en-US"
        assert context.fallback_language == "en-US"
        assert context.namespace == "app"
        assert context.languages == [
            LanguageDescriptor("language.en-US", "en-US"),
            LanguageDescriptor("language.fr-FR", "fr-FR"),
        ]

    def test_persist_writes_preferences(self, i18n_settings):
        """persist() writes the active language to the preferences file."""
        context = SettingsLanguageContext(i18n_settings)
        context.language = "fr-FR"
        context.persist()

        with open(i18n_settings.preferences_file, encoding="utf-8") as f:
            assert yaml.safe_load(f) == {"language": "fr-FR"}

    def test_persisted_language_restored(self, i18n_settings):
        """A new context starts with the persisted language."""
        first = SettingsLanguageContext(i18n_settings)
        first.language = "fr-FR"
        first.persist()

        second = SettingsLanguageContext(i18n_settings)
        assert second.language == "fr-FR"

    def test_persist_keeps_other_preferences(self, i18n_settings):
        """Unrelated keys in the preferences file survive persist()."""
        path = i18n_settings.preferences_file
        path.parent.mkdir(parents=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump({"theme": "dark", "language": "en-US"}, f)

        context = SettingsLanguageContext(i18n_settings)
        context.language = "fr-FR"
        context.persist()

        with open(path, encoding="utf-8") as f:
            assert yaml.safe_load(f) == {"theme": "dark", "language": "fr-FR"}

    def test_corrupt_preferences_ignored(self, i18n_settings):
        """An unreadable preferences file falls back to the settings."""
        path = i18n_settings.preferences_file
        path.parent.mkdir(parents=True)
        path.write_text("language: [broken", encoding="utf-8")
        context = SettingsLanguageContext(i18n_settings)
        assert context.language == "en-US"

    def test_preferences_file_override(self, i18n_settings, tmp_path):
        """An explicit preferences file wins over the settings one."""
        override = tmp_path / "other.yml"
        context = SettingsLanguageContext(i18n_settings, preferences_file=override)
        context.persist()
        assert override.is_file()
        assert not i18n_settings.preferences_file.exists()
