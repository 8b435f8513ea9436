"""Feature-level fixtures for i18n system tests.

Provides YAML locale directories, loaders and resolvers.
"""

import pytest

from treelocale.i18n import KeyResolver, YAMLCatalogLoader
from tests.factories.i18n import make_context, make_resolver


@pytest.fixture
def temp_locales_dir(tmp_path, write_catalog):
    """Create temporary directory with sample YAML catalogs.

    Returns a directory structure like:
    - app.en-US.yml
    - app.fr-FR.yml
    - other.en-US.yml
    """
    write_catalog(
        tmp_path,
        "app",
        "en-US",
        {
            "language": {"en-US": "English", "fr-FR": "French"},
            "common": {"ok": "OK", "cancel": "Cancel", "extra": "Plus"},
            "greeting": "Hello",
        },
    )
    write_catalog(
        tmp_path,
        "app",
        "fr-FR",
        {
            "language": {"en-US": "Anglais", "fr-FR": "Français"},
            "common": {"ok": "D'accord", "cancel": "Annuler"},
            "greeting": "Bonjour",
        },
    )
    write_catalog(tmp_path, "other", "en-US", {"unrelated": "Elsewhere"})
    return tmp_path


@pytest.fixture
def yaml_loader(temp_locales_dir):
    """Create YAMLCatalogLoader for the temporary locales directory."""
    return YAMLCatalogLoader(temp_locales_dir, use_cache=False)


@pytest.fixture
def yaml_resolver(yaml_loader):
    """KeyResolver with fr-FR primary and en-US fallback from YAML files."""
    return KeyResolver(yaml_loader, make_context(language="fr-FR"))


@pytest.fixture
def resolver():
    """KeyResolver with primary {ok: Yes} and fallback {ok: Oui, extra: Plus}."""
    return make_resolver(
        primary={"ok": "Yes", "greeting": "Hello"},
        fallback={"ok": "Oui", "extra": "Plus"},
    )
