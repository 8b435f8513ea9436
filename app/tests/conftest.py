import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing
# `treelocale` works during pytest collection regardless of invocation.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
import yaml


@pytest.fixture
def write_catalog():
    """Return a helper that writes a ``<namespace>.<language>.yml`` file."""

    def _write(directory: Path, namespace: str, language: str, data: dict) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{namespace}.{language}.yml"
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)
        return path

    return _write


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Configure logging once for the test session, as a host application would."""
    from treelocale.logging import configure_logging

    configure_logging()
