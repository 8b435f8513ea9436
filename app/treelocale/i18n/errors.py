"""Errors for the i18n package."""

from typing import Any


class LocalizationError(Exception):
    """Base class for localization errors."""


class CatalogLoadError(LocalizationError):
    """Raised by catalog loaders when a (namespace, language) cannot be loaded.

    Attributes:
        namespace: resource namespace that was requested
        language: culture code that was requested
    """

    def __init__(self, namespace: str, language: str, reason: str = ""):
        message = f"Cannot load catalog {namespace}.{language}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.namespace = namespace
        self.language = language


class TreeCycleError(LocalizationError):
    """Raised when a display node is reachable from itself."""

    def __init__(self, node: Any):
        super().__init__(f"Display tree contains a cycle at {node!r}")
        self.node = node
