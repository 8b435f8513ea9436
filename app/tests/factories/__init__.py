"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_context,
    make_language_descriptor,
    make_languages,
    make_loader,
    make_resolver,
    make_window,
)

__all__ = [
    "make_catalog",
    "make_context",
    "make_language_descriptor",
    "make_languages",
    "make_loader",
    "make_resolver",
    "make_window",
]
