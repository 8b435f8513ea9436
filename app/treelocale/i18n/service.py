"""Localization service facade.

Single entry point for application code: key resolution, marker
translation, tree translation and language switching.
"""

from typing import List, Optional, Tuple

from treelocale.i18n.models import LanguageDescriptor
from treelocale.i18n.nodes import DisplayNode
from treelocale.i18n.resolver import KeyResolver
from treelocale.i18n.switch import LanguageSwitch
from treelocale.i18n.translator import Translator


class LocalizationService:
    """Thin facade delegating to the resolver, translator and switch.

    Usage:
        service = create_localizer()
        title = service.resolve("window.title")
        service.apply(root_panel)

        for language in service.languages:
            print(service.display_name(language))
    """

    def __init__(
        self,
        resolver: KeyResolver,
        translator: Optional[Translator] = None,
        switch: Optional[LanguageSwitch] = None,
    ):
        self.resolver = resolver
        self.translator = translator or Translator(resolver)
        self.switch = switch or LanguageSwitch(resolver.context, resolver)

    def resolve(self, key: str) -> str:
        """Translate a key; never fails, returns ``{$key$}`` on a miss."""
        return self.resolver.resolve(key)

    def try_translate(self, text: str) -> Tuple[bool, str]:
        return self.resolver.try_translate(text)

    def apply(self, root: Optional[DisplayNode]) -> None:
        """Translate every marker in the tree under ``root``."""
        self.translator.apply(root)

    def change_language(self, descriptor: LanguageDescriptor) -> bool:
        return self.switch.change_language(descriptor)

    @property
    def languages(self) -> List[LanguageDescriptor]:
        return self.switch.languages

    def display_name(self, descriptor: LanguageDescriptor) -> str:
        return self.switch.display_name(descriptor)

    @property
    def language(self) -> str:
        """Active culture code."""
        return self.resolver.context.language
