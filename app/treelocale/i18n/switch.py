"""Language switching."""

from typing import List, Optional

from treelocale.i18n.context import ActiveLanguageContext
from treelocale.i18n.models import LanguageDescriptor
from treelocale.i18n.resolver import KeyResolver
from treelocale.logging import get_module_logger

logger = get_module_logger()


class LanguageSwitch:
    """Lists the available languages and changes the active one.

    A change is persisted through the context and re-binds the resolver's
    tiers, so the next resolution serves the new language. Trees that were
    already translated keep their text until they are rebuilt from markers
    and translated again.

    Attributes:
        context: ActiveLanguageContext holding the active code.
        resolver: KeyResolver to re-bind after a change.
    """

    def __init__(self, context: ActiveLanguageContext, resolver: KeyResolver):
        self.context = context
        self.resolver = resolver

    @property
    def languages(self) -> List[LanguageDescriptor]:
        return self.context.languages

    def current_language(self) -> Optional[LanguageDescriptor]:
        """Descriptor of the active language, if it is selectable."""
        for descriptor in self.context.languages:
            if descriptor.culture == self.context.language:
                return descriptor
        return None

    def display_name(self, descriptor: LanguageDescriptor) -> str:
        """Name of ``descriptor`` rendered in the active language."""
        return descriptor.display_name(self.resolver)

    def change_language(self, descriptor: LanguageDescriptor) -> bool:
        """Make ``descriptor`` the active language.

        Returns:
            True if the active code changed and was persisted, False if the
            descriptor is already active.

        Raises:
            Exception: Whatever ``context.persist()`` raises. The previous
                language is restored first, so context and resolver agree.
        """
        previous = self.context.language
        if previous == descriptor.culture:
            return False

        self.context.language = descriptor.culture
        try:
            self.context.persist()
        except Exception as e:
            self.context.language = previous
            logger.error(
                "language_persist_failed",
                previous_language=previous,
                language=descriptor.culture,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
        self.resolver.reset()
        logger.info(
            "language_changed",
            previous_language=previous,
            language=descriptor.culture,
        )
        return True
