"""In-place translation of display trees.

Walks a tree, finds every text slot holding a ``{$key$}`` marker and
replaces it with the resolved text.
"""

from typing import Any, Optional, Tuple

from treelocale.i18n.nodes import ContentHolder, DisplayNode, ItemsHolder, Translatable
from treelocale.i18n.resolver import KeyResolver
from treelocale.i18n.walker import TreeWalker
from treelocale.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Applies a KeyResolver to every translatable slot of a tree.

    Attributes:
        resolver: KeyResolver used for marker resolution.
        walker: TreeWalker used to enumerate nodes.
    """

    def __init__(self, resolver: KeyResolver, walker: Optional[TreeWalker] = None):
        self.resolver = resolver
        self.walker = walker or TreeWalker()

    def apply(self, root: Optional[DisplayNode]) -> None:
        """Translate every marker in the tree under ``root``, in place.

        Never raises: a failing node is logged and skipped, a failing walk
        is logged and ends the call. Already translated slots no longer hold
        markers, so applying twice is the same as applying once.
        """
        try:
            self.resolver.init_language()
            nodes = self.walker.enumerate(root)
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "tree_translation_failed",
                root=repr(root),
                error=str(e),
                error_type=type(e).__name__,
            )
            return

        changed = 0
        for node in nodes:
            try:
                changed += self.translate_node(node)
            except Exception as e:  # pylint: disable=broad-except
                logger.error(
                    "node_translation_failed",
                    node=repr(node),
                    error=str(e),
                    error_type=type(e).__name__,
                )
        logger.debug("tree_translated", node_count=len(nodes), changed_slots=changed)

    def translate_node(self, node: DisplayNode) -> int:
        """Translate the slots of one node, without descending.

        Returns:
            Number of slots that were rewritten.

        Raises:
            Exception: Whatever a misbehaving Translatable raises.
        """
        changed = 0
        if isinstance(node, ContentHolder) and node.has_content:
            updated, value = self._translate_value(node.content)
            if updated:
                node.content = value
                changed += 1
        if isinstance(node, ItemsHolder) and node.items is not None:
            for index in range(len(node.items)):
                updated, value = self._translate_value(node.items[index])
                if updated:
                    node.items[index] = value
                    changed += 1
        return changed

    def _translate_value(self, value: Any) -> Tuple[bool, Any]:
        """Translate a slot value.

        A string is replaced by its translation. A Translatable is updated
        through its text property and returned as the same object.
        """
        if isinstance(value, str):
            return self.resolver.try_translate(value)
        if isinstance(value, Translatable):
            translated, text = self.resolver.try_translate(value.translatable_text)
            if translated:
                value.translatable_text = text
            return translated, value
        return False, value
