"""Display tree traversal."""

from typing import List, Optional, Set

from treelocale.i18n.errors import TreeCycleError
from treelocale.i18n.nodes import ChildrenHolder, DisplayNode, ItemsHolder


class TreeWalker:
    """Flattens a display tree into the list of its nodes.

    Order is post-order: node items first, then children, then the node
    itself. A node shared by two containers is listed once per path. A node
    that is its own ancestor raises TreeCycleError.
    """

    def enumerate(self, root: Optional[DisplayNode]) -> List[DisplayNode]:
        """Return ``root`` and every node reachable from it.

        Args:
            root: Root of the tree; None yields an empty list.

        Returns:
            Nodes in post-order, ``root`` last.

        Raises:
            TreeCycleError: If a node contains itself.
        """
        result: List[DisplayNode] = []
        if root is not None:
            self._collect(root, result, set())
        return result

    def _collect(
        self,
        node: DisplayNode,
        result: List[DisplayNode],
        ancestors: Set[int],
    ) -> None:
        node_id = id(node)
        if node_id in ancestors:
            raise TreeCycleError(node)
        ancestors.add(node_id)
        try:
            if isinstance(node, ItemsHolder):
                for item in list(node.items):
                    if isinstance(item, DisplayNode):
                        self._collect(item, result, ancestors)
            if isinstance(node, ChildrenHolder):
                for child in list(node.children):
                    self._collect(child, result, ancestors)
        finally:
            ancestors.discard(node_id)
        result.append(node)
