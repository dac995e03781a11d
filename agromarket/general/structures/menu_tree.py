# menu_tree.py
from dataclasses import dataclass, field, replace
from typing import List, Optional, Set

from agromarket.general.structures.trees import Tree, TreeNode


@dataclass
class MenuItem:
    id: str
    label: str
    path: Optional[str] = None
    icon: Optional[str] = None
    roles: Set[str] = field(default_factory=set)
    children: List["MenuItem"] = field(default_factory=list)

    def allows(self, role: str) -> bool:
        return role in self.roles


class MenuTree:
    """
    Role-based navigation menu backed by a general Tree of MenuItem.
    Filtering is top-down: an item hidden from a role hides its whole subtree.
    """

    def __init__(self, root_item: MenuItem):
        self.tree: Tree[MenuItem] = Tree(root_item)

    @classmethod
    def from_items(cls, root_item: MenuItem) -> "MenuTree":
        """Builds the tree from the nested `children` of root_item."""
        menu = cls(root_item)
        pending = [(menu.tree.root, root_item)]
        while pending:
            node, item = pending.pop()
            for child_item in item.children:
                child = node.add_child(TreeNode(child_item))
                pending.append((child, child_item))
        return menu

    def add_menu_item(self, parent_id: str, item: MenuItem) -> bool:
        parent = self.tree.find_by(lambda it: it.id == parent_id)
        if parent is None:
            return False
        parent.add_child(TreeNode(item))
        return True

    def get_menu_for_role(self, role: str) -> List[MenuItem]:
        """Top-level items visible to role, each with its visible children."""
        root = self.tree.root
        if root is None or not root.value.allows(role):
            return []
        return self._filter_children(root, role)

    def _filter_children(self, node: TreeNode[MenuItem], role: str) -> List[MenuItem]:
        visible = []
        for child in node.children:
            if child.value.allows(role):
                visible.append(replace(
                    child.value,
                    roles=set(child.value.roles),
                    children=self._filter_children(child, role),
                ))
        return visible

    def find_by_path(self, path: str) -> Optional[MenuItem]:
        node = self.tree.find_by(lambda it: it.path == path)
        return node.value if node else None
