# tests for trees.py and menu_tree.py
import random

import pytest

from agromarket.general.structures.menu_tree import MenuItem, MenuTree
from agromarket.general.structures.trees import BinarySearchTree, Tree, TreeNode


@pytest.fixture
def category_tree():
    #        crops
    #      /   |    \
    #   grains fruit  veg
    #   /  \     |
    # corn rice mango
    tree = Tree("crops")
    grains = tree.root.add_child(TreeNode("grains"))
    fruit = tree.root.add_child(TreeNode("fruit"))
    tree.root.add_child(TreeNode("veg"))
    grains.add_child(TreeNode("corn"))
    grains.add_child(TreeNode("rice"))
    fruit.add_child(TreeNode("mango"))
    return tree


def test_dfs_is_pre_order(category_tree):
    seen = []
    category_tree.traverse_dfs(lambda n: seen.append(n.value))
    assert seen == ["crops", "grains", "corn", "rice", "fruit", "mango", "veg"]


def test_bfs_is_level_order(category_tree):
    seen = []
    category_tree.traverse_bfs(lambda n: seen.append(n.value))
    assert seen == ["crops", "grains", "fruit", "veg", "corn", "rice", "mango"]
    assert category_tree.to_list() == seen


def test_find_and_find_by(category_tree):
    node = category_tree.find("rice")
    assert node.value == "rice"
    assert node.parent.value == "grains"
    assert node.get_depth() == 2
    assert category_tree.find("wheat") is None
    assert category_tree.find_by(lambda v: v.startswith("m")).value == "mango"


def test_leaves_height_size(category_tree):
    assert [n.value for n in category_tree.get_leaves()] == ["corn", "rice", "mango", "veg"]
    assert category_tree.get_height() == 3
    assert category_tree.size() == 7


def test_empty_and_single_node_tree():
    empty = Tree()
    assert empty.root is None
    assert empty.get_height() == 0
    assert empty.size() == 0
    assert empty.find("x") is None
    assert empty.get_leaves() == []

    single = Tree(None)
    assert single.root is not None
    assert single.get_height() == 1
    assert single.root.is_root()
    assert single.root.is_leaf()


def test_remove_child_clears_parent(category_tree):
    fruit = category_tree.find("fruit")
    assert category_tree.root.remove_child(fruit)
    assert fruit.parent is None
    assert not category_tree.root.remove_child(fruit)
    assert category_tree.size() == 5


def test_add_child_moves_node_between_parents(category_tree):
    corn = category_tree.find("corn")
    veg = category_tree.find("veg")
    veg.add_child(corn)
    assert corn.parent is veg
    assert [c.value for c in category_tree.find("grains").children] == ["rice"]


def test_bst_sorted_output():
    values = random.Random(7).sample(range(1000), 200)
    bst = BinarySearchTree()
    for v in values:
        bst.insert(v)
    out = bst.to_sorted_list()
    assert out == sorted(values)
    assert bst.size() == 200
    assert bst.find_min() == min(values)
    assert bst.find_max() == max(values)


def test_bst_duplicates_go_right():
    bst = BinarySearchTree()
    for v in (5, 5, 3):
        bst.insert(v)
    assert bst.root.right.value == 5
    assert bst.root.left.value == 3
    assert bst.to_sorted_list() == [3, 5, 5]


def test_bst_custom_comparator_and_search():
    by_price = BinarySearchTree(lambda a, b: (a["price"] > b["price"]) - (a["price"] < b["price"]))
    for price in (40, 10, 30):
        by_price.insert({"price": price})
    assert [p["price"] for p in by_price.to_sorted_list()] == [10, 30, 40]
    assert by_price.search({"price": 30})
    assert not by_price.search({"price": 35})


def test_bst_traversal_orders():
    bst = BinarySearchTree()
    for v in (4, 2, 6, 1, 3, 5, 7):
        bst.insert(v)
    pre, post = [], []
    bst.pre_order(pre.append)
    bst.post_order(post.append)
    assert pre == [4, 2, 1, 3, 6, 5, 7]
    assert post == [1, 3, 2, 5, 7, 6, 4]


def test_bst_empty():
    bst = BinarySearchTree()
    assert bst.find_min() is None
    assert bst.find_max() is None
    assert not bst.search(1)
    assert bst.to_sorted_list() == []


def test_bst_degenerate_chain_does_not_recurse():
    bst = BinarySearchTree()
    for v in range(2000):
        bst.insert(v)
    assert bst.to_sorted_list()[-1] == 1999


@pytest.fixture
def menu():
    menu = MenuTree(MenuItem("root", "Home", path="/", roles={"farmer", "store", "admin"}))
    menu.add_menu_item("root", MenuItem("crops", "My crops", path="/farmer/crops", roles={"farmer", "admin"}))
    menu.add_menu_item("root", MenuItem("inputs", "Inputs", path="/store/inputs", roles={"store", "admin"}))
    menu.add_menu_item("crops", MenuItem("ai", "AI advice", path="/farmer/ai", roles={"farmer"}))
    menu.add_menu_item("inputs", MenuItem("stock", "Stock", path="/store/stock", roles={"store", "farmer"}))
    return menu


def test_menu_filters_by_role(menu):
    farmer = menu.get_menu_for_role("farmer")
    assert [i.id for i in farmer] == ["crops"]
    assert [c.id for c in farmer[0].children] == ["ai"]

    admin = menu.get_menu_for_role("admin")
    assert [i.id for i in admin] == ["crops", "inputs"]
    assert all(i.children == [] for i in admin)


def test_menu_hidden_parent_prunes_subtree(menu):
    # "stock" allows farmers, but its parent "inputs" does not
    ids = []
    for item in menu.get_menu_for_role("farmer"):
        ids.append(item.id)
        ids.extend(c.id for c in item.children)
    assert "stock" not in ids


def test_menu_unknown_parent_and_role(menu):
    assert not menu.add_menu_item("missing", MenuItem("x", "X", roles={"farmer"}))
    assert menu.get_menu_for_role("guest") == []


def test_menu_find_by_path(menu):
    assert menu.find_by_path("/store/stock").id == "stock"
    assert menu.find_by_path("/nope") is None


def test_menu_from_nested_items():
    root = MenuItem("root", "Home", roles={"buyer"}, children=[
        MenuItem("market", "Marketplace", roles={"buyer"}, children=[
            MenuItem("cart", "Cart", roles={"buyer"}),
        ]),
        MenuItem("admin", "Admin", roles={"admin"}),
    ])
    menu = MenuTree.from_items(root)
    visible = menu.get_menu_for_role("buyer")
    assert [i.id for i in visible] == ["market"]
    assert [c.id for c in visible[0].children] == ["cart"]


def test_menu_for_role_returns_copies(menu):
    crops = menu.get_menu_for_role("farmer")[0]
    crops.roles.add("guest")
    crops.children.clear()
    assert menu.find_by_path("/farmer/crops").roles == {"farmer", "admin"}
    assert [c.id for c in menu.get_menu_for_role("farmer")[0].children] == ["ai"]
