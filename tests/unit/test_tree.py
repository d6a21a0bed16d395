from domain_models.tree import BlockTree
from tests.conftest import make_block


def test_children_of_root_and_blocks() -> None:
    parent = make_block("toggle", "T", block_id="t1", has_children=True)
    child = make_block("paragraph", "C", block_id="c1")
    tree = BlockTree(root_id="root", blocks=[parent], children={"t1": [child]})

    assert tree.children_of("root") == [parent]
    assert tree.children_of("t1") == [child]
    assert tree.children_of("c1") == []


def test_absent_key_is_leaf() -> None:
    flagged = make_block("toggle", "T", block_id="t1", has_children=True)
    tree = BlockTree(root_id="root", blocks=[flagged])

    assert not tree.is_expanded("t1")
    assert tree.children_of("t1") == []


def test_block_count() -> None:
    parent = make_block("toggle", "T", block_id="t1", has_children=True)
    tree = BlockTree(
        root_id="root",
        blocks=[parent, make_block("divider", block_id="d1")],
        children={"t1": [make_block("paragraph", "a", block_id="a"), make_block("paragraph", "b", block_id="b")]},
    )
    assert tree.block_count == 4
