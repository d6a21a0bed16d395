from collections.abc import Iterator

from domain_models.blocks import Block
from domain_models.tree import BlockTree


def iter_blocks(tree: BlockTree) -> Iterator[tuple[Block, int]]:
    """
    Walk the tree depth-first in document order, yielding `(block, depth)`.

    Root children are at depth 0. A block's subtree is yielded immediately after the
    block itself. Only blocks present in `tree.children` are descended into, and each
    block id is descended into at most once.
    Iterative to avoid hitting the recursion limit on deeply nested pages.
    """
    stack: list[tuple[Block, int]] = [(block, 0) for block in reversed(tree.blocks)]
    descended: set[str] = set()

    while stack:
        block, depth = stack.pop()
        yield block, depth

        if tree.is_expanded(block.id) and block.id not in descended:
            descended.add(block.id)
            for child in reversed(tree.children[block.id]):
                stack.append((child, depth + 1))
