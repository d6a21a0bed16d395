from domain_models.blocks import Block, TextBlock, join_plain_text
from domain_models.tree import BlockTree
from notion_digest.utils.traversal import iter_blocks

BLOCK_SEPARATOR = "\n\n"


def block_plain_text(block: Block) -> str | None:
    """
    Plain text of a text-bearing block, or None for kinds without a text payload
    (image, code, divider, table, table row, columns, unknown).
    """
    if isinstance(block, TextBlock):
        return join_plain_text(block.rich_text)
    return None


def extract_text(tree: BlockTree) -> str:
    """
    Flatten the tree into the text used as summarization input.

    Blocks are visited depth-first in document order; each text-bearing block
    contributes its text followed by a blank line. Depth is not encoded.
    """
    parts: list[str] = []
    for block, _ in iter_blocks(tree):
        text = block_plain_text(block)
        if text is not None:
            parts.append(text)
            parts.append(BLOCK_SEPARATOR)
    return "".join(parts)
