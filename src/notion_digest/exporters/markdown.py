from collections.abc import Iterator
from io import StringIO
from typing import TextIO

from domain_models.blocks import (
    Block,
    BulletedListItemBlock,
    CalloutBlock,
    CodeBlock,
    DividerBlock,
    Heading1Block,
    Heading2Block,
    Heading3Block,
    ImageBlock,
    NumberedListItemBlock,
    ParagraphBlock,
    QuoteBlock,
    TableRowBlock,
    ToDoBlock,
    ToggleBlock,
    join_plain_text,
)
from domain_models.constants import DEFAULT_CALLOUT_ICON, INDENT_UNIT
from domain_models.tree import BlockTree
from notion_digest.utils.traversal import iter_blocks


def _render_heading(block: Heading1Block | Heading2Block | Heading3Block, indent: str) -> str:
    return f"{indent}{'#' * block.level} {join_plain_text(block.rich_text)}\n\n"


def _render_code(block: CodeBlock, indent: str) -> str:
    text = join_plain_text(block.code.rich_text)
    return f"{indent}```{block.code.language}\n{indent}{text}\n{indent}```\n\n"


def _render_quote(block: QuoteBlock, indent: str) -> str:
    lines = join_plain_text(block.rich_text).split("\n")
    return "".join(f"{indent}> {line}\n" for line in lines) + "\n"


def _render_callout(block: CalloutBlock, indent: str) -> str:
    icon = DEFAULT_CALLOUT_ICON
    payload_icon = block.callout.icon
    if payload_icon is not None and payload_icon.type == "emoji" and payload_icon.emoji:
        icon = payload_icon.emoji
    return f"{indent}> {icon} {join_plain_text(block.rich_text)}\n\n"


def _render_table_row(block: TableRowBlock, indent: str) -> str:
    cells = [join_plain_text(cell) for cell in block.table_row.cells]
    return f"{indent}| {' | '.join(cells)} |\n"


def render_block(block: Block, depth: int) -> str:
    """
    Render a single block as an indented Markdown fragment.

    Containers (table, column list, column) and unknown kinds render nothing;
    their children are rendered as regular blocks one level deeper.
    Numbered items always use the literal prefix "1.".
    """
    indent = INDENT_UNIT * depth

    if isinstance(block, ParagraphBlock):
        return f"{indent}{join_plain_text(block.rich_text)}\n\n"
    if isinstance(block, (Heading1Block, Heading2Block, Heading3Block)):
        return _render_heading(block, indent)
    if isinstance(block, BulletedListItemBlock):
        return f"{indent}- {join_plain_text(block.rich_text)}\n"
    if isinstance(block, NumberedListItemBlock):
        return f"{indent}1. {join_plain_text(block.rich_text)}\n"
    if isinstance(block, ToDoBlock):
        checkbox = "[x]" if block.to_do.checked else "[ ]"
        return f"{indent}- {checkbox} {join_plain_text(block.rich_text)}\n"
    if isinstance(block, ImageBlock):
        url = block.image.source_url
        return f"{indent}![Image]({url})\n\n" if url is not None else ""
    if isinstance(block, CodeBlock):
        return _render_code(block, indent)
    if isinstance(block, QuoteBlock):
        return _render_quote(block, indent)
    if isinstance(block, CalloutBlock):
        return _render_callout(block, indent)
    if isinstance(block, DividerBlock):
        return f"{indent}---\n\n"
    if isinstance(block, ToggleBlock):
        return f"{indent}- {join_plain_text(block.rich_text)}\n"
    if isinstance(block, TableRowBlock):
        return _render_table_row(block, indent)
    # table, column_list, column and unknown kinds have no direct output
    return ""


def stream_markdown(tree: BlockTree) -> Iterator[str]:
    """
    Yield the rendering of every block in document order.
    Children follow their parent at depth + 1.
    """
    for block, depth in iter_blocks(tree):
        fragment = render_block(block, depth)
        if fragment:
            yield fragment


def write_markdown(tree: BlockTree, out: TextIO) -> None:
    """Write the structural rendering of `tree` to a text stream."""
    for fragment in stream_markdown(tree):
        out.write(fragment)


def export_to_markdown(tree: BlockTree) -> str:
    """
    Exports the BlockTree to a Markdown string.

    Indentation is four spaces per nesting level; root children start at column 0.

    Args:
        tree: The fetched page tree.

    Returns:
        A formatted Markdown string.
    """
    buffer = StringIO()
    write_markdown(tree, buffer)
    return buffer.getvalue()
