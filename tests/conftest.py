from collections.abc import Iterator
from typing import Any

import pytest

from domain_models.blocks import Block, parse_block
from domain_models.config import DigestConfig
from domain_models.types import BlockID, RawBlock
from notion_digest.interfaces import ChildrenPage

# Shared Test Utilities for Notion block generation.


def rich_text(text: str) -> list[dict[str, Any]]:
    """Raw rich text array with a single run."""
    return [{"type": "text", "plain_text": text, "annotations": {"bold": False}}]


def raw_block(
    kind: str,
    text: str = "",
    block_id: str = "b",
    has_children: bool = False,
    **payload: Any,
) -> RawBlock:
    """Raw Notion block object as returned by blocks.children.list."""
    body: dict[str, Any] = {"rich_text": rich_text(text)} if text else {"rich_text": []}
    body.update(payload)
    return {
        "object": "block",
        "id": block_id,
        "type": kind,
        "has_children": has_children,
        kind: body,
    }


def make_block(
    kind: str, text: str = "", block_id: str = "b", has_children: bool = False, **payload: Any
) -> Block:
    """Typed block built through the same parser the client uses."""
    return parse_block(raw_block(kind, text, block_id, has_children, **payload))


def generate_blocks(count: int, prefix: str = "p") -> Iterator[Block]:
    """Generator of paragraph blocks with sequential ids and texts."""
    for i in range(count):
        yield make_block("paragraph", f"Paragraph {i}", block_id=f"{prefix}-{i}")


class FakeBlockSource:
    """
    In-memory BlockSource.

    `tree` maps a parent id to its full ordered child list; pages are cut according to
    the requested page size and the cursor is the stringified offset.
    """

    def __init__(
        self,
        tree: dict[BlockID, list[Block]],
        fail_on: tuple[BlockID, int] | None = None,
    ) -> None:
        self.tree = tree
        self.fail_on = fail_on
        self.calls: list[tuple[BlockID, int, str | None]] = []

    def list_children(
        self,
        block_id: BlockID,
        *,
        page_size: int,
        start_cursor: str | None = None,
    ) -> ChildrenPage:
        self.calls.append((block_id, page_size, start_cursor))
        page_number = sum(1 for call in self.calls if call[0] == block_id)
        if self.fail_on == (block_id, page_number):
            msg = f"Simulated API failure on page {page_number}"
            raise ConnectionError(msg)

        children = self.tree.get(block_id, [])
        offset = int(start_cursor) if start_cursor else 0
        end = offset + page_size
        has_more = end < len(children)
        return ChildrenPage(
            results=children[offset:end],
            has_more=has_more,
            next_cursor=str(end) if has_more else None,
        )


@pytest.fixture
def config() -> DigestConfig:
    return DigestConfig()
