import pytest
from pydantic import ValidationError

from domain_models.blocks import (
    BulletedListItemBlock,
    CalloutBlock,
    CodeBlock,
    ColumnListBlock,
    Heading2Block,
    ImageBlock,
    ParagraphBlock,
    RichText,
    TableRowBlock,
    ToDoBlock,
    UnknownBlock,
    join_plain_text,
    parse_block,
)
from tests.conftest import raw_block, rich_text


def test_parse_paragraph() -> None:
    block = parse_block(raw_block("paragraph", "Hello", block_id="p1", has_children=True))
    assert isinstance(block, ParagraphBlock)
    assert block.id == "p1"
    assert block.has_children is True
    assert join_plain_text(block.rich_text) == "Hello"


def test_parse_heading_keeps_level() -> None:
    block = parse_block(raw_block("heading_2", "Title"))
    assert isinstance(block, Heading2Block)
    assert block.level == 2


def test_parse_to_do_checked_flag() -> None:
    block = parse_block(raw_block("to_do", "Task", checked=True))
    assert isinstance(block, ToDoBlock)
    assert block.to_do.checked is True


def test_parse_code_language() -> None:
    block = parse_block(raw_block("code", "print(1)", language="python"))
    assert isinstance(block, CodeBlock)
    assert block.code.language == "python"
    assert join_plain_text(block.code.rich_text) == "print(1)"


def test_parse_callout_icon() -> None:
    block = parse_block(raw_block("callout", "Note", icon={"type": "emoji", "emoji": "🔥"}))
    assert isinstance(block, CalloutBlock)
    assert block.callout.icon is not None
    assert block.callout.icon.emoji == "🔥"


def test_image_source_url_by_type() -> None:
    external = parse_block(
        raw_block("image", type="external", external={"url": "https://example.com/a.png"})
    )
    hosted = parse_block(
        raw_block(
            "image",
            type="file",
            file={"url": "https://s3.example.com/b.png", "expiry_time": "2030-01-01T00:00:00Z"},
        )
    )
    assert isinstance(external, ImageBlock)
    assert external.image.source_url == "https://example.com/a.png"
    assert isinstance(hosted, ImageBlock)
    assert hosted.image.source_url == "https://s3.example.com/b.png"


def test_image_with_mismatched_source_has_no_url() -> None:
    block = parse_block(raw_block("image", type="file_upload"))
    assert isinstance(block, ImageBlock)
    assert block.image.source_url is None


def test_parse_table_row_cells() -> None:
    block = parse_block(
        {
            "id": "r1",
            "type": "table_row",
            "has_children": False,
            "table_row": {"cells": [rich_text("a"), rich_text("b"), []]},
        }
    )
    assert isinstance(block, TableRowBlock)
    assert [join_plain_text(c) for c in block.table_row.cells] == ["a", "b", ""]


def test_parse_container_without_payload() -> None:
    block = parse_block({"id": "c1", "type": "column_list", "has_children": True})
    assert isinstance(block, ColumnListBlock)


def test_unknown_kind_falls_back() -> None:
    block = parse_block(
        {"id": "s1", "type": "synced_block", "has_children": True, "synced_block": {}}
    )
    assert isinstance(block, UnknownBlock)
    assert block.type == "synced_block"
    assert block.has_children is True


def test_missing_type_is_unknown() -> None:
    block = parse_block({"id": "x"})
    assert isinstance(block, UnknownBlock)


def test_missing_id_is_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_block({"type": "paragraph", "paragraph": {"rich_text": []}})


def test_rich_text_annotations_are_carried() -> None:
    block = parse_block(
        {
            "id": "b1",
            "type": "bulleted_list_item",
            "bulleted_list_item": {
                "rich_text": [
                    {"plain_text": "bold ", "annotations": {"bold": True}},
                    {"plain_text": "link", "href": "https://example.com"},
                ]
            },
        }
    )
    assert isinstance(block, BulletedListItemBlock)
    assert block.rich_text[0].annotations.bold is True
    assert block.rich_text[1].href == "https://example.com"
    assert join_plain_text(block.rich_text) == "bold link"


def test_join_plain_text_empty() -> None:
    assert join_plain_text([]) == ""
    assert join_plain_text([RichText(plain_text="a"), RichText(plain_text="b")]) == "ab"
