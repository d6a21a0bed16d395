from enum import StrEnum
from typing import Any, TypeAlias

# BlockID is the opaque identifier Notion assigns to a block (hyphenated UUID string).
BlockID: TypeAlias = str

# Raw JSON object as returned by the Notion API.
RawBlock: TypeAlias = dict[str, Any]


class BlockType(StrEnum):
    """
    Block kinds understood by the renderer and extractor.
    Anything else is parsed as UNKNOWN.
    """

    PARAGRAPH = "paragraph"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    TO_DO = "to_do"
    IMAGE = "image"
    CODE = "code"
    QUOTE = "quote"
    CALLOUT = "callout"
    DIVIDER = "divider"
    TOGGLE = "toggle"
    TABLE = "table"
    TABLE_ROW = "table_row"
    COLUMN_LIST = "column_list"
    COLUMN = "column"
    UNKNOWN = "unknown"
