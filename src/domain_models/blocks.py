"""
Block model for Notion content.

Each block kind is a pydantic model whose shape mirrors the Notion wire format:
the kind-specific payload lives under a key named after the kind
(e.g. ``{"type": "to_do", "to_do": {"checked": true, ...}}``).
`Block` is a discriminated union over all known kinds with `UnknownBlock`
as the fallback for anything the server adds later.
"""

from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter

from domain_models.types import BlockID, BlockType, RawBlock


class Annotations(BaseModel):
    """Formatting flags of a rich text run. Carried but not rendered."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"


class RichText(BaseModel):
    """A single styled text run."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    plain_text: str = Field(default="", description="Unformatted text of the run.")
    href: str | None = Field(default=None, description="Link target, if any.")
    annotations: Annotations = Field(default_factory=Annotations)


def join_plain_text(runs: list[RichText]) -> str:
    """Concatenate the plain text of all runs."""
    return "".join(run.plain_text for run in runs)


# Payloads


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class TextPayload(_Payload):
    rich_text: list[RichText] = Field(default_factory=list)
    color: str = "default"


class ToDoPayload(TextPayload):
    checked: bool = False


class CodePayload(TextPayload):
    language: str = ""


class Icon(_Payload):
    type: str
    emoji: str | None = None


class CalloutPayload(TextPayload):
    icon: Icon | None = None


class FileRef(_Payload):
    url: str


class ImagePayload(_Payload):
    type: str = Field(..., description="Source type: 'external' or 'file' (hosted).")
    external: FileRef | None = None
    file: FileRef | None = None
    caption: list[RichText] = Field(default_factory=list)

    @property
    def source_url(self) -> str | None:
        """URL matching the declared source type, or None."""
        if self.type == "external" and self.external:
            return self.external.url
        if self.type == "file" and self.file:
            return self.file.url
        return None


class TablePayload(_Payload):
    table_width: int = 0
    has_column_header: bool = False
    has_row_header: bool = False


class TableRowPayload(_Payload):
    cells: list[list[RichText]] = Field(default_factory=list)


class EmptyPayload(_Payload):
    pass


# Blocks


class BaseBlock(BaseModel):
    """Fields shared by every block kind."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: BlockID = Field(..., description="Notion block id.")
    has_children: bool = Field(
        default=False, description="Whether the server reports child blocks."
    )


class ParagraphBlock(BaseBlock):
    type: Literal["paragraph"] = "paragraph"
    paragraph: TextPayload = Field(default_factory=TextPayload)

    @property
    def rich_text(self) -> list[RichText]:
        return self.paragraph.rich_text


class Heading1Block(BaseBlock):
    level: ClassVar[int] = 1
    type: Literal["heading_1"] = "heading_1"
    heading_1: TextPayload = Field(default_factory=TextPayload)

    @property
    def rich_text(self) -> list[RichText]:
        return self.heading_1.rich_text


class Heading2Block(BaseBlock):
    level: ClassVar[int] = 2
    type: Literal["heading_2"] = "heading_2"
    heading_2: TextPayload = Field(default_factory=TextPayload)

    @property
    def rich_text(self) -> list[RichText]:
        return self.heading_2.rich_text


class Heading3Block(BaseBlock):
    level: ClassVar[int] = 3
    type: Literal["heading_3"] = "heading_3"
    heading_3: TextPayload = Field(default_factory=TextPayload)

    @property
    def rich_text(self) -> list[RichText]:
        return self.heading_3.rich_text


class BulletedListItemBlock(BaseBlock):
    type: Literal["bulleted_list_item"] = "bulleted_list_item"
    bulleted_list_item: TextPayload = Field(default_factory=TextPayload)

    @property
    def rich_text(self) -> list[RichText]:
        return self.bulleted_list_item.rich_text


class NumberedListItemBlock(BaseBlock):
    type: Literal["numbered_list_item"] = "numbered_list_item"
    numbered_list_item: TextPayload = Field(default_factory=TextPayload)

    @property
    def rich_text(self) -> list[RichText]:
        return self.numbered_list_item.rich_text


class ToDoBlock(BaseBlock):
    type: Literal["to_do"] = "to_do"
    to_do: ToDoPayload = Field(default_factory=ToDoPayload)

    @property
    def rich_text(self) -> list[RichText]:
        return self.to_do.rich_text


class ImageBlock(BaseBlock):
    type: Literal["image"] = "image"
    image: ImagePayload


class CodeBlock(BaseBlock):
    type: Literal["code"] = "code"
    code: CodePayload = Field(default_factory=CodePayload)


class QuoteBlock(BaseBlock):
    type: Literal["quote"] = "quote"
    quote: TextPayload = Field(default_factory=TextPayload)

    @property
    def rich_text(self) -> list[RichText]:
        return self.quote.rich_text


class CalloutBlock(BaseBlock):
    type: Literal["callout"] = "callout"
    callout: CalloutPayload = Field(default_factory=CalloutPayload)

    @property
    def rich_text(self) -> list[RichText]:
        return self.callout.rich_text


class DividerBlock(BaseBlock):
    type: Literal["divider"] = "divider"
    divider: EmptyPayload = Field(default_factory=EmptyPayload)


class ToggleBlock(BaseBlock):
    type: Literal["toggle"] = "toggle"
    toggle: TextPayload = Field(default_factory=TextPayload)

    @property
    def rich_text(self) -> list[RichText]:
        return self.toggle.rich_text


class TableBlock(BaseBlock):
    type: Literal["table"] = "table"
    table: TablePayload = Field(default_factory=TablePayload)


class TableRowBlock(BaseBlock):
    type: Literal["table_row"] = "table_row"
    table_row: TableRowPayload = Field(default_factory=TableRowPayload)


class ColumnListBlock(BaseBlock):
    type: Literal["column_list"] = "column_list"
    column_list: EmptyPayload = Field(default_factory=EmptyPayload)


class ColumnBlock(BaseBlock):
    type: Literal["column"] = "column"
    column: EmptyPayload = Field(default_factory=EmptyPayload)


class UnknownBlock(BaseBlock):
    """Any block kind not modelled above. Keeps the raw tag for logging."""

    type: str = BlockType.UNKNOWN.value


_KNOWN_TYPES = frozenset(t.value for t in BlockType if t is not BlockType.UNKNOWN)


def _block_tag(value: Any) -> str:
    """Route raw dicts and model instances to their variant by `type`."""
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if kind in _KNOWN_TYPES:
        return str(kind)
    return BlockType.UNKNOWN.value


Block = Annotated[
    Union[
        Annotated[ParagraphBlock, Tag("paragraph")],
        Annotated[Heading1Block, Tag("heading_1")],
        Annotated[Heading2Block, Tag("heading_2")],
        Annotated[Heading3Block, Tag("heading_3")],
        Annotated[BulletedListItemBlock, Tag("bulleted_list_item")],
        Annotated[NumberedListItemBlock, Tag("numbered_list_item")],
        Annotated[ToDoBlock, Tag("to_do")],
        Annotated[ImageBlock, Tag("image")],
        Annotated[CodeBlock, Tag("code")],
        Annotated[QuoteBlock, Tag("quote")],
        Annotated[CalloutBlock, Tag("callout")],
        Annotated[DividerBlock, Tag("divider")],
        Annotated[ToggleBlock, Tag("toggle")],
        Annotated[TableBlock, Tag("table")],
        Annotated[TableRowBlock, Tag("table_row")],
        Annotated[ColumnListBlock, Tag("column_list")],
        Annotated[ColumnBlock, Tag("column")],
        Annotated[UnknownBlock, Tag("unknown")],
    ],
    Discriminator(_block_tag),
]

# Text-bearing kinds expose `rich_text`; everything else has no text payload.
TextBlock = (
    ParagraphBlock,
    Heading1Block,
    Heading2Block,
    Heading3Block,
    BulletedListItemBlock,
    NumberedListItemBlock,
    ToDoBlock,
    QuoteBlock,
    CalloutBlock,
    ToggleBlock,
)

_BLOCK_ADAPTER: TypeAdapter[Block] = TypeAdapter(Block)


def parse_block(raw: RawBlock) -> Block:
    """
    Validate a raw Notion block object into its typed variant.

    Args:
        raw: The JSON object returned by the API for a single block.

    Returns:
        The matching block model, or `UnknownBlock` for unmodelled kinds.

    Raises:
        pydantic.ValidationError: If the common fields or a known payload are malformed.
    """
    return _BLOCK_ADAPTER.validate_python(raw)
