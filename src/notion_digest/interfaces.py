from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from domain_models.blocks import Block
from domain_models.types import BlockID


class ChildrenPage(BaseModel):
    """One page of a paginated child listing."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    results: list[Block] = Field(default_factory=list, description="Blocks in API order.")
    has_more: bool = Field(default=False, description="Whether another page follows.")
    next_cursor: str | None = Field(
        default=None, description="Cursor for the next page when has_more is true."
    )


@runtime_checkable
class BlockSource(Protocol):
    """
    Protocol for the document API: lists the direct children of a block.
    """

    def list_children(
        self,
        block_id: BlockID,
        *,
        page_size: int,
        start_cursor: str | None = None,
    ) -> ChildrenPage:
        """
        Return one page of direct children of `block_id`.

        Args:
            block_id: Page or block whose children are listed.
            page_size: Maximum number of blocks in the page.
            start_cursor: Continuation cursor from the previous page, or None for the first.
        """
        ...


@runtime_checkable
class Summarizer(Protocol):
    """
    Protocol for summarization engines.
    """

    def summarize(self, text: str) -> str:
        """
        Summarize the provided text into a short bullet list.

        Args:
            text: The flattened document text.

        Returns:
            The summary text.
        """
        ...
