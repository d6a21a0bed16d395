from pydantic import BaseModel, ConfigDict, Field

from domain_models.blocks import Block
from domain_models.types import BlockID


class BlockTree(BaseModel):
    """
    A fully fetched Notion page.

    The root (the page itself) is not a block: only its direct children are held in
    `blocks`. Every expanded block is a key of `children`; a block without an entry
    is treated as a leaf even if the server flagged `has_children`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root_id: BlockID = Field(..., description="Id of the page the tree was fetched from.")
    blocks: list[Block] = Field(
        default_factory=list, description="Direct children of the root, in API order."
    )
    children: dict[BlockID, list[Block]] = Field(
        default_factory=dict,
        description="Ordered child blocks for every block fetched with has_children.",
    )

    def children_of(self, block_id: BlockID) -> list[Block]:
        """Return the children of a block, or of the root when given `root_id`."""
        if block_id == self.root_id:
            return self.blocks
        return self.children.get(block_id, [])

    def is_expanded(self, block_id: BlockID) -> bool:
        return block_id in self.children

    @property
    def block_count(self) -> int:
        return len(self.blocks) + sum(len(c) for c in self.children.values())
