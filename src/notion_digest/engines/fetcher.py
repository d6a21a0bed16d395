import logging
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor

from domain_models.blocks import Block
from domain_models.config import DigestConfig
from domain_models.tree import BlockTree
from domain_models.types import BlockID
from notion_digest.exceptions import FetchError
from notion_digest.interfaces import BlockSource

logger = logging.getLogger(__name__)

# (children in API order, number of upstream calls it took)
_PageResult = tuple[list[Block], int]
_Mapper = Callable[[Callable[[BlockID], _PageResult], Iterable[BlockID]], Iterator[_PageResult]]


class TreeFetcher:
    """
    Retrieves a page and all of its descendants into a `BlockTree`.

    Children of one parent are read page by page with an opaque cursor and kept in
    API order. Descendants are expanded one tree layer at a time; with
    `fetch_concurrency > 1` the parents of a layer are fetched on a bounded thread
    pool, but results are always collected in submission order and stored by the
    calling thread, so per-parent order never depends on scheduling.
    """

    def __init__(self, source: BlockSource, config: DigestConfig | None = None) -> None:
        self.source = source
        self.config = config or DigestConfig.default()
        self.api_calls = 0

    def fetch_children(self, parent_id: BlockID) -> list[Block]:
        """
        Return all direct children of `parent_id`, concatenated across pages.

        Raises:
            FetchError: If any page request fails.
        """
        blocks, calls = self._fetch_pages(parent_id)
        self.api_calls += calls
        return blocks

    def fetch_tree(self, root_id: BlockID) -> BlockTree:
        """
        Fetch the full tree under `root_id`.

        Every block reporting `has_children` is expanded and stored under its id.
        Fail-fast: the first failed page request aborts the whole traversal.

        Raises:
            FetchError: If any page request at any depth fails.
        """
        self.api_calls = 0
        top_level = self.fetch_children(root_id)

        if self.config.fetch_concurrency == 1:
            # Builtin map is lazy, so a failure stops before the next request is made.
            children = self._expand(root_id, top_level, map)
        else:
            with ThreadPoolExecutor(max_workers=self.config.fetch_concurrency) as executor:
                try:
                    children = self._expand(root_id, top_level, executor.map)
                except Exception:
                    executor.shutdown(wait=True, cancel_futures=True)
                    raise

        tree = BlockTree(root_id=root_id, blocks=top_level, children=children)
        logger.info(
            f"Fetched {tree.block_count} blocks ({len(children)} expanded) "
            f"in {self.api_calls} API calls."
        )
        return tree

    def _expand(
        self, root_id: BlockID, top_level: list[Block], mapper: _Mapper
    ) -> dict[BlockID, list[Block]]:
        """Expand layer by layer until no block with children remains."""
        children: dict[BlockID, list[Block]] = {}
        seen: set[BlockID] = {root_id}
        layer = self._expandable(top_level, seen)
        depth = 0

        while layer:
            depth += 1
            logger.debug(f"Expanding {len(layer)} blocks at depth {depth}.")
            next_layer: list[Block] = []
            results = mapper(self._fetch_pages, [block.id for block in layer])
            for block, (blocks, calls) in zip(layer, results, strict=True):
                children[block.id] = blocks
                self.api_calls += calls
                next_layer.extend(self._expandable(blocks, seen))
            layer = next_layer

        return children

    @staticmethod
    def _expandable(blocks: list[Block], seen: set[BlockID]) -> list[Block]:
        """Blocks that need a children fetch. Each id is expanded once."""
        pending = []
        for block in blocks:
            if not block.has_children:
                continue
            if block.id in seen:
                logger.warning(f"Block {block.id} appears more than once; expanding it once.")
                continue
            seen.add(block.id)
            pending.append(block)
        return pending

    def _fetch_pages(self, parent_id: BlockID) -> _PageResult:
        blocks: list[Block] = []
        cursor: str | None = None
        calls = 0

        while True:
            try:
                page = self.source.list_children(
                    parent_id, page_size=self.config.page_size, start_cursor=cursor
                )
            except FetchError:
                logger.exception(f"Fetching children of {parent_id} failed (cursor={cursor!r}).")
                raise
            except Exception as e:
                logger.exception(f"Fetching children of {parent_id} failed (cursor={cursor!r}).")
                msg = f"Failed to get children of {parent_id}: {e}"
                raise FetchError(msg) from e

            calls += 1
            blocks.extend(page.results)
            logger.debug(
                f"Block {parent_id}: page {calls} returned {len(page.results)} blocks "
                f"(has_more={page.has_more})."
            )

            if not page.has_more:
                break
            if not page.next_cursor:
                msg = f"Children of {parent_id} reported more pages without a next cursor."
                raise FetchError(msg)
            cursor = page.next_cursor

        return blocks, calls
