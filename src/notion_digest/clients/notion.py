"""
Notion document API adapter.
Wraps the official `notion_client` SDK behind the `BlockSource` protocol.
"""

import logging
from typing import Any

import httpx
from notion_client import Client
from notion_client.errors import HTTPResponseError, RequestTimeoutError
from pydantic import ValidationError

from domain_models.blocks import parse_block
from domain_models.config import DigestConfig
from domain_models.types import BlockID
from notion_digest.exceptions import FetchError
from notion_digest.interfaces import ChildrenPage

logger = logging.getLogger(__name__)


class NotionBlockSource:
    """
    Lists child blocks through `client.blocks.children.list`.
    """

    def __init__(
        self,
        token: str | None = None,
        config: DigestConfig | None = None,
        client: Client | None = None,
    ) -> None:
        """
        Initialize the source.

        Args:
            token: Notion integration token. Ignored when `client` is given.
            config: Configuration providing the request timeout.
            client: Optional pre-configured SDK client (used in tests).
        """
        self.config = config or DigestConfig.default()
        if client is not None:
            self.client = client
        elif token:
            self.client = Client(auth=token, timeout_ms=self.config.notion_timeout_ms)
        else:
            msg = "A Notion token or client is required."
            raise ValueError(msg)

    def list_children(
        self,
        block_id: BlockID,
        *,
        page_size: int,
        start_cursor: str | None = None,
    ) -> ChildrenPage:
        params: dict[str, Any] = {"block_id": block_id, "page_size": page_size}
        if start_cursor:
            params["start_cursor"] = start_cursor

        try:
            response = self.client.blocks.children.list(**params)
        except (HTTPResponseError, RequestTimeoutError, httpx.HTTPError) as e:
            msg = f"failed to get blocks for {block_id}: {e}"
            raise FetchError(msg) from e

        try:
            results = [parse_block(raw) for raw in response.get("results", [])]
        except ValidationError as e:
            msg = f"Malformed block in children of {block_id}: {e}"
            raise FetchError(msg) from e

        return ChildrenPage(
            results=results,
            has_more=bool(response.get("has_more")),
            next_cursor=response.get("next_cursor"),
        )
