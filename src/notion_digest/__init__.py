"""
notion-digest: Notion page rendering and summarization.
This is the root package containing the fetcher, exporters, agents and utilities.
"""

from domain_models.tree import BlockTree
from notion_digest.engines.fetcher import TreeFetcher
from notion_digest.exporters.markdown import export_to_markdown
from notion_digest.exporters.plain_text import extract_text

__all__ = ["BlockTree", "TreeFetcher", "export_to_markdown", "extract_text"]
