from notion_digest.engines.fetcher import TreeFetcher

__all__ = ["TreeFetcher"]
