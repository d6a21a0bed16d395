"""
Custom exceptions for notion-digest.
"""


class DigestError(Exception):
    """
    Base exception for notion-digest.
    All custom exceptions in the system should inherit from this.
    """


class ConfigurationError(DigestError):
    """Raised when a required credential or setting is missing."""


class FetchError(DigestError):
    """
    Raised when retrieving child blocks from Notion fails.

    Any failure at any depth aborts the whole traversal; no partial tree is returned.
    """


class SummarizationError(DigestError):
    """
    Raised when summarization fails.

    This error encapsulates failures during the summarization process,
    such as API connection issues, missing configuration, or oversized input.
    """
