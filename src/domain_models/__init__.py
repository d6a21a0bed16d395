"""
Core domain models and configuration schemas for notion-digest.
This package contains the Pydantic definitions used throughout the system.
"""

from .blocks import Block, RichText, UnknownBlock, parse_block
from .config import DigestConfig
from .tree import BlockTree

__all__ = ["Block", "BlockTree", "DigestConfig", "RichText", "UnknownBlock", "parse_block"]
