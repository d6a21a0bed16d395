"""
Agents package for notion-digest.
Contains the LLM-backed SummarizationAgent.
"""

from notion_digest.agents.summarizer import SummarizationAgent

__all__ = ["SummarizationAgent"]
