"""
Prompt templates used by notion-digest.
"""

# System instruction for the page synopsis
SUMMARY_SYSTEM_PROMPT = (
    "You are an expert at summarizing documents. "
    "Summarize the key points of the given text as 3-5 bullet points."
)
