# Notion API limits
MAX_PAGE_SIZE = 100  # Upper bound accepted by blocks.children.list
DEFAULT_NOTION_TIMEOUT_MS = 60_000

# Rendering
INDENT_UNIT = "    "  # One level of nesting in the structural rendering
DEFAULT_CALLOUT_ICON = "💡"
SUMMARY_SEPARATOR = "=== AI Summary ==="

# Page ids
PAGE_ID_LENGTH = 32
PAGE_ID_GROUPS = (8, 4, 4, 4, 12)

ALLOWED_SUMMARIZATION_MODELS = {
    "gpt-4",
    "gpt-4-turbo",
    "gpt-4o",
    "gpt-4o-mini",
    "gpt-4.1",
    "gpt-4.1-mini",
}

DEFAULT_SUMMARIZER = "gpt-4o"
DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"
