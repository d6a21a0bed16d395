from domain_models.constants import PAGE_ID_GROUPS, PAGE_ID_LENGTH


def format_page_id(page_id: str) -> str:
    """
    Normalize a Notion page id to the hyphenated 8-4-4-4-12 UUID form.

    Ids that already contain a hyphen are returned unchanged, as is anything that is
    not exactly 32 characters long.
    """
    page_id = page_id.strip()
    if "-" in page_id or len(page_id) != PAGE_ID_LENGTH:
        return page_id

    groups = []
    start = 0
    for size in PAGE_ID_GROUPS:
        groups.append(page_id[start : start + size])
        start += size
    return "-".join(groups)
