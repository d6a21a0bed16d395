import logging
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError

from domain_models.config import DigestConfig
from domain_models.constants import MAX_PAGE_SIZE, SUMMARY_SEPARATOR
from domain_models.tree import BlockTree
from notion_digest.agents.summarizer import SummarizationAgent
from notion_digest.clients.notion import NotionBlockSource
from notion_digest.config import (
    NOTION_TOKEN_ENV,
    OPENAI_KEY_ENV,
    get_notion_token,
    get_openai_api_key,
    require_credential,
)
from notion_digest.engines.fetcher import TreeFetcher
from notion_digest.exceptions import ConfigurationError, FetchError, SummarizationError
from notion_digest.exporters.markdown import export_to_markdown
from notion_digest.exporters.plain_text import extract_text
from notion_digest.utils.page_id import format_page_id

# Configure logging to stderr so it doesn't interfere with the rendering on stdout
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="notion-digest",
    help="notion-digest: Render a Notion page as indented Markdown and summarize it with an LLM.",
    add_completion=False,
)

DEFAULT_CONFIG = DigestConfig.default()


def _fail_with_error(message: str) -> NoReturn:
    """Centralized error handling: Log error and exit with code 1."""
    typer.echo(message, err=True)
    logger.error(message)
    raise typer.Exit(code=1)


def _build_config(model: str, concurrency: int, page_size: int) -> DigestConfig:
    try:
        return DigestConfig(
            summarization_model=model,
            fetch_concurrency=concurrency,
            page_size=page_size,
        )
    except ValidationError as e:
        _fail_with_error(f"Invalid configuration: {e}")


def _fetch_tree(page_id: str, token: str, config: DigestConfig) -> BlockTree:
    """Fetch the whole page. Any failure aborts the run before output is written."""
    source = NotionBlockSource(token=token, config=config)
    fetcher = TreeFetcher(source, config)
    try:
        return fetcher.fetch_tree(page_id)
    except FetchError as e:
        _fail_with_error(f"Error fetching blocks: {e}")


def _summarize(tree: BlockTree, config: DigestConfig) -> None:
    """Print the synopsis. Failures are reported but do not fail the run."""
    content = extract_text(tree)
    try:
        summarizer = SummarizationAgent(config)
        summary = summarizer.summarize(content)
    except SummarizationError as e:
        logger.error(f"Error generating summary: {e}")
        typer.echo(f"Summary unavailable: {e}")
        return
    typer.echo(summary)


@app.command()
def digest(
    page_id: Annotated[
        str,
        typer.Argument(
            help="Notion page id, hyphenated or as the 32-character form from the page URL.",
        ),
    ],
    model: Annotated[
        str,
        typer.Option("--model", "-m", help="Summarization model to use."),
    ] = DEFAULT_CONFIG.summarization_model,
    concurrency: Annotated[
        int,
        typer.Option(
            "--concurrency",
            "-c",
            help="Maximum parallel child-list requests (1 = sequential).",
        ),
    ] = DEFAULT_CONFIG.fetch_concurrency,
    page_size: Annotated[
        int,
        typer.Option("--page-size", help=f"Blocks per API call (max {MAX_PAGE_SIZE})."),
    ] = DEFAULT_CONFIG.page_size,
    summary: Annotated[
        bool,
        typer.Option("--summary/--no-summary", help="Enable/Disable the AI summary."),
    ] = True,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging."),
    ] = False,
) -> None:
    """
    Fetch a Notion page, print its structure and an AI summary.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = _build_config(model, concurrency, page_size)

    # Credentials are checked before any network activity
    try:
        token = require_credential(NOTION_TOKEN_ENV, get_notion_token())
        if summary:
            require_credential(OPENAI_KEY_ENV, get_openai_api_key())
    except ConfigurationError as e:
        _fail_with_error(str(e))

    root_id = format_page_id(page_id)
    logger.info(f"Fetching page {root_id}")
    tree = _fetch_tree(root_id, token, config)

    typer.echo(export_to_markdown(tree), nl=False)

    if not summary:
        return

    typer.echo(f"\n{SUMMARY_SEPARATOR}\n")
    _summarize(tree, config)


if __name__ == "__main__":
    app()
