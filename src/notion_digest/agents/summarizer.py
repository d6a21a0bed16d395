"""
Summarization Agent module.
This module condenses the flattened page text into a short bullet list using an OpenAI chat model.
"""

import logging
import uuid
from typing import Any

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from tenacity import Retrying, stop_after_attempt, wait_exponential

from domain_models.config import DigestConfig
from notion_digest.config import get_openai_api_key, get_openai_base_url
from notion_digest.exceptions import SummarizationError
from notion_digest.utils.prompts import SUMMARY_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class SummarizationAgent:
    """
    Agent responsible for summarizing page text using an LLM.
    """

    def __init__(self, config: DigestConfig, llm: ChatOpenAI | None = None) -> None:
        """
        Initialize the SummarizationAgent.

        Args:
            config: Configuration containing model name, retries, etc.
            llm: Optional pre-configured LLM instance. If None, it will be initialized from config.
        """
        self.config = config
        self.model_name = config.summarization_model

        api_key = get_openai_api_key()
        base_url = get_openai_base_url()

        self.mock_mode = api_key == "mock"

        self.llm: ChatOpenAI | None = None

        if llm:
            self.llm = llm
        elif api_key and not self.mock_mode:
            self.llm = ChatOpenAI(
                model=self.model_name,
                api_key=api_key,
                base_url=base_url,
                temperature=config.llm_temperature,
                max_retries=0,
            )

    def summarize(self, text: str) -> str:
        """
        Summarize the provided text into 3-5 bullet points.

        Args:
            text: The flattened document text.

        Raises:
            SummarizationError: If no LLM is configured, the input is too long,
                or the call fails after all retries.
        """
        request_id = str(uuid.uuid4())

        if not text.strip():
            logger.debug(f"[{request_id}] Skipping empty text summarization.")
            return ""

        if len(text) > self.config.max_input_length:
            msg = (
                f"Input text exceeds maximum allowed length "
                f"({len(text)} > {self.config.max_input_length} characters)."
            )
            raise SummarizationError(msg)

        if self.mock_mode:
            logger.info(f"[{request_id}] Mock mode enabled. Returning static summary.")
            return f"- Summary of {text[:20].strip()}..."

        if not self.llm:
            msg = f"[{request_id}] LLM not initialized (missing API Key?). Cannot perform summarization."
            logger.error(msg)
            raise SummarizationError(msg)

        messages: list[BaseMessage] = [
            SystemMessage(content=SUMMARY_SYSTEM_PROMPT),
            HumanMessage(content=text),
        ]

        try:
            response = self._invoke_llm(messages, request_id)
            return self._process_response(response, request_id)
        except SummarizationError:
            raise
        except Exception as e:
            logger.exception(f"[{request_id}] Summarization failed for text length {len(text)}")
            msg = f"Summarization failed: {e}"
            raise SummarizationError(msg) from e

    def _invoke_llm(self, messages: list[BaseMessage], request_id: str) -> BaseMessage:
        """
        Invoke the LLM with exponential backoff retry logic.

        Raises:
            SummarizationError: If the LLM returns no response.
        """
        if not self.llm:
            msg = "LLM not initialized"
            raise SummarizationError(msg)

        response = None
        for attempt in Retrying(
            stop=stop_after_attempt(self.config.max_retries),
            wait=wait_exponential(
                multiplier=self.config.retry_multiplier,
                min=self.config.retry_min_wait,
                max=self.config.retry_max_wait,
            ),
            reraise=True,
        ):
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    logger.warning(
                        f"[{request_id}] Retrying LLM call (Attempt {attempt.retry_state.attempt_number}/{self.config.max_retries})"
                    )
                response = self.llm.invoke(messages)

        if not response:
            msg = f"[{request_id}] No response received from LLM."
            raise SummarizationError(msg)

        return response

    def _process_response(self, response: BaseMessage, request_id: str) -> str:
        """
        Extract the text content from the LLM response.

        Handles string and list (content parts) payloads and ensures a string return.
        """
        content: str | list[str | dict[str, Any]] = response.content

        if isinstance(content, str):
            return content.strip()
        if isinstance(content, list):
            logger.warning(f"[{request_id}] Received list content from LLM.")
            parts = [c.get("text", "") if isinstance(c, dict) else str(c) for c in content]
            return "".join(parts).strip()

        logger.warning(f"[{request_id}] Received unexpected content type from LLM: {type(content)}")
        return str(content)
