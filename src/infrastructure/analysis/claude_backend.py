"""
Infrastructure Adapter: Claude Analysis Backend
Implements IAnalysisBackend with the Anthropic Messages API
"""

from typing import Optional
import logging

import anthropic

from application.ports.analysis_backend import IAnalysisBackend
from domain.entities.analysis import AnalysisContext, AnalysisResponse
from domain.exceptions import AnalysisBackendError
from .prompts import SYSTEM_PROMPT, create_prompt, parse_model_reply

logger = logging.getLogger(__name__)


class ClaudeAnalysisBackend(IAnalysisBackend):
    """Sends the rendered context prompt to Claude"""

    name = "claude"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-3-5-sonnet-20241022",
        max_tokens: int = 2048,
        temperature: float = 0.3,
        timeout: float = 30.0,
        client: Optional[anthropic.AsyncAnthropic] = None
    ):
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.client = client or anthropic.AsyncAnthropic(
            api_key=api_key,
            timeout=timeout,
            max_retries=1
        )

    async def respond(self, context: AnalysisContext) -> AnalysisResponse:
        prompt = create_prompt(context, include_format=True, include_system=False)

        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}]
            )
        except anthropic.APITimeoutError as e:
            raise AnalysisBackendError(f"Claude request timed out: {e}", reason="timeout")
        except anthropic.APIError as e:
            raise AnalysisBackendError(f"Claude API error: {e}")

        usage = getattr(message, "usage", None)
        if usage is not None:
            logger.info(
                "Claude usage: %s input / %s output tokens",
                usage.input_tokens, usage.output_tokens
            )

        text = "".join(
            block.text for block in message.content
            if getattr(block, "type", None) == "text"
        )

        result = parse_model_reply(text)
        if result is None:
            raise AnalysisBackendError("Claude returned an empty response", reason="invalid_response")

        return result
