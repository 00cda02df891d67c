"""
Base agent: the one shared prompt routine every agent variant runs.

Variants differ only in configuration (name, default system instruction);
message construction, the completion call, and error mapping live here.
"""

import logging

import openai
from openai import AsyncOpenAI

from article_pipeline.agent.prompts import PromptRequest, build_messages
from article_pipeline.core.config import OPENAI_LLM_MODEL
from article_pipeline.core.errors import DecodeError, EmptyCompletion, ProviderError

logger = logging.getLogger(__name__)


class Agent:
    """
    A role-configured wrapper around a completion-model client.

    Subclasses set `name` and `default_system_instruction`. Instances are
    built once at startup and never mutated, so one instance can serve
    concurrent requests.
    """

    name: str = "agent"
    default_system_instruction: str = ""

    def __init__(
        self,
        client: AsyncOpenAI,
        system_instruction: str | None = None,
        model: str = OPENAI_LLM_MODEL,
    ) -> None:
        self._client = client
        self._system_instruction = system_instruction
        self._model = model

    @property
    def system_instruction(self) -> str:
        """The instruction set at construction, or the variant's default."""
        if self._system_instruction:
            return self._system_instruction
        return self.default_system_instruction

    @property
    def model(self) -> str:
        return self._model

    def build_messages(self, instruction: str, context: str) -> list[dict[str, str]]:
        return build_messages(self.system_instruction, PromptRequest(instruction=instruction, context=context))

    async def prompt(self, instruction: str, context: str) -> str:
        """
        Send (instruction, context) to the model and return the first choice's text.

        Raises:
            ProviderError: On transport or provider failure.
            DecodeError: If the response body could not be parsed.
            EmptyCompletion: If the model returned no choice or no text.
        """
        messages = self.build_messages(instruction, context)
        logger.info(
            "[agent:%s] IN  instruction=%r context_len=%d",
            self.name, instruction, len(context),
        )
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=messages,
            )
        except openai.APIResponseValidationError as e:
            raise DecodeError(e) from e
        except openai.APIError as e:
            raise ProviderError("OpenAI", e) from e
        except ValueError as e:
            # malformed JSON body on a 200 reply
            raise DecodeError(e) from e

        # Without strict validation the SDK hands back a str for non-JSON bodies
        # and loosely constructed models for JSON of the wrong shape.
        try:
            choices = response.choices or []
            message = choices[0].message if choices else None
            content = message.content if message is not None else None
        except (AttributeError, TypeError) as e:
            raise DecodeError(e) from e
        if content is None:
            raise EmptyCompletion(self.name)
        if not isinstance(content, str):
            raise DecodeError(f"message content is {type(content).__name__}, expected str")

        logger.info("[agent:%s] OUT Retrieved result from prompt: %s", self.name, content)
        return content
