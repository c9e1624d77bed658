"""
Text-generation providers used by the summarization client.

A provider exposes one capability, ``generate(system_instruction, content,
temperature)``, and turns its SDK's failures into ``ProviderError`` so the
client never sees vendor exceptions.
"""

from typing import Any, Optional, Protocol, Union

import httpx
import openai
from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types
from openai import AsyncOpenAI

from summarize_ai.ai.errors import ConfigurationError, ProviderError
from summarize_ai.core.logger import get_logger
from summarize_ai.schemas.summary import ProviderName

logger = get_logger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"


class GenerationProvider(Protocol):
    model: str

    async def generate(
        self,
        system_instruction: str,
        content: str,
        temperature: float,
    ) -> Optional[str]:
        ...


class GeminiProvider:
    """Google Gemini through the ``google-genai`` async client."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_GEMINI_MODEL,
        client: Optional[Any] = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("API Key is missing")
        self.model = model
        self.client = client or genai.Client(api_key=api_key)
        logger.info("Initialized Gemini provider with model %s", self.model)

    async def generate(
        self,
        system_instruction: str,
        content: str,
        temperature: float,
    ) -> Optional[str]:
        config = genai_types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
        )
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=content,
                config=config,
            )
        except (genai_errors.APIError, httpx.HTTPError) as exc:
            raise ProviderError(f"Gemini request failed: {exc}", cause=exc) from exc

        return response.text


class OpenAIProvider:
    """OpenAI chat completions with the instruction as the system message."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_OPENAI_MODEL,
        client: Optional[Any] = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("API Key is missing")
        self.model = model
        self.client = client or AsyncOpenAI(api_key=api_key)
        logger.info("Initialized OpenAI provider with model %s", self.model)

    async def generate(
        self,
        system_instruction: str,
        content: str,
        temperature: float,
    ) -> Optional[str]:
        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": content},
                ],
                temperature=temperature,
            )
        except openai.OpenAIError as exc:
            raise ProviderError(f"OpenAI request failed: {exc}", cause=exc) from exc

        try:
            return resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise ProviderError("OpenAI returned a malformed response", cause=exc) from exc


def build_provider(
    name: Union[ProviderName, str],
    api_key: Optional[str],
    model: Optional[str] = None,
) -> GenerationProvider:
    """
    Construct the configured provider.

    The key is checked before any SDK client is created, so a missing
    credential never reaches the network.
    """
    if not api_key:
        raise ConfigurationError("API Key is missing")
    try:
        name = ProviderName(name)
    except ValueError:
        raise ConfigurationError(f"Unknown summarizer provider: {name!r}")

    if name == ProviderName.GEMINI:
        return GeminiProvider(api_key, model=model or DEFAULT_GEMINI_MODEL)
    return OpenAIProvider(api_key, model=model or DEFAULT_OPENAI_MODEL)
