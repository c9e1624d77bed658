from typing import Optional

from summarize_ai.ai.errors import GenerationError, ProviderError
from summarize_ai.ai.providers import GenerationProvider, build_provider
from summarize_ai.ai.translator import translate
from summarize_ai.core.logger import get_logger
from summarize_ai.schemas.summary import SummaryRequest

logger = get_logger(__name__)

SUMMARY_TEMPERATURE = 0.7


class SummarizationClient:
    """
    One-shot summarization over a generation provider.

    Makes exactly one provider call per ``summarize``: no retries, no cache,
    no shared state. Input checks (empty text, minimum word count) belong to
    the caller.
    """

    def __init__(
        self,
        provider: GenerationProvider,
        temperature: float = SUMMARY_TEMPERATURE,
    ) -> None:
        self.provider = provider
        self.temperature = temperature

    @classmethod
    def from_settings(cls, settings) -> "SummarizationClient":
        """
        Build a client from application settings.

        Raises ConfigurationError when the API key is absent.
        """
        provider = build_provider(
            settings.SUMMARIZER_PROVIDER,
            settings.API_KEY,
            settings.SUMMARIZER_MODEL,
        )
        return cls(provider)

    async def summarize(self, request: SummaryRequest) -> str:
        instruction = translate(request.config)
        model: Optional[str] = getattr(self.provider, "model", None)

        logger.debug(
            "Requesting summary model=%s config=%s chars=%s",
            model,
            request.config.model_dump(mode="json"),
            len(request.source_text),
        )

        try:
            text = await self.provider.generate(
                instruction,
                request.source_text,
                self.temperature,
            )
        except ProviderError:
            logger.exception("Summarization provider error (model=%s)", model)
            raise

        if not text or not text.strip():
            logger.error("Provider returned no summary text (model=%s)", model)
            raise GenerationError("Failed to generate summary text")

        logger.info("Summary generated (model=%s, chars=%s)", model, len(text))
        return text
