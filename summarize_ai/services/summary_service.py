import asyncio
import time
import uuid
from typing import Optional

from summarize_ai.ai.client import SummarizationClient
from summarize_ai.ai.errors import (
    SummaryInProgressError,
    SummaryTimeoutError,
    SummaryValidationError,
)
from summarize_ai.ai.stats import compute_stats, count_words
from summarize_ai.core.logger import get_logger
from summarize_ai.schemas.summary import (
    SummarizationConfig,
    SummaryRequest,
    SummaryResult,
)
from summarize_ai.services.session_store import SummarySession

logger = get_logger(__name__)

MIN_SOURCE_WORDS = 10


def validate_source_text(text: str) -> None:
    """
    Reject input that is not worth a provider call.

    - Empty / whitespace-only text.
    - Fewer than MIN_SOURCE_WORDS words.
    """
    if not text or not text.strip():
        raise SummaryValidationError("Please enter some text to summarize.")
    if count_words(text) < MIN_SOURCE_WORDS:
        raise SummaryValidationError(
            "Text is too short for a meaningful summary. "
            f"Try at least {MIN_SOURCE_WORDS} words."
        )


class SummaryService:
    async def summarize(
        self,
        session: SummarySession,
        client: SummarizationClient,
        text: str,
        config: SummarizationConfig,
        timeout: Optional[float] = None,
    ) -> SummaryResult:
        """
        Run one summarization for a session and record the result.

        - Validates the input before the provider is touched.
        - Refuses to start while another request for the session is running.
        - With ``timeout``, abandons the provider call after that many seconds.
        Nothing in the session changes when the call fails.
        """
        validate_source_text(text)

        # check-and-set happens without an await in between
        if session.in_flight:
            raise SummaryInProgressError("A summary is already being generated for this session.")
        session.in_flight = True

        request = SummaryRequest(source_text=text, config=config)
        try:
            if timeout is not None:
                summary = await asyncio.wait_for(client.summarize(request), timeout)
            else:
                summary = await client.summarize(request)
        except asyncio.TimeoutError as exc:
            logger.warning("Summary for session %s abandoned after %ss", session.id, timeout)
            raise SummaryTimeoutError(
                f"Summary generation timed out after {timeout:g} seconds."
            ) from exc
        finally:
            session.in_flight = False

        result = SummaryResult(
            id=uuid.uuid4().hex,
            original_text=text,
            summary_text=summary,
            timestamp=int(time.time() * 1000),
            config=config.model_copy(),
            stats=compute_stats(text, summary),
        )
        session.record(result)

        logger.info(
            "Session %s summary %s: %s -> %s words (%s%% reduced)",
            session.id,
            result.id,
            result.stats.original_words,
            result.stats.summary_words,
            result.stats.reduction_percent,
        )
        return result
