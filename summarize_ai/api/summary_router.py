from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from summarize_ai.ai.client import SummarizationClient
from summarize_ai.ai.stats import compute_stats
from summarize_ai.ai.translator import translate
from summarize_ai.api.deps import get_session, get_summarization_client, get_summary_service
from summarize_ai.core.config import settings
from summarize_ai.schemas.summary import (
    InstructionRead,
    StatsBody,
    SummarizationConfig,
    SummarizeBody,
    SummaryResult,
    SummaryStats,
)
from summarize_ai.services.session_store import SummarySession
from summarize_ai.services.summary_service import SummaryService


class SummaryRouter:
    """
    APIRouter for summarization endpoints.
    """

    def __init__(self) -> None:
        self.router = APIRouter(
            prefix="/summaries",
            tags=["summaries"],
        )
        self._register_routes()

    def _register_routes(self) -> None:
        self.router.post("", response_model=SummaryResult)(self.create_summary)
        self.router.get("/current", response_model=Optional[SummaryResult])(self.get_current)
        self.router.delete("/current", status_code=status.HTTP_204_NO_CONTENT)(self.reset_current)
        self.router.get("/history", response_model=List[SummaryResult])(self.list_history)
        self.router.delete("/history", status_code=status.HTTP_204_NO_CONTENT)(self.clear_history)
        self.router.post(
            "/history/{result_id}/load",
            response_model=SummaryResult,
        )(self.load_from_history)
        self.router.post("/instruction", response_model=InstructionRead)(self.preview_instruction)
        self.router.post("/stats", response_model=SummaryStats)(self.stats)

    async def create_summary(
        self,
        body: SummarizeBody,
        session: SummarySession = Depends(get_session),
        client: SummarizationClient = Depends(get_summarization_client),
        service: SummaryService = Depends(get_summary_service),
    ):
        """
        Summarize the given text with the chosen options.
        The result becomes the session's current result and heads its history.
        """
        return await service.summarize(
            session,
            client,
            body.text,
            body.config,
            timeout=settings.SUMMARY_TIMEOUT_SECONDS,
        )

    async def get_current(self, session: SummarySession = Depends(get_session)):
        return session.current

    async def reset_current(self, session: SummarySession = Depends(get_session)):
        session.reset()
        return None

    async def list_history(self, session: SummarySession = Depends(get_session)):
        """
        Recent summaries for this session, most recent first.
        """
        return session.history

    async def clear_history(self, session: SummarySession = Depends(get_session)):
        session.clear_history()
        return None

    async def load_from_history(
        self,
        result_id: str,
        session: SummarySession = Depends(get_session),
    ):
        try:
            return session.load(result_id)
        except KeyError:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Summary not found in history",
            )

    async def preview_instruction(self, config: SummarizationConfig):
        """
        Show the instruction that would be sent to the provider for a config.
        """
        return InstructionRead(instruction=translate(config))

    async def stats(self, body: StatsBody):
        return compute_stats(body.original_text, body.summary_text)
