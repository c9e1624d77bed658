from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from summarize_ai.ai.errors import SummarizationError
from summarize_ai.ai.stats import count_words
from summarize_ai.api.deps import (
    get_summarization_client,
    resolve_session,
    set_session_cookie,
    summary_service,
)
from summarize_ai.api.error_handlers import status_for
from summarize_ai.core.config import settings
from summarize_ai.core.logger import get_logger
from summarize_ai.schemas.summary import (
    SummarizationConfig,
    SummaryFormat,
    SummaryLength,
    SummaryStats,
    SummaryTone,
)
from summarize_ai.services.session_store import SummarySession

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
logger = get_logger(__name__)

web_router = APIRouter(prefix="/web", tags=["web"])


def _clock(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%H:%M")


templates.env.filters["clock"] = _clock


# Helpers

def stats_view(stats: SummaryStats) -> Dict[str, Any]:
    """
    Numbers for the compression panel: one-decimal reduction rate, words
    saved and relative bar heights.
    """
    original = stats.original_words
    summary = stats.summary_words
    if original:
        rate = f"{(original - summary) / original * 100:.1f}"
    else:
        rate = "0.0"
    tallest = max(original, summary, 1)
    return {
        "reduction_rate": rate,
        "words_saved": max(0, original - summary),
        "original_bar": round(original / tallest * 100),
        "summary_bar": round(summary / tallest * 100),
    }


def render_page(
    request: Request,
    session: SummarySession,
    *,
    text: str = "",
    config: Optional[SummarizationConfig] = None,
    error: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    config = config or (session.current.config if session.current else SummarizationConfig())
    result = session.current
    response = templates.TemplateResponse(
        request,
        "index.html",
        {
            "project_name": settings.PROJECT_NAME,
            "text": text,
            "word_count": count_words(text),
            "config": config,
            "lengths": list(SummaryLength),
            "tones": list(SummaryTone),
            "formats": list(SummaryFormat),
            "result": result,
            "stats": stats_view(result.stats) if result else None,
            "history": session.history,
            "error": error,
        },
        status_code=status_code,
    )
    set_session_cookie(request, response, session)
    return response


def _redirect_home(request: Request, session: SummarySession) -> RedirectResponse:
    response = RedirectResponse(url="/web/", status_code=status.HTTP_303_SEE_OTHER)
    set_session_cookie(request, response, session)
    return response


# ---------- routes ----------

@web_router.get("/", response_class=HTMLResponse)
async def web_home(request: Request):
    """
    Main page: input form, current summary with stats, recent history.
    """
    session = resolve_session(request)
    text = session.current.original_text if session.current else ""
    return render_page(request, session, text=text)


@web_router.post("/summarize", response_class=HTMLResponse)
async def web_summarize(
    request: Request,
    text: str = Form(""),
    length: SummaryLength = Form(SummaryLength.MEDIUM),
    tone: SummaryTone = Form(SummaryTone.PROFESSIONAL),
    fmt: SummaryFormat = Form(SummaryFormat.PARAGRAPH, alias="format"),
):
    """
    Process the summarize form and re-render the page with the result or
    the error message.
    """
    session = resolve_session(request)
    config = SummarizationConfig(length=length, tone=tone, format=fmt)

    try:
        client = get_summarization_client(request)
        await summary_service.summarize(
            session,
            client,
            text,
            config,
            timeout=settings.SUMMARY_TIMEOUT_SECONDS,
        )
    except SummarizationError as e:
        logger.warning("Web summarize failed for session %s: %s", session.id, e)
        return render_page(
            request,
            session,
            text=text,
            config=config,
            error=str(e) or "An unexpected error occurred. Please try again.",
            status_code=status_for(e),
        )

    return render_page(request, session, text=text, config=config)


@web_router.post("/reset")
async def web_reset(request: Request):
    """
    Clear the input and the current summary; history stays.
    """
    session = resolve_session(request)
    session.reset()
    return _redirect_home(request, session)


@web_router.post("/history/{result_id}/load", response_class=HTMLResponse)
async def web_load_history(request: Request, result_id: str):
    session = resolve_session(request)
    try:
        item = session.load(result_id)
    except KeyError:
        return render_page(
            request,
            session,
            error="That summary is no longer in your history.",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return render_page(request, session, text=item.original_text, config=item.config)


@web_router.post("/history/clear")
async def web_clear_history(request: Request):
    session = resolve_session(request)
    session.clear_history()
    return _redirect_home(request, session)
