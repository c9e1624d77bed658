from fastapi import Request, Response

from summarize_ai.ai.client import SummarizationClient
from summarize_ai.core.config import settings
from summarize_ai.core.logger import get_logger
from summarize_ai.services.session_store import SessionStore, SummarySession
from summarize_ai.services.summary_service import SummaryService

logger = get_logger(__name__)

SESSION_COOKIE = "summarize_session"

session_store = SessionStore(max_sessions=settings.MAX_SESSIONS)
summary_service = SummaryService()


def resolve_session(request: Request) -> SummarySession:
    """
    Look up the caller's session from the session cookie, creating one if
    the cookie is missing or unknown. Whether it was created is kept on
    ``request.state`` for set_session_cookie.
    """
    session, created = session_store.get_or_create(request.cookies.get(SESSION_COOKIE))
    request.state.session_created = created
    return session


def set_session_cookie(request: Request, response: Response, session: SummarySession) -> None:
    if getattr(request.state, "session_created", False):
        response.set_cookie(
            key=SESSION_COOKIE,
            value=session.id,
            httponly=True,
            samesite="lax",
        )


async def get_session(request: Request, response: Response) -> SummarySession:
    session = resolve_session(request)
    set_session_cookie(request, response, session)
    return session


def get_summary_service() -> SummaryService:
    return summary_service


def get_summarization_client(request: Request) -> SummarizationClient:
    """
    Return the app-wide summarization client.

    Built once (normally at startup); raises ConfigurationError while the
    API key is missing.
    """
    client = getattr(request.app.state, "summarization_client", None)
    if client is None:
        client = SummarizationClient.from_settings(settings)
        request.app.state.summarization_client = client
        logger.info("Summarization client configured (provider=%s)", settings.SUMMARIZER_PROVIDER)
    return client
