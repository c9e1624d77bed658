import uuid
from collections import OrderedDict
from typing import List, Optional, Tuple

from summarize_ai.core.logger import get_logger
from summarize_ai.schemas.summary import SummaryResult

logger = get_logger(__name__)

HISTORY_LIMIT = 10
MAX_SESSIONS = 1000


class SummarySession:
    """
    Per-browser summarization state: bounded history plus the result
    currently on screen.
    """

    def __init__(self, session_id: str, history_limit: int = HISTORY_LIMIT) -> None:
        self.id = session_id
        self.history_limit = history_limit
        self.history: List[SummaryResult] = []  # most recent first
        self.current: Optional[SummaryResult] = None
        self.in_flight = False

    def record(self, result: SummaryResult) -> None:
        """
        Store a finished summary as the current result and at the front of
        the history, evicting the oldest entries past the limit.
        """
        self.history = [result, *self.history][: self.history_limit]
        self.current = result
        logger.debug("Session %s recorded result %s (history=%s)", self.id, result.id, len(self.history))

    def reset(self) -> None:
        """Clear the current result; history is kept."""
        self.current = None

    def load(self, result_id: str) -> SummaryResult:
        """
        Make a history entry the current result.
        Raises KeyError for ids not in the history.
        """
        for item in self.history:
            if item.id == result_id:
                self.current = item
                return item
        raise KeyError(result_id)

    def clear_history(self) -> None:
        self.history = []
        logger.debug("Session %s history cleared", self.id)


class SessionStore:
    """
    In-memory map of session id to SummarySession. Nothing is persisted.

    Holds at most ``max_sessions``; past that the least recently used
    session is dropped.
    """

    def __init__(
        self,
        history_limit: int = HISTORY_LIMIT,
        max_sessions: int = MAX_SESSIONS,
    ) -> None:
        self.history_limit = history_limit
        self.max_sessions = max_sessions
        self.sessions: "OrderedDict[str, SummarySession]" = OrderedDict()

    def get_or_create(self, session_id: Optional[str]) -> Tuple[SummarySession, bool]:
        """
        Return ``(session, created)`` for ``session_id``. Unknown or missing
        ids get a fresh session with a new id and ``created=True``.
        """
        if session_id and session_id in self.sessions:
            self.sessions.move_to_end(session_id)
            return self.sessions[session_id], False

        session = SummarySession(uuid.uuid4().hex, history_limit=self.history_limit)
        self.sessions[session.id] = session
        while len(self.sessions) > self.max_sessions:
            evicted_id, _ = self.sessions.popitem(last=False)
            logger.debug("Evicted summary session %s", evicted_id)
        logger.info("Created summary session %s (sessions=%s)", session.id, len(self.sessions))
        return session, True
