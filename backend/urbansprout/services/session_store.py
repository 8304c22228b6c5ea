"""
In-process conversation history for the chatbot.

Each session keeps a sliding window of the most recent turns and expires after
a period of inactivity. Concurrent writes to the same session are
last-write-wins.
"""
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

Turn = Dict[str, str]


@dataclass
class ConversationSession:
    session_id: str
    last_active: float
    turns: List[Turn] = field(default_factory=list)


class SessionStore:
    """Expiring map of session id -> ConversationSession."""

    def __init__(
        self,
        max_turns: int = 20,
        ttl_seconds: float = 3600,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_turns < 2 or max_turns % 2:
            raise ValueError("max_turns must be a positive even number of user/assistant turns")
        self.max_turns = max_turns
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: Dict[str, ConversationSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return self._live(session_id) is not None

    def _expired(self, session: ConversationSession, now: float) -> bool:
        return now - session.last_active > self.ttl_seconds

    def _live(self, session_id: str) -> Optional[ConversationSession]:
        session = self._sessions.get(session_id)
        if session is not None and self._expired(session, self._clock()):
            self._sessions.pop(session_id, None)
            return None
        return session

    def get_or_create(self, session_id: str) -> ConversationSession:
        session = self._live(session_id)
        if session is None:
            session = ConversationSession(session_id=session_id, last_active=self._clock())
            self._sessions[session_id] = session
        return session

    def history(self, session_id: str) -> List[Turn]:
        session = self._live(session_id)
        return [dict(turn) for turn in session.turns] if session else []

    def append(self, session_id: str, user_turn: str, assistant_turn: str) -> ConversationSession:
        session = self.get_or_create(session_id)
        session.turns.append({"role": "user", "content": user_turn})
        session.turns.append({"role": "assistant", "content": assistant_turn})
        if len(session.turns) > self.max_turns:
            del session.turns[: len(session.turns) - self.max_turns]
        session.last_active = self._clock()
        self._sessions[session_id] = session
        return session

    def sweep(self) -> int:
        """Drop every session idle for longer than the TTL."""
        now = self._clock()
        expired = [sid for sid, session in list(self._sessions.items()) if self._expired(session, now)]
        for session_id in expired:
            self._sessions.pop(session_id, None)
        if expired:
            logger.info(f"Evicted {len(expired)} idle chat sessions, {len(self._sessions)} remain")
        return len(expired)
