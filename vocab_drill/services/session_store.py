import logging
import uuid
from collections import OrderedDict
from functools import lru_cache

from vocab_drill.config import get_settings
from vocab_drill.services.drill import DrillState

logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    pass


class SessionStore:
    """In-memory drill sessions keyed by id, evicting the least recently used."""

    def __init__(self, max_sessions: int) -> None:
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, DrillState] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self) -> tuple[str, DrillState]:
        session_id = uuid.uuid4().hex
        state = DrillState()
        self._sessions[session_id] = state
        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Evicted drill session %s", evicted)
        logger.info("Created drill session %s", session_id)
        return session_id, state

    def get(self, session_id: str) -> DrillState:
        try:
            state = self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None
        self._sessions.move_to_end(session_id)
        return state

    def put(self, session_id: str, state: DrillState) -> DrillState:
        if session_id not in self._sessions:
            raise SessionNotFoundError(session_id)
        self._sessions[session_id] = state
        self._sessions.move_to_end(session_id)
        return state

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info("Deleted drill session %s", session_id)


@lru_cache(maxsize=1)
def get_store() -> SessionStore:
    return SessionStore(max_sessions=get_settings().max_sessions)
