"""
Per-browser search state with "last started wins" semantics.

Every search takes a fresh token from `begin()`. A result or error is only
written when its token is still the newest one, so a slow search that was
superseded (for example a device-location search overtaken by a typed
address) can never overwrite the state of the search started after it.
"""

from collections import OrderedDict
from typing import Optional

from ..schemas import SearchResult, SearchState


class SearchSession:
    def __init__(self):
        self._token = 0
        self.loading = False
        self.error: Optional[str] = None
        self.result: Optional[SearchResult] = None

    def begin(self) -> int:
        self._token += 1
        self.loading = True
        self.error = None
        self.result = None
        return self._token

    def is_current(self, token: int) -> bool:
        return token == self._token

    def commit_result(self, token: int, result: SearchResult) -> bool:
        if not self.is_current(token):
            return False
        self.result = result
        self.error = None
        self.loading = False
        return True

    def commit_error(self, token: int, message: str) -> bool:
        if not self.is_current(token):
            return False
        self.result = None
        self.error = message
        self.loading = False
        return True

    def snapshot(self) -> SearchState:
        return SearchState(
            loading=self.loading,
            error=self.error,
            result=self.result,
            request_token=self._token,
        )


class SessionRegistry:
    """In-memory sessions keyed by a client-chosen id, least recently used evicted."""

    def __init__(self, max_sessions: int = 1000):
        self.max_sessions = max(1, max_sessions)
        self._sessions: "OrderedDict[str, SearchSession]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def find(self, session_id: str) -> Optional[SearchSession]:
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
        return session

    def get(self, session_id: str) -> SearchSession:
        session = self.find(session_id)
        if session is None:
            session = SearchSession()
            self._sessions[session_id] = session
            while len(self._sessions) > self.max_sessions:
                self._sessions.popitem(last=False)
        return session
