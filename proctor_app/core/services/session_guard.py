"""Service binding a quiz route to the token minted for this window."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Protocol
from uuid import uuid4

from proctor_app.constants.quiz_constants import REFERRALS_ROUTE, SESSION_TOKEN_KEY
from proctor_app.constants.ui_constants import INVALID_SESSION_MESSAGE, INVALID_SESSION_TITLE

logger = logging.getLogger(__name__)


class TabSessionStore(Protocol):
    """Key-value storage that lives exactly as long as one quiz window."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def clear(self, key: str) -> None: ...


class Router(Protocol):
    def navigate(self, path: str, replace: bool = False) -> None: ...


class Notifier(Protocol):
    def notify(self, title: str, description: str, variant: str = "default") -> None: ...


class InMemoryTabStore:
    """Window-scoped store. A new window, like a reloaded tab, starts empty."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def clear(self, key: str) -> None:
        self._values.pop(key, None)


@dataclass(slots=True, frozen=True)
class QuizRoute:
    """``/quiz/<job_id>`` before consent, ``/quiz/<job_id>/<session_id>`` after."""

    job_id: str
    session_id: str | None = None

    @classmethod
    def parse(cls, path: str) -> QuizRoute:
        parts = [part for part in path.strip().split("/") if part]
        if len(parts) not in (2, 3) or parts[0] != "quiz":
            raise ValueError(f"Not a quiz route: '{path}'")
        return cls(job_id=parts[1], session_id=parts[2] if len(parts) == 3 else None)

    @property
    def path(self) -> str:
        if self.session_id is None:
            return f"/quiz/{self.job_id}"
        return f"/quiz/{self.job_id}/{self.session_id}"

    def with_session(self, session_id: str) -> QuizRoute:
        return QuizRoute(job_id=self.job_id, session_id=session_id)


class SessionGuard:
    """Mints session tokens and rejects routes that do not carry the current one."""

    def __init__(self, store: TabSessionStore) -> None:
        self._store = store

    def current_token(self) -> str | None:
        return self._store.get(SESSION_TOKEN_KEY)

    def mint_token(self) -> str:
        token = uuid4().hex
        self._store.set(SESSION_TOKEN_KEY, token)
        logger.info("Minted quiz session token %s…", token[:8])
        return token

    def clear(self) -> None:
        self._store.clear(SESSION_TOKEN_KEY)

    def validate(self, route: QuizRoute) -> bool:
        if route.session_id is None:
            return True
        stored = self.current_token()
        return stored is not None and stored == route.session_id

    def enforce(self, route: QuizRoute, router: Router, notifier: Notifier) -> bool:
        """Redirect to the referrals listing when ``route`` is not valid here."""
        if self.validate(route):
            return True
        logger.warning("Rejected quiz route for job %s: session token mismatch", route.job_id)
        router.navigate(REFERRALS_ROUTE, replace=True)
        notifier.notify(INVALID_SESSION_TITLE, INVALID_SESSION_MESSAGE, "destructive")
        return False
