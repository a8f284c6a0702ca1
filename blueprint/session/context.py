"""
Assessment context and registry
blueprint/session/context.py

An AssessmentContext scopes one run of the quiz: a flow token plus its
SessionStore. Restarting issues a new token; the old one is no longer
accepted anywhere.
"""
import logging
import threading
from collections import OrderedDict
from functools import lru_cache
from typing import Optional
from uuid import uuid4

from blueprint.config import settings
from blueprint.core.exceptions import StaleFlowError
from blueprint.session.store import SessionStore

logger = logging.getLogger(__name__)


def _new_token() -> str:
    return uuid4().hex


class AssessmentContext:
    """Explicit per-run state passed through the flow."""

    def __init__(self, store: Optional[SessionStore] = None, flow_token: Optional[str] = None):
        self.store = store or SessionStore()
        self.flow_token = flow_token or _new_token()
        # In-progress AssessmentFlow, owned by the view layer
        self.flow = None

    def check(self, flow_token: str) -> None:
        if flow_token != self.flow_token:
            raise StaleFlowError(flow_token)

    def restart(self) -> str:
        """Drop all session keys and invalidate the current token."""
        old = self.flow_token
        self.store.clear()
        self.flow = None
        self.flow_token = _new_token()
        logger.info(f"Flow restarted: {old} -> {self.flow_token}")
        return self.flow_token


class SessionRegistry:
    """
    Flow token → AssessmentContext for the HTTP API.

    Capacity-bounded LRU: once max_size contexts are held, creating a new
    one evicts the least recently used. An evicted token behaves like a
    stale one.
    """

    def __init__(self, max_size: int = 10_000):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._contexts: "OrderedDict[str, AssessmentContext]" = OrderedDict()
        self._lock = threading.Lock()

    def _store(self, ctx: AssessmentContext) -> None:
        self._contexts[ctx.flow_token] = ctx
        self._contexts.move_to_end(ctx.flow_token)
        while len(self._contexts) > self.max_size:
            evicted, _ = self._contexts.popitem(last=False)
            logger.info(f"Session evicted: {evicted}")

    def create(self) -> AssessmentContext:
        ctx = AssessmentContext()
        with self._lock:
            self._store(ctx)
        return ctx

    def get(self, flow_token: str) -> AssessmentContext:
        with self._lock:
            ctx = self._contexts.get(flow_token)
            if ctx is None:
                raise StaleFlowError(flow_token)
            self._contexts.move_to_end(flow_token)
        return ctx

    def restart(self, flow_token: str) -> AssessmentContext:
        ctx = self.get(flow_token)
        with self._lock:
            self._contexts.pop(flow_token, None)
            ctx.restart()
            self._store(ctx)
        return ctx

    def __len__(self) -> int:
        return len(self._contexts)


@lru_cache()
def get_session_registry() -> SessionRegistry:
    """Get cached SessionRegistry instance."""
    return SessionRegistry(max_size=settings.SESSION_REGISTRY_MAX_SIZE)
