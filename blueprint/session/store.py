"""
Session State Store - Breakaway Blueprint
blueprint/session/store.py

Process-local, string-keyed storage carrying answers between screens.
Values are held as JSON text, the way the browser's sessionStorage held
them, so readers always get a fresh copy. No TTL, no cross-session sharing.
"""
import json
import threading
from typing import Any, Dict, Mapping, Optional

from blueprint.core.exceptions import FlowNotStartedError

ANSWERS_KEY = "bb_answers"
SELECTIONS_KEY = "bb_selections"
SLIDERS_KEY = "bb_sliders"
LEAD_KEY = "bb_lead"


class SessionStore:
    """Associative key/value store for one assessment session."""

    def __init__(self):
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._data.get(key)
        if raw is None:
            return default
        return json.loads(raw)

    def require(self, key: str, redirect_to: str = "/assessment") -> Any:
        """Read a key a previous step must have written."""
        raw = self._data.get(key)
        if raw is None:
            raise FlowNotStartedError(key, redirect_to)
        return json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        encoded = json.dumps(value)
        with self._lock:
            self._data[key] = encoded

    def commit(self, values: Mapping[str, Any]) -> None:
        """
        Write several keys together.

        Everything is encoded before the swap, so a value that fails to
        serialise leaves the store untouched.
        """
        encoded = {k: json.dumps(v) for k, v in values.items()}
        with self._lock:
            merged = dict(self._data)
            merged.update(encoded)
            self._data = merged

    def contains(self, key: str) -> bool:
        return key in self._data

    def clear(self) -> None:
        with self._lock:
            self._data = {}
