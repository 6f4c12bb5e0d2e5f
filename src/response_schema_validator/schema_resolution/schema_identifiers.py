"""Unique identifiers for resolved schemas."""

from __future__ import annotations

import itertools
import secrets
import threading
from urllib.parse import quote


class SchemaIdGenerator:
    """Produce schema identifiers that never repeat within a process.

    The validation engine indexes compiled schemas by ``$id``; a repeated
    identifier would collide with a previously registered schema.
    """

    def __init__(self, nonce: str | None = None) -> None:
        self._nonce = nonce or secrets.token_hex(8)
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def nonce(self) -> str:
        return self._nonce

    def next_id(self, endpoint: str, method: str, status: int | str) -> str:
        """Return a fresh identifier for one endpoint/method/status lookup."""
        with self._lock:
            sequence = next(self._counter)
        # Percent-encoding keeps templated endpoints like /users/{id} a valid URI reference.
        return f"urn:{self._nonce}-{sequence}:{quote(endpoint, safe='/')}:{method}:{status}"


DEFAULT_ID_GENERATOR = SchemaIdGenerator()
