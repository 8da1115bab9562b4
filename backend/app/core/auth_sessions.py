"""Passkey Sessions — passkey lookup table and explicit login-session registry.

Invariants:
    - PasskeyTable is injected from configuration; no passkeys live in code
    - An AuthSession exists from login (open) until logout (close) or expiry
    - SessionRegistry is owned by the application instance (app.state), never a module global
    - Expired sessions are dropped on lookup and on every login; get() never returns
      an expired session

Design Decisions:
    - hmac.compare_digest for passkey comparison: constant-time per candidate
    - Opaque tokens from secrets.token_urlsafe: the token carries no user data
    - now passed in explicitly: registry stays deterministic under test
"""

import hmac
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Mapping


class PasskeyTable:
    """Maps shared passkeys to the username they unlock."""

    def __init__(self, entries: Mapping[str, str]):
        self._entries = dict(entries)

    def resolve(self, passkey: str) -> str | None:
        """Username for a passkey, or None when the passkey is unknown."""
        match = None
        for candidate, username in self._entries.items():
            if hmac.compare_digest(candidate.encode(), passkey.encode()):
                match = username
        return match

    def __len__(self) -> int:
        return len(self._entries)


@dataclass(frozen=True)
class AuthSession:
    token: str
    username: str
    user_id: int
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class SessionRegistry:
    """In-process store of open login sessions, keyed by token."""

    def __init__(self, ttl: timedelta):
        self._ttl = ttl
        self._sessions: dict[str, AuthSession] = {}

    def open(self, username: str, user_id: int, now: datetime) -> AuthSession:
        self._drop_expired(now)
        session = AuthSession(
            token=secrets.token_urlsafe(32),
            username=username,
            user_id=user_id,
            created_at=now,
            expires_at=now + self._ttl,
        )
        self._sessions[session.token] = session
        return session

    def get(self, token: str, now: datetime) -> AuthSession | None:
        session = self._sessions.get(token)
        if session is None:
            return None
        if session.is_expired(now):
            del self._sessions[token]
            return None
        return session

    def _drop_expired(self, now: datetime) -> None:
        self._sessions = {
            token: session for token, session in self._sessions.items()
            if not session.is_expired(now)
        }

    def close(self, token: str) -> bool:
        """Discard a session. Returns False when the token was not open."""
        return self._sessions.pop(token, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)
