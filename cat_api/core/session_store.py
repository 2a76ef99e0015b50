# cat_api/core/session_store.py

"""
Database-backed session store with sliding expiry.
"""

import json
import secrets
from datetime import datetime, timedelta
from typing import Any, Dict, Optional
from sqlalchemy.orm import Session
from cat_api.models import UserSession


class SessionStore:
    """
    Key-value store for login sessions, kept in the `sessions` table.

    Each entry maps an opaque session id to a JSON payload and an expiry
    time. Reading a live session pushes its expiry forward by the TTL.
    """

    def __init__(self, db: Session, ttl: timedelta):
        """
        Args:
            db: Open database session used for every operation
            ttl: Lifetime of a session since its last use
        """
        self.db = db
        self.ttl = ttl

    def create(self, payload: Dict[str, Any]) -> str:
        """
        Store a new session and return its id.
        """
        sid = secrets.token_urlsafe(32)
        self.db.add(UserSession(
            sid=sid,
            data=json.dumps(payload),
            expires=datetime.now() + self.ttl,
        ))
        self.db.commit()
        return sid

    def read(self, sid: Optional[str]) -> Optional[Dict[str, Any]]:
        """
        Get the payload of a live session.

        Returns:
            The payload, or None if the session is unknown or expired.
            Expired sessions are deleted on the way out.
        """
        if not sid:
            return None

        entry = self.db.get(UserSession, sid)
        if entry is None:
            return None

        now = datetime.now()
        if entry.expires <= now:
            self.db.delete(entry)
            self.db.commit()
            return None

        entry.expires = now + self.ttl
        self.db.commit()
        return json.loads(entry.data)

    def destroy(self, sid: Optional[str]):
        """Delete a session. Unknown ids are ignored."""
        if not sid:
            return
        self.db.query(UserSession).filter(UserSession.sid == sid).delete()
        self.db.commit()

    def clear_expired(self) -> int:
        """Delete every expired session and return how many were removed."""
        removed = self.db.query(UserSession).filter(UserSession.expires <= datetime.now()).delete()
        self.db.commit()
        return removed
