"""
Session management for ego.

- models:  SessionRecord (persisted) and SessionSummary (reported)
- store:   single-slot, atomically replaced on-disk record
- manager: begin/end/discard lifecycle on top of the line counter
"""

from ego.session.manager import SessionManager
from ego.session.models import SessionRecord, SessionSummary
from ego.session.store import SessionStore

__all__ = ["SessionManager", "SessionRecord", "SessionStore", "SessionSummary"]
