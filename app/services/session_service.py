# app/services/session_service.py
"""In-memory submission sessions"""

from collections import OrderedDict
from app.config import settings
from app.groq_service import groq_service
from app.submission_controller import SubmissionController
import structlog

logger = structlog.get_logger()

class SessionService:
    def __init__(self, fact_provider, max_sessions: int = 1000):
        self.fact_provider = fact_provider
        self.max_sessions = max_sessions
        self.sessions = OrderedDict()

    def get_controller(self, session_id: str) -> SubmissionController:
        """Get or create the controller for a session"""
        controller = self.sessions.get(session_id)
        if controller is not None:
            self.sessions.move_to_end(session_id)
            return controller

        controller = SubmissionController(
            self.fact_provider,
            fact_timeout=settings.fact_timeout_seconds
        )
        self.sessions[session_id] = controller
        logger.info("Created new session", session_id=session_id)

        while len(self.sessions) > self.max_sessions:
            evicted_id, _ = self.sessions.popitem(last=False)
            logger.info("Evicted idle session", session_id=evicted_id)
        return controller

    def drop(self, session_id: str):
        self.sessions.pop(session_id, None)

    def clear(self):
        self.sessions.clear()

session_service = SessionService(groq_service, max_sessions=settings.max_sessions)
