"""Session manager for editor sessions served over the API."""

import asyncio
import logging
from typing import Optional, Union
from uuid import UUID

from playbook.config import FieldOptions
from playbook.core.enums import Mode
from playbook.editor import EditorSession

logger = logging.getLogger(__name__)


class EditorSessionManager:
    """
    Holds the live editor sessions.

    Session storage is guarded by an asyncio lock; each session itself is
    only mutated from the event loop.
    """

    def __init__(self) -> None:
        self._sessions: dict[UUID, EditorSession] = {}
        self._lock = asyncio.Lock()

    async def create_session(
        self,
        options: Optional[FieldOptions] = None,
        mode: Union[Mode, str, None] = None,
        populate: bool = True,
    ) -> EditorSession:
        """
        Create a new editor session.

        Args:
            options: Field configuration (defaults to the global config)
            mode: Starting mode
            populate: Place the default 22 players

        Returns:
            New EditorSession
        """
        session = EditorSession(options=options, mode=mode)
        if populate:
            session.build()

        async with self._lock:
            self._sessions[session.id] = session

        logger.info("Created editor session %s", session.id)
        return session

    async def get_session(self, session_id: UUID) -> Optional[EditorSession]:
        """Get a session by ID."""
        async with self._lock:
            return self._sessions.get(session_id)

    async def delete_session(self, session_id: UUID) -> bool:
        """
        Delete a session.

        Returns True if session existed and was deleted.
        """
        async with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.clear()
        session.event_bus.clear()
        return True

    async def cleanup_all(self) -> None:
        """Drop every session (application shutdown)."""
        async with self._lock:
            session_ids = list(self._sessions)
        for session_id in session_ids:
            await self.delete_session(session_id)

    @property
    def active_sessions(self) -> list[UUID]:
        return list(self._sessions)


# Global session manager instance
_manager: Optional[EditorSessionManager] = None


def get_session_manager() -> EditorSessionManager:
    """Get the global session manager."""
    global _manager
    if _manager is None:
        _manager = EditorSessionManager()
    return _manager
