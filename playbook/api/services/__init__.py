"""API services."""

from playbook.api.services.session_manager import EditorSessionManager, get_session_manager

__all__ = ["EditorSessionManager", "get_session_manager"]
