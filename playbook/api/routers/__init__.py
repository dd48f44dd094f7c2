"""API routers for different resource types."""

from playbook.api.routers.plays import router as plays_router

__all__ = ["plays_router"]
