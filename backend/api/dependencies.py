"""
Dependency injection for the API service.
Provides the board service to route handlers.
"""
from __future__ import annotations

from api.board import BoardService

# Module-level singleton, initialized at startup
_board_service: BoardService | None = None


def init_dependencies(board_service: BoardService) -> None:
    """Initialize module-level singletons. Called once at startup."""
    global _board_service
    _board_service = board_service


def get_board_service() -> BoardService:
    """FastAPI dependency: returns the shared BoardService."""
    if _board_service is None:
        raise RuntimeError("BoardService not initialized; call init_dependencies first")
    return _board_service
