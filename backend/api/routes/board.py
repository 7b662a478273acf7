"""
Board REST endpoint.

GET /api/board: merged live scores and moneyline odds for every live game.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from shared.utils.http_client import FeedError
from shared.utils.logging import get_logger

from api.board import BoardService
from api.dependencies import get_board_service

logger = get_logger(__name__)
router = APIRouter(prefix="/api", tags=["board"])

BOARD_ERROR_FALLBACK = "Failed to load board"


def board_error_response(message: str) -> JSONResponse:
    """500 body for a board that could not be built; games is always an empty list."""
    return JSONResponse(
        status_code=500,
        content={"error": message or BOARD_ERROR_FALLBACK, "games": []},
    )


@router.get("/board")
async def get_board(service: BoardService = Depends(get_board_service)) -> JSONResponse:
    """
    Fetch both feeds and return the reconciled board.

    Any failure while loading returns 500 with the error message and an empty
    game list.
    """
    try:
        snapshot = await service.get_board()
    except FeedError as exc:
        logger.error("board_load_failed", feed=exc.feed, error=str(exc))
        return board_error_response(str(exc))
    except Exception as exc:
        logger.error("board_load_failed", error=str(exc), exc_info=True)
        return board_error_response(str(exc))
    return JSONResponse(content=snapshot.model_dump(mode="json", by_alias=True))
