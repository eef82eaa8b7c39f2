"""Game API endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Header

from api.schemas import ActionRequest, RoundResponse
from api.table import ActionResult, get_table
from config import config
from core.errors import DeckExhausted, InvalidAction

router = APIRouter()

PlayerHeader = Annotated[str | None, Header(alias="X-Player-ID")]


def _player(player_id: str | None) -> str:
    """Resolve the acting player, defaulting to the shared player."""
    return player_id or config.game.default_player


def _round_response(result: ActionResult) -> RoundResponse:
    return RoundResponse.from_snapshot(result.snapshot, score_persisted=result.score_persisted)


@router.post("/new")
async def new_round(player_id: PlayerHeader = None) -> RoundResponse:
    """Deal a new round."""
    table = await get_table()
    result = await table.start(_player(player_id))
    return _round_response(result)


@router.post("/action")
async def player_action(
    request: ActionRequest,
    player_id: PlayerHeader = None,
) -> RoundResponse:
    """Execute a player action (start, hit or stand)."""
    table = await get_table()

    try:
        result = await table.act(_player(player_id), request.action)
    except InvalidAction as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DeckExhausted as e:
        raise HTTPException(status_code=409, detail=str(e))

    return _round_response(result)


@router.get("/state")
async def get_state(player_id: PlayerHeader = None) -> RoundResponse:
    """Get the current round."""
    table = await get_table()
    snapshot = table.state(_player(player_id))
    if snapshot is None:
        raise HTTPException(status_code=404, detail="No round in progress")
    return RoundResponse.from_snapshot(snapshot)
