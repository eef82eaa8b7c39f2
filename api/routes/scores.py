"""Score API endpoints."""

from fastapi import APIRouter, HTTPException

from api.schemas import ScoreResponse
from api.table import get_table
from core.errors import ScorePersistenceFailure

router = APIRouter()


@router.get("/{player_id}")
async def get_score(player_id: str) -> ScoreResponse:
    """Get a player's stored score (0 for unknown players)."""
    table = await get_table()
    try:
        score = await table.score(player_id)
    except ScorePersistenceFailure as e:
        raise HTTPException(status_code=503, detail=str(e))
    return ScoreResponse(player=player_id, score=score)
