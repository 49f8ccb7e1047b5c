from fastapi import APIRouter

from talentmatch.core.config.scoring import get_scoring_config

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Report whether the scoring configuration is loaded and the engine can serve matches.",
)
async def health_check():
    config = get_scoring_config()
    return {"status": "healthy", "dimensions": len(config.dimension_weights)}
