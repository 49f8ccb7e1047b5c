import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from talentmatch.api.v1.health import router as health_router
from talentmatch.api.v1.match import router as match_router
from talentmatch.api.v1.weights import router as weights_router
from talentmatch.core.config import settings
from talentmatch.core.config.scoring import ScoringConfigError
from talentmatch.core.cors import cors_allow_origin_regex, cors_allowed_origins
from talentmatch.core.lifespan import lifespan
from talentmatch.core.rate_limit import limiter
from talentmatch.core.weights_store import WeightStoreError

logging.basicConfig(level=settings.log_level, format="%(message)s")
logger = logging.getLogger(__name__)
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="TalentMatch Scoring API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_origin_regex=cors_allow_origin_regex(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


@app.exception_handler(ScoringConfigError)
async def scoring_config_error_handler(request: Request, exc: ScoringConfigError):
    logger.error("scoring_config_unavailable path=%s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Scoring configuration is unavailable."},
    )


@app.exception_handler(WeightStoreError)
async def weight_store_error_handler(request: Request, exc: WeightStoreError):
    logger.error("weight_store_unavailable path=%s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Weight preferences are temporarily unavailable."},
    )


app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(match_router, prefix="/v1", tags=["Match"])
app.include_router(weights_router, prefix="/v1", tags=["Weights"])
