from fastapi import APIRouter, Depends, Header, HTTPException, Path, Request, status

from talentmatch.core.config.scoring import get_scoring_config
from talentmatch.core.rate_limit import rate_limit
from talentmatch.core.security import check_api_key
from talentmatch.core.weights_store import WeightStore, get_weight_store
from talentmatch.geometry import (
    apply_snap,
    clamp_to_triangle,
    drag_to_weights,
    is_inside_triangle,
    match_preset,
    presets,
    release_to_weights,
    step_direction,
    step_weights,
    weights_to_point,
)
from talentmatch.schemas import MatchWeights
from talentmatch.schemas.api import (
    PointResponse,
    PointToWeightsRequest,
    PresetsResponse,
    StepWeightsRequest,
    WeightedScoreRequest,
    WeightedScoreResponse,
    WeightsResponse,
    WeightsToPointRequest,
)
from talentmatch.scoring import calculate_weighted_score

router = APIRouter()


def _auth(x_api_key: str | None = Header(default=None, alias="X-API-Key")):
    check_api_key(x_api_key)


def _weights_response(weights: MatchWeights) -> WeightsResponse:
    return WeightsResponse(weights=weights, preset=match_preset(weights))


@router.post("/weights/score", response_model=WeightedScoreResponse)
@rate_limit()
def weighted_score(request: Request, payload: WeightedScoreRequest):
    return WeightedScoreResponse(score=calculate_weighted_score(payload.breakdown, payload.weights))


@router.post("/weights/to-point", response_model=PointResponse)
@rate_limit()
def to_point(request: Request, payload: WeightsToPointRequest):
    point = weights_to_point(payload.weights)
    return PointResponse(point=point, inside=is_inside_triangle(point))


@router.post("/weights/from-point", response_model=WeightsResponse)
@rate_limit()
def from_point(request: Request, payload: PointToWeightsRequest):
    if payload.snap:
        return _weights_response(release_to_weights(payload.point))
    return _weights_response(drag_to_weights(payload.point))


@router.post("/weights/clamp", response_model=PointResponse)
@rate_limit()
def clamp_point(request: Request, payload: PointToWeightsRequest):
    point = clamp_to_triangle(payload.point)
    if payload.snap:
        point = apply_snap(point)
    return PointResponse(point=point, inside=is_inside_triangle(point))


@router.post("/weights/step", response_model=WeightsResponse)
@rate_limit()
def step(request: Request, payload: StepWeightsRequest):
    if payload.direction is not None:
        return _weights_response(step_direction(payload.weights, payload.direction))
    if payload.axis is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Provide either a direction or an axis to step.",
        )
    return _weights_response(step_weights(payload.weights, payload.axis, payload.amount))


@router.get("/weights/presets", response_model=PresetsResponse)
@rate_limit()
def list_presets(request: Request):
    return PresetsResponse(presets=presets(), default=get_scoring_config().triangle.default_weights)


@router.get("/weights/preferences/{owner_id}", response_model=WeightsResponse)
@rate_limit()
def get_preferences(
    request: Request,
    owner_id: str = Path(min_length=1, max_length=128),
    store: WeightStore = Depends(get_weight_store),
    _: None = Depends(_auth),
):
    return _weights_response(store.load(owner_id))


@router.put("/weights/preferences/{owner_id}", response_model=WeightsResponse)
@rate_limit()
def put_preferences(
    request: Request,
    payload: WeightsToPointRequest,
    owner_id: str = Path(min_length=1, max_length=128),
    store: WeightStore = Depends(get_weight_store),
    _: None = Depends(_auth),
):
    if payload.weights.total <= 0:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="At least one weight must be positive.",
        )
    return _weights_response(store.save(owner_id, payload.weights))
