from __future__ import annotations
import math
from typing import Type, TypeVar
from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from fitservice.app.core.config import settings
from fitservice.app.core.cors import cors_headers
from fitservice.app.schemas.result import ErrorResponse, FixedResultRequest, ResultRequest, ResultResponse
from fitservice.app.services.result_service import FitServiceError, ResultService
from fitservice.app.services.transforms import UnknownTransformError, lookup

router = APIRouter(prefix="/result", tags=["result"])
_service = ResultService()
_fixed_transform = settings.fixed_transform()

_ERRORS = {400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}}

M = TypeVar("M", bound=BaseModel)


async def _read(request: Request, model: Type[M], missing: str) -> M:
    try:
        body = await request.json()
    except (ValueError, RecursionError):
        # RecursionError: nesting deeper than the decoder allows
        raise HTTPException(status_code=400, detail="Invalid JSON")
    try:
        return model.model_validate(body)
    except ValidationError:
        raise HTTPException(status_code=400, detail=missing)


def _respond(request: Request, value: float) -> JSONResponse:
    payload = ResultResponse(mainResult=value if math.isfinite(value) else None)
    return JSONResponse(status_code=200, content=payload.model_dump(), headers=cors_headers(request))


@router.post("", response_model=ResultResponse, responses=_ERRORS)
async def selectable_result(request: Request):
    req = await _read(request, ResultRequest, "Missing rows or transformKey")
    try:
        x, y = _service.sample(req.rows)
        transform = lookup(req.transformKey)
        value = _service.evaluate(x, y, transform)
    except UnknownTransformError:
        raise HTTPException(status_code=400, detail="Unknown transform")
    except FitServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return _respond(request, value)


@router.post("/fixed", response_model=ResultResponse, responses=_ERRORS)
async def fixed_result(request: Request):
    req = await _read(request, FixedResultRequest, "Missing rows")
    try:
        value = _service.compute(req.rows, _fixed_transform)
    except FitServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return _respond(request, value)


@router.options("")
@router.options("/fixed")
def preflight(request: Request):
    return Response(status_code=204, headers=cors_headers(request), media_type="application/json")
