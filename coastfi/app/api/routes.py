"""HTTP routes for the Flask API."""

from __future__ import annotations

import math
from http import HTTPStatus
from typing import Any, List, TypeVar

from flask import Blueprint, jsonify, request
from loguru import logger
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import BadRequest

from coastfi.core.chart import projection_chart_series
from coastfi.core.coast_fi import calculate_coast_fi
from coastfi.core.inputs import CoastFIInputs
from coastfi.core.ping import get_ping_message, get_service_version
from coastfi.core.projection import generate_projections
from coastfi.schemas.coast_fi import CoastFIRequest, PlanResponse, ProjectionResponse
from coastfi.schemas.ping import PingResponse

api_bp = Blueprint("api", __name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class NonFiniteResultError(ValueError):
    def __init__(self, fields: List[str]):
        super().__init__(f"inputs produce non-finite values: {', '.join(fields)}")
        self.fields = fields


def _non_finite_fields(value: Any, path: str = "") -> List[str]:
    if isinstance(value, float):
        return [] if math.isfinite(value) else [path or "value"]
    if isinstance(value, dict):
        items = value.items()
    elif isinstance(value, list):
        items = enumerate(value)
    else:
        return []
    found: List[str] = []
    for key, item in items:
        found.extend(_non_finite_fields(item, f"{path}.{key}" if path else str(key)))
    return found


def _require_finite(model: ModelT) -> ModelT:
    """JSON has no Infinity/NaN; refuse to serialise results that contain them."""
    fields = _non_finite_fields(model.model_dump())
    if fields:
        raise NonFiniteResultError(fields)
    return model


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning(f"Rejected {request.path}: {exc.error_count()} validation error(s)")
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(NonFiniteResultError)
def _handle_non_finite(exc: NonFiniteResultError):
    """Inputs passed validation but overflowed the arithmetic."""
    logger.warning(f"Rejected {request.path}: non-finite {', '.join(exc.fields[:5])}")
    return jsonify({"detail": str(exc), "fields": exc.fields}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    """Malformed or missing JSON body."""
    logger.warning(f"Bad request body on {request.path}: {exc.description}")
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _inputs_from_request() -> CoastFIInputs:
    raw_payload: Any = request.get_json(force=True, silent=False)
    return CoastFIRequest.model_validate(raw_payload).to_inputs()


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message(), version=get_service_version())
    return jsonify(response.model_dump())


@api_bp.post("/coast-fi")
def coast_fi() -> Any:
    """Coast FI number, status and time to reach it."""
    inputs = _inputs_from_request()
    result = _require_finite(calculate_coast_fi(inputs))
    logger.info(f"Coast FI for age {inputs.currentAge}: {result.timeToCoastFI}")
    return jsonify(result.model_dump())


@api_bp.post("/projections")
def projections() -> Any:
    """Year-by-year projection plus chart series."""
    inputs = _inputs_from_request()
    rows = generate_projections(inputs)
    response = _require_finite(ProjectionResponse(projections=rows, chart=projection_chart_series(rows)))
    last_age = rows[-1].age if rows else None
    logger.info(f"Projected {len(rows)} rows for age {inputs.currentAge}->{last_age}")
    return jsonify(response.model_dump())


@api_bp.post("/plan")
def plan() -> Any:
    """Coast FI result and projection in one round trip."""
    inputs = _inputs_from_request()
    response = _require_finite(
        PlanResponse(result=calculate_coast_fi(inputs), projections=generate_projections(inputs))
    )
    logger.info(f"Plan for age {inputs.currentAge}: {response.result.timeToCoastFI}")
    return jsonify(response.model_dump())
