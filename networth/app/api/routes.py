"""HTTP routes for the Flask API."""

from datetime import datetime
from http import HTTPStatus
from typing import Any, Dict, Tuple

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from networth.core.net_income import net_income_breakdown
from networth.core.ping import get_ping_message
from networth.core.projection import ProjectionRun
from networth.core.summary import split_phases, summarize
from networth.domain.validation import ParameterValidationError, validate_parameters
from networth.schemas.ping import PingResponse
from networth.schemas.projection import NetSalaryRequest, ProjectionParameters

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.warning("rejected payload: %d validation errors", exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ParameterValidationError)
def _handle_parameter_error(exc: ParameterValidationError):
    current_app.logger.warning("rejected parameters: %s", exc)
    return jsonify({"error": exc.errors}), HTTPStatus.UNPROCESSABLE_ENTITY


def _strict_validation() -> bool:
    flag = request.args.get("validate")
    if flag is None:
        return bool(current_app.config.get("STRICT_VALIDATION", False))
    return flag.strip().lower() in {"1", "true", "yes", "on"}


def _run_projection() -> Tuple[ProjectionParameters, ProjectionRun, int]:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    params = ProjectionParameters.model_validate(raw_payload)
    if _strict_validation():
        validate_parameters(params)

    current_year = request.args.get("currentYear", type=int) or datetime.now().year
    run = current_app.extensions["networth.simulate"](params, current_year)
    return params, run, current_year


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message())
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Year-by-year net worth forecast for the submitted parameters."""
    _, run, _ = _run_projection()
    return jsonify([record.model_dump() for record in run.records])


@api_bp.post("/projection/summary")
def projection_summary() -> Any:
    """Goal assessment plus the records split into their two phases."""
    params, run, current_year = _run_projection()
    phases = split_phases(list(run.records), params, current_year)
    summary = summarize(params, run, current_year)
    return jsonify(
        {
            "summary": summary.model_dump(),
            "accumulation": [record.model_dump() for record in phases.accumulation],
            "retirement": [record.model_dump() for record in phases.retirement],
        }
    )


@api_bp.post("/net-salary")
def net_salary() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = NetSalaryRequest.model_validate(raw_payload)
    return jsonify(net_income_breakdown(payload.grossSalary).model_dump())
