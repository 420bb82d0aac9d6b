"""Profiles API — decode a profile body, run it through the validator, respond."""

import json

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

import structlog

from rulecheck.models.requests import Profile
from rulecheck.models.responses import (
    FieldErrorResponse,
    MessageResponse,
    ValidationFailedResponse,
)
from rulecheck.validators import validation_engine

logger = structlog.get_logger()

router = APIRouter()

INVALID_BODY = "Invalid Body Input"


@router.post(
    "/profiles",
    status_code=201,
    response_model=MessageResponse,
    responses={400: {"model": ValidationFailedResponse}},
)
async def create_profile(request: Request):
    """Create a profile from a JSON body like {"name": "John Doe", "age": 30}.

    Missing fields decode to their zero value and are reported by the
    validator; anything that is not a JSON object of the right types is
    rejected before validation.
    """
    raw = await request.body()

    try:
        profile = Profile.model_validate(json.loads(raw), strict=True)
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.info("profile_body_rejected", error_type=type(e).__name__)
        return JSONResponse(
            status_code=400,
            content=MessageResponse(message=INVALID_BODY).model_dump(),
        )

    report = validation_engine.validate(profile)
    if not report.passed:
        logger.info("profile_invalid", errors=report.by_field())
        body = ValidationFailedResponse(
            message=INVALID_BODY,
            errors=[FieldErrorResponse(field=v.field, reason=v.reason) for v in report.violations],
        )
        return JSONResponse(status_code=400, content=body.model_dump())

    logger.info("profile_created", name=profile.name)
    return JSONResponse(
        status_code=201,
        content=MessageResponse(message="Profile created successfully").model_dump(),
    )
