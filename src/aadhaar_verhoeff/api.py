"""
HTTP API exposing Aadhaar validation and check digit generation

Run with:
    aadhaar-verhoeff-api
or:
    uvicorn aadhaar_verhoeff.api:app --port 8080
"""

from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from . import aadhaar
from .settings import CHECK_DIGIT_PATH, HEALTH_PATH, TRACE_PATH, VALIDATE_PATH, get_settings
from .dto import (
    CheckDigitRequest,
    CheckDigitResponse,
    FoldStepModel,
    TraceResponse,
    ValidationRequest,
    ValidationResponse,
)

VALID_MESSAGE = "Aadhaar number is mathematically valid."
INVALID_MESSAGE = "Aadhaar number failed the Verhoeff checksum check."
EMPTY_MESSAGE = "Input cannot be empty."

app = FastAPI(
    title="Aadhaar Verhoeff Validation API",
    description="Validates 12-digit Aadhaar numbers and generates check digits using the Verhoeff algorithm.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(aadhaar.InvalidFormat)
async def invalid_format_handler(request: Request, exc: aadhaar.InvalidFormat):
    logger.info("Rejected {}: expected {} digits", request.url.path, exc.expected_length)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def _is_empty(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@app.post(VALIDATE_PATH, response_model=ValidationResponse, summary="Validate an Aadhaar number")
def validate(request: ValidationRequest):
    """
    Check a 12-digit Aadhaar number against the Verhoeff checksum.

    Malformed numbers (wrong length, letters) are reported as invalid,
    not as errors. Only an empty input is a bad request.
    """
    number = request.aadhaar_number
    if _is_empty(number):
        body = ValidationResponse(is_valid=False, message=EMPTY_MESSAGE)
        return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))

    is_valid = aadhaar.validate(number)
    try:
        checksum = aadhaar.checksum(number)
    except aadhaar.InvalidFormat:
        checksum = None

    logger.info("Validated {}: valid={}", aadhaar.mask(number), is_valid)
    return ValidationResponse(
        is_valid=is_valid,
        message=VALID_MESSAGE if is_valid else INVALID_MESSAGE,
        checksum=checksum,
    )


@app.post(CHECK_DIGIT_PATH, response_model=CheckDigitResponse, summary="Generate the 12th digit")
def check_digit(request: CheckDigitRequest):
    """Return the check digit for an 11-digit prefix, and the completed number."""
    if _is_empty(request.prefix):
        raise HTTPException(status_code=400, detail="Prefix cannot be empty.")

    number = aadhaar.complete(request.prefix)
    logger.debug("Generated check digit for {}", aadhaar.mask(number))
    return CheckDigitResponse(
        prefix=number[:aadhaar.PREFIX_LENGTH],
        check_digit=int(number[-1]),
        aadhaar_number=number,
    )


@app.post(TRACE_PATH, response_model=TraceResponse, summary="Step-by-step checksum")
def trace(request: ValidationRequest):
    """Return every step of the Verhoeff fold for a 12-digit number."""
    if _is_empty(request.aadhaar_number):
        raise HTTPException(status_code=400, detail=EMPTY_MESSAGE)

    steps = aadhaar.explain(request.aadhaar_number)
    checksum = steps[-1].after
    return TraceResponse(
        aadhaar_number=aadhaar.format_number(request.aadhaar_number),
        steps=[FoldStepModel.from_step(step) for step in steps],
        checksum=checksum,
        is_valid=checksum == 0,
    )


@app.get(HEALTH_PATH, summary="Health check")
def health_check():
    return {"status": "ok"}


def run() -> None:
    """Serve the API with uvicorn on the configured host and port"""
    import uvicorn

    from .logging import setup_logging

    setup_logging()
    config = get_settings()
    logger.info("Starting API on {}:{}", config.api_host, config.api_port)
    uvicorn.run(app, host=config.api_host, port=config.api_port)
