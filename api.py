"""
Chinese Numerals — FastAPI Server
=================================

HTTP access to the numeral converter.

Endpoints:
    POST /convert           Convert one number given in the JSON body
    GET  /convert/{number}  Convert one number from the path (422 if invalid)
    POST /convert/batch     Convert a list of numbers
    GET  /health            Health check / readiness probe

Run:
    pip install -e ".[server]"
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from chinese_num import __version__
from chinese_num.config import configure_logging, get_max_digits
from chinese_num.converter import NumeralConverter
from chinese_num.exceptions import InvalidNumberError
from chinese_num.models import ConversionReport, ConversionResult

# ─── Load .env, then settings ────────────────────────────────────────
load_dotenv()
configure_logging()

MAX_DIGITS = get_max_digits()


# ─── Application Lifespan ───────────────────────────────────────────

_converter: NumeralConverter | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the shared converter on startup."""
    global _converter  # noqa: PLW0603
    _converter = NumeralConverter()
    yield
    _converter = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Chinese Numerals API",
    description="Spell non-negative decimal integers as Chinese numerals (个十百千万亿).",
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    number: str = Field(
        ...,
        max_length=MAX_DIGITS,
        description="Decimal digits without sign, spaces or leading zeros.",
        json_schema_extra={"example": "123000520"},
    )


class BatchConvertRequest(BaseModel):
    """Request body for the /convert/batch endpoint."""

    numbers: list[str] = Field(..., min_length=1, max_length=1000)


class NumeralResponse(BaseModel):
    number: str
    numeral: str

    model_config = {"json_schema_extra": {"example": {
        "number": "123000520",
        "numeral": "一亿二千三百万零五百二十",
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str
    max_digits: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converter() -> NumeralConverter:
    if _converter is None:
        raise HTTPException(status_code=503, detail="Converter not initialised")
    return _converter


def _check_length(number: str) -> None:
    if len(number) > MAX_DIGITS:
        raise HTTPException(
            status_code=422,
            detail=f"Number too long (max {MAX_DIGITS} digits)",
        )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert a number given in the request body",
    tags=["Conversion"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def convert_number(request: ConvertRequest) -> ConversionResult:
    """Convert one number.

    Inputs that are not numbers are not an error here: the response has
    `status: NOT_A_NUMBER` and `numeral: null`.
    """
    return _get_converter().convert_result(request.number)


@app.get(
    "/convert/{number}",
    summary="Convert a number given in the path",
    tags=["Conversion"],
    responses={
        422: {"description": "Not a number, or too long"},
        503: {"description": "Converter not yet initialised"},
    },
)
def convert_path_number(number: str) -> NumeralResponse:
    """Convert one number, failing with 422 when it is not a number."""
    converter = _get_converter()
    _check_length(number)
    try:
        numeral = converter.convert_strict(number)
    except InvalidNumberError as e:
        raise HTTPException(
            status_code=422,
            detail={"code": e.code, "message": str(e), "details": e.details},
        ) from e
    return NumeralResponse(number=number, numeral=numeral)


@app.post(
    "/convert/batch",
    summary="Convert a list of numbers",
    tags=["Conversion"],
    responses={
        422: {"description": "Empty list, too many items, or an item is too long"},
        503: {"description": "Converter not yet initialised"},
    },
)
def convert_batch(request: BatchConvertRequest) -> ConversionReport:
    """Convert every number in order and report how many were valid."""
    converter = _get_converter()
    for number in request.numbers:
        _check_length(number)
    return converter.run(request.numbers)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    _get_converter()
    return HealthResponse(status="healthy", version=__version__, max_digits=MAX_DIGITS)
