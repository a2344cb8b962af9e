"""FastAPI application exposing sunrise and sunset computations."""

from __future__ import annotations

import json
import logging
import time
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from models import ErrorResponse, HealthResponse, SunQueryParams, SunResponse
from sunriseset import SolarEventRangeError, Zenith, sun_times
from sunriseset.config import ConfigurationError, Settings, load_settings

logging.basicConfig(level=logging.INFO, format="%(message)s")
LOGGER = logging.getLogger("sunrise-api")

APP_DESCRIPTION = (
    "Sunrise and sunset times from the Almanac for Computers approximation"
)


def _load_settings() -> Settings:
    try:
        return load_settings()
    except ConfigurationError as exc:
        LOGGER.error(json.dumps({"event": "configuration_failed", "error": str(exc)}))
        raise


SETTINGS: Settings = _load_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    LOGGER.info(
        json.dumps({"event": "startup", "diagnostics": SETTINGS.diagnostics})
    )
    yield


app = FastAPI(
    title="Sunriseset API",
    description=APP_DESCRIPTION,
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SETTINGS.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _format_utc(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return dt.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(code=code, error=message)
    LOGGER.error(json.dumps({"event": "error", "code": code, "message": message}))
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = ", ".join(error["msg"] for error in exc.errors())
    return _error_response(422, "validation_error", messages)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    detail = exc.detail
    if isinstance(detail, dict):
        message = detail.get("error") or detail.get("message") or str(detail)
    elif isinstance(detail, list):
        message = ", ".join(str(item) for item in detail)
    else:
        message = str(detail)
    return _error_response(exc.status_code, f"http_{exc.status_code}", message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled exception", exc_info=exc)
    return _error_response(500, "internal_error", "Unhandled server error")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(
        ok=True,
        diagnostics=SETTINGS.diagnostics,
        zeniths={zenith.name.lower(): zenith.decimal_degrees for zenith in Zenith},
    )


@app.get(
    "/sun",
    response_model=SunResponse,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def sun_endpoint(params: SunQueryParams = Depends()) -> SunResponse:
    start_time = time.perf_counter()
    try:
        zenith = Zenith.from_twilight(params.twilight.value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    try:
        result = sun_times(
            params.date_utc,
            zenith,
            params.lat,
            params.lon,
            sink=SETTINGS.sink(),
        )
    except SolarEventRangeError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    duration_ms = (time.perf_counter() - start_time) * 1000.0

    response = SunResponse(
        status=result.status,
        date_utc=params.date_utc,
        latitude=params.lat,
        longitude=params.lon,
        twilight=params.twilight,
        zenith_deg=zenith.decimal_degrees,
        sunrise_utc=_format_utc(result.sunrise),
        sunset_utc=_format_utc(result.sunset),
    )

    LOGGER.info(
        json.dumps(
            {
                "event": "sun",
                "lat": params.lat,
                "lon": params.lon,
                "date": params.date_utc.isoformat(),
                "twilight": params.twilight.value,
                "status": response.status,
                "duration_ms": round(duration_ms, 3),
            }
        )
    )
    return response
