"""
Spoken Numerals — FastAPI Server
================================

RESTful API for converting numbers to words.

Endpoints:
    POST /convert           Convert a number (cardinal, ordinal, year, currency...)
    GET  /languages         Supported language codes
    GET  /currencies        Supported currency codes
    GET  /health            Health and readiness check

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from spoken_numerals import __version__
from spoken_numerals.currency import describe_currencies
from spoken_numerals.languages import available_languages
from spoken_numerals.models import ConversionRequest, ErrorInfo
from spoken_numerals.pipeline import NumberSpeller


# ─── Application Lifespan (pre-build speller) ───────────────────────

_speller: NumberSpeller | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the speller (reads settings / .env) on startup."""
    global _speller  # noqa: PLW0603
    _speller = NumberSpeller()
    yield
    _speller = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Spoken Numerals API",
    description=(
        "Numbers to words in English, French (France, Belgium, Switzerland) "
        "and Ukrainian: cardinals, ordinals, years and currency amounts."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Response Schemas ───────────────────────────────────────────────


class ConvertResponse(BaseModel):
    """Words for a successful conversion."""

    text: str
    lang: str
    mode: str

    model_config = {"json_schema_extra": {"example": {
        "text": "forty-two dollars and one cent",
        "lang": "en",
        "mode": "currency",
    }}}


class LanguagesResponse(BaseModel):
    languages: list[str]


class CurrenciesResponse(BaseModel):
    currencies: dict[str, str] = Field(description="Code -> description")


class HealthResponse(BaseModel):
    status: str
    version: str
    languages_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_speller() -> NumberSpeller:
    if _speller is None:
        raise HTTPException(status_code=503, detail="Speller not initialised")
    return _speller


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert a number to words",
    tags=["Conversion"],
    responses={
        422: {"model": ErrorInfo, "description": "Number cannot be converted"},
        503: {"description": "Speller not yet initialised"},
    },
)
def convert(request: ConversionRequest) -> ConvertResponse:
    """Convert ``number`` in ``lang`` using ``mode``.

    - **mode**: `cardinal`, `ordinal`, `ordinal_num`, `year` or `currency`
    - **currency**: ISO 4217 code (currency mode only, defaults to `DOLLAR`)
    - **preferences**: language options such as `feminine`, `reformed`, `f`

    Conversion failures return 422 with `code`, `message` and `details`.
    """
    speller = _get_speller()
    result = speller.convert(request)
    if result.error is not None:
        return JSONResponse(status_code=422, content=result.error.model_dump(mode="json"))
    return ConvertResponse(text=result.text, lang=result.lang, mode=result.mode.value)


@app.get("/languages", summary="Supported languages", tags=["Reference"])
def list_languages() -> LanguagesResponse:
    return LanguagesResponse(languages=available_languages())


@app.get("/currencies", summary="Supported currencies", tags=["Reference"])
def list_currencies() -> CurrenciesResponse:
    return CurrenciesResponse(currencies=describe_currencies())


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Speller not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    _get_speller()
    return HealthResponse(
        status="healthy",
        version=__version__,
        languages_loaded=len(available_languages()),
    )
