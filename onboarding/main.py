"""FastAPI application entrypoint. No business logic; only wiring, middleware and error translation."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from onboarding.api import router as api_router
from onboarding.core.config import settings
from onboarding.core.errors import OnboardingError, onboarding_error_handler

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Onboarding API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(OnboardingError, onboarding_error_handler)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed JSON or wrongly typed fields are plain 400s, like any other bad input."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request",
            "details": [
                {"loc": list(err.get("loc", [])), "msg": err.get("msg", "")}
                for err in exc.errors()
            ],
        },
    )


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Storage or programming failures: 500 without internals outside dev mode."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content: dict[str, str] = {"error": "Internal server error"}
    if settings.APP_ENV == "dev" and settings.DEBUG:
        content["detail"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Onboarding API"}
