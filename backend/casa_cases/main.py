"""
main.py — FastAPI application entry point.

WHAT THIS FILE DOES:
  1. Configures logging from settings.LOG_LEVEL.
  2. Creates the FastAPI app instance.
  3. Configures CORS so the frontend can call the API.
  4. Maps CaseDataError (broken rows from the database) to a JSON problem body.
  5. Registers the cases router and a health-check endpoint.

HOW TO RUN:
  cd backend
  source .venv/bin/activate
  uvicorn casa_cases.main:app --reload       # dev mode, reloads on file changes
  uvicorn casa_cases.main:app --port 8000    # production-style (no reload)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from casa_cases.api.routes import cases
from casa_cases.core.config import settings
from casa_cases.core.errors import CaseDataError
from casa_cases.core.logging_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

# ------------------------------------------------------------------ #
# App instance
# ------------------------------------------------------------------ #
app = FastAPI(
    title="CASA Case Activity API",
    description=(
        "Read-only case views for CASA child-advocacy cases: status, "
        "weekly contact activity and contact history."
    ),
    version="0.1.0",
)

# ------------------------------------------------------------------ #
# CORS middleware
# ------------------------------------------------------------------ #
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# ------------------------------------------------------------------ #
# Error handling
# ------------------------------------------------------------------ #
@app.exception_handler(CaseDataError)
async def case_data_error_handler(request: Request, exc: CaseDataError):
    """
    Malformed case data is a server-side fault: report it as a 500 with a
    problem body instead of a bare traceback.
    """
    logger.error("Case data error on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={
            "type": "case-data-error",
            "title": "Malformed case data",
            "detail": str(exc),
            "status": 500,
        },
    )


# ------------------------------------------------------------------ #
# Routers
# ------------------------------------------------------------------ #
app.include_router(cases.router)


# ------------------------------------------------------------------ #
# Health check
# ------------------------------------------------------------------ #
@app.get("/health", tags=["meta"])
async def health():
    return {"status": "ok"}
