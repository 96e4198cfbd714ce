# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""FastAPI application factory for the ESG assessment REST API."""

from __future__ import annotations

from esg_assessment.api import check_dependency

check_dependency("fastapi", "pip install -e '.[api]'")

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from esg_assessment import __version__  # noqa: E402
from esg_assessment.api.routes import router  # noqa: E402


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns
    -------
    FastAPI
        A fully configured application instance with CORS middleware
        and all API routes included.
    """
    app = FastAPI(
        title="ESG Assessment API",
        description=(
            "REST API for VSME sustainability assessments. "
            "List questions, compute CO2 estimates, score responses "
            "and benchmark against Italian SME references."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    return app
