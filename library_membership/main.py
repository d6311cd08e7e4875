# library_membership/main.py
#
# Run with: uvicorn library_membership.main:app --reload

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from library_membership.core.config import settings
from library_membership.core.logging_config import setup_logging
from library_membership.api.v1.api import api_router
from library_membership.db.init_db import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_application() -> FastAPI:
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- HEALTH ----------
    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_application()
