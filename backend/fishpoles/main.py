import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from fishpoles.core.logging import configure_logging
from fishpoles.core.settings import Settings, get_settings
from fishpoles.db import Database

from fishpoles.api.holding_account import router as holding_account_router
from fishpoles.api.company import router as company_router
from fishpoles.api.profit_center import router as profit_center_router
from fishpoles.api.transaction import router as transaction_router
from fishpoles.api.dashboard import router as dashboard_router
from fishpoles.api.note import router as note_router
from fishpoles.api.overhead import router as overhead_router
from fishpoles.api.connection import router as connection_router
from fishpoles.api.kanban import router as kanban_router
from fishpoles.api.rock import router as rock_router
from fishpoles.api.team import router as team_router

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


async def _database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # sem retry: o cliente pode repetir a chamada inteira (leituras idempotentes)
    logger.exception("DB error %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "details": str(exc)},
    )


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)
    database = database or Database(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.AUTO_CREATE_SCHEMA:
            database.create_all()
        logger.info("startup env=%s db=%s", settings.ENV, database.engine.url.render_as_string(hide_password=True))
        yield
        database.dispose()
        logger.info("shutdown: engine disposed")

    app = FastAPI(title=settings.APP_NAME, version=VERSION, lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_exception_handler(SQLAlchemyError, _database_error)

    app.include_router(holding_account_router)
    app.include_router(company_router)
    app.include_router(profit_center_router)
    app.include_router(transaction_router)
    app.include_router(dashboard_router)
    app.include_router(note_router)
    app.include_router(overhead_router)
    app.include_router(connection_router)
    app.include_router(kanban_router)
    app.include_router(rock_router)
    app.include_router(team_router)

    @app.get("/")
    def health():
        return {
            "message": "Fishing Poles Dashboard API",
            "status": "healthy",
            "env": settings.ENV,
            "version": VERSION,
            "build_sha": settings.BUILD_SHA or None,
        }

    return app


app = create_app()
