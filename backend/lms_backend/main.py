import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from .api import admin_router, api_router, register_error_handlers
from .config import Settings, get_settings
from .database import build_engine, init_db


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    owns_engine = engine is None
    engine = engine or build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine)
        yield
        if owns_engine:
            engine.dispose()

    app = FastAPI(title="LMS Admin Backend", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine

    register_error_handlers(app)

    @app.get("/healthz", include_in_schema=False)
    def healthz() -> dict:
        return {"status": "ok"}

    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(admin_router)
    return app
