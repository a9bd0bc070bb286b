from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from .config import Settings


def build_engine(settings: Settings) -> Engine:
    """Create the process-wide engine; the caller owns its lifecycle."""
    url = settings.database_url
    if url.startswith("sqlite:///"):
        # Ensure the parent directory exists for sqlite database.
        db_path = url.replace("sqlite:///", "")
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(
            url,
            echo=settings.db_echo,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
    )


def init_db(engine: Engine) -> None:
    """Create database tables."""
    from . import models  # noqa: F401  # Ensure models are imported

    SQLModel.metadata.create_all(engine)


def get_session(request: Request) -> Iterator[Session]:
    """FastAPI dependency that yields a session bound to the app's engine."""
    with Session(request.app.state.engine) as session:
        yield session


@contextmanager
def session_context(engine: Engine) -> Iterator[Session]:
    """Context manager for scripts running outside a request."""
    with Session(engine) as session:
        yield session
