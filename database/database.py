import contextlib
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from database.models import Base


def build_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # Sessions are opened from FastAPI's threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create the local storage tables if they do not exist."""
    Base.metadata.create_all(engine)


@contextlib.contextmanager
def db_session_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """Provide a transactional scope around a series of operations."""
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
