"""
Pytest configuration and fixtures.

Every fixture builds on a SQLite file under tmp_path, so tests never share
storage. For report/analysis builders, see tests/__init__.py
"""

import pytest

from core.app_context import AppContext
from core.config_loader import AppConfig, LocalStorageConfig
from core.llm.interfaces import ScoringOracle
from database.adapter import PersistenceAdapter
from database.database import build_engine, build_session_factory, init_db
from database.local_store import LocalKeyValueStore
from database.repository import AtsRepository
from tests import make_analysis


class FakeOracle(ScoringOracle):
    """Scoring oracle returning a canned answer, or raising a canned error."""

    def __init__(self, analysis=None, error=None):
        self.analysis = analysis if analysis is not None else make_analysis()
        self.error = error
        self.calls = []

    def analyze_resume(self, resume_text, job_description):
        self.calls.append((resume_text, job_description))
        if self.error is not None:
            raise self.error
        return self.analysis


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'ats_test.db'}"


@pytest.fixture
def engine(db_url):
    engine = build_engine(db_url)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def local_store(engine):
    return LocalKeyValueStore(build_session_factory(engine))


@pytest.fixture
def adapter(local_store):
    """Adapter in local mode (no remote client)."""
    return PersistenceAdapter(local_store, clock=lambda: 1700000000.0)


@pytest.fixture
def store(adapter):
    return AtsRepository(adapter)


@pytest.fixture
def app_config(db_url):
    return AppConfig(storage=LocalStorageConfig(url=db_url))


@pytest.fixture
def fake_oracle():
    return FakeOracle()


@pytest.fixture
def context(app_config, fake_oracle):
    """Initialized AppContext in local mode with a fake oracle."""
    ctx = AppContext.build(app_config, oracle=fake_oracle)
    ctx.initialize()
    yield ctx
    ctx.close()
