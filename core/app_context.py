import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from core.account_service import AccountService
from core.analysis_service import AnalysisService
from core.bootstrap import ensure_default_admin
from core.config_loader import AppConfig, LlmConfig, RemoteDataConfig
from core.exceptions import IOFailure
from core.llm.interfaces import ScoringOracle
from core.llm.openai_service import OpenAIScoringService
from core.models import User
from core.parsing.document_parser import DocumentParser
from core.ranking.board import CandidateBoard
from core.session import SessionRegistry
from database.adapter import PersistenceAdapter
from database.database import build_engine, build_session_factory, init_db
from database.local_store import LocalKeyValueStore
from database.remote import DataApiClient
from database.repository import AtsRepository

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Owns the per-client session registry (no module-level auth state). Built once at
    startup, initialized, and closed on shutdown.
    """
    config: AppConfig
    engine: Engine
    local_store: LocalKeyValueStore
    remote_client: DataApiClient
    store: AtsRepository
    board: CandidateBoard
    sessions: SessionRegistry
    oracle: ScoringOracle
    account_service: AccountService
    analysis_service: AnalysisService
    ready: bool = False
    init_error: Optional[str] = None

    @classmethod
    def build(cls, config: AppConfig, oracle: Optional[ScoringOracle] = None) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration
            oracle: Scoring oracle override; defaults to the OpenAI service

        Returns:
            Fully wired AppContext instance, not yet initialized
        """
        engine = build_engine(config.storage.url)
        local_store = LocalKeyValueStore(build_session_factory(engine))

        remote_client = cls._build_remote_client(config.remote)
        adapter = PersistenceAdapter(
            local_store,
            remote_client=remote_client,
            key_prefix=config.storage.key_prefix,
        )
        store = AtsRepository(adapter)
        board = CandidateBoard(store)
        sessions = SessionRegistry(store, local_store, session_key=config.storage.session_key)

        if oracle is None:
            oracle = cls._build_oracle(config.llm)

        analysis_service = AnalysisService(
            oracle,
            board,
            config=config.analysis,
            parser=DocumentParser(max_file_size_bytes=config.analysis.max_file_size_bytes),
        )

        return cls(
            config=config,
            engine=engine,
            local_store=local_store,
            remote_client=remote_client,
            store=store,
            board=board,
            sessions=sessions,
            oracle=oracle,
            account_service=AccountService(store, sessions),
            analysis_service=analysis_service,
        )

    @staticmethod
    def _build_remote_client(remote_config: RemoteDataConfig) -> DataApiClient:
        return DataApiClient(remote_config)

    @staticmethod
    def _build_oracle(llm_config: LlmConfig) -> OpenAIScoringService:
        """Build the OpenAI scoring oracle from LLM configuration."""
        return OpenAIScoringService(
            api_key=llm_config.api_key,
            base_url=llm_config.base_url,
            model=llm_config.model,
            temperature=llm_config.temperature,
            timeout_seconds=llm_config.timeout_seconds,
        )

    def initialize(self) -> List[User]:
        """Prepare storage, guarantee the default admin, load reports and sessions.

        Raises:
            IOFailure: If local storage cannot be read or written. The context
                stays not-ready and records the error.
        """
        try:
            self._create_tables()
            self.store.init()
            users = ensure_default_admin(self.store, self.config.admin)
            self.board.reload()
            self.sessions.rehydrate()
        except IOFailure as e:
            self.ready = False
            self.init_error = str(e)
            logger.error(f"Critical database error, cannot initialize: {e}")
            raise

        self.ready = True
        self.init_error = None
        logger.info(f"Initialized with {len(users)} users and {len(self.board.reports)} reports")
        return users

    def _create_tables(self) -> None:
        try:
            init_db(self.engine)
        except SQLAlchemyError as e:
            raise IOFailure(f"Cannot create local storage tables: {e}") from e

    def close(self) -> None:
        self.remote_client.close()
        self.engine.dispose()
