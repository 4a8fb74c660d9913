import yaml
import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field

PLACEHOLDER_API_KEY = "YOUR_GENERATED_API_KEY"
PLACEHOLDER_APP_ID = "YOUR_APP_ID"


class LocalStorageConfig(BaseModel):
    """Local key-value store backing the fallback path and the session."""
    url: str = "sqlite:///ats_local.db"
    key_prefix: str = "ats_db"
    session_key: str = "auth"


class RemoteDataConfig(BaseModel):
    """Document-store data API. Placeholder values keep the app in local mode."""
    endpoint: str = f"https://data.mongodb-api.com/app/{PLACEHOLDER_APP_ID}/endpoint/data/v1"
    api_key: str = PLACEHOLDER_API_KEY
    data_source: str = "Cluster0"
    database: str = "ATS_PRO_DB"
    request_timeout_seconds: float = 10.0

    @property
    def is_configured(self) -> bool:
        return (
            bool(self.api_key)
            and self.api_key != PLACEHOLDER_API_KEY
            and bool(self.endpoint)
            and PLACEHOLDER_APP_ID not in self.endpoint
        )


class LlmConfig(BaseModel):
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    model: str = "gpt-4o-mini"
    temperature: float = 0.0  # 0.0 = deterministic scoring
    timeout_seconds: float = 120.0


class DefaultAdminConfig(BaseModel):
    """Administrator record inserted when no user carries its email."""
    id: str = "admin-001"
    email: str = "admin@atspro.com"
    password: str = "admin123"
    name: str = "Principal Recruiter"


class AnalysisConfig(BaseModel):
    max_file_size_bytes: int = 5 * 1024 * 1024  # 5MB upload limit
    max_resume_chars: int = 20000
    default_job_title: str = "Resume Diagnostic"
    job_title_max_chars: int = 50


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class AppConfig(BaseModel):
    storage: LocalStorageConfig = Field(default_factory=LocalStorageConfig)
    remote: RemoteDataConfig = Field(default_factory=RemoteDataConfig)
    llm: LlmConfig = Field(default_factory=LlmConfig)
    admin: DefaultAdminConfig = Field(default_factory=DefaultAdminConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def _set_nested(data: Dict[str, Any], section: str, key: str, value: Any) -> None:
    if section not in data or data[section] is None:
        data[section] = {}
    data[section][key] = value


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to the raw config dict."""
    env_local_url = os.environ.get("LOCAL_DATABASE_URL")
    if env_local_url:
        _set_nested(data, 'storage', 'url', env_local_url)

    env_endpoint = os.environ.get("DATA_API_ENDPOINT")
    if env_endpoint:
        _set_nested(data, 'remote', 'endpoint', env_endpoint)

    env_data_key = os.environ.get("DATA_API_KEY")
    if env_data_key:
        _set_nested(data, 'remote', 'api_key', env_data_key)

    env_llm_base_url = os.environ.get("LLM_BASE_URL")
    if env_llm_base_url:
        _set_nested(data, 'llm', 'base_url', env_llm_base_url)

    # LLM_API_KEY wins over the SDK's own variable
    env_llm_key = os.environ.get("LLM_API_KEY") or os.environ.get("OPENAI_API_KEY")
    if env_llm_key:
        _set_nested(data, 'llm', 'api_key', env_llm_key)

    if 'WEB_HOST' in os.environ:
        _set_nested(data, 'web', 'host', os.environ['WEB_HOST'])

    if 'WEB_PORT' in os.environ:
        _set_nested(data, 'web', 'port', int(os.environ['WEB_PORT']))

    return data


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from another cwd), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    data = _apply_env_overrides(data)

    return AppConfig(**data)
