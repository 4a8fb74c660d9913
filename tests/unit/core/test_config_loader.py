import unittest
import os
import yaml
from unittest.mock import patch, mock_open
from core.config_loader import load_config, AppConfig, RemoteDataConfig


class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "storage": {"url": "sqlite:///custom.db", "key_prefix": "ats_db"},
            "remote": {
                "endpoint": "https://data.example.com/app/abc123/endpoint/data/v1",
                "api_key": "real-key",
                "database": "ATS_PRO_DB"
            },
            "llm": {"model": "gpt-4o"},
            "web": {"port": 9000}
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def _load(self, env=None):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, env or {}, clear=True):
                    return load_config("dummy_path.yaml")

    def test_load_config_default(self):
        config = self._load()
        self.assertIsInstance(config, AppConfig)
        self.assertEqual(config.storage.url, "sqlite:///custom.db")
        self.assertEqual(config.llm.model, "gpt-4o")
        self.assertEqual(config.web.port, 9000)
        self.assertTrue(config.remote.is_configured)

    def test_env_var_override_local_database(self):
        config = self._load({"LOCAL_DATABASE_URL": "sqlite:///env.db"})
        self.assertEqual(config.storage.url, "sqlite:///env.db")

    def test_env_var_override_remote(self):
        config = self._load({
            "DATA_API_ENDPOINT": "https://env.example.com/app/x/endpoint/data/v1",
            "DATA_API_KEY": "env-key"
        })
        self.assertEqual(config.remote.endpoint, "https://env.example.com/app/x/endpoint/data/v1")
        self.assertEqual(config.remote.api_key, "env-key")

    def test_env_var_override_llm_key_prefers_llm_api_key(self):
        config = self._load({"LLM_API_KEY": "llm-key", "OPENAI_API_KEY": "openai-key"})
        self.assertEqual(config.llm.api_key, "llm-key")

    def test_env_var_override_web_port(self):
        config = self._load({"WEB_PORT": "8181"})
        self.assertEqual(config.web.port, 8181)

    def test_missing_file_uses_defaults(self):
        with patch("os.path.exists", return_value=False):
            with patch.dict(os.environ, {}, clear=True):
                config = load_config("missing.yaml")
        self.assertEqual(config.storage.key_prefix, "ats_db")
        self.assertEqual(config.storage.session_key, "auth")
        self.assertEqual(config.admin.email, "admin@atspro.com")
        self.assertEqual(config.analysis.max_file_size_bytes, 5 * 1024 * 1024)
        self.assertFalse(config.remote.is_configured)


class TestRemoteDataConfig(unittest.TestCase):

    def test_placeholders_are_not_configured(self):
        self.assertFalse(RemoteDataConfig().is_configured)

    def test_placeholder_app_id_is_not_configured(self):
        config = RemoteDataConfig(api_key="real-key")
        self.assertFalse(config.is_configured)

    def test_real_values_are_configured(self):
        config = RemoteDataConfig(
            endpoint="https://data.example.com/app/abc/endpoint/data/v1",
            api_key="real-key"
        )
        self.assertTrue(config.is_configured)


if __name__ == '__main__':
    unittest.main()
