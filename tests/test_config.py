"""Tests for transcript_viewer/config.py."""

import os
from unittest.mock import patch

import pytest


class TestConfigParsing:
    """Test the Config class helper methods and init logic."""

    def _make_config(self, env_overrides=None, clear=False):
        """Create a Config instance with mocked environment."""
        env = dict(env_overrides or {})

        with patch("dotenv.load_dotenv"):
            with patch.dict(os.environ, env, clear=clear):
                # Re-import to bypass module-level singleton
                from importlib import reload
                import transcript_viewer.config as cfg_mod
                reload(cfg_mod)
                return cfg_mod.Config()

    def test_default_values(self):
        c = self._make_config(clear=True)
        assert c.backend_url == "http://localhost:8000"
        assert c.request_timeout_seconds == 30
        assert c.fetch_workers == 2
        assert c.port == 8080
        assert c.debug is False
        assert c.log_level == "INFO"

    def test_backend_url_trailing_slash_stripped(self):
        c = self._make_config({"BACKEND_URL": "https://api.example.com/"})
        assert c.backend_url == "https://api.example.com"

    def test_next_public_backend_url_accepted(self):
        c = self._make_config({"NEXT_PUBLIC_BACKEND_URL": "http://legacy:9000"}, clear=True)
        assert c.backend_url == "http://legacy:9000"

    def test_backend_url_preferred_over_legacy_name(self):
        c = self._make_config({
            "BACKEND_URL": "http://new:8000",
            "NEXT_PUBLIC_BACKEND_URL": "http://legacy:9000",
        })
        assert c.backend_url == "http://new:8000"

    def test_parse_bool_variants(self):
        c = self._make_config()
        assert c._parse_bool("true") is True
        assert c._parse_bool("1") is True
        assert c._parse_bool("yes") is True
        assert c._parse_bool("on") is True
        assert c._parse_bool("false") is False
        assert c._parse_bool("0") is False
        assert c._parse_bool("no") is False

    def test_validate_defaults(self):
        c = self._make_config(clear=True)
        c.validate()

    def test_validate_backend_scheme(self):
        c = self._make_config({"BACKEND_URL": "ftp://backend"})
        with pytest.raises(ValueError, match="BACKEND_URL"):
            c.validate()

    def test_validate_timeout(self):
        c = self._make_config({"REQUEST_TIMEOUT_SECONDS": "0"})
        with pytest.raises(ValueError, match="REQUEST_TIMEOUT_SECONDS"):
            c.validate()

    def test_validate_workers(self):
        c = self._make_config({"FETCH_WORKERS": "0"})
        with pytest.raises(ValueError, match="FETCH_WORKERS"):
            c.validate()
