"""Tests for config.py: settings precedence, config.json, env helpers."""

from clawusecase_cli import config


class TestLoadSettings:
    def test_defaults(self, tmp_path):
        settings = config.load_settings(environ={}, config_path=str(tmp_path / "none.json"))
        assert settings.api_url == "clawusecase.com"
        assert settings.api_path == "/api/submissions"
        assert settings.convex_url == "benevolent-tortoise-657.convex.cloud"
        assert settings.prefs_path == ".clawusecase.json"

    def test_config_file_beats_default(self, tmp_path):
        cfg = tmp_path / "config.json"
        cfg.write_text('{"apiUrl": "staging.clawusecase.com", "apiPath": "/api/v2/submissions"}')
        settings = config.load_settings(environ={}, config_path=str(cfg))
        assert settings.api_url == "staging.clawusecase.com"
        assert settings.api_path == "/api/v2/submissions"

    def test_env_beats_config_file(self, tmp_path):
        cfg = tmp_path / "config.json"
        cfg.write_text('{"apiUrl": "from-file.example", "convexUrl": "file.convex.cloud"}')
        environ = {"CLAWUSECASE_API_URL": "localhost:4000", "CONVEX_URL": "env.convex.cloud"}
        settings = config.load_settings(environ=environ, config_path=str(cfg))
        assert settings.api_url == "localhost:4000"
        assert settings.convex_url == "env.convex.cloud"

    def test_blank_env_value_ignored(self, tmp_path):
        settings = config.load_settings(
            environ={"CLAWUSECASE_API_PATH": "  "}, config_path=str(tmp_path / "none.json")
        )
        assert settings.api_path == "/api/submissions"

    def test_non_string_file_value_ignored(self, tmp_path):
        cfg = tmp_path / "config.json"
        cfg.write_text('{"apiUrl": 123}')
        settings = config.load_settings(environ={}, config_path=str(cfg))
        assert settings.api_url == "clawusecase.com"

    def test_malformed_config_warns_and_uses_defaults(self, tmp_path):
        cfg = tmp_path / "config.json"
        cfg.write_text("{oops")
        warnings = []
        settings = config.load_settings(environ={}, config_path=str(cfg), warn=warnings.append)
        assert settings.api_url == "clawusecase.com"
        assert len(warnings) == 1
        assert "Invalid JSON in config file" in warnings[0]

    def test_prefs_path_override(self, tmp_path):
        settings = config.load_settings(
            environ={"CLAWUSECASE_PREFS_PATH": "/tmp/p.json"},
            config_path=str(tmp_path / "none.json"),
        )
        assert settings.prefs_path == "/tmp/p.json"

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("CLAWUSECASE_API_URL", "127.0.0.1:9999")
        assert config.load_settings().api_url == "127.0.0.1:9999"


class TestEnvBool:
    def test_truthy(self):
        for val in ("1", "true", "yes", "on", "True", "YES"):
            assert config._env_bool("K", environ={"K": val}) is True

    def test_falsy(self):
        for val in ("0", "false", "no", "off", "anything"):
            assert config._env_bool("K", environ={"K": val}) is False

    def test_missing_returns_default(self):
        assert config._env_bool("K", default=True, environ={}) is True


class TestConstants:
    def test_min_lengths(self):
        assert [(attr, n) for attr, _label, n in config.MIN_LENGTHS] == [
            ("title", 20),
            ("hook", 50),
            ("problem", 100),
            ("solution", 200),
        ]

    def test_default_platform(self):
        assert config.DEFAULT_AUTHOR_PLATFORM == "twitter"
