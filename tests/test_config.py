"""Tests for awscron_engine.config -- .env parsing and precedence."""

from awscron_engine import config, paths


def test_parse_dotenv_strips_comments_and_quotes(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# awscron settings\n"
        "AWSCRON_YEAR=2026  # next year\n"
        'AWSCRON_QUIET="yes"\n'
        "not a setting\n"
        "\n",
        encoding="utf-8",
    )
    parsed = config.parse_dotenv(env_file)
    assert parsed == {"AWSCRON_YEAR": "2026", "AWSCRON_QUIET": "yes"}


def test_parse_dotenv_missing_file(tmp_path):
    assert config.parse_dotenv(tmp_path / "absent.env") == {}


def test_load_config_defaults(tmp_path, monkeypatch):
    for key in config.DEFAULTS:
        monkeypatch.delenv(key, raising=False)
    cfg = config.load_config(tmp_path / "absent.env")
    assert cfg["AWSCRON_YEAR"] == "*"
    assert not config.is_truthy(cfg["AWSCRON_QUIET"])


def test_env_overrides_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("AWSCRON_YEAR=2026\nAWSCRON_QUIET=true\n", encoding="utf-8")
    monkeypatch.setenv("AWSCRON_YEAR", "2030")
    monkeypatch.delenv("AWSCRON_QUIET", raising=False)
    cfg = config.load_config(env_file)
    assert cfg["AWSCRON_YEAR"] == "2030"
    assert cfg["AWSCRON_QUIET"] == "true"


def test_home_override(tmp_path, monkeypatch):
    monkeypatch.setenv("AWSCRON_HOME", str(tmp_path))
    assert paths.config_file() == tmp_path / ".env"


def test_debug_trace_goes_to_stderr(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("AWSCRON_DEBUG", "1")
    config.load_config(tmp_path / "absent.env")
    assert "[CONFIG]" in capsys.readouterr().err
