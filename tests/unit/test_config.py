from pathlib import Path

import pytest

pytest.importorskip("yaml")

from binstring import BinString
from binstring import config as config_module
from binstring.config import (
    BinStringConfig,
    ConfigError,
    LoggingConfig,
    dump_default_config,
    get_config,
    load_config,
    set_config,
)


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(config_module.CONFIG_ENV, raising=False)
    monkeypatch.setattr(config_module, "user_config_dir", lambda: tmp_path / "user")
    previous = set_config(None)
    yield
    set_config(previous)


def test_defaults_when_nothing_found() -> None:
    config = load_config()
    assert config.logging.level == "INFO"


def test_explicit_path(tmp_path: Path) -> None:
    target = tmp_path / "custom.yaml"
    target.write_text("logging:\n  level: debug\n", encoding="utf-8")
    config = load_config(target)
    assert config.logging.level == "DEBUG"


def test_env_and_project_locations(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    project = tmp_path / ".binstring" / "config.yaml"
    project.parent.mkdir()
    project.write_text("logging:\n  level: warning\n", encoding="utf-8")
    assert load_config().logging.level == "WARNING"

    env_file = tmp_path / "env.yaml"
    env_file.write_text("logging:\n  level: error\n", encoding="utf-8")
    monkeypatch.setenv(config_module.CONFIG_ENV, str(env_file))
    assert load_config().logging.level == "ERROR"


@pytest.mark.parametrize(
    "content",
    ["logging:\n  level: loud\n", "logging: [unclosed\n"],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    target = tmp_path / "bad.yaml"
    target.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(target)


def test_dump_default_config_roundtrip(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "config.yaml"
    dump_default_config(target)
    assert load_config(target) == BinStringConfig()


def test_set_config_returns_previous() -> None:
    custom = BinStringConfig(logging=LoggingConfig(level="debug"))
    previous = set_config(custom)
    assert previous == BinStringConfig()
    assert get_config().logging.level == "DEBUG"


@pytest.mark.parametrize("handler", ["surrogateescape", "replace", "backslashreplace", "strict"])
def test_config_file_cannot_change_text_view(tmp_path: Path, handler: str) -> None:
    target = tmp_path / "config.yaml"
    target.write_text(f"text:\n  errors: {handler}\nlogging:\n  level: debug\n", encoding="utf-8")
    set_config(load_config(target))

    value = BinString(b"a\xff")
    assert str(value) == "a\udcff"
    assert value.as_text() == "a\udcff"
    assert BinString.from_text(str(value)) == value
    assert BinString.from_text(value.as_text()) == value
