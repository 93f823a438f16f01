import io
import os

import pytest

from gitoci.actions import Hello, Tool, default_config_path, default_search_path
from gitoci.config import ConfigError


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    for name in ("GITOCI_CONFIG", "GITOCI_NAME", "GITOCI_EXAMPLE_OPTION"):
        monkeypatch.delenv(name, raising=False)
    home = tmp_path / "home"
    system = tmp_path / "system"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(system))
    return home, system


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_default_search_path_ascending_priority(isolated_env):
    home, system = isolated_env
    assert default_search_path() == [
        str(system / "gitoci" / "config.yaml"),
        str(home / "gitoci" / "config.yaml"),
    ]


def test_default_search_path_reverses_system_dirs(tmp_path, monkeypatch, isolated_env):
    home, _ = isolated_env
    first = tmp_path / "first"
    second = tmp_path / "second"
    monkeypatch.setenv("XDG_CONFIG_DIRS", os.pathsep.join([str(first), str(second)]))
    assert default_search_path() == [
        str(second / "gitoci" / "config.yaml"),
        str(first / "gitoci" / "config.yaml"),
        str(home / "gitoci" / "config.yaml"),
    ]


def test_default_config_path_uses_config_home(isolated_env):
    home, _ = isolated_env
    assert default_config_path() == str(home / "gitoci" / "config.yaml")


def test_default_config_path_honours_env(tmp_path, monkeypatch):
    chosen = str(tmp_path / "chosen.yaml")
    monkeypatch.setenv("GITOCI_CONFIG", chosen)
    assert default_config_path() == chosen


def test_tool_defaults():
    tool = Tool("1.0.0")
    assert tool.version == "1.0.0"
    assert tool.config_files == default_search_path()
    assert tool.config_overrides == []


def test_get_config_without_files_applies_defaults(tmp_path):
    tool = Tool("v", config_files=[str(tmp_path / "missing.yaml")])
    config = tool.get_config()
    assert config.name == "None"
    assert config.api_version == "gitoci.act3-ai.io/v1alpha1"
    assert config.kind == "Configuration"


def test_get_config_later_file_wins(tmp_path):
    low = _write(tmp_path / "low.yaml", "name: Alice\nexampleOption: true\n")
    high = _write(tmp_path / "high.yaml", "name: Bob\n")
    config = Tool("v", config_files=[low, high]).get_config()
    assert config.name == "Bob"
    assert config.example_option is True


def test_overrides_applied_in_order(tmp_path):
    tool = Tool("v", config_files=[])

    def first(config):
        config.name = "a"

    def second(config):
        config.name += "b"

    tool.add_config_override(first)
    tool.add_config_override(second)
    assert tool.get_config().name == "ab"
    assert tool.config_overrides == [first, second]


def test_override_error_propagates():
    tool = Tool("v", config_files=[])

    def broken(config):
        raise ConfigError("bad override")

    tool.add_config_override(broken)
    with pytest.raises(ConfigError, match="bad override"):
        tool.get_config()


def test_invalid_config_file_raises(tmp_path):
    path = _write(tmp_path / "bad.yaml", "name: [unclosed\n")
    with pytest.raises(ConfigError):
        Tool("v", config_files=[path]).get_config()


def test_hello_greets_configured_name(tmp_path):
    path = _write(tmp_path / "config.yaml", "name: Alice\n")
    out = io.StringIO()
    Hello(Tool("v", config_files=[path])).run(out)
    assert out.getvalue() == "Hello Alice\n"


def test_hello_greets_default_name():
    out = io.StringIO()
    Hello(Tool("v", config_files=[])).run(out)
    assert out.getvalue() == "Hello None\n"


class _BrokenWriter:
    def write(self, text):
        raise OSError("closed")


def test_hello_write_failure_raises():
    with pytest.raises(OSError, match="closed"):
        Hello(Tool("v", config_files=[])).run(_BrokenWriter())