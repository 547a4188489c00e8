from __future__ import annotations

from pathlib import Path

import pytest

from tagcloud.config import TagCloudConfig, TagCloudSettings, config_stylesheets, load_optional_config
from tagcloud.errors import PreconditionError


def test_load_optional_config_none_when_missing(tmp_path: Path, monkeypatch) -> None:
    # simulate a project dir with no config.toml
    monkeypatch.chdir(tmp_path)
    assert load_optional_config(None) is None


def test_load_optional_config_loads_when_present(tmp_path: Path) -> None:
    p = tmp_path / "config.toml"
    p.write_text("[x]\ny=1\n", encoding="utf-8")

    cfg = load_optional_config(p)
    assert isinstance(cfg, TagCloudConfig)
    assert cfg.get("x", "y") == 1
    assert cfg.get("x", "missing", default="d") == "d"


def test_load_optional_config_picks_up_cwd_file(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "config.toml").write_text("[cloud]\ntop = 4\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    cfg = load_optional_config(None)
    assert cfg is not None
    assert cfg.get("cloud", "top") == 4


def test_explicit_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_optional_config(tmp_path / "nope.toml")


def test_settings_flags_override_config() -> None:
    cfg = TagCloudConfig(
        raw={
            "paths": {"input": "in.txt", "output": "out.html"},
            "cloud": {"top": 5, "tie_break": "first-seen", "encoding": "latin-1"},
        }
    )
    s = TagCloudSettings.resolve(cfg, top_n="2", output_path="other.html")
    assert s.input_path == Path("in.txt")
    assert s.output_path == Path("other.html")
    assert s.top_n == 2
    assert s.tie_break == "first-seen"
    assert s.encoding == "latin-1"


def test_settings_defaults_without_config() -> None:
    s = TagCloudSettings.resolve(None, input_path="a.txt")
    assert s.output_path is None
    assert s.top_n is None
    assert s.tie_break == "alpha"
    assert s.encoding == "utf-8"


def test_settings_validation() -> None:
    with pytest.raises(ValueError, match="input path"):
        TagCloudSettings.resolve(None)
    with pytest.raises(PreconditionError):
        TagCloudSettings.resolve(None, input_path="a.txt", top_n="-3")
    with pytest.raises(ValueError, match="tie_break"):
        TagCloudSettings.resolve(None, input_path="a.txt", tie_break="coin-flip")


def test_config_stylesheets() -> None:
    assert config_stylesheets(None) is None
    assert config_stylesheets(TagCloudConfig(raw={})) is None
    cfg = TagCloudConfig(raw={"render": {"stylesheets": ["a.css", "b.css"]}})
    assert config_stylesheets(cfg) == ["a.css", "b.css"]
