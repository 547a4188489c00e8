from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

import tagcloud.cli as cli


def test_cli_words_prints_table(tmp_path: Path) -> None:
    runner = CliRunner()

    inp = tmp_path / "in.txt"
    inp.write_text("hello world\nhello\n", encoding="utf-8")

    res = runner.invoke(cli.app, ["words", "--in", str(inp), "--top", "2"])
    assert res.exit_code == 0, res.output
    assert "hello" in res.output
    assert "world" in res.output
    assert "f48" in res.output


def test_cli_words_json_defaults_to_all_words(tmp_path: Path) -> None:
    runner = CliRunner()

    inp = tmp_path / "in.txt"
    inp.write_text("a\na\nb\n", encoding="utf-8")

    res = runner.invoke(cli.app, ["words", "--in", str(inp), "--json"])
    assert res.exit_code == 0, res.output
    payload = json.loads(res.output)
    assert payload["output"] is None
    assert payload["distinct_words"] == 2
    assert payload["words"] == [
        {"word": "a", "count": 2, "font": "f48"},
        {"word": "b", "count": 1, "font": "f11"},
    ]


def test_cli_words_requires_input() -> None:
    runner = CliRunner()

    res = runner.invoke(cli.app, ["words"])
    assert res.exit_code != 0
