from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .rank import TIE_BREAKS, parse_word_count


DEFAULT_CONFIG_NAME = "config.toml"


@dataclass(frozen=True)
class TagCloudConfig:
    raw: Dict[str, Any]

    @staticmethod
    def load(path: str | Path) -> "TagCloudConfig":
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Config not found: {p}")
        data = tomllib.loads(p.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("config.toml must parse to a table")
        return TagCloudConfig(raw=data)

    def get(self, *keys: str, default: Any = None) -> Any:
        cur: Any = self.raw
        for k in keys:
            if not isinstance(cur, dict) or k not in cur:
                return default
            cur = cur[k]
        return cur


def load_optional_config(path: str | Path | None) -> TagCloudConfig | None:
    """Load ``path``, or ./config.toml when no path is given and one exists."""
    if path is not None:
        return TagCloudConfig.load(path)
    p = Path(DEFAULT_CONFIG_NAME)
    if p.is_file():
        return TagCloudConfig.load(p)
    return None


@dataclass(frozen=True)
class TagCloudSettings:
    input_path: Path
    output_path: Path | None
    top_n: int | None
    tie_break: str = "alpha"
    encoding: str = "utf-8"
    input_name: str | None = None

    @staticmethod
    def resolve(
        cfg: TagCloudConfig | None,
        *,
        input_path: str | Path | None = None,
        output_path: str | Path | None = None,
        top_n: str | int | None = None,
        tie_break: str | None = None,
        encoding: str | None = None,
    ) -> "TagCloudSettings":
        """Merge explicit values over config values over defaults, then validate."""
        if cfg is not None:
            if input_path is None and isinstance(cfg.get("paths", "input"), str):
                input_path = cfg.get("paths", "input")
            if output_path is None and isinstance(cfg.get("paths", "output"), str):
                output_path = cfg.get("paths", "output")
            if top_n is None and isinstance(cfg.get("cloud", "top"), (int, str)):
                top_n = cfg.get("cloud", "top")
            if tie_break is None and isinstance(cfg.get("cloud", "tie_break"), str):
                tie_break = cfg.get("cloud", "tie_break")
            if encoding is None and isinstance(cfg.get("cloud", "encoding"), str):
                encoding = cfg.get("cloud", "encoding")

        if input_path is None or not str(input_path).strip():
            raise ValueError("input path is required")

        tb = str(tie_break or "alpha").strip().lower()
        if tb not in TIE_BREAKS:
            raise ValueError("tie_break must be one of: alpha|first-seen")

        return TagCloudSettings(
            input_path=Path(input_path),
            output_path=None if output_path is None else Path(output_path),
            top_n=None if top_n is None else parse_word_count(top_n),
            tie_break=tb,
            encoding=str(encoding or "utf-8"),
            input_name=str(input_path),
        )


def config_stylesheets(cfg: TagCloudConfig | None) -> list[str] | None:
    if cfg is None:
        return None
    sheets = cfg.get("render", "stylesheets")
    if not isinstance(sheets, list):
        return None
    return [str(s) for s in sheets]
