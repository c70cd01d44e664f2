"""
Runtime settings for the score server.

Values come from an optional YAML file (path in SCOREBOARD_CONFIG_PATH) and are
overridden by SCOREBOARD_* environment variables:

    scores_file: data/scores.json
    port: 3000
    logging:
      level: DEBUG
      json: true
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

CONFIG_PATH_ENV = "SCOREBOARD_CONFIG_PATH"


def _parse_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "t", "yes", "y", "on")


def _parse_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class LoggingSettings(BaseModel):
    level: str = "INFO"
    json_format: bool = Field(default=False, alias="json")
    destination: str = "stderr"
    filename: Optional[str] = None
    format: str = "%(asctime)s %(levelname)s %(name)s - %(message)s"

    model_config = {"populate_by_name": True}


class Settings(BaseModel):
    scores_file: Path = Path("scores.json")
    atomic_writes: bool = True
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False
    static_dir: Optional[Path] = None
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _load_yaml(path: str) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def _env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    logging_overrides: Dict[str, Any] = {}

    if "SCOREBOARD_SCORES_FILE" in env:
        overrides["scores_file"] = env["SCOREBOARD_SCORES_FILE"]
    if "SCOREBOARD_ATOMIC_WRITES" in env:
        overrides["atomic_writes"] = _parse_bool(env["SCOREBOARD_ATOMIC_WRITES"], True)
    if "SCOREBOARD_HOST" in env:
        overrides["host"] = env["SCOREBOARD_HOST"]
    if "SCOREBOARD_PORT" in env:
        overrides["port"] = int(env["SCOREBOARD_PORT"])
    if "SCOREBOARD_RELOAD" in env:
        overrides["reload"] = _parse_bool(env["SCOREBOARD_RELOAD"])
    if env.get("SCOREBOARD_STATIC_DIR"):
        overrides["static_dir"] = env["SCOREBOARD_STATIC_DIR"]
    if "SCOREBOARD_CORS_ORIGINS" in env:
        overrides["cors_origins"] = _parse_list(env["SCOREBOARD_CORS_ORIGINS"])

    if "SCOREBOARD_LOG_LEVEL" in env:
        logging_overrides["level"] = env["SCOREBOARD_LOG_LEVEL"]
    if "SCOREBOARD_LOG_JSON" in env:
        logging_overrides["json"] = _parse_bool(env["SCOREBOARD_LOG_JSON"])
    if "SCOREBOARD_LOG_DESTINATION" in env:
        logging_overrides["destination"] = env["SCOREBOARD_LOG_DESTINATION"]
    if "SCOREBOARD_LOG_FILE" in env:
        logging_overrides["filename"] = env["SCOREBOARD_LOG_FILE"]

    if logging_overrides:
        overrides["logging"] = logging_overrides
    return overrides


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the optional YAML file plus environment overrides."""
    env = os.environ if env is None else env

    data: Dict[str, Any] = {}
    config_path = env.get(CONFIG_PATH_ENV)
    if config_path:
        data = _load_yaml(config_path)

    overrides = _env_overrides(env)
    logging_data = {**(data.get("logging") or {}), **overrides.pop("logging", {})}
    data.update(overrides)
    if logging_data:
        data["logging"] = logging_data

    return Settings.model_validate(data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # .env in the working directory, if present; real env vars win
    load_dotenv(find_dotenv(usecwd=True))
    return load_settings()
