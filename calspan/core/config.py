from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIR = "logs"
DEFAULT_CHUNK_DAYS = 30

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    json_logs: bool = False
    log_dir: str = DEFAULT_LOG_DIR
    default_chunk_days: int = DEFAULT_CHUNK_DAYS


def _read_env_file() -> dict[str, str]:
    """Load minimal .env to support CALSPAN_* keys if not in the environment.

    Existing os.environ values are never overwritten.
    """
    env_path = Path.cwd() / ".env"
    env: dict[str, str] = {}
    if not env_path.exists():
        return env
    try:
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip().strip('"').strip("'")
            env[k] = v
    except (OSError, UnicodeDecodeError):
        return {}
    return env


def _load_yaml() -> dict[str, Any]:
    cfg_path = Path("configs/calspan.yaml")
    if not cfg_path.exists():
        return {}
    try:
        with cfg_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _get_env(
    name: str,
    env_file: dict[str, str] | None = None,
    file_cfg: dict[str, Any] | None = None,
    key: str | None = None,
) -> str | None:
    # Priority: process env -> .env -> configs/calspan.yaml
    val = os.getenv(name)
    if val:
        return val
    if env_file and name in env_file:
        return env_file[name]
    if file_cfg and key and file_cfg.get(key) is not None:
        return str(file_cfg[key])
    return None


def _as_bool(raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _as_positive_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_settings() -> Settings:
    env_file = _read_env_file()
    file_cfg = _load_yaml()
    level = _get_env("CALSPAN_LOG_LEVEL", env_file, file_cfg, "log_level")
    json_logs = _get_env("CALSPAN_JSON_LOGS", env_file, file_cfg, "json_logs")
    log_dir = _get_env("CALSPAN_LOG_DIR", env_file, file_cfg, "log_dir")
    chunk = _get_env("CALSPAN_CHUNK_DAYS", env_file, file_cfg, "default_chunk_days")
    return Settings(
        log_level=(level or DEFAULT_LOG_LEVEL).upper(),
        json_logs=_as_bool(json_logs, False),
        log_dir=log_dir or DEFAULT_LOG_DIR,
        default_chunk_days=_as_positive_int(chunk, DEFAULT_CHUNK_DAYS),
    )
