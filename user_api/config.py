from __future__ import annotations

# user_api/config.py
import os
from dataclasses import dataclass, field
import yaml

# Resolution order per key:
# 1) environment variable (HOST / PORT / LOG_LEVEL)
# 2) config.yaml at the project root, or the file named by APP_CONFIG
# 3) built-in defaults below
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_DEFAULT_CFG = os.path.join(_PROJECT_ROOT, "config.yaml")

APP_NAME = "user-api"
APP_VERSION = "1.0.0"


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


def _read_config_yaml(path: str | None = None) -> dict:
    cfg_path = path or os.environ.get("APP_CONFIG") or _DEFAULT_CFG
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(cfg, dict):
        return {}
    out = {}
    for k in ("host", "log_level"):
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    port = cfg.get("port")
    if isinstance(port, int) and not isinstance(port, bool):
        out["port"] = port
    origins = cfg.get("cors_origins")
    if isinstance(origins, list) and origins:
        out["cors_origins"] = [str(o) for o in origins]
    return out


def get_settings(config_path: str | None = None) -> Settings:
    s = Settings(**_read_config_yaml(config_path))
    if os.environ.get("HOST"):
        s.host = os.environ["HOST"]
    if os.environ.get("PORT"):
        s.port = int(os.environ["PORT"])
    if os.environ.get("LOG_LEVEL"):
        s.log_level = os.environ["LOG_LEVEL"]
    return s
