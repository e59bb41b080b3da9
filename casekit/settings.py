from __future__ import annotations

import logging
import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent


def _parse_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    raw = raw.strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if value <= 0:
        return default
    return value


def shared_templates_dir(root_dir: Path) -> Path:
    env_path = os.getenv("CASEKIT_SHARED_TEMPLATES")
    if env_path:
        return Path(env_path)
    return root_dir / "casekit" / "templates"


def modules_path() -> Path:
    env_path = os.getenv("CASEKIT_MODULES_PATH")
    if env_path:
        return Path(env_path)
    return ROOT_DIR / "modules"


def log_level() -> int:
    name = (os.getenv("CASEKIT_LOG_LEVEL") or "INFO").strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.INFO


def serve_host() -> str:
    return (os.getenv("CASEKIT_HOST") or "").strip() or "127.0.0.1"


def serve_port() -> int:
    return _parse_int(os.getenv("CASEKIT_PORT"), 8000)


def configure_logging(level: int | None = None) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=log_level() if level is None else level,
    )
