from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Iterable

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def env_flag(name: str, default: str = "off") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value in TRUE_VALUES


def env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
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


def env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if value <= 0:
        return default
    return value


def env_choice(name: str, choices: Iterable[str], default: str) -> str:
    allowed = sorted(choices)
    value = os.getenv(name, default).strip().lower() or default
    if value not in allowed:
        raise ValueError(f"{name} must be one of {allowed}, got '{value}'.")
    return value


def shared_templates_dir(root_dir: Path) -> Path:
    env_path = os.getenv("SPARKY_SHARED_TEMPLATES")
    if env_path:
        return Path(env_path)
    return root_dir / "universe" / "templates"


def configure_templates(templates: Any) -> None:
    if env_flag("SPARKY_TEMPLATE_RELOAD", "on"):
        templates.env.auto_reload = True
        templates.env.cache = {}


def configure_logging(level: str | None = None) -> None:
    name = (level or os.getenv("SPARKY_LOG_LEVEL", "INFO")).strip().upper()
    logging.basicConfig(format="%(message)s", level=getattr(logging, name, logging.INFO))
