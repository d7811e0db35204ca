"""
Centralized logging for the FamilyTree-Text parser.

Every module asks ``get_logger("<short name>")`` for its logger. Loggers
live under the ``ftt_parser`` base logger, which owns:

* the master log file (``logs/ftt_parser.log`` by default),
* a console handler on stderr.

Each module logger additionally writes its own file
(``logs/ftt_parser_<module>.log``). Handler settings come from the
``logging`` section of ``config/ftt_parser.yml``; ``set_debug`` switches
every configured handler to DEBUG at runtime.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from ftt_parser.config import get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "ftt_parser"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_settings: Optional["LogSettings"] = None


def _configured_level(cfg) -> int:
    return getattr(logging, str(cfg.logging.get("level", "INFO")).upper(), logging.INFO)


@dataclass
class LogSettings:
    level: int
    log_dir: Path
    master_file: str
    rotate: bool
    max_bytes: int
    backup_count: int
    console: bool

    @classmethod
    def from_config(cls, cfg) -> "LogSettings":
        section = cfg.logging
        level = logging.DEBUG if cfg.debug else _configured_level(cfg)

        log_dir = Path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")
        if not log_dir.is_absolute():
            log_dir = PROJECT_ROOT / log_dir

        return cls(
            level=level,
            log_dir=log_dir,
            master_file=section.get("file", "ftt_parser.log"),
            rotate=bool(section.get("rotate", False)),
            max_bytes=int(section.get("max_bytes", 5 * 1024 * 1024)),
            backup_count=int(section.get("backup_count", 5)),
            console=bool(section.get("console", True)),
        )


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(settings: LogSettings, filename: str) -> logging.Handler:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    path = settings.log_dir / filename

    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=settings.max_bytes,
            backupCount=settings.backup_count,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(settings.level)
    handler.setFormatter(_formatter())
    return handler


def _base_logger() -> Logger:
    """Return the base logger, attaching master + console handlers on first use."""
    global _settings

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _settings is not None:
        return base

    _settings = LogSettings.from_config(get_config())
    base.setLevel(_settings.level)
    base.propagate = False
    base.addHandler(_file_handler(_settings, _settings.master_file))

    if _settings.console:
        console = StreamHandler()
        console.setLevel(_settings.level)
        console.setFormatter(_formatter())
        base.addHandler(console)

    _logger_cache[BASE_LOGGER_NAME] = base
    return base


def _qualified(name: str) -> str:
    if name == BASE_LOGGER_NAME or name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


def get_logger(name: str | None = None) -> Logger:
    """
    Return the project logger for ``name``.

    Short names ("parser_core", "postprocess.unions") are placed under the
    base logger and get a module log file the first time they are requested.
    """
    base = _base_logger()
    logger_name = _qualified(name or BASE_LOGGER_NAME)
    if logger_name == BASE_LOGGER_NAME:
        return base

    logger = logging.getLogger(logger_name)
    if logger_name not in _logger_cache:
        logger.setLevel(_settings.level)
        logger.propagate = True
        handler = _file_handler(_settings, f"{logger_name.replace('.', '_')}.log")
        handler.is_module_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        _logger_cache[logger_name] = logger

    return logger


def set_debug(enabled: bool) -> None:
    """Switch every configured logger and handler to DEBUG (or back)."""
    _base_logger()
    level = logging.DEBUG if enabled else _configured_level(get_config())
    _settings.level = level

    for logger in _logger_cache.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


def list_active_loggers() -> List[str]:
    """Names of the loggers handed out so far (useful in tests)."""
    return list(_logger_cache.keys())
