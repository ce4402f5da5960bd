from __future__ import annotations

import json
import logging
import os
import time
from collections.abc import Iterable
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

from appdirs import user_log_dir

from modelpath.constants.logging_constants import (
    LOG_DEFAULT_BACKUPS,                # 3
    LOG_DEFAULT_JSON,                   # False
    LOG_DEFAULT_LEVEL,                  # logging.INFO
    LOG_DEFAULT_MAX_BYTES,              # 10 MB
    LOG_DEFAULT_NAME,                   # "modelpath"
    LOG_DEFAULT_STDERR,                 # False
    LOG_ENV_PREFIX,                     # "MODELPATH_LOG_"
    LOG_LEVEL_MAP,                      # str->level
    env_log_json,
    env_log_level,
    env_log_stderr,
)

# Track configured roots to avoid handler duplication across repeated calls.
_CONFIGURED_ROOTS: set[str] = set()

# LogRecord attributes that are never copied into JSON payloads.
_RESERVED_ATTRS = frozenset({
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "msg", "name", "pathname", "process", "processName", "relativeCreated",
    "stack_info", "thread", "threadName", "taskName",
})


# ---------- helpers ----------

def _env_int(name: str, default: int) -> int:
    raw = os.getenv(f"{LOG_ENV_PREFIX}{name}")
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(f"{LOG_ENV_PREFIX}{name}")
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _to_level(level: int | str) -> int:
    if isinstance(level, str):
        return LOG_LEVEL_MAP.get(level.upper(), LOG_DEFAULT_LEVEL)
    return int(level)


def _resolve_log_file(default_name: str = "modelpath.log",
                      explicit_path: Optional[Path] = None) -> Optional[Path]:
    """
    Decide the log file path.

    Priority:
      1) explicit argument `explicit_path`
      2) env MODELPATH_LOG_FILE
      3) appdirs user_log_dir()

    The model store itself is never used for logs.
    """
    if explicit_path is not None:
        p = Path(explicit_path).expanduser()
    elif os.getenv(f"{LOG_ENV_PREFIX}FILE"):
        p = Path(os.environ[f"{LOG_ENV_PREFIX}FILE"]).expanduser()
    else:
        p = Path(user_log_dir("modelpath", "modelpath")) / default_name
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        # Unwritable log location: run without a file handler.
        return None
    return p


class _JsonFormatter(logging.Formatter):
    """
    One JSON object per line; extras are kept when JSON-serializable, else stringified.
    """

    def __init__(self, *, use_utc: bool = False) -> None:
        super().__init__()
        self._use_utc = use_utc

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # type: ignore[override]
        if self._use_utc:
            return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created))
        return super().formatTime(record, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for k, v in record.__dict__.items():
            if k in _RESERVED_ATTRS:
                continue
            try:
                json.dumps({k: v})
                payload[k] = v
            except (TypeError, ValueError):
                payload[k] = str(v)

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)

        return json.dumps(payload, ensure_ascii=False)


def _make_formatter(fmt: str, *, use_json: bool, use_utc: bool, datefmt: Optional[str]) -> logging.Formatter:
    if use_json:
        return _JsonFormatter(use_utc=use_utc)
    return logging.Formatter(fmt=fmt, datefmt=datefmt)


def _make_stream_handler(level: int, fmt: str, *,
                         use_json: bool, use_utc: bool, datefmt: Optional[str]) -> logging.Handler:
    h = logging.StreamHandler()
    h.setLevel(level)
    h.setFormatter(_make_formatter(fmt, use_json=use_json, use_utc=use_utc, datefmt=datefmt))
    return h


def _make_file_handler(path: Path, level: int, fmt: str, *,
                       use_json: bool, use_utc: bool, datefmt: Optional[str],
                       max_bytes: int, backups: int) -> logging.Handler:
    fh = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(_make_formatter(fmt, use_json=use_json, use_utc=use_utc, datefmt=datefmt))
    return fh


# ---------- public API ----------

def setup_logger(
    name: str = LOG_DEFAULT_NAME,
    level: int | str | None = None,
    *,
    with_console: bool | None = None,
    with_file: bool = True,
    file_path: Optional[Path] = None,
    fmt_console: str = "[%(levelname)s] %(message)s",
    fmt_file: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt_console: Optional[str] = None,
    datefmt_file: Optional[str] = "%Y-%m-%d %H:%M:%S",
    use_json: Optional[bool] = None,
    use_utc: Optional[bool] = None,
    max_bytes: Optional[int] = None,
    backups: Optional[int] = None,
    propagate: bool = False,
    force_reconfigure: bool = False,
    extra_filters: Optional[Iterable[logging.Filter]] = None,
) -> logging.Logger:
    """
    Configure and return the package root logger.

    Idempotent per `name`: subsequent calls only update the level unless
    `force_reconfigure=True`.

    Parameters
    ----------
    name : str
        Logger name (package root).
    level : int | str | None
        Logging level. If None, read from env (MODELPATH_LOG_LEVEL).
    with_console : bool | None
        If None, read from env (MODELPATH_LOG_STDERR). If True, add a STDERR handler.
    with_file : bool
        Whether to add a rotating file handler.
    file_path : Optional[Path]
        Force a specific file path. Otherwise resolved by _resolve_log_file.
    use_json : Optional[bool]
        If None, read from env (MODELPATH_LOG_JSON).
    use_utc : Optional[bool]
        If None, read from env (MODELPATH_LOG_UTC). Only affects JSON timestamps.
    max_bytes, backups : Optional[int]
        Rotation settings; env MODELPATH_LOG_MAX_BYTES / MODELPATH_LOG_BACKUPS when None.
    propagate : bool
        Whether the logger should propagate to parent loggers.
    force_reconfigure : bool
        Remove existing handlers and re-add with current parameters.
    extra_filters : Optional[Iterable[logging.Filter]]
        Additional filters to attach to the logger.

    Returns
    -------
    logging.Logger
    """
    lvl = env_log_level() if level is None else _to_level(level)

    if with_console is None:
        with_console = env_log_stderr(LOG_DEFAULT_STDERR)
    if use_json is None:
        use_json = env_log_json(LOG_DEFAULT_JSON)
    if use_utc is None:
        use_utc = _env_bool("UTC", False)
    if max_bytes is None:
        max_bytes = _env_int("MAX_BYTES", LOG_DEFAULT_MAX_BYTES)
    if backups is None:
        backups = _env_int("BACKUPS", LOG_DEFAULT_BACKUPS)

    logger = logging.getLogger(name)
    logger.propagate = propagate

    already_configured = name in _CONFIGURED_ROOTS

    if already_configured and not force_reconfigure:
        logger.setLevel(lvl)
        for h in logger.handlers:
            h.setLevel(lvl)
        return logger

    if already_configured:
        for h in list(logger.handlers):
            logger.removeHandler(h)
        _CONFIGURED_ROOTS.discard(name)

    logger.setLevel(lvl)

    if with_console:
        logger.addHandler(_make_stream_handler(
            lvl, fmt_console, use_json=bool(use_json), use_utc=bool(use_utc),
            datefmt=datefmt_console,
        ))

    if with_file:
        path = _resolve_log_file(explicit_path=file_path)
        if path is not None:
            logger.addHandler(_make_file_handler(
                path, level=logging.DEBUG,  # keep file verbose
                fmt=fmt_file, use_json=bool(use_json), use_utc=bool(use_utc),
                datefmt=datefmt_file, max_bytes=int(max_bytes), backups=int(backups),
            ))

    for flt in extra_filters or ():
        logger.addFilter(flt)

    _CONFIGURED_ROOTS.add(name)
    return logger


def get_logger(name: str = LOG_DEFAULT_NAME) -> logging.Logger:
    """
    Return a logger under the package root, configuring the root on first use.

    Module loggers (``modelpath.core.path_resolver``) propagate to the package
    root, which owns the handlers.
    """
    root = name.split(".", 1)[0]
    if root not in _CONFIGURED_ROOTS:
        setup_logger(name=root)
    return logging.getLogger(name)


class _ContextFilter(logging.Filter):
    """
    Static key-value context injector (e.g., store root, command name).
    """
    def __init__(self, **static_context: Any) -> None:
        super().__init__()
        self._ctx = static_context

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        for k, v in self._ctx.items():
            setattr(record, k, v)
        return True


def add_context(logger: logging.Logger, **context: Any) -> None:
    """
    Attach static context (e.g., command='blob') to a logger.
    """
    if not context:
        return
    logger.addFilter(_ContextFilter(**context))


def set_global_level(level: int | str, name: str = LOG_DEFAULT_NAME) -> None:
    """
    Change the level of the root logger and its handlers.
    """
    lvl = _to_level(level)
    logger = get_logger(name)
    logger.setLevel(lvl)
    for h in logger.handlers:
        h.setLevel(lvl)


def silence_external() -> None:
    """
    Lower verbosity of libraries the CLI pulls in.
    """
    for noisy in ("urllib3", "httpx", "markdown_it"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def reset_logging(name: str = LOG_DEFAULT_NAME) -> None:
    """
    Remove all handlers for the given logger name and mark it as unconfigured.
    Useful for test teardown or dynamic reconfiguration.
    """
    logger = logging.getLogger(name)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    for f in list(logger.filters):
        logger.removeFilter(f)
    _CONFIGURED_ROOTS.discard(name)
