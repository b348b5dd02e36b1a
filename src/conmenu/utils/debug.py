"""Debug logging utility."""

import sys
from datetime import datetime
from pathlib import Path

from conmenu.utils.config import Config, get_conmenu_dir

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_conmenu_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def _log_to_file(path: Path, line: str):
    """Append line to a log file."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a") as f:
            f.write(line + "\n")
    except Exception:
        pass


def _timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'dispatch', 'reader', 'config'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[conmenu:{category}] {_timestamp()} {message}"
    if extras:
        line += f" | {extras}"

    # Log to file (always) and stderr
    _log_to_file(config.debug_log_path, line)
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr, continue silently


def debug_dispatch(message: str, **kwargs):
    """Log dispatcher-related debug message."""
    debug("dispatch", message, **kwargs)


def debug_reader(message: str, **kwargs):
    """Log reader-related debug message."""
    debug("reader", message, **kwargs)


def debug_config(message: str, **kwargs):
    """Log config-related debug message."""
    debug("config", message, **kwargs)


def log_error(category: str, message: str, exc: Exception = None, echo: bool = True):
    """Log error message ALWAYS (even if debug mode is off).

    Operation faults are written with their traceback so the user can
    report them after the menu session has moved on.

    Args:
        category: Category like 'dispatch', 'cli'
        message: Error message
        exc: Optional exception to include traceback
        echo: Also print to stderr (off when the console already showed it)
    """
    import traceback

    config = _get_config()
    if not config.error_log:
        return

    line = f"[conmenu:{category}] {_timestamp()} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _log_to_file(config.error_log_path, line)

    if echo:
        try:
            print(line, file=sys.stderr)
        except BrokenPipeError:
            pass
