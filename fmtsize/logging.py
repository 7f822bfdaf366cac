"""
Logging configuration for fmtsize.

The package logs through loguru but stays silent until the embedding
application opts in with setup_logging().
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger

from fmtsize.constants import LOG_DIR, LOG_FILE_NAME


# Library mode: no output unless the application asks for it
logger.disable('fmtsize')

_sink_id: Optional[int] = None


def setup_logging(log_dir: Path | None = None, level: str = 'DEBUG') -> int:
    """Enable fmtsize logging to a rotated file.

    Calling this again replaces the previously installed sink.

    Args:
        log_dir: Directory for log files. Defaults to ./logs
        level: Minimum level written to the file

    Returns:
        The loguru handler id of the file sink
    """
    global _sink_id

    if log_dir is None:
        log_dir = LOG_DIR

    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE_NAME

    if _sink_id is not None:
        logger.remove(_sink_id)

    _sink_id = logger.add(
        log_path,
        rotation='5 MB',
        retention='30 days',
        compression='gz',
        format='{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | {name}:{function}:{line} | {message}',
        level=level,
        filter='fmtsize',
    )
    logger.enable('fmtsize')
    logger.info(f"Logging to {log_path}")
    return _sink_id


def teardown_logging() -> None:
    """Remove the file sink and silence fmtsize again."""
    global _sink_id

    if _sink_id is not None:
        logger.remove(_sink_id)
        _sink_id = None
    logger.disable('fmtsize')
