"""
Logging for typescale

Library calls are silent until a run logger is started. The CLI starts one
per run; its file goes to a 'logs' directory beside the scale config (or the
output stylesheet when there is no config) as
typescale_<name>_<timestamp>.log, and older typescale logs there are pruned
down to KEEP_LOGS.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "typescale"
KEEP_LOGS = 5
FILE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def log_path_for(anchor: Path, when: Optional[datetime] = None) -> Path:
    """Log file for a run anchored at a config or stylesheet path"""
    stamp = (when or datetime.now()).strftime("%Y%m%d_%H%M%S_%f")[:17]
    return anchor.parent / "logs" / f"typescale_{anchor.stem}_{stamp}.log"


def prune_logs(logs_dir: Path, keep: int = KEEP_LOGS) -> int:
    """Delete all but the newest `keep` typescale logs, returning how many went"""
    logs = sorted(logs_dir.glob("typescale_*.log"), key=lambda p: p.stat().st_mtime, reverse=True)
    removed = 0
    for old_log in logs[keep:]:
        try:
            old_log.unlink()
        except FileNotFoundError:
            # Pruned by a concurrent run
            continue
        removed += 1
    return removed


class TypeScaleLogger:
    """Class-level access to the logger of the current run"""

    _logger: Optional[logging.Logger] = None
    _current_log_file: Optional[Path] = None

    @classmethod
    def setup_logger(cls, file_path: str, log_level: int = logging.INFO) -> logging.Logger:
        """Start logging a run to a file beside `file_path`

        Warnings and errors are echoed to the console as well.
        """
        cls.cleanup()

        anchor = Path(file_path)
        log_path = log_path_for(anchor)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(log_level)
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        cls._logger = logger
        cls._current_log_file = log_path
        logger.info(f"Scale run for {anchor.name}, logging to {log_path}")

        prune_logs(log_path.parent)
        return logger

    @classmethod
    def get_logger(cls) -> Optional[logging.Logger]:
        return cls._logger

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        return cls._current_log_file

    @classmethod
    def log(cls, level: int, message: str) -> None:
        if cls._logger:
            cls._logger.log(level, message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls.log(logging.DEBUG, message)

    @classmethod
    def info(cls, message: str) -> None:
        cls.log(logging.INFO, message)

    @classmethod
    def success(cls, message: str) -> None:
        cls.log(logging.INFO, f"✓ {message}")

    @classmethod
    def warning(cls, message: str) -> None:
        cls.log(logging.WARNING, message)

    @classmethod
    def error(cls, message: str) -> None:
        cls.log(logging.ERROR, message)

    @classmethod
    def cleanup(cls) -> None:
        """Close the run's handlers; later calls are silent again"""
        if cls._logger:
            for handler in cls._logger.handlers[:]:
                cls._logger.removeHandler(handler)
                handler.close()
        cls._logger = None
        cls._current_log_file = None
