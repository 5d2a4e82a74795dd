import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(qcat_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified qcat logging.

    Args:
        qcat_home: Path to qcat home directory. If None, derived from environment.
        level: Logging level name for the ``qcat`` logger hierarchy.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if qcat_home is None:
        from qcat.api.config.get_home_dir import get_home_dir

        qcat_home = get_home_dir()

    qcat_home.mkdir(parents=True, exist_ok=True)
    log_file = qcat_home / "qcat.log"

    root_logger = logging.getLogger("qcat")
    root_logger.setLevel(logging.getLevelName(level))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name inside the ``qcat`` hierarchy."""
    return logging.getLogger(f"qcat.{name}")
