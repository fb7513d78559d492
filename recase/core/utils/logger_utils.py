import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def init_logger(level: str = "INFO", log_dir: str | Path | None = None):
    """Reset loguru sinks: stderr always, plus a rotating file when `log_dir` is given."""
    # unknown levels raise here, before the current sinks are dropped
    logger.level(level.upper())
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=_LOG_FORMAT)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / "recase_{time:YYYY-MM-DD}.log",
            level=level.upper(),
            format=_LOG_FORMAT,
            rotation="00:00",
            retention="7 days",
            encoding="utf-8",
        )
