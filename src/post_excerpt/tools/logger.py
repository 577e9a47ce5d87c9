import sys
from pathlib import Path

from loguru import logger

from post_excerpt.config import project_root_path, settings

LOG_LEVEL = settings.LOG_LEVEL
LOG_PATH = Path(settings.LOG_PATH)


def setup_logging(level: str = LOG_LEVEL, log_path: Path = LOG_PATH, root: Path = project_root_path) -> None:
    logger.remove()  # drop default
    log_dir = root / log_path  # absolute log_path wins
    log_dir.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_dir / "post_excerpt_{time:YYYYMMDD}.log",
        rotation="10 MB",
        retention=3,
        level=level,
        enqueue=True,
    )
    logger.add(sys.stdout, level=level, enqueue=True)


__all__ = ["logger", "setup_logging"]
