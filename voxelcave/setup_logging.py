import logging
import sys
from pathlib import Path
from typing import Optional, Union


def setup_logging(level: int = logging.INFO, log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Configure the root logger for an application embedding voxelcave.
    - Message format with time, level, logger and line.
    - Logs go to stdout, and to *log_file* as well when one is given.
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,  # drop earlier handlers so lines are not duplicated
    )

    logging.getLogger("voxelcave").setLevel(level)
    # third-party chatter stays quiet
    logging.getLogger("skimage").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)
