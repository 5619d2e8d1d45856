import logging

from pathlib import Path

LOG_FORMAT = '(%(asctime)s) [%(levelname)s] <%(filename)s> %(message)s'
DEFAULT_LOG_DIR = Path(__file__).parent.parent.parent / "logs"


def setup_logging(log_level: str = "INFO",
                  log_to_file: bool = False,
                  log_dir: Path | None = None) -> None:
    """
    Configure the root logger for the ocean simulation.
    - Console handler at the requested level.
    - Optional file handler writing <log_dir>/ocean.log (project root logs/ by default).
    Any previous handlers are replaced, so calling it twice does not duplicate output.
    """
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {log_level!r}")

    root = logging.getLogger()
    root.setLevel(level)
    if root.hasHandlers():
        root.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_to_file:
        target_dir = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
        target_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(target_dir / "ocean.log")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        logging.debug("Logging to %s", target_dir / "ocean.log")

    # Panda3D's own logger stays at INFO or above, DEBUG floods the console
    logging.getLogger('panda3d').setLevel(max(level, logging.INFO))
