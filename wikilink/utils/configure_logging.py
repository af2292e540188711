import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: int = logging.INFO) -> None:
    """Configure the wikilink log file.

    Args:
        home: Home directory for the log file. If None, derived from environment.
        level: Level for the "wikilink" logger
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        env_home = os.environ.get("WIKILINK_HOME")
        home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".wikilink"

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "wikilink.log"

    root_logger = logging.getLogger("wikilink")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
