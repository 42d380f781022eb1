import logging
import os
from typing import Optional

def setup_logging(level: Optional[str] = None) -> None:
    """
    Console logging for the dashboard server.
    - Uses APP_LOG_LEVEL env if level is None (default INFO).
    - Keeps urllib3 connection chatter at WARNING unless DEBUG is requested.
    """
    level_name = (level or os.getenv("APP_LOG_LEVEL") or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if level_value > logging.DEBUG:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
