"""Rich-handler logging preset."""
import logging
from rich.logging import RichHandler
from smart_building.core.exceptions import ConfigurationError
from .app_config import settings

def configure(level: str = None):
    level_name = (level or settings.LOG_LEVEL).upper()
    numeric = logging.getLevelName(level_name)
    if not isinstance(numeric, int):
        raise ConfigurationError(f"unknown LOG_LEVEL {level_name!r}")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s │ %(name)-24s │ %(levelname)-8s │ %(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
