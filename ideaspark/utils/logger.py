import logging
import sys

from ideaspark.utils.config import DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL

# Root logger stays at ERROR so third-party libraries (httpx, typer) stay quiet
logging.basicConfig(level=logging.ERROR, format=DEFAULT_LOG_FORMAT, stream=sys.stdout)

# Only the IdeaSpark logger reports below ERROR
ideaspark_logger = logging.getLogger('ideaspark')
ideaspark_logger.setLevel(DEFAULT_LOG_LEVEL)

ideaspark_handler = logging.StreamHandler(sys.stdout)
ideaspark_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))

# Remove any existing handlers to avoid duplicate logs
for handler in list(ideaspark_logger.handlers):
    ideaspark_logger.removeHandler(handler)

ideaspark_logger.addHandler(ideaspark_handler)
ideaspark_logger.propagate = False

logger = logging.getLogger(__name__)


def configure_logging(config):
    """Apply the level and format of a Config built at start-up."""
    ideaspark_logger.setLevel(config.log_level)
    ideaspark_handler.setFormatter(logging.Formatter(config.log_format))
