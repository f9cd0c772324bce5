import logging

from polygraphia.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Engine modules log through ``logging.getLogger(__name__)`` so they all
    propagate to the ``polygraphia`` logger configured here. Calling this
    more than once only updates the level.
    """
    logger = logging.getLogger("polygraphia")
    logger.setLevel(settings.log_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
