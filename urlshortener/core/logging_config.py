import logging
import sys

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# uvicorn loggers that should flow through our root handler instead of their own
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error")


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Send service and uvicorn logs to stdout in one format.

    Accepts level names in any case ("debug", "INFO"). Unknown names fall
    back to INFO with a warning. Safe to call more than once: the root
    handler is replaced, not duplicated.
    """
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    # request_logging_middleware in main.py writes the access log
    logging.getLogger("uvicorn.access").disabled = True

    logger = logging.getLogger("urlshortener")
    if resolved == logging.INFO and str(level).upper() != "INFO":
        logger.warning(f"Unknown LOG_LEVEL '{level}', using INFO")
    return logger
