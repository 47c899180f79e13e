import logging
import sys

import structlog

LOGGER_NAME = "cesar_cipher"

# Library use stays silent until an application configures logging.
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class StderrHandler(logging.Handler):
    def emit(self, record):
        # Looked up on every record so a swapped sys.stderr (CliRunner) is honored.
        sys.stderr.write(self.format(record) + "\n")


def get_logger(name: str = LOGGER_NAME):
    """structlog logger backed by the stdlib logger `name`."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
    )


def configure_logging(verbose: bool = False) -> None:
    """Send the library events to stderr, hiding debug events unless verbose."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    for handler in list(logger.handlers):
        if isinstance(handler, StderrHandler):
            logger.removeHandler(handler)
    logger.addHandler(StderrHandler())
