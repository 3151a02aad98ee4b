
import logging
import sys

LOGGER_NAME = "deeplx_cli"

_formatter = logging.Formatter(
    fmt='%(asctime)s - %(levelname)s - %(name)s - %(message)s'
)


def setup_logging(debug=False):
    """
    Sends package logs to stderr so stdout only carries the translation.
    Safe to call more than once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Avoid stacking handlers when run() is invoked repeatedly (tests)
    for handler in logger.handlers:
        if getattr(handler, "_deeplx_cli", False):
            handler.setStream(sys.stderr)
            return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter)
    handler._deeplx_cli = True
    logger.addHandler(handler)
    logger.propagate = False
    return logger
