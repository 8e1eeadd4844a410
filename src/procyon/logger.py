import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logger(name: str = "procyon", level: int = logging.ERROR) -> logging.Logger:
    """
    Configures and returns a logger with a RichHandler on stderr.

    stdout is reserved for command output (the --json result).
    """
    logger = logging.getLogger(name)

    # main() calls this again for --verbose; only the level changes then
    if logger.handlers:
        logger.setLevel(level)
        return logger

    logger.setLevel(level)
    handler = RichHandler(
        console=Console(stderr=True), rich_tracebacks=True, markup=True
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    return logger


# ERROR by default, DEBUG with --verbose
logger = setup_logger(level=logging.ERROR)
