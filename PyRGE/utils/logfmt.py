"""Colored logging for the ``rge`` command line tool.

Diagnostics go to stderr so that the reports on stdout stay clean. Level names
are colored with ANSI escape codes when stderr is a terminal.
"""
import logging
from typing import Dict, Optional

LOGGING_FORMAT: str = "[%(asctime)s | %(levelname)s] %(name)10s : %(message)s"


def set_rootlogger(colorize: bool, log_level: int) -> logging.Logger:
    """Attach a colored stderr handler to the root logger.

    Args:
        colorize: Whether to emit ANSI color codes
        log_level: Logging level (e.g., logging.INFO)

    Returns:
        The root logger
    """
    rl = logging.getLogger('')

    h = logging.StreamHandler()
    h.setFormatter(ColorfulFormatter(fmt=LOGGING_FORMAT, colorize=colorize))

    rl.addHandler(h)
    rl.setLevel(log_level)

    return rl


class ColorfulFormatter(logging.Formatter):
    """Formatter coloring the level name by severity.

    INFO is cyan, WARNING yellow, ERROR red and CRITICAL magenta; messages of
    ERROR and above are also printed bold. Level names are right-aligned to
    a fixed width whether or not colors are used.
    """
    DEFAULT_COLOR: int = 39
    LOGLEVEL2COLOR: Dict[int, int] = {
        logging.INFO: 36,
        logging.WARNING: 33,
        logging.ERROR: 31,
        logging.CRITICAL: 35
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, colorize: bool = True) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.colorize = colorize

        levelname = "%(levelname)8s"
        message = "%(message)s"
        if colorize:
            levelname = "\033[{col}m" + levelname + "\033[0m"
            message = "\033[{msg}m" + message + "\033[0m"
        self._template = self._fmt.replace("%(levelname)s", levelname).replace("%(message)s", message)

    def formatMessage(self, record: logging.LogRecord) -> str:
        template = self._template
        if self.colorize:
            template = template.format(
                col=self.LOGLEVEL2COLOR.get(record.levelno, self.DEFAULT_COLOR),
                msg=1 if record.levelno >= logging.ERROR else 0
            )
        return template % record.__dict__
