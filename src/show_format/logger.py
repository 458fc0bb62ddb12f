"""Logger object for the show format package."""

import logging

from typing import Optional

from colorlog import ColoredFormatter as BaseColoredFormatter, default_log_colors

__all__ = ("log", "install")


log = logging.getLogger(__name__.rpartition(".")[0])

_handler: Optional[logging.Handler] = None
"""The handler installed by `install()`, if any."""


default_log_symbols = {
    "DEBUG": " ",
    "INFO": " ",
    "WARNING": "▲",  # BLACK UP-POINTING TRIANGLE
    "ERROR": "●",  # BLACK CIRCLE
    "CRITICAL": "●",  # BLACK CIRCLE
}


class ColoredFormatter(BaseColoredFormatter):
    """Logging formatter that adds colors and symbols to the log output.

    Colors are added based on the log level and the optional ``semantics``
    attribute of the log record.
    """

    def __init__(self, fmt=None, datefmt=None, log_colors=None, log_symbols=None):
        """Constructor.

        Parameters:
            fmt (Optional[str]): the format string to use
            datefmt (Optional[str]): the format string to use for dates
            log_colors (dict): mapping from log level names to color names
            log_symbols (dict): mapping from log level names to symbols
        """
        if fmt is None:
            fmt = "%(log_color)s%(log_symbol)s %(message)s"

        super().__init__(
            fmt, datefmt, log_colors=log_colors or dict(default_log_colors)
        )

        self.log_symbols = (
            log_symbols if log_symbols is not None else default_log_symbols
        )

    def format(self, record):
        """Format a message from a log record object."""
        if not hasattr(record, "semantics"):
            record.semantics = None
        record.log_symbol = self.get_preferred_symbol(record)
        return super().format(record)

    def get_preferred_symbol(self, record):
        """Return the preferred symbol for the given log record."""
        symbol = self.log_symbols.get(record.semantics)
        if symbol is not None:
            return symbol
        else:
            return self.log_symbols.get(record.levelname, "")


def install(level: int = logging.INFO, style: str = "fancy") -> None:
    """Install a default formatter and stream handler to the root logger of
    Python.

    This method can be used during startup to ensure that we can see the log
    messages on the console nicely.

    Parameters:
        level: the log level of the root logger
        style: the style of the log output; ``fancy`` for colored output with
            symbols, ``plain`` for plain text
    """
    if style == "fancy":
        log_colors = dict(default_log_colors)
        log_colors.update(DEBUG="bold_black", INFO="reset")
        log_symbols = dict(default_log_symbols)
        log_symbols.update(
            success="✔",  # CHECK MARK
            failure="✘",  # BALLOT X
        )
        formatter: logging.Formatter = ColoredFormatter(
            log_colors=log_colors, log_symbols=log_symbols
        )
    elif style == "plain":
        formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
    else:
        raise ValueError(f"unknown log style: {style!r}")

    global _handler

    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(formatter)
    root_logger.addHandler(_handler)
    root_logger.setLevel(level)
