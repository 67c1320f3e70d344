"""Logging configuration for the tigress-http command-line front end."""

import logging

import colorlog

log = logging.getLogger("tigress-http")

# Wire-level connection logging from the transport, shown with --debug only
TRANSPORT_LOGGER = "urllib3"

LOG_FORMAT = "%(log_color)s%(asctime)s [%(levelname)s] %(name)s:%(reset)s %(message)s"
LOG_COLORS = {
    "DEBUG":    "cyan",
    "INFO":     "green",
    "WARNING":  "yellow",
    "ERROR":    "red",
    "CRITICAL": "bold_red",
}


def _colored_handler() -> logging.Handler:
    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        LOG_FORMAT, datefmt="%H:%M:%S", log_colors=LOG_COLORS,
    ))
    return handler


def _setup_logging(debug: bool = False) -> None:
    """
    Attach a colored stderr handler to the facade logger and, with *debug*,
    to the urllib3 logger as well so its connection records are printed.
    Calling it again replaces the handlers instead of stacking them.
    """
    loggers = [log]
    if debug:
        loggers.append(logging.getLogger(TRANSPORT_LOGGER))

    for logger in loggers:
        logger.setLevel(logging.DEBUG if debug else logging.INFO)
        logger.handlers.clear()
        logger.addHandler(_colored_handler())
