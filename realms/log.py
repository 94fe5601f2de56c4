# log.py — Logging setup for the realms package

import logging

from realms import settings

SCORING_LOGGERS = (
    "realms.achievements",
    "realms.victory_points",
    "realms.win",
)


class VictoryPointDebugFilter(logging.Filter):
    """Drop DEBUG records from the scoring modules unless VP debugging is on."""

    def __init__(self, enabled: bool = False) -> None:
        super().__init__()
        self.enabled = enabled

    def filter(self, record: logging.LogRecord) -> bool:
        if self.enabled or record.levelno > logging.DEBUG:
            return True
        return not record.name.startswith(SCORING_LOGGERS)


def configure_logging() -> logging.Handler:
    """Attach a stderr handler to the package logger, honouring REALMS_LOG_LEVEL.

    The package itself never calls this; a host application embedding
    ``RealmsGame`` calls it once at startup. Calling it again replaces the
    handler installed by the previous call.
    """
    logger = logging.getLogger("realms")
    logger.setLevel(settings.LOG_LEVEL)
    for h in list(logger.handlers):
        if any(isinstance(f, VictoryPointDebugFilter) for f in h.filters):
            logger.removeHandler(h)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler.addFilter(VictoryPointDebugFilter(settings.DEBUG_VICTORY_POINTS))
    logger.addHandler(handler)
    return handler
