import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """
    Install a single stream handler on the root logger.
    Safe to call more than once; later calls only change the level.
    """
    root = logging.getLogger()
    if not any(getattr(h, "_ats_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._ats_handler = True
        root.addHandler(handler)
    root.setLevel(level.upper())
