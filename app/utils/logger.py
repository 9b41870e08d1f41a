import logging

_configured = False


def configure_logging(level: str) -> None:
    """Attach a console handler to the root logger. Safe to call more than once."""
    global _configured
    if _configured:
        return
    _configured = True

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    root = logging.getLogger()
    root.setLevel(level.upper())
    root.addHandler(handler)
