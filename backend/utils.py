# this file contains helper functions that are general and are used in multiple places throughout the project code
import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a console handler.

    Does nothing if the root logger already has handlers, which happens when
    create_app runs more than once in a process (tests) or when the host
    server configured logging itself.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
