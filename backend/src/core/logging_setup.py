"""Logging setup for the server process."""
import logging


LOG_FORMAT = "%(asctime)s %(levelname)s:%(name)s:%(message)s"

access_logger = logging.getLogger("access")


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    else:
        root.setLevel(level.upper())
