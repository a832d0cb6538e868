import logging
import os

DEFAULT_LOCALE = os.getenv("YCAL_DEFAULT_LOCALE", "en-GB")
HOST = os.getenv("YCAL_HOST", "0.0.0.0")
PORT = int(os.getenv("YCAL_PORT", "3000"))

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s — %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
