# regrad/logger.py
import logging

from .config import RegradConfig

_FORMAT = '[%(asctime)s][%(levelname)s][%(name)s] %(message)s'


def get_logger(name: str = "regrad") -> logging.Logger:
    """Return a logger in the ``regrad`` hierarchy, configuring the root ``regrad`` logger once."""
    root = logging.getLogger("regrad")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        root.setLevel(RegradConfig.log_level())
    if name == "regrad" or name.startswith("regrad."):
        return logging.getLogger(name)
    return root.getChild(name)
