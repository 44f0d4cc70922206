"""
Logging helpers.
"""

import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    global _configured
    if _configured:
        logging.getLogger().setLevel(level.upper())
        return
    logging.basicConfig(level=level.upper(), format=_FORMAT)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under the application."""
    if not name.startswith("theatre_intel"):
        name = f"theatre_intel.{name}"
    return logging.getLogger(name)
