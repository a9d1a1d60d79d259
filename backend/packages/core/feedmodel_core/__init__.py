"""
Feedmodel Core Package.

This package contains the ambient stack shared by the syndication
packages: logging, configuration, argument guards, value parsing,
date-time handling, comparison helpers and the XML navigation/writer layer.
"""

__version__ = "0.1.0"

from .logging_config import get_logger, init_logging

__all__ = ["init_logging", "get_logger", "__version__"]
