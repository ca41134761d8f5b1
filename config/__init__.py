# Path: config/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: config.
# Details: Exposes settings models and the logging bootstrap for application-wide configuration.

from .log_setup import configure_logging
from .settings import ApiSettings, AppSettings, SearchSettings

__all__ = ["AppSettings", "ApiSettings", "SearchSettings", "configure_logging"]
