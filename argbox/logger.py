# ArgBox CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for ArgBox."""
import logging

logger: logging.Logger = logging.getLogger("argbox")
