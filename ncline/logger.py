# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for ncline."""
import logging

logger: logging.Logger = logging.getLogger("ncline")
