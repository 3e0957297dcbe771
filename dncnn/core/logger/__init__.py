"""
Logging Package.

Available Components:

- Logger: Static utility for stream and file logging initialization.
- LogStyle: Unified logging style constants.
- Summary functions: Build header and per-layer network table.
"""

from .logger import Logger
from .styles import LogStyle
from .summary import log_build_header, log_network_summary

__all__ = [
    "Logger",
    "LogStyle",
    "log_build_header",
    "log_network_summary",
]
